"""Livebot: Slack bot answering whether Twoeasy is live on Twitch."""

from livebot.config import CONFIG, AppConfig, __version__
from livebot.domain import (
    EventRouter,
    Responder,
    SendRequest,
    StreamStatus,
    TeamRegistration,
    compose_live_message,
)
from livebot.adapters.registry import InMemoryTeamRegistry
from livebot.adapters.slack.client import SlackClient
from livebot.adapters.twitch.client import TwitchClient
from livebot.ports.outbound import PostResult

__all__ = [
    "CONFIG",
    "AppConfig",
    "__version__",
    "EventRouter",
    "Responder",
    "SendRequest",
    "StreamStatus",
    "TeamRegistration",
    "compose_live_message",
    "InMemoryTeamRegistry",
    "SlackClient",
    "TwitchClient",
    "PostResult",
]
