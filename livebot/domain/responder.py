"""Canned responses for Slack events."""

import sys
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, Optional

from livebot.domain.models import SendRequest, StreamStatus
from livebot.ports.outbound import PostResult, StreamStatusPort, TeamRegistryPort


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] {msg}", file=sys.stderr)


GENERAL_CHANNEL = "#general"
TWITCH_CHANNEL = "twoeasy"
LIVE_TRIGGER = "Does Twoeasy is live ?"
WELCOME_MESSAGE = "WELCOME !"
OFFLINE_MESSAGE = "Unfortunately no, the stream is offline :'("


def _blank(value: Any) -> str:
    # Missing fields render empty, 0 viewers still renders "0"
    return "" if value is None else str(value)


def compose_live_message(status: StreamStatus) -> str:
    if not status.is_live:
        return OFFLINE_MESSAGE
    return (
        f"YES ! {_blank(status.display_name)} is live streaming "
        f"{_blank(status.game)} with {_blank(status.viewer_count)} viewers "
        f"!!! GOGOGO : {_blank(status.url)}"
    )


class Responder:
    """Turns routed events into at most one outbound Slack message."""

    def __init__(self, registry: TeamRegistryPort, twitch: StreamStatusPort):
        self.registry = registry
        self.twitch = twitch
        self._triggers: Dict[str, Callable[[str, str], Awaitable[None]]] = {
            LIVE_TRIGGER: self._answer_live,
        }

    async def user_join(self, team_id: str, user_id: str) -> None:
        await self.send_response(
            SendRequest(team_id, user_id, channel=GENERAL_CHANNEL, text=WELCOME_MESSAGE)
        )

    async def reaction_added(self, team_id: str, event_data: Dict[str, Any]) -> None:
        """Extension point. No canned reply for reactions yet."""

    async def pin_added(self, team_id: str, event_data: Dict[str, Any]) -> None:
        """Extension point. No canned reply for pins yet."""

    async def message(self, team_id: str, user_id: str, text: Optional[str]) -> None:
        team = self.registry.lookup(team_id)
        if team is None:
            _log(f"Message for unregistered team {team_id!r}, dropped")
            return
        if user_id == team.bot_user_id:
            return

        handler = self._triggers.get(text) if text is not None else None
        if handler is None:
            return
        await handler(team_id, user_id)

    async def _answer_live(self, team_id: str, user_id: str) -> None:
        status = await self.twitch.get_stream_status(TWITCH_CHANNEL)
        await self.send_response(
            SendRequest(
                team_id,
                user_id,
                channel=GENERAL_CHANNEL,
                text=compose_live_message(status),
            )
        )

    async def send_response(self, request: SendRequest) -> Optional[PostResult]:
        """Post request.text as the bot. Failures are logged, never raised."""
        team = self.registry.lookup(request.team_id)
        if team is None or team.client is None:
            _log(f"No Slack client for team {request.team_id!r}, reply dropped")
            return None

        result = await team.client.post_message(
            request.target_channel, request.text, as_bot=True
        )
        if not result.success:
            _log(
                f"chat.postMessage to {request.target_channel} failed "
                f"for team {request.team_id}: {result.error}"
            )
        return result
