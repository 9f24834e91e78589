"""Domain layer: pure Python, no framework dependencies."""

from livebot.domain.models import (
    DEFAULT_REPLY,
    EnvelopeType,
    EventPayload,
    EventType,
    InboundEnvelope,
    SendRequest,
    StreamStatus,
    TeamRegistration,
)
from livebot.domain.errors import (
    AuthError,
    ExternalAPIError,
    LivebotError,
    ParseError,
    UnrecognizedEventError,
)
from livebot.domain.responder import Responder, compose_live_message
from livebot.domain.router import EventRouter

__all__ = [
    "DEFAULT_REPLY",
    "EnvelopeType",
    "EventPayload",
    "EventType",
    "InboundEnvelope",
    "SendRequest",
    "StreamStatus",
    "TeamRegistration",
    "AuthError",
    "ExternalAPIError",
    "LivebotError",
    "ParseError",
    "UnrecognizedEventError",
    "Responder",
    "compose_live_message",
    "EventRouter",
]
