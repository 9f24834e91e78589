"""Domain errors."""

from typing import Any, Dict, Optional


class LivebotError(Exception):
    """Base class for every error raised by livebot."""


class AuthError(LivebotError):
    """Verification token on an inbound envelope did not match."""

    def __init__(self, received_token: Optional[str], echo: bool = False):
        self.received_token = received_token
        shown = received_token if echo else redact_token(received_token)
        super().__init__(f"Invalid Slack verification token received: {shown}")


class ParseError(LivebotError):
    """Inbound body is not a usable Slack envelope."""


class UnrecognizedEventError(LivebotError):
    """Event subtype with no handler. Logged, never raised to the endpoint."""

    def __init__(self, event_type: Optional[str], raw: Dict[str, Any]):
        self.event_type = event_type
        self.raw = raw
        super().__init__(f"Unexpected event type: {event_type!r}")


class ExternalAPIError(LivebotError):
    """A call to Twitch or Slack failed or timed out."""

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service}: {message}")


def redact_token(token: Optional[str]) -> str:
    if not token:
        return "<empty>"
    token = str(token)
    if len(token) <= 4:
        return "****"
    return "****" + token[-4:]
