"""Domain data models: pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class EnvelopeType(Enum):
    URL_VERIFICATION = "url_verification"
    EVENT_CALLBACK = "event_callback"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Optional[str]) -> "EnvelopeType":
        for member in cls:
            if member.value == value and member is not cls.OTHER:
                return member
        return cls.OTHER


class EventType(Enum):
    """Event subtypes the bot reacts to. Anything else is UNKNOWN."""

    TEAM_JOIN = "team_join"
    REACTION_ADDED = "reaction_added"
    PIN_ADDED = "pin_added"
    MESSAGE = "message"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Optional[str]) -> "EventType":
        for member in cls:
            if member.value == value and member is not cls.UNKNOWN:
                return member
        return cls.UNKNOWN


@dataclass
class EventPayload:
    """One Slack event, built from the `event` object of an envelope."""

    event_type: EventType
    user_id: str = ""
    text: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventPayload":
        # team_join carries a full user object, other events a bare user id
        user = data.get("user")
        if isinstance(user, dict):
            user_id = user.get("id") or ""
        else:
            user_id = user or ""
        text = data.get("text")
        return cls(
            event_type=EventType.parse(data.get("type")),
            user_id=str(user_id),
            text=text if isinstance(text, str) else None,
            raw=data,
        )


@dataclass
class InboundEnvelope:
    token: str
    envelope_type: EnvelopeType
    team_id: str = ""
    challenge: Optional[str] = None
    event: Optional[EventPayload] = None


@dataclass
class StreamStatus:
    """Live state of a Twitch channel, derived from one kraken response."""

    is_live: bool
    display_name: Optional[str] = None
    game: Optional[str] = None
    viewer_count: Any = None
    url: Optional[str] = None

    @classmethod
    def from_stream(cls, stream: Optional[Dict[str, Any]]) -> "StreamStatus":
        if not stream:
            return cls(is_live=False)
        if not isinstance(stream, dict):
            # Truthy but shapeless: live, nothing to show
            return cls(is_live=True)
        channel = stream.get("channel")
        if not isinstance(channel, dict):
            channel = {}
        return cls(
            is_live=True,
            display_name=channel.get("display_name"),
            game=stream.get("game"),
            viewer_count=stream.get("viewers"),
            url=channel.get("url"),
        )


@dataclass
class TeamRegistration:
    team_id: str
    bot_user_id: str
    client: Any = None


DEFAULT_REPLY = "I don'k know :)"


@dataclass
class SendRequest:
    """Outbound message. No channel means a DM to the user."""

    team_id: str
    user_id: str
    channel: Optional[str] = None
    text: str = DEFAULT_REPLY

    @property
    def target_channel(self) -> str:
        return self.channel or self.user_id
