"""Outbound ports: interfaces for external system adapters."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from livebot.domain.models import StreamStatus, TeamRegistration


@dataclass
class PostResult:
    """Result of a chat.postMessage call."""

    success: bool
    ts: Optional[str] = None
    channel: Optional[str] = None
    text: Optional[str] = None
    error: Optional[str] = None


@runtime_checkable
class ChatPort(Protocol):
    """Interface for posting messages into a chat workspace."""

    @property
    def is_configured(self) -> bool: ...

    async def post_message(
        self, channel: str, text: str, as_bot: bool = True
    ) -> PostResult: ...


@runtime_checkable
class StreamStatusPort(Protocol):
    """Interface for stream-status lookups."""

    @property
    def is_configured(self) -> bool: ...

    async def get_stream(self, channel: str) -> Optional[Dict[str, Any]]: ...

    async def get_stream_status(self, channel: str) -> StreamStatus: ...


@runtime_checkable
class TeamRegistryPort(Protocol):
    """Read-only lookup of per-team credentials."""

    def lookup(self, team_id: str) -> Optional[TeamRegistration]: ...
