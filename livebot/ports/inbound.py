"""Inbound port: what the webhook endpoint hands events to."""

from typing import Protocol, runtime_checkable

from livebot.domain.models import EventPayload


@runtime_checkable
class EventDispatcherPort(Protocol):
    """Interface for routing one Slack event. Never raises to the caller."""

    async def dispatch(self, team_id: str, event: EventPayload) -> None: ...
