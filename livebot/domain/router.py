"""Event router: picks a Responder handler by event type."""

import json
import sys
from datetime import datetime

from livebot.domain.errors import ExternalAPIError, UnrecognizedEventError
from livebot.domain.models import EventPayload, EventType
from livebot.domain.responder import Responder


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] {msg}", file=sys.stderr)


class EventRouter:
    """Implements EventDispatcherPort. Fire-and-forget from the endpoint's view."""

    def __init__(self, responder: Responder):
        self.responder = responder

    async def dispatch(self, team_id: str, event: EventPayload) -> None:
        try:
            await self._route(team_id, event)
        except ExternalAPIError as e:
            _log(f"External API failure while handling {event.event_type.value}: {e}")
        except Exception as e:
            _log(f"Handler for {event.event_type.value} failed: {type(e).__name__}: {e}")

    async def _route(self, team_id: str, event: EventPayload) -> None:
        kind = event.event_type
        if kind is EventType.TEAM_JOIN:
            await self.responder.user_join(team_id, event.user_id)
        elif kind is EventType.REACTION_ADDED:
            await self.responder.reaction_added(team_id, event.raw)
        elif kind is EventType.PIN_ADDED:
            await self.responder.pin_added(team_id, event.raw)
        elif kind is EventType.MESSAGE:
            await self.responder.message(team_id, event.user_id, event.text)
        else:
            err = UnrecognizedEventError(event.raw.get("type"), event.raw)
            _log(f"{err}\nUnexpected event:\n{json.dumps(event.raw, indent=2, default=str)}")
