"""Slack Events API webhook routes."""

import hmac
import json
import sys
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, ValidationError

from livebot.adapters.registry import InMemoryTeamRegistry
from livebot.adapters.twitch.client import TwitchClient
from livebot.config import CONFIG, AppConfig
from livebot.domain.errors import AuthError, ParseError
from livebot.domain.models import EnvelopeType, EventPayload, InboundEnvelope
from livebot.domain.responder import Responder
from livebot.domain.router import EventRouter


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] {msg}", file=sys.stderr)


events_router = APIRouter(tags=["Slack"])

registry = InMemoryTeamRegistry.from_config(AppConfig.from_env())
twitch_client = TwitchClient()
dispatcher = EventRouter(Responder(registry, twitch_client))


class SlackEnvelope(BaseModel):
    token: Optional[str] = None
    type: Optional[str] = None
    team_id: Optional[str] = None
    challenge: Optional[str] = None
    event: Optional[Dict[str, Any]] = None


def decode_body(body: bytes) -> Dict[str, Any]:
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ParseError(f"Malformed JSON body: {e}") from e
    if not isinstance(data, dict):
        raise ParseError("Envelope must be a JSON object")
    return data


def verify_token(received: Any) -> None:
    expected = CONFIG["slack_verification_token"]
    # An unset secret rejects everything
    if not expected or not isinstance(received, str) or not hmac.compare_digest(
        expected.encode(), received.encode()
    ):
        raise AuthError(
            received if received is None else str(received),
            echo=CONFIG["slack_echo_invalid_token"],
        )


def parse_envelope(data: Dict[str, Any]) -> InboundEnvelope:
    try:
        envelope = SlackEnvelope.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Invalid envelope: {e.errors()}") from e

    kind = EnvelopeType.parse(envelope.type)
    event = None
    if kind is EnvelopeType.EVENT_CALLBACK:
        if envelope.event is None:
            raise ParseError("event_callback envelope without an event")
        event = EventPayload.from_dict(envelope.event)

    return InboundEnvelope(
        token=envelope.token or "",
        envelope_type=kind,
        team_id=envelope.team_id or "",
        challenge=envelope.challenge,
        event=event,
    )


@events_router.post("/events")
async def slack_events(request: Request):
    data = decode_body(await request.body())
    verify_token(data.get("token"))
    envelope = parse_envelope(data)

    if envelope.envelope_type is EnvelopeType.URL_VERIFICATION:
        return PlainTextResponse(envelope.challenge or "")

    if envelope.envelope_type is EnvelopeType.EVENT_CALLBACK:
        await dispatcher.dispatch(envelope.team_id, envelope.event)
        return Response(status_code=200)

    _log(f"Ignoring envelope type {data.get('type')!r}")
    return Response(status_code=200)
