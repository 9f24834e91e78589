"""FastAPI application, error mapping and startup."""

import sys
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from livebot.config import CONFIG
from livebot.domain.errors import AuthError, ParseError
from livebot.adapters.web import events_routes
from livebot.adapters.web.events_routes import events_router


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] {msg}", file=sys.stderr)


@asynccontextmanager
async def lifespan(app: FastAPI):
    _log("Livebot starting")
    _log(f"Teams registered: {', '.join(events_routes.registry.team_ids()) or 'none'}")
    if not CONFIG["slack_verification_token"]:
        _log("SLACK_VERIFICATION_TOKEN is not set, every event will be rejected")
    if not events_routes.twitch_client.is_configured:
        _log("TWITCH_CLIENT_ID is not set, live checks will likely fail")
    if CONFIG["twitch_insecure_tls"]:
        _log("TWITCH_INSECURE_TLS is on, certificates are not verified (test only)")
    _log("Ready!")
    yield


app = FastAPI(title="Livebot", lifespan=lifespan)
app.include_router(events_router)


@app.exception_handler(AuthError)
async def auth_error_handler(request: Request, exc: AuthError):
    _log(str(exc))
    return PlainTextResponse(str(exc), status_code=403)


@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError):
    _log(f"Rejected {request.url.path}: {exc}")
    return PlainTextResponse(str(exc), status_code=400)


class StatusResponse(BaseModel):
    teams: int
    twitchConfigured: bool
    verificationConfigured: bool


@app.get("/status", response_model=StatusResponse)
async def status():
    """Server status endpoint"""
    return StatusResponse(
        teams=len(events_routes.registry),
        twitchConfigured=events_routes.twitch_client.is_configured,
        verificationConfigured=bool(CONFIG["slack_verification_token"]),
    )
