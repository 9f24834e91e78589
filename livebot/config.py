"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_HTTP_TIMEOUT = 10.0


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_timeout(name: str) -> float:
    raw = os.getenv(name, str(DEFAULT_HTTP_TIMEOUT))
    try:
        value = float(raw)
    except ValueError:
        value = -1.0
    if not 1 <= value <= 30:
        _stderr_print(
            f"Unsupported {name}={raw!r}, falling back to {DEFAULT_HTTP_TIMEOUT}s"
        )
        return DEFAULT_HTTP_TIMEOUT
    return value


CONFIG = {
    "port": int(os.getenv("PORT", "3000")),
    # Slack Events API
    "slack_verification_token": os.getenv("SLACK_VERIFICATION_TOKEN", ""),
    # Echo the rejected token back in 403 bodies (parity with the old bot)
    "slack_echo_invalid_token": _env_flag("SLACK_ECHO_INVALID_TOKEN"),
    # Single-team install
    "slack_team_id": os.getenv("SLACK_TEAM_ID", ""),
    "slack_bot_user_id": os.getenv("SLACK_BOT_USER_ID", ""),
    "slack_bot_token": os.getenv("SLACK_BOT_TOKEN", ""),
    # Extra teams: JSON file {team_id: {bot_user_id, bot_access_token}}
    "slack_teams_file": os.getenv("SLACK_TEAMS_FILE", ""),
    # Twitch (kraken v3)
    "twitch_client_id": os.getenv("TWITCH_CLIENT_ID", ""),
    # Test-only: skip TLS certificate verification against api.twitch.tv
    "twitch_insecure_tls": _env_flag("TWITCH_INSECURE_TLS"),
    "http_timeout": _env_timeout("HTTP_TIMEOUT_SECONDS"),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class SlackConfig:
    verification_token: str = ""
    echo_invalid_token: bool = False
    team_id: str = ""
    bot_user_id: str = ""
    bot_token: str = ""
    teams_file: str = ""


@dataclass
class TwitchConfig:
    client_id: str = ""
    insecure_tls: bool = False


@dataclass
class AppConfig:
    """Typed view over CONFIG."""

    port: int = 3000
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    slack: SlackConfig = field(default_factory=SlackConfig)
    twitch: TwitchConfig = field(default_factory=TwitchConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            http_timeout=CONFIG["http_timeout"],
            slack=SlackConfig(
                verification_token=CONFIG["slack_verification_token"],
                echo_invalid_token=CONFIG["slack_echo_invalid_token"],
                team_id=CONFIG["slack_team_id"],
                bot_user_id=CONFIG["slack_bot_user_id"],
                bot_token=CONFIG["slack_bot_token"],
                teams_file=CONFIG["slack_teams_file"],
            ),
            twitch=TwitchConfig(
                client_id=CONFIG["twitch_client_id"],
                insecure_tls=CONFIG["twitch_insecure_tls"],
            ),
        )
