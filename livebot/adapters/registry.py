"""In-memory team registry: implements TeamRegistryPort."""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional

from livebot.config import AppConfig
from livebot.domain.models import TeamRegistration
from livebot.adapters.slack.client import SlackClient


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] {msg}", file=sys.stderr)


class InMemoryTeamRegistry:
    """Read-only map of team_id → TeamRegistration, filled once at start-up."""

    def __init__(self, teams: Optional[Dict[str, TeamRegistration]] = None):
        self._teams: Dict[str, TeamRegistration] = dict(teams or {})

    def lookup(self, team_id: str) -> Optional[TeamRegistration]:
        return self._teams.get(team_id)

    def team_ids(self) -> List[str]:
        return sorted(self._teams)

    def __len__(self) -> int:
        return len(self._teams)

    @staticmethod
    def load_teams_file(path: str) -> Dict[str, dict]:
        """Read {team_id: {bot_user_id, bot_access_token}} from a JSON file."""
        file = Path(path)
        if not file.exists():
            _log(f"Teams file {path} not found, skipping")
            return {}
        try:
            raw = json.loads(file.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            _log(f"Failed to read teams file {path}: {e}")
            return {}
        if not isinstance(raw, dict):
            _log(f"Teams file {path} must hold a JSON object, skipping")
            return {}
        return {k: v for k, v in raw.items() if isinstance(v, dict)}

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        client_factory: Callable[[str], SlackClient] = SlackClient,
    ) -> "InMemoryTeamRegistry":
        teams: Dict[str, TeamRegistration] = {}

        if config.slack.teams_file:
            for team_id, entry in cls.load_teams_file(config.slack.teams_file).items():
                teams[team_id] = TeamRegistration(
                    team_id=team_id,
                    bot_user_id=entry.get("bot_user_id", ""),
                    client=client_factory(entry.get("bot_access_token", "")),
                )

        # Env-configured team wins over a file entry with the same id
        if config.slack.team_id:
            teams[config.slack.team_id] = TeamRegistration(
                team_id=config.slack.team_id,
                bot_user_id=config.slack.bot_user_id,
                client=client_factory(config.slack.bot_token),
            )

        return cls(teams)
