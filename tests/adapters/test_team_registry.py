"""Tests for InMemoryTeamRegistry."""

import json
import re

import pytest

from livebot.adapters.registry import InMemoryTeamRegistry
from livebot.adapters.slack.client import SlackClient
from livebot.config import AppConfig, SlackConfig
from livebot.domain.models import TeamRegistration


class TestLookup:
    def test_known_team(self):
        reg = TeamRegistration(team_id="T1", bot_user_id="UBOT")
        registry = InMemoryTeamRegistry({"T1": reg})
        assert registry.lookup("T1") is reg
        assert len(registry) == 1

    def test_unknown_team(self):
        assert InMemoryTeamRegistry().lookup("T404") is None

    def test_source_dict_not_shared(self):
        teams = {"T1": TeamRegistration(team_id="T1", bot_user_id="UBOT")}
        registry = InMemoryTeamRegistry(teams)
        teams.clear()
        assert registry.lookup("T1") is not None


class TestFromConfig:
    def test_single_team_from_env(self):
        config = AppConfig(slack=SlackConfig(team_id="T1", bot_user_id="UBOT", bot_token="xoxb-1"))
        registry = InMemoryTeamRegistry.from_config(config)
        team = registry.lookup("T1")
        assert team.bot_user_id == "UBOT"
        assert isinstance(team.client, SlackClient)
        assert team.client.is_configured is True

    def test_no_team_configured(self):
        assert len(InMemoryTeamRegistry.from_config(AppConfig())) == 0

    def test_teams_file(self, tmp_path):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps({
            "T1": {"bot_user_id": "UB1", "bot_access_token": "xoxb-1"},
            "T2": {"bot_user_id": "UB2", "bot_access_token": "xoxb-2"},
            "bad": "not-an-object",
        }))
        tokens = []

        def factory(token):
            tokens.append(token)
            return object()

        config = AppConfig(slack=SlackConfig(teams_file=str(path)))
        registry = InMemoryTeamRegistry.from_config(config, client_factory=factory)
        assert registry.team_ids() == ["T1", "T2"]
        assert registry.lookup("T2").bot_user_id == "UB2"
        assert sorted(tokens) == ["xoxb-1", "xoxb-2"]

    def test_env_team_overrides_file(self, tmp_path):
        path = tmp_path / "teams.json"
        path.write_text(json.dumps({"T1": {"bot_user_id": "OLD", "bot_access_token": "x"}}))
        config = AppConfig(slack=SlackConfig(
            team_id="T1", bot_user_id="NEW", bot_token="y", teams_file=str(path),
        ))
        registry = InMemoryTeamRegistry.from_config(config)
        assert len(registry) == 1
        assert registry.lookup("T1").bot_user_id == "NEW"

    def test_missing_file(self, tmp_path, capsys):
        config = AppConfig(slack=SlackConfig(teams_file=str(tmp_path / "nope.json")))
        assert len(InMemoryTeamRegistry.from_config(config)) == 0
        err = capsys.readouterr().err
        assert "not found" in err
        assert re.match(r"^\[\d{4}-\d{2}-\d{2}T", err)

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
    def test_unreadable_file(self, tmp_path, content):
        path = tmp_path / "teams.json"
        path.write_text(content)
        config = AppConfig(slack=SlackConfig(teams_file=str(path)))
        assert len(InMemoryTeamRegistry.from_config(config)) == 0
