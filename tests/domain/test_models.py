"""Tests for domain models."""

from livebot.domain.models import (
    DEFAULT_REPLY,
    EnvelopeType,
    EventPayload,
    EventType,
    SendRequest,
    StreamStatus,
)


class TestEventType:
    def test_known_types(self):
        assert EventType.parse("team_join") is EventType.TEAM_JOIN
        assert EventType.parse("reaction_added") is EventType.REACTION_ADDED
        assert EventType.parse("pin_added") is EventType.PIN_ADDED
        assert EventType.parse("message") is EventType.MESSAGE

    def test_unknown_type(self):
        assert EventType.parse("channel_created") is EventType.UNKNOWN
        assert EventType.parse(None) is EventType.UNKNOWN

    def test_literal_unknown_is_not_special(self):
        assert EventType.parse("unknown") is EventType.UNKNOWN


class TestEnvelopeType:
    def test_known(self):
        assert EnvelopeType.parse("url_verification") is EnvelopeType.URL_VERIFICATION
        assert EnvelopeType.parse("event_callback") is EnvelopeType.EVENT_CALLBACK

    def test_other(self):
        assert EnvelopeType.parse("app_rate_limited") is EnvelopeType.OTHER
        assert EnvelopeType.parse(None) is EnvelopeType.OTHER


class TestEventPayload:
    def test_message_event(self):
        raw = {"type": "message", "user": "U1", "text": "hi", "channel": "C1"}
        event = EventPayload.from_dict(raw)
        assert event.event_type is EventType.MESSAGE
        assert event.user_id == "U1"
        assert event.text == "hi"
        assert event.raw is raw

    def test_team_join_user_object(self):
        event = EventPayload.from_dict({"type": "team_join", "user": {"id": "U9", "name": "new"}})
        assert event.event_type is EventType.TEAM_JOIN
        assert event.user_id == "U9"

    def test_reaction_has_no_text(self):
        event = EventPayload.from_dict(
            {"type": "reaction_added", "user": "U1", "item": {"channel": "C1"}}
        )
        assert event.text is None

    def test_non_string_text_dropped(self):
        event = EventPayload.from_dict({"type": "message", "user": "U1", "text": ["x"]})
        assert event.event_type is EventType.MESSAGE
        assert event.text is None

    def test_missing_user(self):
        event = EventPayload.from_dict({"type": "message", "subtype": "bot_message"})
        assert event.user_id == ""


class TestStreamStatus:
    def test_offline(self):
        assert StreamStatus.from_stream(None).is_live is False
        assert StreamStatus.from_stream({}).is_live is False

    def test_live(self):
        status = StreamStatus.from_stream({
            "game": "Just Chatting",
            "viewers": 42,
            "channel": {"display_name": "Twoeasy", "url": "https://twitch.tv/twoeasy"},
        })
        assert status.is_live is True
        assert status.display_name == "Twoeasy"
        assert status.game == "Just Chatting"
        assert status.viewer_count == 42
        assert status.url == "https://twitch.tv/twoeasy"

    def test_live_without_channel(self):
        status = StreamStatus.from_stream({"game": "Chess", "viewers": 3, "channel": None})
        assert status.is_live is True
        assert status.display_name is None
        assert status.url is None

    def test_channel_not_an_object(self):
        status = StreamStatus.from_stream({"game": "g", "viewers": 1, "channel": "twoeasy"})
        assert status.is_live is True
        assert status.game == "g"
        assert status.display_name is None
        assert status.url is None

    def test_stream_not_an_object(self):
        status = StreamStatus.from_stream("twoeasy")
        assert status.is_live is True
        assert status.viewer_count is None


class TestSendRequest:
    def test_defaults_to_dm(self):
        req = SendRequest(team_id="T1", user_id="U1")
        assert req.target_channel == "U1"
        assert req.text == DEFAULT_REPLY

    def test_explicit_channel(self):
        req = SendRequest(team_id="T1", user_id="U1", channel="#general", text="x")
        assert req.target_channel == "#general"
