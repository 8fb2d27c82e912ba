"""Tests for configuration helpers."""

from uuid import uuid4

from daily_diet.config import parse_session_id


def test_parse_session_id_accepts_uuid() -> None:
    session_id = uuid4()

    assert parse_session_id(f" {session_id} ") == session_id


def test_parse_session_id_rejects_missing_or_malformed() -> None:
    assert parse_session_id(None) is None
    assert parse_session_id("   ") is None
    assert parse_session_id("not-a-uuid") is None


def test_settings_defaults(settings) -> None:
    assert settings.session_cookie_name == "sessionId"
    assert settings.session_max_age_seconds == 604800
