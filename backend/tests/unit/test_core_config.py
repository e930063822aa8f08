"""
Unit tests for Settings defaults and derived properties.
Version: 1.0.0
"""
import pytest

from app.core.config import Settings, get_settings


@pytest.mark.unit
class TestSettings:

    def test_defaults(self):
        s = Settings()
        assert s.monday_api_url == "https://api.monday.com/v2"
        assert s.monday_board_id == "2090208832"
        assert s.origin_postal_code == "67433"
        assert s.price_sync_interval_seconds == 86400

    def test_token_flag(self):
        assert Settings(monday_api_token="abc").has_monday_token is True
        assert Settings(monday_api_token="").has_monday_token is False
        assert Settings(monday_api_token=None).has_monday_token is False

    def test_test_session_has_no_token_and_no_sync(self):
        s = Settings()
        assert s.has_monday_token is False
        assert s.price_sync_enabled is False

    def test_cors_origins_split(self):
        assert Settings(cors_allow_origins="https://a.test, https://b.test,").cors_origins == [
            "https://a.test", "https://b.test",
        ]

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()
