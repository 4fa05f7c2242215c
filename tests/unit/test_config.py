"""Tests for deltoid.config module."""

import pytest
from pydantic import ValidationError

from deltoid.config import Settings


class TestSettings:
    """Tests for the Settings class."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that default values are set correctly."""
        monkeypatch.delenv("DELTOID_LOG_LEVEL", raising=False)
        monkeypatch.delenv("DELTOID_LOG_FORMAT", raising=False)
        monkeypatch.delenv("DELTOID_MAX_ENCLOSED_POINTS", raising=False)

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "console"
        assert settings.MAX_ENCLOSED_POINTS == 1_000_000

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that prefixed environment variables override defaults."""
        monkeypatch.setenv("DELTOID_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DELTOID_LOG_FORMAT", "json")
        monkeypatch.setenv("DELTOID_MAX_ENCLOSED_POINTS", "500")

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FORMAT == "json"
        assert settings.MAX_ENCLOSED_POINTS == 500

    def test_unprefixed_env_var_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that variables without the DELTOID_ prefix are not read."""
        monkeypatch.delenv("DELTOID_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.LOG_LEVEL == "INFO"

    def test_log_format_options(self) -> None:
        """Test that LOG_FORMAT accepts valid options."""
        settings = Settings(
            LOG_FORMAT="json",
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.LOG_FORMAT == "json"

    def test_log_format_rejects_unknown(self) -> None:
        with pytest.raises(ValidationError):
            Settings(
                LOG_FORMAT="xml",  # type: ignore[arg-type]
                _env_file=None,  # type: ignore[call-arg]
            )

    @pytest.mark.parametrize("limit", [0, -5])
    def test_max_enclosed_points_must_be_positive(self, limit: int) -> None:
        with pytest.raises(ValidationError):
            Settings(
                MAX_ENCLOSED_POINTS=limit,
                _env_file=None,  # type: ignore[call-arg]
            )

    def test_fixture_settings(self, test_settings: Settings) -> None:
        """Test that settings can be created with custom values."""
        assert test_settings.LOG_LEVEL == "DEBUG"
        assert test_settings.MAX_ENCLOSED_POINTS == 10_000
