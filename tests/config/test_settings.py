"""Tests for Settings configuration helpers."""

import dataclasses

import pytest

from poem_config.config.settings import (
    CONFIG_ENV,
    CONFIG_FILENAME,
    LogLevel,
    Settings,
    build_settings,
)


@pytest.fixture
def default_settings():
    """Provide default Settings for comparison."""
    return Settings()


class TestSettingsDefaults:
    """Test the documented default values."""

    def test_defaults(self, default_settings):
        assert default_settings.env_var == CONFIG_ENV == "POEM_ENV"
        assert default_settings.config_filename == CONFIG_FILENAME
        assert CONFIG_FILENAME == "config/env_config.toml"
        assert default_settings.log_level == LogLevel.WARNING

    def test_debug_follows_interpreter_flag(self, default_settings):
        assert default_settings.debug is __debug__

    def test_settings_are_frozen(self, default_settings):
        with pytest.raises(dataclasses.FrozenInstanceError):
            default_settings.env_var = "OTHER_ENV"  # type: ignore[misc]


class TestBuildSettings:
    """Test our build_settings helper logic."""

    def test_filters_none_values(self, default_settings):
        """build_settings ignores None overrides."""
        settings = build_settings(
            env_var=None,
            log_level=LogLevel.DEBUG,
        )

        assert settings.env_var == default_settings.env_var
        assert settings.log_level == LogLevel.DEBUG

    def test_applies_all_overrides(self):
        """build_settings applies all non-None overrides."""
        settings = build_settings(
            env_var="APP_ENV",
            config_filename="settings/app.toml",
            debug=False,
            log_level=LogLevel.ERROR,
        )

        assert settings.env_var == "APP_ENV"
        assert settings.config_filename == "settings/app.toml"
        assert settings.debug is False
        assert settings.log_level == LogLevel.ERROR

    def test_rejects_unknown_settings(self):
        """build_settings names unknown overrides instead of ignoring them."""
        with pytest.raises(TypeError, match="max_workers"):
            build_settings(max_workers=3)
