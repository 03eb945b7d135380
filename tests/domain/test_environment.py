"""Tests for Environment parsing and resolution."""

import pytest

from poem_config.domain.environment import _ALIASES, Environment
from poem_config.domain.exceptions import BadEnvError


class TestEnvironmentParse:
    """Test alias parsing."""

    @pytest.mark.parametrize(
        "alias, expected",
        [
            ("d", Environment.DEVELOPMENT),
            ("dev", Environment.DEVELOPMENT),
            ("devel", Environment.DEVELOPMENT),
            ("development", Environment.DEVELOPMENT),
            ("s", Environment.STAGING),
            ("stage", Environment.STAGING),
            ("staging", Environment.STAGING),
            ("p", Environment.PRODUCTION),
            ("prod", Environment.PRODUCTION),
            ("production", Environment.PRODUCTION),
        ],
    )
    def test_aliases(self, alias, expected):
        assert Environment.parse(alias) is expected

    @pytest.mark.parametrize("text", ["x", "Dev", "PRODUCTION", " dev", ""])
    def test_unknown_or_wrong_case_fails(self, text):
        """Parsing is case-sensitive and rejects anything else."""
        with pytest.raises(ValueError):
            Environment.parse(text)

    def test_canonical_names_round_trip(self):
        for env in Environment:
            assert Environment.parse(str(env)) is env

    def test_display(self):
        assert str(Environment.DEVELOPMENT) == "development"
        assert str(Environment.STAGING) == "staging"
        assert str(Environment.PRODUCTION) == "production"
        assert f"{Environment.STAGING}" == "staging"

    def test_three_variants(self):
        assert list(Environment) == [
            Environment.DEVELOPMENT,
            Environment.STAGING,
            Environment.PRODUCTION,
        ]

    def test_every_variant_has_aliases(self):
        for env in Environment:
            assert str(env) in _ALIASES[env]


class TestEnvironmentPredicates:
    def test_predicates(self):
        assert Environment.DEVELOPMENT.is_dev
        assert not Environment.DEVELOPMENT.is_prod
        assert Environment.STAGING.is_stage
        assert not Environment.STAGING.is_dev
        assert Environment.PRODUCTION.is_prod
        assert not Environment.PRODUCTION.is_stage


class TestEnvironmentActive:
    """Test resolution from the process environment."""

    def test_unset_falls_back_to_development_in_debug(self):
        assert Environment.active(debug=True) is Environment.DEVELOPMENT

    def test_unset_falls_back_to_production_in_release(self):
        assert Environment.active(debug=False) is Environment.PRODUCTION

    def test_reads_alias_from_variable(self, monkeypatch):
        monkeypatch.setenv("POEM_ENV", "stage")

        assert Environment.active() is Environment.STAGING

    def test_set_variable_wins_over_fallback(self, monkeypatch):
        monkeypatch.setenv("POEM_ENV", "dev")

        assert Environment.active(debug=False) is Environment.DEVELOPMENT

    def test_invalid_value_raises_bad_env(self, monkeypatch):
        monkeypatch.setenv("POEM_ENV", "Dev")

        with pytest.raises(BadEnvError) as exc_info:
            Environment.active()

        assert exc_info.value.value == "Dev"
        assert exc_info.value.env_var == "POEM_ENV"

    def test_custom_variable_name(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "p")
        monkeypatch.setenv("POEM_ENV", "s")

        assert Environment.active(env_var="APP_ENV") is Environment.PRODUCTION

    def test_rereads_variable_on_each_call(self, monkeypatch):
        monkeypatch.setenv("POEM_ENV", "staging")
        assert Environment.active() is Environment.STAGING

        monkeypatch.setenv("POEM_ENV", "production")
        assert Environment.active() is Environment.PRODUCTION

        monkeypatch.delenv("POEM_ENV")
        assert Environment.active(debug=True) is Environment.DEVELOPMENT
