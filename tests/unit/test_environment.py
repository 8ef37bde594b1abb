"""Tests for GRAPHY_ENV / GRAPHY_TRACE_PARSE configuration."""

import logging

import pytest

from graphy.core.environment import (
    GRAPHY_ENV_VAR,
    GRAPHY_TRACE_PARSE_VAR,
    GraphyEnv,
    get_graphy_env,
    is_development,
    is_production,
    should_trace_parsing,
)
from graphy.core.errors import ExpressionSyntaxError
from graphy.core.expression_lang.parser import parse_expr


class TestGetGraphyEnv:
    def test_default_is_development(self) -> None:
        assert get_graphy_env() == GraphyEnv.DEVELOPMENT
        assert is_development()

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("production", GraphyEnv.PRODUCTION),
            ("PROD", GraphyEnv.PRODUCTION),
            ("test", GraphyEnv.TEST),
            (" testing ", GraphyEnv.TEST),
            ("dev", GraphyEnv.DEVELOPMENT),
        ],
    )
    def test_values_and_aliases(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: GraphyEnv
    ) -> None:
        monkeypatch.setenv(GRAPHY_ENV_VAR, raw)
        assert get_graphy_env() == expected

    def test_unknown_value_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(GRAPHY_ENV_VAR, "staging")
        with caplog.at_level(logging.WARNING, logger="graphy"):
            assert get_graphy_env() == GraphyEnv.DEVELOPMENT
        assert "Unknown GRAPHY_ENV value 'staging'" in caplog.text

    def test_is_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(GRAPHY_ENV_VAR, "production")
        assert is_production()
        assert not is_development()


class TestShouldTraceParsing:
    def test_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(GRAPHY_TRACE_PARSE_VAR, "1")
        assert should_trace_parsing(False) is False
        monkeypatch.setenv(GRAPHY_ENV_VAR, "production")
        monkeypatch.delenv(GRAPHY_TRACE_PARSE_VAR)
        assert should_trace_parsing(True) is True

    def test_environment_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert should_trace_parsing() is True
        monkeypatch.setenv(GRAPHY_ENV_VAR, "test")
        assert should_trace_parsing() is False
        monkeypatch.setenv(GRAPHY_ENV_VAR, "production")
        assert should_trace_parsing() is False

    def test_variable_beats_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(GRAPHY_ENV_VAR, "production")
        monkeypatch.setenv(GRAPHY_TRACE_PARSE_VAR, "yes")
        assert should_trace_parsing() is True
        monkeypatch.setenv(GRAPHY_ENV_VAR, "development")
        monkeypatch.setenv(GRAPHY_TRACE_PARSE_VAR, "off")
        assert should_trace_parsing() is False

    def test_unrecognised_variable_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(GRAPHY_ENV_VAR, "test")
        monkeypatch.setenv(GRAPHY_TRACE_PARSE_VAR, "maybe")
        with caplog.at_level(logging.WARNING, logger="graphy"):
            assert should_trace_parsing() is False
        assert "GRAPHY_TRACE_PARSE" in caplog.text

    def test_unrecognised_variable_warns_once(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(GRAPHY_ENV_VAR, "test")
        monkeypatch.setenv(GRAPHY_TRACE_PARSE_VAR, "maybe")
        with caplog.at_level(logging.WARNING, logger="graphy"):
            for _ in range(3):
                parse_expr("x + 1")
        warnings = [r for r in caplog.records if GRAPHY_TRACE_PARSE_VAR in r.getMessage()]
        assert len(warnings) == 1

    def test_each_unrecognised_value_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(GRAPHY_ENV_VAR, "test")
        with caplog.at_level(logging.WARNING, logger="graphy"):
            for value in ("maybe", "sometimes", "maybe"):
                monkeypatch.setenv(GRAPHY_TRACE_PARSE_VAR, value)
                should_trace_parsing()
        warnings = [r for r in caplog.records if GRAPHY_TRACE_PARSE_VAR in r.getMessage()]
        assert len(warnings) == 2


class TestParseTracing:
    def test_trace_logs_tokens_and_tree(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="graphy"):
            parse_expr("x + 1", trace=True)
        assert "tokens for 'x + 1'" in caplog.text
        assert "parsed 'x + 1'" in caplog.text

    def test_no_trace_when_disabled(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(GRAPHY_ENV_VAR, "production")
        with caplog.at_level(logging.DEBUG, logger="graphy"):
            parse_expr("x + 1")
        assert "tokens for" not in caplog.text

    def test_failures_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="graphy"):
            with pytest.raises(ExpressionSyntaxError):
                parse_expr("(2+3", trace=False)
        assert "failed to parse '(2+3'" in caplog.text
