"""Tests for runtime settings — env-driven via pydantic-settings."""

from __future__ import annotations

from fireline.config import FirelineSettings
from fireline.encoding import DateEncodingStrategy, KeyEncodingStrategy
from fireline.handlers import LoggingHandler, MultiplexHandler
from fireline.models import DispatchFailurePolicy, EncodingFailureAction


class TestFirelineSettings:
    def test_defaults(self):
        config = FirelineSettings()
        assert config.log_level == "INFO"
        assert config.check_event_names is True
        assert config.multiplex_failure_policy is DispatchFailurePolicy.COLLECT
        assert config.encoding_failure_action is EncodingFailureAction.IGNORE
        assert config.date_encoding is DateEncodingStrategy.ISO8601
        assert config.key_encoding is KeyEncodingStrategy.USE_DEFAULT_KEYS

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("FIRELINE_MULTIPLEX_FAILURE_POLICY", "fail_fast")
        monkeypatch.setenv("FIRELINE_ENCODING_FAILURE_ACTION", "error")
        monkeypatch.setenv("FIRELINE_CHECK_EVENT_NAMES", "false")
        monkeypatch.setenv("FIRELINE_KEY_ENCODING", "convert_to_snake_case")
        config = FirelineSettings()
        assert config.multiplex_failure_policy is DispatchFailurePolicy.FAIL_FAST
        assert config.encoding_failure_action is EncodingFailureAction.ERROR
        assert config.check_event_names is False
        assert config.key_encoding is KeyEncodingStrategy.CONVERT_TO_SNAKE_CASE

    def test_unknown_env_vars_ignored(self, monkeypatch):
        monkeypatch.setenv("FIRELINE_NOT_A_SETTING", "1")
        FirelineSettings()


class TestSettingsDefaults:
    """Components fall back to the module-level settings singleton."""

    def test_multiplex_reads_policy_from_settings(self, monkeypatch):
        from fireline.config import settings

        monkeypatch.setattr(settings, "multiplex_failure_policy", DispatchFailurePolicy.LOG)
        assert MultiplexHandler().failure_policy is DispatchFailurePolicy.LOG
        assert (
            MultiplexHandler(failure_policy=DispatchFailurePolicy.FAIL_FAST).failure_policy
            is DispatchFailurePolicy.FAIL_FAST
        )

    def test_encoding_handler_reads_action_from_settings(self, monkeypatch):
        from fireline.config import settings

        monkeypatch.setattr(settings, "encoding_failure_action", EncodingFailureAction.ERROR)
        assert LoggingHandler().on_encoding_failure is EncodingFailureAction.ERROR
