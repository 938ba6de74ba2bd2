"""Runtime settings — env-driven via pydantic-settings.

Reads ``FIRELINE_*`` environment variables and an optional ``.env`` file.
Components accept explicit overrides and fall back to the module-level
``settings`` singleton.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from fireline.encoding.strategies import DateEncodingStrategy, KeyEncodingStrategy
from fireline.models.policies import DispatchFailurePolicy, EncodingFailureAction


class FirelineSettings(BaseSettings):
    """Library-wide defaults.

    Examples
    --------
    Override via environment::

        export FIRELINE_LOG_LEVEL=DEBUG
        export FIRELINE_MULTIPLEX_FAILURE_POLICY=fail_fast
        export FIRELINE_ENCODING_FAILURE_ACTION=error
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FIRELINE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Runtime form of the "handler name type == event name type" constraint.
    check_event_names: bool = True

    # Dispatch
    multiplex_failure_policy: DispatchFailurePolicy = DispatchFailurePolicy.COLLECT

    # Encoding
    encoding_failure_action: EncodingFailureAction = EncodingFailureAction.IGNORE
    date_encoding: DateEncodingStrategy = DateEncodingStrategy.ISO8601
    key_encoding: KeyEncodingStrategy = KeyEncodingStrategy.USE_DEFAULT_KEYS


# Module-level singleton: import as `from fireline.config import settings`
settings = FirelineSettings()
