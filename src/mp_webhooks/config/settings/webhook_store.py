"""Config settings – WebHookStoreSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar
import logging

from mp_webhooks.config.settings.base import Settings
from mp_webhooks.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class WebHookStoreSettings(Settings):
    """Connection and logging settings for the SQLAlchemy-backed store.

    Environment variables::

        WEBHOOK_STORE_DATABASE_URL    required, async SQLAlchemy URL
        WEBHOOK_STORE_ECHO            log emitted SQL (default false)
        WEBHOOK_STORE_POOL_PRE_PING   test connections on checkout (default true)
        WEBHOOK_STORE_LOG_LEVEL       root log level (default INFO)
    """

    _prefix: ClassVar[str] = "WEBHOOK_STORE"

    database_url: str
    echo: bool = False
    pool_pre_ping: bool = True
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.database_url.strip():
            raise InvalidSettingValueError("database_url", self.database_url, "must not be empty")
        if "://" not in self.database_url:
            raise InvalidSettingValueError("database_url", self.database_url, "is not a database URL")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["WebHookStoreSettings"]
