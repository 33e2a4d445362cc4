"""Config – FeatureMaybeSettings and the process-wide settings accessor."""
from __future__ import annotations

import dataclasses
import functools
import logging
from typing import ClassVar

from feature_maybe.config.base import Settings
from feature_maybe.config.errors import InvalidSettingValueError
from feature_maybe.config.loaders import EnvSettingsLoader


@dataclasses.dataclass
class FeatureMaybeSettings(Settings):
    """Library settings, read from ``FEATURE_MAYBE_*`` environment variables.

    Attributes:
        log_lookups: Emit a debug event for every flag lookup.
        log_level: Root level used by :meth:`JsonLoggerFactory.configure`.
    """

    _prefix: ClassVar[str] = "FEATURE_MAYBE"

    log_lookups: bool = False
    log_level: str = "INFO"

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")
        self.log_level = level

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


@functools.lru_cache(maxsize=1)
def get_settings() -> FeatureMaybeSettings:
    """Return the process-wide settings, loaded once from the environment.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return EnvSettingsLoader().load(FeatureMaybeSettings)


__all__ = ["FeatureMaybeSettings", "get_settings"]
