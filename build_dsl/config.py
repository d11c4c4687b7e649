from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(slots=True)
class LocatorSettings:
    """Runtime configuration for project loading and snippet discovery."""

    follow_symlinks: bool = False
    libs_dir: str = "libs"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LocatorSettings":
        def _bool_env(name: str, default: bool) -> bool:
            raw = os.getenv(name)
            if not raw:
                return default
            value = raw.strip().lower()
            if value in _TRUE_VALUES:
                return True
            if value in _FALSE_VALUES:
                return False
            logger.warning("Invalid boolean for %s: %s", name, raw)
            return default

        def _level_env(name: str, default: str) -> str:
            raw = os.getenv(name)
            if not raw:
                return default
            level = raw.strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                logger.warning("Invalid log level for %s: %s", name, raw)
                return default
            return level

        return cls(
            follow_symlinks=_bool_env("BUILD_DSL_FOLLOW_SYMLINKS", False),
            libs_dir=os.getenv("BUILD_DSL_LIBS_DIR") or "libs",
            log_level=_level_env("BUILD_DSL_LOG_LEVEL", "INFO"),
        )


__all__ = ["LocatorSettings"]
