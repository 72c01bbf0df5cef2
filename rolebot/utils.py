"""Utility helpers for RoleBot."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger("rolebot.utils")

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def str_from_env(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def bool_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    logger.warning("Invalid boolean for %s=%s. Falling back to %s.", name, raw, default)
    return default


__all__ = ["bool_from_env", "str_from_env"]
