"""Utility helpers for galbubble."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger("galbubble.utils")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


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


def str_from_env(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def path_from_env(name: str) -> Optional[Path]:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def parse_hex_color(raw_color: str) -> Optional[Tuple[int, int, int, int]]:
    if not raw_color:
        return None
    value = raw_color.strip()
    if not value:
        return None
    if value.lower().startswith("0x"):
        value = value[2:]
    if value.startswith("#"):
        value = value[1:]
    if len(value) not in {6, 8}:
        return None
    try:
        components = [int(value[i : i + 2], 16) for i in range(0, len(value), 2)]
    except ValueError:
        return None
    if len(components) == 3:
        components.append(255)
    r, g, b, a = components[:4]
    return r, g, b, a


def hex_color(raw_color: str) -> Tuple[int, int, int, int]:
    """Parse a colour constant, raising for malformed literals."""
    parsed = parse_hex_color(raw_color)
    if parsed is None:
        raise ValueError(f"Invalid colour literal: {raw_color!r}")
    return parsed


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


__all__ = [
    "bool_from_env",
    "hex_color",
    "parse_hex_color",
    "path_from_env",
    "str_from_env",
    "utc_now",
]
