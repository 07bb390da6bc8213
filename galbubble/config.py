"""Runtime settings for galbubble, read from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from galbubble.fonts import FontOverrides
from galbubble.utils import bool_from_env, path_from_env, str_from_env

logger = logging.getLogger("galbubble.config")

ENV_PREFIX = "GALBUBBLE_"
DEFAULT_CHARACTER_IMAGE_BASE_PATH = Path("characters")


@dataclass(frozen=True)
class BubbleSettings:
    character_image_base_path: Path = DEFAULT_CHARACTER_IMAGE_BASE_PATH
    fonts: FontOverrides = field(default_factory=FontOverrides)
    show_favorability: bool = False
    show_inner_thought: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "BubbleSettings":
        base_path = path_from_env(f"{ENV_PREFIX}CHARACTER_IMAGE_BASE_PATH") or DEFAULT_CHARACTER_IMAGE_BASE_PATH
        fonts = FontOverrides(
            regular=path_from_env(f"{ENV_PREFIX}FONT_REGULAR"),
            bold=path_from_env(f"{ENV_PREFIX}FONT_BOLD"),
            italic=path_from_env(f"{ENV_PREFIX}FONT_ITALIC"),
        )
        return cls(
            character_image_base_path=base_path,
            fonts=fonts,
            show_favorability=bool_from_env(f"{ENV_PREFIX}SHOW_FAVORABILITY", False),
            show_inner_thought=bool_from_env(f"{ENV_PREFIX}SHOW_INNER_THOUGHT", False),
            log_level=str_from_env(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper(),
        )


def load_settings(env_file: Optional[Path] = None) -> BubbleSettings:
    """Load ``.env`` (without overriding real variables) and build settings."""
    if env_file is not None:
        loaded = load_dotenv(env_file)
    else:
        loaded = load_dotenv()
    if loaded:
        logger.debug("Loaded environment overrides from %s", env_file or ".env")
    return BubbleSettings.from_env()


__all__ = ["BubbleSettings", "ENV_PREFIX", "load_settings"]
