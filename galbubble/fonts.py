"""Font loading with style fallbacks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from PIL import ImageFont

from galbubble.styles import BOLD_FONT_FAMILY, DEFAULT_FONT_FAMILY

logger = logging.getLogger("galbubble.fonts")

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

_STYLE_SEQUENCE = {
    "regular": ("regular",),
    "bold": ("bold", "regular"),
    "italic": ("italic", "regular"),
}


@dataclass(frozen=True)
class FontOverrides:
    regular: Optional[Path] = None
    bold: Optional[Path] = None
    italic: Optional[Path] = None

    def for_style(self, style: str) -> Optional[Path]:
        return getattr(self, style, None)


def font_candidates(
    style: str,
    family: Sequence[str] = DEFAULT_FONT_FAMILY,
    overrides: Optional[FontOverrides] = None,
) -> List[str]:
    """Return the ordered font sources tried for ``style``.

    Configured override files come before any built-in face, and every chain
    ends in ``family`` so a styled font never drops CJK coverage.
    """
    overrides = overrides or FontOverrides()
    candidates: List[str] = []
    for style_key in _STYLE_SEQUENCE.get(style, ("regular",)):
        override = overrides.for_style(style_key)
        if override is not None:
            candidates.append(str(override.expanduser()))
    if style == "bold":
        candidates.extend(BOLD_FONT_FAMILY)
    candidates.extend(family)
    seen = set()
    ordered: List[str] = []
    for candidate in candidates:
        if candidate in seen:
            continue
        seen.add(candidate)
        ordered.append(candidate)
    return ordered


@lru_cache(maxsize=64)
def load_font(
    size: int,
    style: str = "regular",
    family: Tuple[str, ...] = DEFAULT_FONT_FAMILY,
    overrides: Optional[FontOverrides] = None,
) -> Font:
    style = (style or "regular").lower()
    for candidate in font_candidates(style, family, overrides):
        try:
            return ImageFont.truetype(candidate, size=size)
        except OSError:
            logger.debug("Font candidate unavailable -> %s", candidate)
    logger.warning("Falling back to Pillow default font (size=%s style=%s)", size, style)
    return ImageFont.load_default(size=size)


def clear_font_cache() -> None:
    load_font.cache_clear()


__all__ = ["Font", "FontOverrides", "clear_font_cache", "font_candidates", "load_font"]
