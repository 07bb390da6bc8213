"""Character sprite resolution and white-background keying."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageChops, UnidentifiedImageError

from galbubble.canvas import decode_image, encode_png
from galbubble.models import KeyedSprite
from galbubble.styles import SPRITE_FILES, SPRITE_FOLDERS

logger = logging.getLogger("galbubble.sprites")

# Channels strictly above this value on all of R, G and B count as background.
KEY_THRESHOLD = 245


def resolve_sprite_path(base_path: Union[str, Path], personality: str, emotion: str) -> Path:
    try:
        folder = SPRITE_FOLDERS[personality]
        filename = SPRITE_FILES[emotion]
    except KeyError as exc:
        raise ValueError(f"No sprite mapping for {personality}/{emotion}") from exc
    return Path(base_path) / folder / filename


def background_mask(image: Image.Image, threshold: int = KEY_THRESHOLD) -> Image.Image:
    """Return an ``L`` mask that is 255 where every colour channel exceeds ``threshold``."""
    red, green, blue, _ = image.split()
    lut = [255 if value > threshold else 0 for value in range(256)]
    mask = ImageChops.multiply(red.point(lut), green.point(lut))
    return ImageChops.multiply(mask, blue.point(lut))


def key_white_background(image: Image.Image, threshold: int = KEY_THRESHOLD) -> Image.Image:
    """Zero the alpha of near-white pixels; other pixels keep their source alpha."""
    keyed = image.convert("RGBA")
    alpha = keyed.getchannel("A")
    alpha.paste(0, mask=background_mask(keyed, threshold))
    keyed.putalpha(alpha)
    # Round-trip through PNG so the drawn sprite is a fresh image, not the mutated buffer.
    return decode_image(encode_png(keyed))


def scale_factor(src_width: int, src_height: int, max_width: float, max_height: float) -> float:
    # Not clamped at 1.0: small sprites grow to fill the bounds.
    return min(max_width / src_width, max_height / src_height)


def key_sprite(path: Union[str, Path], max_width: float, max_height: float) -> Optional[KeyedSprite]:
    """Load, key and scale a sprite. Returns ``None`` on any load or decode failure."""
    try:
        with Image.open(path) as source:
            source.load()
            if source.width == 0 or source.height == 0:
                logger.warning("Sprite %s has no pixels; skipping.", path)
                return None
            keyed = key_white_background(source)
    except (OSError, UnidentifiedImageError, ValueError) as exc:
        logger.warning("Failed to key sprite %s: %s", path, exc)
        return None

    scale = scale_factor(keyed.width, keyed.height, max_width, max_height)
    width = keyed.width * scale
    height = keyed.height * scale
    target = (max(1, int(round(width))), max(1, int(round(height))))
    if target != keyed.size:
        keyed = keyed.resize(target, Image.LANCZOS)
    logger.debug("Keyed sprite %s -> %.1fx%.1f (scale=%.3f)", path, width, height, scale)
    return KeyedSprite(image=keyed, width=width, height=height)


__all__ = [
    "KEY_THRESHOLD",
    "background_mask",
    "key_sprite",
    "key_white_background",
    "resolve_sprite_path",
    "scale_factor",
]
