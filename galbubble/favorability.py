"""Two-sided favorability gauge."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from galbubble.canvas import (
    composite_clipped,
    draw_rounded_rect,
    draw_text_with_shadow,
    fill_rect,
    linear_gradient,
    new_canvas,
    rounded_mask,
)
from galbubble.models import RGBA, StyleProfile
from galbubble.styles import (
    BAR_DIVIDER_COLOR,
    BAR_LABEL_COLOR,
    BAR_LABEL_SHADOW,
    BAR_NEGATIVE_FAR,
    BAR_NEGATIVE_NEAR,
    BAR_TRACK_COLOR,
    DELTA_NEGATIVE_COLOR,
    DELTA_POSITIVE_COLOR,
)

FAVORABILITY_MIN = -100
FAVORABILITY_MAX = 100
DIVIDER_WIDTH = 2
LABEL_SHADOW_BLUR = 2
DELTA_OFFSET = (5, -5)


def clamp_favorability(value: int) -> int:
    return max(FAVORABILITY_MIN, min(FAVORABILITY_MAX, int(value)))


def fill_span(x: float, w: float, value: int) -> Optional[Tuple[float, float]]:
    """Return ``(left, right)`` of the filled part of the gauge, or ``None`` at zero.

    The fill is anchored at the midpoint and covers at most half the track.
    """
    clamped = clamp_favorability(value)
    if clamped == 0:
        return None
    midpoint = x + w / 2
    fill_width = abs(clamped) / FAVORABILITY_MAX * (w / 2)
    if clamped > 0:
        return midpoint, midpoint + fill_width
    return midpoint - fill_width, midpoint


def format_delta(delta: Optional[int]) -> Optional[Tuple[str, RGBA]]:
    if not delta:
        return None
    if delta > 0:
        return f"+{delta}", DELTA_POSITIVE_COLOR
    return f"{delta}", DELTA_NEGATIVE_COLOR


def _fill_layer(
    size: Tuple[int, int],
    span: Tuple[float, float],
    y: float,
    h: float,
    clamped: int,
    style: StyleProfile,
) -> Optional[Image.Image]:
    # Round inward so the fill never spills across the midpoint.
    px_left, px_right = math.ceil(span[0]), math.floor(span[1])
    width = px_right - px_left
    height = int(round(h))
    if width <= 0 or height <= 0:
        return None
    if clamped > 0:
        strip = linear_gradient((width, height), style.bar_start, style.bar_end, horizontal=True)
    else:
        strip = linear_gradient((width, height), BAR_NEGATIVE_FAR, BAR_NEGATIVE_NEAR, horizontal=True)
    layer = new_canvas(size)
    layer.paste(strip, (px_left, int(round(y))))
    return layer


def draw_bar(
    canvas: Image.Image,
    x: float,
    y: float,
    w: float,
    h: float,
    value: int,
    delta: Optional[int],
    style: StyleProfile,
    *,
    label_font,
    delta_font,
) -> None:
    """Draw the gauge onto ``canvas``. ``value`` is clamped to [-100, 100]."""
    clamped = clamp_favorability(value)
    track_box = (x, y, x + w, y + h)
    draw_rounded_rect(canvas, track_box, h / 2, fill=BAR_TRACK_COLOR)

    span = fill_span(x, w, clamped)
    if span is not None:
        layer = _fill_layer(canvas.size, span, y, h, clamped, style)
        if layer is not None:
            composite_clipped(canvas, layer, rounded_mask(canvas.size, track_box, h / 2))

    midpoint = x + w / 2
    fill_rect(
        canvas,
        (midpoint - DIVIDER_WIDTH / 2, y, midpoint + DIVIDER_WIDTH / 2 - 1, y + h - 1),
        BAR_DIVIDER_COLOR,
    )

    draw_text_with_shadow(
        canvas,
        (midpoint, y + h / 2),
        str(clamped),
        font=label_font,
        fill=BAR_LABEL_COLOR,
        shadow=BAR_LABEL_SHADOW,
        blur=LABEL_SHADOW_BLUR,
    )

    annotation = format_delta(delta)
    if annotation is not None:
        text, color = annotation
        ImageDraw.Draw(canvas).text(
            (x + w + DELTA_OFFSET[0], y + DELTA_OFFSET[1]),
            text,
            font=delta_font,
            fill=color,
            anchor="rm",
        )


__all__ = [
    "FAVORABILITY_MAX",
    "FAVORABILITY_MIN",
    "clamp_favorability",
    "draw_bar",
    "fill_span",
    "format_delta",
]
