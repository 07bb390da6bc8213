"""Dialogue bubble compositing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw

from galbubble.canvas import (
    draw_rounded_rect,
    encode_png,
    linear_gradient,
    paste_layer,
    scratch_draw,
    soft_shadow,
)
from galbubble.config import BubbleSettings
from galbubble.favorability import draw_bar
from galbubble.fonts import Font, load_font
from galbubble.layout import draw_wrapped, measure_height
from galbubble.models import LayoutMetrics, RenderRequest, StyleProfile
from galbubble.sprites import key_sprite, resolve_sprite_path
from galbubble.styles import NAME_TAG_TEXT_COLOR, SPRITE_SHADOW_COLOR, get_personality_info, get_style

logger = logging.getLogger("galbubble.bubble")

CANVAS_WIDTH = 800
BASE_HEIGHT = 600
MIN_BOX_HEIGHT = 220
BOX_MARGIN = 20
BOX_PADDING = 30
BOX_RADIUS = 15
BOX_BORDER_WIDTH = 4
BOX_TEXT_ALLOWANCE = 70
TEXT_TOP_OFFSET = 35
MAIN_FONT_SIZE = 26
MAIN_LINE_HEIGHT = 34
THOUGHT_FONT_SIZE = 20
THOUGHT_LINE_HEIGHT = 28
THOUGHT_SPACING = 10
NAME_FONT_SIZE = 22
NAME_TAG_SIZE = (140, 40)
NAME_TAG_RISE = 30
NAME_TAG_RADIUS = 5
BAR_LABEL_FONT_SIZE = 16
DELTA_FONT_SIZE = 20
BAR_SIZE = (200, 24)
BAR_RIGHT_INSET = 240
BAR_RISE = 35
SPRITE_MAX_WIDTH_RATIO = 0.75
SPRITE_MAX_HEIGHT_RATIO = 0.95
SPRITE_X_OFFSET = 120
SPRITE_SHADOW_BLUR = 10

MAX_TEXT_WIDTH = CANVAS_WIDTH - BOX_MARGIN * 2 - BOX_PADDING * 2


class BubbleRenderError(Exception):
    """Raised when a bubble image cannot be produced."""


@dataclass(frozen=True)
class BubbleFonts:
    main: Font
    thought: Font
    name: Font
    bar_label: Font
    delta: Font


def thought_line(inner_thought: str) -> str:
    return f"(💭 {inner_thought})"


def compute_layout_metrics(thought_height: int, text_height: int) -> LayoutMetrics:
    """Size the box and canvas from pre-measured text heights.

    The box top stays put; extra text grows the box and the canvas downward.
    """
    total = thought_height + text_height
    box_height = max(MIN_BOX_HEIGHT, total + BOX_TEXT_ALLOWANCE)
    height_delta = box_height - MIN_BOX_HEIGHT
    height = BASE_HEIGHT + height_delta
    return LayoutMetrics(
        thought_height=thought_height,
        text_height=text_height,
        box_height=box_height,
        height_delta=height_delta,
        width=CANVAS_WIDTH,
        height=height,
        box_top=height - box_height - BOX_MARGIN,
    )


def load_bubble_fonts(style: StyleProfile, settings: BubbleSettings) -> BubbleFonts:
    def _font(size: int, weight: str = "regular") -> Font:
        return load_font(size, weight, style.font, settings.fonts)

    return BubbleFonts(
        main=_font(MAIN_FONT_SIZE),
        thought=_font(THOUGHT_FONT_SIZE, "italic"),
        name=_font(NAME_FONT_SIZE, "bold"),
        bar_label=_font(BAR_LABEL_FONT_SIZE, "bold"),
        delta=_font(DELTA_FONT_SIZE, "bold"),
    )


class ChatBubbleGenerator:
    """Render dialogue bubbles for the four built-in characters."""

    def __init__(
        self,
        base_path: Optional[Union[str, Path]] = None,
        *,
        settings: Optional[BubbleSettings] = None,
    ):
        self.settings = settings or BubbleSettings()
        self.base_path = Path(base_path) if base_path is not None else self.settings.character_image_base_path

    def sprite_path(self, request: RenderRequest) -> Path:
        return resolve_sprite_path(self.base_path, request.personality, request.emotion)

    def measure(self, request: RenderRequest, fonts: BubbleFonts) -> LayoutMetrics:
        draw = scratch_draw()
        thought_height = 0
        if request.wants_inner_thought:
            thought_height = (
                measure_height(
                    draw,
                    thought_line(request.inner_thought or ""),
                    fonts.thought,
                    MAX_TEXT_WIDTH,
                    THOUGHT_LINE_HEIGHT,
                )
                + THOUGHT_SPACING
            )
        text_height = measure_height(draw, request.text, fonts.main, MAX_TEXT_WIDTH, MAIN_LINE_HEIGHT)
        return compute_layout_metrics(thought_height, text_height)

    def generate_bubble_image(self, request: RenderRequest) -> bytes:
        """Render ``request`` and return PNG bytes.

        A missing or unreadable sprite only drops the character layer. Any
        other failure raises :class:`BubbleRenderError`.
        """
        style = get_style(request.personality)
        info = get_personality_info(request.personality)
        try:
            fonts = load_bubble_fonts(style, self.settings)
            metrics = self.measure(request, fonts)
            logger.debug(
                "Bubble layout for %s: text=%s thought=%s box=%s canvas=%sx%s",
                request.personality,
                metrics.text_height,
                metrics.thought_height,
                metrics.box_height,
                metrics.width,
                metrics.height,
            )
            canvas = linear_gradient((metrics.width, metrics.height), *style.bg_gradient)
            self._draw_sprite(canvas, request)
            self._draw_box(canvas, metrics, style)
            self._draw_name_tag(canvas, metrics, style, info.name, fonts)
            self._draw_text(canvas, metrics, style, request, fonts)
            if request.wants_favorability:
                draw_bar(
                    canvas,
                    metrics.width - BAR_RIGHT_INSET,
                    metrics.box_top - BAR_RISE,
                    BAR_SIZE[0],
                    BAR_SIZE[1],
                    request.favorability,
                    request.favorability_delta,
                    style,
                    label_font=fonts.bar_label,
                    delta_font=fonts.delta,
                )
            return encode_png(canvas)
        except (OSError, ValueError) as exc:
            logger.error("Bubble render failed for %s/%s: %s", request.personality, request.emotion, exc)
            raise BubbleRenderError(f"Failed to render bubble: {exc}") from exc

    def _draw_sprite(self, canvas: Image.Image, request: RenderRequest) -> None:
        sprite_path = self.sprite_path(request)
        if not sprite_path.exists():
            logger.warning("Sprite not found at %s; rendering without character.", sprite_path)
            return
        sprite = key_sprite(
            sprite_path,
            canvas.width * SPRITE_MAX_WIDTH_RATIO,
            BASE_HEIGHT * SPRITE_MAX_HEIGHT_RATIO,
        )
        if sprite is None:
            logger.warning("Sprite at %s could not be keyed; rendering without character.", sprite_path)
            return
        # Anchored to the fixed base height so the character does not move as the box grows.
        pos_x = (canvas.width - sprite.width) / 2 + SPRITE_X_OFFSET
        pos_y = BASE_HEIGHT - sprite.height
        shadow, padding = soft_shadow(sprite.image, SPRITE_SHADOW_COLOR, SPRITE_SHADOW_BLUR)
        paste_layer(canvas, shadow, (pos_x - padding, pos_y - padding))
        paste_layer(canvas, sprite.image, (pos_x, pos_y))
        logger.debug(
            "Pasted sprite %s at (%.1f, %.1f) size %.1fx%.1f",
            sprite_path,
            pos_x,
            pos_y,
            sprite.width,
            sprite.height,
        )

    def _draw_box(self, canvas: Image.Image, metrics: LayoutMetrics, style: StyleProfile) -> None:
        box = (
            BOX_MARGIN,
            metrics.box_top,
            metrics.width - BOX_MARGIN,
            metrics.box_top + metrics.box_height,
        )
        draw_rounded_rect(
            canvas,
            box,
            BOX_RADIUS,
            fill=style.box_fill,
            outline=style.box_border,
            width=BOX_BORDER_WIDTH,
        )

    def _draw_name_tag(
        self,
        canvas: Image.Image,
        metrics: LayoutMetrics,
        style: StyleProfile,
        name: str,
        fonts: BubbleFonts,
    ) -> None:
        tag_w, tag_h = NAME_TAG_SIZE
        tag_y = metrics.box_top - NAME_TAG_RISE
        draw_rounded_rect(
            canvas,
            (BOX_MARGIN, tag_y, BOX_MARGIN + tag_w, tag_y + tag_h),
            NAME_TAG_RADIUS,
            fill=style.box_border,
        )
        ImageDraw.Draw(canvas).text(
            (BOX_MARGIN + tag_w / 2, tag_y + tag_h / 2),
            name,
            font=fonts.name,
            fill=NAME_TAG_TEXT_COLOR,
            anchor="mm",
        )

    def _draw_text(
        self,
        canvas: Image.Image,
        metrics: LayoutMetrics,
        style: StyleProfile,
        request: RenderRequest,
        fonts: BubbleFonts,
    ) -> None:
        draw = ImageDraw.Draw(canvas)
        text_x = BOX_MARGIN + BOX_PADDING
        text_y = metrics.box_top + TEXT_TOP_OFFSET
        if request.wants_inner_thought:
            text_y = draw_wrapped(
                draw,
                thought_line(request.inner_thought or ""),
                text_x,
                text_y,
                MAX_TEXT_WIDTH,
                THOUGHT_LINE_HEIGHT,
                font=fonts.thought,
                fill=style.text_sub,
            )
            text_y += THOUGHT_SPACING
        draw_wrapped(
            draw,
            request.text,
            text_x,
            text_y,
            MAX_TEXT_WIDTH,
            MAIN_LINE_HEIGHT,
            font=fonts.main,
            fill=style.text_main,
        )


__all__ = [
    "BubbleFonts",
    "BubbleRenderError",
    "ChatBubbleGenerator",
    "compute_layout_metrics",
    "load_bubble_fonts",
    "thought_line",
]
