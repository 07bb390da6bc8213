"""Pillow drawing primitives shared by the bubble renderers.

Semi-transparent shapes are drawn on a transparent layer and alpha-composited
onto the canvas, because ``ImageDraw`` replaces RGBA pixels instead of
blending them.
"""

from __future__ import annotations

import io
from typing import Optional, Tuple

from PIL import Image, ImageChops, ImageDraw, ImageFilter

from galbubble.models import RGBA

Box = Tuple[float, float, float, float]

TRANSPARENT: RGBA = (0, 0, 0, 0)


def new_canvas(size: Tuple[int, int], color: RGBA = TRANSPARENT) -> Image.Image:
    return Image.new("RGBA", size, color)


def _ramp(size: Tuple[int, int], horizontal: bool) -> Image.Image:
    ramp = Image.linear_gradient("L")
    if horizontal:
        ramp = ramp.transpose(Image.Transpose.TRANSPOSE)
    return ramp.resize(size, Image.BILINEAR)


def linear_gradient(size: Tuple[int, int], start: RGBA, end: RGBA, *, horizontal: bool = False) -> Image.Image:
    """Two-stop gradient, ``start`` at the top (or left) edge and ``end`` at the bottom (or right)."""
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid gradient size: {size}")
    start_layer = Image.new("RGBA", size, start)
    end_layer = Image.new("RGBA", size, end)
    return Image.composite(end_layer, start_layer, _ramp(size, horizontal))


def rounded_mask(size: Tuple[int, int], box: Box, radius: float) -> Image.Image:
    mask = Image.new("L", size, 0)
    ImageDraw.Draw(mask).rounded_rectangle(box, radius=radius, fill=255)
    return mask


def draw_rounded_rect(
    canvas: Image.Image,
    box: Box,
    radius: float,
    *,
    fill: Optional[RGBA] = None,
    outline: Optional[RGBA] = None,
    width: int = 0,
) -> None:
    layer = new_canvas(canvas.size)
    ImageDraw.Draw(layer).rounded_rectangle(box, radius=radius, fill=fill, outline=outline, width=width)
    canvas.alpha_composite(layer)


def fill_rect(canvas: Image.Image, box: Box, fill: RGBA) -> None:
    layer = new_canvas(canvas.size)
    ImageDraw.Draw(layer).rectangle(box, fill=fill)
    canvas.alpha_composite(layer)


def composite_clipped(canvas: Image.Image, layer: Image.Image, mask: Image.Image) -> None:
    """Composite ``layer`` onto ``canvas`` only where ``mask`` is set."""
    clipped = layer.copy()
    clipped.putalpha(ImageChops.multiply(layer.getchannel("A"), mask))
    canvas.alpha_composite(clipped)


def soft_shadow(image: Image.Image, color: RGBA, blur: int) -> Tuple[Image.Image, int]:
    """Return a blurred silhouette of ``image`` and the padding added on each side."""
    padding = blur * 2
    size = (image.width + padding * 2, image.height + padding * 2)
    alpha = Image.new("L", size, 0)
    alpha.paste(image.getchannel("A"), (padding, padding))
    alpha = alpha.point(lambda value: value * color[3] // 255)
    if blur > 0:
        alpha = alpha.filter(ImageFilter.GaussianBlur(blur))
    shadow = Image.new("RGBA", size, color[:3] + (0,))
    shadow.putalpha(alpha)
    return shadow, padding


def paste_layer(canvas: Image.Image, image: Image.Image, position: Tuple[float, float]) -> None:
    # paste() clips at the canvas edges; alpha_composite(dest=...) rejects negative offsets.
    layer = new_canvas(canvas.size)
    layer.paste(image, (int(round(position[0])), int(round(position[1]))))
    canvas.alpha_composite(layer)


def draw_text_with_shadow(
    canvas: Image.Image,
    xy: Tuple[float, float],
    text: str,
    *,
    font,
    fill: RGBA,
    shadow: RGBA,
    blur: int,
    anchor: str = "mm",
) -> None:
    shadow_layer = new_canvas(canvas.size)
    ImageDraw.Draw(shadow_layer).text(xy, text, font=font, fill=shadow, anchor=anchor)
    if blur > 0:
        shadow_layer = shadow_layer.filter(ImageFilter.GaussianBlur(blur))
    canvas.alpha_composite(shadow_layer)
    text_layer = new_canvas(canvas.size)
    ImageDraw.Draw(text_layer).text(xy, text, font=font, fill=fill, anchor=anchor)
    canvas.alpha_composite(text_layer)


def encode_png(image: Image.Image) -> bytes:
    output = io.BytesIO()
    image.save(output, format="PNG")
    return output.getvalue()


def decode_image(data: bytes) -> Image.Image:
    with Image.open(io.BytesIO(data)) as decoded:
        decoded.load()
        return decoded.convert("RGBA")


def scratch_draw() -> ImageDraw.ImageDraw:
    """Drawing context on a throw-away surface, used only for measuring."""
    return ImageDraw.Draw(Image.new("RGBA", (1, 1), TRANSPARENT))


__all__ = [
    "Box",
    "TRANSPARENT",
    "composite_clipped",
    "decode_image",
    "draw_rounded_rect",
    "draw_text_with_shadow",
    "encode_png",
    "fill_rect",
    "linear_gradient",
    "new_canvas",
    "paste_layer",
    "rounded_mask",
    "scratch_draw",
    "soft_shadow",
]
