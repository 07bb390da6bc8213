"""Greedy per-character text wrapping for dialogue boxes.

Lines break between any two code points rather than at spaces, which suits
Chinese and Japanese text. Latin words may be split mid-word. Measuring and
drawing share :func:`wrap_lines`, so a height measured on a scratch surface
matches what is later drawn on the real canvas.
"""

from __future__ import annotations

from typing import List

from galbubble.models import RGBA


def _wrap_paragraph(draw, paragraph: str, font, max_width: float) -> List[str]:
    lines: List[str] = []
    line = ""
    for ch in paragraph:
        if line and draw.textlength(line + ch, font=font) > max_width:
            lines.append(line)
            line = ch
        else:
            line += ch
    lines.append(line)
    return lines


def wrap_lines(draw, text: str, font, max_width: float) -> List[str]:
    """Split ``text`` into lines no wider than ``max_width``.

    Always returns at least one line. A single character wider than the
    budget still occupies a line of its own. ``\\n`` forces a break.
    """
    lines: List[str] = []
    for paragraph in (text or "").split("\n"):
        lines.extend(_wrap_paragraph(draw, paragraph, font, max_width))
    return lines


def measure_height(draw, text: str, font, max_width: float, line_height: int) -> int:
    return max(1, len(wrap_lines(draw, text, font, max_width))) * line_height


def draw_wrapped(
    draw,
    text: str,
    x: float,
    y: float,
    max_width: float,
    line_height: int,
    *,
    font,
    fill: RGBA,
) -> float:
    """Draw wrapped ``text`` from ``(x, y)`` and return the y cursor below the last line."""
    for line in wrap_lines(draw, text, font, max_width):
        if line:
            draw.text((x, y), line, font=font, fill=fill, anchor="la")
        y += line_height
    return y


__all__ = ["draw_wrapped", "measure_height", "wrap_lines"]
