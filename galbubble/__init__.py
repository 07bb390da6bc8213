"""galbubble package: character dialogue bubble rendering."""

from . import attachments, bubble, canvas, config, favorability, fonts, layout, models, sprites, styles, utils  # noqa: F401
from .bubble import BubbleRenderError, ChatBubbleGenerator
from .models import RenderRequest

__all__ = [
    "BubbleRenderError",
    "ChatBubbleGenerator",
    "RenderRequest",
    "attachments",
    "bubble",
    "canvas",
    "config",
    "favorability",
    "fonts",
    "layout",
    "models",
    "sprites",
    "styles",
    "utils",
]
