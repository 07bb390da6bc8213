"""Async rendering and chat attachment helpers."""

from __future__ import annotations

import asyncio
import io
from typing import Optional

import discord

from galbubble.bubble import ChatBubbleGenerator
from galbubble.models import RenderRequest
from galbubble.utils import utc_now


async def render_bubble(generator: ChatBubbleGenerator, request: RenderRequest) -> bytes:
    """Render off the event loop. Callers that need a deadline wrap this in ``asyncio.wait_for``."""
    return await asyncio.to_thread(generator.generate_bubble_image, request)


def bubble_filename(request: RenderRequest, unique_fragment: Optional[str] = None) -> str:
    fragment = unique_fragment or str(int(utc_now().timestamp() * 1000))
    return f"bubble-{request.personality}-{request.emotion}-{fragment}.png"


def bubble_file(
    png_bytes: bytes,
    request: RenderRequest,
    *,
    unique_fragment: Optional[str] = None,
) -> discord.File:
    return discord.File(fp=io.BytesIO(png_bytes), filename=bubble_filename(request, unique_fragment))


async def render_bubble_file(
    generator: ChatBubbleGenerator,
    request: RenderRequest,
    *,
    unique_fragment: Optional[str] = None,
) -> discord.File:
    png_bytes = await render_bubble(generator, request)
    return bubble_file(png_bytes, request, unique_fragment=unique_fragment)


__all__ = ["bubble_file", "bubble_filename", "render_bubble", "render_bubble_file"]
