"""Command line entry point: render one dialogue bubble to a PNG file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from galbubble.bubble import BubbleRenderError, ChatBubbleGenerator
from galbubble.config import BubbleSettings, load_settings
from galbubble.models import EMOTIONS, PERSONALITIES, RenderRequest

logger = logging.getLogger("galbubble.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="galbubble", description="Render a character dialogue bubble.")
    parser.add_argument("text", help="Dialogue text to place in the box.")
    parser.add_argument("--personality", choices=PERSONALITIES, default="loli")
    parser.add_argument("--emotion", choices=EMOTIONS, default="happy")
    parser.add_argument("--favorability", type=int, default=None, help="Gauge value in [-100, 100].")
    parser.add_argument("--delta", type=int, default=None, help="Signed change shown next to the gauge.")
    parser.add_argument("--thought", default=None, help="Inner thought line shown above the dialogue.")
    parser.add_argument(
        "--show-favorability",
        dest="show_favorability",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override GALBUBBLE_SHOW_FAVORABILITY.",
    )
    parser.add_argument(
        "--show-thought",
        dest="show_thought",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Override GALBUBBLE_SHOW_INNER_THOUGHT.",
    )
    parser.add_argument("--base-path", type=Path, default=None, help="Sprite root directory.")
    parser.add_argument("--output", "-o", type=Path, default=Path("bubble.png"))
    return parser


def request_from_args(args: argparse.Namespace, settings: BubbleSettings) -> RenderRequest:
    show_favorability = settings.show_favorability if args.show_favorability is None else args.show_favorability
    show_thought = settings.show_inner_thought if args.show_thought is None else args.show_thought
    return RenderRequest(
        text=args.text,
        emotion=args.emotion,
        personality=args.personality,
        show_favorability=show_favorability,
        favorability=args.favorability,
        favorability_delta=args.delta,
        show_inner_thought=show_thought,
        inner_thought=args.thought,
    )


def main(argv: Optional[Sequence[str]] = None, settings: Optional[BubbleSettings] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("PIL").setLevel(logging.ERROR)

    request = request_from_args(args, settings)
    generator = ChatBubbleGenerator(args.base_path, settings=settings)
    try:
        png_bytes = generator.generate_bubble_image(request)
    except BubbleRenderError as exc:
        logger.error("Rendering failed: %s", exc)
        return 1
    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_bytes(png_bytes)
    except OSError as exc:
        logger.error("Unable to write %s: %s", args.output, exc)
        return 1
    logger.info("Wrote %s (%d bytes).", args.output, len(png_bytes))
    return 0


__all__ = ["build_parser", "main", "request_from_args"]
