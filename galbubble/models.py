"""Dataclasses and shared type definitions for galbubble."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from PIL import Image


RGBA = Tuple[int, int, int, int]

PERSONALITIES: Tuple[str, ...] = ("loli", "ojou", "milf", "danshi")
EMOTIONS: Tuple[str, ...] = ("happy", "sad", "angry", "think")


@dataclass(frozen=True)
class RenderRequest:
    text: str
    emotion: str
    personality: str
    show_favorability: bool = False
    favorability: Optional[int] = None
    favorability_delta: Optional[int] = None
    show_inner_thought: bool = False
    inner_thought: Optional[str] = None

    def __post_init__(self) -> None:
        if self.emotion not in EMOTIONS:
            raise ValueError(f"Unknown emotion '{self.emotion}'. Expected one of: {', '.join(EMOTIONS)}.")
        if self.personality not in PERSONALITIES:
            raise ValueError(
                f"Unknown personality '{self.personality}'. Expected one of: {', '.join(PERSONALITIES)}."
            )

    @property
    def wants_favorability(self) -> bool:
        return self.show_favorability and self.favorability is not None

    @property
    def wants_inner_thought(self) -> bool:
        return self.show_inner_thought and bool(self.inner_thought)


@dataclass(frozen=True)
class StyleProfile:
    bg_gradient: Tuple[RGBA, RGBA]
    box_fill: RGBA
    box_border: RGBA
    text_main: RGBA
    text_sub: RGBA
    bar_start: RGBA
    bar_end: RGBA
    font: Tuple[str, ...]


@dataclass(frozen=True)
class PersonalityInfo:
    name: str
    folder_name: str


@dataclass(frozen=True)
class KeyedSprite:
    image: "Image.Image"
    width: float
    height: float


@dataclass(frozen=True)
class LayoutMetrics:
    thought_height: int
    text_height: int
    box_height: int
    height_delta: int
    width: int
    height: int
    box_top: int

    @property
    def total_text_height(self) -> int:
        return self.thought_height + self.text_height


__all__ = [
    "EMOTIONS",
    "KeyedSprite",
    "LayoutMetrics",
    "PERSONALITIES",
    "PersonalityInfo",
    "RGBA",
    "RenderRequest",
    "StyleProfile",
]
