"""Static per-personality styles, character roster and sprite lookup tables."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from galbubble.models import PersonalityInfo, RGBA, StyleProfile
from galbubble.utils import hex_color

# Font file names tried in order through Pillow's font search path.
# CJK-capable faces first, then a Latin fallback most Linux hosts ship.
DEFAULT_FONT_FAMILY: Tuple[str, ...] = (
    "msyh.ttc",
    "simhei.ttf",
    "wqy-microhei.ttc",
    "NotoSansCJK-Regular.ttc",
    "DejaVuSans.ttf",
)
# CJK bold faces. No CJK face ships an italic, so italic uses the regular family.
BOLD_FONT_FAMILY: Tuple[str, ...] = (
    "msyhbd.ttc",
    "NotoSansCJK-Bold.ttc",
)

STYLE_PROFILES: Mapping[str, StyleProfile] = MappingProxyType(
    {
        "loli": StyleProfile(
            bg_gradient=(hex_color("#FFF0F5"), hex_color("#FFE4E1")),
            box_fill=hex_color("#FFFFFFE6"),
            box_border=hex_color("#FF69B4"),
            text_main=hex_color("#FF1493"),
            text_sub=hex_color("#888888"),
            bar_start=hex_color("#FFB6C1"),
            bar_end=hex_color("#FF1493"),
            font=DEFAULT_FONT_FAMILY,
        ),
        "ojou": StyleProfile(
            bg_gradient=(hex_color("#F3E5F5"), hex_color("#E1BEE7")),
            box_fill=hex_color("#281E32E6"),
            box_border=hex_color("#FFD700"),
            text_main=hex_color("#FFFFFF"),
            text_sub=hex_color("#CCCCCC"),
            bar_start=hex_color("#9370DB"),
            bar_end=hex_color("#4B0082"),
            font=DEFAULT_FONT_FAMILY,
        ),
        "milf": StyleProfile(
            bg_gradient=(hex_color("#FFF8E1"), hex_color("#FFE0B2")),
            box_fill=hex_color("#FFFAF0F2"),
            box_border=hex_color("#FFA07A"),
            text_main=hex_color("#8B4513"),
            text_sub=hex_color("#A0522D"),
            bar_start=hex_color("#FFDAB9"),
            bar_end=hex_color("#FF7F50"),
            font=DEFAULT_FONT_FAMILY,
        ),
        "danshi": StyleProfile(
            bg_gradient=(hex_color("#E0F7FA"), hex_color("#B2EBF2")),
            box_fill=hex_color("#FFFFFFE6"),
            box_border=hex_color("#00CED1"),
            text_main=hex_color("#008B8B"),
            text_sub=hex_color("#5F9EA0"),
            bar_start=hex_color("#AFEEEE"),
            bar_end=hex_color("#00CED1"),
            font=DEFAULT_FONT_FAMILY,
        ),
    }
)


PERSONALITY_INFO: Mapping[str, PersonalityInfo] = MappingProxyType(
    {
        "loli": PersonalityInfo(name="奈奈", folder_name="loli"),
        "ojou": PersonalityInfo(name="蕾娜", folder_name="gril"),
        "milf": PersonalityInfo(name="小百合", folder_name="woman"),
        "danshi": PersonalityInfo(name="小薰", folder_name="mft"),
    }
)

SPRITE_FOLDERS: Mapping[str, str] = MappingProxyType(
    {key: info.folder_name for key, info in PERSONALITY_INFO.items()}
)
SPRITE_FILES: Mapping[str, str] = MappingProxyType(
    {
        "happy": "happy.png",
        "sad": "sad.png",
        "angry": "angry.png",
        "think": "think.png",
    }
)

# Fixed gauge and annotation colours shared by every personality.
BAR_TRACK_COLOR: RGBA = (0, 0, 0, 128)
BAR_NEGATIVE_NEAR: RGBA = hex_color("#8B0000")
BAR_NEGATIVE_FAR: RGBA = hex_color("#FF0000")
BAR_DIVIDER_COLOR: RGBA = (255, 255, 255, 230)
BAR_LABEL_COLOR: RGBA = (255, 255, 255, 255)
BAR_LABEL_SHADOW: RGBA = (0, 0, 0, 255)
DELTA_POSITIVE_COLOR: RGBA = hex_color("#FF69B4")
DELTA_NEGATIVE_COLOR: RGBA = hex_color("#B0C4DE")
NAME_TAG_TEXT_COLOR: RGBA = (255, 255, 255, 255)
SPRITE_SHADOW_COLOR: RGBA = (0, 0, 0, 26)


def get_style(personality: str) -> StyleProfile:
    try:
        return STYLE_PROFILES[personality]
    except KeyError:
        raise ValueError(f"No style profile for personality '{personality}'.") from None


def get_personality_info(personality: str) -> PersonalityInfo:
    try:
        return PERSONALITY_INFO[personality]
    except KeyError:
        raise ValueError(f"No character registered for personality '{personality}'.") from None


__all__ = [
    "BAR_DIVIDER_COLOR",
    "BAR_LABEL_COLOR",
    "BAR_LABEL_SHADOW",
    "BAR_NEGATIVE_FAR",
    "BAR_NEGATIVE_NEAR",
    "BAR_TRACK_COLOR",
    "BOLD_FONT_FAMILY",
    "DEFAULT_FONT_FAMILY",
    "DELTA_NEGATIVE_COLOR",
    "DELTA_POSITIVE_COLOR",
    "NAME_TAG_TEXT_COLOR",
    "PERSONALITY_INFO",
    "SPRITE_FILES",
    "SPRITE_FOLDERS",
    "SPRITE_SHADOW_COLOR",
    "STYLE_PROFILES",
    "get_personality_info",
    "get_style",
]
