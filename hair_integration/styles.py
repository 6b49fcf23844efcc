"""
Preset hairstyle catalog.

The catalog is static: options are defined once at import time and never
mutated during a session.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class StyleOption:
    """A preset hairstyle reference image."""

    id: int
    name: str
    image: str
    description: str


STYLE_OPTIONS: Tuple[StyleOption, ...] = (
    StyleOption(
        id=1,
        name="Hair NO1",
        image="NO1.png",
        description="Classic bob style with clean lines.",
    ),
    StyleOption(
        id=2,
        name="Hair NO2",
        image="NO2.png",
        description="Elegant long layers for a sophisticated look.",
    ),
    StyleOption(
        id=3,
        name="Hair NO3",
        image="NO3.png",
        description="Trendy short cut with modern texture.",
    ),
    StyleOption(
        id=4,
        name="Hair NO4",
        image="NO4.png",
        description="Beautiful wavy style perfect for volume.",
    ),
    StyleOption(
        id=5,
        name="Hair NO5",
        image="NO5.png",
        description="Stylish medium length with natural flow.",
    ),
    StyleOption(
        id=6,
        name="Hair NO6",
        image="NO6.png",
        description="Chic pixie cut for a bold statement.",
    ),
)

_STYLES_BY_ID: Dict[int, StyleOption] = {style.id: style for style in STYLE_OPTIONS}


def get_style(style_id: int) -> Optional[StyleOption]:
    """Return the style with the given id, or None if it is unknown."""
    return _STYLES_BY_ID.get(style_id)
