"""
Hair Integration

Modules:
- styles: preset hairstyle catalog
- generation: hairstyle simulation through the image generation proxy
- service: HTTP surface for web clients
"""

from .styles import STYLE_OPTIONS, StyleOption, get_style
from .generation import HairstyleClient, HairstyleGenerator

__all__ = [
    "STYLE_OPTIONS",
    "StyleOption",
    "get_style",
    "HairstyleClient",
    "HairstyleGenerator",
]
