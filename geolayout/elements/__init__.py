"""Renderable elements exposing the geometric contract."""

from .base import RESERVED_ATTRIBUTES, Element, Geometric, display_attributes
from .shapes import Image, Point, Rect
from .text import Text, TextMetrics
from .group import Group
from .canvas import Canvas

__all__ = [
    "RESERVED_ATTRIBUTES",
    "Element",
    "Geometric",
    "display_attributes",
    "Image",
    "Point",
    "Rect",
    "Text",
    "TextMetrics",
    "Group",
    "Canvas",
]
