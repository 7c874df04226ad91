"""Concrete geometric elements."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..solver.expression import Variable
from ..surface import RenderSurface
from .base import Element


class Rect(Element):
    kind = "rect"


class Image(Element):
    """Raster or vector image placed into a solved box."""

    kind = "image"

    def __init__(self, href: str, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0,
                 attributes: Optional[Mapping[str, Any]] = None, **extra: Any):
        super().__init__(None, x, y, width, height, attributes, **extra)
        self.attributes["href"] = href


class Point:
    """Zero-size anchor. It takes part in layout but renders nothing."""

    width = None
    height = None

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = Variable("x", x)
        self.y = Variable("y", y)
        self.left_edge = self.right_edge = self.center_x = self.x.expression()
        self.top_edge = self.bottom_edge = self.center_y = self.y.expression()

    def coordinates(self) -> Dict[str, float]:
        return {"x": self.x.value, "y": self.y.value}

    def render(self, surface: RenderSurface, parent: Any) -> None:
        return None

    def __repr__(self) -> str:
        return f"Point(x={self.x.value:g}, y={self.y.value:g})"


__all__ = ["Rect", "Image", "Point"]
