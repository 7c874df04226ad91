"""Text whose size is derived from a physical measurement."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..config import get_layout_config
from ..logging_utils import debug_log_call
from ..solver.expression import Expression, Variable
from ..surface import BoundingBox, RenderSurface
from .base import display_attributes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextMetrics:
    """Size ratios and ink offset captured from one measurement."""

    width_ratio: float
    height_ratio: float
    offset_x: float
    offset_y: float

    @classmethod
    def from_box(cls, box: BoundingBox, x: float, y: float, font_size: float) -> "TextMetrics":
        return cls(
            width_ratio=box.width / font_size,
            height_ratio=box.height / font_size,
            offset_x=box.x - x,
            offset_y=box.y - y,
        )


class Text:
    """Label whose ``width`` and ``height`` scale with ``font_size``.

    The edge and center expressions are rebuilt by :meth:`set_text`.
    Expressions read before that call keep the old metrics; constraints built
    from them must be rebuilt.
    """

    kind = "text"

    def __init__(
        self,
        surface: RenderSurface,
        text: str,
        x: float = 0.0,
        y: float = 0.0,
        font_size: Optional[float] = None,
        attributes: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ):
        if font_size is None:
            font_size = get_layout_config().default_font_size
        if font_size <= 0:
            raise ValueError(f"font size must be positive, got {font_size}")
        self.surface = surface
        self.attributes = display_attributes(attributes, extra)
        self.x = Variable("x", x)
        self.y = Variable("y", y)
        self.font_size = Variable("font_size", font_size)
        self.text = text
        self.metrics = self._measure()
        self._build_expressions()

    @debug_log_call(logger, name="Text.measure")
    def _measure(self) -> TextMetrics:
        with self.surface.scratch() as region:
            node = self.surface.create_node(self.kind, {**self.attributes, **self.geometry_attributes()})
            self.surface.set_text(node, self.text)
            self.surface.append(region, node)
            box = self.surface.measure(node)
        return TextMetrics.from_box(box, self.x.value, self.y.value, self.font_size.value)

    def _build_expressions(self) -> None:
        metrics = self.metrics
        self.width: Expression = self.font_size * metrics.width_ratio
        self.height: Expression = self.font_size * metrics.height_ratio
        self.left_edge = self.x + metrics.offset_x
        self.baseline = self.y.expression()
        self.top_edge = self.y + metrics.offset_y
        self.right_edge = self.left_edge + self.width
        self.bottom_edge = self.top_edge + self.height
        self.center_x = self.left_edge + self.width / 2
        self.center_y = self.top_edge + self.height / 2

    def set_text(self, text: str) -> "Text":
        """Replace the content and re-measure it."""

        previous = self.text
        self.text = text
        try:
            self.metrics = self._measure()
        except Exception:
            self.text = previous
            raise
        self._build_expressions()
        logger.debug("Re-measured text %r -> %s", text, self.metrics)
        return self

    def geometry_attributes(self) -> Dict[str, float]:
        return {"x": self.x.value, "y": self.y.value, "font-size": self.font_size.value}

    def render(self, surface: RenderSurface, parent: Any) -> Any:
        node = surface.create_node(self.kind, self.attributes)
        surface.set_text(node, self.text)
        surface.append(parent, node)
        surface.set_attributes(node, self.geometry_attributes())
        return node

    def __repr__(self) -> str:
        return f"Text({self.text!r}, x={self.x.value:g}, y={self.y.value:g}, font_size={self.font_size.value:g})"


__all__ = ["Text", "TextMetrics"]
