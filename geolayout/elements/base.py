"""Geometric contract shared by every renderable element."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, Union, runtime_checkable

from ..solver.expression import Expression, Variable
from ..surface import RenderSurface

Value = Union[Variable, Expression]

RESERVED_ATTRIBUTES = frozenset({"x", "y", "width", "height", "font-size"})


@runtime_checkable
class Geometric(Protocol):
    """Anything exposing the six edge/center values can be laid out."""

    left_edge: Value
    top_edge: Value
    right_edge: Value
    bottom_edge: Value
    center_x: Value
    center_y: Value


def display_attributes(attributes: Optional[Mapping[str, Any]], extra: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge opaque attributes, turning ``stroke_width`` into ``stroke-width``.

    Geometry keys are dropped: they are owned by the solver.
    """

    merged: Dict[str, Any] = dict(attributes or {})
    for key, value in extra.items():
        merged[key.replace("_", "-")] = value
    return {key: value for key, value in merged.items() if key not in RESERVED_ATTRIBUTES}


class Element:
    """Node with free ``x``, ``y``, ``width`` and ``height`` variables."""

    kind = "rect"

    def __init__(
        self,
        kind: Optional[str] = None,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
        attributes: Optional[Mapping[str, Any]] = None,
        **extra: Any,
    ):
        if kind is not None:
            self.kind = kind
        self.attributes = display_attributes(attributes, extra)
        self.children: List[Any] = []

        self.x = Variable("x", x)
        self.y = Variable("y", y)
        self.width = Variable("width", width)
        self.height = Variable("height", height)

        self.left_edge = self.x.expression()
        self.top_edge = self.y.expression()
        self.right_edge = self.left_edge + self.width
        self.bottom_edge = self.top_edge + self.height
        self.center_x = self.left_edge + self.width / 2
        self.center_y = self.top_edge + self.height / 2

    def append(self, *children: Any) -> "Element":
        self.children.extend(children)
        return self

    def geometry_attributes(self) -> Dict[str, float]:
        return {
            "x": self.x.value,
            "y": self.y.value,
            "width": self.width.value,
            "height": self.height.value,
        }

    def render(self, surface: RenderSurface, parent: Any) -> Any:
        node = surface.create_node(self.kind, self.attributes)
        surface.append(parent, node)
        for child in self.children:
            child.render(surface, node)
        surface.set_attributes(node, self.geometry_attributes())
        return node

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x.value:g}, y={self.y.value:g}, "
            f"width={self.width.value:g}, height={self.height.value:g})"
        )


__all__ = ["Element", "Geometric", "Value", "RESERVED_ATTRIBUTES", "display_attributes"]
