"""Groups: ordered children plus a bounding box that tracks them."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .. import builders
from ..builders import Selector
from ..solver.constraint import Constraint, equal, greater_equal, less_equal
from ..solver.strength import MEDIUM, WEAK, Strength
from ..surface import RenderSurface
from .base import Element

logger = logging.getLogger(__name__)

# side -> (edge attribute, whether the group edge lies at the low end)
_SIDES = {
    "top": ("top_edge", True),
    "bottom": ("bottom_edge", False),
    "left": ("left_edge", True),
    "right": ("right_edge", False),
}


class Group(Element):
    """Aggregates children and accumulates constraints through chained builders.

    ``space_horizontally`` and ``space_vertically`` mark the first and last
    children as extremal. :meth:`constraints` then ties the group's edges to
    those children exactly and keeps every other child inside the box.
    """

    kind = "g"

    def __init__(self, children: Iterable[Any] = (), attributes: Optional[Mapping[str, Any]] = None, **extra: Any):
        super().__init__(None, attributes=attributes, **extra)
        self.children.extend(children)
        self._constraints: List[Constraint] = []
        self.top_most: Optional[Any] = None
        self.bottom_most: Optional[Any] = None
        self.left_most: Optional[Any] = None
        self.right_most: Optional[Any] = None

    def _extend(self, constraints: List[Constraint]) -> "Group":
        self._constraints.extend(constraints)
        return self

    def fix_all(self, selector: Selector, strength: Optional[Strength] = None) -> "Group":
        accessor = builders.resolve_selector(selector)
        return self._extend(builders.fix(*(accessor(child) for child in self.children), strength=strength))

    def align_all(self, selector: Selector, strength: Optional[Strength] = None) -> "Group":
        return self._extend(builders.align_all(self.children, selector, strength))

    def distribute(self, selector: Selector, strength: Optional[Strength] = None) -> "Group":
        return self._extend(builders.distribute(self.children, selector, strength))

    def space_horizontally(self, distance: float = 0.0, strength: Optional[Strength] = None) -> "Group":
        if self.children:
            self.left_most = self.children[0]
            self.right_most = self.children[-1]
        return self._extend(builders.space_horizontally(self.children, distance, strength))

    def space_vertically(self, distance: float = 0.0, strength: Optional[Strength] = None) -> "Group":
        if self.children:
            self.top_most = self.children[0]
            self.bottom_most = self.children[-1]
        return self._extend(builders.space_vertically(self.children, distance, strength))

    def extremal(self) -> Dict[str, Optional[Any]]:
        return {
            "top": self.top_most,
            "bottom": self.bottom_most,
            "left": self.left_most,
            "right": self.right_most,
        }

    def _bounding_constraints(self) -> List[Constraint]:
        out: List[Constraint] = []
        for side, child in self.extremal().items():
            if child is None:
                continue
            edge_name, low = _SIDES[side]
            group_edge = getattr(self, edge_name)
            out.append(equal(group_edge, getattr(child, edge_name), MEDIUM))
            bound = less_equal if low else greater_equal
            for other in self.children:
                if other is child:
                    continue
                out.append(bound(group_edge, getattr(other, edge_name), WEAK))
        return out

    def constraints(self) -> List[Constraint]:
        """Builder constraints plus bounding-box constraints, computed fresh."""

        bounding = self._bounding_constraints()
        logger.debug(
            "Group with %d children: %d builder + %d bounding constraints",
            len(self.children),
            len(self._constraints),
            len(bounding),
        )
        return list(self._constraints) + bounding

    def render(self, surface: RenderSurface, parent: Any) -> Any:
        node = surface.create_node(self.kind, self.attributes)
        surface.append(parent, node)
        for child in self.children:
            child.render(surface, node)
        return node

    def __repr__(self) -> str:
        return f"Group({len(self.children)} children)"


__all__ = ["Group"]
