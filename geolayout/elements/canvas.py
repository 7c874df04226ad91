"""Root canvas: owns the solver and drives solve and render passes."""

from __future__ import annotations

import logging
from collections import abc
from typing import Any, Iterable, List, Optional, Union

from ..config import get_layout_config
from ..solver.constraint import Constraint
from ..solver.core import SolveResult, Solver, SolverOptions
from ..solver.expression import Variable
from ..solver.strength import REQUIRED
from ..surface import RenderSurface

logger = logging.getLogger(__name__)

ConstraintInput = Union[Constraint, Iterable["ConstraintInput"]]


def _flatten(items: Iterable[ConstraintInput]) -> Iterable[Constraint]:
    for item in items:
        if isinstance(item, Constraint):
            yield item
        elif hasattr(item, "constraints") and callable(item.constraints):
            yield from _flatten(item.constraints())
        elif isinstance(item, abc.Iterable) and not isinstance(item, (str, bytes)):
            yield from _flatten(item)
        else:
            raise TypeError(f"expected a constraint or a sequence of constraints, got {type(item).__name__}")


class Canvas:
    """Top-level frame whose viewport is pinned at required strength."""

    def __init__(
        self,
        surface: RenderSurface,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
        options: Optional[SolverOptions] = None,
    ):
        self.surface = surface
        self.solver = Solver(options)
        self.children: List[Any] = []
        self.last_result: Optional[SolveResult] = None

        self.x = Variable("x", x)
        self.y = Variable("y", y)
        self.width = Variable("width", width)
        self.height = Variable("height", height)
        for variable in (self.x, self.y, self.width, self.height):
            self.solver.add_stay(variable, REQUIRED)

        self.left_edge = self.x.expression()
        self.top_edge = self.y.expression()
        self.right_edge = self.left_edge + self.width
        self.bottom_edge = self.top_edge + self.height
        self.center_x = self.left_edge + self.width / 2
        self.center_y = self.top_edge + self.height / 2
        logger.info("Canvas created with viewport (%g, %g, %g, %g)", x, y, width, height)

    def append(self, *children: Any) -> "Canvas":
        self.children.extend(children)
        return self

    def constrain(self, *items: ConstraintInput) -> "Canvas":
        """Register constraints (or nested sequences of them) and re-solve.

        Groups may be passed directly; their :meth:`constraints` are used.
        """

        constraints = list(_flatten(items))
        self.solver.add_constraints(constraints)
        logger.info("Registered %d constraints", len(constraints))
        if get_layout_config().auto_solve:
            self.solve()
        return self

    def solve(self) -> SolveResult:
        self.last_result = self.solver.solve()
        return self.last_result

    def render(self) -> Any:
        """Write the viewport and render every child. Call after solving."""

        root = self.surface.root
        self.surface.set_attributes(
            root,
            {
                "width": self.width.value,
                "height": self.height.value,
                "viewBox": " ".join(
                    f"{value:g}" for value in (self.x.value, self.y.value, self.width.value, self.height.value)
                ),
            },
        )
        for child in self.children:
            child.render(self.surface, root)
        logger.info("Rendered %d top-level elements", len(self.children))
        return root

    def to_string(self) -> str:
        return self.surface.to_string()


__all__ = ["Canvas"]
