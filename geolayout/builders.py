"""Free functions translating layout intents into constraints."""

from __future__ import annotations

import operator
from typing import Any, Callable, List, Optional, Sequence, Union

from .config import get_layout_config
from .errors import InvalidDistributionArity
from .solver.constraint import Constraint, equal, stay
from .solver.expression import Expression, Operand
from .solver.strength import REQUIRED, Strength

Selector = Union[str, Callable[[Any], Operand]]


def resolve_selector(selector: Optional[Selector]) -> Callable[[Any], Operand]:
    """Turn an attribute name, callable or ``None`` into an accessor."""

    if selector is None:
        return lambda item: item
    if isinstance(selector, str):
        return operator.attrgetter(selector)
    return selector


def _strength(strength: Optional[Strength]) -> Strength:
    return get_layout_config().default_strength if strength is None else strength


def _values(items: Sequence[Any], selector: Optional[Selector]) -> List[Operand]:
    accessor = resolve_selector(selector)
    return [accessor(item) for item in items]


def fix(*values: Operand, strength: Optional[Strength] = None) -> List[Constraint]:
    """Stay constraints pinning each value to what it is now."""

    strength = _strength(strength)
    return [stay(value, strength) for value in values]


def align(
    a: Operand,
    b: Operand,
    distance: float = 0.0,
    strength: Optional[Strength] = None,
    weight: float = 1.0,
) -> Constraint:
    """``a - b == distance``."""

    return equal(Expression.coerce(a).minus(b), distance, _strength(strength), weight)


def fill(
    a: Any,
    b: Any,
    offset_x: float = 0.0,
    offset_y: Optional[float] = None,
    strength: Optional[Strength] = None,
) -> List[Constraint]:
    """Make ``b`` fill ``a`` with an inset of ``offset_x``/``offset_y`` on each side."""

    if offset_y is None:
        offset_y = offset_x
    return [
        align(b.top_edge, a.top_edge, offset_y, strength),
        align(b.right_edge, a.right_edge, -offset_x, strength),
        align(b.bottom_edge, a.bottom_edge, -offset_y, strength),
        align(b.left_edge, a.left_edge, offset_x, strength),
    ]


def center(a: Any, b: Any, strength: Optional[Strength] = None) -> List[Constraint]:
    """Center ``b`` on ``a`` along both axes."""

    return [
        align(b.center_x, a.center_x, 0.0, strength),
        align(b.center_y, a.center_y, 0.0, strength),
    ]


def align_all(
    items: Sequence[Any], selector: Optional[Selector] = None, strength: Optional[Strength] = None
) -> List[Constraint]:
    """Chain equal values across consecutive items."""

    values = _values(items, selector)
    return [align(prev, curr, 0.0, strength) for prev, curr in zip(values, values[1:])]


def distribute(
    items: Sequence[Any], selector: Optional[Selector] = None, strength: Optional[Strength] = None
) -> List[Constraint]:
    """Equal first differences: ``b - a == c - b`` for every consecutive triple.

    The equalities are required unless ``strength`` says otherwise.
    """

    if len(items) < 3:
        raise InvalidDistributionArity(len(items))
    values = [Expression.coerce(value) for value in _values(items, selector)]
    return [
        equal(b - a, c - b, REQUIRED if strength is None else strength)
        for a, b, c in zip(values, values[1:], values[2:])
    ]


def space_horizontally(
    items: Sequence[Any], distance: float = 0.0, strength: Optional[Strength] = None
) -> List[Constraint]:
    """Place each item ``distance`` to the right of the previous one."""

    return [align(curr.left_edge, prev.right_edge, distance, strength) for prev, curr in zip(items, items[1:])]


def space_vertically(
    items: Sequence[Any], distance: float = 0.0, strength: Optional[Strength] = None
) -> List[Constraint]:
    """Place each item ``distance`` below the previous one."""

    return [align(curr.top_edge, prev.bottom_edge, distance, strength) for prev, curr in zip(items, items[1:])]


__all__ = [
    "Selector",
    "resolve_selector",
    "fix",
    "align",
    "fill",
    "center",
    "align_all",
    "distribute",
    "space_horizontally",
    "space_vertically",
]
