"""Constraint records and their constructors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .expression import Expression, Operand
from .strength import Strength, WEAK

Relation = Literal["==", "<=", ">="]


@dataclass(frozen=True, eq=False)
class Constraint:
    """``expression <relation> 0`` at a given strength and weight.

    Constraints compare by identity so the same relation can be registered
    twice as two distinct records.
    """

    expression: Expression
    relation: Relation
    strength: Strength = WEAK
    weight: float = 1.0

    def __post_init__(self) -> None:
        if self.relation not in ("==", "<=", ">="):
            raise ValueError(f"unknown relation {self.relation!r}")
        if self.weight <= 0.0:
            raise ValueError("constraint weight must be positive")
        object.__setattr__(self, "strength", Strength(self.strength))

    @property
    def required(self) -> bool:
        return self.strength.is_required

    def violation(self) -> float:
        """Amount by which the current variable values violate the constraint."""

        value = self.expression.value()
        if self.relation == "==":
            return abs(value)
        if self.relation == "<=":
            return max(value, 0.0)
        return max(-value, 0.0)

    def is_satisfied(self, tol: float = 1e-6) -> bool:
        return self.violation() <= tol

    def __repr__(self) -> str:
        return (
            f"Constraint({self.expression!r} {self.relation} 0, "
            f"strength={self.strength.name}, weight={self.weight:g})"
        )


def equal(lhs: Operand, rhs: Operand = 0.0, strength: Strength = WEAK, weight: float = 1.0) -> Constraint:
    return Constraint(Expression.coerce(lhs).minus(rhs), "==", strength, weight)


def less_equal(lhs: Operand, rhs: Operand = 0.0, strength: Strength = WEAK, weight: float = 1.0) -> Constraint:
    return Constraint(Expression.coerce(lhs).minus(rhs), "<=", strength, weight)


def greater_equal(lhs: Operand, rhs: Operand = 0.0, strength: Strength = WEAK, weight: float = 1.0) -> Constraint:
    return Constraint(Expression.coerce(lhs).minus(rhs), ">=", strength, weight)


def stay(value: Operand, strength: Strength = WEAK, weight: float = 1.0) -> Constraint:
    """Pin ``value`` (a variable or expression) to what it evaluates to now."""

    expression = Expression.coerce(value)
    return equal(expression, expression.value(), strength, weight)


__all__ = ["Constraint", "Relation", "equal", "less_equal", "greater_equal", "stay"]
