"""Variables and affine expressions understood by the solver."""

from __future__ import annotations

import itertools
import numbers
from typing import Dict, Iterable, Tuple, Union

_ids = itertools.count(1)


class Variable:
    """Scalar unknown the solver can assign a value to.

    ``label`` is the human readable name passed by the caller; ``name`` adds a
    unique suffix so that several elements may all declare an ``x``.
    """

    __slots__ = ("label", "name", "value")

    def __init__(self, label: str = "v", value: float = 0.0):
        self.label = label
        self.name = f"{label}#{next(_ids)}"
        self.value = float(value)

    def __repr__(self) -> str:
        return f"Variable({self.name!r}, value={self.value:.6g})"

    def __float__(self) -> float:
        return self.value

    def expression(self) -> "Expression":
        return Expression(((self, 1.0),))

    def __add__(self, other: "Operand") -> "Expression":
        return self.expression().plus(other)

    def __radd__(self, other: "Operand") -> "Expression":
        return Expression.coerce(other).plus(self)

    def __sub__(self, other: "Operand") -> "Expression":
        return self.expression().minus(other)

    def __rsub__(self, other: "Operand") -> "Expression":
        return Expression.coerce(other).minus(self)

    def __mul__(self, other: "Operand") -> "Expression":
        return self.expression() * other

    __rmul__ = __mul__

    def __truediv__(self, other: "Operand") -> "Expression":
        return self.expression() / other

    def __neg__(self) -> "Expression":
        return self.expression().times(-1.0)


class Expression:
    """Immutable affine combination ``sum(coeff * var) + constant``."""

    __slots__ = ("_terms", "_constant")

    def __init__(self, terms: Iterable[Tuple[Variable, float]] = (), constant: float = 0.0):
        merged: Dict[Variable, float] = {}
        for variable, coefficient in terms:
            merged[variable] = merged.get(variable, 0.0) + float(coefficient)
        self._terms: Tuple[Tuple[Variable, float], ...] = tuple(
            (variable, coefficient) for variable, coefficient in merged.items() if coefficient != 0.0
        )
        self._constant = float(constant)

    @staticmethod
    def coerce(value: "Operand") -> "Expression":
        """Return ``value`` as an :class:`Expression`."""

        if isinstance(value, Expression):
            return value
        if isinstance(value, Variable):
            return value.expression()
        if isinstance(value, numbers.Real):
            return Expression((), float(value))
        raise TypeError(f"cannot build a linear expression from {type(value).__name__}")

    @property
    def terms(self) -> Tuple[Tuple[Variable, float], ...]:
        return self._terms

    @property
    def constant(self) -> float:
        return self._constant

    @property
    def variables(self) -> Tuple[Variable, ...]:
        return tuple(variable for variable, _ in self._terms)

    def is_constant(self) -> bool:
        return not self._terms

    def value(self) -> float:
        """Evaluate at the variables' current values."""

        return self._constant + sum(coefficient * variable.value for variable, coefficient in self._terms)

    def plus(self, other: "Operand") -> "Expression":
        other = Expression.coerce(other)
        return Expression(self._terms + other._terms, self._constant + other._constant)

    def minus(self, other: "Operand") -> "Expression":
        return self.plus(Expression.coerce(other).times(-1.0))

    def times(self, factor: float) -> "Expression":
        factor = float(factor)
        return Expression(
            ((variable, coefficient * factor) for variable, coefficient in self._terms),
            self._constant * factor,
        )

    def divide(self, divisor: float) -> "Expression":
        divisor = float(divisor)
        if divisor == 0.0:
            raise ZeroDivisionError("cannot divide an expression by zero")
        return self.times(1.0 / divisor)

    def equivalent(self, other: "Operand", tol: float = 1e-12) -> bool:
        """Return ``True`` if ``self`` and ``other`` are the same affine function."""

        difference = self.minus(other)
        return abs(difference._constant) <= tol and all(
            abs(coefficient) <= tol for _, coefficient in difference._terms
        )

    def __add__(self, other: "Operand") -> "Expression":
        return self.plus(other)

    def __radd__(self, other: "Operand") -> "Expression":
        return Expression.coerce(other).plus(self)

    def __sub__(self, other: "Operand") -> "Expression":
        return self.minus(other)

    def __rsub__(self, other: "Operand") -> "Expression":
        return Expression.coerce(other).minus(self)

    def __mul__(self, other: "Operand") -> "Expression":
        other = Expression.coerce(other)
        if other.is_constant():
            return self.times(other._constant)
        if self.is_constant():
            return other.times(self._constant)
        raise TypeError("product of two non-constant expressions is not linear")

    __rmul__ = __mul__

    def __truediv__(self, other: "Operand") -> "Expression":
        other = Expression.coerce(other)
        if not other.is_constant():
            raise TypeError("division by a non-constant expression is not linear")
        return self.divide(other._constant)

    def __neg__(self) -> "Expression":
        return self.times(-1.0)

    def __repr__(self) -> str:
        parts = [f"{coefficient:.6g}*{variable.name}" for variable, coefficient in self._terms]
        if self._constant or not parts:
            parts.append(f"{self._constant:.6g}")
        return "Expression(" + " + ".join(parts) + ")"


Operand = Union[Expression, Variable, float, int]


__all__ = ["Variable", "Expression", "Operand"]
