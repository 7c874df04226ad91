"""Exception hierarchy shared across the layout engine."""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .solver.constraint import Constraint


class LayoutError(Exception):
    """Base class for layout engine failures."""


class MeasurementUnavailable(LayoutError):
    """Raised when the render surface cannot report a text bounding box."""


class SolverError(LayoutError):
    """Raised when the linear solver cannot produce a solution."""


class UnsatisfiableConstraints(SolverError):
    """Raised when required-strength constraints cannot all hold at once."""

    def __init__(self, message: str, constraint: Optional["Constraint"] = None):
        super().__init__(message)
        self.constraint = constraint


class DuplicateConstraint(SolverError):
    """Raised when a constraint is added to a solver twice."""

    def __init__(self, constraint: "Constraint"):
        super().__init__(f"constraint already registered: {constraint!r}")
        self.constraint = constraint


class UnknownConstraint(SolverError):
    """Raised when removing a constraint the solver does not hold."""

    def __init__(self, constraint: "Constraint"):
        super().__init__(f"constraint is not registered: {constraint!r}")
        self.constraint = constraint


class InvalidDistributionArity(LayoutError, ValueError):
    """Raised when ``distribute`` receives fewer than three values."""

    def __init__(self, count: int):
        super().__init__(f"distribute needs at least 3 values, got {count}")
        self.count = count


__all__ = [
    "LayoutError",
    "MeasurementUnavailable",
    "SolverError",
    "UnsatisfiableConstraints",
    "DuplicateConstraint",
    "UnknownConstraint",
    "InvalidDistributionArity",
]
