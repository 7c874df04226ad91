"""Linear constraint algebra and the tiered solver."""

from .expression import Expression, Operand, Variable
from .strength import MEDIUM, REQUIRED, STRONG, WEAK, Strength
from .constraint import Constraint, equal, greater_equal, less_equal, stay
from .core import SolveResult, Solver, SolverOptions

__all__ = [
    "Expression",
    "Operand",
    "Variable",
    "Strength",
    "WEAK",
    "MEDIUM",
    "STRONG",
    "REQUIRED",
    "Constraint",
    "equal",
    "less_equal",
    "greater_equal",
    "stay",
    "Solver",
    "SolverOptions",
    "SolveResult",
]
