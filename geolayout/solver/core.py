"""Strength-tiered linear constraint solver built on ``scipy.optimize.linprog``.

Every non-required constraint receives non-negative error columns. Tiers are
optimised lexicographically: the strong error is minimised first and frozen,
then the medium error, then the weak error. A final pass keeps variables
that are still under-determined close to their previous values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.optimize import linprog

from ..errors import DuplicateConstraint, SolverError, UnknownConstraint, UnsatisfiableConstraints
from ..logging_utils import apply_debug_logging
from .constraint import Constraint, stay
from .expression import Variable
from .strength import OPTIONAL_TIERS, Strength, WEAK

logger = logging.getLogger(__name__)

_STATUS_INFEASIBLE = 2


@dataclass
class SolverOptions:
    """Solver knobs."""

    tol: float = 1e-7
    preserve_values: bool = True
    method: str = "highs"


@dataclass
class SolveResult:
    success: bool
    objective: Dict[str, float] = field(default_factory=dict)
    iterations: int = 0
    warnings: List[str] = field(default_factory=list)


@dataclass
class _LinearProgram:
    variables: List[Variable]
    n_columns: int
    a_ub: List[np.ndarray] = field(default_factory=list)
    b_ub: List[float] = field(default_factory=list)
    a_eq: List[np.ndarray] = field(default_factory=list)
    b_eq: List[float] = field(default_factory=list)
    costs: Dict[Strength, np.ndarray] = field(default_factory=dict)
    tie_break: Optional[np.ndarray] = None

    def bounds(self) -> List[Tuple[Optional[float], Optional[float]]]:
        n_vars = len(self.variables)
        return [(None, None)] * n_vars + [(0.0, None)] * (self.n_columns - n_vars)


def _collect_variables(constraints: Iterable[Constraint]) -> List[Variable]:
    ordered: Dict[Variable, None] = {}
    for constraint in constraints:
        for variable in constraint.expression.variables:
            ordered.setdefault(variable, None)
    return list(ordered)


def _error_columns(constraint: Constraint) -> int:
    if constraint.required:
        return 0
    return 2 if constraint.relation == "==" else 1


def _build_program(constraints: Sequence[Constraint], preserve_values: bool) -> _LinearProgram:
    variables = _collect_variables(constraints)
    index = {variable: idx for idx, variable in enumerate(variables)}
    n_vars = len(variables)
    n_errors = sum(_error_columns(constraint) for constraint in constraints)
    n_tie = 2 * n_vars if preserve_values else 0
    n_columns = n_vars + n_errors + n_tie
    program = _LinearProgram(variables=variables, n_columns=n_columns)

    column = n_vars
    for constraint in constraints:
        row = np.zeros(n_columns)
        for variable, coefficient in constraint.expression.terms:
            row[index[variable]] = coefficient
        rhs = -constraint.expression.constant

        if constraint.required:
            if constraint.relation == "==":
                program.a_eq.append(row)
                program.b_eq.append(rhs)
            elif constraint.relation == "<=":
                program.a_ub.append(row)
                program.b_ub.append(rhs)
            else:
                program.a_ub.append(-row)
                program.b_ub.append(-rhs)
            continue

        cost = program.costs.setdefault(constraint.strength, np.zeros(n_columns))
        if constraint.relation == "==":
            row[column] = -1.0
            row[column + 1] = 1.0
            cost[column] = cost[column + 1] = constraint.weight
            program.a_eq.append(row)
            program.b_eq.append(rhs)
            column += 2
        elif constraint.relation == "<=":
            row[column] = -1.0
            cost[column] = constraint.weight
            program.a_ub.append(row)
            program.b_ub.append(rhs)
            column += 1
        else:
            row[column] = 1.0
            cost[column] = constraint.weight
            program.a_ub.append(-row)
            program.b_ub.append(-rhs)
            column += 1

    if n_tie:
        program.tie_break = np.zeros(n_columns)
        for idx, variable in enumerate(variables):
            row = np.zeros(n_columns)
            row[idx] = 1.0
            row[column] = -1.0
            row[column + 1] = 1.0
            program.tie_break[column] = program.tie_break[column + 1] = 1.0
            program.a_eq.append(row)
            program.b_eq.append(variable.value)
            column += 2
    return program


def _stack(rows: List[np.ndarray], values: List[float]) -> Tuple[Optional[np.ndarray], Optional[np.ndarray]]:
    if not rows:
        return None, None
    return np.vstack(rows), np.asarray(values, dtype=float)


class Solver:
    """Holds constraints and resolves them into variable values."""

    def __init__(self, options: Optional[SolverOptions] = None):
        self.options = options or SolverOptions()
        self._constraints: Dict[Constraint, None] = {}

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return tuple(self._constraints)

    def has_constraint(self, constraint: Constraint) -> bool:
        return constraint in self._constraints

    def add_constraint(self, constraint: Constraint) -> None:
        if constraint in self._constraints:
            raise DuplicateConstraint(constraint)
        if constraint.required and not self._required_feasible([constraint]):
            raise UnsatisfiableConstraints(
                f"required constraint conflicts with the registered set: {constraint!r}", constraint
            )
        self._constraints[constraint] = None
        logger.debug("Registered %r (%d total)", constraint, len(self._constraints))

    def add_constraints(self, constraints: Iterable[Constraint]) -> None:
        """Register a batch of constraints, all or none.

        Duplicates and required conflicts are checked against the registered
        set and the rest of the batch before anything is committed.
        """

        batch: Dict[Constraint, None] = {}
        for constraint in constraints:
            if constraint in self._constraints or constraint in batch:
                raise DuplicateConstraint(constraint)
            batch[constraint] = None
        required = [c for c in batch if c.required]
        if required and not self._required_feasible(required):
            pending: List[Constraint] = []
            for constraint in required:
                pending.append(constraint)
                if not self._required_feasible(pending):
                    break
            raise UnsatisfiableConstraints(
                f"required constraint conflicts with the registered set: {constraint!r}", constraint
            )
        self._constraints.update(batch)
        logger.debug("Registered %d constraints (%d total)", len(batch), len(self._constraints))

    def remove_constraint(self, constraint: Constraint) -> None:
        try:
            del self._constraints[constraint]
        except KeyError:
            raise UnknownConstraint(constraint) from None

    def add_stay(self, variable: Variable, strength: Strength = WEAK, weight: float = 1.0) -> Constraint:
        """Pin ``variable`` to its current value and return the stay constraint."""

        constraint = stay(variable, strength, weight)
        self.add_constraint(constraint)
        return constraint

    def _linprog(self, cost: np.ndarray, program: _LinearProgram):
        a_ub, b_ub = _stack(program.a_ub, program.b_ub)
        a_eq, b_eq = _stack(program.a_eq, program.b_eq)
        return linprog(
            cost,
            A_ub=a_ub,
            b_ub=b_ub,
            A_eq=a_eq,
            b_eq=b_eq,
            bounds=program.bounds(),
            method=self.options.method,
        )

    def _required_feasible(self, extra: Sequence[Constraint] = ()) -> bool:
        required = [c for c in self._constraints if c.required] + list(extra)
        program = _build_program(required, preserve_values=False)
        if not program.variables:
            return all(c.is_satisfied(self.options.tol) for c in required)
        result = self._linprog(np.zeros(program.n_columns), program)
        return result.status != _STATUS_INFEASIBLE

    def solve(self) -> SolveResult:
        """Run one solve pass and write the solution back onto the variables."""

        constraints = list(self._constraints)
        program = _build_program(constraints, self.options.preserve_values)
        logger.info(
            "Solving %d constraints over %d variables", len(constraints), len(program.variables)
        )
        if not program.variables:
            unsatisfied = [c for c in constraints if c.required and not c.is_satisfied(self.options.tol)]
            if unsatisfied:
                raise UnsatisfiableConstraints("constant required constraint does not hold", unsatisfied[0])
            return SolveResult(success=True)

        passes: List[Tuple[str, np.ndarray]] = [
            (tier.name.lower(), program.costs[tier]) for tier in OPTIONAL_TIERS if tier in program.costs
        ]
        if program.tie_break is not None:
            passes.append(("tie_break", program.tie_break))
        if not passes:
            passes.append(("feasibility", np.zeros(program.n_columns)))

        result = None
        objective: Dict[str, float] = {}
        iterations = 0
        for label, cost in passes:
            result = self._linprog(cost, program)
            iterations += int(getattr(result, "nit", 0) or 0)
            if result.status == _STATUS_INFEASIBLE:
                raise UnsatisfiableConstraints("required constraints cannot be satisfied simultaneously")
            if result.status != 0:
                raise SolverError(f"linear program failed during {label} pass: {result.message}")
            optimum = float(result.fun)
            objective[label] = optimum
            logger.debug("Pass %s optimum=%.6g", label, optimum)
            program.a_ub.append(cost)
            program.b_ub.append(optimum + self.options.tol * max(1.0, abs(optimum)))

        for variable, value in zip(program.variables, result.x):
            variable.value = float(value)

        warnings = [
            f"{c.strength.name.lower()} constraint violated by {c.violation():.6g}"
            for c in constraints
            if not c.required and not c.is_satisfied(max(1e-6, self.options.tol))
        ]
        if warnings:
            logger.info("Solve left %d optional constraints unsatisfied", len(warnings))
        logger.info("Solve finished in %d iterations objective=%s", iterations, objective)
        return SolveResult(success=True, objective=objective, iterations=iterations, warnings=warnings)


apply_debug_logging(globals(), logger=logger)


__all__ = ["Solver", "SolverOptions", "SolveResult"]
