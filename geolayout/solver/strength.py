"""Priority tiers for constraints."""

from __future__ import annotations

from enum import IntEnum


class Strength(IntEnum):
    """Ordered constraint tiers; a stronger tier always wins."""

    WEAK = 1
    MEDIUM = 2
    STRONG = 3
    REQUIRED = 4

    @property
    def is_required(self) -> bool:
        return self is Strength.REQUIRED


WEAK = Strength.WEAK
MEDIUM = Strength.MEDIUM
STRONG = Strength.STRONG
REQUIRED = Strength.REQUIRED

# Tiers optimised by the solver, strongest first.
OPTIONAL_TIERS = (STRONG, MEDIUM, WEAK)


__all__ = ["Strength", "WEAK", "MEDIUM", "STRONG", "REQUIRED", "OPTIONAL_TIERS"]
