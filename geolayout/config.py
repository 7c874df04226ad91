"""Process-wide layout defaults."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from .solver.strength import Strength, WEAK


@dataclass
class LayoutConfig:
    """Defaults used by elements and the canvas when callers omit them."""

    default_font_size: float = 16.0
    auto_solve: bool = True
    default_strength: Strength = WEAK


_LAYOUT_CONFIG = LayoutConfig()


def get_layout_config() -> LayoutConfig:
    return copy.deepcopy(_LAYOUT_CONFIG)


def set_layout_config(config: LayoutConfig) -> None:
    global _LAYOUT_CONFIG
    _LAYOUT_CONFIG = copy.deepcopy(config)


__all__ = ["LayoutConfig", "get_layout_config", "set_layout_config"]
