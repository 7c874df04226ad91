from .errors import (
    LayoutError,
    MeasurementUnavailable,
    SolverError,
    UnsatisfiableConstraints,
    DuplicateConstraint,
    UnknownConstraint,
    InvalidDistributionArity,
)
from .solver import (
    Expression,
    Variable,
    Strength,
    WEAK,
    MEDIUM,
    STRONG,
    REQUIRED,
    Constraint,
    equal,
    less_equal,
    greater_equal,
    stay,
    Solver,
    SolverOptions,
    SolveResult,
)
from .config import LayoutConfig, get_layout_config, set_layout_config
from .surface import BoundingBox, RenderSurface, SvgSurface
from .builders import align, align_all, center, distribute, fill, fix, space_horizontally, space_vertically
from .elements import Canvas, Element, Geometric, Group, Image, Point, Rect, Text, TextMetrics

__all__ = [
    'LayoutError',
    'MeasurementUnavailable',
    'SolverError',
    'UnsatisfiableConstraints',
    'DuplicateConstraint',
    'UnknownConstraint',
    'InvalidDistributionArity',
    'Expression',
    'Variable',
    'Strength',
    'WEAK',
    'MEDIUM',
    'STRONG',
    'REQUIRED',
    'Constraint',
    'equal',
    'less_equal',
    'greater_equal',
    'stay',
    'Solver',
    'SolverOptions',
    'SolveResult',
    'LayoutConfig',
    'get_layout_config',
    'set_layout_config',
    'BoundingBox',
    'RenderSurface',
    'SvgSurface',
    'align',
    'align_all',
    'center',
    'distribute',
    'fill',
    'fix',
    'space_horizontally',
    'space_vertically',
    'Canvas',
    'Element',
    'Geometric',
    'Group',
    'Image',
    'Point',
    'Rect',
    'Text',
    'TextMetrics',
]
