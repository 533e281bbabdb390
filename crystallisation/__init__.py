"""
Crystallisation - stained glass patterns from repeated polygon subdivision.
"""

__version__ = "0.1.0"

# Core classes
from .point import Point
from .segment import Segment
from .polygon import Polygon, DegeneratePolygonError
from .cutter import Cutter
from .random import Random
from .config import Settings, PRESETS
from .model import Crystal, StepResult

# Rendering and scheduling
from .canvas import SvgCanvas
from .sketch import Sketch

__all__ = [
    # Core
    'Point',
    'Segment',
    'Polygon',
    'DegeneratePolygonError',
    'Cutter',
    'Random',
    'Settings',
    'PRESETS',
    'Crystal',
    'StepResult',
    # Rendering
    'SvgCanvas',
    'Sketch',
]
