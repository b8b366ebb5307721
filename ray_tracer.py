# ray_tracer.py
"""
Ray tracer numeric foundation - Main package module
"""
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Import main components to expose them at package level
from domain.geometry.constants import EPSILON
from domain.geometry.errors import (
    ArithmeticErrorKind,
    DivisionByZero,
    NormalizingZeroVector,
    TupleArithmeticError,
)
from domain.geometry.tuples import Tuple4, tuple4, point, vector, is_close
from domain.color.color import Color, color, BLACK
from domain.canvas.canvas import Canvas, canvas

__version__ = "0.1.0"

# Make them available when someone does 'import ray_tracer'
__all__ = [
    'EPSILON',
    'ArithmeticErrorKind',
    'DivisionByZero',
    'NormalizingZeroVector',
    'TupleArithmeticError',
    'Tuple4',
    'tuple4',
    'point',
    'vector',
    'is_close',
    'Color',
    'color',
    'BLACK',
    'Canvas',
    'canvas',
]
