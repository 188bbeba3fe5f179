"""
Linear algebra value types: Vec2, Vec3, Mat2.
"""

from src.core.linalg.formatting import format_components, format_rows, format_scalar
from src.core.linalg.mat2 import Mat2
from src.core.linalg.vec2 import Vec2
from src.core.linalg.vec3 import Vec3

__all__ = [
    # Types
    "Vec2",
    "Vec3",
    "Mat2",
    # Formatting
    "format_components",
    "format_rows",
    "format_scalar",
]
