"""
2D geometric queries.
"""

from src.core.geometry.geometry2d import (
    closest_point_on_line_segment,
    distance,
    distance_squared,
)

__all__ = [
    "distance",
    "distance_squared",
    "closest_point_on_line_segment",
]
