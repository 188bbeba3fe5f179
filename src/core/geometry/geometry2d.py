"""
Geometry2D — Distance & Closest-Point Queries

ФОРМУЛЫ:
    distance(a, b)         = |b - a|
    distance_squared(a, b) = |b - a|²

    closest_point_on_line_segment(a, b, p):
        t = dot(p - a, b - a) / |b - a|²
        t = clamp(t, 0, 1)
        result = a + t * (b - a)

Вырожденный отрезок (|b - a| < EPSILON, т.е. |b - a|² < EPSILON²):
возвращается копия a, деление на ноль не выполняется.
"""

from src.core.linalg.vec2 import Vec2
from src.core.math.math_tools import clamp
from src.core.precision import EPSILON


def distance(a: Vec2, b: Vec2) -> float:
    return (b - a).length()


def distance_squared(a: Vec2, b: Vec2) -> float:
    return (b - a).length_squared()


def closest_point_on_line_segment(a: Vec2, b: Vec2, p: Vec2) -> Vec2:
    """
    Ближайшая к p точка отрезка [a, b].

    Args:
        a: Начало отрезка
        b: Конец отрезка
        p: Точка запроса

    Returns:
        Точка на отрезке; для вырожденного отрезка — копия a

    Examples:
        >>> closest_point_on_line_segment(Vec2(0, 0), Vec2(2, 0), Vec2(3, 0.5))
        Vec2(x=2.0, y=0.0)
    """
    ab = b - a
    length_sq = ab.length_squared()
    if length_sq < EPSILON * EPSILON:
        return a.copy()

    t = clamp((p - a).dot(ab) / length_sq, 0.0, 1.0)
    return a + ab * t
