"""
Core math modules

Скалярные утилиты и генерация случайных значений.
Константы точности реэкспортируются из src.core.precision.
"""

# Precision (единая точка выбора real)
from src.core.precision import (
    DEG_TO_RAD,
    EPSILON,
    HALF_PI,
    PI,
    PRECISION,
    RAD_TO_DEG,
    SETTINGS,
    TWO_PI,
    KernelSettings,
    Precision,
    ScalarConstants,
    constants_for,
    real,
)

# MathTools
from src.core.math.math_tools import (
    RandomSource,
    clamp,
    default_random_source,
    lerp,
    random_inside_unit_circle,
    random_range,
    random_unit_vector2,
    swap,
    swap_items,
    to_degrees,
    to_radians,
)

__all__ = [
    # Precision — Constants
    "PI",
    "TWO_PI",
    "HALF_PI",
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "EPSILON",
    "PRECISION",
    "SETTINGS",
    # Precision — Types
    "Precision",
    "KernelSettings",
    "ScalarConstants",
    # Precision — Functions
    "constants_for",
    "real",
    # MathTools — Types
    "RandomSource",
    # MathTools — Functions
    "clamp",
    "lerp",
    "to_radians",
    "to_degrees",
    "swap",
    "swap_items",
    "default_random_source",
    "random_range",
    "random_unit_vector2",
    "random_inside_unit_circle",
]
