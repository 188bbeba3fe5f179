"""
Vec2 — 2D вектор с value-семантикой

Операции:
- Арифметика: +, -, унарный -, * / на скаляр (и in-place формы)
- Геометрия: dot, cross (скаляр), normalize, perpendicular, rotate,
  project, reflect
- Предикаты: is_zero (точный), is_unit (с допуском EPSILON)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. normalize/project никогда не делят на near-zero (возвращается нулевой вектор)
2. is_zero — точное сравнение с 0, is_unit — сравнение |len² - 1| < EPSILON
3. scalar * v == v * scalar
4. == / != — точное покомпонентное сравнение без допуска
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from src.core.linalg.formatting import format_components
from src.core.precision import EPSILON, real


@dataclass(eq=False)
class Vec2:
    """
    2D вектор {x, y}.

    Mutable только через in-place операторы, normalize_self и clear;
    все остальные операции возвращают новый экземпляр.

    Examples:
        >>> v = Vec2(3, 4)
        >>> v.length()
        5.0
        >>> v.dot(Vec2(1, 0))
        3.0
    """

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = real(self.x)
        self.y = real(self.y)

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vec2:
        return cls(1.0, 1.0)

    @classmethod
    def up(cls) -> Vec2:
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> Vec2:
        return cls(0.0, -1.0)

    @classmethod
    def left(cls) -> Vec2:
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> Vec2:
        return cls(1.0, 0.0)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iadd__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x = real(self.x + other.x)
        self.y = real(self.y + other.y)
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x = real(self.x - other.x)
        self.y = real(self.y - other.y)
        return self

    def __imul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x = real(self.x * scalar)
        self.y = real(self.y * scalar)
        return self

    def __itruediv__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x = real(self.x / scalar)
        self.y = real(self.y / scalar)
        return self

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """Точное покомпонентное сравнение (без допуска)."""
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # mutable

    # =========================================================================
    # ГЕОМЕТРИЯ
    # =========================================================================

    def dot(self, other: Vec2) -> float:
        return real(self.x * other.x + self.y * other.y)

    def cross(self, other: Vec2) -> float:
        """z-компонента 3D векторного произведения (x1*y2 - y1*x2)."""
        return real(self.x * other.y - self.y * other.x)

    def length(self) -> float:
        return real(math.sqrt(self.x * self.x + self.y * self.y))

    def length_squared(self) -> float:
        return real(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vec2:
        """
        Единичный вектор того же направления.

        Returns:
            Нормализованный вектор или нулевой, если length() < EPSILON
        """
        length = self.length()
        if length < EPSILON:
            return Vec2(0.0, 0.0)
        return Vec2(self.x / length, self.y / length)

    def normalize_self(self) -> None:
        """In-place normalize с той же политикой для вырожденного вектора."""
        length = self.length()
        if length < EPSILON:
            self.x = self.y = real(0.0)
            return
        self.x = real(self.x / length)
        self.y = real(self.y / length)

    def perpendicular(self) -> Vec2:
        """Поворот на 90° против часовой стрелки: (-y, x)."""
        return Vec2(-self.y, self.x)

    def rotate(self, radians: float) -> Vec2:
        """Поворот на угол radians (положительный — против часовой стрелки)."""
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return Vec2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def project(self, other: Vec2) -> Vec2:
        """
        Проекция на other.

        Формула: (dot(self, other) / |other|²) * other

        Returns:
            Проекция или нулевой вектор, если |other|² < EPSILON
        """
        denom = other.length_squared()
        if denom < EPSILON:
            return Vec2(0.0, 0.0)
        return other * (self.dot(other) / denom)

    def reflect(self, normal: Vec2) -> Vec2:
        """
        Отражение относительно прямой с нормалью normal.

        normal нормализуется внутри, допускается неединичная нормаль.
        """
        n = normal.normalize()
        return self - n * (2.0 * self.dot(n))

    # =========================================================================
    # ПРЕДИКАТЫ И МУТАТОРЫ
    # =========================================================================

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def is_unit(self) -> bool:
        return abs(self.length_squared() - 1.0) < EPSILON

    def clear(self) -> None:
        self.x = self.y = real(0.0)

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return format_components((self.x, self.y))
