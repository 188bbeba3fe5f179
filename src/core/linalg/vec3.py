"""
Vec3 — 3D вектор с value-семантикой

Тот же контракт, что и у Vec2 (см. src.core.linalg.vec2), плюс:
- cross возвращает вектор (правая тройка)
- фабрики forward (0, 0, 1) и backward (0, 0, -1)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from src.core.linalg.formatting import format_components
from src.core.precision import EPSILON, real


@dataclass(eq=False)
class Vec3:
    """3D вектор {x, y, z}."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        self.x = real(self.x)
        self.y = real(self.y)
        self.z = real(self.z)

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def zero(cls) -> Vec3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def up(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def down(cls) -> Vec3:
        return cls(0.0, -1.0, 0.0)

    @classmethod
    def left(cls) -> Vec3:
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def right(cls) -> Vec3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def forward(cls) -> Vec3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def backward(cls) -> Vec3:
        return cls(0.0, 0.0, -1.0)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x = real(self.x + other.x)
        self.y = real(self.y + other.y)
        self.z = real(self.z + other.z)
        return self

    def __isub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x = real(self.x - other.x)
        self.y = real(self.y - other.y)
        self.z = real(self.z - other.z)
        return self

    def __imul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x = real(self.x * scalar)
        self.y = real(self.y * scalar)
        self.z = real(self.z * scalar)
        return self

    def __itruediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x = real(self.x / scalar)
        self.y = real(self.y / scalar)
        self.z = real(self.z / scalar)
        return self

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None  # mutable

    # =========================================================================
    # ГЕОМЕТРИЯ
    # =========================================================================

    def dot(self, other: Vec3) -> float:
        return real(self.x * other.x + self.y * other.y + self.z * other.z)

    def cross(self, other: Vec3) -> Vec3:
        """Векторное произведение self × other."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return real(math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z))

    def length_squared(self) -> float:
        return real(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Единичный вектор или нулевой, если length() < EPSILON."""
        length = self.length()
        if length < EPSILON:
            return Vec3(0.0, 0.0, 0.0)
        return Vec3(self.x / length, self.y / length, self.z / length)

    def normalize_self(self) -> None:
        length = self.length()
        if length < EPSILON:
            self.x = self.y = self.z = real(0.0)
            return
        self.x = real(self.x / length)
        self.y = real(self.y / length)
        self.z = real(self.z / length)

    def project(self, other: Vec3) -> Vec3:
        """Проекция на other; нулевой вектор, если |other|² < EPSILON."""
        denom = other.length_squared()
        if denom < EPSILON:
            return Vec3(0.0, 0.0, 0.0)
        return other * (self.dot(other) / denom)

    def reflect(self, normal: Vec3) -> Vec3:
        """Отражение относительно плоскости с нормалью normal (нормализуется внутри)."""
        n = normal.normalize()
        return self - n * (2.0 * self.dot(n))

    # =========================================================================
    # ПРЕДИКАТЫ И МУТАТОРЫ
    # =========================================================================

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0

    def is_unit(self) -> bool:
        return abs(self.length_squared() - 1.0) < EPSILON

    def clear(self) -> None:
        self.x = self.y = self.z = real(0.0)

    def copy(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return format_components((self.x, self.y, self.z))
