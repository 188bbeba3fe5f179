"""
Mat2 — матрица 2x2 (row-major)

    | m00  m01 |
    | m10  m11 |

Значение по умолчанию — единичная матрица.
Умножение поддерживается как через @, так и через *:
- Mat2 @ Vec2 → Vec2: (m00*x + m01*y, m10*x + m11*y)
- Mat2 @ Mat2 → Mat2 (некоммутативно)

ИНВАРИАНТ: Mat2.rotation(t) @ v == v.rotate(t) (в пределах допуска)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.core.linalg.formatting import format_rows
from src.core.linalg.vec2 import Vec2
from src.core.precision import real


@dataclass(eq=False)
class Mat2:
    """Матрица 2x2 {m00, m01, m10, m11}."""

    m00: float = 1.0
    m01: float = 0.0
    m10: float = 0.0
    m11: float = 1.0

    def __post_init__(self) -> None:
        self.m00 = real(self.m00)
        self.m01 = real(self.m01)
        self.m10 = real(self.m10)
        self.m11 = real(self.m11)

    @classmethod
    def identity(cls) -> Mat2:
        return cls(1.0, 0.0, 0.0, 1.0)

    @classmethod
    def rotation(cls, radians: float) -> Mat2:
        """
        Матрица поворота [[cos, -sin], [sin, cos]].

        Знак совпадает с Vec2.rotate: положительный угол — против часовой стрелки.
        """
        cos_a = math.cos(radians)
        sin_a = math.sin(radians)
        return cls(cos_a, -sin_a, sin_a, cos_a)

    # =========================================================================
    # УМНОЖЕНИЕ
    # =========================================================================

    def _mul_vec(self, v: Vec2) -> Vec2:
        return Vec2(
            self.m00 * v.x + self.m01 * v.y,
            self.m10 * v.x + self.m11 * v.y,
        )

    def _mul_mat(self, other: Mat2) -> Mat2:
        return Mat2(
            self.m00 * other.m00 + self.m01 * other.m10,
            self.m00 * other.m01 + self.m01 * other.m11,
            self.m10 * other.m00 + self.m11 * other.m10,
            self.m10 * other.m01 + self.m11 * other.m11,
        )

    def __matmul__(self, other: Vec2 | Mat2) -> Vec2 | Mat2:
        if isinstance(other, Vec2):
            return self._mul_vec(other)
        if isinstance(other, Mat2):
            return self._mul_mat(other)
        return NotImplemented

    __mul__ = __matmul__

    def __imatmul__(self, other: Mat2) -> Mat2:
        """In-place произведение; Vec2 справа не допускается (m остаётся Mat2)."""
        if not isinstance(other, Mat2):
            raise TypeError(
                f"unsupported operand type for in-place product: "
                f"'Mat2' and '{type(other).__name__}'"
            )
        product = self._mul_mat(other)
        self.m00, self.m01, self.m10, self.m11 = (
            product.m00,
            product.m01,
            product.m10,
            product.m11,
        )
        return self

    __imul__ = __imatmul__

    # =========================================================================
    # СРАВНЕНИЕ / ВЫВОД
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat2):
            return NotImplemented
        return (
            self.m00 == other.m00
            and self.m01 == other.m01
            and self.m10 == other.m10
            and self.m11 == other.m11
        )

    __hash__ = None  # mutable

    def copy(self) -> Mat2:
        return Mat2(self.m00, self.m01, self.m10, self.m11)

    def __str__(self) -> str:
        return format_rows(((self.m00, self.m01), (self.m10, self.m11)))
