"""
Тесты сборок SINGLE / DOUBLE через окружение

Точность выбирается один раз при импорте src.core.precision, поэтому
каждая сборка проверяется в отдельном интерпретаторе с заданным
OXYGEN_MATH_PRECISION.

Проверяет:
1. Компоненты векторов и матриц хранятся с рабочей точностью (binary32 для SINGLE)
2. Арифметика Vec2 / Vec3 / Mat2 и скалярные утилиты округляют результат
3. Короткий невырожденный отрезок не схлопывается в начало
"""

import json
import math
import os
import subprocess
import sys
from pathlib import Path

import pytest

from src.core.precision import (
    EPS_DOUBLE,
    EPS_SINGLE,
    PRECISION_ENV_VAR,
    Precision,
    constants_for,
    to_float32,
)

PROJECT_ROOT = Path(__file__).resolve().parents[2]

KERNEL_SNAPSHOT_SCRIPT = """
import json
import math

from src.core.geometry import closest_point_on_line_segment
from src.core.integration import rk2
from src.core.linalg import Mat2, Vec2, Vec3
from src.core.math import RandomSource, clamp, lerp, to_radians
from src.core.precision import EPSILON, PI, PRECISION

summed = Vec2(0.1, 0.2) + Vec2(0.2, 0.1)
scaled = Vec2(1.0, 1.0)
scaled *= 0.1
cross = Vec3(0.1, 0.2, 0.3).cross(Vec3(0.3, 0.2, 0.1))
rotated = Mat2.rotation(0.3) @ Vec2(1.0, 0.0)

short = math.sqrt(EPSILON) * 0.9
a = Vec2(0.0, 0.0)
b = Vec2(short, 0.0)
closest = closest_point_on_line_segment(a, b, b)

position, velocity = Vec2(0.0, 10.0), Vec2(3.0, 2.0)
for _ in range(100):
    rk2(position, velocity, Vec2(0.0, -9.8), 0.01)

rng = RandomSource(seed=5)
unit = rng.random_unit_vector2()

print(json.dumps({
    "precision": PRECISION.value,
    "epsilon": EPSILON,
    "pi": PI,
    "summed": list(summed),
    "scaled": list(scaled),
    "cross": list(cross),
    "rotated": list(rotated),
    "closest": list(closest),
    "segment_end": list(b),
    "position": list(position),
    "unit_is_unit": unit.is_unit(),
    "clamp": clamp(0.1, 0.0, 1.0),
    "lerp": lerp(0.0, 1.0, 0.1),
    "radians": to_radians(30.0),
    "tiny_is_zero": Vec2(EPSILON * EPSILON, 0.0).is_zero(),
}))
"""


def run_kernel_snapshot(precision: str) -> dict:
    """Запуск ядра в отдельном интерпретаторе с заданной точностью."""
    env = dict(os.environ)
    env[PRECISION_ENV_VAR] = precision
    completed = subprocess.run(
        [sys.executable, "-c", KERNEL_SNAPSHOT_SCRIPT],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )
    return json.loads(completed.stdout)


@pytest.fixture(scope="module")
def single_build() -> dict:
    return run_kernel_snapshot("single")


@pytest.fixture(scope="module")
def double_build() -> dict:
    return run_kernel_snapshot("double")


def is_binary32(value: float) -> bool:
    return to_float32(value) == value


# =============================================================================
# SINGLE
# =============================================================================


class TestSingleBuild:
    """Сборка OXYGEN_MATH_PRECISION=single"""

    def test_constants(self, single_build: dict) -> None:
        assert single_build["precision"] == Precision.SINGLE.value
        assert single_build["epsilon"] == to_float32(EPS_SINGLE)
        assert single_build["pi"] == to_float32(math.pi)

    @pytest.mark.parametrize("key", ["summed", "scaled", "cross", "rotated", "position"])
    def test_components_stored_as_binary32(self, single_build: dict, key: str) -> None:
        assert all(is_binary32(c) for c in single_build[key])

    def test_vector_arithmetic_rounds(self, single_build: dict) -> None:
        real = constants_for(Precision.SINGLE).real
        assert single_build["scaled"] == [real(0.1), real(0.1)]
        assert single_build["summed"][0] == real(real(0.1) + real(0.2))
        assert single_build["summed"][0] != 0.1 + 0.2

    def test_matrix_rotation(self, single_build: dict) -> None:
        x, y = single_build["rotated"]
        assert x == pytest.approx(math.cos(0.3), abs=EPS_SINGLE * 10)
        assert y == pytest.approx(math.sin(0.3), abs=EPS_SINGLE * 10)

    def test_scalar_utilities_round(self, single_build: dict) -> None:
        assert single_build["clamp"] == to_float32(0.1)
        assert is_binary32(single_build["lerp"])
        assert is_binary32(single_build["radians"])

    def test_short_segment_keeps_end(self, single_build: dict) -> None:
        """Отрезок ~1e-3 длиннее EPSILON и не считается вырожденным"""
        assert single_build["closest"] == single_build["segment_end"]
        assert single_build["closest"] != [0.0, 0.0]

    def test_integration_tracks_closed_form(self, single_build: dict) -> None:
        x, y = single_build["position"]
        assert x == pytest.approx(3.0, rel=EPS_SINGLE * 100)
        assert y == pytest.approx(10.0 + 2.0 - 4.9, rel=EPS_SINGLE * 100)

    def test_predicates(self, single_build: dict) -> None:
        assert single_build["unit_is_unit"] is True
        assert single_build["tiny_is_zero"] is False


# =============================================================================
# DOUBLE
# =============================================================================


class TestDoubleBuild:
    """Сборка OXYGEN_MATH_PRECISION=double"""

    def test_constants(self, double_build: dict) -> None:
        assert double_build["precision"] == Precision.DOUBLE.value
        assert double_build["epsilon"] == EPS_DOUBLE
        assert double_build["pi"] == math.pi

    def test_vector_arithmetic_is_binary64(self, double_build: dict) -> None:
        assert double_build["summed"][0] == 0.1 + 0.2
        assert double_build["clamp"] == 0.1

    def test_short_segment_keeps_end(self, double_build: dict) -> None:
        """Отрезок ~1e-6 длиннее EPSILON и не считается вырожденным"""
        assert double_build["closest"] == double_build["segment_end"]
        assert double_build["closest"] != [0.0, 0.0]

    def test_predicates(self, double_build: dict) -> None:
        assert double_build["unit_is_unit"] is True
        assert double_build["tiny_is_zero"] is False
