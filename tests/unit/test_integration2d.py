"""
Тесты для модуля Integration2D

Проверяет:
1. Semi-implicit Euler: сначала скорость, затем позиция с новой скоростью
2. RK2 (midpoint) для постоянного ускорения
3. In-place изменение position / velocity
"""

import pytest

from src.core.integration import euler, rk2
from src.core.linalg import Vec2
from src.core.precision import EPSILON

GRAVITY = Vec2(0.0, -9.8)


class TestEuler:
    """Тесты для euler"""

    def test_single_step(self) -> None:
        position = Vec2(0.0, 0.0)
        velocity = Vec2(1.0, 0.0)

        euler(position, velocity, GRAVITY, 0.1)

        assert velocity.x == pytest.approx(1.0)
        assert velocity.y == pytest.approx(-0.98)
        assert position.x == pytest.approx(0.1)
        assert position.y == pytest.approx(-0.098)

    def test_uses_updated_velocity(self) -> None:
        """Позиция сдвигается на уже обновлённую скорость (не explicit Euler)"""
        position = Vec2(0.0, 0.0)
        velocity = Vec2(0.0, 0.0)

        euler(position, velocity, Vec2(2.0, 0.0), 1.0)

        # explicit Euler дал бы position.x == 0
        assert position == Vec2(2.0, 0.0)
        assert velocity == Vec2(2.0, 0.0)

    def test_mutates_same_objects(self) -> None:
        position = Vec2(1.0, 1.0)
        velocity = Vec2(1.0, 0.0)
        pos_ref, vel_ref = position, velocity

        euler(position, velocity, GRAVITY, 0.1)

        assert position is pos_ref
        assert velocity is vel_ref
        assert position != Vec2(1.0, 1.0)

    def test_acceleration_untouched(self) -> None:
        acceleration = Vec2(0.0, -9.8)
        euler(Vec2(), Vec2(), acceleration, 0.5)
        assert acceleration == Vec2(0.0, -9.8)


class TestRK2:
    """Тесты для rk2"""

    def test_single_step(self) -> None:
        position = Vec2(0.0, 0.0)
        velocity = Vec2(1.0, 0.0)

        rk2(position, velocity, GRAVITY, 0.1)

        assert velocity.x == pytest.approx(1.0)
        assert velocity.y == pytest.approx(-0.98)
        assert position.x == pytest.approx(0.1)
        assert position.y == pytest.approx(-0.049)

    def test_exact_for_constant_acceleration(self) -> None:
        """Для постоянного ускорения midpoint даёт p0 + v0·t + a·t²/2"""
        position = Vec2(0.0, 10.0)
        velocity = Vec2(3.0, 2.0)
        dt = 0.01
        steps = 100

        for _ in range(steps):
            rk2(position, velocity, GRAVITY, dt)

        t = dt * steps
        assert position.x == pytest.approx(3.0 * t, rel=EPSILON * 100)
        assert position.y == pytest.approx(10.0 + 2.0 * t - 0.5 * 9.8 * t * t, rel=EPSILON * 100)
        assert velocity.y == pytest.approx(2.0 - 9.8 * t, rel=EPSILON * 100)

    def test_euler_and_rk2_agree_on_velocity(self) -> None:
        p1, v1 = Vec2(), Vec2(1.0, 1.0)
        p2, v2 = Vec2(), Vec2(1.0, 1.0)

        euler(p1, v1, GRAVITY, 0.2)
        rk2(p2, v2, GRAVITY, 0.2)

        assert v1 == v2
        assert p1 != p2
