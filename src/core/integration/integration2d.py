"""
Integration2D — Fixed-Step Point-Mass Integrators

Один шаг интегрирования точечной массы при постоянном ускорении.
position и velocity изменяются in-place; состояние между вызовами не хранится.

ФОРМУЛЫ:
    euler (semi-implicit):
        v ← v + a·dt
        p ← p + v·dt        (используется ОБНОВЛЁННАЯ скорость)

    rk2 (midpoint):
        v_mid ← v + a·dt/2
        p ← p + v_mid·dt
        v ← v + a·dt

ВАЖНО: порядок обновления в euler (сначала скорость) — semi-implicit схема,
менять его на explicit нельзя.
"""

from src.core.linalg.vec2 import Vec2


def euler(position: Vec2, velocity: Vec2, acceleration: Vec2, dt: float) -> None:
    """
    Шаг semi-implicit Euler.

    Args:
        position: Позиция (изменяется in-place)
        velocity: Скорость (изменяется in-place)
        acceleration: Постоянное ускорение на шаге
        dt: Шаг по времени
    """
    velocity += acceleration * dt
    position += velocity * dt


def rk2(position: Vec2, velocity: Vec2, acceleration: Vec2, dt: float) -> None:
    """
    Шаг RK2 (midpoint) для постоянного ускорения.

    Args:
        position: Позиция (изменяется in-place)
        velocity: Скорость (изменяется in-place)
        acceleration: Постоянное ускорение на шаге
        dt: Шаг по времени
    """
    mid_velocity = velocity + acceleration * (dt * 0.5)
    position += mid_velocity * dt
    velocity += acceleration * dt
