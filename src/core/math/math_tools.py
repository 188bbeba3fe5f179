"""
MathTools — Scalar Utilities & Random Sampling

Модуль содержит stateless скалярные утилиты:
- clamp, lerp (без ограничения t — экстраполяция допустима)
- Конверсия градусы ↔ радианы через константы DEG_TO_RAD / RAD_TO_DEG
- Обобщённый swap для любых значений

И генерацию случайных значений через явный экземпляр RandomSource:
- random_range: равномерно в [min, max]
- random_unit_vector2: единичный вектор со случайным углом в [0, 2π)
- random_inside_unit_circle: равномерная по площади точка в единичном круге

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. random_inside_unit_circle использует sqrt(u) — без неё точки смещены к центру
2. Генератор принадлежит вызывающему (RandomSource) и может быть засеян
3. Общий генератор по умолчанию создаётся лениво и защищён lock
"""

import logging
import math
import random
import threading
from typing import Any, MutableMapping, MutableSequence, TypeVar

from src.core.linalg.vec2 import Vec2
from src.core.precision import DEG_TO_RAD, RAD_TO_DEG, TWO_PI, real

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# СКАЛЯРНЫЕ УТИЛИТЫ
# =============================================================================


def clamp(value: float, min_value: float, max_value: float) -> float:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Порядок min_value <= max_value не проверяется (предусловие вызывающего).

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-5.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    if value < min_value:
        return real(min_value)
    if value > max_value:
        return real(max_value)
    return real(value)


def lerp(a: float, b: float, t: float) -> float:
    """
    Линейная интерполяция a + t * (b - a).

    t вне [0, 1] даёт экстраполяцию.

    Examples:
        >>> lerp(0.0, 10.0, 0.5)
        5.0
        >>> lerp(0.0, 10.0, 2.0)
        20.0
    """
    return real(a + t * (b - a))


def to_radians(degrees: float) -> float:
    return real(degrees * DEG_TO_RAD)


def to_degrees(radians: float) -> float:
    return real(radians * RAD_TO_DEG)


def swap(a: T, b: T) -> tuple[T, T]:
    """
    Обмен двух значений любого типа.

    Python не передаёт аргументы по ссылке, поэтому результат присваивается
    обратно: a, b = swap(a, b)

    Examples:
        >>> swap(5, 10)
        (10, 5)
    """
    return b, a


def swap_items(
    container: MutableSequence[Any] | MutableMapping[Any, Any],
    i: Any,
    j: Any,
) -> None:
    """
    In-place обмен двух ячеек изменяемого контейнера (list, dict, ...).

    Args:
        container: Изменяемая последовательность или словарь
        i: Индекс/ключ первой ячейки
        j: Индекс/ключ второй ячейки
    """
    container[i], container[j] = swap(container[i], container[j])


# =============================================================================
# RANDOM SOURCE
# =============================================================================


class RandomSource:
    """
    Генератор случайных значений, принадлежащий вызывающему.

    Без seed инициализируется из недетерминированного источника ОС.
    Экземпляр не синхронизирован: для разделения между потоками используйте
    отдельные экземпляры или внешний lock.
    """

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def seed(self, value: int | None) -> None:
        """Пере-инициализация генератора (None → недетерминированный seed)."""
        self._rng.seed(value)

    def random_range(self, min_value: float, max_value: float) -> float:
        """Равномерно распределённое значение в [min_value, max_value]."""
        return real(self._rng.uniform(min_value, max_value))

    def random_unit_vector2(self) -> Vec2:
        """Единичный вектор (cos a, sin a), a ~ U[0, 2π)."""
        angle = self.random_range(0.0, TWO_PI)
        return Vec2(math.cos(angle), math.sin(angle))

    def random_inside_unit_circle(self) -> Vec2:
        """
        Точка, равномерно распределённая по площади единичного круга.

        Радиус = sqrt(u), u ~ U[0, 1].
        """
        return self.random_unit_vector2() * math.sqrt(self.random_range(0.0, 1.0))


class _LockedRandomSource(RandomSource):
    """Общий генератор по умолчанию: все выборки сериализованы lock."""

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.RLock()

    def seed(self, value: int | None) -> None:
        with self._lock:
            super().seed(value)

    def random_range(self, min_value: float, max_value: float) -> float:
        with self._lock:
            return super().random_range(min_value, max_value)

    def random_unit_vector2(self) -> Vec2:
        with self._lock:
            return super().random_unit_vector2()

    def random_inside_unit_circle(self) -> Vec2:
        with self._lock:
            return super().random_inside_unit_circle()


_DEFAULT_SOURCE: RandomSource | None = None
_DEFAULT_SOURCE_LOCK = threading.Lock()


def default_random_source() -> RandomSource:
    """
    Ленивое создание общего генератора по умолчанию.

    Returns:
        Потокобезопасный RandomSource с недетерминированным seed
    """
    global _DEFAULT_SOURCE
    if _DEFAULT_SOURCE is None:
        with _DEFAULT_SOURCE_LOCK:
            if _DEFAULT_SOURCE is None:
                _DEFAULT_SOURCE = _LockedRandomSource()
                logger.debug("Default random source created")
    return _DEFAULT_SOURCE


def random_range(
    min_value: float, max_value: float, rng: RandomSource | None = None
) -> float:
    """
    Равномерно распределённое значение в [min_value, max_value].

    Args:
        min_value: Нижняя граница
        max_value: Верхняя граница
        rng: Генератор (по умолчанию — общий default_random_source())
    """
    source = rng if rng is not None else default_random_source()
    return source.random_range(min_value, max_value)


def random_unit_vector2(rng: RandomSource | None = None) -> Vec2:
    source = rng if rng is not None else default_random_source()
    return source.random_unit_vector2()


def random_inside_unit_circle(rng: RandomSource | None = None) -> Vec2:
    source = rng if rng is not None else default_random_source()
    return source.random_inside_unit_circle()
