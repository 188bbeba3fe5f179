"""
Precision — Scalar Width Policy & Constants

Единственная точка выбора точности вещественных чисел (real) для всего ядра:
- SINGLE: IEEE-754 binary32, EPSILON = 1e-6
- DOUBLE: IEEE-754 binary64, EPSILON = 1e-12

Выбор делается ОДИН раз при импорте модуля (переменная окружения
OXYGEN_MATH_PRECISION) и далее не меняется. Все константы (PI, TWO_PI,
HALF_PI, DEG_TO_RAD, RAD_TO_DEG, EPSILON) выводятся из этого решения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никаких разбросанных по модулям литералов PI/EPSILON
2. В режиме SINGLE все компоненты векторов/матриц округляются до binary32
3. Невалидная конфигурация → pydantic.ValidationError при импорте
"""

import logging
import math
import os
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

# Переменная окружения, задающая точность
PRECISION_ENV_VAR: Final[str] = "OXYGEN_MATH_PRECISION"

# Epsilon для сравнений и вырожденных случаев
EPS_SINGLE: Final[float] = 1e-6
EPS_DOUBLE: Final[float] = 1e-12


# =============================================================================
# ENUMS
# =============================================================================


class Precision(str, Enum):
    """Ширина вещественного типа real"""

    SINGLE = "single"
    DOUBLE = "double"


# =============================================================================
# SCALAR COERCION
# =============================================================================


def to_float32(value: float) -> float:
    """
    Округление float до ближайшего IEEE-754 binary32.

    Значения вне диапазона binary32 переходят в ±inf (как при приведении
    double → float), NaN сохраняется.

    Examples:
        >>> to_float32(0.1)
        0.10000000149011612
        >>> to_float32(1.0)
        1.0
    """
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def to_float64(value: float) -> float:
    """Приведение к Python float (binary64) без округления."""
    return float(value)


# =============================================================================
# SETTINGS
# =============================================================================


class KernelSettings(BaseModel):
    """
    Конфигурация ядра.

    Immutable модель (frozen=True): точность выбирается один раз на процесс.
    """

    precision: Precision = Field(
        default=Precision.DOUBLE, description="Ширина real (single/double)"
    )

    model_config = {"frozen": True}

    @field_validator("precision", mode="before")
    @classmethod
    def normalize_precision(cls, v: object) -> object:
        """Допускаем 'SINGLE', ' double ' и т.п."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @classmethod
    def from_env(cls) -> "KernelSettings":
        """
        Чтение настроек из окружения.

        Returns:
            KernelSettings с precision из OXYGEN_MATH_PRECISION
            (по умолчанию DOUBLE)

        Raises:
            ValidationError: если значение переменной невалидно
        """
        raw = os.environ.get(PRECISION_ENV_VAR)
        if raw is None or not raw.strip():
            return cls()
        return cls(precision=raw)


@dataclass(frozen=True)
class ScalarConstants:
    """Набор констант, согласованный с выбранной точностью."""

    precision: Precision
    real: Callable[[float], float]
    PI: float
    TWO_PI: float
    HALF_PI: float
    DEG_TO_RAD: float
    RAD_TO_DEG: float
    EPSILON: float


def constants_for(precision: Precision) -> ScalarConstants:
    """
    Построение констант для заданной точности.

    Производные константы считаются в выбранной точности из округлённого PI,
    как это делает single-precision сборка.

    Args:
        precision: Ширина real

    Returns:
        ScalarConstants
    """
    if precision is Precision.SINGLE:
        real = to_float32
        eps = EPS_SINGLE
    else:
        real = to_float64
        eps = EPS_DOUBLE

    pi = real(math.pi)
    return ScalarConstants(
        precision=precision,
        real=real,
        PI=pi,
        TWO_PI=real(2.0 * pi),
        HALF_PI=real(0.5 * pi),
        DEG_TO_RAD=real(pi / 180.0),
        RAD_TO_DEG=real(180.0 / pi),
        EPSILON=real(eps),
    )


# =============================================================================
# RESOLVED CONSTANTS (единая точка решения)
# =============================================================================

SETTINGS: Final[KernelSettings] = KernelSettings.from_env()
_CONSTANTS: Final[ScalarConstants] = constants_for(SETTINGS.precision)

PRECISION: Final[Precision] = _CONSTANTS.precision
real: Final[Callable[[float], float]] = _CONSTANTS.real

PI: Final[float] = _CONSTANTS.PI
TWO_PI: Final[float] = _CONSTANTS.TWO_PI
HALF_PI: Final[float] = _CONSTANTS.HALF_PI
DEG_TO_RAD: Final[float] = _CONSTANTS.DEG_TO_RAD
RAD_TO_DEG: Final[float] = _CONSTANTS.RAD_TO_DEG
EPSILON: Final[float] = _CONSTANTS.EPSILON

logger.debug("Scalar precision resolved: %s (EPSILON=%g)", PRECISION.value, EPSILON)
