"""
Текстовое представление векторов и матриц (debug-only, не wire format).

Правило ширины колонки: max(len(str(component))) + 3, считается на каждый
вызов; каждое значение выравнивается по правому краю.

Examples:
    >>> format_components([1.0, 2.5])
    '[     1,   2.5]'
"""

from typing import Sequence

# Отступ, добавляемый к самой длинной записи компоненты
COLUMN_PADDING = 3


def format_scalar(value: float) -> str:
    """Короткая запись числа (6 значащих цифр, как у потокового вывода)."""
    return format(value, "g")


def column_width(values: Sequence[float]) -> int:
    """Ширина колонки для набора значений."""
    return max(len(format_scalar(v)) for v in values) + COLUMN_PADDING


def format_components(values: Sequence[float], width: int | None = None) -> str:
    """
    Рендеринг вектора в виде [a,b,...].

    Args:
        values: Компоненты вектора
        width: Ширина колонки (по умолчанию вычисляется из values)

    Returns:
        Строка вида '[   x,   y]'
    """
    if width is None:
        width = column_width(values)
    return "[" + ",".join(format_scalar(v).rjust(width) for v in values) + "]"


def format_rows(rows: Sequence[Sequence[float]]) -> str:
    """Рендеринг матрицы построчно с общей шириной колонки."""
    width = column_width([v for row in rows for v in row])
    return "[" + ",".join(format_components(row, width) for row in rows) + "]"
