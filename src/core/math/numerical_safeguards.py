"""
Numerical Safeguards — валидация размеров, индексов и значений

Модуль содержит общие проверки для контейнеров src.core.grid:
- Проверка float на конечность (не NaN, не Inf)
- Приведение числовых значений к float с отказом от bool/str/None
- Валидация размеров матрицы (положительные int)
- Приведение индексов к int (operator.index) и проверка диапазона [0, limit)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Размеры матрицы всегда положительные int (bool не является размером)
2. Индекс считается валидным только при 0 <= index < limit
   (отрицательные индексы НЕ оборачиваются, как в list)
3. Элементы матрицы всегда конечные float (NaN/Inf отклоняются)
4. Все проверки детерминированы и не имеют side effects
"""

import math
import operator
from numbers import Real
from typing import Final, Optional

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Минимальный допустимый размер измерения (rows / columns)
MIN_DIMENSION: Final[int] = 1


# =============================================================================
# FLOAT ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def as_real(value: object, name: str) -> float:
    """
    Приведение числового значения к float.

    Принимает int/float (и другие numbers.Real), отклоняет bool, str, None.

    Args:
        value: Значение для записи в матрицу
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        TypeError: Если value не является вещественным числом

    Examples:
        >>> as_real(3, "value")
        3.0
        >>> as_real(True, "value")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        TypeError: value must be a real number, got bool
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def as_finite_real(value: object, name: str) -> float:
    """
    as_real + validate_finite: значение, пригодное для хранения в матрице.

    Raises:
        TypeError: Если value не является вещественным числом
        ValueError: Если value NaN/Inf
    """
    result = as_real(value, name)
    validate_finite(result, name)
    return result


# =============================================================================
# РАЗМЕРЫ И ИНДЕКСЫ
# =============================================================================


def validate_dimension(value: int, name: str) -> None:
    """
    Валидация размера измерения матрицы.

    Args:
        value: Количество строк или столбцов
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value < MIN_DIMENSION
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < MIN_DIMENSION:
        raise ValueError(f"{name} must be >= {MIN_DIMENSION}, got {value}")


def as_index(value: object) -> Optional[int]:
    """
    Приведение целочисленного индекса к int через operator.index.

    Принимает int и любые типы с __index__ (например, numpy.int64).
    bool, float, str и прочие не-целые значения дают None.

    Examples:
        >>> as_index(2)
        2
        >>> as_index(2.0) is None
        True
        >>> as_index(True) is None
        True
    """
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def index_in_range(index: object, limit: int) -> bool:
    """
    Проверка индекса в диапазоне [0, limit).

    Индексы без __index__ (float, str, None) и bool считаются невалидными.

    Examples:
        >>> index_in_range(0, 3)
        True
        >>> index_in_range(3, 3)
        False
        >>> index_in_range(-1, 3)
        False
    """
    position = as_index(index)
    return position is not None and 0 <= position < limit
