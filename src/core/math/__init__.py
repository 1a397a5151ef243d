"""
Core math modules

Численные проверки для контейнеров: размеры, индексы, значения.
"""

from src.core.math.numerical_safeguards import (
    MIN_DIMENSION,
    as_finite_real,
    as_index,
    as_real,
    index_in_range,
    is_valid_float,
    validate_dimension,
    validate_finite,
)

__all__ = [
    # Constants
    "MIN_DIMENSION",
    # Float checks
    "as_finite_real",
    "as_real",
    "is_valid_float",
    "validate_finite",
    # Dimensions and indices
    "as_index",
    "index_in_range",
    "validate_dimension",
]
