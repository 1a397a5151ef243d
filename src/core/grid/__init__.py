"""
Grid containers — матрицы float с проверкой границ.

- Matrix: плоский row-major буфер
- NestedMatrix: список строк
- formatting: текстовый вывод
"""

from src.core.grid.formatting import (
    FormatConfig,
    format_matrix,
    format_row,
    print_matrix,
)
from src.core.grid.matrix import Matrix, OutOfBounds
from src.core.grid.nested_matrix import NestedMatrix

__all__ = [
    # Containers
    "Matrix",
    "NestedMatrix",
    # Exceptions
    "OutOfBounds",
    # Formatting
    "FormatConfig",
    "format_matrix",
    "format_row",
    "print_matrix",
]
