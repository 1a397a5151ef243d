"""
NestedMatrix — матрица как список строк

Альтернативная раскладка: rows списков по columns float.
Основной доступ построчный (m[row], m[row] = values), ячейки
доступны через get/set или m[row, column].

fill даёт те же значения, что Matrix.fill для той же формы:
    grid[i][j] = base + increment * (i * columns + j)
"""

import logging
from typing import List, Sequence, Tuple

from src.core.grid.matrix import Matrix, OutOfBounds, fill_progression
from src.core.math.numerical_safeguards import (
    as_finite_real,
    as_index,
    index_in_range,
    validate_dimension,
)

logger = logging.getLogger(__name__)


class NestedMatrix:
    """Матрица float с хранением в виде списка строк."""

    def __init__(self, rows: int, columns: int):
        validate_dimension(rows, "rows")
        validate_dimension(columns, "columns")

        self._rows = rows
        self._columns = columns
        self._grid: List[List[float]] = [[0.0] * columns for _ in range(rows)]

        logger.debug("Created nested %dx%d matrix", rows, columns)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def _row_index(self, row: int) -> int:
        if not index_in_range(row, self._rows):
            logger.debug(
                "Rejected row %r for nested %dx%d matrix", row, self._rows, self._columns
            )
            raise OutOfBounds(row, None, self._rows, self._columns)
        return as_index(row)

    def _cell_index(self, row: int, column: int) -> Tuple[int, int]:
        if not (index_in_range(row, self._rows) and index_in_range(column, self._columns)):
            logger.debug(
                "Rejected index (%r, %r) for nested %dx%d matrix",
                row, column, self._rows, self._columns,
            )
            raise OutOfBounds(row, column, self._rows, self._columns)
        return as_index(row), as_index(column)

    def get_row(self, row: int) -> List[float]:
        """
        Копия строки.

        Raises:
            OutOfBounds: Если row вне диапазона
        """
        return list(self._grid[self._row_index(row)])

    def set_row(self, row: int, values: Sequence[float]) -> None:
        """
        Замена строки целиком.

        Raises:
            OutOfBounds: Если row вне диапазона
            ValueError: Если len(values) != columns или среди values есть NaN/Inf
            TypeError: Если среди values есть не вещественные числа
        """
        index = self._row_index(row)
        if len(values) != self._columns:
            raise ValueError(
                f"row must have {self._columns} values, got {len(values)}"
            )
        self._grid[index] = [as_finite_real(v, "value") for v in values]

    def get(self, row: int, column: int) -> float:
        r, c = self._cell_index(row, column)
        return self._grid[r][c]

    def set(self, row: int, column: int, value: float) -> None:
        r, c = self._cell_index(row, column)
        self._grid[r][c] = as_finite_real(value, "value")

    def fill(self, base_value: float, increment: float) -> None:
        """Заполнение прогрессией, совпадающей с Matrix.fill."""
        values = fill_progression(self._rows * self._columns, base_value, increment)
        self._grid = [
            values[i * self._columns:(i + 1) * self._columns] for i in range(self._rows)
        ]

        logger.debug(
            "Filled nested %dx%d matrix: base=%s, increment=%s",
            self._rows, self._columns, base_value, increment,
        )

    def to_matrix(self) -> Matrix:
        """Конверсия в плоскую Matrix."""
        matrix = Matrix(self._rows, self._columns)
        for i, row_values in enumerate(self._grid):
            for j, value in enumerate(row_values):
                matrix.set(i, j, value)
        return matrix

    def __getitem__(self, key):
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"NestedMatrix index must be row or (row, column), got {key!r}")
            return self.get(key[0], key[1])
        return self.get_row(key)

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"NestedMatrix index must be row or (row, column), got {key!r}")
            self.set(key[0], key[1], value)
        else:
            self.set_row(key, value)

    def __repr__(self) -> str:
        return f"NestedMatrix(rows={self._rows}, columns={self._columns})"
