"""
Matrix — двумерный контейнер float с проверкой границ

Матрица фиксированного размера rows × columns поверх плоского буфера
в row-major порядке:

    offset(row, column) = row * columns + column

Операции:
- get / set: чтение и запись ячейки с проверкой границ
- get_row: копия строки длиной columns
- fill: заполнение арифметической прогрессией по линейному индексу
- to_snapshot / from_snapshot, to_dict / from_dict: экспорт/восстановление
  через MatrixSnapshot и JSON Schema контракт

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(elements) == rows * columns всегда
2. Принимаются только 0 <= row < rows, 0 <= column < columns
   (нарушение → OutOfBounds, без wrap-around отрицательных индексов)
3. Буфер принадлежит матрице: наружу отдаются только копии
4. Все элементы конечные float: NaN/Inf не записываются ни set, ни fill
"""

import logging
from typing import Any, Dict, Iterator, List, Tuple

from src.core.domain.matrix_snapshot import MatrixSnapshot
from src.core.math.numerical_safeguards import (
    as_finite_real,
    as_index,
    index_in_range,
    is_valid_float,
    validate_dimension,
)

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OutOfBounds(IndexError):
    """
    Индекс вне диапазона матрицы.

    Наследует IndexError, поэтому ловится и как стандартная ошибка индекса.

    Attributes:
        row: Запрошенная строка
        column: Запрошенный столбец (None для операций над строкой)
        rows: Количество строк матрицы
        columns: Количество столбцов матрицы
    """

    def __init__(self, row: Any, column: Any, rows: int, columns: int):
        self.row = row
        self.column = column
        self.rows = rows
        self.columns = columns
        if column is None:
            message = f"Row index out of range: row={row} for {rows}x{columns} matrix"
        else:
            message = (
                f"Index out of range: (row={row}, column={column}) "
                f"for {rows}x{columns} matrix"
            )
        super().__init__(message)


# =============================================================================
# FILL
# =============================================================================


def fill_progression(count: int, base_value: float, increment: float) -> List[float]:
    """
    Прогрессия base_value + increment * i для i = 0 .. count-1.

    Raises:
        TypeError: Если параметры не вещественные числа
        ValueError: Если параметры NaN/Inf или элемент переполняется до Inf
    """
    base = as_finite_real(base_value, "base_value")
    step = as_finite_real(increment, "increment")

    values = [base + step * i for i in range(count)]
    for i, value in enumerate(values):
        if not is_valid_float(value):
            raise ValueError(
                f"fill overflows at linear index {i}: "
                f"base_value={base}, increment={step}"
            )
    return values


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Матрица float фиксированного размера с плоским row-major буфером.

    Поддерживает индексирование в стиле Python:
        m[row, column]          → get(row, column)
        m[row, column] = value  → set(row, column, value)
        m[row]                  → get_row(row)
    """

    def __init__(self, rows: int, columns: int):
        """
        Args:
            rows: Количество строк (int >= 1)
            columns: Количество столбцов (int >= 1)

        Raises:
            ValueError: Если размеры не положительные int
        """
        validate_dimension(rows, "rows")
        validate_dimension(columns, "columns")

        self._rows = rows
        self._columns = columns
        self._grid: List[float] = [0.0] * (rows * columns)

        logger.debug("Created %dx%d matrix", rows, columns)

    # -------------------------------------------------------------------------
    # Размеры
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._columns)

    @property
    def elements(self) -> List[float]:
        """Копия плоского буфера в row-major порядке."""
        return list(self._grid)

    # -------------------------------------------------------------------------
    # Проверка границ
    # -------------------------------------------------------------------------

    def index_is_valid(self, row: int, column: int) -> bool:
        """Проверка (row, column) без exception."""
        return index_in_range(row, self._rows) and index_in_range(column, self._columns)

    def _offset(self, row: int, column: int) -> int:
        if not self.index_is_valid(row, column):
            logger.debug(
                "Rejected index (%r, %r) for %dx%d matrix",
                row, column, self._rows, self._columns,
            )
            raise OutOfBounds(row, column, self._rows, self._columns)
        return as_index(row) * self._columns + as_index(column)

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def get(self, row: int, column: int) -> float:
        """
        Чтение ячейки.

        Raises:
            OutOfBounds: Если row или column вне диапазона
        """
        return self._grid[self._offset(row, column)]

    def set(self, row: int, column: int, value: float) -> None:
        """
        Запись ячейки.

        Args:
            row: Индекс строки
            column: Индекс столбца
            value: Вещественное число (сохраняется как float)

        Raises:
            OutOfBounds: Если row или column вне диапазона
            TypeError: Если value не вещественное число
            ValueError: Если value NaN/Inf
        """
        offset = self._offset(row, column)
        self._grid[offset] = as_finite_real(value, "value")

    def get_row(self, row: int) -> List[float]:
        """
        Копия строки (изменение результата не влияет на матрицу).

        Raises:
            OutOfBounds: Если row вне диапазона
        """
        if not index_in_range(row, self._rows):
            logger.debug("Rejected row %r for %dx%d matrix", row, self._rows, self._columns)
            raise OutOfBounds(row, None, self._rows, self._columns)

        start = as_index(row) * self._columns
        return self._grid[start:start + self._columns]

    def iter_rows(self) -> Iterator[List[float]]:
        """Итератор по копиям строк сверху вниз."""
        for row in range(self._rows):
            yield self.get_row(row)

    def fill(self, base_value: float, increment: float) -> None:
        """
        Заполнение прогрессией по линейному индексу.

        element[i] = base_value + increment * i, i = 0 .. rows*columns-1
        (element[0] == base_value).

        Args:
            base_value: Значение первого элемента
            increment: Шаг между соседними элементами

        Raises:
            TypeError: Если параметры не вещественные числа
            ValueError: Если параметры NaN/Inf или прогрессия выходит
                за пределы конечных float (матрица не изменяется)
        """
        self._grid = fill_progression(len(self._grid), base_value, increment)

        logger.debug(
            "Filled %dx%d matrix: base=%s, increment=%s",
            self._rows, self._columns, base_value, increment,
        )

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __getitem__(self, key):
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(f"Matrix index must be (row, column), got {key!r}")
            return self.get(key[0], key[1])
        return self.get_row(key)

    def __setitem__(self, key, value) -> None:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                "Matrix supports only cell assignment: m[row, column] = value"
            )
        self.set(key[0], key[1], value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._grid == other._grid

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns})"

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> MatrixSnapshot:
        """Immutable снапшот текущего состояния."""
        return MatrixSnapshot(
            rows=self._rows,
            columns=self._columns,
            elements=list(self._grid),
        )

    @classmethod
    def from_snapshot(cls, snapshot: MatrixSnapshot) -> "Matrix":
        """Восстановление матрицы из снапшота (буфер копируется)."""
        matrix = cls(snapshot.rows, snapshot.columns)
        matrix._grid = [float(v) for v in snapshot.elements]
        return matrix

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict, соответствующий контракту matrix_snapshot.json."""
        return self.to_snapshot().model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any], validate: bool = True) -> "Matrix":
        """
        Восстановление матрицы из plain dict.

        Args:
            data: Данные снапшота
            validate: Проверять данные JSON Schema контрактом (default: True)

        Raises:
            jsonschema.ValidationError: Если данные нарушают контракт
            pydantic.ValidationError: Если len(elements) != rows * columns
        """
        if validate:
            from src.core.contracts.validators import validate_matrix_snapshot

            validate_matrix_snapshot(data)
        return cls.from_snapshot(MatrixSnapshot.model_validate(data))
