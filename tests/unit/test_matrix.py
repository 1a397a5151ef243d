"""
Тесты для Matrix — двумерный контейнер с проверкой границ

Проверяемые инварианты:
1. Новая матрица заполнена 0.0
2. set → get возвращает записанное значение
3. Индексы вне [0, rows) × [0, columns) → OutOfBounds
4. get_row возвращает копию строки
5. fill заполняет прогрессией по линейному индексу
"""

import logging

import pytest

from src.core.grid import Matrix, OutOfBounds


class IndexLike:
    """Целочисленный индекс не-int типа (как numpy.int64)."""

    def __init__(self, value):
        self.value = value

    def __index__(self):
        return self.value

    def __repr__(self):
        return f"IndexLike({self.value})"


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def filled_3x3():
    """Матрица 3×3, заполненная 1..9."""
    matrix = Matrix(3, 3)
    matrix.fill(1, 1)
    return matrix


# =============================================================================
# ТЕСТЫ: Конструирование
# =============================================================================


class TestConstruction:
    """Тесты создания матрицы."""

    @pytest.mark.parametrize("rows,columns", [(1, 1), (3, 3), (2, 5), (7, 1)])
    def test_all_elements_zero(self, rows, columns):
        """Все rows*columns элементов равны 0.0."""
        matrix = Matrix(rows, columns)
        assert matrix.elements == [0.0] * (rows * columns)
        for r in range(rows):
            for c in range(columns):
                assert matrix.get(r, c) == 0.0

    def test_dimensions_exposed(self):
        """rows, columns и shape доступны."""
        matrix = Matrix(2, 4)
        assert matrix.rows == 2
        assert matrix.columns == 4
        assert matrix.shape == (2, 4)

    def test_dimensions_immutable(self):
        """rows и columns нельзя переприсвоить."""
        matrix = Matrix(2, 2)
        with pytest.raises(AttributeError):
            matrix.rows = 5
        with pytest.raises(AttributeError):
            matrix.columns = 5

    @pytest.mark.parametrize("rows,columns", [(0, 3), (3, 0), (-1, 2), (2, -4)])
    def test_non_positive_dimensions_rejected(self, rows, columns):
        """Неположительные размеры → ValueError."""
        with pytest.raises(ValueError, match="must be >= 1"):
            Matrix(rows, columns)

    @pytest.mark.parametrize("rows", [2.0, "3", True, None])
    def test_non_int_dimensions_rejected(self, rows):
        """Не-int размеры → ValueError."""
        with pytest.raises(ValueError, match="must be an int"):
            Matrix(rows, 3)

    def test_repr(self):
        assert repr(Matrix(2, 3)) == "Matrix(rows=2, columns=3)"


# =============================================================================
# ТЕСТЫ: get / set
# =============================================================================


class TestCellAccess:
    """Тесты чтения и записи ячеек."""

    def test_set_then_get_roundtrip(self):
        """set(r, c, v) → get(r, c) == v для всех ячеек."""
        matrix = Matrix(3, 4)
        for r in range(3):
            for c in range(4):
                matrix.set(r, c, r * 10 + c + 0.5)
        for r in range(3):
            for c in range(4):
                assert matrix.get(r, c) == r * 10 + c + 0.5

    def test_set_does_not_touch_other_cells(self):
        """Запись меняет ровно одну ячейку."""
        matrix = Matrix(2, 2)
        matrix.set(1, 0, 7.0)
        assert matrix.elements == [0.0, 0.0, 7.0, 0.0]

    def test_row_major_offset(self):
        """Ячейка (row, column) хранится по смещению row * columns + column."""
        matrix = Matrix(3, 4)
        matrix.set(2, 1, 42.0)
        assert matrix.elements[2 * 4 + 1] == 42.0

    def test_int_value_stored_as_float(self):
        matrix = Matrix(1, 1)
        matrix.set(0, 0, 3)
        value = matrix.get(0, 0)
        assert value == 3.0
        assert isinstance(value, float)

    @pytest.mark.parametrize("value", ["1.0", None, True, [1.0]])
    def test_non_numeric_value_rejected(self, value):
        """Не вещественные значения → TypeError."""
        matrix = Matrix(2, 2)
        with pytest.raises(TypeError, match="must be a real number"):
            matrix.set(0, 0, value)
        assert matrix.get(0, 0) == 0.0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_value_rejected(self, value):
        """NaN/Inf не записываются, матрица остаётся экспортируемой."""
        matrix = Matrix(1, 1)
        with pytest.raises(ValueError, match="not NaN/Inf"):
            matrix.set(0, 0, value)
        assert matrix.get(0, 0) == 0.0
        assert matrix.to_snapshot().elements == [0.0]

    def test_subscript_access(self):
        """m[row, column] читает и пишет как get/set."""
        matrix = Matrix(3, 3)
        matrix[1, 1] = 5.2
        assert matrix[1, 1] == 5.2
        assert matrix.get(1, 1) == 5.2

    def test_row_assignment_not_supported(self):
        matrix = Matrix(2, 2)
        with pytest.raises(TypeError):
            matrix[0] = [1.0, 2.0]

    def test_three_component_index_rejected(self):
        matrix = Matrix(2, 2)
        with pytest.raises(TypeError):
            matrix[0, 0, 0]


# =============================================================================
# ТЕСТЫ: Проверка границ
# =============================================================================


OUT_OF_RANGE_3x4 = [
    (-1, 0),
    (0, -1),
    (3, 0),
    (0, 4),
    (3, 4),
    (100, 100),
    (-5, -5),
]


class TestBounds:
    """Тесты OutOfBounds для get/set/get_row."""

    @pytest.mark.parametrize("row,column", OUT_OF_RANGE_3x4)
    def test_get_out_of_bounds(self, row, column):
        matrix = Matrix(3, 4)
        with pytest.raises(OutOfBounds):
            matrix.get(row, column)

    @pytest.mark.parametrize("row,column", OUT_OF_RANGE_3x4)
    def test_set_out_of_bounds(self, row, column):
        """Отклонённая запись не меняет матрицу."""
        matrix = Matrix(3, 4)
        with pytest.raises(OutOfBounds):
            matrix.set(row, column, 1.0)
        assert matrix.elements == [0.0] * 12

    def test_column_overflow_does_not_wrap_to_next_row(self):
        """(0, columns) не адресует (1, 0), хотя смещение совпадает."""
        matrix = Matrix(3, 3)
        matrix.fill(1, 1)
        with pytest.raises(OutOfBounds):
            matrix.get(0, 3)

    def test_get_row_out_of_bounds(self):
        """Матрица 3×3: get_row(5) → OutOfBounds."""
        matrix = Matrix(rows=3, columns=3)
        with pytest.raises(OutOfBounds):
            matrix.get_row(5)
        with pytest.raises(OutOfBounds):
            matrix.get_row(-1)

    def test_out_of_bounds_is_index_error(self):
        """OutOfBounds ловится как IndexError."""
        matrix = Matrix(2, 2)
        with pytest.raises(IndexError):
            matrix.get(2, 0)

    def test_out_of_bounds_attributes(self):
        matrix = Matrix(3, 4)
        with pytest.raises(OutOfBounds, match="row=3, column=1") as exc_info:
            matrix.get(3, 1)
        err = exc_info.value
        assert (err.row, err.column) == (3, 1)
        assert (err.rows, err.columns) == (3, 4)

    def test_row_error_has_no_column(self):
        matrix = Matrix(3, 3)
        with pytest.raises(OutOfBounds, match="Row index out of range") as exc_info:
            matrix.get_row(3)
        assert exc_info.value.column is None

    @pytest.mark.parametrize("row,column", [(0.0, 0), (0, 1.0), (True, 0)])
    def test_non_int_index_rejected(self, row, column):
        matrix = Matrix(2, 2)
        with pytest.raises(OutOfBounds):
            matrix.get(row, column)

    def test_index_is_valid(self):
        matrix = Matrix(2, 3)
        assert matrix.index_is_valid(0, 0)
        assert matrix.index_is_valid(1, 2)
        assert not matrix.index_is_valid(2, 0)
        assert not matrix.index_is_valid(0, 3)
        assert not matrix.index_is_valid(-1, 0)

    def test_integral_index_types_accepted(self):
        """Индексы с __index__ (например, numpy.int64) работают как int."""
        matrix = Matrix(2, 3)
        matrix.fill(1, 1)
        assert matrix.get(IndexLike(1), 0) == 4.0
        assert matrix[IndexLike(1), IndexLike(2)] == 6.0
        assert matrix.get_row(IndexLike(1)) == [4.0, 5.0, 6.0]
        matrix.set(IndexLike(0), IndexLike(1), 9.5)
        assert matrix.get(0, 1) == 9.5
        assert matrix.index_is_valid(IndexLike(1), IndexLike(2))

    def test_integral_index_out_of_range(self):
        matrix = Matrix(2, 2)
        with pytest.raises(OutOfBounds):
            matrix.get(IndexLike(2), 0)
        with pytest.raises(OutOfBounds):
            matrix.get_row(IndexLike(-1))

    def test_subscript_out_of_bounds(self):
        matrix = Matrix(3, 3)
        with pytest.raises(OutOfBounds):
            matrix[3, 0]
        with pytest.raises(OutOfBounds):
            matrix[0, 3] = 1.0
        with pytest.raises(OutOfBounds):
            matrix[5]

    def test_rejected_index_logged(self, caplog):
        matrix = Matrix(2, 2)
        with caplog.at_level(logging.DEBUG, logger="src.core.grid.matrix"):
            with pytest.raises(OutOfBounds):
                matrix.get(5, 0)
        assert "Rejected index" in caplog.text


# =============================================================================
# ТЕСТЫ: get_row
# =============================================================================


class TestGetRow:
    """Тесты копирования строк."""

    def test_row_matches_cells(self, filled_3x3):
        """get_row(r) == [get(r, 0), ..., get(r, columns-1)]."""
        for r in range(3):
            assert filled_3x3.get_row(r) == [filled_3x3.get(r, c) for c in range(3)]

    def test_row_length_is_columns(self):
        matrix = Matrix(2, 5)
        assert len(matrix.get_row(1)) == 5

    def test_row_is_copy(self, filled_3x3):
        """Изменение возвращённой строки не меняет матрицу."""
        row = filled_3x3.get_row(1)
        row[0] = 999.0
        row.append(1.0)
        assert filled_3x3.get_row(1) == [4.0, 5.0, 6.0]
        assert filled_3x3.get(1, 0) == 4.0

    def test_elements_is_copy(self, filled_3x3):
        elements = filled_3x3.elements
        elements[0] = -1.0
        assert filled_3x3.get(0, 0) == 1.0

    def test_subscript_row(self, filled_3x3):
        assert filled_3x3[2] == [7.0, 8.0, 9.0]

    def test_iter_rows(self, filled_3x3):
        assert list(filled_3x3.iter_rows()) == [
            [1.0, 2.0, 3.0],
            [4.0, 5.0, 6.0],
            [7.0, 8.0, 9.0],
        ]


# =============================================================================
# ТЕСТЫ: fill
# =============================================================================


class TestFill:
    """Тесты заполнения прогрессией."""

    def test_fill_3x3_one_one(self, filled_3x3):
        """fill(1, 1) на 3×3: элементы 1..9 в row-major порядке."""
        assert filled_3x3.get(0, 0) == 1
        assert filled_3x3.get(0, 1) == 2
        assert filled_3x3.get(0, 2) == 3
        assert filled_3x3.get(1, 0) == 4
        assert filled_3x3.get(1, 1) == 5
        assert filled_3x3.get(2, 2) == 9
        assert filled_3x3.elements == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0]

    def test_first_element_is_base(self):
        matrix = Matrix(2, 3)
        matrix.fill(2.5, -0.5)
        assert matrix.get(0, 0) == 2.5

    def test_linear_progression(self):
        matrix = Matrix(2, 3)
        matrix.fill(10.0, 0.5)
        for i, value in enumerate(matrix.elements):
            assert value == pytest.approx(10.0 + 0.5 * i)

    def test_fill_overwrites_previous_values(self):
        matrix = Matrix(2, 2)
        matrix.set(1, 1, 100.0)
        matrix.fill(0.0, 0.0)
        assert matrix.elements == [0.0, 0.0, 0.0, 0.0]

    def test_fill_then_set(self, filled_3x3):
        filled_3x3[1, 1] = 5.2
        assert filled_3x3.get_row(1) == [4.0, 5.2, 6.0]

    @pytest.mark.parametrize("base,increment", [(float("nan"), 1.0), (1.0, float("inf"))])
    def test_non_finite_parameters_rejected(self, base, increment):
        matrix = Matrix(2, 2)
        with pytest.raises(ValueError, match="not NaN/Inf"):
            matrix.fill(base, increment)
        assert matrix.elements == [0.0] * 4

    def test_non_numeric_parameters_rejected(self):
        matrix = Matrix(2, 2)
        with pytest.raises(TypeError):
            matrix.fill("1", 1)

    def test_overflowing_progression_rejected(self):
        """Конечные параметры, но элемент переполняется до Inf: матрица не меняется."""
        matrix = Matrix(1, 2)
        matrix.set(0, 1, 2.0)
        with pytest.raises(ValueError, match="overflows at linear index 1"):
            matrix.fill(1e308, 1e308)
        assert matrix.elements == [0.0, 2.0]
        matrix.to_snapshot()


# =============================================================================
# ТЕСТЫ: Равенство
# =============================================================================


class TestEquality:
    """Тесты сравнения матриц."""

    def test_equal_when_same_shape_and_elements(self, filled_3x3):
        other = Matrix(3, 3)
        other.fill(1, 1)
        assert filled_3x3 == other

    def test_not_equal_different_elements(self, filled_3x3):
        other = Matrix(3, 3)
        assert filled_3x3 != other

    def test_not_equal_different_shape(self):
        """1×4 и 4×1 с одинаковым буфером не равны."""
        a = Matrix(1, 4)
        b = Matrix(4, 1)
        assert a.elements == b.elements
        assert a != b

    def test_not_equal_to_other_types(self):
        assert Matrix(1, 1) != [0.0]
