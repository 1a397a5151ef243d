"""
MatrixSnapshot — Модель снапшота состояния матрицы

Контракт: contracts/schema/matrix_snapshot.json

Immutable Pydantic модель, представляющая полное состояние Matrix:
размеры и плоский row-major буфер элементов.
JSON Schema проверяет структуру и типы; инвариант
len(elements) == rows * columns проверяется моделью.
"""

from typing import Final

from pydantic import BaseModel, Field, model_validator

# Текущая версия схемы снапшота
MATRIX_SNAPSHOT_SCHEMA_VERSION: Final[str] = "1"


class MatrixSnapshot(BaseModel):
    """
    Снапшот матрицы (rows, columns, elements).

    Immutable модель (frozen=True). NaN/Inf в elements запрещены.
    """

    schema_version: str = Field(
        default=MATRIX_SNAPSHOT_SCHEMA_VERSION,
        pattern="^1$",
        description="Версия схемы для tracking совместимости",
    )
    rows: int = Field(..., ge=1, description="Количество строк")
    columns: int = Field(..., ge=1, description="Количество столбцов")
    elements: list[float] = Field(
        ..., description="Элементы в row-major порядке (длина rows * columns)"
    )

    model_config = {"frozen": True, "allow_inf_nan": False}

    @model_validator(mode="after")
    def validate_element_count(self) -> "MatrixSnapshot":
        """Проверка инварианта len(elements) == rows * columns."""
        expected = self.rows * self.columns
        if len(self.elements) != expected:
            raise ValueError(
                f"elements length {len(self.elements)} does not match "
                f"rows * columns = {expected}"
            )
        return self
