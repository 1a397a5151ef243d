"""Текстовое представление матриц для консоли."""

import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO, Tuple


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация вывода матрицы.

    - precision: знаков после запятой
    - separator: разделитель значений в строке
    - brackets: открывающая и закрывающая скобки строки
    """
    precision: int = 1
    separator: str = ", "
    brackets: Tuple[str, str] = ("[", "]")


def format_row(values: Sequence[float], config: Optional[FormatConfig] = None) -> str:
    config = config or FormatConfig()
    if config.precision < 0:
        raise ValueError(f"precision must be non-negative, got {config.precision}")

    body = config.separator.join(f"{v:.{config.precision}f}" for v in values)
    return f"{config.brackets[0]}{body}{config.brackets[1]}"


def format_matrix(matrix, config: Optional[FormatConfig] = None) -> List[str]:
    """
    Строки матрицы в текстовом виде, сверху вниз.

    Args:
        matrix: Matrix или NestedMatrix (любой объект с rows и get_row)
        config: Конфигурация вывода (default: FormatConfig())

    Returns:
        Список строк вида "[1.0, 2.0, 3.0]"
    """
    return [format_row(matrix.get_row(row), config) for row in range(matrix.rows)]


def print_matrix(
    matrix,
    config: Optional[FormatConfig] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Печать матрицы построчно в stream (default: stdout)."""
    out = stream or sys.stdout
    for line in format_matrix(matrix, config):
        print(line, file=out)
