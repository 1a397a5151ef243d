"""Subscript demo: Matrix и NestedMatrix в консоли.

Запуск:
    python -m src.playground.subscript_demo [--debug]
"""

import logging
import sys
from typing import List, Optional, TextIO

from src.core.grid import Matrix, NestedMatrix, format_row, print_matrix
from src.core.logging_config import setup_logging


def run_demo(stream: Optional[TextIO] = None) -> None:
    """Печать демонстрации индексирования для обеих раскладок."""
    out = stream or sys.stdout

    print("Example matrix", file=out)
    matrix = Matrix(rows=3, columns=3)
    matrix.fill(1, 1)
    print_matrix(matrix, stream=out)
    print(f"Row 1: {format_row(matrix[1])}", file=out)
    print(f"1x1: {matrix[1, 1]}", file=out)
    matrix[1, 1] = 5.2
    print_matrix(matrix, stream=out)

    print("Example 2", file=out)
    nested = NestedMatrix(rows=3, columns=3)
    nested.fill(1, 1)
    print_matrix(nested, stream=out)
    print(f"Row 1: {format_row(nested[1])}", file=out)
    print(f"1x2: {nested[1, 2]}", file=out)
    nested[1, 1] = 5.1
    print_matrix(nested, stream=out)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    setup_logging(level=logging.DEBUG if "--debug" in args else logging.WARNING)
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())
