"""
Contract Validation Module

Модуль для валидации JSON контрактов (src/core/contracts/schema/).
"""

from .validators import (
    ContractValidator,
    MatrixSnapshotValidator,
    SchemaLoader,
    get_schema_loader,
    validate_matrix_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixSnapshotValidator",
    # Functions
    "get_schema_loader",
    "validate_matrix_snapshot",
]
