"""
Domain models and value objects.

Contains immutable snapshot models for grid containers.
"""

from src.core.domain.matrix_snapshot import (
    MATRIX_SNAPSHOT_SCHEMA_VERSION,
    MatrixSnapshot,
)

__all__ = [
    "MATRIX_SNAPSHOT_SCHEMA_VERSION",
    "MatrixSnapshot",
]
