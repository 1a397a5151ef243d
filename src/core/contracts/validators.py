"""
JSON Schema Contract Validators

Валидация plain dict данных против JSON Schema контрактов (Draft 2020-12).
Схемы поставляются как package data в src/core/contracts/schema/ и
читаются через importlib.resources, поэтому работают и из установленного
пакета.

Загрузчик создаётся лениво: импорт модуля не читает файлов.

Схемы:
- matrix_snapshot.json (снапшот Matrix)
"""

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)

# Пакет, в котором лежит каталог schema/
SCHEMA_PACKAGE = "src.core.contracts"
SCHEMA_SUBDIR = "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema файлов.

    По умолчанию читает каталог schema/ из ресурсов пакета src.core.contracts;
    schema_dir позволяет указать другой каталог.

    Raises:
        RuntimeError: Если каталог схем не существует
    """

    def __init__(self, schema_dir: Optional[Union[str, Path]] = None):
        if schema_dir is None:
            self._schema_root = resources.files(SCHEMA_PACKAGE) / SCHEMA_SUBDIR
        else:
            self._schema_root = Path(schema_dir)

        if not self._schema_root.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_root}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_root(self):
        """Каталог схем (Path или importlib Traversable)."""
        return self._schema_root

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения (например, 'matrix_snapshot').

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_file = self._schema_root / f"{schema_name}.json"
        if not schema_file.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_file}")

        schema = json.loads(schema_file.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_file)
        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик пакетных схем, создаётся при первом обращении."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор данных против одной именованной схемы.

    Args:
        schema_name: Имя схемы без расширения
        loader: Загрузчик схем (default: get_schema_loader())
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение контракта
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения контракта, без exception."""
        return self._validator.iter_errors(data)


class MatrixSnapshotValidator(ContractValidator):
    """Валидатор для matrix_snapshot контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("matrix_snapshot", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_matrix_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация matrix_snapshot данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MatrixSnapshotValidator().validate(data)
