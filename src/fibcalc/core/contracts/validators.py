"""
JSON Schema Contract Validators

Модуль для валидации выходных данных harness согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (fibcalc/core/contracts/schema/):
- comparison_result.json — результат одного сравнения методов
- sweep_row.json — строка таблицы sweep
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета, рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'sweep_row')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ComparisonResultValidator(ContractValidator):
    """Валидатор для comparison_result контракта."""

    def __init__(self):
        super().__init__("comparison_result")


class SweepRowValidator(ContractValidator):
    """Валидатор для sweep_row контракта."""

    def __init__(self):
        super().__init__("sweep_row")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_comparison_result(data: Dict[str, Any]) -> None:
    """
    Валидация comparison_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComparisonResultValidator().validate(data)


def validate_sweep_row(data: Dict[str, Any]) -> None:
    """
    Валидация sweep_row данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SweepRowValidator().validate(data)
