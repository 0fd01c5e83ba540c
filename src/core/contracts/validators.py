"""
JSON Schema Contract Validators

Модуль для валидации JSON данных, которыми калькулятор обменивается с внешним
миром, согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы (src/core/contracts/schema/):
- decimal_value.json — сериализованный DecimalValue (model_dump(mode="json"))
- case_report.json   — одна обработанная пара токенов в выводе калькулятора
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию схемы берутся из package data рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кеш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'case_report')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной Draft 2020-12 схемой
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Мета-валидация самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует проверку данных по одной JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных по схеме.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка данных без исключения."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итерация по всем ошибкам валидации.

        Yields:
            ValidationError для каждого найденного нарушения
        """
        return self.validator.iter_errors(data)


class DecimalValueValidator(ContractValidator):
    """Валидатор контракта decimal_value."""

    def __init__(self):
        super().__init__("decimal_value")


class CaseReportValidator(ContractValidator):
    """Валидатор контракта case_report."""

    def __init__(self):
        super().__init__("case_report")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_decimal_value(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного DecimalValue.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DecimalValueValidator().validate(data)


def validate_case_report(data: Dict[str, Any]) -> None:
    """
    Валидация отчёта калькулятора по одному случаю.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CaseReportValidator().validate(data)
