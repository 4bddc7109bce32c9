"""
Conversion Record Contract — проверка JSON вывода Numerus

CLI с --json печатает по одному ConversionRecord на TERM. Перед печатью
документ проверяется по schema/conversion_record.json (Draft 2020-12).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterator, Mapping

import jsonschema
from jsonschema import Draft202012Validator

from src.numerus.domain.conversion_record import ConversionRecord

CONVERSION_RECORD_SCHEMA = "conversion_record"


class SchemaLoader:
    """Загрузка схем из каталога с кэшем готовых валидаторов."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._validators: dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Файла схемы нет
            ValueError: Файл не проходит meta-validation
        """
        return self.validator_for(schema_name).schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        if schema_name not in self._validators:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")
            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e
            self._validators[schema_name] = Draft202012Validator(schema)
        return self._validators[schema_name]


@lru_cache(maxsize=1)
def _default_loader() -> SchemaLoader:
    return SchemaLoader()


class ConversionRecordValidator:
    """Проверка dict (model_dump или разобранный JSON) по схеме записи."""

    def __init__(self, loader: SchemaLoader | None = None):
        loader = loader or _default_loader()
        self._validator = loader.validator_for(CONVERSION_RECORD_SCHEMA)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение
        """
        self._validator.validate(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Mapping[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)


def validate_conversion_record(data: Mapping[str, Any]) -> None:
    """
    Валидация данных conversion_record.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    ConversionRecordValidator().validate(data)


def dump_conversion_record(record: ConversionRecord) -> str:
    """JSON документ записи, проверенный по схеме перед печатью."""
    data = record.model_dump(mode="json")
    validate_conversion_record(data)
    return json.dumps(data, ensure_ascii=False)
