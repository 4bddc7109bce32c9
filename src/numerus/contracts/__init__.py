"""
Contract Validation Module

Модуль для валидации JSON контрактов Numerus.
"""

from .validators import (
    ConversionRecordValidator,
    SchemaLoader,
    dump_conversion_record,
    validate_conversion_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ConversionRecordValidator",
    # Functions
    "validate_conversion_record",
    "dump_conversion_record",
]
