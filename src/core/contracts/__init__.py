"""
Contract Validation Module

JSON Schema контракты для данных, покидающих десятичный движок.
"""

from .validators import (
    CaseReportValidator,
    ContractValidator,
    DecimalValueValidator,
    SchemaLoader,
    validate_case_report,
    validate_decimal_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalValueValidator",
    "CaseReportValidator",
    # Functions
    "validate_decimal_value",
    "validate_case_report",
]
