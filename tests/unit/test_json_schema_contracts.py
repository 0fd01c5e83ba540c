"""
Тесты JSON Schema Contract Validators

Проверяет:
- Валидность самих схем
- Валидные данные проходят
- Обязательные поля, patterns и enums соблюдаются
- Поля, зависящие от status (ok vs invalid отчёты)
- Интеграция с DecimalValue и CaseResult
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.calculator import CaseRunner
from src.core.contracts import (
    CaseReportValidator,
    DecimalValueValidator,
    SchemaLoader,
    validate_case_report,
    validate_decimal_value,
)
from src.core.math import parse_decimal


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_ok_report():
    """Отчёт об успешно сложенной паре."""
    return {
        "case": 1,
        "left": "+0001.0",
        "right": "-0001.005",
        "status": "ok",
        "left_normalized": "1",
        "right_normalized": "-1.005",
        "sum": "-0.005",
    }


@pytest.fixture
def valid_invalid_report():
    """Отчёт о паре с невалидным токеном."""
    return {
        "case": 2,
        "left": "5.",
        "right": "3",
        "status": "invalid",
        "invalid_token": "5.",
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты SchemaLoader"""

    @pytest.mark.parametrize("name", ["decimal_value", "case_report"])
    def test_schemas_are_valid_draft_2020_12(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        Draft202012Validator.check_schema(schema)

    def test_schema_is_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("case_report") is loader.load_schema("case_report")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_custom_schema_directory(self, tmp_path) -> None:
        """Схемы загружаются из переданного каталога"""
        schema = {"type": "object", "required": ["case"]}
        (tmp_path / "custom.json").write_text(json.dumps(schema), encoding="utf-8")
        loader = SchemaLoader(tmp_path)
        assert loader.load_schema("custom") == schema
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            loader.load_schema("case_report")

    def test_invalid_schema_file(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# CASE REPORT CONTRACT
# =============================================================================


class TestCaseReportContract:
    """Тесты case_report.json"""

    def test_valid_reports(self, valid_ok_report, valid_invalid_report) -> None:
        validate_case_report(valid_ok_report)
        validate_case_report(valid_invalid_report)

    @pytest.mark.parametrize("field", ["case", "left", "right", "status"])
    def test_required_fields(self, valid_ok_report, field: str) -> None:
        del valid_ok_report[field]
        with pytest.raises(ValidationError):
            validate_case_report(valid_ok_report)

    def test_case_number_starts_at_one(self, valid_ok_report) -> None:
        valid_ok_report["case"] = 0
        with pytest.raises(ValidationError):
            validate_case_report(valid_ok_report)

    def test_unknown_status(self, valid_ok_report) -> None:
        valid_ok_report["status"] = "maybe"
        with pytest.raises(ValidationError):
            validate_case_report(valid_ok_report)

    def test_ok_requires_sum(self, valid_ok_report) -> None:
        del valid_ok_report["sum"]
        with pytest.raises(ValidationError):
            validate_case_report(valid_ok_report)

    def test_ok_forbids_invalid_token(self, valid_ok_report) -> None:
        valid_ok_report["invalid_token"] = "x"
        with pytest.raises(ValidationError):
            validate_case_report(valid_ok_report)

    def test_invalid_forbids_sum(self, valid_invalid_report) -> None:
        valid_invalid_report["sum"] = "8"
        with pytest.raises(ValidationError):
            validate_case_report(valid_invalid_report)

    def test_invalid_requires_token(self, valid_invalid_report) -> None:
        del valid_invalid_report["invalid_token"]
        with pytest.raises(ValidationError):
            validate_case_report(valid_invalid_report)

    @pytest.mark.parametrize("text", ["-0", "+1", "01", "1.0", "1.", ".5", "0.50"])
    def test_non_canonical_sum_rejected(self, valid_ok_report, text: str) -> None:
        """Канонический литерал — только вывод formatter"""
        valid_ok_report["sum"] = text
        assert not CaseReportValidator().is_valid(valid_ok_report)

    @pytest.mark.parametrize("text", ["0", "-0.5", "10", "-10.01", "0.001"])
    def test_canonical_sum_accepted(self, valid_ok_report, text: str) -> None:
        valid_ok_report["sum"] = text
        assert CaseReportValidator().is_valid(valid_ok_report)

    def test_iter_errors_lists_all(self) -> None:
        errors = list(CaseReportValidator().iter_errors({"case": 0}))
        assert len(errors) >= 2

    def test_runner_results_conform(self) -> None:
        """Каждый CaseResult.to_report() удовлетворяет контракту"""
        runner = CaseRunner()
        lines = ["+0001.0 -0001.005", "5. 3", "0.1 0.2", "-7 7", "A B"]
        for result in runner.run(lines):
            validate_case_report(result.to_report())


# =============================================================================
# DECIMAL VALUE CONTRACT
# =============================================================================


class TestDecimalValueContract:
    """Тесты decimal_value.json"""

    @pytest.mark.parametrize("text", ["0", "-1.005", "123.456", "-0.001"])
    def test_parsed_values_conform(self, text: str) -> None:
        validate_decimal_value(parse_decimal(text).model_dump(mode="json"))

    def test_additional_properties_rejected(self) -> None:
        data = {"int_part": "1", "frac_part": "", "sign": "+", "scale": 0}
        assert not DecimalValueValidator().is_valid(data)

    def test_bad_sign(self) -> None:
        with pytest.raises(ValidationError):
            validate_decimal_value({"int_part": "1", "frac_part": "", "sign": "neg"})
