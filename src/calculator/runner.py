"""Case Runner — валидирует пары токенов и вычисляет точные суммы.

Для каждой пары (left, right):
1. Валидация left, затем right (сообщается первый невалидный токен)
2. Разбор обоих в нормализованный DecimalValue
3. add_signed → format

Невалидные токены не останавливают прогон: случай помечается INVALID, и
runner переходит к следующей паре.

Вывод:
- TEXT: классический блок "Case N: a + b" / "  -> ..." на каждый случай
- JSON: один компактный объект case_report на строку (с проверкой схемы)
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Optional

from src.calculator.tokens import iter_token_pairs
from src.core.contracts import CaseReportValidator
from src.core.math import add_signed, format_decimal, is_valid_literal, parse_decimal

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


class OutputFormat(str, Enum):
    """Формат вывода результатов"""

    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора.

    output_format: TEXT воспроизводит классический отчёт, JSON выдаёт объект на строку
    max_cases: остановка после стольких пар (None = без ограничения)
    validate_reports: проверять каждый JSON отчёт по case_report.json
    """

    output_format: OutputFormat = OutputFormat.TEXT
    max_cases: Optional[int] = None
    validate_reports: bool = True

    def __post_init__(self) -> None:
        if self.max_cases is not None and self.max_cases < 0:
            raise ValueError(f"max_cases must be non-negative, got {self.max_cases}")


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class CaseResult:
    """Результат одной пары токенов."""

    case_number: int
    left: str
    right: str

    valid: bool
    invalid_token: Optional[str]

    # Только для валидных случаев
    left_normalized: Optional[str]
    right_normalized: Optional[str]
    sum_text: Optional[str]

    details: str

    def to_report(self) -> Dict[str, Any]:
        """dict для JSON, соответствующий контракту case_report."""
        report: Dict[str, Any] = {
            "case": self.case_number,
            "left": self.left,
            "right": self.right,
            "status": "ok" if self.valid else "invalid",
        }
        if self.valid:
            report["left_normalized"] = self.left_normalized
            report["right_normalized"] = self.right_normalized
            report["sum"] = self.sum_text
        else:
            report["invalid_token"] = self.invalid_token
        return report


@dataclass(frozen=True)
class RunSummary:
    """Счётчики завершённого прогона."""

    total: int
    valid: int
    invalid: int


# =============================================================================
# RENDERING
# =============================================================================


def render_text(result: CaseResult) -> str:
    """Классический текстовый блок случая (с пустой строкой в конце)."""
    header = f"Case {result.case_number}: {result.left} + {result.right}\n"
    if not result.valid:
        return f"{header}  -> INVALID: '{result.invalid_token}' is not a valid double literal.\n\n"
    return (
        f"{header}  -> {result.left_normalized} + {result.right_normalized}"
        f" = {result.sum_text}\n\n"
    )


def render_json(result: CaseResult, validator: Optional[CaseReportValidator] = None) -> str:
    """Случай как одна компактная JSON строка.

    Raises:
        jsonschema.ValidationError: Если validator задан и отчёт нарушает контракт
    """
    report = result.to_report()
    if validator is not None:
        validator.validate(report)
    return json.dumps(report, separators=(",", ":")) + "\n"


# =============================================================================
# RUNNER
# =============================================================================


class CaseRunner:
    """Вычисление пар токенов десятичным движком."""

    def __init__(self, config: CalculatorConfig | None = None):
        """
        Args:
            config: конфигурация runner (опционально, иначе значения по умолчанию)
        """
        self.config = config or CalculatorConfig()
        self._validator: Optional[CaseReportValidator] = None
        self.summary: Optional[RunSummary] = None

    def evaluate(self, case_number: int, left: str, right: str) -> CaseResult:
        """Вычисление одной пары.

        Args:
            case_number: номер случая, начиная с 1
            left: Левый токен как есть
            right: Правый токен как есть

        Returns:
            CaseResult (INVALID, если любой токен не прошёл валидацию)
        """
        for token in (left, right):
            if not is_valid_literal(token):
                logger.info("Case %d: invalid literal %r", case_number, token)
                return CaseResult(
                    case_number=case_number,
                    left=left,
                    right=right,
                    valid=False,
                    invalid_token=token,
                    left_normalized=None,
                    right_normalized=None,
                    sum_text=None,
                    details=f"'{token}' is not a valid double literal",
                )

        a = parse_decimal(left)
        b = parse_decimal(right)
        total = add_signed(a, b)

        left_text = format_decimal(a)
        right_text = format_decimal(b)
        sum_text = format_decimal(total)
        logger.debug("Case %d: %s + %s = %s", case_number, left_text, right_text, sum_text)

        return CaseResult(
            case_number=case_number,
            left=left,
            right=right,
            valid=True,
            invalid_token=None,
            left_normalized=left_text,
            right_normalized=right_text,
            sum_text=sum_text,
            details=f"{left_text} + {right_text} = {sum_text}",
        )

    def run(self, lines: Iterable[str]) -> Iterator[CaseResult]:
        """Вычисление всех пар токенов построчного источника по порядку.

        Атрибут summary выставляется после исчерпания итератора.
        """
        total = valid = 0
        self.summary = None
        for left, right in iter_token_pairs(lines):
            if self.config.max_cases is not None and total >= self.config.max_cases:
                logger.info("Stopping after max_cases=%d", self.config.max_cases)
                break
            total += 1
            result = self.evaluate(total, left, right)
            if result.valid:
                valid += 1
            yield result

        self.summary = RunSummary(total=total, valid=valid, invalid=total - valid)
        logger.info(
            "Processed %d cases: %d valid, %d invalid", total, valid, total - valid
        )

    def render(self, result: CaseResult) -> str:
        """Вывод результата в сконфигурированном формате."""
        if self.config.output_format is OutputFormat.JSON:
            if self.config.validate_reports and self._validator is None:
                self._validator = CaseReportValidator()
            return render_json(result, self._validator)
        return render_text(result)
