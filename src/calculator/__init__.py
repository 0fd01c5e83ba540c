"""Calculator driver — читает пары токенов, выводит точные суммы.

Тонкий I/O слой вокруг src.core.math: токенизация, отчёт по каждому случаю и
точка входа командной строки.
"""

from .runner import (
    CalculatorConfig,
    CaseResult,
    CaseRunner,
    OutputFormat,
    RunSummary,
    render_json,
    render_text,
)
from .tokens import iter_token_pairs, iter_tokens

__all__ = [
    "CalculatorConfig",
    "CaseResult",
    "CaseRunner",
    "OutputFormat",
    "RunSummary",
    "render_json",
    "render_text",
    "iter_token_pairs",
    "iter_tokens",
]
