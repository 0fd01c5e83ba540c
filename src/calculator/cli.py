"""Точка входа командной строки для калькулятора строковых десятичных.

    python -m src.calculator cases.txt
    python -m src.calculator --format json --max-cases 10 cases.txt
    python -m src.calculator            # запрашивает имя файла
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from src.calculator.runner import CalculatorConfig, CaseRunner, OutputFormat

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strdecimal-calc",
        description="Exact addition of decimal literal pairs read from a file.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Input file with whitespace-separated token pairs (prompted if omitted)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--max-cases",
        type=int,
        default=None,
        help="Stop after this many token pairs",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def prompt_filename(stdin: TextIO, stdout: TextIO) -> Optional[str]:
    """Запрос имени входного файла.

    Пустые строки пропускаются, берётся первое слово первой непустой строки.

    Returns:
        Имя файла, или None если stdin закончился раньше
    """
    stdout.write("Enter input file name: ")
    stdout.flush()
    for line in stdin:
        words = line.split()
        if words:
            return words[0]
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    filename = args.file or prompt_filename(sys.stdin, sys.stdout)
    if not filename:
        print("Failed to read file name.", file=sys.stderr)
        return 1

    try:
        config = CalculatorConfig(
            output_format=OutputFormat(args.output_format),
            max_cases=args.max_cases,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        source = open(filename, "r", encoding="utf-8")
    except OSError as e:
        logger.debug("open(%r) failed: %s", filename, e)
        print(f"Error: could not open file '{filename}'.", file=sys.stderr)
        return 1

    runner = CaseRunner(config)
    with source:
        if config.output_format is OutputFormat.TEXT:
            sys.stdout.write(f"Processing test cases from '{filename}'...\n\n")
        for result in runner.run(source):
            sys.stdout.write(runner.render(result))

    return 0
