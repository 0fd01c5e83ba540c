"""Token pairing — токены, разделённые пробелами, читаются как поток пар.

Пары формируются через границы строк: "1\n2 3\n4" даёт ("1", "2") и
("3", "4"). Непарный хвостовой токен отбрасывается.
"""

import logging
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Все токены, разделённые пробелами, из построчного источника."""
    for line in lines:
        yield from line.split()


def iter_token_pairs(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Последовательные пары (left, right).

    Args:
        lines: Любой iterable текстовых строк (открытый файл, list of str, ...)

    Yields:
        Кортежи (left, right) в порядке ввода
    """
    tokens = iter_tokens(lines)
    for left in tokens:
        right = next(tokens, None)
        if right is None:
            logger.warning("Dropping unpaired trailing token %r", left)
            return
        yield left, right
