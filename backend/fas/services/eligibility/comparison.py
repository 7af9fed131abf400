"""Parser for numeric comparison conditions such as ``">=65"``."""

import operator
import re
from typing import Callable, NamedTuple

from fas.core.errors import InvalidAgeValueError

# Two-character operators must come before their one-character prefixes.
_OPERATORS: tuple[tuple[str, Callable[[int, int], bool]], ...] = (
    (">=", operator.ge),
    ("<=", operator.le),
    (">", operator.gt),
    ("<", operator.lt),
    ("==", operator.eq),
)

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Condition(NamedTuple):
    """Parsed comparison: operator symbol, operator function and operand."""

    symbol: str
    compare: Callable[[int, int], bool]
    operand: int

    def matches(self, num: int) -> bool:
        return self.compare(num, self.operand)


def parse_condition(condition: str) -> Condition:
    """
    Parse an operator-prefixed integer condition.

    Args:
        condition: Condition string, e.g. ``">=18"`` or ``"== 30"``

    Returns:
        The parsed Condition

    Raises:
        InvalidAgeValueError: If no operator matches or the operand is not a
            base-10 integer
    """
    condition = condition.strip()

    for symbol, compare in _OPERATORS:
        if condition.startswith(symbol):
            operand = condition[len(symbol):].strip()
            if not _INTEGER.fullmatch(operand):
                raise InvalidAgeValueError()
            return Condition(symbol, compare, int(operand))

    raise InvalidAgeValueError()


def compare_number(condition: str, num: int) -> bool:
    """Return whether ``num`` satisfies ``condition``."""
    return parse_condition(condition).matches(num)
