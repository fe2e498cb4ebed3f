"""Field Validators — pure predicates for single instruction fields.

Invariants:
    - All functions are PURE: no IO, no clock, no side effects
    - Only ASCII digits count as digits ("²" or "١" are rejected)
    - Dates are checked structurally only: 2024-02-31 is accepted
    - Amounts beyond MAX_AMOUNT_DIGITS significant digits fail AM01

Design Decisions:
    - Character-set checks over regex: the allowed sets are tiny and explicit
    - ExecutionDate as NamedTuple over datetime.date: date() cannot hold
      structurally valid but calendar-impossible days, tuple comparison can
"""

from string import ascii_letters, digits
from typing import NamedTuple

from payment_instructions.core.domain_types import SUPPORTED_CURRENCIES

_ACCOUNT_ID_CHARS = frozenset(ascii_letters + digits + "-.@")
_DIGITS = frozenset(digits)
# Below CPython's default 4300-digit int/str conversion limit
MAX_AMOUNT_DIGITS = 4000
_DATE_LENGTH = 10
_DATE_SEPARATOR_POSITIONS = (4, 7)


class ExecutionDate(NamedTuple):
    """Structurally valid YYYY-MM-DD, comparable as (year, month, day)."""
    year: int
    month: int
    day: int


def _all_digits(value: str) -> bool:
    return bool(value) and all(ch in _DIGITS for ch in value)


def is_positive_integer(token: str) -> bool:
    """AM01 predicate: unsigned decimal digits with value >= 1."""
    return _all_digits(token) and any(ch != "0" for ch in token)


def parse_amount(token: str) -> int | None:
    """Positive integer amount, or None when AM01 applies.

    Amounts with more than MAX_AMOUNT_DIGITS significant digits are refused:
    they cannot be converted or serialized back under the interpreter's
    integer-string limit.
    """
    if not is_positive_integer(token):
        return None
    significant = token.lstrip("0")
    if len(significant) > MAX_AMOUNT_DIGITS:
        return None
    return int(significant)


def normalize_currency(token: str) -> str | None:
    """CU02 predicate: upper-cased code if supported, else None."""
    code = token.upper()
    if code in SUPPORTED_CURRENCIES:
        return code
    return None


def is_valid_account_id(account_id: str | None) -> bool:
    """AC04 predicate: non-empty, letters/digits/hyphen/dot/@ only."""
    if not isinstance(account_id, str) or not account_id:
        return False
    return all(ch in _ACCOUNT_ID_CHARS for ch in account_id)


def parse_execution_date(token: str) -> ExecutionDate | None:
    """DT01 predicate: strict YYYY-MM-DD, month 1-12, day 1-31. None if invalid."""
    if not isinstance(token, str) or len(token) != _DATE_LENGTH:
        return None
    if any(token[i] != "-" for i in _DATE_SEPARATOR_POSITIONS):
        return None
    year, month, day = token[0:4], token[5:7], token[8:10]
    if not (_all_digits(year) and _all_digits(month) and _all_digits(day)):
        return None
    parsed = ExecutionDate(int(year), int(month), int(day))
    if not 1 <= parsed.month <= 12:
        return None
    if not 1 <= parsed.day <= 31:
        return None
    return parsed
