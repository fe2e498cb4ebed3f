"""Domain Types — enums and constants shared by every pipeline stage.

Invariants:
    - StatusCode is the exhaustive table of terminal outcomes
    - SUPPORTED_CURRENCIES is immutable and upper-case
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class TransactionType(str, Enum):
    """Instruction shape, fixed by the first token."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class TransactionStatus(str, Enum):
    """Terminal status reported in every response envelope."""
    SUCCESSFUL = "successful"
    PENDING = "pending"
    FAILED = "failed"


class StatusCode(str, Enum):
    """Machine-readable outcome codes."""
    MISSING_KEYWORD = "SY01"
    INVALID_KEYWORD_ORDER = "SY02"
    MALFORMED_INSTRUCTION = "SY03"
    INVALID_AMOUNT = "AM01"
    ACCOUNT_CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID = "AC04"
    INVALID_DATE = "DT01"
    EXECUTED = "AP00"
    SCHEDULED = "AP02"


class Keyword(str, Enum):
    """Clause anchors, compared against lower-cased tokens."""
    DEBIT = "debit"
    CREDIT = "credit"
    FROM = "from"
    TO = "to"
    FOR = "for"
    ACCOUNT = "account"
    ON = "on"


# ─── Constants ───────────────────────────────────────────────────

SUPPORTED_CURRENCIES: tuple[str, ...] = ("NGN", "USD", "GBP", "GHS")
