"""Status Messages — immutable catalog of human-readable reasons per status code.

Invariants:
    - STATUS_MESSAGES covers every StatusCode member
    - The catalog is a read-only mapping, built once at import, never mutated
    - Internal error text is generic and never carries fault detail

Design Decisions:
    - MappingProxyType over a bare dict: concurrent requests share one
      catalog, so writes must be impossible rather than merely discouraged
"""

from types import MappingProxyType
from typing import Mapping

from payment_instructions.core.domain_types import StatusCode

INTERNAL_ERROR_MESSAGE = "Internal server error"

STATUS_MESSAGES: Mapping[StatusCode, str] = MappingProxyType({
    # Syntax / parsing
    StatusCode.MISSING_KEYWORD: "Missing required keyword in instruction",
    StatusCode.INVALID_KEYWORD_ORDER: "Invalid keyword order in instruction",
    StatusCode.MALFORMED_INSTRUCTION: (
        "Malformed instruction: unable to parse keywords"
    ),
    # Amount
    StatusCode.INVALID_AMOUNT: "Amount must be a positive integer",
    # Currency
    StatusCode.ACCOUNT_CURRENCY_MISMATCH: "Account currency mismatch",
    StatusCode.UNSUPPORTED_CURRENCY: (
        "Unsupported currency. Only NGN, USD, GBP, and GHS are supported"
    ),
    # Accounts
    StatusCode.INSUFFICIENT_FUNDS: "Insufficient funds in debit account",
    StatusCode.SAME_ACCOUNT: "Debit and credit accounts cannot be the same",
    StatusCode.ACCOUNT_NOT_FOUND: "Account not found",
    StatusCode.INVALID_ACCOUNT_ID: (
        "Invalid account ID format. Allowed characters: letters, numbers, "
        "hyphen (-), dot (.), at (@)."
    ),
    # Dates / scheduling
    StatusCode.INVALID_DATE: "Invalid date format. Expected YYYY-MM-DD",
    StatusCode.SCHEDULED: "Transaction scheduled for future execution",
    StatusCode.EXECUTED: "Transaction executed successfully",
})


def reason_for(code: StatusCode) -> str:
    """Look up the catalog text for a status code."""
    return STATUS_MESSAGES[code]


def format_amount(value: int | float) -> str:
    """Render a balance or amount the way clients expect: 230, not 230.0."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def insufficient_funds_reason(
    balance: int | float, amount: int, currency: str,
) -> str:
    """AC01 reason with the actual balance and the required amount."""
    return (
        f"{reason_for(StatusCode.INSUFFICIENT_FUNDS)}: "
        f"has {format_amount(balance)} {currency}, "
        f"needs {format_amount(amount)} {currency}"
    )
