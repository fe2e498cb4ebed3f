"""Business Rule Enforcement — ordered, first-failure-wins checks after parsing.

Order:
    1. AC04 account-id format (debit, then credit)
    2. DT01 execute_by date format (only if present)
    3. AC03 both accounts exist                        -> accounts = []
    4. CU01 the two accounts share a currency          -> accounts unchanged
    5. CU02 account currency equals instruction currency
    6. AC02 debit and credit ids differ
    7. AC01 sufficient funds (only when executing now)

Invariants:
    - All functions are PURE: no IO, no clock, no side effects
    - Return Rejected on violation, None on success
    - From rule 4 onward the two matched accounts are echoed, unchanged

Design Decisions:
    - Rejections are return values (not exceptions): the error path and the
      success path produce the same response envelope
"""

from datetime import date
from typing import Sequence

from payment_instructions.core.account_lookup import (
    AccountPair,
    locate_accounts,
    unchanged_entries,
)
from payment_instructions.core.domain_types import StatusCode
from payment_instructions.core.execute_transfer import is_due, numeric_balance
from payment_instructions.core.instruction_types import (
    Account,
    ParsedInstruction,
    Rejected,
)
from payment_instructions.core.status_messages import (
    insufficient_funds_reason,
    reason_for,
)
from payment_instructions.core.validate_fields import (
    is_valid_account_id,
    parse_execution_date,
)


def _rejected(code: StatusCode, accounts=()) -> Rejected:
    return Rejected(code, reason_for(code), tuple(accounts))


def check_account_id_format(parsed: ParsedInstruction) -> Rejected | None:
    """Rule 1: both ids use only letters, digits, '-', '.', '@'."""
    for account_id in (parsed.debit_account_id, parsed.credit_account_id):
        if not is_valid_account_id(account_id):
            return _rejected(StatusCode.INVALID_ACCOUNT_ID)
    return None


def check_execution_date(parsed: ParsedInstruction) -> Rejected | None:
    """Rule 2: execute_by, when given, is a structural YYYY-MM-DD."""
    if parsed.execute_by is not None and parse_execution_date(parsed.execute_by) is None:
        return _rejected(StatusCode.INVALID_DATE)
    return None


def check_currency_consistency(
    accounts: Sequence[Account], pair: AccountPair,
) -> Rejected | None:
    """Rule 4: debit and credit accounts hold the same currency."""
    if pair.debit.currency_code != pair.credit.currency_code:
        return _rejected(
            StatusCode.ACCOUNT_CURRENCY_MISMATCH, unchanged_entries(accounts, pair),
        )
    return None


def check_instruction_currency(
    parsed: ParsedInstruction, accounts: Sequence[Account], pair: AccountPair,
) -> Rejected | None:
    """Rule 5: the accounts' currency is the instruction's currency."""
    if pair.debit.currency_code != parsed.currency:
        return _rejected(
            StatusCode.UNSUPPORTED_CURRENCY, unchanged_entries(accounts, pair),
        )
    return None


def check_distinct_accounts(
    parsed: ParsedInstruction, accounts: Sequence[Account], pair: AccountPair,
) -> Rejected | None:
    """Rule 6: money cannot move from an account to itself."""
    if parsed.debit_account_id == parsed.credit_account_id:
        return _rejected(StatusCode.SAME_ACCOUNT, unchanged_entries(accounts, pair))
    return None


def check_sufficient_funds(
    parsed: ParsedInstruction,
    accounts: Sequence[Account],
    pair: AccountPair,
    today: date,
) -> Rejected | None:
    """Rule 7: debit balance covers the amount. Skipped for future-dated instructions."""
    if not is_due(parsed.execute_by, today):
        return None
    balance = numeric_balance(pair.debit, stage="validate-rules")
    numeric_balance(pair.credit, stage="validate-rules")  # both balances must be numbers before anything moves
    if balance < parsed.amount:
        return Rejected(
            StatusCode.INSUFFICIENT_FUNDS,
            insufficient_funds_reason(balance, parsed.amount, parsed.currency),
            unchanged_entries(accounts, pair),
        )
    return None


def validate_business_rules(
    parsed: ParsedInstruction, accounts: Sequence[Account], today: date,
) -> Rejected | None:
    """Chain all rule checks. Returns first rejection or None."""
    rejection = check_account_id_format(parsed) or check_execution_date(parsed)
    if rejection:
        return rejection

    pair = locate_accounts(accounts, parsed)
    if pair is None:
        return _rejected(StatusCode.ACCOUNT_NOT_FOUND)

    return (
        check_currency_consistency(accounts, pair)
        or check_instruction_currency(parsed, accounts, pair)
        or check_distinct_accounts(parsed, accounts, pair)
        or check_sufficient_funds(parsed, accounts, pair, today)
    )
