"""Execution Engine — decide immediate vs. scheduled and apply the transfer.

Invariants:
    - No execute_by date -> execute now
    - execute_by strictly after today (UTC calendar date) -> Pending, no mutation
    - execute_by today or earlier -> execute now
    - Mutation happens on result entries only; Account snapshots are frozen
    - Both balances move together or not at all (conservation: sum unchanged)

Design Decisions:
    - `today` is a parameter: the service reads the clock, core stays pure
    - Non-numeric balances are an internal fault, not a rejection code: the
      request schema guarantees numbers, so reaching one here is a bug
"""

import math
from datetime import date
from typing import Sequence

from payment_instructions.core.account_lookup import (
    locate_accounts,
    unchanged_entries,
)
from payment_instructions.core.errors import ErrorContext, InternalFaultError
from payment_instructions.core.instruction_types import (
    Account,
    AccountEntry,
    Executed,
    ParsedInstruction,
    Pending,
)
from payment_instructions.core.validate_fields import parse_execution_date


def is_due(execute_by: str | None, today: date) -> bool:
    """True when the instruction should execute now rather than be scheduled."""
    if execute_by is None:
        return True
    scheduled = parse_execution_date(execute_by)
    if scheduled is None:
        raise ValueError(f"execute_by is not a YYYY-MM-DD date: {execute_by!r}")
    return tuple(scheduled) <= (today.year, today.month, today.day)


def numeric_balance(account: Account, stage: str) -> int | float:
    """Balance as a finite real number, or raise InternalFaultError."""
    value = account.balance
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InternalFaultError(
            f"Account {account.id!r} has non-numeric balance",
            ErrorContext(stage=stage, debug_info={"account_id": account.id}),
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InternalFaultError(
            f"Account {account.id!r} has non-finite balance",
            ErrorContext(stage=stage, debug_info={"account_id": account.id}),
        )
    return value


def execute_instruction(
    parsed: ParsedInstruction, accounts: Sequence[Account], today: date,
) -> Executed | Pending:
    """Apply a fully validated instruction against the snapshot.

    Callers must run the business-rule validator first: accounts are assumed
    to exist, share the currency and differ, and funds to be sufficient.
    """
    pair = locate_accounts(accounts, parsed)
    if pair is None:
        raise ValueError("execute_instruction called before accounts were validated")

    if not is_due(parsed.execute_by, today):
        return Pending(unchanged_entries(accounts, pair))

    debit_before = numeric_balance(pair.debit, stage="execute")
    credit_before = numeric_balance(pair.credit, stage="execute")
    new_balances = {
        pair.debit_index: (debit_before - parsed.amount, debit_before),
        pair.credit_index: (credit_before + parsed.amount, credit_before),
    }
    return Executed(tuple(
        AccountEntry(
            id=accounts[i].id,
            balance=new_balances[i][0],
            balance_before=new_balances[i][1],
            currency=accounts[i].currency_code,
        )
        for i in pair.indices
    ))
