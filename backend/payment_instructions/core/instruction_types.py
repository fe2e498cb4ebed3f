"""Instruction Types — value objects flowing between pipeline stages.

Invariants:
    - Account is a frozen snapshot of one caller-supplied account
    - ParsedInstruction is built incrementally; unset fields stay None
    - Exactly one outcome (Executed | Pending | Rejected) is produced per call
    - AccountEntry lists are always in original request order

Design Decisions:
    - Dataclasses over dicts: stage boundaries are typed, the wire dict only
      appears in build_response
    - Outcome as a union of three frozen dataclasses: callers dispatch with
      isinstance, no status strings compared inside the core
"""

from dataclasses import dataclass, field
from typing import Any

from payment_instructions.core.domain_types import StatusCode, TransactionType


@dataclass(frozen=True)
class Account:
    """One entry of the caller's account snapshot."""
    id: str
    balance: Any
    currency: str

    @property
    def currency_code(self) -> str:
        return str(self.currency or "").upper()


@dataclass
class ParsedInstruction:
    """Fields extracted from the instruction text so far."""
    type: TransactionType | None = None
    amount: int | None = None
    currency: str | None = None
    debit_account_id: str | None = None
    credit_account_id: str | None = None
    execute_by: str | None = None


@dataclass(frozen=True)
class AccountEntry:
    """An involved account as reported back: new and prior balance."""
    id: str
    balance: Any
    balance_before: Any
    currency: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "balance": self.balance,
            "balance_before": self.balance_before,
            "currency": self.currency,
        }


# ─── Outcomes ────────────────────────────────────────────────────

@dataclass(frozen=True)
class Executed:
    """Balances moved; accounts carry new balance and balance_before."""
    accounts: tuple[AccountEntry, ...]


@dataclass(frozen=True)
class Pending:
    """Accepted for a future date; accounts unchanged."""
    accounts: tuple[AccountEntry, ...]


@dataclass(frozen=True)
class Rejected:
    """First rule violated. accounts is empty unless both were identified."""
    status_code: StatusCode
    status_reason: str
    accounts: tuple[AccountEntry, ...] = field(default_factory=tuple)


Outcome = Executed | Pending | Rejected


@dataclass(frozen=True)
class ParseResult:
    """Grammar matcher output: the partial instruction and an optional rejection."""
    instruction: ParsedInstruction
    rejection: Rejected | None = None
