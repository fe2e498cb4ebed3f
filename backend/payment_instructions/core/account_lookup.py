"""Account Lookup — locate the referenced accounts in the caller's snapshot.

Invariants:
    - Lookup is case-sensitive and first-match-wins by request order
    - Duplicated ids are not deduplicated; later duplicates are never touched
    - Reported entries follow original request order, not debit/credit order
"""

from typing import NamedTuple, Sequence

from payment_instructions.core.instruction_types import (
    Account,
    AccountEntry,
    ParsedInstruction,
)


class AccountPair(NamedTuple):
    """The matched debit and credit accounts with their snapshot positions."""
    debit_index: int
    credit_index: int
    debit: Account
    credit: Account

    @property
    def indices(self) -> list[int]:
        """Snapshot positions in request order (one when debit == credit)."""
        return sorted({self.debit_index, self.credit_index})


def find_account_index(accounts: Sequence[Account], account_id: str) -> int | None:
    for index, account in enumerate(accounts):
        if account.id == account_id:
            return index
    return None


def locate_accounts(
    accounts: Sequence[Account], parsed: ParsedInstruction,
) -> AccountPair | None:
    """Return both referenced accounts, or None if either is missing."""
    debit_index = find_account_index(accounts, parsed.debit_account_id)
    credit_index = find_account_index(accounts, parsed.credit_account_id)
    if debit_index is None or credit_index is None:
        return None
    return AccountPair(
        debit_index, credit_index,
        accounts[debit_index], accounts[credit_index],
    )


def unchanged_entries(
    accounts: Sequence[Account], pair: AccountPair,
) -> tuple[AccountEntry, ...]:
    """Involved accounts with balance_before == balance."""
    return tuple(
        AccountEntry(
            id=accounts[i].id,
            balance=accounts[i].balance,
            balance_before=accounts[i].balance,
            currency=accounts[i].currency_code,
        )
        for i in pair.indices
    )
