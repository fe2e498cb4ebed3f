"""Response Builder — project a parsed instruction and its outcome onto the wire envelope.

Invariants:
    - Pure projection: performs no validation
    - Every envelope carries the same ten keys; unparsed fields are None
    - Executed -> successful/AP00, Pending -> pending/AP02, Rejected -> failed/<code>
"""

from payment_instructions.core.domain_types import StatusCode, TransactionStatus
from payment_instructions.core.instruction_types import (
    Executed,
    Outcome,
    ParsedInstruction,
    Pending,
)
from payment_instructions.core.status_messages import reason_for


def _status_fields(outcome: Outcome) -> tuple[TransactionStatus, StatusCode, str]:
    if isinstance(outcome, Executed):
        return (
            TransactionStatus.SUCCESSFUL, StatusCode.EXECUTED,
            reason_for(StatusCode.EXECUTED),
        )
    if isinstance(outcome, Pending):
        return (
            TransactionStatus.PENDING, StatusCode.SCHEDULED,
            reason_for(StatusCode.SCHEDULED),
        )
    return TransactionStatus.FAILED, outcome.status_code, outcome.status_reason


def build_response(parsed: ParsedInstruction, outcome: Outcome) -> dict:
    """Assemble the response envelope for any terminal state."""
    status, code, reason = _status_fields(outcome)
    return {
        "type": parsed.type.value if parsed.type else None,
        "amount": parsed.amount,
        "currency": parsed.currency,
        "debit_account": parsed.debit_account_id,
        "credit_account": parsed.credit_account_id,
        "execute_by": parsed.execute_by,
        "status": status.value,
        "status_reason": reason,
        "status_code": code.value,
        "accounts": [entry.to_dict() for entry in outcome.accounts],
    }
