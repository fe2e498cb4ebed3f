"""Response Builder — tests for the envelope projection.

Tests cover:
    - Executed / Pending / Rejected map to status and status_code
    - Unparsed fields are None; the key set never changes
    - accounts rendered from AccountEntry values
"""

from payment_instructions.core.build_response import build_response
from payment_instructions.core.domain_types import StatusCode, TransactionType
from payment_instructions.core.instruction_types import (
    AccountEntry,
    Executed,
    ParsedInstruction,
    Pending,
    Rejected,
)

ENVELOPE_KEYS = {
    "type", "amount", "currency", "debit_account", "credit_account",
    "execute_by", "status", "status_reason", "status_code", "accounts",
}


def _full() -> ParsedInstruction:
    return ParsedInstruction(
        type=TransactionType.CREDIT, amount=10, currency="USD",
        debit_account_id="a", credit_account_id="b", execute_by="2999-01-01",
    )


def test_executed_maps_to_successful_ap00():
    entry = AccountEntry("a", 200, 230, "USD")
    response = build_response(_full(), Executed((entry,)))
    assert response["status"] == "successful"
    assert response["status_code"] == "AP00"
    assert response["status_reason"] == "Transaction executed successfully"
    assert response["accounts"] == [
        {"id": "a", "balance": 200, "balance_before": 230, "currency": "USD"},
    ]


def test_pending_maps_to_pending_ap02():
    response = build_response(_full(), Pending(()))
    assert response["status"] == "pending"
    assert response["status_code"] == "AP02"
    assert response["execute_by"] == "2999-01-01"
    assert response["type"] == "CREDIT"


def test_rejected_maps_to_failed_with_its_code_and_reason():
    rejection = Rejected(StatusCode.ACCOUNT_NOT_FOUND, "Account not found")
    response = build_response(_full(), rejection)
    assert response["status"] == "failed"
    assert response["status_code"] == "AC03"
    assert response["status_reason"] == "Account not found"
    assert response["accounts"] == []


def test_unparsed_fields_are_none():
    rejection = Rejected(StatusCode.MISSING_KEYWORD, "Missing required keyword in instruction")
    response = build_response(ParsedInstruction(), rejection)
    assert set(response) == ENVELOPE_KEYS
    assert response["type"] is None
    assert response["amount"] is None
    assert response["currency"] is None
    assert response["debit_account"] is None
    assert response["credit_account"] is None
    assert response["execute_by"] is None
