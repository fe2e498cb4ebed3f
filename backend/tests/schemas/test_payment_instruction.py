"""Payment Instruction Schemas — request/response model validation.

Tests cover:
    - instruction is stripped; empty instruction allowed
    - balance keeps int vs float; strings and booleans rejected
    - required fields enforced
"""

import pytest
from pydantic import ValidationError

from payment_instructions.schemas.payment_instruction import (
    PaymentInstructionRequest,
    PaymentInstructionResponse,
)


def test_instruction_is_stripped():
    req = PaymentInstructionRequest(accounts=[], instruction="  DEBIT 1 USD \t")
    assert req.instruction == "DEBIT 1 USD"


def test_empty_instruction_allowed():
    req = PaymentInstructionRequest(accounts=[], instruction="   ")
    assert req.instruction == ""


def test_integer_balance_stays_integer():
    req = PaymentInstructionRequest(
        accounts=[{"id": "a", "balance": 230, "currency": "USD"}], instruction="x",
    )
    assert req.accounts[0].balance == 230
    assert isinstance(req.accounts[0].balance, int)


def test_float_balance_stays_float():
    req = PaymentInstructionRequest(
        accounts=[{"id": "a", "balance": 12.5, "currency": "USD"}], instruction="x",
    )
    assert req.accounts[0].balance == 12.5


@pytest.mark.parametrize("balance", ["230", True, None])
def test_non_number_balance_rejected(balance):
    with pytest.raises(ValidationError):
        PaymentInstructionRequest(
            accounts=[{"id": "a", "balance": balance, "currency": "USD"}],
            instruction="x",
        )


def test_missing_instruction_rejected():
    with pytest.raises(ValidationError):
        PaymentInstructionRequest(accounts=[])


def test_response_rejects_unknown_status():
    with pytest.raises(ValidationError):
        PaymentInstructionResponse(
            type=None, amount=None, currency=None, debit_account=None,
            credit_account=None, execute_by=None, status="done",
            status_reason="", status_code="SY03", accounts=[],
        )
