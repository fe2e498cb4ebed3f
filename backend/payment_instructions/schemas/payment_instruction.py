"""Payment Instruction Schemas — Pydantic models for the request body and response envelope.

Invariants:
    - PaymentInstructionRequest.instruction is stripped; empty is allowed
      (the pipeline answers SY03, not the schema)
    - Balances keep their JSON number kind: 230 stays int, 230.5 stays float
    - Response fields mirror the envelope exactly; unparsed fields are null

Design Decisions:
    - Schema checks only shape and types: every business rule lives in core,
      so a well-typed but nonsensical instruction still gets a status_code
    - StrictInt | StrictFloat for balance: booleans and numeric strings are
      malformed requests, not balances
"""

from typing import Literal

from pydantic import BaseModel, StrictFloat, StrictInt, field_validator


class AccountIn(BaseModel):
    """One account of the caller's snapshot."""
    id: str
    balance: StrictInt | StrictFloat
    currency: str


class PaymentInstructionRequest(BaseModel):
    """Accounts snapshot plus one free-text instruction."""
    accounts: list[AccountIn]
    instruction: str

    @field_validator("instruction")
    @classmethod
    def strip_instruction(cls, v: str) -> str:
        return v.strip()


class AccountOut(BaseModel):
    id: str
    balance: int | float
    balance_before: int | float
    currency: str


class PaymentInstructionResponse(BaseModel):
    """Uniform envelope for successful, pending and failed instructions."""
    type: Literal["DEBIT", "CREDIT"] | None
    amount: int | None
    currency: str | None
    debit_account: str | None
    credit_account: str | None
    execute_by: str | None
    status: Literal["successful", "pending", "failed"]
    status_reason: str
    status_code: str
    accounts: list[AccountOut]
