"""Payment Instructions Route — HTTP mapping for the instruction pipeline.

Invariants:
    - successful / pending -> 200, failed -> 400, body is the envelope either way
    - Request body validated by Pydantic before the pipeline runs
    - Internal faults propagate to the global handlers (500, generic body)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from payment_instructions.config import get_settings
from payment_instructions.core.domain_types import TransactionStatus
from payment_instructions.schemas.payment_instruction import (
    PaymentInstructionRequest,
    PaymentInstructionResponse,
)
from payment_instructions.services.process_instruction import (
    process_payment_instruction,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/payment-instructions", tags=["payment-instructions"])

_ACCEPTED_STATUSES = (TransactionStatus.SUCCESSFUL.value, TransactionStatus.PENDING.value)


@router.post(
    "", response_model=PaymentInstructionResponse,
    responses={400: {"model": PaymentInstructionResponse}},
)
def submit_payment_instruction(body: PaymentInstructionRequest, request: Request):
    """Parse, validate and (maybe) execute one payment instruction."""
    envelope = process_payment_instruction(
        [account.model_dump() for account in body.accounts],
        body.instruction,
    )
    http_status = (
        status.HTTP_200_OK if envelope["status"] in _ACCEPTED_STATUSES
        else status.HTTP_400_BAD_REQUEST
    )
    logger.info(
        "payment-instructions request completed",
        extra={
            "path": request.url.path,
            "status_code": envelope["status_code"],
            "http_status": http_status,
            "response": envelope if get_settings().log_response_bodies else None,
        },
    )
    return JSONResponse(
        status_code=http_status,
        content=PaymentInstructionResponse(**envelope).model_dump(),
    )
