"""Error Handlers — turn failures outside the instruction envelope into error bodies.

A payment instruction that parses but breaks a rule is NOT handled here: the
route returns its failed envelope directly. These handlers cover requests
where no envelope can be produced.

Invariants:
    - Body that fails the request schema -> 400 with the SY03 message and the
      offending field paths, without echoing the submitted input
    - InternalFaultError (bad balance, unexpected pipeline crash) -> 500 with
      the generic message; the fault detail stays in the logs
    - Any other exception -> the same 500 body as an internal fault

Design Decisions:
    - The catch-all renders an InternalFaultError so clients see one 500 shape
      whether or not the pipeline wrapped the failure first
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from payment_instructions.core.errors import (
    InternalFaultError,
    MalformedRequestError,
    PaymentInstructionError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Install the instruction-fault, bad-body and last-resort handlers."""
    _register_instruction_fault_handler(app)
    _register_malformed_body_handler(app)
    _register_last_resort_handler(app)


def _register_instruction_fault_handler(app: FastAPI) -> None:

    @app.exception_handler(PaymentInstructionError)
    async def instruction_fault_handler(
        request: Request, exc: PaymentInstructionError,
    ):
        """Render a fault raised while an instruction was being processed."""
        logger.error(
            f"Payment instruction aborted in stage {exc.context.stage or 'unknown'}",
            extra={
                "error_code": exc.code,
                "stage": exc.context.stage,
                "path": request.url.path,
                "http_status": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_malformed_body_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def malformed_body_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Reject a body without accounts/instruction of the right shape."""
        fields = [_field_path(e) for e in exc.errors()]
        logger.warning(
            f"Rejected malformed payment-instruction body, bad fields: {fields}",
            extra={
                "error_code": "VALIDATION_ERROR",
                "path": request.url.path,
                "http_status": status.HTTP_400_BAD_REQUEST,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_last_resort_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def last_resort_handler(request: Request, exc: Exception):
        """Anything the pipeline did not wrap is answered like an internal fault."""
        logger.error(
            f"Unwrapped exception escaped {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "error_code": "INTERNAL_ERROR",
                "path": request.url.path,
                "http_status": status.HTTP_500_INTERNAL_SERVER_ERROR,
            },
        )
        fault = InternalFaultError(str(exc))
        return JSONResponse(
            status_code=fault.http_status, content=fault.to_response(),
        )


def _field_path(error: dict) -> str:
    return ".".join(str(loc) for loc in error["loc"])


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """SY03 error body listing each field that failed and why."""
    response = MalformedRequestError().to_response()
    response["error"]["details"] = [
        {"field": _field_path(e), "message": e["msg"], "type": e["type"]}
        for e in exc.errors()
    ]
    return response
