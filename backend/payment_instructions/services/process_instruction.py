"""Payment Instruction Pipeline — drive one instruction from raw text to response envelope.

Flow:
    tokenize -> parse_instruction -> validate_business_rules
             -> execute_instruction -> build_response
    Any stage may short-circuit straight to build_response with a Rejected.

Invariants:
    - Exactly one outcome per call; balances only move under Executed
    - The caller's account mappings are snapshotted and never mutated
    - Domain rejections are returned; only internal faults raise
    - Unexpected exceptions are logged and re-raised as InternalFaultError

Design Decisions:
    - Clock read here, not in core: core receives `today` and stays pure
    - Synchronous: the whole pipeline is O(tokens), nothing to await
"""

import logging
from datetime import date, datetime, timezone
from typing import Any, Mapping, Sequence

from payment_instructions.core.build_response import build_response
from payment_instructions.core.enforce_rules import validate_business_rules
from payment_instructions.core.errors import ErrorContext, InternalFaultError
from payment_instructions.core.execute_transfer import execute_instruction
from payment_instructions.core.instruction_types import Account
from payment_instructions.core.parse_instruction import parse_instruction
from payment_instructions.core.tokenize_instruction import tokenize
from payment_instructions.infrastructure.observability import time_stage

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def snapshot_accounts(accounts: Sequence[Mapping[str, Any]]) -> list[Account]:
    """Freeze caller-supplied account mappings into Account values."""
    return [
        Account(id=a["id"], balance=a["balance"], currency=a["currency"])
        for a in accounts
    ]


def process_payment_instruction(
    accounts: Sequence[Mapping[str, Any]],
    instruction: str,
    today: date | None = None,
) -> dict:
    """Evaluate one instruction against an account snapshot."""
    today = today or utc_today()
    parsed = None
    try:
        snapshot = snapshot_accounts(accounts)

        with time_stage(logger, "parse-instruction"):
            result = parse_instruction(tokenize(instruction))
        parsed = result.instruction
        outcome = result.rejection

        if outcome is None:
            with time_stage(logger, "validate-rules"):
                outcome = validate_business_rules(parsed, snapshot, today)

        if outcome is None:
            with time_stage(logger, "execute"):
                outcome = execute_instruction(parsed, snapshot, today)

        response = build_response(parsed, outcome)
    except InternalFaultError as exc:
        logger.error(
            f"Internal fault while processing instruction: {exc.detail}",
            extra={
                "error_code": exc.code,
                "stage": exc.context.stage,
                "account_id": (exc.context.debug_info or {}).get("account_id"),
            },
        )
        raise
    except Exception as exc:
        logger.error(
            f"Unexpected error while processing instruction: {exc}",
            exc_info=True,
        )
        raise InternalFaultError(
            str(exc),
            ErrorContext(
                instruction_type=parsed.type.value if parsed and parsed.type else None,
            ),
        ) from exc

    logger.info(
        f"Instruction {response['status']}: {response['status_reason']}",
        extra={
            "status_code": response["status_code"],
            "instruction_type": response["type"],
        },
    )
    return response
