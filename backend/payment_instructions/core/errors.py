"""Error Hierarchy — typed exceptions for failures that are NOT domain rejections.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain rule violations (SY/AM/CU/AC/DT codes) are return values, never exceptions
    - Request errors are 400-level; internal faults are 500-level
    - to_response() never leaks debug_info or exception text

Design Decisions:
    - Single hierarchy with PaymentInstructionError base: FastAPI global handler
      catches all and renders one uniform error shape
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from payment_instructions.core.domain_types import StatusCode
from payment_instructions.core.status_messages import (
    INTERNAL_ERROR_MESSAGE,
    reason_for,
)


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs; only safe fields reach clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    instruction_type: str | None = None
    stage: str | None = None
    debug_info: dict[str, Any] | None = None


class PaymentInstructionError(Exception):
    """Base exception for all service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "instruction_type": self.context.instruction_type,
                    "stage": self.context.stage,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class MalformedRequestError(PaymentInstructionError):
    """Request body failed schema validation before the pipeline ran."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            reason_for(StatusCode.MALFORMED_INSTRUCTION),
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Internal Faults (500-level) ────────────────────────────────

class InternalFaultError(PaymentInstructionError):
    """Unexpected fault inside the pipeline, e.g. a non-numeric balance."""
    def __init__(self, detail: str, context: ErrorContext | None = None):
        super().__init__(
            INTERNAL_ERROR_MESSAGE,
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail
