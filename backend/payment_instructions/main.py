"""Payment Instructions API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PaymentInstructionError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Three error handler layers: domain, RequestValidationError (Pydantic),
      Exception (catch-all); the catch-all never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from payment_instructions.api.error_handlers import register_error_handlers
from payment_instructions.api.routes import health, payment_instructions
from payment_instructions.config import get_settings
from payment_instructions.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Payment Instructions API started")
    yield
    logger.info("Payment Instructions API shutting down")


app = FastAPI(
    title="Payment Instructions API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(payment_instructions.router)

register_error_handlers(app)
