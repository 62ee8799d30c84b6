"""
Request boundary errors and their FastAPI handlers.

Validators return values; these exceptions exist only so route handlers can
abort a request and have it rendered as a structured 400 response.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from postguard.components.uploads import UploadVerdict
from postguard.domain.outcome import ValidationOutcome

logger = logging.getLogger(__name__)


class RequestValidationFailed(Exception):
    """One or more request fields were rejected."""

    def __init__(self, outcome: ValidationOutcome) -> None:
        self.outcome = outcome
        super().__init__(f"Validation failed: {', '.join(outcome.errors_by_field())}")


class UploadRejected(Exception):
    """An uploaded file was rejected."""

    def __init__(self, verdict: UploadVerdict, field: str = "file") -> None:
        self.verdict = verdict
        self.field = field
        super().__init__(verdict.reason)


async def request_validation_failed_handler(
    request: Request, exc: RequestValidationFailed
) -> JSONResponse:
    errors = exc.outcome.errors_by_field()
    logger.warning("Validation failed: %s", errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation failed",
            "code": status.HTTP_400_BAD_REQUEST,
            "details": errors,
            "timestamp": int(time.time() * 1000),
        },
    )


async def upload_rejected_handler(request: Request, exc: UploadRejected) -> JSONResponse:
    logger.warning("Upload rejected (%s): %s", exc.field, exc.verdict.code)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": 0,
            "error": exc.verdict.reason,
            "code": exc.verdict.code,
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the validation error handlers on an application."""
    app.add_exception_handler(RequestValidationFailed, request_validation_failed_handler)  # type: ignore[arg-type]
    app.add_exception_handler(UploadRejected, upload_rejected_handler)  # type: ignore[arg-type]
