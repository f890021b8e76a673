"""Application-level exceptions and FastAPI exception handlers."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

    def to_body(self) -> dict[str, Any]:
        return _error_body(self.code, self.message)


class ValidationError(AppException):
    """Client-caused problem with a quote submission."""

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(message, status_code=400, code=code)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.code, "detail": self.message}


class MissingFieldsError(ValidationError):
    """One or more required fields are absent; lists every one of them."""

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.fields)}",
            code="missing_fields",
        )

    def to_body(self) -> dict[str, Any]:
        return {"error": self.code, "fields": self.fields}


class InvalidAmountError(ValidationError):
    """Amount is not a finite number (``invalid_amount_type``) or is below the minimum (``invalid_amount_min_50``)."""

    def __init__(self, code: str, got: Any):
        self.got = got
        super().__init__(f"Invalid amount: {got!r}", code=code)

    def to_body(self) -> dict[str, Any]:
        return {"error": self.code, "got": self.got}


class GatewayError(AppException):
    """Raised when the payment processor rejects or cannot be reached."""

    def __init__(
        self,
        message: str,
        *,
        type: str | None = None,
        code: str | None = None,
        param: str | None = None,
        http_status: int | None = None,
    ):
        self.type = type
        self.processor_code = code
        self.param = param
        self.http_status = http_status
        super().__init__(message, status_code=500, code="create_session_failed")

    def to_body(self) -> dict[str, Any]:
        return {"error": self.code, "detail": self.message}

    def diagnostics(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "type": self.type,
            "code": self.processor_code,
            "param": self.param,
            "status": self.http_status,
        }


class SideRecordError(AppException):
    """Raised when the back-office sheet append fails. Logged, never shown to checkout callers."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500, code="side_record_failed")


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
