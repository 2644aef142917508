"""
Response Envelope

AI endpoint responses are wrapped as {status, message, data, statusCode};
failures carry data=null and, for server errors, a details string.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException

from app.core.errors import AIServiceError


class Envelope(BaseModel):
    status: bool
    message: str
    data: Any = None
    statusCode: int


def ok(data: Any, message: str = "Success", status_code: int = status.HTTP_200_OK) -> Envelope:
    return Envelope(status=True, message=message, data=data, statusCode=status_code)


def _fail(status_code: int, message: str, details: str | None = None) -> JSONResponse:
    body = {"status": False, "message": message, "data": None, "statusCode": status_code}
    if status_code >= 500 and details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return _fail(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _fail(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid request body")

    @app.exception_handler(AIServiceError)
    async def ai_service_exception_handler(request: Request, exc: AIServiceError):
        print(f"[AI] {type(exc).__name__} on {request.url.path}: {exc}")
        return _fail(exc.status_code, str(exc), details=str(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        print(f"[AI] Unhandled error on {request.url.path}: {exc}")
        return _fail(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Internal server error in path {request.url.path}",
            details=str(exc),
        )
