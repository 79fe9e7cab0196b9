# student_manager/core/handlers.py
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from student_manager.core.config import settings
from student_manager.core.exceptions import BaseAPIException
from student_manager.core.logging import logger


def _error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details
            }
        },
    )


# 1. Errors raised on purpose by the endpoints
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    return _error_response(exc.status_code, exc.code, exc.message, exc.details)


# 2. Malformed request bodies and path parameters
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = {}
    for error in exc.errors():
        # "body.firstName" -> "firstName", a missing body -> "body"
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        if not field:
            field = "body"
        details[field] = error["msg"]

    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Input validation failed",
        details
    )


# 3. Routing errors (unknown URL, method not allowed)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


# 4. Everything else, including database failures
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred. Please contact support.",
        str(exc) if settings.DEBUG else None
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
