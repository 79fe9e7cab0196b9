from typing import Any, Dict, Optional
from fastapi import status


class BaseAPIException(Exception):
    """
    Base class for every error the API raises on purpose.
    Keeps the error payload returned to clients uniform.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class BadRequestException(BaseAPIException):
    """400: the request is inconsistent or incomplete"""
    def __init__(self, message: str = "Bad Request", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class NotFoundException(BaseAPIException):
    """404: the requested resource does not exist"""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND
        )
