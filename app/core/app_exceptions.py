"""Application-specific exceptions for consistent error handling."""

from typing import Any

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Application error with standardized error code."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | list[Any] | None = None,
    ):
        super().__init__(
            status_code=status_code,
            detail={
                "code": code,
                "message": message,
                "details": details,
            },
        )
        self.code = code
        self.message = message
        self.details = details


def not_found(code: str, message: str, details: dict[str, Any] | None = None) -> AppError:
    """Build a 404 AppError."""
    return AppError(status.HTTP_404_NOT_FOUND, code, message, details)


def bad_request(
    code: str, message: str, details: dict[str, Any] | list[Any] | None = None
) -> AppError:
    """Build a 400 AppError."""
    return AppError(status.HTTP_400_BAD_REQUEST, code, message, details)
