"""Mapping of application errors to HTTP responses."""

import logfire
from fastapi import HTTPException, status

from threads.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    OperationError,
    ValidationError,
)
from threads.util.jwt import JWTError


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Translate an error raised by a use case into an HTTP error.

    Args:
        error: The raised error
        action: What the route was doing, for logs and the fallback message

    Returns:
        HTTPException to raise
    """
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, JWTError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error))
    if isinstance(error, NotFoundError):
        logfire.info(f"{action}: not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"{action}: not authorized", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, BusinessRuleViolationError):
        logfire.warn(f"{action}: business rule violated", error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, (ValidationError, DomainError, ValueError)):
        logfire.warn(f"{action}: validation error", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )
    if isinstance(error, OperationError):
        logfire.error(f"{action}: operation failed", error=str(error))
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
        )

    logfire.error(
        f"Unexpected error: {action}", error=str(error), error_type=type(error).__name__
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Failed to {action}"
    )
