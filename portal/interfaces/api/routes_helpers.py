"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from portal.domain.errors import (
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    PortalError,
    ValidationError,
)

_STATUS_BY_ERROR: tuple[tuple[type[PortalError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)


def to_http_exception(exc: PortalError) -> HTTPException:
    """Translate a domain error into the matching HTTP error response."""

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status_code=status_code, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
