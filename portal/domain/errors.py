"""Errors raised by the store, the repositories and the use cases."""


class PortalError(Exception):
    """Base class for every domain error."""


class NotFoundError(PortalError, LookupError):
    """A record addressed by identifier does not exist."""


class ConflictError(PortalError, ValueError):
    """A uniqueness constraint would be violated."""


class ValidationError(PortalError, ValueError):
    """A caller-supplied value was rejected."""


class PermissionDeniedError(PortalError):
    """The acting user is not allowed to touch the target record."""


__all__ = [
    "PortalError",
    "NotFoundError",
    "ConflictError",
    "ValidationError",
    "PermissionDeniedError",
]
