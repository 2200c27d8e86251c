"""Error kinds raised by services and route handlers.

Every error carries a human readable message. The API reports all of them
the same way (see ``src.api.errors``), so the kind only matters to callers
inside the process and to the logs.
"""


class TodoAPIError(Exception):
    """Base class for all request-terminating errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TodoAPIError):
    """Required input is missing."""


class ConflictError(TodoAPIError):
    """The record would duplicate a unique value."""


class NotFoundError(TodoAPIError):
    """The record does not exist or is not owned by the requester."""


class UnauthenticatedError(TodoAPIError):
    """The request carries no usable identity."""


class UnauthorizedError(TodoAPIError):
    """The supplied credentials are wrong."""


class InvalidTokenError(TodoAPIError):
    """A token failed signature or payload verification."""
