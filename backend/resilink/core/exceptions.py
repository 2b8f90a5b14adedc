"""
Error taxonomy shared by the store, the services and the HTTP layer.

InvalidArgumentError and NotFoundError are outcomes the caller can correct.
PersistenceError and ReportGenerationError are infrastructure faults; their
messages are kept generic when shown to clients.
"""


class ResilinkError(Exception):
    """Base exception for all Resilink errors."""


class InvalidArgumentError(ResilinkError, ValueError):
    """A caller-supplied value was rejected (empty status, unknown moderation value)."""


class NotFoundError(ResilinkError, LookupError):
    """The referenced record does not exist."""


class PersistenceError(ResilinkError):
    """A store read or write failed."""

    def __init__(self, message: str, operation: str = "") -> None:
        self.message = message
        self.operation = operation
        super().__init__(f"{operation}: {message}" if operation else message)


class ReportGenerationError(ResilinkError):
    """The status report could not be computed."""
