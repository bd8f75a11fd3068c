"""Errors raised by presence stores."""


class PresenceError(Exception):
    """Base class for presence tracking errors."""


class StoreUnavailableError(PresenceError):
    """The backing store could not complete a request.

    Covers connection failures, timeouts and error replies from the backend.
    The original exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize the error.

        Args:
            operation: Name of the store operation that failed (e.g. "remove_peer").
            reason: Human readable description of the underlying failure.
        """
        super().__init__(f"Presence store unavailable during {operation}: {reason}")
        self.operation = operation
        self.reason = reason
