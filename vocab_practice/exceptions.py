"""Infrastructure-level exception hierarchy for the Vocab Practice application."""


class VocabPracticeError(Exception):
    """Base exception for all infrastructure errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class PersistenceError(VocabPracticeError):
    """The backing store failed (connection lost, timeout, constraint, ...)."""

    def __init__(self, operation: str, reason: str | None = None) -> None:
        """Initialize with the repository operation that failed."""
        self.operation = operation
        self.reason = reason
        message = f"Store operation '{operation}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, status_code=500)
