"""Exceptions for the comment handler module."""


class CommandError(Exception):
    """Base exception for comment handler errors."""

    pass


class PayloadError(CommandError):
    """Raised when a webhook payload lacks the fields a command needs."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid webhook payload: {reason}")


class IssueClientError(CommandError):
    """Raised when the issue tracker refuses or fails an operation."""

    def __init__(self, operation: str, issue_number: int, reason: str):
        self.operation = operation
        self.issue_number = issue_number
        self.reason = reason
        super().__init__(
            f"Failed to run '{operation}' on issue #{issue_number}: {reason}"
        )
