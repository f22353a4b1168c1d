"""
Custom exceptions for the Tusk CLI application.
"""


class TuskError(Exception):
    """Base exception for all Tusk-related errors."""
    pass


class NotFoundError(TuskError):
    """Raised when a requested item is not found."""
    pass


class AccountNotFoundError(NotFoundError):
    """Raised when an operation targets an account that does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No such account '{name}'")


class InvalidTaskIndexError(TuskError):
    """Raised when a task id does not point at a task in the account."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__("Invalid task index")


class StorageError(TuskError):
    """Raised when the task data file cannot be read or written."""
    pass
