"""
Managers for the Tusk CLI.

This package contains focused manager classes:
- AccountManager: Account lookup and task mutations against a TaskStore
- StorageManager: Persistence of the TaskStore to the JSON data file
"""

from tusk.managers.account_manager import AccountManager
from tusk.managers.storage_manager import StorageManager
from tusk.exceptions import StorageError

__all__ = [
    "AccountManager",
    "StorageManager",
    "StorageError",
]
