"""
TuskCore - Core business logic for the Tusk CLI.

Loads the task store at most once per invocation, hands it to the AccountManager,
and writes it back in full when the command has run.
"""

from pathlib import Path
from typing import Optional

from tusk.managers import AccountManager, StorageManager
from tusk.models import TaskStore


class TuskCore:
    """
    Core class for business logic operations.

    Orchestrates manager classes:
    - StorageManager: Persistence to the JSON data file
    - AccountManager: Task operations on the loaded store
    """

    def __init__(self, data_file: Optional[Path] = None):
        """
        Initialize the TuskCore and load the task store.

        Args:
            data_file: Path to the data file. Defaults to task_data.json in current directory.

        Raises:
            StorageError: If the data file exists but cannot be loaded.
        """
        self.storage = StorageManager(data_file)
        self.store: TaskStore = self.storage.load()
        self.account_manager = AccountManager(self.store)

    def save(self) -> None:
        """Save the task store to storage."""
        self.storage.save(self.store)


class TuskSession:
    """
    Per-invocation holder for the TuskCore, stored as the click context object.

    The core (and with it the data file) is loaded on first access, so
    `tusk <command> --help` never reads the data file.
    """

    def __init__(self, data_file: Optional[Path] = None):
        self.data_file = data_file
        self._core: Optional[TuskCore] = None

    @property
    def loaded(self) -> bool:
        return self._core is not None

    @property
    def core(self) -> TuskCore:
        """Get the TuskCore, loading the data file on first use.

        Raises:
            StorageError: If the data file exists but cannot be loaded.
        """
        if self._core is None:
            self._core = TuskCore(self.data_file)
        return self._core

    def save(self) -> None:
        """Save the store if it was loaded during this invocation."""
        if self._core is not None:
            self._core.save()
