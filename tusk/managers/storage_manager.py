"""
StorageManager for the Tusk CLI.

Handles loading and saving of the task data JSON file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from tusk.constants import DEFAULT_DATA_FILE
from tusk.exceptions import StorageError
from tusk.models import TaskStore


class StorageManager:
    """
    Manages persistence of the task store to a single JSON file.

    The file is rewritten in full on every save. Writes go through a temp
    file and a rename so a failed save leaves the previous file intact.
    There is no locking: two processes saving at once lose one update.
    """

    def __init__(self, file_path: Optional[Path] = None) -> None:
        """
        Initialize the StorageManager with a data file path.

        Args:
            file_path: Path to the data file. Defaults to task_data.json in current directory.
        """
        self.file_path = Path(file_path) if file_path else Path(DEFAULT_DATA_FILE)

    def _atomic_write(self, data: Dict[str, Any]) -> None:
        """Write data to the data file atomically to prevent corruption.

        Args:
            data: Dictionary data to write as JSON.

        Raises:
            StorageError: If writing to file fails.
        """
        directory = self.file_path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=directory, prefix=".tmp_tusk_", suffix=".json"
            )
        except OSError as e:
            raise StorageError(f"Failed to write to {self.file_path}: {e}")

        try:
            with os.fdopen(temp_fd, "w") as temp_file:
                json.dump(data, temp_file, indent=2)
            os.replace(temp_path, self.file_path)
        except Exception as e:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise StorageError(f"Failed to write to {self.file_path}: {e}")

    def load(self) -> TaskStore:
        """Load the data file and return it as a TaskStore.

        A missing file yields an empty store.

        Raises:
            StorageError: If the file cannot be read or does not hold a valid store.
        """
        if not self.file_path.exists():
            return TaskStore()

        try:
            with open(self.file_path, "r") as f:
                data = json.load(f)
            return TaskStore.from_data(data)
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise StorageError(f"Failed to load {self.file_path}: {e}")
        except OSError as e:
            raise StorageError(f"Failed to read {self.file_path}: {e}")

    def save(self, store: TaskStore) -> None:
        """Save the full TaskStore to the data file."""
        self._atomic_write(store.to_data())
