"""
Test fixtures for the Tusk CLI test suite.

Provides:
- Temporary directory fixtures (isolated from any real task_data.json)
- Mock data builders for creating test accounts and tasks
"""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Generator, List, Optional

import pytest

from tusk.constants import reset_config_manager
from tusk.models import Account, Priority, Task, TaskStore


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = Path(tempfile.mkdtemp(prefix="tusk_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_cwd(temp_dir: Path, monkeypatch) -> Generator[Path, None, None]:
    """Run every test inside the temp directory with a fresh config singleton.

    Keeps the default task_data.json and .tusk/config.json out of the repo.
    """
    monkeypatch.chdir(temp_dir)
    monkeypatch.delenv("TUSK_DATA_FILE", raising=False)
    reset_config_manager()
    yield temp_dir
    reset_config_manager()


@pytest.fixture
def data_file(temp_dir: Path) -> Path:
    """Path to a task data file that does not exist yet."""
    return temp_dir / "task_data.json"


# =============================================================================
# Mock Data Builders
# =============================================================================


class MockDataBuilder:
    """Helper class for building mock Tusk data for testing."""

    @staticmethod
    def create_task(
        description: str = "Test task",
        completed: bool = False,
        priority: Priority = Priority.LOW,
    ) -> Task:
        """Create a mock Task for testing."""
        return Task(description=description, completed=completed, priority=priority)

    @staticmethod
    def create_account(
        name: str = "acme",
        descriptions: Optional[List[str]] = None,
    ) -> Account:
        """Create a mock Account holding one Low task per description."""
        account = Account(name=name)
        for description in descriptions or []:
            account.add_task(description)
        return account

    @staticmethod
    def create_store(*accounts: Account) -> TaskStore:
        """Create a TaskStore keyed by the given accounts' names."""
        return TaskStore({account.name: account for account in accounts})


@pytest.fixture
def builder() -> MockDataBuilder:
    return MockDataBuilder()


@pytest.fixture
def populated_data_file(data_file: Path) -> Path:
    """A data file holding account 'acme' with three tasks."""
    data = {
        "acme": {
            "name": "acme",
            "tasks": [
                {"description": "buy milk", "completed": False, "priority": "Low"},
                {"description": "fix roof", "completed": True, "priority": "High"},
                {"description": "call bob", "completed": False, "priority": "Medium"},
            ],
            "subaccounts": {},
        }
    }
    data_file.write_text(json.dumps(data))
    return data_file

