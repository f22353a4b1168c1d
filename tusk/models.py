"""
Data models for the Tusk CLI.

An account owns an ordered list of tasks. Tasks have no identity of their
own: the 1-based position in the owning account is the id shown to users,
and it shifts when an earlier task is deleted.
"""

from enum import Enum
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, Field, TypeAdapter

from tusk.exceptions import InvalidTaskIndexError


class Priority(str, Enum):
    """Task urgency, serialized by variant name."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


_PRIORITY_TEXT = {
    "high": Priority.HIGH,
    "medium": Priority.MEDIUM,
    "low": Priority.LOW,
}


def parse_priority(text: str) -> Optional[Priority]:
    """
    Parse priority text typed on the command line.

    Matching is case-sensitive: only "high", "medium" and "low" are accepted.

    Args:
        text: The priority text to parse.

    Returns:
        The matching Priority, or None if the text is not recognised.
    """
    return _PRIORITY_TEXT.get(text)


class Task(BaseModel):
    """A single to-do entry."""

    description: str
    completed: bool = False
    priority: Priority = Priority.LOW

    def mark_complete(self) -> None:
        self.completed = True

    def mark_incomplete(self) -> None:
        self.completed = False


class Account(BaseModel):
    """
    Named container for an ordered list of tasks.

    `subaccounts` is kept in the persisted shape but no command populates or
    walks it.
    """

    name: str
    tasks: List[Task] = Field(default_factory=list)
    subaccounts: Dict[str, "Account"] = Field(default_factory=dict)

    def _index(self, task_id: int) -> Optional[int]:
        """Convert a 1-based task id to a list index, or None if out of range."""
        if 1 <= task_id <= len(self.tasks):
            return task_id - 1
        return None

    def add_task(self, description: str) -> Task:
        """Append a Low priority task and return it."""
        return self.add_task_with_priority(description, Priority.LOW)

    def add_task_with_priority(self, description: str, priority: Priority) -> Task:
        """Append a task with the given priority and return it."""
        task = Task(description=description, priority=priority)
        self.tasks.append(task)
        return task

    def delete_task(self, task_id: int) -> None:
        """Remove the task at 1-based position task_id.

        Ids outside the task list are ignored.
        """
        index = self._index(task_id)
        if index is not None:
            del self.tasks[index]

    def complete_task(self, task_id: int) -> Task:
        """Mark the task at 1-based position task_id as completed.

        Raises:
            InvalidTaskIndexError: If task_id is outside the task list.
        """
        task = self._get_task(task_id)
        task.mark_complete()
        return task

    def uncomplete_task(self, task_id: int) -> Task:
        """Mark the task at 1-based position task_id as not completed.

        Raises:
            InvalidTaskIndexError: If task_id is outside the task list.
        """
        task = self._get_task(task_id)
        task.mark_incomplete()
        return task

    def clear_tasks(self) -> None:
        self.tasks.clear()

    def _get_task(self, task_id: int) -> Task:
        index = self._index(task_id)
        if index is None:
            raise InvalidTaskIndexError(task_id)
        return self.tasks[index]


Account.model_rebuild()

_ACCOUNTS_ADAPTER = TypeAdapter(Dict[str, Account])


class TaskStore:
    """
    The full set of accounts, keyed by account name.

    This is the whole persisted state. It serializes to a JSON object that
    maps each account name to its account record.
    """

    def __init__(self, accounts: Optional[Dict[str, Account]] = None) -> None:
        self.accounts: Dict[str, Account] = accounts if accounts is not None else {}

    @classmethod
    def from_data(cls, data) -> "TaskStore":
        """Build a store from decoded JSON data.

        Raises:
            pydantic.ValidationError: If the data does not have the store shape.
        """
        return cls(_ACCOUNTS_ADAPTER.validate_python(data))

    def to_data(self) -> dict:
        """Dump the store to JSON-compatible data."""
        return _ACCOUNTS_ADAPTER.dump_python(self.accounts, mode="json")

    def get(self, name: str) -> Optional[Account]:
        return self.accounts.get(name)

    def get_or_create(self, name: str) -> Account:
        """Return the named account, creating an empty one if it is absent."""
        account = self.accounts.get(name)
        if account is None:
            account = Account(name=name)
            self.accounts[name] = account
        return account

    def __contains__(self, name: object) -> bool:
        return name in self.accounts

    def __iter__(self) -> Iterator[str]:
        return iter(self.accounts)

    def __len__(self) -> int:
        return len(self.accounts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskStore):
            return NotImplemented
        return self.accounts == other.accounts

    def __repr__(self) -> str:
        return f"TaskStore({self.accounts!r})"
