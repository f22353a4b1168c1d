"""
AccountManager for task operations in the Tusk CLI.

Handles:
- Account lookup and implicit creation on add
- Task operations (add, delete, complete, uncomplete, clear)
"""

from typing import List, Optional

from tusk.exceptions import AccountNotFoundError
from tusk.models import Account, Priority, Task, TaskStore


class AccountManager:
    """
    Applies task operations to accounts held in a TaskStore.

    Only the add operations create accounts. Every other operation raises
    AccountNotFoundError for an unknown name and leaves the store unchanged.
    """

    def __init__(self, store: TaskStore) -> None:
        """
        Initialize AccountManager.

        Args:
            store: TaskStore the operations are applied to.
        """
        self.store = store

    def get_account(self, name: str) -> Account:
        """Get an existing account by name.

        Raises:
            AccountNotFoundError: If no account has that name.
        """
        account = self.store.get(name)
        if account is None:
            raise AccountNotFoundError(name)
        return account

    def add_task(
        self, name: str, description: str, priority: Optional[Priority] = None
    ) -> Task:
        """Add a task to the named account, creating the account if needed.

        Args:
            name: Account name.
            description: Task description.
            priority: Task priority. Defaults to Low.

        Returns:
            The new task.
        """
        account = self.store.get_or_create(name)
        if priority is None:
            return account.add_task(description)
        return account.add_task_with_priority(description, priority)

    def list_tasks(self, name: str) -> List[Task]:
        """Return the tasks of the named account in display order."""
        return list(self.get_account(name).tasks)

    def delete_task(self, name: str, task_id: int) -> None:
        """Delete a task by 1-based id. Unknown ids are ignored."""
        self.get_account(name).delete_task(task_id)

    def complete_task(self, name: str, task_id: int) -> Task:
        """Mark a task complete.

        Raises:
            AccountNotFoundError: If the account does not exist.
            InvalidTaskIndexError: If task_id is out of range.
        """
        return self.get_account(name).complete_task(task_id)

    def uncomplete_task(self, name: str, task_id: int) -> Task:
        """Mark a task incomplete.

        Raises:
            AccountNotFoundError: If the account does not exist.
            InvalidTaskIndexError: If task_id is out of range.
        """
        return self.get_account(name).uncomplete_task(task_id)

    def clear_tasks(self, name: str) -> None:
        self.get_account(name).clear_tasks()
