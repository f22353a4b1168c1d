import pytest

from tusk.exceptions import AccountNotFoundError, InvalidTaskIndexError
from tusk.managers.account_manager import AccountManager
from tusk.models import Priority, TaskStore


@pytest.fixture
def manager() -> AccountManager:
    return AccountManager(TaskStore())


def test_add_creates_account(manager):
    task = manager.add_task("acme", "buy milk")
    account = manager.store.get("acme")
    assert account.name == "acme"
    assert account.tasks == [task]
    assert task.description == "buy milk"
    assert task.completed is False
    assert task.priority == Priority.LOW


def test_add_with_priority_reuses_account(manager):
    manager.add_task("acme", "first")
    manager.add_task("acme", "second", Priority.HIGH)
    tasks = manager.list_tasks("acme")
    assert [t.description for t in tasks] == ["first", "second"]
    assert tasks[1].priority == Priority.HIGH
    assert len(manager.store) == 1


@pytest.mark.parametrize(
    "operation",
    [
        lambda m: m.get_account("ghost"),
        lambda m: m.list_tasks("ghost"),
        lambda m: m.delete_task("ghost", 1),
        lambda m: m.complete_task("ghost", 1),
        lambda m: m.uncomplete_task("ghost", 1),
        lambda m: m.clear_tasks("ghost"),
    ],
)
def test_unknown_account_is_not_created(manager, operation):
    with pytest.raises(AccountNotFoundError, match="No such account 'ghost'"):
        operation(manager)
    assert "ghost" not in manager.store


def test_complete_and_uncomplete(manager):
    manager.add_task("acme", "urgent fix", Priority.HIGH)
    task = manager.complete_task("acme", 1)
    assert task.completed is True
    assert task.priority == Priority.HIGH
    assert manager.uncomplete_task("acme", 1).completed is False


def test_complete_invalid_index(manager):
    manager.add_task("acme", "only")
    with pytest.raises(InvalidTaskIndexError):
        manager.complete_task("acme", 2)
    assert manager.list_tasks("acme")[0].completed is False


def test_delete_and_clear(manager):
    manager.add_task("acme", "a")
    manager.add_task("acme", "b")
    manager.delete_task("acme", 1)
    assert [t.description for t in manager.list_tasks("acme")] == ["b"]
    manager.delete_task("acme", 5)
    assert len(manager.list_tasks("acme")) == 1
    manager.clear_tasks("acme")
    assert manager.list_tasks("acme") == []
    assert "acme" in manager.store
