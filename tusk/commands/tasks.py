"""
Task commands for the Tusk CLI.

Every command works on the TuskCore held by the `tusk` group's session,
loaded when the command body runs. Missing accounts and bad task ids are
reported as text; the command still exits 0 and the store is saved afterwards.
"""
import json
from functools import update_wrapper
from typing import List

import click

from tusk.constants import (
    MSG_ACCOUNT_CLEARED,
    MSG_ACCOUNT_NOT_FOUND,
    MSG_NO_SUCH_TASK,
    MSG_NO_TASKS,
    MSG_TASK_ADDED,
    MSG_TASK_DELETED,
    MSG_TASKS_HEADER,
    MSG_UNKNOWN_PRIORITY,
    get_color_enabled,
)
from tusk.core import TuskCore, TuskSession
from tusk.exceptions import AccountNotFoundError, InvalidTaskIndexError, StorageError
from tusk.models import Priority, Task, parse_priority

PRIORITY_COLORS = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}


def pass_core(f):
    """Pass the session's TuskCore as the first argument, loading it if needed."""
    @click.pass_obj
    def new_func(session: TuskSession, *args, **kwargs):
        try:
            core = session.core
        except StorageError as e:
            raise click.ClickException(str(e))
        return f(core, *args, **kwargs)
    return update_wrapper(new_func, f)


def format_task(task_id: int, task: Task) -> str:
    """Format one task line, e.g. '1. [X] buy milk (Low)'."""
    mark = "X" if task.completed else " "
    priority = click.style(task.priority.value, fg=PRIORITY_COLORS[task.priority])
    return f"{task_id}. [{mark}] {task.description} ({priority})"


def display_tasks(account: str, tasks: List[Task]) -> None:
    """Print the tasks listed under ACCOUNT, or a notice if there are none."""
    if not tasks:
        click.echo(MSG_NO_TASKS.format(name=account))
        return

    color = None if get_color_enabled() else False
    click.echo(MSG_TASKS_HEADER.format(name=account))
    for i, task in enumerate(tasks, 1):
        click.echo(format_task(i, task), color=color)


@click.command()
@click.argument("account")
@click.argument("description")
@pass_core
def add(core: TuskCore, account: str, description: str):
    """Add a new task to ACCOUNT, creating the account if needed."""
    core.account_manager.add_task(account, description)
    click.echo(MSG_TASK_ADDED.format(name=account))


@click.command(name="add-with-priority")
@click.argument("account")
@click.argument("description")
@click.argument("priority")
@pass_core
def add_with_priority(core: TuskCore, account: str, description: str, priority: str):
    """Add a new task with PRIORITY (high, medium or low) to ACCOUNT.

    Unrecognised priorities fall back to low with a warning.
    """
    parsed = parse_priority(priority)
    if parsed is None:
        click.echo(MSG_UNKNOWN_PRIORITY.format(text=priority), err=True)
        parsed = Priority.LOW
    core.account_manager.add_task(account, description, parsed)
    click.echo(MSG_TASK_ADDED.format(name=account))


@click.command(name="list")
@click.argument("account")
@click.option("-j", "--json", "json_output", is_flag=True, help="Output in JSON format.")
@pass_core
def list_tasks(core: TuskCore, account: str, json_output: bool):
    """List all tasks for ACCOUNT."""
    try:
        tasks = core.account_manager.list_tasks(account)
    except AccountNotFoundError:
        click.echo(MSG_ACCOUNT_NOT_FOUND.format(name=account))
        return

    if json_output:
        data = {"name": account, "tasks": [task.model_dump(mode="json") for task in tasks]}
        click.echo(json.dumps(data, indent=2))
    else:
        display_tasks(account, tasks)


@click.command()
@click.argument("account")
@click.argument("task_id", metavar="ID", type=int)
@pass_core
def delete(core: TuskCore, account: str, task_id: int):
    """Delete task ID from ACCOUNT."""
    try:
        core.account_manager.delete_task(account, task_id)
    except AccountNotFoundError as e:
        click.echo(str(e))
        return
    click.echo(MSG_TASK_DELETED.format(name=account))


def _set_completion(core: TuskCore, account: str, task_id: int, completed: bool) -> None:
    manager = core.account_manager
    try:
        if completed:
            manager.complete_task(account, task_id)
        else:
            manager.uncomplete_task(account, task_id)
    except AccountNotFoundError as e:
        click.echo(str(e))
        return
    except InvalidTaskIndexError as e:
        click.echo(MSG_NO_SUCH_TASK.format(error=e))
        return
    display_tasks(account, manager.list_tasks(account))


@click.command()
@click.argument("account")
@click.argument("task_id", metavar="ID", type=int)
@pass_core
def complete(core: TuskCore, account: str, task_id: int):
    """Mark task ID in ACCOUNT as completed."""
    _set_completion(core, account, task_id, True)


@click.command()
@click.argument("account")
@click.argument("task_id", metavar="ID", type=int)
@pass_core
def uncomplete(core: TuskCore, account: str, task_id: int):
    """Mark completed task ID in ACCOUNT as incomplete."""
    _set_completion(core, account, task_id, False)


@click.command()
@click.argument("account")
@pass_core
def clear(core: TuskCore, account: str):
    """Clear all tasks for ACCOUNT."""
    try:
        core.account_manager.clear_tasks(account)
    except AccountNotFoundError as e:
        click.echo(str(e))
        return
    click.echo(MSG_ACCOUNT_CLEARED.format(name=account))
