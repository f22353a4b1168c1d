"""
CLI entry point for Tusk.

Each invocation loads the data file when a command runs, runs at most one
command, and saves the data file again, whatever the command reported.
"""
from pathlib import Path
from typing import Optional

import click

from tusk.commands.tasks import (
    add,
    add_with_priority,
    clear,
    complete,
    delete,
    list_tasks,
    uncomplete,
)
from tusk.constants import DATA_FILE_ENVVAR, HELP_PAGE, get_data_file
from tusk.core import TuskSession
from tusk.exceptions import StorageError


@click.group(invoke_without_command=True)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=DATA_FILE_ENVVAR,
    help="Task data file (defaults to task_data.json).",
)
@click.pass_context
def cli(ctx: click.Context, data_file: Optional[Path]):
    """A command-line task tracker with per-account task lists."""
    ctx.obj = TuskSession(data_file or get_data_file())

    if ctx.invoked_subcommand is None:
        try:
            ctx.obj.core
        except StorageError as e:
            raise click.ClickException(str(e))
        click.echo(HELP_PAGE)


@cli.result_callback()
@click.pass_context
def save_store(ctx: click.Context, result, **kwargs):
    """Persist the store after every command."""
    try:
        ctx.obj.save()
    except StorageError as e:
        raise click.ClickException(str(e))


cli.add_command(add)
cli.add_command(add_with_priority)
cli.add_command(list_tasks)
cli.add_command(delete)
cli.add_command(complete)
cli.add_command(uncomplete)
cli.add_command(clear)


if __name__ == '__main__':
    cli()
