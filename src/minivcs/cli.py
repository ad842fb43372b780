"""CLI for minivcs."""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging
import os

import click
import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperGroup

from .checkout import checkout as ops_checkout
from .config import VcsSettings, load_settings
from .context import RepoContext
from .errors import (
    NoIdentityConfigured,
    NothingToCommitError,
    UnrecognizedCommandError,
    VcsError,
)
from .history import HistoryLog
from .index import IndexStore
from .ops import commit as ops_commit, load_username, save_username


COMMANDS: List[Tuple[str, str]] = [
    ("config", "Get and set a username."),
    ("add", "Add a file to the index."),
    ("log", "Show commit logs."),
    ("commit", "Save changes."),
    ("checkout", "Restore a file."),
]

console = Console(soft_wrap=True, emoji=False)


@dataclass
class CliState:
    """Per-invocation state shared with commands through the click context."""
    repo: RepoContext
    settings: VcsSettings


class SvcsGroup(TyperGroup):
    """Command group that reports unknown commands in the tool's own words."""

    def resolve_command(self, ctx: click.Context, args: List[str]):
        name = args[0] if args else ""
        if not ctx.resilient_parsing and self.get_command(ctx, name) is None:
            RepoContext.init()
            console.print(f"[red]{escape(str(UnrecognizedCommandError(name)))}[/red]")
            ctx.exit(1)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=SvcsGroup,
    add_help_option=False,
    invoke_without_command=True,
    help="Minimal local version control: track files, commit snapshots, restore them.",
)


def print_help() -> None:
    """Print the command summary."""
    console.print("These are SVCS commands:")
    for name, description in COMMANDS:
        console.print(f"{name:<11}{description}")


def _configure_logging(settings: VcsSettings) -> None:
    """Configure root logging from settings; DEBUG=1 forces debug output."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    if os.environ.get("DEBUG"):
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _fail(error: VcsError) -> None:
    """Print an error line and exit with status 1."""
    console.print(f"[red]{escape(str(error))}[/red]")
    raise typer.Exit(1)


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


@app.callback()
def main_callback(
    ctx: typer.Context,
    show_help: bool = typer.Option(False, "--help", help="Show the command summary."),
):
    """Create the vcs/ layout if needed and load settings."""
    repo = RepoContext.init()
    settings = load_settings(repo.root)
    _configure_logging(settings)
    ctx.obj = CliState(repo=repo, settings=settings)

    if show_help or ctx.invoked_subcommand is None:
        print_help()
        raise typer.Exit()


@app.command()
def config(
    ctx: typer.Context,
    username: Optional[str] = typer.Argument(None, help="New username"),
):
    """Get and set a username."""
    repo = _state(ctx).repo

    if username is None:
        name = load_username(repo)
        if name is None:
            console.print(f"[yellow]{NoIdentityConfigured()}[/yellow]")
            return
        console.print(f"The username is {escape(name)}.")
        return

    save_username(username, repo)
    console.print(f"The username is {escape(username)}.")


@app.command()
def add(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="File to track"),
):
    """Add a file to the index.

    Without a path, lists tracked files in tracking order.
    """
    index = IndexStore(_state(ctx).repo)

    if path is None:
        if not index.exists():
            console.print("Add a file to the index.")
            return
        console.print("Tracked files:")
        for tracked_path in index.list_tracked().files:
            console.print(escape(tracked_path))
        return

    try:
        index.track(path)
    except VcsError as e:
        _fail(e)

    console.print(f"[green]The file '{escape(path)}' is tracked.[/green]")


@app.command()
def log(ctx: typer.Context):
    """Show commit logs, newest first."""
    try:
        entries = HistoryLog(_state(ctx).repo).read_all()
    except VcsError as e:
        _fail(e)

    if not entries:
        console.print("No commits yet.")
        return

    for position, entry in enumerate(reversed(entries)):
        if position:
            console.print()
        console.print(f"commit {entry.commit_id}")
        console.print(f"Author: {escape(entry.author)}")
        console.print(escape(entry.message))


@app.command()
def commit(
    ctx: typer.Context,
    message: Optional[str] = typer.Argument(None, help="Commit message"),
):
    """Save changes."""
    state = _state(ctx)
    author = load_username(state.repo)

    try:
        ops_commit(message, author, ctx=state.repo, settings=state.settings)
    except NothingToCommitError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return
    except VcsError as e:
        _fail(e)

    console.print("[green]Changes are committed.[/green]")


@app.command()
def checkout(
    ctx: typer.Context,
    commit_id: Optional[str] = typer.Argument(None, help="Commit identifier"),
):
    """Restore a file."""
    try:
        ops_checkout(commit_id, _state(ctx).repo)
    except VcsError as e:
        _fail(e)

    console.print(f"Switched to commit {escape(commit_id)}.")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
