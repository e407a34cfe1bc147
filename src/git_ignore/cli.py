"""
git_ignore.cli - Command Line Interface
=======================================

This module provides the ``git-ignore`` command using Typer. It is the only
place where errors are turned into messages and exit codes; everything it
calls raises instead.

Architecture
------------
A single Typer command. Flags short-circuit before composition, in this
order:

    --version     print version
    --repo        print the mirror path
    --list        print available template names
    --completion  print a shell completion script
    --register    install as ``git ignore``
    <names...>    compose and print the .gitignore

stdout only ever receives the requested output. Errors and clone progress
go to stderr.

Usage Examples
--------------
Generate a .gitignore for node:
    $ git-ignore node > .gitignore

Append rust and python templates:
    $ git-ignore rust python >> .gitignore

Configure the repository path:
    $ git config --global ignore.path <path>
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from git_ignore import __version__
from git_ignore.completions import render_completion
from git_ignore.config import ConfigProvider, GitConfigProvider
from git_ignore.errors import GitIgnoreError
from git_ignore.generator import available_templates, compose_gitignore
from git_ignore.models import Settings, Shell
from git_ignore.register import SUBCOMMAND_NAME, register_subcommand
from git_ignore.repository import load_index


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="git-ignore",
    help="Generate .gitignore files from the github/gitignore templates.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Console for regular output
console = Console()

# Console for errors and progress, keeps stdout pipeable
err_console = Console(stderr=True, soft_wrap=True)


def get_config_provider() -> ConfigProvider:
    """Return the provider used to locate the template mirror."""
    return GitConfigProvider()


def fail(error: Exception | str) -> NoReturn:
    """Print an error to stderr and exit with status 1."""
    err_console.print(f"[bold red]Error:[/] {escape(str(error))}")
    raise typer.Exit(1)


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """
    Display version information and exit.

    Parameters
    ----------
    value : bool
        True if --version was passed.
    """
    if value:
        typer.echo(f"git-ignore v{__version__}")
        raise typer.Exit()


# =============================================================================
# Main Command
# =============================================================================

@app.command()
def main(
    ctx: typer.Context,
    names: Annotated[
        list[str] | None,
        typer.Argument(
            help="Template names, in output order (e.g. node python)",
            show_default=False,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Print version information and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    repo: Annotated[
        bool,
        typer.Option(
            "--repo",
            help="Print gitignore repository path and exit.",
        ),
    ] = False,
    list_: Annotated[
        bool,
        typer.Option(
            "--list",
            help="List all available gitignore templates.",
        ),
    ] = False,
    completion: Annotated[
        Shell | None,
        typer.Option(
            "--completion",
            "-c",
            help="Generate completion script for bash, zsh or fish.",
            show_default=False,
        ),
    ] = None,
    register: Annotated[
        bool,
        typer.Option(
            "--register",
            help="Register git-ignore command as git subcommand.",
        ),
    ] = False,
    ignore_case: Annotated[
        bool,
        typer.Option(
            "--ignore-case",
            "-i",
            help="Match template names case-insensitively.",
        ),
    ] = False,
) -> None:
    """
    Generate a .gitignore from one or more templates.

    Templates come from a local clone of github/gitignore, created on first
    use. Output goes to stdout.

    [bold]Examples:[/]

        # Generate gitignore for nodejs and save it to .gitignore
        git ignore node > .gitignore

        # Generate gitignore for rust and python and append it to .gitignore
        git ignore rust python >> .gitignore

        # Configure gitignore repository path
        git config --global ignore.path <path>
    """
    if repo:
        settings = _load_settings()
        typer.echo(str(settings.mirror_path))
        return

    if list_:
        index = _load_index(_load_settings())
        for name in available_templates(index):
            typer.echo(name)
        return

    if completion is not None:
        typer.echo(render_completion(completion), nl=False)
        return

    if register:
        _register()
        return

    if not names:
        typer.echo(ctx.get_help())
        return

    index = _load_index(_load_settings())
    try:
        document = compose_gitignore(index, names, ignore_case=ignore_case)
    except GitIgnoreError as e:
        fail(e)

    typer.echo(document)


# =============================================================================
# Helpers
# =============================================================================

def _load_settings() -> Settings:
    try:
        return Settings.from_provider(get_config_provider())
    except ValueError as e:
        fail(e)


def _load_index(settings: Settings) -> dict[str, str]:
    try:
        return load_index(settings, console=err_console)
    except GitIgnoreError as e:
        fail(e)


def _register() -> None:
    found = shutil.which(SUBCOMMAND_NAME)
    executable = Path(found or sys.argv[0]).resolve()

    try:
        target = register_subcommand(executable)
    except GitIgnoreError as e:
        fail(e)

    console.print(f"[green]✓[/] Successfully registered git-ignore command at {escape(str(target))}")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
