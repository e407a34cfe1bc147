"""
git_ignore.completions - Shell Completion Scripts
=================================================

Completion scripts are Jinja2 templates shipped in ``git_ignore/templates``.
Each script completes option names and asks ``git-ignore --list`` for the
template names at completion time, so new templates show up without
regenerating the script.

Usage
-----
    $ git-ignore --completion bash > ~/.local/share/bash-completion/completions/git-ignore
    $ git-ignore --completion zsh > "${fpath[1]}/_git-ignore"
    $ git-ignore --completion fish > ~/.config/fish/completions/git-ignore.fish
"""

from __future__ import annotations

from dataclasses import dataclass

from jinja2 import Environment, PackageLoader, select_autoescape

from git_ignore.models import Shell


@dataclass(frozen=True)
class CompletionOption:
    """An option as shown to completion engines."""

    long: str
    description: str
    short: str | None = None
    takes_shell: bool = False


# Keep in sync with the options declared in cli.py
OPTIONS: tuple[CompletionOption, ...] = (
    CompletionOption("help", "Print this help message", short="h"),
    CompletionOption("version", "Print version information and exit", short="V"),
    CompletionOption("repo", "Print gitignore repository path and exit"),
    CompletionOption("list", "List all available gitignore files"),
    CompletionOption(
        "completion",
        "Generate completion script for bash, zsh or fish",
        short="c",
        takes_shell=True,
    ),
    CompletionOption("register", "Register git-ignore command as git subcommand"),
    CompletionOption("ignore-case", "Match template names case-insensitively", short="i"),
)


def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment for completion templates.

    Autoescaping is disabled since the output is shell code.
    """
    return Environment(
        loader=PackageLoader("git_ignore", "templates"),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def function_name(prog: str) -> str:
    """Shell-safe identifier derived from the program name."""
    return prog.replace("-", "_").replace(".", "_")


def render_completion(shell: Shell | str, prog: str = "git-ignore") -> str:
    """
    Render the completion script for ``shell``.

    Parameters
    ----------
    shell : Shell | str
        Target shell. Strings are converted to :class:`Shell`.

    prog : str
        Program name the script completes.

    Returns
    -------
    str
        The completion script.

    Raises
    ------
    ValueError
        If ``shell`` is not a supported shell.
    """
    shell = Shell(shell)
    template = create_jinja_env().get_template(shell.template_name)
    return template.render(
        prog=prog,
        func=function_name(prog),
        options=OPTIONS,
        shells=[s.value for s in Shell],
    )
