"""
git_ignore.errors - Exception Taxonomy
======================================

Every failure the template pipeline can produce derives from
:class:`GitIgnoreError`. Library functions raise these; only the CLI turns
them into messages and exit codes.

Hierarchy
---------
    GitIgnoreError
    ├── SyncError              - mirror could not be created or cloned
    ├── InvalidMirrorError     - mirror path is not a directory
    ├── TemplateReadError      - a template file could not be read
    ├── TemplateNotFoundError  - a requested name is not in the index
    └── RegistrationError      - git subcommand registration failed
"""

from __future__ import annotations

from pathlib import Path


class GitIgnoreError(Exception):
    """Base class for all git-ignore errors."""


class SyncError(GitIgnoreError):
    """
    The local mirror could not be created or cloned.

    Attributes
    ----------
    command : str
        The command (or operation) that was attempted.
    path : Path
        The mirror directory that was being populated.
    """

    def __init__(self, message: str, *, command: str, path: Path) -> None:
        super().__init__(f"{message}\nExecuted command: `{command}`")
        self.command = command
        self.path = path


class InvalidMirrorError(GitIgnoreError):
    """The mirror path exists but is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"gitignore repository path {path} is not a directory.\n"
            "Remove it or point `git config ignore.path` somewhere else."
        )
        self.path = path


class TemplateReadError(GitIgnoreError):
    """A qualifying template file could not be read while indexing."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read template {path}: {reason}")
        self.path = path
        self.reason = reason


class TemplateNotFoundError(GitIgnoreError):
    """A requested template name has no entry in the index."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is not found in gitignore repository.")
        self.name = name


class RegistrationError(GitIgnoreError):
    """Registering ``git-ignore`` as a git subcommand failed."""
