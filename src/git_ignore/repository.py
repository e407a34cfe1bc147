"""
git_ignore.repository - Template Mirror and Index
=================================================

This module owns the local copy of the template collection. It makes sure
the mirror exists (cloning it on first use) and turns the files inside it
into an in-memory index that the generator composes from.

Pipeline
--------
    ensure_mirror(path)      clone once, never update
          │
    build_index(path)        walk, prune, read
          │
    dict[str, str]           template key -> raw template body

Index Rules
-----------
- Entries named ``.git`` or ``.github`` are pruned with their whole subtree.
- Only regular files ending in ``.gitignore`` are read. Symlinks are not
  followed.
- Keys are the lowercased file stem: ``C++.gitignore`` -> ``c++``.
- Entries are visited in sorted order, depth first. When two files share a
  key, the one visited last wins.
- Bodies are stored exactly as on disk, line endings included.

Usage Example
-------------
>>> from pathlib import Path
>>> index = build_index(Path("~/.local/share/gitignore").expanduser())
>>> index["python"].splitlines()[0]
'# Byte-compiled / optimized / DLL files'
"""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from git_ignore.errors import InvalidMirrorError, SyncError, TemplateReadError
from git_ignore.models import DEFAULT_REMOTE_URL, EXCLUDED_NAMES, TEMPLATE_SUFFIX


if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

    from git_ignore.models import Settings


# Template key -> template body
TemplateIndex = dict[str, str]


# =============================================================================
# Mirror Synchronization
# =============================================================================


def clone_command(remote_url: str, path: Path) -> list[str]:
    """Build the ``git clone`` argument list for the mirror."""
    return ["git", "clone", remote_url, str(path)]


def ensure_mirror(
    path: Path,
    remote_url: str = DEFAULT_REMOTE_URL,
    *,
    console: Console | None = None,
) -> bool:
    """
    Make sure the template mirror exists at ``path``.

    If anything already exists at ``path`` this is a no-op: the contents are
    not inspected and the mirror is never updated. Otherwise the directory is
    created and the remote collection is cloned into it.

    Parameters
    ----------
    path : Path
        Mirror root directory.

    remote_url : str
        Repository to clone when the mirror is missing.

    console : Console | None
        If given, clone progress is shown on this console.

    Returns
    -------
    bool
        True if a clone was performed, False if the mirror already existed.

    Raises
    ------
    SyncError
        If the directory cannot be created or the clone fails. The directory
        created by this call is removed again before raising.
    """
    # is_symlink() catches dangling links that exists() reports as missing
    if path.exists() or path.is_symlink():
        return False

    command = clone_command(remote_url, path)
    display = shlex.join(command)

    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise SyncError(
            f"Failed to create gitignore repository directory {path}: {e}",
            command=display,
            path=path,
        ) from e

    try:
        if console is not None:
            status = f"Cloning {escape(remote_url)} into {escape(str(path))}..."
            with console.status(status):
                _run_clone(command)
        else:
            _run_clone(command)

    except BaseException as e:
        # An empty or partial directory would be mistaken for a mirror on
        # the next run, so it goes whatever ended the clone (Ctrl-C included)
        shutil.rmtree(path, ignore_errors=True)

        if not isinstance(e, (subprocess.CalledProcessError, FileNotFoundError)):
            raise

        detail = ""
        if isinstance(e, subprocess.CalledProcessError) and e.stderr:
            detail = f"\n{e.stderr.strip()}"
        elif isinstance(e, FileNotFoundError):
            detail = "\ngit is not installed or not on PATH."

        raise SyncError(
            f"Failed to clone gitignore repository.{detail}",
            command=display,
            path=path,
        ) from e

    if console is not None:
        console.print(f"[green]✓[/] Cloned gitignore repository into {escape(str(path))}")

    return True


def _run_clone(command: list[str]) -> None:
    subprocess.run(
        command,
        capture_output=True,
        check=True,
        text=True,
    )


# =============================================================================
# Index Building
# =============================================================================


def template_key(path: Path) -> str:
    """
    Derive the index key for a template file.

    Examples
    --------
    >>> template_key(Path("Python.gitignore"))
    'python'
    >>> template_key(Path("Global/C++.gitignore"))
    'c++'
    """
    return path.stem.lower()


def iter_template_files(
    root: Path,
    *,
    suffix: str = TEMPLATE_SUFFIX,
    excluded_names: frozenset[str] = EXCLUDED_NAMES,
) -> Iterator[Path]:
    """
    Yield template files below ``root`` in depth-first, sorted order.

    Entries named in ``excluded_names`` are skipped without descending into
    them. Directories are entered as soon as they are reached, so a
    directory's contents come before its later siblings.

    Parameters
    ----------
    root : Path
        Directory to walk.

    suffix : str
        Only regular files with exactly this suffix are yielded.

    excluded_names : frozenset[str]
        Names pruned from the walk.

    Yields
    ------
    Path
        Path of each qualifying file.
    """
    with os.scandir(root) as it:
        entries = sorted(it, key=lambda e: e.name)

    for entry in entries:
        if entry.name in excluded_names:
            continue

        if entry.is_dir(follow_symlinks=False):
            yield from iter_template_files(
                Path(entry.path),
                suffix=suffix,
                excluded_names=excluded_names,
            )
        elif entry.is_file(follow_symlinks=False):
            path = Path(entry.path)
            if path.suffix == suffix:
                yield path


def read_template(path: Path) -> str:
    """
    Read a template body verbatim.

    ``newline=""`` disables universal newline translation so ``\\r\\n``
    line endings survive.

    Raises
    ------
    TemplateReadError
        If the file cannot be opened or is not valid UTF-8.
    """
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise TemplateReadError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise TemplateReadError(path, e.strerror or str(e)) from e


def build_index(
    path: Path,
    *,
    remote_url: str = DEFAULT_REMOTE_URL,
    suffix: str = TEMPLATE_SUFFIX,
    excluded_names: frozenset[str] = EXCLUDED_NAMES,
    console: Console | None = None,
) -> TemplateIndex:
    """
    Build the template index for the mirror at ``path``.

    The mirror is cloned first if it does not exist yet.

    Parameters
    ----------
    path : Path
        Mirror root directory.

    remote_url : str
        Repository to clone when the mirror is missing.

    suffix : str
        Extension identifying template files.

    excluded_names : frozenset[str]
        Entry names pruned from the traversal.

    console : Console | None
        Forwarded to :func:`ensure_mirror` for clone progress.

    Returns
    -------
    TemplateIndex
        Mapping of lowercased file stem to raw file contents.

    Raises
    ------
    SyncError
        If the mirror could not be created.
    InvalidMirrorError
        If ``path`` exists but is not a directory.
    TemplateReadError
        If any template file could not be read.
    """
    ensure_mirror(path, remote_url, console=console)

    if not path.is_dir():
        raise InvalidMirrorError(path)

    index: TemplateIndex = {}

    try:
        for template_path in iter_template_files(
            path, suffix=suffix, excluded_names=excluded_names
        ):
            index[template_key(template_path)] = read_template(template_path)
    except OSError as e:
        # Unreadable directory during the walk
        failed = Path(e.filename) if e.filename else path
        raise TemplateReadError(failed, e.strerror or str(e)) from e

    return index


def load_index(settings: Settings, *, console: Console | None = None) -> TemplateIndex:
    """Build the index described by ``settings``."""
    return build_index(
        settings.mirror_path,
        remote_url=settings.remote_url,
        suffix=settings.template_suffix,
        excluded_names=settings.excluded_names,
        console=console,
    )
