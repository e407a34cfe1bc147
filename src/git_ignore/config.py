"""
git_ignore.config - Mirror Path Resolution
==========================================

The template pipeline only ever needs one piece of configuration: where the
local mirror lives. This module hides how that answer is found behind the
:class:`ConfigProvider` protocol so the pipeline can be driven with a fixed
path in tests and by library callers.

Resolution Order (CLI)
----------------------
1. ``git config --get ignore.path`` if it prints a non-empty value
2. ``<platform data dir>/gitignore``

Platform Data Directories
-------------------------
- Linux and other Unixes: ``$XDG_DATA_HOME`` or ``~/.local/share``
- macOS: ``~/Library/Application Support``
- Windows: ``%APPDATA%`` or ``~/AppData/Roaming``

Configure a custom location with:
    $ git config --global ignore.path <path>
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from git_ignore.models import CONFIG_KEY, MIRROR_DIRNAME


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


class ConfigProvider(Protocol):
    """Supplies the root directory of the template mirror."""

    def resolve_mirror_path(self) -> Path: ...


class StaticPathProvider:
    """Always resolves to the path it was created with."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def resolve_mirror_path(self) -> Path:
        return self.path


class DataDirProvider:
    """
    Resolve the mirror to ``<platform data dir>/gitignore``.

    Parameters
    ----------
    environ : Mapping[str, str] | None
        Environment to read ``XDG_DATA_HOME``/``APPDATA`` from.
        Defaults to ``os.environ``.

    platform : str | None
        Value to use instead of ``sys.platform``.

    home : Path | None
        Home directory used for the fallbacks. Defaults to ``Path.home()``.
    """

    def __init__(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
        home: Path | None = None,
    ) -> None:
        self.environ = os.environ if environ is None else environ
        self.platform = sys.platform if platform is None else platform
        self.home = home

    def data_dir(self) -> Path:
        """Return the per-user data directory for the current platform."""
        home = self.home if self.home is not None else Path.home()

        if self.platform == "win32":
            appdata = self.environ.get("APPDATA")
            if appdata:
                return Path(appdata)
            return home / "AppData" / "Roaming"

        if self.platform == "darwin":
            return home / "Library" / "Application Support"

        # XDG requires an absolute path; relative values are ignored
        xdg_data_home = self.environ.get("XDG_DATA_HOME")
        if xdg_data_home and Path(xdg_data_home).is_absolute():
            return Path(xdg_data_home)
        return home / ".local" / "share"

    def resolve_mirror_path(self) -> Path:
        return self.data_dir() / MIRROR_DIRNAME


class GitConfigProvider:
    """
    Resolve the mirror from ``git config``, falling back to another provider.

    Parameters
    ----------
    fallback : ConfigProvider | None
        Used when the key is unset or git is unavailable.
        Defaults to :class:`DataDirProvider`.

    key : str
        The git config key to read (default ``ignore.path``).

    runner : Callable
        ``subprocess.run`` compatible callable, injectable for tests.
    """

    def __init__(
        self,
        fallback: ConfigProvider | None = None,
        *,
        key: str = CONFIG_KEY,
        runner: Callable[..., subprocess.CompletedProcess[str]] = subprocess.run,
    ) -> None:
        self.fallback = fallback if fallback is not None else DataDirProvider()
        self.key = key
        self.runner = runner

    def lookup(self) -> str | None:
        """
        Read the configured value.

        Returns
        -------
        str | None
            The stripped value, or None when unset or git is not installed.
        """
        try:
            result = self.runner(
                ["git", "config", "--get", self.key],
                check=False,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            return None  # Git not installed

        # git exits with 1 when the key is unset
        if result.returncode != 0:
            return None

        value = result.stdout.strip()
        return value or None

    def resolve_mirror_path(self) -> Path:
        value = self.lookup()
        if value is None:
            return self.fallback.resolve_mirror_path()
        return Path(value).expanduser()
