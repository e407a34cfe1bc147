"""
git_ignore.models - Settings and Enumerations
=============================================

This module defines the data models shared by the template pipeline. We use
Pydantic so that paths and suffixes coming from user configuration are
validated once, up front, instead of failing halfway through a directory walk.

Architecture Notes
------------------
    Settings
    ├── mirror_path: Path         (where the template collection lives)
    ├── remote_url: str           (what gets cloned on first use)
    ├── template_suffix: str      (which files count as templates)
    └── excluded_names: frozenset (directories never traversed)

Usage Example
-------------
>>> from git_ignore.config import StaticPathProvider
>>> settings = Settings.from_provider(StaticPathProvider("/tmp/gitignore"))
>>> settings.mirror_path
PosixPath('/tmp/gitignore')
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator


if TYPE_CHECKING:
    from git_ignore.config import ConfigProvider


# =============================================================================
# Constants
# =============================================================================

DEFAULT_REMOTE_URL = "https://github.com/github/gitignore.git"

# Directory name of the mirror under the platform data directory
MIRROR_DIRNAME = "gitignore"

# git config key that overrides the mirror location
CONFIG_KEY = "ignore.path"

TEMPLATE_SUFFIX = ".gitignore"

# VCS internals and hosting platform configuration
EXCLUDED_NAMES: frozenset[str] = frozenset({".git", ".github"})


# =============================================================================
# Enumerations
# =============================================================================

class Shell(str, Enum):
    """
    Shells we can generate completion scripts for.

    The value doubles as the template name under ``git_ignore/templates``.
    """

    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"

    @property
    def template_name(self) -> str:
        return f"{self.value}.j2"


# =============================================================================
# Settings
# =============================================================================

class Settings(BaseModel):
    """
    Resolved configuration for one invocation of the pipeline.

    Attributes
    ----------
    mirror_path : Path
        Root of the local template mirror. ``~`` is expanded.

    remote_url : str
        Repository cloned into ``mirror_path`` when it does not exist yet.

    template_suffix : str
        File extension (with the leading dot) identifying template files.

    excluded_names : frozenset[str]
        Entry names pruned from the traversal along with their subtrees.
    """

    mirror_path: Path = Field(description="Root of the local template mirror")
    remote_url: str = Field(
        default=DEFAULT_REMOTE_URL,
        description="Template collection cloned on first use",
        min_length=1,
    )
    template_suffix: str = Field(
        default=TEMPLATE_SUFFIX,
        description="Extension of template files",
    )
    excluded_names: frozenset[str] = Field(
        default=EXCLUDED_NAMES,
        description="Directory names never traversed",
    )

    @field_validator("mirror_path", mode="before")
    @classmethod
    def reject_empty_mirror_path(cls, v: object) -> object:
        """
        Reject empty values.

        Runs before coercion because ``Path("")`` becomes ``Path(".")``,
        which is a valid relative mirror location.
        """
        if isinstance(v, str) and not v.strip():
            msg = "Mirror path must not be empty."
            raise ValueError(msg)
        return v

    @field_validator("mirror_path")
    @classmethod
    def validate_mirror_path(cls, v: Path) -> Path:
        """Expand ``~``."""
        return v.expanduser()

    @field_validator("template_suffix")
    @classmethod
    def validate_template_suffix(cls, v: str) -> str:
        """
        A suffix must look like ``.ext``.

        Path separators are rejected because the suffix is compared against
        a single path component.
        """
        if len(v) < 2 or not v.startswith("."):
            msg = f"Invalid template suffix '{v}'. Suffixes must look like '.ext'."
            raise ValueError(msg)
        if "/" in v or "\\" in v:
            msg = f"Template suffix '{v}' must not contain a path separator."
            raise ValueError(msg)
        return v

    @classmethod
    def from_provider(cls, provider: ConfigProvider) -> Settings:
        """
        Build settings from a configuration provider.

        Parameters
        ----------
        provider : ConfigProvider
            Anything exposing ``resolve_mirror_path()``.

        Returns
        -------
        Settings
            Settings with the resolved mirror path and default everything else.
        """
        return cls(mirror_path=provider.resolve_mirror_path())
