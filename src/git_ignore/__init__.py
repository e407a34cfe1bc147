"""
git-ignore - Generate .gitignore Files from Templates
=====================================================

A CLI tool that builds ``.gitignore`` files by concatenating templates from a
local clone of https://github.com/github/gitignore.

Features
--------
- **Offline after first run**: templates are cloned once and read locally
- **Composable**: any number of templates, in the order you ask for them
- **All or nothing**: an unknown template name produces no output at all
- **git integration**: ``git ignore`` subcommand and shell completions

Quick Start
-----------
```bash
# Generate gitignore for nodejs and save it to .gitignore
git-ignore node > .gitignore

# Register as a git subcommand
sudo git-ignore --register
git ignore rust python >> .gitignore
```

Example
-------
>>> from git_ignore import Settings, StaticPathProvider, compose_gitignore, load_index
>>> settings = Settings.from_provider(StaticPathProvider("/path/to/gitignore"))
>>> print(compose_gitignore(load_index(settings), ["python"]))
### python ###
...

Architecture
------------
The package is organized into these main modules:

- ``cli``: Typer-based command line interface
- ``config``: Mirror path providers (git config, platform data dir)
- ``repository``: Mirror cloning and template indexing
- ``generator``: Composition of the final .gitignore text
- ``completions``: Jinja2-rendered shell completion scripts
- ``register``: git subcommand registration
- ``models``: Pydantic settings model and enums
- ``errors``: Exception hierarchy

License
-------
MIT License - see LICENSE file for details.
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================
# These are the main functions/classes users should interact with when using
# git-ignore as a library (as opposed to the CLI)

from git_ignore.config import (
    ConfigProvider,
    DataDirProvider,
    GitConfigProvider,
    StaticPathProvider,
)
from git_ignore.errors import (
    GitIgnoreError,
    InvalidMirrorError,
    RegistrationError,
    SyncError,
    TemplateNotFoundError,
    TemplateReadError,
)
from git_ignore.generator import compose_gitignore
from git_ignore.models import Settings
from git_ignore.repository import build_index, ensure_mirror, load_index


__all__ = [
    # Configuration
    "ConfigProvider",
    "DataDirProvider",
    "GitConfigProvider",
    # Errors
    "GitIgnoreError",
    "InvalidMirrorError",
    "RegistrationError",
    "Settings",
    "StaticPathProvider",
    "SyncError",
    "TemplateNotFoundError",
    "TemplateReadError",
    # Version info
    "__version__",
    # Pipeline
    "build_index",
    "compose_gitignore",
    "ensure_mirror",
    "load_index",
]
