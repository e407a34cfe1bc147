"""
pytest configuration and shared fixtures for git-ignore tests.

Fixtures defined here are automatically available to all tests.

Fixtures
--------
mirror_dir : Path
    A populated template mirror laid out like github/gitignore.

sample_index : dict[str, str]
    A small in-memory template index.
"""

import pytest
from pathlib import Path


NODE_TEMPLATE = "node_modules/\nnpm-debug.log*\n"
RUST_TEMPLATE = "/target/\nCargo.lock\n"
PYTHON_TEMPLATE = "__pycache__/\n*.py[cod]\n"
MACOS_TEMPLATE = ".DS_Store\n"
CPP_TEMPLATE = "*.o\n*.obj\n"


@pytest.fixture
def mirror_dir(tmp_path: Path) -> Path:
    """
    Create a template mirror on disk.

    Layout::

        gitignore/
        ├── .git/Hidden.gitignore        (pruned)
        ├── .github/Workflow.gitignore   (pruned)
        ├── Global/macOS.gitignore
        ├── community/C++.gitignore
        ├── nested/deep/.git/Deep.gitignore  (pruned)
        ├── Node.gitignore
        ├── Python.gitignore
        ├── Rust.gitignore
        ├── README.md
        └── .gitignore                   (no suffix, skipped)

    Returns
    -------
    Path
        The mirror root.
    """
    root = tmp_path / "gitignore"
    root.mkdir()

    (root / "Node.gitignore").write_text(NODE_TEMPLATE)
    (root / "Rust.gitignore").write_text(RUST_TEMPLATE)
    (root / "Python.gitignore").write_text(PYTHON_TEMPLATE)
    (root / "README.md").write_text("# A collection of .gitignore templates\n")
    (root / ".gitignore").write_text("*.swp\n")

    (root / "Global").mkdir()
    (root / "Global" / "macOS.gitignore").write_text(MACOS_TEMPLATE)

    (root / "community").mkdir()
    (root / "community" / "C++.gitignore").write_text(CPP_TEMPLATE)

    (root / ".git").mkdir()
    (root / ".git" / "Hidden.gitignore").write_text("hidden\n")

    (root / ".github").mkdir()
    (root / ".github" / "Workflow.gitignore").write_text("workflow\n")

    deep_git = root / "nested" / "deep" / ".git"
    deep_git.mkdir(parents=True)
    (deep_git / "Deep.gitignore").write_text("deep\n")

    return root


@pytest.fixture
def sample_index() -> dict[str, str]:
    """Provide a small template index."""
    return {
        "node": NODE_TEMPLATE,
        "rust": RUST_TEMPLATE,
        "python": PYTHON_TEMPLATE,
    }


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """
    Configure pytest with custom markers.

    This function is called by pytest during startup to register
    custom markers used in our test suite.
    """
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests requiring external resources"
    )
