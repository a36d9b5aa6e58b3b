"""
Shared test fixtures and configuration.
"""

import functools
import logging
from pathlib import Path

import pytest


@pytest.fixture
def git_project(tmp_path: Path) -> Path:
    """Return a temporary project root marked with a .git directory."""
    root = tmp_path / "project"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def nested_dir(git_project: Path) -> Path:
    """Return a directory three levels below the project root."""
    subdir = git_project / "src" / "pkg" / "module"
    subdir.mkdir(parents=True)
    return subdir


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo setup_logging() changes made by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def no_repository(monkeypatch) -> None:
    """Make the init pipeline look for a marker no ancestor of tmp_path has."""
    from hookinit.core.config import loader

    monkeypatch.setattr(
        "hookinit.core.use_cases.init.find_project_root",
        functools.partial(loader.find_project_root, marker=".hookinit-test-marker-absent"),
    )
