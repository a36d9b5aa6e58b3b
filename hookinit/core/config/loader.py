"""
Configuration loader — locate the project root and read configs back.

The project root is the nearest ancestor of the working directory that
holds a ``.git`` marker. Commands can be run from any subdirectory and
still land the config next to the repository's top level.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from hookinit.core.errors import ConfigError, RepositoryNotFoundError
from hookinit.core.models.hooks import HookConfig

logger = logging.getLogger(__name__)

# Default config filename, relative to the project root
CONFIG_FILENAME = ".pre-commit-config.yaml"

# Marks a git working tree (a directory, or a file for worktrees/submodules)
VCS_MARKER = ".git"

# Upper bound on parent steps; a resolved path reaches "/" long before this
MAX_WALK_DEPTH = 256


def find_project_root(
    start_dir: Path | None = None,
    marker: str = VCS_MARKER,
) -> Path:
    """Walk up from the given directory to the first one containing ``marker``.

    Each step resolves the path, so ``..`` components and symlinks can't
    stall the walk. The filesystem root itself is checked too.

    Args:
        start_dir: Directory to start searching from (default: cwd).
        marker: Entry name that identifies the project root.

    Returns:
        The project root directory.

    Raises:
        RepositoryNotFoundError: If the cwd is unavailable or no ancestor
            holds the marker.
    """
    if start_dir is None:
        try:
            start_dir = Path.cwd()
        except OSError as e:
            raise RepositoryNotFoundError(
                f"Cannot determine current working directory: {e}"
            ) from e

    try:
        current = start_dir.resolve()
    except OSError as e:
        raise RepositoryNotFoundError(f"Cannot resolve {start_dir}: {e}") from e

    logger.debug("Searching for %s upward from %s", marker, current)

    for _ in range(MAX_WALK_DEPTH):
        if (current / marker).exists():
            logger.debug("Project root: %s", current)
            return current
        parent = current.parent.resolve()
        if parent == current:
            break  # filesystem root
        current = parent

    raise RepositoryNotFoundError(
        f"Could not find a {marker} directory from {start_dir} up to the filesystem root"
    )


def config_path(project_root: Path) -> Path:
    """Get the config file location for a project root."""
    return project_root / CONFIG_FILENAME


def load_config(path: Path) -> HookConfig:
    """Parse an existing .pre-commit-config.yaml into a HookConfig.

    Raises:
        ConfigError: If the file is missing, unreadable, or doesn't match
            the hook schema.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading hook config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = HookConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid hook configuration: {e}") from e

    logger.info("Loaded %d hook(s) from %s", len(config.all_hooks()), path)
    return config
