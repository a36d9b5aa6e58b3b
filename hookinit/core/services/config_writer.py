"""
Config writer — the existence guard and the write to disk.

The guard is a plain check-then-write, not an atomic create. Two
invocations racing on the same project can both pass it; hookinit is
run by hand, one project at a time, so that is accepted.
"""

from __future__ import annotations

import logging
from pathlib import Path

from hookinit.core.errors import WriteError
from hookinit.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


def should_write(target: Path, force: bool) -> bool:
    """Return True unless ``target`` exists and ``force`` is off."""
    if force:
        return True
    return not target.exists()


def write_generated_file(project_root: Path, file: GeneratedFile) -> Path:
    """Write a GeneratedFile under the project root, replacing any old content.

    A failure part-way through leaves whatever was written; there is no
    cleanup.

    Returns:
        The absolute path written.

    Raises:
        WriteError: If the file can't be created or written.
    """
    target = project_root / file.path
    replacing = target.exists()

    try:
        with target.open("w", encoding="utf-8") as fh:
            fh.write(file.content)
    except OSError as e:
        raise WriteError(target, e.strerror or str(e)) from e

    logger.info("%s generated file: %s", "Replaced" if replacing else "Wrote", target)
    return target
