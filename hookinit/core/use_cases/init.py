"""
Init use case — generate and write a project's .pre-commit-config.yaml.

Linear pipeline: find root → render → guard → write. Failures raise
HookInitError subclasses; an existing file without ``force`` is not a
failure and comes back as a skipped result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from hookinit.core.config.loader import config_path, find_project_root
from hookinit.core.models.template import GeneratedFile
from hookinit.core.services.config_writer import should_write, write_generated_file
from hookinit.core.services.generators.precommit import generate_precommit_config
from hookinit.core.services.templates import get_template

logger = logging.getLogger(__name__)


@dataclass
class InitResult:
    """Outcome of an init run."""

    project_root: Path
    target: Path
    written: bool = False
    skipped: bool = False
    dry_run: bool = False
    file: GeneratedFile | None = None
    hook_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "project_root": str(self.project_root),
            "target": str(self.target),
            "written": self.written,
            "skipped": self.skipped,
            "dry_run": self.dry_run,
            "hook_ids": self.hook_ids,
        }


def run_init(
    language: str,
    *,
    force: bool = False,
    dry_run: bool = False,
    start_dir: Path | None = None,
) -> InitResult:
    """Generate the config for ``language`` at the enclosing project root.

    Args:
        language: Template name, any casing.
        force: Replace an existing config file.
        dry_run: Render only; never touch the filesystem.
        start_dir: Where to start looking for the project root (default: cwd).

    Returns:
        InitResult describing what happened.

    Raises:
        RepositoryNotFoundError: No project root above ``start_dir``.
        UnsupportedLanguageError: No template for ``language``.
        RenderError: YAML serialization failed.
        WriteError: The file couldn't be written.
    """
    project_root = find_project_root(start_dir)
    target = config_path(project_root)
    result = InitResult(project_root=project_root, target=target, dry_run=dry_run)

    # Unknown languages fail even when a config is already present.
    generated = generate_precommit_config(language, overwrite=force)
    result.file = generated
    result.hook_ids = [hook.id for hook in get_template(language).all_hooks()]

    if dry_run:
        return result

    if not should_write(target, generated.overwrite):
        logger.info("%s exists and force is off, leaving it alone", target)
        result.skipped = True
        return result

    write_generated_file(project_root, generated)
    result.written = True
    return result
