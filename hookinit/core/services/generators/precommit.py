"""
pre-commit config generator — render a language template to YAML.

Output keys follow model field order (``sort_keys=False``) so the file
reads top-down the way pre-commit's documentation lays it out.
"""

from __future__ import annotations

import logging

import yaml

from hookinit.core.config.loader import CONFIG_FILENAME
from hookinit.core.errors import RenderError
from hookinit.core.models.hooks import HookConfig
from hookinit.core.models.template import GeneratedFile
from hookinit.core.services.templates import get_template

logger = logging.getLogger(__name__)


def render_config(config: HookConfig) -> str:
    """Serialize a HookConfig to YAML text.

    Unset optional fields are dropped rather than written as ``null``.

    Raises:
        RenderError: If PyYAML can't represent the document.
    """
    data = config.model_dump(mode="json", exclude_none=True)
    try:
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    except yaml.YAMLError as e:
        raise RenderError(f"Cannot render hook config: {e}") from e


def generate_precommit_config(language: str, *, overwrite: bool = False) -> GeneratedFile:
    """Build the .pre-commit-config.yaml for a language.

    Args:
        language: Template name, any casing.
        overwrite: Carried on the GeneratedFile for the writer.

    Raises:
        UnsupportedLanguageError: If no template matches.
        RenderError: If serialization fails.
    """
    config = get_template(language)
    content = render_config(config)
    hook_ids = [hook.id for hook in config.all_hooks()]
    logger.debug("Rendered %s template with hooks: %s", language, ", ".join(hook_ids))

    return GeneratedFile(
        path=CONFIG_FILENAME,
        content=content,
        overwrite=overwrite,
        reason=f"pre-commit hooks for {language.strip().lower()}: {', '.join(hook_ids)}",
    )
