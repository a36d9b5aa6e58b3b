"""
Domain models — Pydantic types for hookinit.

All models are re-exported here for convenient access:

    from hookinit.core.models import Hook, HookConfig, GeneratedFile
"""

from hookinit.core.models.hooks import HOOK_STAGES, Hook, HookConfig, HookStage, Repo
from hookinit.core.models.template import GeneratedFile

__all__ = [
    # template.py
    "GeneratedFile",
    # hooks.py
    "HOOK_STAGES",
    "Hook",
    "HookConfig",
    "HookStage",
    "Repo",
]
