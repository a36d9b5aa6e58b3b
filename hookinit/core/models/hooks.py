"""
Hook models — the shape of a .pre-commit-config.yaml document.

Field names match the keys pre-commit reads, so a model dumps straight
to YAML. Every model is frozen: templates are module-level constants
and must never change between invocations.
"""

from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict

HookStage = Literal[
    "commit",
    "merge-commit",
    "push",
    "prepare-commit-msg",
    "commit-msg",
    "post-checkout",
    "post-commit",
    "post-merge",
    "post-rewrite",
    "manual",
]

HOOK_STAGES: tuple[str, ...] = get_args(HookStage)


class Hook(BaseModel):
    """One command pre-commit runs at the given stages.

    Optional fields left as None are omitted from the rendered file
    so pre-commit applies its own defaults.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    entry: str                                  # shell command
    args: tuple[str, ...] | None = None
    language: str = "system"                    # execution environment tag
    always_run: bool | None = None
    verbose: bool | None = None
    pass_filenames: bool | None = None
    stages: tuple[HookStage, ...] | None = None
    types: tuple[str, ...] | None = None        # file-type filters
    files: str | None = None                    # path regex filter


class Repo(BaseModel):
    """A named group of hooks. Generated configs use a single ``local`` repo."""

    model_config = ConfigDict(frozen=True)

    repo: str
    rev: str | None = None
    hooks: tuple[Hook, ...] = ()


class HookConfig(BaseModel):
    """The whole document — what ends up in .pre-commit-config.yaml."""

    model_config = ConfigDict(frozen=True)

    repos: tuple[Repo, ...] = ()
    fail_fast: bool | None = None

    def all_hooks(self) -> list[Hook]:
        """Flatten hooks across every repo, in file order."""
        return [hook for repo in self.repos for hook in repo.hooks]

    def get_hook(self, hook_id: str) -> Hook | None:
        """Look up a hook by id."""
        for hook in self.all_hooks():
            if hook.id == hook_id:
                return hook
        return None
