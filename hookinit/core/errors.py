"""
Error types raised by the core.

Core modules raise; only the CLI entry point turns these into a
diagnostic and an exit status.
"""

from __future__ import annotations

from pathlib import Path


class HookInitError(Exception):
    """Base class for every failure that should abort an invocation."""


class RepositoryNotFoundError(HookInitError):
    """No git project root could be resolved from the working directory."""


class UnsupportedLanguageError(HookInitError):
    """The requested language has no template."""

    def __init__(self, language: str, supported: list[str]) -> None:
        self.language = language
        self.supported = supported
        super().__init__(
            f"Unsupported language '{language}'. "
            f"Supported: {', '.join(supported)}"
        )


class RenderError(HookInitError):
    """The config could not be serialized to YAML."""


class WriteError(HookInitError):
    """The config file could not be created or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot write {path}: {reason}")


class ConfigError(HookInitError):
    """An existing config file is unreadable or malformed."""
