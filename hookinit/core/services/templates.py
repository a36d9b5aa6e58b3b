"""
Hook templates — the built-in pre-commit configs, one per language.

Each template runs the ecosystem's test suite on commit and push, and
its linters/formatters on commit only. All hooks use the ``system``
language: pre-commit calls the tools already installed in the project's
environment rather than building its own.
"""

from __future__ import annotations

from hookinit.core.errors import UnsupportedLanguageError
from hookinit.core.models.hooks import Hook, HookConfig, Repo


# ── Python ──────────────────────────────────────────────────────


_PYTHON_CONFIG = HookConfig(
    repos=(
        Repo(
            repo="local",
            hooks=(
                Hook(
                    id="pytest",
                    name="pytest",
                    entry="pytest -n auto --quiet",
                    always_run=True,
                    verbose=True,
                    pass_filenames=False,
                    stages=("commit", "push"),
                ),
                Hook(
                    id="ruff",
                    name="ruff check",
                    entry="ruff check --fix",
                    types=("python",),
                    stages=("commit",),
                ),
                Hook(
                    id="ruff-format",
                    name="ruff format",
                    entry="ruff format",
                    types=("python",),
                    stages=("commit",),
                ),
                Hook(
                    id="mypy",
                    name="mypy",
                    entry="mypy .",
                    pass_filenames=False,
                    types=("python",),
                    stages=("commit",),
                ),
            ),
        ),
    ),
)


# ── Rust ────────────────────────────────────────────────────────


_RUST_CONFIG = HookConfig(
    repos=(
        Repo(
            repo="local",
            hooks=(
                Hook(
                    id="cargo-test",
                    name="cargo test",
                    entry="cargo test",
                    always_run=True,
                    verbose=True,
                    pass_filenames=False,
                    stages=("commit", "push"),
                ),
                Hook(
                    id="cargo-fmt",
                    name="cargo fmt",
                    entry="cargo fmt --all -- --check",
                    pass_filenames=False,
                    types=("rust",),
                    stages=("commit",),
                ),
                Hook(
                    id="cargo-clippy",
                    name="cargo clippy",
                    entry="cargo clippy --all-targets -- -D warnings",
                    pass_filenames=False,
                    types=("rust",),
                    stages=("commit",),
                ),
            ),
        ),
    ),
)


# ── Go ──────────────────────────────────────────────────────────


_GO_CONFIG = HookConfig(
    repos=(
        Repo(
            repo="local",
            hooks=(
                Hook(
                    id="go-test",
                    name="go test",
                    entry="go test ./...",
                    always_run=True,
                    verbose=True,
                    pass_filenames=False,
                    stages=("commit", "push"),
                ),
                Hook(
                    id="go-vet",
                    name="go vet",
                    entry="go vet ./...",
                    pass_filenames=False,
                    types=("go",),
                    stages=("commit",),
                ),
                Hook(
                    id="gofmt",
                    name="gofmt",
                    entry="gofmt -l -w",
                    types=("go",),
                    files=r"\.go$",
                    stages=("commit",),
                ),
            ),
        ),
    ),
)


# ── Registry ────────────────────────────────────────────────────


_LANGUAGE_TEMPLATES: dict[str, HookConfig] = {
    "python": _PYTHON_CONFIG,
    "rust": _RUST_CONFIG,
    "go": _GO_CONFIG,
}


def supported_languages() -> list[str]:
    """Return language names with a template available."""
    return sorted(_LANGUAGE_TEMPLATES.keys())


def get_template(language: str) -> HookConfig:
    """Look up the template for a language (case-insensitive).

    Raises:
        UnsupportedLanguageError: If no template matches.
    """
    key = language.strip().lower()
    try:
        return _LANGUAGE_TEMPLATES[key]
    except KeyError:
        raise UnsupportedLanguageError(language, supported_languages()) from None
