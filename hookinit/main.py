"""
hookinit — CLI entrypoint.

Usage:
    hookinit --lang python
    hookinit --lang rust -f
    hookinit --lang go --dry-run
    python -m hookinit.main --help
"""

from __future__ import annotations

import os
import sys

import click

from hookinit import __version__
from hookinit.core.errors import HookInitError
from hookinit.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)
from hookinit.core.services.templates import supported_languages


def _list_languages(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Eager callback: print supported languages and stop."""
    if not value or ctx.resilient_parsing:
        return
    for name in supported_languages():
        click.echo(name)
    ctx.exit(0)


@click.command()
@click.version_option(version=__version__, prog_name="hookinit")
@click.option(
    "--lang",
    "--language",
    "-l",
    "language",
    required=True,
    metavar="NAME",
    help=f"Language template to use ({', '.join(supported_languages())}).",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file.")
@click.option("--dry-run", is_flag=True, help="Print the config instead of writing it.")
@click.option(
    "--list-languages",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_list_languages,
    help="List supported languages and exit.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
def cli(
    language: str,
    force: bool,
    dry_run: bool,
    verbose: bool,
    quiet: bool,
    debug: bool,
) -> None:
    """Write a .pre-commit-config.yaml at the root of the current git project."""
    setup_logging(
        level=resolve_level(verbose=verbose, quiet=quiet, debug=debug),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )

    from hookinit.core.use_cases.init import run_init

    try:
        result = run_init(language, force=force, dry_run=dry_run)
    except HookInitError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if result.skipped:
        click.secho(
            f"ℹ️  {result.target} already exists, leaving it unchanged (use -f to overwrite)",
            fg="cyan",
            err=True,
        )
        return

    generated = result.file
    assert generated is not None  # set whenever the run wasn't skipped

    if result.dry_run:
        click.secho(f"📄 Preview: {result.target}", fg="cyan", bold=True, err=True)
        if generated.reason:
            click.echo(f"   Reason: {generated.reason}", err=True)
        click.echo(generated.content, nl=False)
        return

    if quiet:
        return

    click.secho(f"✅ Written: {result.target}", fg="green", bold=True)
    click.echo(f"   Hooks: {', '.join(result.hook_ids)}")


if __name__ == "__main__":
    cli()
