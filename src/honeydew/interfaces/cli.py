"""CLI: Typer app wired to execute_run."""

from __future__ import annotations

import logging
import sys

import typer
from rich import print as rprint

from honeydew.application import execute_run
from honeydew.application.fetch_config import fetch_record
from honeydew.config import PUSH_REFSPEC, PUSH_REMOTE, REPO_DIR_ENV, load_settings
from honeydew.domain import HoneydewError
from honeydew.infrastructure.consul import ConsulKVClient
from honeydew.infrastructure.git import SubprocessGitRunner, find_git
from honeydew.infrastructure.workspace import locate_repository

app = typer.Typer(help="honeydew: make N commits (N read from Consul) and push them.")

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command()
def run(
    verbose: bool = typer.Option(
        True, "--verbose/--quiet", help="Log the fetched record, git commands and git commit output."
    ),
    force_push: bool = typer.Option(
        True, "--force-push/--no-force-push", help="Push a second time when the first push fails."
    ),
) -> None:
    """Fetch the commit count, commit that many times, and push master to origin main."""
    _setup_logging(verbose)
    settings = load_settings()
    kv = ConsulKVClient(settings.consul)
    if verbose:
        rprint(f"[dim]Using Consul at {kv.base_url}, key {settings.config_key}[/dim]")
    try:
        run_config = execute_run(
            kv,
            SubprocessGitRunner(),
            settings=settings,
            verbose=verbose,
            force_push_allowed=force_push,
        )
    except HoneydewError as e:
        logger.error("%s", e)
        sys.exit(1)
    logger.info(
        "run finished: %d commit(s), pushed %s to %s",
        run_config.commit_count, PUSH_REFSPEC, PUSH_REMOTE,
    )


@app.command()
def check(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging to stderr."),
) -> None:
    """Check the Consul key, repository path, HOME and git without changing anything."""
    from rich.console import Console
    from rich.table import Table

    _setup_logging(verbose)
    console = Console()
    settings = load_settings()
    kv = ConsulKVClient(settings.consul)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Detail", overflow="fold")
    failed = False

    try:
        record = fetch_record(kv, settings.config_key)
        table.add_row(f"consul {settings.config_key}", "[green]✓ ok[/green]", f"num={record.num} at {kv.base_url}")
    except HoneydewError as e:
        failed = True
        table.add_row(f"consul {settings.config_key}", "[red]✗ failed[/red]", str(e))

    try:
        location = locate_repository(settings.repo_dir, chdir=False)
        table.add_row(REPO_DIR_ENV, "[green]✓ ok[/green]", str(location.path))
    except HoneydewError as e:
        failed = True
        table.add_row(REPO_DIR_ENV, "[red]✗ failed[/red]", str(e))

    if settings.home:
        table.add_row("HOME", "[green]✓ ok[/green]", settings.home)
    else:
        failed = True
        table.add_row("HOME", "[red]✗ failed[/red]", "env HOME is not defined")

    git_path = find_git()
    if git_path:
        table.add_row("git", "[green]✓ ok[/green]", git_path)
    else:
        failed = True
        table.add_row("git", "[red]✗ failed[/red]", "git executable not found on PATH")

    console.print(table)
    if failed:
        sys.exit(1)
