"""Console and logging helpers shared by the CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from merge_branch_action.merge.models import RepositoryReference

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Send package debug logs to stderr when ``--verbose`` is given."""
    if not verbose:
        return
    package_logger = logging.getLogger("merge_branch_action")
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=err_console, show_path=False))
    package_logger.setLevel(logging.DEBUG)


def reference_table(name: str, reference: RepositoryReference) -> Table:
    table = Table(title=f"Resolved '{name}'", show_header=True, header_style="bold cyan")
    table.add_column("Ref")
    table.add_column("SHA")
    table.add_row(reference.ref, reference.sha)
    return table
