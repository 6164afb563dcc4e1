"""CLI command modules for merge-branch."""

from __future__ import annotations

import typer

from merge_branch_action.cli.commands.merge import run
from merge_branch_action.cli.commands.resolve import resolve


def register_commands(app: typer.Typer) -> None:
    app.command("run")(run)
    app.command("resolve")(resolve)


__all__ = ["register_commands"]
