"""Typer application for the merge branch action."""

from __future__ import annotations

import typer

from merge_branch_action.cli.commands import register_commands

app = typer.Typer(
    name="merge-branch",
    help="Merge a branch, tag or commit into a target branch through the GitHub API",
    add_completion=False,
    no_args_is_help=True,
)
register_commands(app)


def main() -> None:
    app()


__all__ = ["app", "main"]
