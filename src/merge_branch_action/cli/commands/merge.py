"""``merge-branch run``: the action entry point."""

from __future__ import annotations

from typing import Optional

import typer

from merge_branch_action.actions.kit import GitHubActionsKit
from merge_branch_action.cli.ui import configure_logging
from merge_branch_action.config import FROM_INPUT, MESSAGE_INPUT, TO_INPUT
from merge_branch_action.errors import ActionFailedError
from merge_branch_action.merge.orchestrator import MergeBranchAction, build_github_client


def run(
    from_ref: Optional[str] = typer.Option(
        None, "--from", help="Branch, tag or commit to merge (default: $INPUT_FROM, then $GITHUB_SHA)"
    ),
    to_branch: Optional[str] = typer.Option(None, "--to", help="Target branch (default: $INPUT_TO)"),
    message: Optional[str] = typer.Option(None, "--message", help="Merge commit message (default: $INPUT_MESSAGE)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
) -> None:
    """Merge a branch, tag or commit into the target branch and publish the resulting sha."""
    configure_logging(verbose)
    kit = GitHubActionsKit(inputs={FROM_INPUT: from_ref, TO_INPUT: to_branch, MESSAGE_INPUT: message})

    try:
        MergeBranchAction(kit, client_factory=build_github_client).execute()
    except ActionFailedError as exc:
        kit.error(str(exc))
        raise typer.Exit(1) from exc
