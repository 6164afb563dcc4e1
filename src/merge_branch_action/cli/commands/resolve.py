"""``merge-branch resolve``: show which reference a name resolves to."""

from __future__ import annotations

import json

import typer

from merge_branch_action.actions.kit import GitHubActionsKit
from merge_branch_action.cli.ui import configure_logging, console, err_console, reference_table
from merge_branch_action.errors import MergeBranchError
from merge_branch_action.merge.orchestrator import build_github_client, connect_client
from merge_branch_action.merge.resolver import ReferenceResolver


def resolve(
    name: str = typer.Argument(..., help="Branch, tag, commit sha or full ref path"),
    as_json: bool = typer.Option(False, "--json", help="Render the resolved reference as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
) -> None:
    """Resolve NAME against the references of $GITHUB_REPOSITORY."""
    configure_logging(verbose)
    kit = GitHubActionsKit()

    try:
        client, environment = connect_client(kit, build_github_client)
        try:
            repository = client.get_repository(environment.repository)
            reference = ReferenceResolver(repository).resolve_any(name)
        finally:
            client.close()
    except MergeBranchError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    if reference is None:
        err_console.print(f"[red]No branch, tag or commit matches[/red] '{name}'")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps({"ref": reference.ref, "sha": reference.sha}, indent=2, sort_keys=True))
        return
    console.print(reference_table(name, reference))
