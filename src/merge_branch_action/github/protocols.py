"""Narrow capability interface over the repository hosting API.

The orchestrator and the resolver only talk to these protocols, so tests can
substitute in-memory implementations for the HTTP client.
"""

from __future__ import annotations

from typing import Protocol

from merge_branch_action.merge.models import Branch, Commit, RepositoryReference


class Repository(Protocol):
    """One remote repository."""

    full_name: str

    def list_references(self) -> list[RepositoryReference]:
        """Return every reference currently known to the repository."""
        ...

    def get_branch(self, name: str) -> Branch | None:
        """Return the branch called ``name``, or None when it does not exist."""
        ...

    def merge(self, target_branch: str, source_ref: str, message: str | None = None) -> Commit | None:
        """Merge ``source_ref`` into ``target_branch``.

        Returns the new merge commit, or None when the target already
        contains the source history.
        """
        ...


class RepositoryApiClient(Protocol):
    """Authenticated handle on the hosting service."""

    def connect(self) -> None:
        """Validate that the endpoint is reachable and the token accepted."""
        ...

    def get_repository(self, full_name: str) -> Repository:
        ...

    def close(self) -> None:
        ...
