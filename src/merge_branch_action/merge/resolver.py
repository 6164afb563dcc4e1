"""Resolution of a loosely specified name to one repository reference.

A raw name such as ``main``, ``1.0.0``, ``refs/tags/1.0.0`` or a commit sha is
expanded into four candidate paths, checked in priority order:

1. BRANCH   -- ``refs/heads/{name}``
2. TAG      -- ``refs/tags/{name}``
3. COMMIT   -- ``refs/commits/{name}``
4. LITERAL  -- ``{name}`` as given

Matching is case-insensitive on both sides, so references whose paths only
differ by case cannot be told apart. The first candidate with a match wins;
ambiguity is never reported.
"""

from __future__ import annotations

import logging

from merge_branch_action.errors import ConfigurationError
from merge_branch_action.github.protocols import Repository
from merge_branch_action.merge.models import Branch, RepositoryReference

logger = logging.getLogger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"
TAG_REF_PREFIX = "refs/tags/"
COMMIT_REF_PREFIX = "refs/commits/"


def branch_ref_path(name: str) -> str:
    return f"{BRANCH_REF_PREFIX}{name}"


def tag_ref_path(name: str) -> str:
    return f"{TAG_REF_PREFIX}{name}"


def commit_ref_path(name: str) -> str:
    return f"{COMMIT_REF_PREFIX}{name}"


def candidate_paths(name: str) -> tuple[str, str, str, str]:
    """Return the lowercased candidate paths for ``name`` in priority order."""
    return (
        branch_ref_path(name).lower(),
        tag_ref_path(name).lower(),
        commit_ref_path(name).lower(),
        name.lower(),
    )


def _require_name(name: str | None) -> str:
    if name is None or not str(name).strip():
        raise ConfigurationError("A non-empty reference name is required")
    return name


class ReferenceResolver:
    """Resolve names against the references of one repository."""

    def __init__(self, repository: Repository) -> None:
        self.repository = repository

    def resolve_any(self, name: str | None) -> RepositoryReference | None:
        """Return the branch, tag, commit or literal reference matching ``name``.

        Raises:
            ConfigurationError: ``name`` is None or blank. Raised before any
                call to the repository.
        """
        name = _require_name(name)
        candidates = candidate_paths(name)

        # First match per candidate, keeping listing order within a candidate.
        matches: dict[str, RepositoryReference] = {}
        references = self.repository.list_references()
        for reference in references:
            path = reference.ref.lower()
            if path in candidates and path not in matches:
                matches[path] = reference

        logger.debug(
            "Resolving %r against %d references: %d candidate(s) matched",
            name,
            len(references),
            len(matches),
        )
        for candidate in candidates:
            if candidate in matches:
                return matches[candidate]
        return None

    def resolve_branch(self, name: str | None) -> Branch | None:
        """Look the branch up directly, without the reference listing."""
        name = _require_name(name)
        branch = self.repository.get_branch(name)
        if branch is None:
            logger.debug("Branch %r does not exist", name)
        return branch
