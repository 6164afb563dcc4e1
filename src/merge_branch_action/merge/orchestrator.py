"""End-to-end merge flow.

Steps, strictly in order:
1. Load inputs (``from`` defaults to the workflow commit, ``to`` is required)
2. Connect to the GitHub API and validate the endpoint
3. Look the repository up by its ``owner/name``
4. Resolve the source reference (branch, tag, commit or literal ref)
5. Look the target branch up directly
6. Request the merge
7. Classify the outcome (merge commit vs. already up to date)
8. Report: one notice and the ``sha`` output

Any error at any step is wrapped once in ActionFailedError; nothing is
published on failure.
"""

from __future__ import annotations

import logging
from typing import Callable

from merge_branch_action.actions.kit import GitHubActionsKit
from merge_branch_action.actions.outputs import OutputVars
from merge_branch_action.config import ActionEnvironment, ActionInputs
from merge_branch_action.errors import ActionFailedError, ReferenceNotFoundError
from merge_branch_action.github.client import GitHubClient
from merge_branch_action.github.protocols import Repository, RepositoryApiClient
from merge_branch_action.merge.models import (
    AlreadyUpToDate,
    Branch,
    Merged,
    MergeOutcome,
    MergeRequest,
    RepositoryReference,
)
from merge_branch_action.merge.resolver import ReferenceResolver

__all__ = [
    "ClientFactory",
    "MERGED_NOTICE",
    "MergeBranchAction",
    "UP_TO_DATE_NOTICE",
    "build_github_client",
    "connect_client",
]

logger = logging.getLogger(__name__)

MERGED_NOTICE = "Branch merged successfully."
UP_TO_DATE_NOTICE = "Nothing to merge: target branch is already up to date."

ClientFactory = Callable[[ActionEnvironment], RepositoryApiClient]


def build_github_client(environment: ActionEnvironment) -> RepositoryApiClient:
    return GitHubClient(environment.api_url, environment.token, timeout=environment.timeout)


def connect_client(kit: GitHubActionsKit, client_factory: ClientFactory) -> tuple[RepositoryApiClient, ActionEnvironment]:
    """Build a client from the runner environment and validate the endpoint.

    The caller owns the returned client and must close it.
    """
    environment = ActionEnvironment.from_kit(kit)
    client = client_factory(environment)
    try:
        client.connect()
    except Exception:
        client.close()
        raise
    return client, environment


class MergeBranchAction:
    """Merge one reference into a target branch and report the resulting commit."""

    def __init__(self, kit: GitHubActionsKit, client_factory: ClientFactory = build_github_client) -> None:
        self.kit = kit
        self.client_factory = client_factory

    def execute(self) -> MergeOutcome:
        """Run the whole flow.

        Raises:
            ActionFailedError: on any failure, chained to the original error.
        """
        try:
            inputs = ActionInputs.from_kit(self.kit)
            self.kit.debug(inputs.describe())

            client, environment = connect_client(self.kit, self.client_factory)
            try:
                repository = client.get_repository(environment.repository)
                outcome = self._merge(repository, inputs)
            finally:
                client.close()

            self._report(outcome)
            return outcome
        except Exception as exc:
            raise ActionFailedError(str(exc) or exc.__class__.__name__) from exc

    def _merge(self, repository: Repository, inputs: ActionInputs) -> MergeOutcome:
        resolver = ReferenceResolver(repository)
        source = self._resolve_source(resolver, inputs.from_ref)
        target = self._resolve_target(resolver, inputs.to_branch)

        request = MergeRequest(
            source_ref=source.ref,
            target_branch=target.name,
            message=inputs.message,
        )
        logger.debug("Merging %s into %s", request.source_ref, request.target_branch)
        commit = repository.merge(request.target_branch, request.source_ref, request.message)
        if commit is None:
            return AlreadyUpToDate(target_commit_id=target.sha)
        return Merged(commit_id=commit.sha)

    @staticmethod
    def _resolve_source(resolver: ReferenceResolver, name: str) -> RepositoryReference:
        reference = resolver.resolve_any(name)
        if reference is None:
            raise ReferenceNotFoundError("source reference", name)
        return reference

    @staticmethod
    def _resolve_target(resolver: ReferenceResolver, name: str) -> Branch:
        branch = resolver.resolve_branch(name)
        if branch is None:
            raise ReferenceNotFoundError("target branch", name)
        return branch

    def _report(self, outcome: MergeOutcome) -> None:
        # Output first: a failed write must not leave a success notice behind.
        self.kit.set_output(OutputVars.SHA.key, outcome.sha)
        self.kit.notice(MERGED_NOTICE if outcome.merged else UP_TO_DATE_NOTICE)
