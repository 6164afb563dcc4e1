"""Merge a git reference into a target branch through the GitHub API."""

from merge_branch_action.errors import (
    ActionFailedError,
    ApiConnectionError,
    ConfigurationError,
    MergeBranchError,
    MergeRejectedError,
    ReferenceNotFoundError,
)
from merge_branch_action.merge.models import AlreadyUpToDate, Merged, MergeOutcome, RepositoryReference
from merge_branch_action.merge.orchestrator import MergeBranchAction
from merge_branch_action.merge.resolver import ReferenceResolver

__version__ = "1.0.0"

__all__ = [
    "ActionFailedError",
    "AlreadyUpToDate",
    "ApiConnectionError",
    "ConfigurationError",
    "MergeBranchAction",
    "MergeBranchError",
    "MergeOutcome",
    "MergeRejectedError",
    "Merged",
    "ReferenceNotFoundError",
    "ReferenceResolver",
    "RepositoryReference",
]
