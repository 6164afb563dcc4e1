"""Exception hierarchy for the merge branch action."""

from __future__ import annotations


class MergeBranchError(RuntimeError):
    """Base exception for merge branch action errors."""


class ConfigurationError(MergeBranchError, ValueError):
    """A required input, environment variable or credential is missing."""


class ApiConnectionError(MergeBranchError):
    """The GitHub API endpoint is unreachable, invalid or refused the token."""


class RepositoryNotFoundError(MergeBranchError):
    """The target repository does not exist or is not visible to the token."""

    def __init__(self, full_name: str):
        self.full_name = full_name
        super().__init__(f"Repository not found: {full_name}")


class ReferenceNotFoundError(MergeBranchError):
    """A source reference or target branch could not be resolved."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind.capitalize()} not found: {name}")


class MergeRejectedError(MergeBranchError):
    """The remote refused the merge (conflict, missing head, protection rules)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class GitHubApiError(MergeBranchError):
    """The GitHub API answered with a status the client does not handle."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class ActionFailedError(MergeBranchError):
    """Uniform run failure; ``__cause__`` holds the original error."""
