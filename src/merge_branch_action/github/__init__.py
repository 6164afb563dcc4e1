"""Repository API client surface."""

from merge_branch_action.github.client import DEFAULT_API_URL, GitHubClient, GitHubRepository
from merge_branch_action.github.protocols import Repository, RepositoryApiClient

__all__ = [
    "DEFAULT_API_URL",
    "GitHubClient",
    "GitHubRepository",
    "Repository",
    "RepositoryApiClient",
]
