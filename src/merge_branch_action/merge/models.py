"""Value objects exchanged between the resolver, the orchestrator and the API client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class RepositoryReference:
    """One named ref of the remote repository, e.g. ``refs/heads/main``."""

    ref: str
    sha: str


@dataclass(frozen=True)
class Branch:
    name: str
    sha: str


@dataclass(frozen=True)
class Commit:
    sha: str


@dataclass(frozen=True)
class MergeRequest:
    """What gets submitted to the remote merge operation."""

    source_ref: str
    target_branch: str
    message: str | None = None


@dataclass(frozen=True)
class Merged:
    """A new merge commit was created on the target branch."""

    commit_id: str

    @property
    def sha(self) -> str:
        return self.commit_id

    @property
    def merged(self) -> bool:
        return True


@dataclass(frozen=True)
class AlreadyUpToDate:
    """The target branch already contained the source history."""

    target_commit_id: str

    @property
    def sha(self) -> str:
        return self.target_commit_id

    @property
    def merged(self) -> bool:
        return False


MergeOutcome = Union[Merged, AlreadyUpToDate]
