"""Names of the step outputs published by the action."""

from __future__ import annotations

from enum import Enum


class OutputVars(str, Enum):
    # Resulting commit: the merge commit, or the unchanged target head.
    SHA = "sha"

    @property
    def key(self) -> str:
        return self.value
