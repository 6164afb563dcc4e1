"""Action inputs and runner environment, read through the actions kit."""

from __future__ import annotations

import math
from dataclasses import dataclass

from merge_branch_action.actions.kit import GitHubActionsKit
from merge_branch_action.errors import ConfigurationError
from merge_branch_action.github.client import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS

FROM_INPUT = "from"
TO_INPUT = "to"
MESSAGE_INPUT = "message"

GITHUB_TOKEN_ENV_VAR = "GITHUB_TOKEN"
HTTP_TIMEOUT_ENV_VAR = "MERGE_BRANCH_HTTP_TIMEOUT"


@dataclass(slots=True)
class ActionInputs:
    """The ``from``/``to``/``message`` inputs of one run."""

    from_ref: str
    to_branch: str
    message: str | None = None

    @classmethod
    def from_kit(cls, kit: GitHubActionsKit) -> "ActionInputs":
        from_ref = kit.get_input(FROM_INPUT) or kit.github_sha
        return cls(
            from_ref=from_ref,
            to_branch=kit.get_required_input(TO_INPUT),
            message=kit.get_input(MESSAGE_INPUT, trim=False),
        )

    def describe(self) -> str:
        return f"parameters: [from: {self.from_ref}, to: {self.to_branch}, message: {self.message or ''}]"


@dataclass(slots=True)
class ActionEnvironment:
    """Connection settings for the GitHub API."""

    token: str
    repository: str
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_kit(cls, kit: GitHubActionsKit) -> "ActionEnvironment":
        return cls(
            token=kit.get_required_env(GITHUB_TOKEN_ENV_VAR),
            repository=kit.github_repository,
            api_url=kit.github_api_url or DEFAULT_API_URL,
            timeout=_parse_timeout(kit.get_env(HTTP_TIMEOUT_ENV_VAR)),
        )


def _parse_timeout(raw: str | None) -> float:
    if raw is None:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{HTTP_TIMEOUT_ENV_VAR} must be a number of seconds, got {raw!r}") from exc
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"{HTTP_TIMEOUT_ENV_VAR} must be a positive finite number, got {raw!r}")
    return timeout
