"""GitHub Actions runner integration."""

from merge_branch_action.actions.kit import GitHubActionsKit, input_env_var
from merge_branch_action.actions.outputs import OutputVars

__all__ = ["GitHubActionsKit", "OutputVars", "input_env_var"]
