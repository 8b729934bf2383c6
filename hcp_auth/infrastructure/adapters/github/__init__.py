"""GitHub Actions adapters."""

from .oidc import GitHubOidcTokenProvider
from .workflow_commands import GitHubActionsOutputs, issue_command

__all__ = [
    "GitHubActionsOutputs",
    "GitHubOidcTokenProvider",
    "issue_command",
]
