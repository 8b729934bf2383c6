"""Infrastructure adapters - Implementations of application ports."""

from .github import GitHubActionsOutputs, GitHubOidcTokenProvider
from .hcp import (
    ServicePrincipalCredsClient,
    ServicePrincipalCredsParams,
    WorkloadIdentityFederationClient,
    WorkloadIdentityFederationParams,
)
from .hcp_iam import CallerIdentityClient
from .http import HttpClientConfig

__all__ = [
    "CallerIdentityClient",
    "GitHubActionsOutputs",
    "GitHubOidcTokenProvider",
    "HttpClientConfig",
    "ServicePrincipalCredsClient",
    "ServicePrincipalCredsParams",
    "WorkloadIdentityFederationClient",
    "WorkloadIdentityFederationParams",
]
