"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from hcp_auth.domain.value_objects import SourceChannel
from hcp_auth.infrastructure.adapters.hcp import ServicePrincipalCredsParams, WorkloadIdentityFederationParams
from tests.helpers import OIDC_REQUEST_URL, PROVIDER

ENV_KEYS = (
    "INPUT_WORKLOAD_IDENTITY_PROVIDER",
    "INPUT_AUDIENCE",
    "INPUT_CLIENT_ID",
    "INPUT_CLIENT_SECRET",
    "INPUT_SET_ACCESS_TOKEN",
    "INPUT_EXPORT_ENVIRONMENT_VARIABLES",
    "GITHUB_WORKSPACE",
    "ACTIONS_ID_TOKEN_REQUEST_URL",
    "ACTIONS_ID_TOKEN_REQUEST_TOKEN",
    "GITHUB_OUTPUT",
    "GITHUB_ENV",
    "GHA_HCP_CRED_FILE",
    "HCP_CRED_FILE",
    "HCP_AUTH_HTTP_TIMEOUT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env() -> Iterator[None]:
    """Hide runner variables from tests and restore anything tests export."""
    with patch.dict(os.environ):
        for key in ENV_KEYS:
            os.environ.pop(key, None)
        yield


@pytest.fixture
def source_channel() -> SourceChannel:
    """Source channel used in requests."""
    return SourceChannel(tool="hcp-auth-action", version="1.0.0")


@pytest.fixture
def workload_params() -> WorkloadIdentityFederationParams:
    """Workload identity federation inputs."""
    return WorkloadIdentityFederationParams(
        oidc_token="github-oidc-jwt",
        oidc_token_request_url=OIDC_REQUEST_URL,
        oidc_token_request_token="request-token",
        oidc_token_audience="hcp-audience",
        provider_resource_name=PROVIDER,
    )


@pytest.fixture
def sp_params() -> ServicePrincipalCredsParams:
    """Service principal inputs."""
    return ServicePrincipalCredsParams(client_id="client-abc", client_secret="secret-xyz")


@pytest.fixture
def credentials_path(tmp_path: Path) -> Path:
    """A credentials file path that does not exist yet."""
    return tmp_path / "gha-creds-test.json"
