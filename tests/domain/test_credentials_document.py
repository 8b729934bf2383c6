"""Tests for credentials documents."""

from __future__ import annotations

import pytest

from hcp_auth.domain.entities import ServicePrincipalCredentialsDocument, WorkloadCredentialsDocument
from hcp_auth.domain.value_objects import CredentialScheme


class TestWorkloadCredentialsDocument:
    """Tests for WorkloadCredentialsDocument."""

    def test_to_dict_layout(self) -> None:
        """Document should embed fetch instructions under the workload key."""
        document = WorkloadCredentialsDocument(
            provider_resource_name="iam/project/p/service-principal/s/workload-identity-provider/w",
            token_url="https://token.example.com/idtoken?audience=aud",
            token_request_token="req-token",
        )

        assert document.to_dict() == {
            "scheme": "workload",
            "workload": {
                "provider_resource_name": "iam/project/p/service-principal/s/workload-identity-provider/w",
                "url": {
                    "url": "https://token.example.com/idtoken?audience=aud",
                    "headers": {"Authorization": "Bearer req-token"},
                    "format_type": "json",
                    "subject_cred_pointer": "/value",
                },
            },
        }

    def test_scheme(self) -> None:
        """Scheme should be workload."""
        assert WorkloadCredentialsDocument.scheme == CredentialScheme.WORKLOAD

    def test_repr_hides_request_token(self) -> None:
        """The request token should not appear in the repr."""
        document = WorkloadCredentialsDocument(
            provider_resource_name="provider",
            token_url="https://token.example.com",
            token_request_token="super-secret-request-token",
        )
        assert "super-secret-request-token" not in repr(document)


class TestServicePrincipalCredentialsDocument:
    """Tests for ServicePrincipalCredentialsDocument."""

    def test_to_dict_layout(self) -> None:
        """Document should store the client id and secret verbatim."""
        document = ServicePrincipalCredentialsDocument(client_id="id-1", client_secret="secret-1")

        assert document.to_dict() == {
            "scheme": "service_principal_creds",
            "oauth": {"client_id": "id-1", "client_secret": "secret-1"},
        }

    def test_repr_hides_secret(self) -> None:
        """The client secret should not appear in the repr."""
        document = ServicePrincipalCredentialsDocument(client_id="id-1", client_secret="secret-1")
        assert "secret-1" not in repr(document)

    def test_document_is_frozen(self) -> None:
        """Documents should be immutable."""
        document = ServicePrincipalCredentialsDocument(client_id="id-1", client_secret="secret-1")
        with pytest.raises(AttributeError):
            document.client_id = "other"  # type: ignore[misc]
