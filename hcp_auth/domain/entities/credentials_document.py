"""Credentials file documents consumed by HCP tooling.

Each document serializes to the JSON layout expected by the ``hcp`` CLI and
the HCP SDKs when they are pointed at a credentials file.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from ..value_objects import CredentialScheme


@dataclass(frozen=True, slots=True)
class WorkloadCredentialsDocument:
    """
    Workload identity federation instructions.

    Holds the URL, header and JSON pointer a consumer uses to fetch a fresh
    subject token itself. The subject token is never stored.
    """

    scheme: ClassVar[CredentialScheme] = CredentialScheme.WORKLOAD
    format_type: ClassVar[str] = "json"
    subject_cred_pointer: ClassVar[str] = "/value"

    provider_resource_name: str
    token_url: str
    token_request_token: str = field(repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Build the JSON document."""
        return {
            "scheme": str(self.scheme),
            "workload": {
                "provider_resource_name": self.provider_resource_name,
                "url": {
                    "url": self.token_url,
                    "headers": {
                        "Authorization": f"Bearer {self.token_request_token}",
                    },
                    "format_type": self.format_type,
                    "subject_cred_pointer": self.subject_cred_pointer,
                },
            },
        }


@dataclass(frozen=True, slots=True)
class ServicePrincipalCredentialsDocument:
    """Service principal client id and secret, stored verbatim."""

    scheme: ClassVar[CredentialScheme] = CredentialScheme.SERVICE_PRINCIPAL_CREDS

    client_id: str
    client_secret: str = field(repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Build the JSON document."""
        return {
            "scheme": str(self.scheme),
            "oauth": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
        }


CredentialsDocument = WorkloadCredentialsDocument | ServicePrincipalCredentialsDocument
