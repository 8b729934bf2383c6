"""Credential scheme value object."""

from enum import StrEnum


class CredentialScheme(StrEnum):
    """Authentication scheme written to the credentials file."""

    WORKLOAD = "workload"
    SERVICE_PRINCIPAL_CREDS = "service_principal_creds"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case CredentialScheme.WORKLOAD:
                return "Workload Identity Federation"
            case CredentialScheme.SERVICE_PRINCIPAL_CREDS:
                return "Service Principal Credentials"
