"""Domain entities."""

from .credentials_document import (
    CredentialsDocument,
    ServicePrincipalCredentialsDocument,
    WorkloadCredentialsDocument,
)
from .principal import PrincipalDetails

__all__ = [
    "CredentialsDocument",
    "PrincipalDetails",
    "ServicePrincipalCredentialsDocument",
    "WorkloadCredentialsDocument",
]
