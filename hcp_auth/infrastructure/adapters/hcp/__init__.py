"""HCP authentication adapters."""

from .service_principal import ServicePrincipalCredsClient, ServicePrincipalCredsParams
from .workload_identity import WorkloadIdentityFederationClient, WorkloadIdentityFederationParams

__all__ = [
    "ServicePrincipalCredsClient",
    "ServicePrincipalCredsParams",
    "WorkloadIdentityFederationClient",
    "WorkloadIdentityFederationParams",
]
