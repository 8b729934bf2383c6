"""Application ports - Interfaces for external adapters."""

from .action_outputs import ActionOutputs
from .auth_client import AuthClient
from .identity_resolver import IdentityResolver

__all__ = [
    "ActionOutputs",
    "AuthClient",
    "IdentityResolver",
]
