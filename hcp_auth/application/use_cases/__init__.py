"""Application use cases."""

from .authenticate import Authenticate, AuthResult
from .cleanup_credentials import CleanupCredentials

__all__ = [
    "AuthResult",
    "Authenticate",
    "CleanupCredentials",
]
