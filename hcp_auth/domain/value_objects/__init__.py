"""Domain value objects - Immutable objects defined by their attributes."""

from .credential_scheme import CredentialScheme
from .source_channel import SourceChannel

__all__ = [
    "CredentialScheme",
    "SourceChannel",
]
