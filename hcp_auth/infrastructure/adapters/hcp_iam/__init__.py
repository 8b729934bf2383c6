"""HCP IAM adapters."""

from .caller_identity import CallerIdentityClient

__all__ = ["CallerIdentityClient"]
