"""HCP API response models."""

from pydantic import BaseModel


class AccessTokenResponse(BaseModel):
    """Token exchange response from either token endpoint."""

    access_token: str | None = None


class CallerIdentityService(BaseModel):
    """Service principal details of the caller."""

    id: str | None = None
    resource_name: str | None = None
    organization_id: str | None = None
    project_id: str | None = None


class CallerIdentityPrincipal(BaseModel):
    """Principal returned by the IAM service."""

    id: str | None = None
    type: str | None = None
    service: CallerIdentityService | None = None


class CallerIdentityResponse(BaseModel):
    """Response of the caller-identity API."""

    principal: CallerIdentityPrincipal | None = None
