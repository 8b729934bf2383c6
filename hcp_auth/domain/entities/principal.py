"""Principal entity resolved from the caller identity."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PrincipalDetails:
    """The authenticated principal, scoped to an organization and optionally a project."""

    organization_id: str
    project_id: str | None = None

    def __post_init__(self) -> None:
        """Validate the organization is always present."""
        if not self.organization_id:
            msg = "Principal must belong to an organization"
            raise ValueError(msg)
