"""Source channel value object identifying the calling tool."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class SourceChannel:
    """Tool name and version sent with every HCP request."""

    HEADER: ClassVar[str] = "X-HCP-Source-Channel"

    tool: str
    version: str

    def __post_init__(self) -> None:
        """Validate both parts are present."""
        if not self.tool or not self.version:
            msg = f"Source channel requires a tool and a version, got {self.tool!r}/{self.version!r}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.value

    @property
    def value(self) -> str:
        """Header value in ``<tool>/<version>`` form."""
        return f"{self.tool}/{self.version}"

    def headers(self) -> dict[str, str]:
        """Headers identifying the source channel."""
        return {self.HEADER: self.value}
