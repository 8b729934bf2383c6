"""Port for surfacing run results to the workflow - driven/secondary port."""

from typing import Protocol


class ActionOutputs(Protocol):
    """Port for publishing outputs and variables to later workflow steps."""

    def set_output(self, name: str, value: str) -> None:
        """Publish a step output."""
        ...

    def export_variable(self, name: str, value: str) -> None:
        """Export an environment variable to this and later steps."""
        ...

    def set_secret(self, value: str) -> None:
        """Mask a value in workflow logs."""
        ...
