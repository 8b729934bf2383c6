"""GitHub Actions workflow commands and environment files."""

from __future__ import annotations

import logging
import os
import sys
import uuid
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)


def escape_data(value: str) -> str:
    """Escape a workflow command payload."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def issue_command(
    command: str,
    message: str = "",
    *,
    properties: dict[str, str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Print a ``::command::message`` line for the runner to pick up."""
    props = ",".join(f"{key}={escape_property(val)}" for key, val in (properties or {}).items())
    head = f"{command} {props}" if props else command
    print(f"::{head}::{escape_data(message)}", file=stream or sys.stdout, flush=True)


class GitHubActionsOutputs:
    """
    Publishes outputs and environment variables to later workflow steps.

    Implements the ActionOutputs port using the GITHUB_OUTPUT and GITHUB_ENV
    files, falling back to stdout commands when they are not set.
    """

    def __init__(
        self,
        output_file: str = "",
        env_file: str = "",
        *,
        stream: TextIO | None = None,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            output_file: Value of GITHUB_OUTPUT.
            env_file: Value of GITHUB_ENV.
            stream: Where workflow commands are printed (defaults to stdout).
        """
        self._output_file = output_file
        self._env_file = env_file
        self._stream = stream

    def set_output(self, name: str, value: str) -> None:
        """Publish a step output."""
        if self._output_file:
            self._append(self._output_file, name, value)
        else:
            issue_command("set-output", value, properties={"name": name}, stream=self._stream)

    def export_variable(self, name: str, value: str) -> None:
        """Export an environment variable to this process and later steps."""
        os.environ[name] = value
        if self._env_file:
            self._append(self._env_file, name, value)
        else:
            logger.warning("GITHUB_ENV is not set; %s is only exported to this process", name)

    def set_secret(self, value: str) -> None:
        """Mask a value in workflow logs."""
        issue_command("add-mask", value, stream=self._stream)

    def error(self, message: str) -> None:
        """Report an error annotation."""
        issue_command("error", message, stream=self._stream)

    @staticmethod
    def _append(file_path: str, name: str, value: str) -> None:
        """Append a ``name<<delimiter`` block to an environment file."""
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            msg = f"Unexpected input: name and value must not contain the delimiter {delimiter}"
            raise ValueError(msg)

        with Path(file_path).open("a", encoding="utf-8") as fh:
            fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
