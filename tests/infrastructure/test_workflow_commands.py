"""Tests for GitHub Actions workflow commands."""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from hcp_auth.infrastructure.adapters.github import GitHubActionsOutputs, issue_command
from hcp_auth.infrastructure.adapters.github.workflow_commands import escape_data
from tests.helpers import read_env_file


class TestIssueCommand:
    """Tests for issue_command."""

    def test_simple_command(self) -> None:
        """Commands should be printed as ::name::message."""
        stream = io.StringIO()
        issue_command("add-mask", "secret", stream=stream)
        assert stream.getvalue() == "::add-mask::secret\n"

    def test_properties(self) -> None:
        """Properties should follow the command name."""
        stream = io.StringIO()
        issue_command("set-output", "v", properties={"name": "a:b"}, stream=stream)
        assert stream.getvalue() == "::set-output name=a%3Ab::v\n"

    def test_escape_data(self) -> None:
        """Percent signs and newlines should be escaped."""
        assert escape_data("50%\r\nnext") == "50%25%0D%0Anext"


class TestGitHubActionsOutputs:
    """Tests for GitHubActionsOutputs."""

    def test_set_output_writes_file(self, tmp_path: Path) -> None:
        """Outputs should be appended to the GITHUB_OUTPUT file."""
        output_file = tmp_path / "output"
        outputs = GitHubActionsOutputs(output_file=str(output_file))

        outputs.set_output("organization_id", "org1")
        outputs.set_output("multi", "line1\nline2")

        assert read_env_file(output_file) == {"organization_id": "org1", "multi": "line1\nline2"}

    def test_set_output_without_file(self) -> None:
        """Without GITHUB_OUTPUT the output should be printed as a command."""
        stream = io.StringIO()
        outputs = GitHubActionsOutputs(stream=stream)

        outputs.set_output("project_id", "proj1")

        assert stream.getvalue() == "::set-output name=project_id::proj1\n"

    def test_export_variable(self, tmp_path: Path) -> None:
        """Variables should be written to GITHUB_ENV and this process."""
        env_file = tmp_path / "env"
        outputs = GitHubActionsOutputs(env_file=str(env_file))

        outputs.export_variable("HCP_CRED_FILE", "/work/creds.json")

        assert read_env_file(env_file) == {"HCP_CRED_FILE": "/work/creds.json"}
        assert os.environ["HCP_CRED_FILE"] == "/work/creds.json"

    def test_export_variable_without_file(self, caplog: pytest.LogCaptureFixture) -> None:
        """Without GITHUB_ENV the variable should only reach this process."""
        outputs = GitHubActionsOutputs()

        outputs.export_variable("GHA_HCP_CRED_FILE", "/work/creds.json")

        assert os.environ["GHA_HCP_CRED_FILE"] == "/work/creds.json"
        assert "GITHUB_ENV is not set" in caplog.text

    def test_set_secret(self) -> None:
        """Secrets should be masked with add-mask."""
        stream = io.StringIO()
        outputs = GitHubActionsOutputs(stream=stream)

        outputs.set_secret("tok123")

        assert stream.getvalue() == "::add-mask::tok123\n"

    def test_error(self) -> None:
        """Errors should be reported as error annotations."""
        stream = io.StringIO()
        outputs = GitHubActionsOutputs(stream=stream)

        outputs.error("bad\nthing")

        assert stream.getvalue() == "::error::bad%0Athing\n"
