"""Tests for application exceptions."""

from __future__ import annotations

import pytest

from hcp_auth.application.exceptions import (
    ApplicationError,
    ConfigurationError,
    CredentialsFileExistsError,
    ErrorKind,
    ExchangeFailedError,
    MalformedResponseError,
)


class TestApplicationError:
    """Tests for error rendering."""

    def test_message_only(self) -> None:
        """Errors without context should render just the message."""
        assert str(ConfigurationError("bad inputs")) == "bad inputs"

    def test_http_context(self) -> None:
        """Endpoint, status and body should be rendered in order."""
        error = ExchangeFailedError(
            "Failed to generate HCP access token",
            endpoint="https://auth.example.com/token",
            status_code=403,
            body="denied",
        )
        assert str(error) == (
            "Failed to generate HCP access token: calling https://auth.example.com/token: HTTP 403: denied"
        )

    def test_long_body_truncated(self) -> None:
        """Very long bodies should be truncated."""
        error = MalformedResponseError("bad", body="x" * 5000)
        assert str(error).endswith("... [truncated]")
        assert len(str(error)) < 1100

    def test_render_includes_cause(self) -> None:
        """render() should append a non-application cause."""
        try:
            try:
                raise ConnectionResetError("reset by peer")
            except ConnectionResetError as e:
                raise ExchangeFailedError("Failed to get caller identity") from e
        except ExchangeFailedError as error:
            assert error.render() == "Failed to get caller identity: reset by peer"

    def test_render_without_cause(self) -> None:
        """render() without a cause should equal str()."""
        error = ExchangeFailedError("oops", status_code=500)
        assert error.render() == str(error)

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (ConfigurationError("x"), ErrorKind.CONFIGURATION),
            (CredentialsFileExistsError("/tmp/x"), ErrorKind.FILE_EXISTS),
            (ExchangeFailedError("x"), ErrorKind.EXCHANGE_FAILED),
            (MalformedResponseError("x"), ErrorKind.MALFORMED_RESPONSE),
        ],
    )
    def test_kinds(self, error: ApplicationError, kind: ErrorKind) -> None:
        """Each error class should carry its kind."""
        assert error.kind == kind
        assert isinstance(error, ApplicationError)
