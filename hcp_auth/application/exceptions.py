"""Application layer exceptions."""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

_MAX_BODY_LENGTH = 1024


class ErrorKind(StrEnum):
    """Category of a failed run."""

    CONFIGURATION = "configuration"
    FILE_EXISTS = "file_exists"
    FILE_WRITE = "file_write"
    EXCHANGE_FAILED = "exchange_failed"
    MALFORMED_RESPONSE = "malformed_response"


class ApplicationError(Exception):
    """
    Base exception for application errors.

    Carries the endpoint, HTTP status and response body involved, if any.
    The underlying cause is chained with ``raise ... from``.
    """

    kind: ClassVar[ErrorKind]

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        parts = [self.message]
        if self.endpoint:
            parts.append(f"calling {self.endpoint}")
        if self.status_code is not None:
            parts.append(f"HTTP {self.status_code}")
        if self.body is not None:
            parts.append(_truncate(self.body) or "[no body]")
        return ": ".join(parts)

    def render(self) -> str:
        """Render a single message including the direct cause."""
        cause = self.__cause__
        if cause is None or isinstance(cause, ApplicationError):
            return str(self)
        return f"{self}: {cause}"


class ConfigurationError(ApplicationError):
    """Raised when inputs are missing or mutually exclusive inputs are combined."""

    kind = ErrorKind.CONFIGURATION


class CredentialsFileError(ApplicationError):
    """Raised when the credentials file cannot be written."""

    kind = ErrorKind.FILE_WRITE

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


class CredentialsFileExistsError(CredentialsFileError):
    """Raised when the credentials file path is already occupied."""

    kind = ErrorKind.FILE_EXISTS

    def __init__(self, path: str) -> None:
        super().__init__("Refusing to overwrite existing credentials file", path)


class ExchangeFailedError(ApplicationError):
    """Raised when a remote call fails at the transport layer or returns non-2xx."""

    kind = ErrorKind.EXCHANGE_FAILED


class MalformedResponseError(ApplicationError):
    """Raised when a 2xx response is missing an expected field."""

    kind = ErrorKind.MALFORMED_RESPONSE


def _truncate(body: str) -> str:
    if len(body) <= _MAX_BODY_LENGTH:
        return body
    return f"{body[:_MAX_BODY_LENGTH]}... [truncated]"
