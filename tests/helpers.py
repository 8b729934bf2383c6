"""Shared constants and mock transport helpers for tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx

from hcp_auth.infrastructure.adapters.http import HttpClientConfig

Handler = Callable[[httpx.Request], httpx.Response]

PROVIDER = "iam/project/proj1/service-principal/sp1/workload-identity-provider/github"
OIDC_REQUEST_URL = "https://pipelines.actions.example.com/abc/idtoken?api-version=2.0"


def mock_http_config(handler: Handler) -> HttpClientConfig:
    """HTTP config whose requests are answered by handler."""
    return HttpClientConfig(transport=httpx.MockTransport(handler), retry_backoff=0.0)


class RecordingHandler:
    """Mock transport handler answering with a fixed response and recording requests."""

    def __init__(self, status_code: int = 200, **response_kwargs: object) -> None:
        self.status_code = status_code
        self.response_kwargs = response_kwargs
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, **self.response_kwargs)  # type: ignore[arg-type]

    @property
    def config(self) -> HttpClientConfig:
        """HTTP config routed through this handler."""
        return mock_http_config(self)


class SequenceHandler:
    """Mock transport handler answering with queued responses, repeating the last one."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queued = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        return httpx.Response(queued.status_code, headers=queued.headers, content=queued.content)

    @property
    def config(self) -> HttpClientConfig:
        """HTTP config routed through this handler."""
        return mock_http_config(self)


def read_env_file(path: Path) -> dict[str, str]:
    """Parse a GITHUB_OUTPUT / GITHUB_ENV file written with heredoc delimiters."""
    values: dict[str, str] = {}
    lines = iter(path.read_text(encoding="utf-8").splitlines())
    for line in lines:
        name, delimiter = line.split("<<", 1)
        value_lines = []
        for value_line in lines:
            if value_line == delimiter:
                break
            value_lines.append(value_line)
        values[name] = "\n".join(value_lines)
    return values
