"""Shared HTTP transport for HCP and GitHub calls."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ...application.exceptions import ConfigurationError, ExchangeFailedError, MalformedResponseError
from ...domain.value_objects import SourceChannel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

RETRYABLE_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "DELETE"})
RETRYABLE_STATUS_CODES = frozenset({502, 503, 504})


@dataclass(frozen=True, slots=True)
class HttpClientConfig:
    """Transport settings shared by every outgoing call."""

    timeout: float = 30.0
    max_redirects: int = 5
    retries: int = 3
    # Base delay in seconds, doubled after every retry.
    retry_backoff: float = 0.005
    # Overrides the network transport, e.g. with httpx.MockTransport.
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False, compare=False)


class RetryingTransport(httpx.AsyncBaseTransport):
    """
    Transport wrapper that retries idempotent requests on gateway errors.

    Requests whose method is in ``RETRYABLE_METHODS`` are sent again while the
    response status is 502, 503 or 504, up to ``retries`` extra attempts with
    exponential backoff. Token exchanges are POSTs and are never repeated.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport, *, retries: int, backoff: float) -> None:
        self._transport = transport
        self._retries = retries
        self._backoff = backoff

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        response = await self._transport.handle_async_request(request)
        if request.method not in RETRYABLE_METHODS:
            return response

        for attempt in range(self._retries):
            if response.status_code not in RETRYABLE_STATUS_CODES:
                break
            delay = self._backoff * (2**attempt)
            logger.debug(
                "%s %s returned HTTP %d, retrying in %.3fs (%d/%d)",
                request.method,
                request.url,
                response.status_code,
                delay,
                attempt + 1,
                self._retries,
            )
            await response.aclose()
            await asyncio.sleep(delay)
            response = await self._transport.handle_async_request(request)
        return response

    async def aclose(self) -> None:
        await self._transport.aclose()


def create_http_client(
    config: HttpClientConfig,
    channel: SourceChannel,
    *,
    headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """
    Create an async client that follows redirects and retries transient failures.

    Failed connections are retried by the network transport. Gateway errors on
    idempotent requests are retried by ``RetryingTransport``.

    Args:
        config: Transport settings.
        channel: Identifies the calling tool in the User-Agent.
        headers: Extra headers sent with every request.

    Returns:
        A configured client, to be used as an async context manager.
    """
    inner = config.transport or httpx.AsyncHTTPTransport(retries=config.retries)
    return httpx.AsyncClient(
        transport=RetryingTransport(inner, retries=config.retries, backoff=config.retry_backoff),
        follow_redirects=True,
        max_redirects=config.max_redirects,
        timeout=config.timeout,
        headers={"User-Agent": channel.value, **(headers or {})},
    )


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    failure_message: str,
    **kwargs: Any,
) -> httpx.Response:
    """
    Send a single request and require a 2xx response.

    Raises:
        ExchangeFailedError: On transport errors or a non-2xx status.
    """
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        raise ExchangeFailedError(failure_message, endpoint=url) from e

    if not response.is_success:
        logger.debug("%s %s returned HTTP %d", method, url, response.status_code)
        raise ExchangeFailedError(
            failure_message,
            endpoint=url,
            status_code=response.status_code,
            body=response.text,
        )
    return response


def parse_response(response: httpx.Response, model: type[ModelT], *, failure_message: str) -> ModelT:
    """
    Parse a JSON response body into a model.

    Raises:
        MalformedResponseError: If the body is not JSON of the expected shape.
    """
    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise MalformedResponseError(
            f"{failure_message}: the response body was not the expected JSON",
            endpoint=str(response.request.url),
            body=response.text,
        ) from e


def with_audience(url: str, audience: str) -> str:
    """
    Return the URL with its ``audience`` query parameter set.

    Raises:
        ConfigurationError: If the URL cannot be parsed.
    """
    try:
        return str(httpx.URL(url).copy_set_param("audience", audience))
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Invalid OIDC token request URL: {e}") from e
