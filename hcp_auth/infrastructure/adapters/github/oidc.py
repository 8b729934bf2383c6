"""GitHub Actions OIDC token provider."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel

from ....application.exceptions import MalformedResponseError
from ....domain.value_objects import SourceChannel
from ..http import HttpClientConfig, create_http_client, parse_response, send_request, with_audience

logger = logging.getLogger(__name__)


class IdTokenResponse(BaseModel):
    """Response of the Actions ID token endpoint."""

    value: str | None = None


class GitHubOidcTokenProvider:
    """Requests OIDC tokens from the Actions runtime for a given audience."""

    FAILURE_MESSAGE: ClassVar[str] = "Failed to get GitHub OIDC token"

    def __init__(
        self,
        request_url: str,
        request_token: str,
        channel: SourceChannel,
        http_config: HttpClientConfig | None = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            request_url: Value of ACTIONS_ID_TOKEN_REQUEST_URL.
            request_token: Value of ACTIONS_ID_TOKEN_REQUEST_TOKEN.
            channel: Identifies the calling tool in the User-Agent.
            http_config: Transport settings.
        """
        self._request_url = request_url
        self._request_token = request_token
        self._channel = channel
        self._http_config = http_config or HttpClientConfig()

    async def get_id_token(self, audience: str) -> str:
        """Request an OIDC token for the audience."""
        url = with_audience(self._request_url, audience)
        headers = {"Authorization": f"Bearer {self._request_token}"}
        logger.info("Requesting GitHub OIDC token for audience %s", audience)

        async with create_http_client(self._http_config, self._channel) as client:
            response = await send_request(
                client,
                "GET",
                url,
                failure_message=self.FAILURE_MESSAGE,
                headers=headers,
            )

        result = parse_response(response, IdTokenResponse, failure_message=self.FAILURE_MESSAGE)
        if not result.value:
            msg = f"{self.FAILURE_MESSAGE}: the response did not contain a value"
            raise MalformedResponseError(msg, endpoint=url)

        return result.value
