"""HCP IAM client resolving the authenticated principal."""

from __future__ import annotations

import logging
from typing import ClassVar

from ....application.exceptions import MalformedResponseError
from ....domain.entities import PrincipalDetails
from ....domain.value_objects import SourceChannel
from ..hcp.models import CallerIdentityResponse
from ..http import HttpClientConfig, create_http_client, parse_response, send_request

logger = logging.getLogger(__name__)


class CallerIdentityClient:
    """
    Client for the HCP caller-identity API.

    Implements the IdentityResolver port.
    """

    CALLER_IDENTITY_URL: ClassVar[str] = "https://api.cloud.hashicorp.com/iam/2019-12-10/caller-identity"
    FAILURE_MESSAGE: ClassVar[str] = "Failed to get caller identity"

    def __init__(
        self,
        access_token: str,
        channel: SourceChannel,
        http_config: HttpClientConfig | None = None,
    ) -> None:
        """Initialize the client with the bearer token to resolve."""
        self._access_token = access_token
        self._channel = channel
        self._http_config = http_config or HttpClientConfig()

    async def get_caller_details(self) -> PrincipalDetails:
        """
        Retrieve the organization and project of the authenticated principal.

        Returns:
            PrincipalDetails with project_id None for organization-scoped principals.
        """
        url = self.CALLER_IDENTITY_URL
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            **self._channel.headers(),
        }

        async with create_http_client(self._http_config, self._channel, headers=headers) as client:
            response = await send_request(client, "GET", url, failure_message=self.FAILURE_MESSAGE)

        result = parse_response(response, CallerIdentityResponse, failure_message=self.FAILURE_MESSAGE)
        service = result.principal.service if result.principal else None
        # A service without an id is rejected even when organization_id is present.
        if service is None or not service.id or not service.organization_id:
            msg = f"{self.FAILURE_MESSAGE}: the response contained unexpected values"
            raise MalformedResponseError(msg, endpoint=url, body=response.text)

        # An empty project id means the principal is organization scoped.
        return PrincipalDetails(
            organization_id=service.organization_id,
            project_id=service.project_id or None,
        )
