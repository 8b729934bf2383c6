"""Workload identity federation client for HCP."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from ....application.exceptions import MalformedResponseError
from ....domain.entities import WorkloadCredentialsDocument
from ....domain.value_objects import SourceChannel
from ..http import HttpClientConfig, create_http_client, parse_response, send_request, with_audience
from .credentials_file import write_credentials_file
from .models import AccessTokenResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WorkloadIdentityFederationParams:
    """Inputs for workload identity federation."""

    oidc_token: str = field(repr=False)
    oidc_token_request_url: str
    oidc_token_request_token: str = field(repr=False)
    oidc_token_audience: str
    provider_resource_name: str


class WorkloadIdentityFederationClient:
    """
    Auth client that exchanges an OIDC token through a workload identity provider.

    Implements the AuthClient port for the ``workload`` scheme.
    """

    EXCHANGE_URL_TEMPLATE: ClassVar[str] = (
        "https://api.cloud.hashicorp.com/2019-12-10/{provider_resource_name}/exchange-token"
    )
    FAILURE_MESSAGE: ClassVar[str] = "Failed to generate HCP access token"

    def __init__(
        self,
        params: WorkloadIdentityFederationParams,
        channel: SourceChannel,
        http_config: HttpClientConfig | None = None,
    ) -> None:
        """Initialize the client."""
        self._params = params
        self._channel = channel
        self._http_config = http_config or HttpClientConfig()

    @property
    def exchange_url(self) -> str:
        """Token exchange endpoint of the configured provider."""
        return self.EXCHANGE_URL_TEMPLATE.format(
            provider_resource_name=self._params.provider_resource_name,
        )

    async def get_token(self) -> str:
        """Exchange the OIDC token for an HCP access token."""
        url = self.exchange_url
        logger.info("Exchanging OIDC token via %s", self._params.provider_resource_name)

        async with create_http_client(self._http_config, self._channel) as client:
            response = await send_request(
                client,
                "POST",
                url,
                failure_message=self.FAILURE_MESSAGE,
                json={"jwt_token": self._params.oidc_token},
                headers=self._channel.headers(),
            )

        result = parse_response(response, AccessTokenResponse, failure_message=self.FAILURE_MESSAGE)
        if not result.access_token:
            msg = f"{self.FAILURE_MESSAGE}: the response did not contain an access_token"
            raise MalformedResponseError(msg, endpoint=url, body=response.text)

        return result.access_token

    async def create_credentials_file(self, output_path: str | os.PathLike[str]) -> Path:
        """
        Write a workload identity federation credentials file.

        The file tells the consumer how to request a fresh OIDC token for the
        same audience, since the token held here expires quickly.
        """
        document = WorkloadCredentialsDocument(
            provider_resource_name=self._params.provider_resource_name,
            token_url=with_audience(
                self._params.oidc_token_request_url,
                self._params.oidc_token_audience,
            ),
            token_request_token=self._params.oidc_token_request_token,
        )
        return write_credentials_file(output_path, document)
