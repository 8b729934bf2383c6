"""Service principal credentials client for HCP."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from ....application.exceptions import MalformedResponseError
from ....domain.entities import ServicePrincipalCredentialsDocument
from ....domain.value_objects import SourceChannel
from ..http import HttpClientConfig, create_http_client, parse_response, send_request
from .credentials_file import write_credentials_file
from .models import AccessTokenResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ServicePrincipalCredsParams:
    """Service principal client credentials."""

    client_id: str
    client_secret: str = field(repr=False)


class ServicePrincipalCredsClient:
    """
    Auth client using the OAuth client credentials grant.

    Implements the AuthClient port for the ``service_principal_creds`` scheme.
    """

    TOKEN_URL: ClassVar[str] = "https://auth.idp.hashicorp.com/oauth/token"
    AUDIENCE: ClassVar[str] = "https://api.hashicorp.cloud"
    FAILURE_MESSAGE: ClassVar[str] = "Failed to generate HCP access token"

    def __init__(
        self,
        params: ServicePrincipalCredsParams,
        channel: SourceChannel,
        http_config: HttpClientConfig | None = None,
    ) -> None:
        """Initialize the client."""
        self._params = params
        self._channel = channel
        self._http_config = http_config or HttpClientConfig()

    async def get_token(self) -> str:
        """Exchange the client id and secret for an HCP access token."""
        logger.info("Requesting access token for service principal %s", self._params.client_id)
        form = {
            "grant_type": "client_credentials",
            "client_id": self._params.client_id,
            "client_secret": self._params.client_secret,
            "audience": self.AUDIENCE,
        }

        async with create_http_client(self._http_config, self._channel) as client:
            response = await send_request(
                client,
                "POST",
                self.TOKEN_URL,
                failure_message=self.FAILURE_MESSAGE,
                data=form,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )

        result = parse_response(response, AccessTokenResponse, failure_message=self.FAILURE_MESSAGE)
        if not result.access_token:
            msg = f"{self.FAILURE_MESSAGE}: the response did not contain an access_token"
            raise MalformedResponseError(msg, endpoint=self.TOKEN_URL, body=response.text)

        return result.access_token

    async def create_credentials_file(self, output_path: str | os.PathLike[str]) -> Path:
        """
        Write the client id and secret to a credentials file.

        There is no token source to point at, so the secret itself is stored.
        """
        document = ServicePrincipalCredentialsDocument(
            client_id=self._params.client_id,
            client_secret=self._params.client_secret,
        )
        return write_credentials_file(output_path, document)
