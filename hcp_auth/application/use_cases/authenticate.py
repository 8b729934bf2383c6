"""Use case for authenticating a workflow run against HCP."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ...domain.entities import PrincipalDetails
from ..ports import ActionOutputs, AuthClient, IdentityResolver

logger = logging.getLogger(__name__)

# Read by the cleanup step to find the file to delete.
CREDENTIALS_FILE_ENV = "GHA_HCP_CRED_FILE"
# Read by the hcp CLI and HCP SDKs.
HCP_CREDENTIALS_FILE_ENV = "HCP_CRED_FILE"


@dataclass(frozen=True, slots=True)
class AuthResult:
    """Result of the authenticate use case."""

    credentials_path: Path
    access_token: str = field(repr=False)
    principal: PrincipalDetails


def credentials_file_name() -> str:
    """Random credentials file name, unique per run."""
    return f"gha-creds-{secrets.token_hex(8)}.json"


class Authenticate:
    """
    Use case for writing the credentials file, exchanging for an access
    token and resolving the principal behind it.

    The three steps run strictly in order and the first failure ends the run.
    """

    def __init__(
        self,
        auth_client: AuthClient,
        identity_resolver_factory: Callable[[str], IdentityResolver],
        outputs: ActionOutputs,
        workspace: str | Path,
        *,
        set_access_token: bool = False,
        export_environment_variables: bool = False,
    ) -> None:
        """
        Initialize the use case.

        Args:
            auth_client: Client for the selected credential scheme.
            identity_resolver_factory: Builds a resolver for an access token.
            outputs: Adapter publishing outputs to later workflow steps.
            workspace: Directory the credentials file is created in.
            set_access_token: If True, publish the access token as an output.
            export_environment_variables: If True, export HCP_CRED_FILE.
        """
        self._auth_client = auth_client
        self._identity_resolver_factory = identity_resolver_factory
        self._outputs = outputs
        self._workspace = Path(workspace)
        self._set_access_token = set_access_token
        self._export_environment_variables = export_environment_variables

    async def execute(self) -> AuthResult:
        """
        Execute the authenticate use case.

        Returns:
            AuthResult with the credentials path, access token and principal.
        """
        # The file lives in the workspace, not the runner temp directory, so
        # that container steps can read it too.
        output_path = self._workspace / credentials_file_name()
        credentials_path = await self._auth_client.create_credentials_file(output_path)
        logger.info("Created credentials file at %s", credentials_path)
        self._outputs.set_output("credentials_file_path", str(credentials_path))
        self._outputs.export_variable(CREDENTIALS_FILE_ENV, str(credentials_path))

        access_token = await self._auth_client.get_token()
        logger.info("Obtained HCP access token")
        if self._set_access_token:
            self._outputs.set_secret(access_token)
            self._outputs.set_output("access_token", access_token)

        resolver = self._identity_resolver_factory(access_token)
        principal = await resolver.get_caller_details()
        logger.info(
            "Authenticated principal in organization %s (project: %s)",
            principal.organization_id,
            principal.project_id or "none",
        )
        self._outputs.set_output("organization_id", principal.organization_id)
        if principal.project_id:
            self._outputs.set_output("project_id", principal.project_id)

        if self._export_environment_variables:
            self._outputs.export_variable(HCP_CREDENTIALS_FILE_ENV, str(credentials_path))

        return AuthResult(
            credentials_path=credentials_path,
            access_token=access_token,
            principal=principal,
        )
