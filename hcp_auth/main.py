#!/usr/bin/env python3
"""
HCP Auth

Composition root and entry points for the authenticate and cleanup steps.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import replace
from typing import TYPE_CHECKING

from .application.exceptions import ApplicationError
from .application.use_cases import Authenticate, CleanupCredentials
from .domain.value_objects import CredentialScheme
from .infrastructure.adapters import (
    CallerIdentityClient,
    GitHubActionsOutputs,
    GitHubOidcTokenProvider,
    ServicePrincipalCredsClient,
    ServicePrincipalCredsParams,
    WorkloadIdentityFederationClient,
    WorkloadIdentityFederationParams,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    import httpx

    from .application.ports import AuthClient, IdentityResolver
    from .application.use_cases import AuthResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize container with settings and an optional transport override."""
        self._settings = settings
        self._http_config = settings.http_config
        if transport is not None:
            self._http_config = replace(self._http_config, transport=transport)

    def create_outputs(self) -> GitHubActionsOutputs:
        """Create the workflow outputs adapter."""
        return GitHubActionsOutputs(
            output_file=self._settings.github_output,
            env_file=self._settings.github_env,
        )

    def create_oidc_token_provider(self) -> GitHubOidcTokenProvider:
        """Create the GitHub OIDC token provider."""
        return GitHubOidcTokenProvider(
            request_url=self._settings.oidc_request_url,
            request_token=self._settings.oidc_request_token,
            channel=self._settings.source_channel,
            http_config=self._http_config,
        )

    async def create_auth_client(self) -> AuthClient:
        """Create the auth client for the configured credential scheme."""
        settings = self._settings
        logger.info("Using %s", settings.scheme.display_name)

        match settings.scheme:
            case CredentialScheme.WORKLOAD:
                oidc_token = await self.create_oidc_token_provider().get_id_token(settings.oidc_audience)
                return WorkloadIdentityFederationClient(
                    WorkloadIdentityFederationParams(
                        oidc_token=oidc_token,
                        oidc_token_request_url=settings.oidc_request_url,
                        oidc_token_request_token=settings.oidc_request_token,
                        oidc_token_audience=settings.oidc_audience,
                        provider_resource_name=settings.workload_identity_provider,
                    ),
                    settings.source_channel,
                    self._http_config,
                )

            case CredentialScheme.SERVICE_PRINCIPAL_CREDS:
                return ServicePrincipalCredsClient(
                    ServicePrincipalCredsParams(
                        client_id=settings.client_id,
                        client_secret=settings.client_secret,
                    ),
                    settings.source_channel,
                    self._http_config,
                )

    def create_identity_resolver(self, access_token: str) -> IdentityResolver:
        """Create the identity resolver for an access token."""
        return CallerIdentityClient(access_token, self._settings.source_channel, self._http_config)

    async def create_authenticate_use_case(self) -> Authenticate:
        """Create the main use case with all dependencies."""
        return Authenticate(
            auth_client=await self.create_auth_client(),
            identity_resolver_factory=self.create_identity_resolver,
            outputs=self.create_outputs(),
            workspace=self._settings.github_workspace,
            set_access_token=self._settings.set_access_token,
            export_environment_variables=self._settings.export_environment_variables,
        )

    def create_cleanup_use_case(self) -> CleanupCredentials:
        """Create the cleanup use case."""
        return CleanupCredentials(self._settings.credentials_file)


class Application:
    """Main application orchestrator for the authenticate and cleanup steps."""

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings, transport=transport)

    async def authenticate(self) -> AuthResult:
        """Run the authenticate step."""
        use_case = await self._container.create_authenticate_use_case()
        return await use_case.execute()

    def cleanup(self) -> bool:
        """Run the cleanup step."""
        return self._container.create_cleanup_use_case().execute()


def _fail(prefix: str, error: ApplicationError) -> int:
    """Report a failed run once and return the exit code."""
    message = f"{prefix}: {error.render()}"
    logger.error("%s (%s)", message, error.kind)
    GitHubActionsOutputs().error(message)
    return 1


async def async_main() -> int:
    """Async entry point for the authenticate step."""
    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.logging_level)

        app = Application(settings)
        await app.authenticate()
        return 0

    except ApplicationError as e:
        return _fail("hcp-auth failed", e)
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 1
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


def cleanup_main() -> None:
    """Entry point for the post-job cleanup step."""
    try:
        settings = Settings()
        logging.getLogger().setLevel(settings.logging_level)
        Application(settings).cleanup()
        exit_code = 0
    except ApplicationError as e:
        exit_code = _fail("hcp-auth cleanup failed", e)
    except OSError as e:
        message = f"hcp-auth cleanup failed: {e}"
        logger.error("%s", message)
        GitHubActionsOutputs().error(message)
        exit_code = 1
    except Exception:
        logger.exception("Unexpected error")
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
