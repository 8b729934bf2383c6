"""Application settings loaded from environment variables."""

import logging
import os
from dataclasses import dataclass, field
from functools import cached_property

from ... import __version__
from ...application.exceptions import ConfigurationError
from ...domain.value_objects import CredentialScheme, SourceChannel
from ..adapters.http import HttpClientConfig

TOOL_NAME = "hcp-auth-action"

OIDC_WARNING = (
    "The GitHub Actions variables $ACTIONS_ID_TOKEN_REQUEST_TOKEN and/or "
    "$ACTIONS_ID_TOKEN_REQUEST_URL were not provided to this job. This most likely means the "
    "GitHub Actions workflow permissions are incorrect. Please see "
    "https://docs.github.com/en/actions/security-guides/automatic-token-authentication#permissions-for-the-github_token"
)


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).strip().lower() in ("true", "1", "yes")


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _input_key(name: str) -> str:
    """Environment variable the runner uses for an action input."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


def _input_str(name: str) -> str:
    """Get an action input, trimmed."""
    return _env_str(_input_key(name)).strip()


def _input_bool(name: str) -> bool:
    """Get a boolean action input."""
    return _env_bool(_input_key(name))


@dataclass
class Settings:
    """Application settings container."""

    # Action inputs
    workload_identity_provider: str = field(default_factory=lambda: _input_str("workload_identity_provider"))
    audience: str = field(default_factory=lambda: _input_str("audience"))
    client_id: str = field(default_factory=lambda: _input_str("client_id"))
    client_secret: str = field(default_factory=lambda: _input_str("client_secret"), repr=False)
    set_access_token: bool = field(default_factory=lambda: _input_bool("set_access_token"))
    export_environment_variables: bool = field(
        default_factory=lambda: _input_bool("export_environment_variables")
    )

    # Runner environment
    github_workspace: str = field(default_factory=lambda: _env_str("GITHUB_WORKSPACE"))
    oidc_request_url: str = field(default_factory=lambda: _env_str("ACTIONS_ID_TOKEN_REQUEST_URL"))
    oidc_request_token: str = field(
        default_factory=lambda: _env_str("ACTIONS_ID_TOKEN_REQUEST_TOKEN"), repr=False
    )
    github_output: str = field(default_factory=lambda: _env_str("GITHUB_OUTPUT"))
    github_env: str = field(default_factory=lambda: _env_str("GITHUB_ENV"))
    credentials_file: str = field(default_factory=lambda: _env_str("GHA_HCP_CRED_FILE"))

    # Run configuration
    http_timeout: float = field(default_factory=lambda: _env_float("HCP_AUTH_HTTP_TIMEOUT", 30.0))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate that exactly one credential scheme is configured."""
        has_provider = bool(self.workload_identity_provider)
        has_any_client_cred = bool(self.client_id or self.client_secret)
        has_client_creds = bool(self.client_id and self.client_secret)

        if (has_provider and has_any_client_cred) or (not has_provider and not has_client_creds):
            msg = (
                'The GitHub Action workflow must specify exactly one of '
                '"workload_identity_provider" or "client_id" and "client_secret".'
            )
            raise ConfigurationError(msg)

        if not self.github_workspace:
            msg = "$GITHUB_WORKSPACE is not set"
            raise ConfigurationError(msg)

        if has_provider and not (self.oidc_request_url and self.oidc_request_token):
            raise ConfigurationError(OIDC_WARNING)

        self.validate_log_level()

    def validate_log_level(self) -> None:
        """Validate that ``log_level`` names a logging level."""
        if self.log_level.strip().upper() not in logging.getLevelNamesMapping():
            msg = f"Invalid LOG_LEVEL: {self.log_level!r}"
            raise ConfigurationError(msg)

    @property
    def logging_level(self) -> int:
        """Numeric logging level for ``log_level``."""
        self.validate_log_level()
        return logging.getLevelNamesMapping()[self.log_level.strip().upper()]

    @property
    def scheme(self) -> CredentialScheme:
        """Credential scheme selected by the inputs."""
        if self.workload_identity_provider:
            return CredentialScheme.WORKLOAD
        return CredentialScheme.SERVICE_PRINCIPAL_CREDS

    @property
    def oidc_audience(self) -> str:
        """OIDC token audience, defaulting to the provider resource name."""
        return self.audience or self.workload_identity_provider

    @cached_property
    def source_channel(self) -> SourceChannel:
        """Get the source channel sent with HCP requests."""
        return SourceChannel(tool=TOOL_NAME, version=__version__)

    @cached_property
    def http_config(self) -> HttpClientConfig:
        """Get HTTP transport configuration."""
        return HttpClientConfig(timeout=self.http_timeout)


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    try:
        settings = Settings()
    except ValueError as e:
        msg = f"Invalid settings: {e}"
        raise ConfigurationError(msg) from e
    settings.validate()
    return settings
