"""Port for HCP authentication clients - driven/secondary port."""

from os import PathLike
from pathlib import Path
from typing import Protocol


class AuthClient(Protocol):
    """
    Port for exchanging caller credentials for an HCP access token.

    Implemented once per credential scheme. Each implementation also writes
    the credentials file that lets other HCP tools authenticate the same way.
    """

    async def get_token(self) -> str:
        """
        Exchange the configured credentials for an access token.

        Returns:
            The bearer access token.

        Raises:
            ExchangeFailedError: If the call fails or returns non-2xx.
            MalformedResponseError: If the response has no access token.
        """
        ...

    async def create_credentials_file(self, output_path: str | PathLike[str]) -> Path:
        """
        Write the scheme's credentials file.

        Args:
            output_path: Where to create the file. Must not exist yet.

        Returns:
            The path that was written.

        Raises:
            CredentialsFileExistsError: If the path is already occupied.
        """
        ...
