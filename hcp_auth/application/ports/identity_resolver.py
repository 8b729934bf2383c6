"""Port for resolving the authenticated principal - driven/secondary port."""

from typing import Protocol

from ...domain.entities import PrincipalDetails


class IdentityResolver(Protocol):
    """Port for looking up the principal behind an access token."""

    async def get_caller_details(self) -> PrincipalDetails:
        """
        Resolve the organization and project of the caller.

        Raises:
            ExchangeFailedError: If the call fails or returns non-2xx.
            MalformedResponseError: If the organization is missing.
        """
        ...
