"""Use case for deleting the credentials file after the job."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class CleanupCredentials:
    """Delete the credentials file recorded by a previous authenticate run."""

    def __init__(self, credentials_path: str | None) -> None:
        """
        Initialize the use case.

        Args:
            credentials_path: Path recorded in GHA_HCP_CRED_FILE, if any.
        """
        self._credentials_path = credentials_path

    def execute(self) -> bool:
        """
        Execute the cleanup.

        Returns:
            True if a path was recorded and is now gone, False if none was recorded.
        """
        if not self._credentials_path:
            logger.warning(
                "GHA_HCP_CRED_FILE environment variable not set. No credentials to clean up."
            )
            return False

        path = Path(self._credentials_path)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)

        logger.info("Deleted credential file at %s", path)
        return True
