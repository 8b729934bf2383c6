"""Exclusive-create writer for credentials files."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ....application.exceptions import CredentialsFileError, CredentialsFileExistsError
from ....domain.entities import CredentialsDocument

logger = logging.getLogger(__name__)

CREDENTIALS_FILE_MODE = 0o640


def write_credentials_file(output_path: str | os.PathLike[str], document: CredentialsDocument) -> Path:
    """
    Write a credentials document as JSON, never replacing an existing file.

    The file is created with ``O_CREAT | O_EXCL`` so an existing file or a
    symlink planted at the path makes the call fail. A failed write removes
    the partially written file.

    Args:
        output_path: Path to create.
        document: Document to serialize.

    Returns:
        The written path.

    Raises:
        CredentialsFileExistsError: If the path is already occupied.
        CredentialsFileError: If the file cannot be created or written.
    """
    path = Path(output_path)
    payload = json.dumps(document.to_dict()).encode("utf-8")

    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, CREDENTIALS_FILE_MODE)
    except FileExistsError as e:
        raise CredentialsFileExistsError(str(path)) from e
    except OSError as e:
        raise CredentialsFileError("Failed to create credentials file", str(path)) from e

    try:
        with os.fdopen(fd, "wb") as fh:
            # Undo the process umask
            if hasattr(os, "fchmod"):
                os.fchmod(fh.fileno(), CREDENTIALS_FILE_MODE)
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
    except OSError as e:
        path.unlink(missing_ok=True)
        raise CredentialsFileError("Failed to write credentials file", str(path)) from e

    logger.debug("Wrote %s credentials file to %s", document.scheme, path)
    return path
