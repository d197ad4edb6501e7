"""Utility functions for reading credentials and writing generated code.

This module provides service account key-file loading and the single
output write with proper error handling.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path

from .logging_config import get_logger

logger = get_logger(__name__)


class CredentialsError(Exception):
    """Raised when the service account key file cannot be loaded."""

    pass


class OutputError(Exception):
    """Raised when the generated file cannot be written."""

    pass


@dataclass(frozen=True)
class ServiceAccountCredentials:
    """Fields of a Google service account JSON key file."""

    type: str = ""
    project_id: str = ""
    private_key_id: str = ""
    private_key: str = ""
    client_email: str = ""
    client_id: str = ""
    auth_uri: str = ""
    token_uri: str = ""
    auth_provider_x509_cert_url: str = ""
    client_x509_cert_url: str = ""


def load_credentials(file_path: str | Path) -> ServiceAccountCredentials:
    """Load a service account key file.

    Args:
        file_path: Path to the JSON key file.

    Returns:
        Parsed credentials; unknown keys in the file are ignored.

    Raises:
        CredentialsError: If the file is missing, unreadable or not a JSON object.
    """
    file_path = Path(file_path)
    logger.debug("Loading service account credentials from: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.error("Key file not found: %s", file_path)
        raise CredentialsError(f"Key file not found: {file_path}") from e
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in key file %s: %s", file_path, e)
        raise CredentialsError(f"Invalid JSON in key file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading key file %s: %s", file_path, e)
        raise CredentialsError(f"Error reading key file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise CredentialsError(f"Key file must contain a JSON object: {file_path}")

    known = {f.name for f in fields(ServiceAccountCredentials)}
    credentials = ServiceAccountCredentials(
        **{key: str(value) for key, value in data.items() if key in known}
    )
    logger.info("Loaded credentials for project %s", credentials.project_id or "(none)")
    return credentials


def write_generated_file(file_path: str | Path, content: str) -> Path:
    """Write the generated code in one call, creating the parent directory.

    Args:
        file_path: Destination path.
        content: Fully assembled file content.

    Returns:
        The path written.

    Raises:
        OutputError: If the directory cannot be created or the write fails.
    """
    file_path = Path(file_path)

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Cannot create output directory %s: %s", file_path.parent, e)
        raise OutputError(f"Cannot create output directory {file_path.parent}: {e}") from e

    try:
        with file_path.open("w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        logger.error("Error writing %s: %s", file_path, e)
        raise OutputError(f"Error writing {file_path}: {e}") from e

    logger.info("Wrote generated code to %s", file_path)
    return file_path
