"""Detection of the Google Cloud project the service runs in."""

import asyncio
import logging

import google.auth
from google.auth.exceptions import DefaultCredentialsError

from station_locator.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


async def detect_project_id() -> str:
    """Return the project of the Application Default Credentials.

    On Cloud Run the credentials come from the metadata server, which also
    supplies the project id. ``google.auth.default`` blocks, so it runs in a
    worker thread.

    Raises:
        ConfigurationError: If no credentials are found, the lookup times out,
            or the credentials carry no project id.
    """
    try:
        _, project_id = await asyncio.to_thread(google.auth.default)
    except DefaultCredentialsError as e:
        raise ConfigurationError(f"unable to determine Google Cloud project: {e}") from e
    except TimeoutError as e:
        raise ConfigurationError("timed out looking up the Google Cloud project") from e

    if not project_id:
        raise ConfigurationError(
            "application default credentials carry no project id; set GOOGLE_CLOUD_PROJECT"
        )

    logger.info(f"Detected Google Cloud project {project_id}")
    return project_id
