"""Secret Manager adapter for reading credentials."""

import logging
from typing import TYPE_CHECKING

from google.api_core.exceptions import GoogleAPIError

from station_locator.domain.errors import ConfigurationError
from station_locator.domain.ports.secret_provider import SecretProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from google.cloud.secretmanager import SecretManagerServiceAsyncClient


class SecretManagerProvider(SecretProvider):
    """Read the latest version of secrets stored in Google Cloud Secret Manager."""

    def __init__(self, client: "SecretManagerServiceAsyncClient", project_id: str) -> None:
        """Initialize with a Secret Manager async client.

        Args:
            client: Secret Manager async client.
            project_id: Project owning the secrets.
        """
        self._client = client
        self._project_id = project_id

    def secret_version_name(self, name: str) -> str:
        return f"projects/{self._project_id}/secrets/{name}/versions/latest"

    async def get_secret(self, name: str) -> str:
        """Return the latest value of the named secret.

        Raises:
            ConfigurationError: If the secret cannot be read.
        """
        version_name = self.secret_version_name(name)
        try:
            response = await self._client.access_secret_version(request={"name": version_name})
        except GoogleAPIError as e:
            raise ConfigurationError(f"failed to access secret version {version_name}: {e}") from e

        logger.info(f"Loaded secret {name} from Secret Manager")
        return response.payload.data.decode("utf-8").strip()
