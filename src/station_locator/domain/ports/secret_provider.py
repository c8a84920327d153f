"""Secret provider port."""

from typing import Protocol


class SecretProvider(Protocol):
    """Port for reading credentials from a secret store."""

    async def get_secret(self, name: str) -> str:
        """Return the latest value of the named secret."""
        ...
