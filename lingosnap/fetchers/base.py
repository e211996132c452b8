"""Base fetcher class."""

from abc import ABC, abstractmethod


class BaseFetcher(ABC):
    """
    Abstract base class for all media fetchers.

    Provides lifecycle management and async context manager support.
    Subclasses implement fetch() and optionally override close().
    """

    # Provider name reported in ProviderError
    name: str = "unknown"

    @abstractmethod
    async def fetch(self, source: str) -> str:
        """
        Produce a media payload for the given source.

        Args:
            source: Prompt or text to process

        Returns:
            Encoded payload (data URI or base64 string)

        Raises:
            ProviderError: If the provider fails or returns unusable data
        """
        pass

    async def close(self) -> None:
        """
        Close any open resources (sessions, connections, etc.).

        Subclasses should override this to clean up their resources.
        """
        pass

    async def __aenter__(self) -> "BaseFetcher":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - ensure resources are closed."""
        await self.close()
