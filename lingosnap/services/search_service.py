"""
Search Service - orchestrates the provider calls behind one word lookup.

Word info first (its illustration prompt feeds the image provider), then
image and speech concurrently. Any failure fails the whole search; no
partial word is ever produced.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Optional, TypeVar

from ..config import Config
from ..errors import InputError, ProviderError
from ..models import Word
from ..utils import setup_logger
from ..utils.parsing import TextParser
from .ai_service import AIService
from .media_service import MediaService

logger = setup_logger(__name__)

T = TypeVar("T")


@dataclass
class SearchOutcome:
    """Result of one search as seen by the presentation layer."""

    sequence: int
    query: str
    word: Optional[Word] = None
    error: Optional[str] = None
    stale: bool = False

    @property
    def ok(self) -> bool:
        return self.word is not None


class SearchOrchestrator:
    """
    Sequences the Word Info, Image and Speech providers for a query.

    Every run() is tagged with a monotonically increasing sequence number;
    an outcome whose number is no longer the latest issued is marked stale
    so the caller can drop it.
    """

    def __init__(
        self,
        ai_service: Optional[AIService] = None,
        media_service: Optional[MediaService] = None,
        timeout: Optional[float] = None,
        error_message: Optional[str] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            ai_service: Word Info provider
            media_service: Image + Speech providers
            timeout: Optional limit in seconds for each provider stage
                (defaults to Config.SEARCH_TIMEOUT; None means no limit)
            error_message: User-facing text for any failed search
        """
        self.ai_service = ai_service or AIService()
        self.media_service = media_service or MediaService()
        self.timeout = timeout if timeout is not None else Config.SEARCH_TIMEOUT
        self.error_message = error_message or Config.messages()["search_error"]
        self._sequence = 0

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    async def close(self) -> None:
        await self.ai_service.close()
        await self.media_service.close()

    async def _guard(self, stage: str, awaitable: Awaitable[T]) -> T:
        """Await a provider stage, applying the timeout and tagging failures."""
        try:
            if self.timeout:
                return await asyncio.wait_for(awaitable, self.timeout)
            return await awaitable
        except ProviderError as e:
            e.stage = e.stage or stage
            raise
        except asyncio.TimeoutError as e:
            raise ProviderError(f"{stage} timed out after {self.timeout}s", stage=stage) from e
        except Exception as e:
            raise ProviderError(f"{stage} failed: {e}", stage=stage) from e

    async def search(self, query: str) -> Word:
        """
        Build a Word for the query.

        Raises:
            InputError: If the query is blank (no provider is called)
            ProviderError: If any provider call fails
        """
        english = TextParser.normalize_query(query)
        if not english:
            raise InputError("Empty query")
        spoken = str(query).strip()

        info = await self._guard("word_info", self.ai_service.fetch_word_info(english))

        image_url, audio_base64 = await self._guard(
            "media",
            self.media_service.generate_media(info.illustration_prompt, spoken),
        )

        return Word.create(english, info, image_url, audio_base64)

    async def run(self, query: str) -> Optional[SearchOutcome]:
        """
        Presentation-facing search.

        Blank queries are ignored (returns None). Failures are logged with
        their stage and reported as the single generic message.
        """
        if not TextParser.normalize_query(query):
            return None

        self._sequence += 1
        sequence = self._sequence
        outcome = SearchOutcome(sequence=sequence, query=query)

        try:
            outcome.word = await self.search(query)
        except ProviderError as e:
            logger.error(
                "Search %d for %r failed at %s (%s): %s",
                sequence, query, e.stage or "unknown", e.provider or "-", e,
            )
            outcome.error = self.error_message

        outcome.stale = sequence != self._sequence
        if outcome.stale:
            logger.debug("Discarding stale search %d for %r", sequence, query)
        return outcome
