"""
Media Service - Centralized media generation and management.

Runs the image and speech providers side by side for a search and manages
the decoded audio files used for playback.
"""

import asyncio
import base64
import binascii
import os
import uuid
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..config import Config
from ..fetchers import AudioFetcher, BaseFetcher, ImageFetcher
from ..models import Word
from ..utils import MediaPathGenerator, setup_logger

logger = setup_logger(__name__)


class MediaService:
    """
    Service for generating and managing media.

    Provides the image + audio join used by the search orchestrator and the
    audio file cache used for playback.
    """

    def __init__(
        self,
        media_dir: Optional[str] = None,
        image_fetcher: Optional[BaseFetcher] = None,
        audio_fetcher: Optional[BaseFetcher] = None,
    ):
        """
        Initialize media service.

        Args:
            media_dir: Directory for audio files (defaults to Config.MEDIA_DIR)
            image_fetcher: Image provider (defaults to ImageFetcher)
            audio_fetcher: Speech provider (defaults to AudioFetcher)
        """
        self.media_dir = Path(media_dir or Config.MEDIA_DIR)
        self._image_fetcher = image_fetcher
        self._audio_fetcher = audio_fetcher

    @property
    def image_fetcher(self) -> BaseFetcher:
        """Lazy-load image fetcher."""
        if self._image_fetcher is None:
            self._image_fetcher = ImageFetcher()
        return self._image_fetcher

    @property
    def audio_fetcher(self) -> BaseFetcher:
        """Lazy-load audio fetcher."""
        if self._audio_fetcher is None:
            self._audio_fetcher = AudioFetcher()
        return self._audio_fetcher

    async def close(self) -> None:
        """Clean up all fetchers."""
        if self._image_fetcher:
            await self._image_fetcher.close()
            self._image_fetcher = None
        if self._audio_fetcher:
            await self._audio_fetcher.close()
            self._audio_fetcher = None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def generate_image(self, prompt: str) -> str:
        return await self.image_fetcher.fetch(prompt)

    async def generate_speech(self, text: str) -> str:
        return await self.audio_fetcher.fetch(text)

    async def generate_media(self, image_prompt: str, speech_text: str) -> Tuple[str, str]:
        """
        Generate the illustration and the pronunciation concurrently.

        Both must succeed. If either fails, the other is cancelled and the
        failure propagates.

        Args:
            image_prompt: Illustration prompt
            speech_text: Text to vocalize

        Returns:
            (image data URI, base64 audio)
        """
        tasks = [
            asyncio.ensure_future(self.generate_image(image_prompt)),
            asyncio.ensure_future(self.generate_speech(speech_text)),
        ]
        try:
            image_url, audio_base64 = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                if not task.done():
                    task.cancel()
            raise
        return image_url, audio_base64

    def get_audio_path(self, word_id: str) -> Path:
        return MediaPathGenerator.audio_word_path(word_id, str(self.media_dir))

    def write_audio_file(self, word: Word) -> Optional[Path]:
        """
        Decode a word's audio payload into an MP3 file for playback.

        Reuses an existing file. Uses atomic write pattern: write to temp
        file, then rename.

        Returns:
            Path to the MP3, or None if the word has no (valid) payload
        """
        if not word.has_audio:
            return None

        output_path = self.get_audio_path(word.id)
        if output_path.exists() and output_path.stat().st_size > 0:
            return output_path

        try:
            audio = base64.b64decode(word.audio_base64, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("Audio payload of %r is not valid base64", word.english)
            return None

        self.media_dir.mkdir(parents=True, exist_ok=True)
        temp_path = f"{output_path}.{uuid.uuid4().hex[:8]}.tmp"
        try:
            with open(temp_path, "wb") as f:
                f.write(audio)
            os.replace(temp_path, output_path)
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)
        return output_path

    def get_all_audio_files(self) -> List[Path]:
        """All word audio files in the media directory."""
        if not self.media_dir.exists():
            return []
        return sorted(self.media_dir.glob(f"{MediaPathGenerator.AUDIO_PREFIX}*{MediaPathGenerator.AUDIO_EXT}"))

    def cleanup_orphaned_files(self, valid_ids: Iterable[str]) -> int:
        """
        Remove audio files that don't belong to any saved word.

        Args:
            valid_ids: Ids of words whose files must be kept

        Returns:
            Number of files removed
        """
        keep = set(valid_ids)
        removed = 0

        for f in self.get_all_audio_files():
            word_id = MediaPathGenerator.word_id_from_audio(f.name)
            if word_id and word_id not in keep:
                try:
                    f.unlink()
                    removed += 1
                except OSError as e:
                    logger.warning("Could not remove %s: %s", f, e)

        if removed:
            logger.info("Removed %d orphaned audio file(s)", removed)
        return removed
