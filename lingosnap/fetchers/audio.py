"""Audio fetcher - speech synthesis via Edge TTS."""

import base64
from typing import Optional

import edge_tts

from ..config import Config
from ..errors import ProviderError
from ..utils import setup_logger
from ..utils.parsing import TextParser
from .base import BaseFetcher

logger = setup_logger(__name__)

# Smallest MP3 accepted as real speech
MIN_AUDIO_BYTES = 100


class AudioFetcher(BaseFetcher):
    """Handle audio generation via TTS (Edge TTS)."""

    name = "edge_tts"

    def __init__(self, voice: Optional[str] = None, volume: str = "+0%"):
        """
        Initialize audio fetcher.

        Args:
            voice: Edge TTS voice name (defaults to Config.VOICE)
            volume: Volume adjustment (e.g., "+0%", "+40%")
        """
        self.voice = voice or Config.VOICE
        self.volume = volume

    def clean_text(self, text: str) -> str:
        """Clean text for TTS processing using centralized TextParser."""
        return TextParser.clean_for_tts(text)

    async def synthesize(self, text: str) -> bytes:
        """Stream MP3 bytes for the text from Edge TTS."""
        communicate = edge_tts.Communicate(text, self.voice, volume=self.volume)
        audio = bytearray()
        async for chunk in communicate.stream():
            if chunk.get("type") == "audio":
                audio.extend(chunk["data"])
        return bytes(audio)

    async def fetch(self, source: str) -> str:
        """
        Synthesize speech for the text.

        Args:
            source: Text to vocalize

        Returns:
            Base64-encoded MP3

        Raises:
            ProviderError: If the text is empty or synthesis fails
        """
        clean_text = self.clean_text(source)
        if not clean_text:
            raise ProviderError("Empty text for speech synthesis", provider=self.name)

        try:
            audio = await self.synthesize(clean_text)
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(f"Speech synthesis failed: {e}", provider=self.name) from e

        if len(audio) < MIN_AUDIO_BYTES:
            raise ProviderError(f"Speech synthesis returned {len(audio)} bytes", provider=self.name)

        logger.debug("Audio generated (%d bytes) for %r", len(audio), clean_text)
        return base64.b64encode(audio).decode("ascii")
