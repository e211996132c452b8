"""Image fetcher - generate illustrations via Pollinations API."""

import asyncio
import base64
import urllib.parse
from typing import Optional

import aiohttp

from ..config import Config
from ..errors import ProviderError
from ..utils import setup_logger
from .base import BaseFetcher

logger = setup_logger(__name__)


# Image format magic bytes for validation
IMAGE_MAGIC_BYTES = {
    b'\xff\xd8\xff': 'jpeg',      # JPEG
    b'\x89PNG': 'png',            # PNG
    b'GIF8': 'gif',               # GIF
}

# Smallest payload accepted as a real image
MIN_IMAGE_BYTES = 2000

IMAGE_PROMPT_TEMPLATE = (
    "A clean, professional clipart illustration of {prompt} "
    "on a pure white background, minimal vector style."
)


def detect_image_format(content: bytes) -> Optional[str]:
    """Detect image format from magic bytes."""
    if not content or len(content) < 4:
        return None
    for magic, fmt in IMAGE_MAGIC_BYTES.items():
        if content.startswith(magic):
            return fmt
    # WebP is RIFF....WEBP
    if content[:4] == b'RIFF' and len(content) > 12 and content[8:12] == b'WEBP':
        return 'webp'
    return None


def to_data_uri(content: bytes, img_format: str) -> str:
    """Encode image bytes as an embeddable data URI."""
    encoded = base64.b64encode(content).decode("ascii")
    return f"data:image/{img_format};base64,{encoded}"


class ImageFetcher(BaseFetcher):
    """Handle image generation via Pollinations API with session pooling."""

    name = "pollinations"

    def __init__(
        self,
        api_key: Optional[str] = None,
        size: Optional[int] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize image fetcher.

        Args:
            api_key: Pollinations key (defaults to Config.POLLINATIONS_API_KEY)
            size: Edge length of the square image in pixels
            timeout: Total request timeout in seconds
        """
        self.api_key = api_key if api_key is not None else Config.POLLINATIONS_API_KEY
        self.size = size or Config.IMAGE_SIZE
        self.timeout = timeout or Config.IMAGE_TIMEOUT
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_lock = asyncio.Lock()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create a shared aiohttp session (connection pooling)."""
        async with self._session_lock:
            if self._session is None or self._session.closed:
                headers = {"Authorization": f"Bearer {self.api_key}"}
                timeout = aiohttp.ClientTimeout(total=self.timeout)
                self._session = aiohttp.ClientSession(headers=headers, timeout=timeout)
            return self._session

    async def close(self) -> None:
        """Close the aiohttp session. Call this when done with the fetcher."""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
                self._session = None

    def build_prompt(self, prompt: str) -> str:
        return IMAGE_PROMPT_TEMPLATE.format(prompt=prompt.strip())

    async def _download(self, prompt: str) -> bytes:
        """Request one image from the API and return its raw bytes."""
        session = await self._get_session()

        url = f"{Config.POLLINATIONS_API_URL}/{urllib.parse.quote(prompt)}"
        params = {
            "model": Config.POLLINATIONS_IMAGE_MODEL,
            "width": str(self.size),
            "height": str(self.size),
            "nologo": "true",
        }

        try:
            async with session.get(url, params=params) as response:
                if response.status == 401:
                    raise ProviderError("Image API auth failed (401) - check POLLINATIONS_API_KEY", provider=self.name)
                if response.status != 200:
                    raise ProviderError(f"Image API error {response.status}", provider=self.name)
                return await response.read()
        except asyncio.TimeoutError as e:
            raise ProviderError("Image API timeout", provider=self.name) from e
        except aiohttp.ClientError as e:
            raise ProviderError(f"Image API connection error: {e}", provider=self.name) from e

    async def fetch(self, source: str) -> str:
        """
        Generate a square illustration for the given prompt.

        Args:
            source: Short illustration prompt from the Word Info provider

        Returns:
            data:image/...;base64 URI

        Raises:
            ProviderError: On missing key, HTTP failure or a non-image payload
        """
        prompt = str(source or "").strip()
        if not prompt:
            raise ProviderError("Empty illustration prompt", provider=self.name)
        if not self.api_key:
            raise ProviderError("No API key configured - set POLLINATIONS_API_KEY", provider=self.name)

        content = await self._download(self.build_prompt(prompt))

        img_format = detect_image_format(content)
        if not img_format or len(content) < MIN_IMAGE_BYTES:
            raise ProviderError(
                f"Invalid image: {len(content)} bytes, magic: {content[:4]!r}",
                provider=self.name,
            )

        logger.debug("Image generated (%s, %d bytes) for %r", img_format, len(content), prompt)
        return to_data_uri(content, img_format)
