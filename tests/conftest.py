import asyncio
import base64
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lingosnap.errors import ProviderError
from lingosnap.fetchers import BaseFetcher
from lingosnap.models import Word, WordInfo
from lingosnap.services import MediaService, MemoryRepository, SavedCollection, SearchOrchestrator

PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 4000
AUDIO_BYTES = b'ID3' + b'\x01' * 500
IMAGE_URI = 'data:image/png;base64,' + base64.b64encode(PNG_BYTES).decode('ascii')
AUDIO_B64 = base64.b64encode(AUDIO_BYTES).decode('ascii')

APPLE_INFO = WordInfo(
    meaning='سیب',
    phonetic='اَپِل',
    illustration_prompt='a red apple',
    example_sentence='I eat an apple every day.',
    example_translation='من هر روز یک سیب می‌خورم.',
)


class FakeAIService:
    """Word Info provider double that counts calls."""

    def __init__(self, info=APPLE_INFO, error=None, delays=None):
        self.info = info
        self.error = error
        self.delays = delays or {}
        self.calls = []
        self.closed = False

    async def fetch_word_info(self, word):
        self.calls.append(word)
        delay = self.delays.get(word)
        if delay:
            await asyncio.sleep(delay)
        if self.error:
            raise self.error
        return self.info

    async def close(self):
        self.closed = True


class FakeFetcher(BaseFetcher):
    """Media provider double that counts calls and notices cancellation."""

    def __init__(self, result, name='fake', error=None, delay=0):
        self.result = result
        self.name = name
        self.error = error
        self.delay = delay
        self.calls = []
        self.cancelled = False
        self.closed = False

    async def fetch(self, source):
        self.calls.append(source)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error:
            raise self.error
        return self.result

    async def close(self):
        self.closed = True


@pytest.fixture
def ai_service():
    return FakeAIService()


@pytest.fixture
def image_fetcher():
    return FakeFetcher(IMAGE_URI, name='pollinations')


@pytest.fixture
def audio_fetcher():
    return FakeFetcher(AUDIO_B64, name='edge_tts')


@pytest.fixture
def media_service(tmp_path, image_fetcher, audio_fetcher):
    return MediaService(
        media_dir=str(tmp_path / 'media'),
        image_fetcher=image_fetcher,
        audio_fetcher=audio_fetcher,
    )


@pytest.fixture
def orchestrator(ai_service, media_service):
    return SearchOrchestrator(
        ai_service=ai_service,
        media_service=media_service,
        error_message='Search failed',
    )


@pytest.fixture
def make_word():
    def _make(english='apple', audio=AUDIO_B64):
        return Word.create(english, APPLE_INFO, IMAGE_URI, audio)
    return _make


@pytest.fixture
def repository():
    return MemoryRepository(key='lingosnap_saved_words')


@pytest.fixture
def collection(repository):
    store = SavedCollection(repository)
    store.load()
    return store


@pytest.fixture
def provider_error():
    return ProviderError('upstream failure', provider='fake')
