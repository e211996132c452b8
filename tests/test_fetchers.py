import asyncio
import base64

import pytest

from lingosnap.errors import ProviderError
from lingosnap.fetchers import AudioFetcher, ImageFetcher, detect_image_format
from lingosnap.fetchers.images import IMAGE_PROMPT_TEMPLATE

from conftest import PNG_BYTES


def test_detect_image_format():
    assert detect_image_format(b'\xff\xd8\xff\xe0' + b'\x00' * 10) == 'jpeg'
    assert detect_image_format(PNG_BYTES) == 'png'
    assert detect_image_format(b'GIF89a' + b'\x00' * 10) == 'gif'
    assert detect_image_format(b'RIFF\x00\x00\x00\x00WEBPVP8 ') == 'webp'
    assert detect_image_format(b'<html>error</html>') is None
    assert detect_image_format(b'') is None


def test_image_fetch_returns_data_uri(monkeypatch):
    fetcher = ImageFetcher(api_key='sk-test', size=512)
    requested = []

    async def fake_download(prompt):
        requested.append(prompt)
        return PNG_BYTES

    monkeypatch.setattr(fetcher, '_download', fake_download)

    uri = asyncio.run(fetcher.fetch(' a red apple '))

    assert uri.startswith('data:image/png;base64,')
    assert base64.b64decode(uri.split(',', 1)[1]) == PNG_BYTES
    assert requested == [IMAGE_PROMPT_TEMPLATE.format(prompt='a red apple')]


def test_image_fetch_rejects_non_image(monkeypatch):
    fetcher = ImageFetcher(api_key='sk-test')

    async def fake_download(prompt):
        return b'{"error": "rate limited"}'

    monkeypatch.setattr(fetcher, '_download', fake_download)

    with pytest.raises(ProviderError) as exc:
        asyncio.run(fetcher.fetch('a red apple'))

    assert exc.value.provider == 'pollinations'


def test_image_fetch_requires_key():
    with pytest.raises(ProviderError):
        asyncio.run(ImageFetcher(api_key='').fetch('a red apple'))


class FakeCommunicate:
    chunks = [
        {'type': 'WordBoundary', 'offset': 0},
        {'type': 'audio', 'data': b'\x01' * 80},
        {'type': 'audio', 'data': b'\x02' * 80},
    ]

    def __init__(self, text, voice, volume='+0%'):
        FakeCommunicate.last = (text, voice, volume)

    async def stream(self):
        for chunk in self.chunks:
            yield chunk


def test_audio_fetch_collects_audio_chunks(monkeypatch):
    monkeypatch.setattr('lingosnap.fetchers.audio.edge_tts.Communicate', FakeCommunicate)

    payload = asyncio.run(AudioFetcher(voice='en-US-AriaNeural').fetch('<b>Apple</b>'))

    assert base64.b64decode(payload) == b'\x01' * 80 + b'\x02' * 80
    assert FakeCommunicate.last == ('Apple', 'en-US-AriaNeural', '+0%')


def test_audio_fetch_wraps_failures(monkeypatch):
    class BrokenCommunicate(FakeCommunicate):
        async def stream(self):
            raise ConnectionError('no route')
            yield

    monkeypatch.setattr('lingosnap.fetchers.audio.edge_tts.Communicate', BrokenCommunicate)

    with pytest.raises(ProviderError) as exc:
        asyncio.run(AudioFetcher().fetch('apple'))

    assert exc.value.provider == 'edge_tts'


def test_audio_fetch_rejects_empty_text():
    with pytest.raises(ProviderError):
        asyncio.run(AudioFetcher().fetch('   '))
