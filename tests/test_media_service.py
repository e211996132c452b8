import asyncio
import base64

import pytest

from lingosnap.errors import ProviderError
from lingosnap.utils import MediaPathGenerator

from conftest import AUDIO_BYTES, AUDIO_B64, IMAGE_URI


def test_generate_media_joins_both_results(media_service):
    image_url, audio = asyncio.run(media_service.generate_media('a red apple', 'apple'))

    assert image_url == IMAGE_URI
    assert audio == AUDIO_B64


def test_generate_media_fails_fast(media_service, image_fetcher, audio_fetcher):
    audio_fetcher.error = ProviderError('tts down', provider='edge_tts')
    image_fetcher.delay = 5

    async def scenario():
        with pytest.raises(ProviderError):
            await media_service.generate_media('a red apple', 'apple')
        await asyncio.sleep(0)

    asyncio.run(scenario())

    assert image_fetcher.cancelled


def test_write_audio_file_decodes_payload(media_service, make_word):
    word = make_word('apple')

    path = media_service.write_audio_file(word)

    assert path == media_service.get_audio_path(word.id)
    assert path.read_bytes() == AUDIO_BYTES
    # Second call reuses the file
    assert media_service.write_audio_file(word) == path


def test_write_audio_file_without_payload(media_service, make_word):
    assert media_service.write_audio_file(make_word('apple', audio=None)) is None
    assert media_service.write_audio_file(make_word('pear', audio='%%%not-base64')) is None
    assert media_service.get_all_audio_files() == []


def test_cleanup_orphaned_files(media_service, make_word):
    keep = make_word('apple')
    drop = make_word('pear')
    media_service.write_audio_file(keep)
    media_service.write_audio_file(drop)
    unrelated = media_service.media_dir / 'notes.txt'
    unrelated.write_text('keep me')

    removed = media_service.cleanup_orphaned_files([keep.id])

    assert removed == 1
    assert [p.name for p in media_service.get_all_audio_files()] == [MediaPathGenerator.audio_word(keep.id)]
    assert unrelated.exists()


def test_audio_payload_is_valid_base64():
    assert base64.b64decode(AUDIO_B64) == AUDIO_BYTES
