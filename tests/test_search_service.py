import asyncio

import pytest

from lingosnap.errors import DuplicateWordError, InputError, ProviderError

from conftest import AUDIO_B64, IMAGE_URI, FakeAIService


def test_search_builds_complete_word(orchestrator, ai_service, image_fetcher, audio_fetcher):
    word = asyncio.run(orchestrator.search('  Apple '))

    assert word.english == 'apple'
    assert word.meaning == 'سیب'
    assert word.phonetic == 'اَپِل'
    assert word.image_url == IMAGE_URI
    assert word.audio_base64 == AUDIO_B64
    assert word.id and word.created_at > 0

    assert ai_service.calls == ['apple']
    assert image_fetcher.calls == ['a red apple']
    # Speech gets the trimmed query as typed
    assert audio_fetcher.calls == ['Apple']


def test_blank_query_calls_no_provider(orchestrator, ai_service, image_fetcher):
    with pytest.raises(InputError):
        asyncio.run(orchestrator.search('   '))

    assert asyncio.run(orchestrator.run('\t ')) is None
    assert ai_service.calls == []
    assert image_fetcher.calls == []
    assert orchestrator.latest_sequence == 0


def test_word_info_failure_skips_media(orchestrator, ai_service, image_fetcher, audio_fetcher, provider_error):
    ai_service.error = provider_error

    outcome = asyncio.run(orchestrator.run('apple'))

    assert not outcome.ok
    assert outcome.word is None
    assert outcome.error == 'Search failed'
    assert image_fetcher.calls == []
    assert audio_fetcher.calls == []


def test_word_info_failure_is_tagged_with_stage(orchestrator, ai_service, provider_error):
    ai_service.error = provider_error

    with pytest.raises(ProviderError) as exc:
        asyncio.run(orchestrator.search('apple'))

    assert exc.value.stage == 'word_info'
    assert exc.value.provider == 'fake'


def test_image_failure_fails_search_and_cancels_speech(orchestrator, image_fetcher, audio_fetcher):
    image_fetcher.error = ProviderError('Image API error 500', provider='pollinations')
    audio_fetcher.delay = 5

    async def scenario():
        with pytest.raises(ProviderError) as exc:
            await orchestrator.search('apple')
        await asyncio.sleep(0)
        return exc.value

    error = asyncio.run(scenario())

    assert error.stage == 'media'
    assert error.provider == 'pollinations'
    assert audio_fetcher.cancelled


def test_speech_failure_yields_generic_error(orchestrator, audio_fetcher):
    audio_fetcher.error = ProviderError('no audio', provider='edge_tts')

    outcome = asyncio.run(orchestrator.run('apple'))

    assert outcome.error == 'Search failed'
    assert outcome.word is None


def test_unexpected_exception_becomes_provider_error(orchestrator, ai_service):
    ai_service.error = RuntimeError('boom')

    with pytest.raises(ProviderError) as exc:
        asyncio.run(orchestrator.search('apple'))

    assert exc.value.stage == 'word_info'


def test_superseded_search_is_marked_stale(media_service):
    from lingosnap.services import SearchOrchestrator

    ai = FakeAIService(delays={'apple': 0.2})
    orchestrator = SearchOrchestrator(ai_service=ai, media_service=media_service, error_message='x')

    async def scenario():
        return await asyncio.gather(orchestrator.run('apple'), orchestrator.run('banana'))

    first, second = asyncio.run(scenario())

    assert first.sequence == 1 and first.stale
    assert second.sequence == 2 and not second.stale
    assert second.word.english == 'banana'


def test_stage_timeout(media_service):
    from lingosnap.services import SearchOrchestrator

    ai = FakeAIService(delays={'apple': 1})
    orchestrator = SearchOrchestrator(ai_service=ai, media_service=media_service, timeout=0.05, error_message='x')

    with pytest.raises(ProviderError) as exc:
        asyncio.run(orchestrator.search('apple'))

    assert exc.value.stage == 'word_info'
    assert 'timed out' in str(exc.value)


def test_searched_word_is_saved_once(orchestrator, collection):
    word = asyncio.run(orchestrator.search('apple'))

    collection.add(word)
    assert [w.english for w in collection.list()] == ['apple']

    with pytest.raises(DuplicateWordError):
        collection.add(asyncio.run(orchestrator.search('Apple')))
    assert len(collection.list()) == 1


@pytest.mark.parametrize('failing', ['word_info', 'image', 'speech'])
def test_failed_search_leaves_collection_unchanged(
    orchestrator, collection, ai_service, image_fetcher, audio_fetcher, make_word, failing
):
    existing = make_word('pear')
    collection.add(existing)
    error = ProviderError('upstream failure', provider='fake')
    if failing == 'word_info':
        ai_service.error = error
    elif failing == 'image':
        image_fetcher.error = error
    else:
        audio_fetcher.error = error

    outcome = asyncio.run(orchestrator.run('apple'))

    assert outcome.word is None
    assert collection.list() == [existing]
    assert not collection.contains('apple')


def test_close_releases_providers(orchestrator, ai_service, image_fetcher, audio_fetcher):
    asyncio.run(orchestrator.close())

    assert ai_service.closed
    assert image_fetcher.closed and audio_fetcher.closed
