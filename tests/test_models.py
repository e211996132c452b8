from datetime import datetime

import pytest

from lingosnap.errors import ProviderError
from lingosnap.models import Word, WordInfo
from lingosnap.utils import MediaPathGenerator, TextParser


def test_word_info_accepts_snake_case_keys():
    info = WordInfo.from_payload({
        'meaning': 'Apfel',
        'phonetic': 'ˈæp.əl',
        'illustration_prompt': 'a red apple',
        'example_sentence': 'An apple a day.',
        'example_translation': 'Ein Apfel am Tag.',
    })

    assert info.meaning == 'Apfel'
    assert info.example_translation == 'Ein Apfel am Tag.'


def test_word_info_rejects_blank_fields():
    payload = {
        'meaning': ' ',
        'phonetic': 'x',
        'illustrationPrompt': 'x',
        'exampleSentence': 'x',
        'exampleTranslation': 'x',
    }
    with pytest.raises(ProviderError) as exc:
        WordInfo.from_payload(payload, provider='openai')

    assert 'meaning' in str(exc.value)
    assert exc.value.provider == 'openai'

    with pytest.raises(ProviderError):
        WordInfo.from_payload(['not', 'an', 'object'])


def test_word_create_normalizes_english(make_word):
    word = make_word('  Ice   Cream ')

    assert word.english == 'ice cream'
    assert len(word.id) == 32
    assert word.has_audio


def test_word_from_dict_round_trip(make_word):
    word = make_word('apple')
    data = word.to_dict()
    data['unknown_field'] = 'ignored'

    assert Word.from_dict(data) == word


def test_word_from_dict_requires_fields(make_word):
    data = make_word('apple').to_dict()
    del data['image_url']

    with pytest.raises(ValueError):
        Word.from_dict(data)

    legacy = make_word('apple', audio=None).to_dict()
    legacy.pop('audio_base64')
    assert Word.from_dict(legacy).audio_base64 is None


def test_normalize_query():
    assert TextParser.normalize_query('  Apple   Pie\t') == 'apple pie'
    assert TextParser.normalize_query('   ') == ''
    assert TextParser.normalize_query(None) == ''


def test_extract_json_variants():
    assert TextParser.extract_json('{"a": 1}') == {'a': 1}
    assert TextParser.extract_json('```json\n{"a": 1}\n```') == {'a': 1}
    assert TextParser.extract_json('Here you go: {"a": 1} Enjoy!') == {'a': 1}

    with pytest.raises(ValueError):
        TextParser.extract_json('no json here')
    with pytest.raises(ValueError):
        TextParser.extract_json('')


def test_clean_for_tts():
    assert TextParser.clean_for_tts('<i>hello</i>&amp;  bye') == 'hello& bye'


def test_media_paths():
    assert MediaPathGenerator.audio_word('abc') == '_word_abc.mp3'
    assert MediaPathGenerator.word_id_from_audio('/x/_word_abc.mp3') == 'abc'
    assert MediaPathGenerator.word_id_from_audio('cover.png') is None

    path = MediaPathGenerator.print_document_path('/out', now=datetime(2024, 5, 1, 9, 30, 5))
    assert path.name == 'lingosnap_words_20240501_093005.html'
