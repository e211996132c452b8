import json
from dataclasses import replace

import pytest

from lingosnap.config import LANG_CONFIG
from lingosnap.errors import DuplicateWordError, PersistenceWriteError
from lingosnap.services import JSONFileRepository, MemoryRepository, SavedCollection, SQLiteRepository
from lingosnap.templates import PrintTemplates


def test_add_prepends_and_persists(collection, repository, make_word):
    apple = make_word('apple')
    pear = make_word('pear')

    collection.add(apple)
    collection.add(pear)

    assert [w.english for w in collection.list()] == ['pear', 'apple']
    stored = json.loads(repository.raw)
    assert [r['english'] for r in stored] == ['pear', 'apple']


def test_duplicate_is_rejected_case_insensitively(collection, make_word):
    collection.add(make_word('apple'))

    with pytest.raises(DuplicateWordError) as exc:
        collection.add(make_word('APPLE'))

    assert exc.value.english == 'apple'
    assert collection.count == 1
    assert collection.contains('  Apple ')


def test_remove_is_idempotent(collection, make_word):
    apple = make_word('apple')
    collection.add(apple)

    assert collection.remove(apple.id) is True
    assert collection.remove(apple.id) is False
    assert collection.list() == []
    assert not collection.contains('apple')


def test_select_for_print_keeps_collection_order(collection, make_word):
    words = [make_word(e) for e in ('apple', 'pear', 'plum')]
    for word in words:
        collection.add(word)

    selected = collection.select_for_print([words[0].id, words[2].id, 'missing'])

    assert [w.english for w in selected] == ['plum', 'apple']
    assert collection.select_for_print([]) == []


def test_list_returns_a_copy(collection, make_word):
    collection.add(make_word('apple'))
    collection.list().clear()
    assert collection.count == 1


def test_on_change_fires_after_mutations(collection, make_word):
    events = []
    collection.on_change(lambda: events.append(collection.count))

    apple = make_word('apple')
    collection.add(apple)
    collection.remove(apple.id)
    collection.remove(apple.id)

    assert events == [1, 0]


def test_failing_callback_does_not_break_store(collection, make_word):
    def broken():
        raise RuntimeError('listener bug')

    collection.on_change(broken)
    collection.add(make_word('apple'))

    assert collection.count == 1


class FailingRepository(MemoryRepository):
    def save(self, records):
        raise PersistenceWriteError('disk full')


def test_write_failure_leaves_collection_unchanged(make_word):
    collection = SavedCollection(FailingRepository())
    collection.load()

    with pytest.raises(PersistenceWriteError):
        collection.add(make_word('apple'))

    assert collection.count == 0
    assert not collection.contains('apple')


def test_corrupt_snapshot_loads_empty():
    collection = SavedCollection(MemoryRepository(initial='{not json'))

    assert collection.load() == 0
    assert collection.list() == []


def test_malformed_records_are_skipped(make_word):
    good = make_word('apple').to_dict()
    bad = {'id': 'x', 'english': 'pear'}
    repo = MemoryRepository(initial=json.dumps([good, bad, 'garbage']))

    collection = SavedCollection(repo)

    assert collection.load() == 1
    assert collection.list()[0].english == 'apple'


@pytest.mark.parametrize('field, value', [
    ('meaning', 5),
    ('image_url', ['x']),
    ('english', '   '),
    ('audio_base64', {'data': 'x'}),
    ('created_at', 'yesterday'),
])
def test_records_with_wrong_field_types_are_skipped(make_word, field, value):
    bad = make_word('pear').to_dict()
    bad[field] = value
    repo = MemoryRepository(initial=json.dumps([bad, make_word('apple').to_dict()]))

    collection = SavedCollection(repo)

    assert collection.load() == 1
    words = collection.list()
    assert words[0].english == 'apple'
    # Loaded words must render
    PrintTemplates.render_document(words, LANG_CONFIG['FA'])


def test_records_with_duplicate_ids_are_skipped(make_word):
    apple = make_word('apple')
    pear = replace(make_word('pear'), id=apple.id)
    repo = MemoryRepository(initial=json.dumps([apple.to_dict(), pear.to_dict()]))

    collection = SavedCollection(repo)

    assert collection.load() == 1
    assert collection.remove(apple.id) is True
    assert collection.count == 0


def test_json_file_round_trip(tmp_path, make_word):
    path = tmp_path / 'saved_words.json'
    first = SavedCollection(JSONFileRepository(str(path), key='lingosnap_saved_words'))
    first.load()
    apple = make_word('apple')
    first.add(apple)
    first.add(make_word('pear'))

    document = json.loads(path.read_text(encoding='utf-8'))
    assert list(document) == ['lingosnap_saved_words']

    second = SavedCollection(JSONFileRepository(str(path), key='lingosnap_saved_words'))
    assert second.load() == 2
    assert [w.english for w in second.list()] == ['pear', 'apple']
    assert second.get(apple.id) == apple


def test_json_file_corrupt_loads_empty(tmp_path):
    path = tmp_path / 'saved_words.json'
    path.write_text('[[[', encoding='utf-8')

    collection = SavedCollection(JSONFileRepository(str(path)))

    assert collection.load() == 0


def test_sqlite_round_trip(tmp_path, make_word):
    db = tmp_path / 'lingosnap.db'
    first = SavedCollection(SQLiteRepository(str(db)))
    first.load()
    apple = make_word('apple')
    first.add(apple)

    second = SavedCollection(SQLiteRepository(str(db)))
    assert second.load() == 1
    assert second.list()[0] == apple


def test_missing_snapshot_is_empty(tmp_path):
    assert JSONFileRepository(str(tmp_path / 'none.json')).load() is None
    assert SQLiteRepository(str(tmp_path / 'none.db')).load() is None
