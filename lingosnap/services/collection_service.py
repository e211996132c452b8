"""
Collection Service - the saved words store.

Keeps the saved collection in memory, most recently saved first, and
persists the whole collection through a repository after every mutation.
"""

from typing import Callable, Iterable, List, Optional

from ..errors import DuplicateWordError, PersistenceReadError, PersistenceWriteError
from ..models import Word
from ..utils import setup_logger
from ..utils.parsing import TextParser
from .repository import BaseRepository, create_repository

logger = setup_logger(__name__)


class SavedCollection:
    """
    Store for the words the user chose to keep.

    Single-writer: mutations are read-modify-persist sequences and are only
    safe from one event loop at a time.

    Usage:
        collection = SavedCollection(JSONFileRepository("saved.json"))
        collection.load()
        collection.add(word)
        collection.list()
    """

    def __init__(self, repository: Optional[BaseRepository] = None):
        """
        Initialize the store.

        Args:
            repository: Persistence backend (defaults to Config.STORAGE_BACKEND)
        """
        self._repository = repository or create_repository()
        self._words: List[Word] = []
        self._change_callbacks: List[Callable[[], None]] = []

    @property
    def count(self) -> int:
        return len(self._words)

    def on_change(self, callback: Callable[[], None]) -> None:
        """
        Register a callback for data changes.

        Args:
            callback: Function to call after every successful mutation
        """
        self._change_callbacks.append(callback)

    def _notify_change(self) -> None:
        for callback in self._change_callbacks:
            try:
                callback()
            except Exception:
                logger.exception("Collection change callback failed")

    def load(self) -> int:
        """
        Load the persisted snapshot.

        A missing or corrupt snapshot yields an empty collection; malformed
        individual records are skipped.

        Returns:
            Number of words loaded
        """
        try:
            records = self._repository.load()
        except PersistenceReadError as e:
            logger.warning("Saved words snapshot unreadable, starting empty: %s", e)
            records = None

        words: List[Word] = []
        seen = set()
        seen_ids = set()
        for record in records or []:
            try:
                word = Word.from_dict(record)
            except (ValueError, TypeError) as e:
                logger.warning("Skipping malformed saved word: %s", e)
                continue
            if word.english in seen:
                logger.warning("Skipping duplicate saved word %r", word.english)
                continue
            if word.id in seen_ids:
                logger.warning("Skipping saved word %r with duplicate id %s", word.english, word.id)
                continue
            seen.add(word.english)
            seen_ids.add(word.id)
            words.append(word)

        self._words = words
        logger.info("Loaded %d saved word(s)", len(words))
        return len(words)

    def _persist(self, words: List[Word]) -> None:
        self._repository.save([w.to_dict() for w in words])

    def _commit(self, words: List[Word]) -> None:
        """Persist then swap in the new list, leaving state untouched on failure."""
        try:
            self._persist(words)
        except PersistenceWriteError:
            logger.exception("Failed to persist saved words")
            raise
        self._words = words
        self._notify_change()

    def contains(self, english: str) -> bool:
        """Check whether a word with this English text is saved (case-insensitive)."""
        key = TextParser.normalize_query(english)
        return any(w.english == key for w in self._words)

    def get(self, word_id: str) -> Optional[Word]:
        return next((w for w in self._words if w.id == word_id), None)

    def add(self, word: Word) -> None:
        """
        Save a word at the front of the collection.

        Raises:
            DuplicateWordError: If the English text is already saved
            PersistenceWriteError: If the snapshot cannot be written
        """
        if self.contains(word.english):
            raise DuplicateWordError(word.english)

        self._commit([word] + self._words)
        logger.info("Saved word %r", word.english)

    def remove(self, word_id: str) -> bool:
        """
        Remove the word with this id.

        Returns:
            True if a word was removed, False if the id was not present

        Raises:
            PersistenceWriteError: If the snapshot cannot be written
        """
        remaining = [w for w in self._words if w.id != word_id]
        if len(remaining) == len(self._words):
            return False

        self._commit(remaining)
        logger.info("Removed word %s", word_id)
        return True

    def list(self) -> List[Word]:
        """All saved words, most recently saved first."""
        return list(self._words)

    def ids(self) -> List[str]:
        return [w.id for w in self._words]

    def select_for_print(self, ids: Iterable[str]) -> List[Word]:
        """
        Words whose id is in ids, in collection order.

        An empty selection returns an empty list; callers wanting "print all"
        pass every id.
        """
        wanted = set(ids)
        return [w for w in self._words if w.id in wanted]
