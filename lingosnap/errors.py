"""Exception hierarchy for LingoSnap."""

from typing import Optional


class LingoSnapError(Exception):
    """Base class for all LingoSnap errors."""


class InputError(LingoSnapError):
    """Search query is empty after trimming."""


class ProviderError(LingoSnapError):
    """
    An external provider call failed, timed out, or returned a malformed payload.

    Attributes:
        provider: Name of the provider that failed (e.g. "gemini", "pollinations")
        stage: Search stage the failure happened in ("word_info", "media")
    """

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        stage: Optional[str] = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.stage = stage


class DuplicateWordError(LingoSnapError):
    """A word with the same normalized English text is already saved."""

    def __init__(self, english: str):
        super().__init__(f"Word already saved: {english!r}")
        self.english = english


class PersistenceReadError(LingoSnapError):
    """The persisted snapshot is corrupt or unreadable."""


class PersistenceWriteError(LingoSnapError):
    """The collection snapshot could not be written."""
