"""UI components for LingoSnap."""

from .theme import DesignTokens, show_snackbar, show_notice_dialog
from .audio_player import AudioPlayer
from .word_card import WordCard, image_source
from .search_view import SearchView
from .saved_view import SavedWordsView

__all__ = [
    'DesignTokens',
    'show_snackbar',
    'show_notice_dialog',
    'AudioPlayer',
    'WordCard',
    'image_source',
    'SearchView',
    'SavedWordsView',
]
