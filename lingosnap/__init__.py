"""LingoSnap - AI-illustrated English vocabulary cards"""

__version__ = "1.0.0"
__author__ = "LingoSnap Team"

from .config import Config, LANG_CONFIG
from .models import Word, WordInfo
from .templates import PrintTemplates
from .fetchers import AudioFetcher, ImageFetcher
from .services import SavedCollection, SearchOrchestrator

__all__ = [
    'Config',
    'LANG_CONFIG',
    'Word',
    'WordInfo',
    'PrintTemplates',
    'AudioFetcher',
    'ImageFetcher',
    'SavedCollection',
    'SearchOrchestrator',
]
