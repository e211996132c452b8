"""Configuration module for LingoSnap."""

from .settings import Config
from .languages import DEFAULT_LANG, LANG_CONFIG

__all__ = [
    'Config',
    'DEFAULT_LANG',
    'LANG_CONFIG',
]
