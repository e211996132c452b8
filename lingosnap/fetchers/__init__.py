"""Fetchers module - media providers (image generation, speech synthesis)."""

from .base import BaseFetcher
from .audio import AudioFetcher
from .images import ImageFetcher, detect_image_format

__all__ = [
    'BaseFetcher',
    'AudioFetcher',
    'ImageFetcher',
    'detect_image_format',
]
