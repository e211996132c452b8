"""Data models for LingoSnap."""

from .word import Word, WordInfo

__all__ = ['Word', 'WordInfo']
