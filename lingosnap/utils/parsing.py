"""Text parsing utilities for consistent text processing across the application."""

import json
import re
import unicodedata
from typing import Any


class TextParser:
    """
    Centralized text parsing utilities.

    Single source of truth for query normalization, TTS cleanup and
    extraction of JSON documents from LLM replies.
    """

    # HTML tag removal pattern
    HTML_TAG_PATTERN = re.compile(r'<[^>]+>')

    # Whitespace normalization pattern
    WHITESPACE_PATTERN = re.compile(r'\s+')

    # ```json ... ``` fence around a model reply
    CODE_FENCE_PATTERN = re.compile(r'^```[a-zA-Z]*\s*(.*?)\s*```$', re.DOTALL)

    @classmethod
    def normalize_unicode(cls, text: str) -> str:
        """
        Normalize text to NFC form for consistent Unicode handling.

        Args:
            text: Input text

        Returns:
            NFC-normalized text
        """
        if not text:
            return ""
        return unicodedata.normalize('NFC', str(text))

    @classmethod
    def normalize_query(cls, text: str) -> str:
        """
        Normalize a search query into the dedup key form.

        Trims, collapses inner whitespace, lowercases and NFC-normalizes.
        Returns an empty string for blank input.
        """
        if not text:
            return ""
        text = cls.WHITESPACE_PATTERN.sub(' ', str(text)).strip()
        return cls.normalize_unicode(text.lower())

    @classmethod
    def clean_for_tts(cls, text: str) -> str:
        """
        Clean text for TTS processing.

        Removes HTML, normalizes whitespace.

        Args:
            text: Raw text

        Returns:
            Cleaned text ready for TTS
        """
        import html

        if not text:
            return ""

        text = html.unescape(str(text))
        text = cls.HTML_TAG_PATTERN.sub('', text)
        text = cls.WHITESPACE_PATTERN.sub(' ', text).strip()
        return cls.normalize_unicode(text)

    @classmethod
    def extract_json(cls, text: str) -> Any:
        """
        Parse a JSON document out of a model reply.

        Accepts bare JSON or JSON wrapped in a markdown code fence; falls back
        to the outermost {...} span when the model added prose around it.

        Raises:
            ValueError: If no JSON document can be parsed
        """
        if not text or not str(text).strip():
            raise ValueError("Empty response")

        text = str(text).strip()
        fence = cls.CODE_FENCE_PATTERN.match(text)
        if fence:
            text = fence.group(1)

        try:
            return json.loads(text)
        except json.JSONDecodeError:
            start, end = text.find('{'), text.rfind('}')
            if start == -1 or end <= start:
                raise ValueError("No JSON object in response")
            try:
                return json.loads(text[start:end + 1])
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in response: {e}") from e
