"""Word card models."""

import time
import uuid
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from ..errors import ProviderError
from ..utils.parsing import TextParser


@dataclass(frozen=True)
class WordInfo:
    """Structured reply of the Word Info provider."""

    meaning: str
    phonetic: str
    illustration_prompt: str
    example_sentence: str
    example_translation: str

    # Payload key (as requested from the model) -> field name
    PAYLOAD_KEYS = {
        "meaning": "meaning",
        "phonetic": "phonetic",
        "illustrationPrompt": "illustration_prompt",
        "exampleSentence": "example_sentence",
        "exampleTranslation": "example_translation",
    }

    @classmethod
    def from_payload(cls, payload: Any, provider: Optional[str] = None) -> "WordInfo":
        """
        Validate a provider payload and build a WordInfo.

        Keys are accepted in camelCase (as requested) or snake_case.
        All five fields are required and must be non-blank strings.

        Raises:
            ProviderError: If the payload is not an object or a field is missing
        """
        if not isinstance(payload, dict):
            raise ProviderError(
                f"Word info payload must be an object, got {type(payload).__name__}",
                provider=provider,
            )

        values: Dict[str, str] = {}
        missing = []
        for key, field_name in cls.PAYLOAD_KEYS.items():
            value = payload.get(key, payload.get(field_name))
            if not isinstance(value, str) or not value.strip():
                missing.append(key)
                continue
            values[field_name] = TextParser.normalize_unicode(value.strip())

        if missing:
            raise ProviderError(
                f"Word info payload missing fields: {', '.join(missing)}",
                provider=provider,
            )
        return cls(**values)


@dataclass(frozen=True)
class Word:
    """A single vocabulary entry shown as a word card."""

    id: str
    english: str
    meaning: str
    phonetic: str
    image_url: str
    example_sentence: str
    example_translation: str
    created_at: float
    audio_base64: Optional[str] = None

    REQUIRED_FIELDS = (
        "id", "english", "meaning", "phonetic", "image_url",
        "example_sentence", "example_translation", "created_at",
    )

    @classmethod
    def create(
        cls,
        query: str,
        info: WordInfo,
        image_url: str,
        audio_base64: Optional[str],
    ) -> "Word":
        """Assemble a fresh Word with a new id and the current timestamp."""
        return cls(
            id=uuid.uuid4().hex,
            english=TextParser.normalize_query(query),
            meaning=info.meaning,
            phonetic=info.phonetic,
            image_url=image_url,
            example_sentence=info.example_sentence,
            example_translation=info.example_translation,
            created_at=time.time(),
            audio_base64=audio_base64,
        )

    @property
    def has_audio(self) -> bool:
        return bool(self.audio_base64)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Word":
        """
        Rebuild a Word from its persisted form.

        Raises:
            ValueError: If the record is not an object, lacks a required field
                or holds a field of the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"Word record must be an object, got {type(data).__name__}")

        missing = [name for name in cls.REQUIRED_FIELDS if data.get(name) in (None, "")]
        if missing:
            raise ValueError(f"Word record missing fields: {', '.join(missing)}")

        wrong_type = [
            name for name in cls.REQUIRED_FIELDS
            if name != "created_at" and not isinstance(data[name], str)
        ]
        if data.get("audio_base64") is not None and not isinstance(data["audio_base64"], str):
            wrong_type.append("audio_base64")
        if isinstance(data["created_at"], bool) or not isinstance(data["created_at"], (int, float, str)):
            wrong_type.append("created_at")
        if wrong_type:
            raise ValueError(f"Word record has fields of the wrong type: {', '.join(wrong_type)}")

        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values["created_at"] = float(values["created_at"])
        values["english"] = TextParser.normalize_query(values["english"])
        if not values["english"]:
            raise ValueError("Word record has a blank english field")
        return cls(**values)
