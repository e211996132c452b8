"""Global settings and configuration."""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

from .languages import DEFAULT_LANG, LANG_CONFIG

# Load from project root
_env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(_env_path)


def _optional_float(name: str) -> Optional[float]:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


# Current target language for translations and UI strings
CURRENT_LANG = os.environ.get("LINGOSNAP_LANG", DEFAULT_LANG).upper()
if CURRENT_LANG not in LANG_CONFIG:
    CURRENT_LANG = DEFAULT_LANG


class Config:
    """Application-wide configuration."""

    settings = LANG_CONFIG[CURRENT_LANG]

    # Language parameters
    CURRENT_LANG: str = CURRENT_LANG
    TARGET_LANGUAGE: str = settings["name"]
    DIRECTION: str = settings["direction"]

    # Word Info provider (LLM)
    # Keys belong in the environment or .env, never in source code.
    AI_PROVIDER: str = os.environ.get("AI_PROVIDER", "gemini").lower()
    AI_MODEL: str = os.environ.get("AI_MODEL", "")
    AI_BASE_URL: str = os.environ.get("AI_BASE_URL", "")
    AI_TEMPERATURE: float = float(os.environ.get("AI_TEMPERATURE", "0.7"))

    # Image provider (Pollinations)
    # Get your API key from https://enter.pollinations.ai/
    POLLINATIONS_API_KEY: str = os.environ.get("POLLINATIONS_API_KEY", "")
    POLLINATIONS_API_URL: str = "https://gen.pollinations.ai/image"
    POLLINATIONS_IMAGE_MODEL: str = os.environ.get("POLLINATIONS_IMAGE_MODEL", "zimage")
    IMAGE_SIZE: int = int(os.environ.get("IMAGE_SIZE", "512"))  # square

    # Speech provider (Edge TTS)
    VOICE: str = os.environ.get("LINGOSNAP_VOICE", "en-US-AriaNeural")

    # Timeouts (seconds)
    TIMEOUT: int = 60
    IMAGE_TIMEOUT: int = 90
    SEARCH_TIMEOUT: Optional[float] = _optional_float("SEARCH_TIMEOUT")

    # BASE_DIR is the project root (parent of lingosnap/)
    BASE_DIR: Path = Path(__file__).parent.parent.parent.resolve()

    DATA_DIR: str = os.environ.get("LINGOSNAP_DATA_DIR", str(BASE_DIR / "data"))
    MEDIA_DIR: str = str(Path(DATA_DIR) / "media")
    OUTPUT_DIR: str = str(Path(DATA_DIR) / "output")

    # Saved collection persistence
    STORAGE_BACKEND: str = os.environ.get("LINGOSNAP_STORAGE", "json").lower()  # json | sqlite
    STORAGE_KEY: str = "lingosnap_saved_words"
    STORAGE_FILE: str = str(Path(DATA_DIR) / "saved_words.json")
    STORAGE_DB: str = str(Path(DATA_DIR) / "lingosnap.db")

    # Logging
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = os.environ.get("LOG_FILE", "")

    @classmethod
    def messages(cls) -> Dict[str, str]:
        """User-facing strings for the current target language."""
        return cls.settings["messages"]
