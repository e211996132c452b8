"""
Media path generation utilities - Single source of truth for file naming.

Used by the media service, the print service and the UI.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import Config


class MediaPathGenerator:
    """
    Centralized media file path generator.

    Ensures consistent naming conventions across the application.
    """

    AUDIO_EXT = ".mp3"
    PRINT_EXT = ".html"

    AUDIO_PREFIX = "_word_"

    @classmethod
    def audio_word(cls, word_id: str) -> str:
        """
        Generate filename for word audio.

        Returns:
            Filename like "_word_3f2a...mp3"
        """
        return f"{cls.AUDIO_PREFIX}{word_id}{cls.AUDIO_EXT}"

    @classmethod
    def word_id_from_audio(cls, filename: str) -> Optional[str]:
        """Recover the word id from an audio filename, or None if it is not one."""
        name = Path(filename).name
        if not name.startswith(cls.AUDIO_PREFIX) or not name.endswith(cls.AUDIO_EXT):
            return None
        return name[len(cls.AUDIO_PREFIX):-len(cls.AUDIO_EXT)] or None

    @classmethod
    def audio_word_path(cls, word_id: str, media_dir: Optional[str] = None) -> Path:
        """Full path for word audio."""
        return Path(media_dir or Config.MEDIA_DIR) / cls.audio_word(word_id)

    @classmethod
    def print_document_path(cls, output_dir: Optional[str] = None, now: Optional[datetime] = None) -> Path:
        """Full path for a print document, timestamped to the second."""
        stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
        return Path(output_dir or Config.OUTPUT_DIR) / f"lingosnap_words_{stamp}{cls.PRINT_EXT}"
