"""Pronunciation playback for word cards."""

import dataclasses
import os
import platform
import subprocess
from typing import Optional

import flet as ft
import flet_audio as fta

from ..errors import ProviderError
from ..models import Word
from ..services import MediaService
from ..utils import setup_logger

logger = setup_logger(__name__)


class AudioPlayer:
    """
    Plays the stored speech payload of a word.

    Words without a payload are synthesized on demand through the speech
    provider before playing.
    """

    def __init__(self, page: ft.Page, media_service: MediaService) -> None:
        self.page = page
        self.media_service = media_service
        self._audio_player: Optional[fta.Audio] = None

    async def play(self, word: Word) -> bool:
        """Play a word's pronunciation. Returns False if nothing could be played."""
        if not word.has_audio:
            try:
                payload = await self.media_service.generate_speech(word.english)
            except ProviderError as e:
                logger.error("On-demand speech for %r failed: %s", word.english, e)
                return False
            word = dataclasses.replace(word, audio_base64=payload)

        path = self.media_service.write_audio_file(word)
        if path is None:
            return False
        self._play_audio_file(str(path))
        return True

    def _play_audio_file(self, file_path: str) -> None:
        """Play an audio file using Flet's Audio control."""
        abs_path = os.path.abspath(file_path)
        try:
            # Remove existing audio player if any
            if self._audio_player and self._audio_player in self.page.overlay:
                self.page.overlay.remove(self._audio_player)

            self._audio_player = fta.Audio(src=abs_path, autoplay=True, volume=1.0)
            self.page.overlay.append(self._audio_player)
            self.page.update()

        except Exception as ex:
            logger.warning("In-app playback failed (%s), using system player", ex)
            self._play_with_system(abs_path)

    def _play_with_system(self, abs_path: str) -> None:
        system = platform.system()
        try:
            if system == "Windows":
                os.startfile(abs_path)
            elif system == "Darwin":
                subprocess.Popen(["afplay", abs_path])
            else:
                subprocess.Popen(["xdg-open", abs_path])
        except OSError as e:
            logger.error("System playback failed: %s", e)
