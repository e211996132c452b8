"""Print Service - writes printable word lists and hands them to the browser."""

import os
import uuid
import webbrowser
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import aiofiles

from ..config import Config
from ..models import Word
from ..templates import PrintTemplates
from ..utils import MediaPathGenerator, setup_logger

logger = setup_logger(__name__)


class PrintService:
    """Exports word lists as HTML documents that open the print dialog."""

    def __init__(self, output_dir: Optional[str] = None, language: Optional[Dict[str, Any]] = None):
        """
        Args:
            output_dir: Where documents are written (defaults to Config.OUTPUT_DIR)
            language: LANG_CONFIG entry used for title, direction and font
        """
        self.output_dir = Path(output_dir or Config.OUTPUT_DIR)
        self.language = language or Config.settings

    async def export(self, words: Iterable[Word]) -> Optional[Path]:
        """
        Write the print document for words.

        Returns:
            Path of the written document, or None if there is nothing to print
        """
        words = list(words)
        if not words:
            return None

        document = PrintTemplates.render_document(words, self.language)
        output_path = MediaPathGenerator.print_document_path(str(self.output_dir))
        output_path.parent.mkdir(parents=True, exist_ok=True)

        # Atomic write: save to temp file first
        temp_path = f"{output_path}.{uuid.uuid4().hex[:8]}.tmp"
        try:
            async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
                await f.write(document)
            os.replace(temp_path, output_path)
        finally:
            if os.path.exists(temp_path):
                os.remove(temp_path)

        logger.info("Print document with %d word(s) written to %s", len(words), output_path)
        return output_path

    def open_document(self, path: Path) -> bool:
        """Open the document in the default browser, which shows the print dialog."""
        return webbrowser.open(path.resolve().as_uri())
