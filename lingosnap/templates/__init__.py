"""Print document templates with CSS and HTML."""

import html
from typing import Any, Dict, Iterable, Optional

from ..models import Word


class PrintTemplates:
    """Container for the printable word list template and styling."""

    # Delay before window.print() so fonts and images can load
    PRINT_DELAY_MS = 500

    CSS = """
    @import url('{font_url}');
    body {{ font-family: '{font_family}', sans-serif; margin: 0; padding: 0; }}
    .sheet {{ direction: {direction}; text-align: {align}; padding: 32px; }}
    @page {{ margin: 15mm; size: A4; }}
    h1 {{ border-bottom: 2px solid #000; padding-bottom: 15px; margin-bottom: 30px; text-align: center; }}

    .word {{ display: flex; gap: 32px; align-items: flex-start; border-bottom: 1px solid #e5e7eb; padding-bottom: 32px; margin-bottom: 16px; page-break-inside: avoid; }}
    .word img {{ width: 140px; height: 140px; object-fit: contain; border: 1px solid #eee; padding: 10px; border-radius: 12px; }}
    .word-body {{ flex: 1; }}
    .english {{ font-size: 28px; font-weight: bold; margin: 0; text-transform: capitalize; text-align: left; direction: ltr; }}
    .meaning {{ font-size: 24px; color: #2563eb; font-weight: bold; margin: 8px 0; }}
    .phonetic {{ color: #6b7280; font-size: 16px; margin-bottom: 12px; }}

    .example {{ background: #f8fafc; padding: 12px; border-radius: 8px; border-{edge}: 4px solid #3b82f6; }}
    .example-label {{ font-size: 14px; font-weight: bold; color: #94a3b8; margin: 0 0 4px 0; text-transform: uppercase; text-align: left; direction: ltr; }}
    .example-sentence {{ font-size: 18px; margin: 0 0 8px 0; font-style: italic; text-align: left; direction: ltr; }}
    .example-translation {{ font-size: 16px; color: #1e40af; margin: 0; }}
    """

    WORD_TEMPLATE = """
    <div class="word">
      <img src="{image_url}" alt="{english}" />
      <div class="word-body">
        <h2 class="english">{english}</h2>
        <p class="meaning">{meaning}</p>
        <p class="phonetic">{phonetic_label}: {phonetic}</p>
        <div class="example">
          <p class="example-label">{example_label}</p>
          <p class="example-sentence">&quot;{example_sentence}&quot;</p>
          <p class="example-translation">{example_translation}</p>
        </div>
      </div>
    </div>"""

    DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="{html_lang}" dir="{direction}">
<head>
  <meta charset="UTF-8">
  <title>{window_title}</title>
  <style>{css}</style>
</head>
<body>
  <div class="sheet">
    <h1>{title}</h1>
    {words}
  </div>
  <script>
    window.addEventListener('load', function () {{
      setTimeout(function () {{ window.print(); }}, {delay});
    }});
  </script>
</body>
</html>
"""

    @classmethod
    def get_css(cls, language: Dict[str, Any]) -> str:
        rtl = language.get("direction") == "rtl"
        return cls.CSS.format(
            font_url=language.get("font_url", ""),
            font_family=language.get("font_family", "sans-serif"),
            direction="rtl" if rtl else "ltr",
            align="right" if rtl else "left",
            edge="right" if rtl else "left",
        )

    @classmethod
    def render_word(cls, word: Word, messages: Dict[str, str]) -> str:
        """Render one word section. All text is HTML-escaped."""
        esc = html.escape
        return cls.WORD_TEMPLATE.format(
            image_url=esc(word.image_url, quote=True),
            english=esc(word.english),
            meaning=esc(word.meaning),
            phonetic_label=esc(messages["phonetic_label"]),
            phonetic=esc(word.phonetic),
            example_label=esc(messages["example_label"]),
            example_sentence=esc(word.example_sentence),
            example_translation=esc(word.example_translation),
        )

    @classmethod
    def render_document(
        cls,
        words: Iterable[Word],
        language: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Render the printable word list.

        Pure formatting: one section per word, in the order given.

        Args:
            words: Words to print
            language: Entry of LANG_CONFIG (defaults to the current language)

        Returns:
            Complete HTML document that opens the print dialog once loaded
        """
        if language is None:
            from ..config import Config
            language = Config.settings

        messages = language["messages"]
        return cls.DOCUMENT_TEMPLATE.format(
            html_lang=language.get("html_lang", "en"),
            direction=language.get("direction", "ltr"),
            window_title=html.escape(messages["print_window_title"]),
            css=cls.get_css(language),
            title=html.escape(messages["print_title"]),
            words="".join(cls.render_word(w, messages) for w in words),
            delay=cls.PRINT_DELAY_MS,
        )
