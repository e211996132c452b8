"""Word card component - renders one Word with its actions."""

import base64
import binascii
from typing import Callable, Dict, Optional, Union

import flet as ft

from ..config import Config
from ..models import Word
from .theme import DesignTokens


def image_source(image_url: str) -> Union[str, bytes]:
    """Image control source: decoded bytes for data URIs, the URL otherwise."""
    if image_url.startswith("data:") and "," in image_url:
        header, data = image_url.split(",", 1)
        if header.endswith(";base64"):
            try:
                return base64.b64decode(data)
            except (binascii.Error, ValueError):
                return image_url
    return image_url


class WordCard:
    """
    Flet component showing a word card.

    Shows image, English word, meaning, phonetic, example and either a save
    or a remove action. Optionally carries a selection checkbox.
    """

    def __init__(
        self,
        word: Word,
        is_saved: bool,
        on_play: Callable[[Word], None],
        on_save: Optional[Callable[[Word], None]] = None,
        on_remove: Optional[Callable[[Word], None]] = None,
        selected: Optional[bool] = None,
        on_select: Optional[Callable[[Word, bool], None]] = None,
        messages: Optional[Dict[str, str]] = None,
    ) -> None:
        """
        Args:
            word: Word to render
            is_saved: Whether the word is in the saved collection
            on_play: Called when the listen button is pressed
            on_save: Called when the save button is pressed
            on_remove: Called when the remove button is pressed
            selected: Checkbox state; None hides the checkbox
            on_select: Called with the new checkbox state
            messages: UI strings (defaults to the current language)
        """
        self.word = word
        self.is_saved = is_saved
        self.on_play = on_play
        self.on_save = on_save
        self.on_remove = on_remove
        self.selected = selected
        self.on_select = on_select
        self.messages = messages or Config.messages()
        self._container = self._build()

    @property
    def container(self) -> ft.Container:
        return self._container

    def _build_image(self) -> ft.Container:
        return ft.Container(
            content=ft.Image(
                src=image_source(self.word.image_url),
                fit=ft.BoxFit.CONTAIN,
                width=170,
                height=170,
            ),
            width=190,
            height=190,
            padding=DesignTokens.SPACING_SM,
            bgcolor=DesignTokens.BG_MUTED,
            border_radius=DesignTokens.RADIUS_MD,
            alignment=ft.Alignment(0, 0),
        )

    def _build_header(self) -> ft.Row:
        meaning_column = ft.Column(
            controls=[
                ft.Text(
                    self.word.english.capitalize(),
                    size=30,
                    weight=ft.FontWeight.BOLD,
                    color=DesignTokens.TEXT_PRIMARY,
                ),
                ft.Text(
                    self.word.meaning,
                    size=22,
                    weight=ft.FontWeight.BOLD,
                    color=DesignTokens.ACCENT_PRIMARY,
                ),
                ft.Text(
                    f"{self.messages['phonetic_label']}: {self.word.phonetic}",
                    size=14,
                    color=DesignTokens.TEXT_SECONDARY,
                ),
            ],
            spacing=2,
            expand=True,
        )

        listen_btn = ft.IconButton(
            icon=ft.Icons.VOLUME_UP_ROUNDED,
            icon_color=DesignTokens.ACCENT_PRIMARY,
            tooltip=self.messages["listen_tooltip"],
            on_click=lambda e: self.on_play(self.word),
        )

        controls = [meaning_column, listen_btn]
        if self.selected is not None:
            controls.insert(0, ft.Checkbox(
                value=self.selected,
                on_change=lambda e: self.on_select and self.on_select(self.word, bool(e.control.value)),
                active_color=DesignTokens.ACCENT_PRIMARY,
            ))
        return ft.Row(controls=controls, vertical_alignment=ft.CrossAxisAlignment.START)

    def _build_example(self) -> ft.Container:
        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Text(
                        self.messages["example_label"].upper(),
                        size=12,
                        weight=ft.FontWeight.W_600,
                        color=DesignTokens.TEXT_MUTED,
                    ),
                    ft.Text(
                        f"\"{self.word.example_sentence}\"",
                        italic=True,
                        size=15,
                        color=DesignTokens.TEXT_PRIMARY,
                    ),
                    ft.Text(
                        self.word.example_translation,
                        size=14,
                        color=DesignTokens.ACCENT_EXAMPLE,
                    ),
                ],
                spacing=4,
            ),
            padding=12,
            bgcolor=DesignTokens.ACCENT_PRIMARY_SOFT,
            border_radius=DesignTokens.RADIUS_MD,
        )

    def _build_action(self) -> ft.Control:
        if self.is_saved:
            return ft.OutlinedButton(
                self.messages["remove_button"],
                icon=ft.Icons.DELETE_OUTLINE,
                on_click=lambda e: self.on_remove and self.on_remove(self.word),
                style=ft.ButtonStyle(color=DesignTokens.ACCENT_DANGER),
                expand=True,
            )
        return ft.ElevatedButton(
            self.messages["save_button"],
            icon=ft.Icons.BOOKMARK_BORDER,
            on_click=lambda e: self.on_save and self.on_save(self.word),
            style=ft.ButtonStyle(
                bgcolor=DesignTokens.ACCENT_SUCCESS,
                color=DesignTokens.TEXT_ON_ACCENT,
            ),
            expand=True,
        )

    def _build(self) -> ft.Container:
        body = ft.Column(
            controls=[
                self._build_header(),
                self._build_example(),
                ft.Row(controls=[self._build_action()]),
            ],
            spacing=DesignTokens.SPACING_MD,
            expand=True,
        )
        return ft.Container(
            content=ft.Row(
                controls=[self._build_image(), body],
                spacing=DesignTokens.SPACING_LG,
                vertical_alignment=ft.CrossAxisAlignment.START,
            ),
            padding=DesignTokens.SPACING_LG,
            bgcolor=DesignTokens.BG_SURFACE,
            border=ft.border.all(1, DesignTokens.BORDER),
            border_radius=DesignTokens.RADIUS_LG,
        )
