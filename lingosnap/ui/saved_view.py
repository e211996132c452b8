"""Saved Words View - browse, remove, select and print saved words."""

from typing import Set

import flet as ft

from ..config import Config
from ..errors import PersistenceWriteError
from ..models import Word
from ..services import PrintService, SavedCollection
from ..utils import setup_logger
from .audio_player import AudioPlayer
from .theme import DesignTokens, show_snackbar
from .word_card import WordCard

logger = setup_logger(__name__)


class SavedWordsView:
    """
    Saved tab.

    Selection is view state only; printing with nothing selected prints
    the whole collection.
    """

    def __init__(
        self,
        page: ft.Page,
        collection: SavedCollection,
        player: AudioPlayer,
        print_service: PrintService,
    ) -> None:
        self.page = page
        self.collection = collection
        self.player = player
        self.print_service = print_service
        self.messages = Config.messages()
        self.selected_ids: Set[str] = set()

        self._container = self._build_view()
        self.collection.on_change(self.refresh)
        self._render_list()

    @property
    def container(self) -> ft.Container:
        return self._container

    def _build_view(self) -> ft.Container:
        self.title_text = ft.Text(
            self.messages["tab_saved"],
            size=24,
            weight=ft.FontWeight.BOLD,
            color=DesignTokens.TEXT_PRIMARY,
        )
        self.count_text = ft.Text("", size=13, color=DesignTokens.TEXT_SECONDARY)
        self.select_btn = ft.TextButton(
            self.messages["select_all"],
            icon=ft.Icons.DONE_ALL,
            on_click=self._on_toggle_select_all,
        )
        self.print_btn = ft.ElevatedButton(
            self.messages["print_button"],
            icon=ft.Icons.PRINT_ROUNDED,
            on_click=self._on_print_click,
            style=ft.ButtonStyle(
                bgcolor=DesignTokens.ACCENT_DARK,
                color=DesignTokens.TEXT_ON_ACCENT,
            ),
        )

        self.toolbar = ft.Row(
            controls=[
                ft.Column(controls=[self.title_text, self.count_text], spacing=2, expand=True),
                self.select_btn,
                self.print_btn,
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )

        self.empty_state = ft.Container(
            content=ft.Column(
                controls=[
                    ft.Icon(ft.Icons.BOOKMARKS_OUTLINED, size=56, color=DesignTokens.TEXT_MUTED),
                    ft.Text(
                        self.messages["saved_empty_title"],
                        size=18,
                        weight=ft.FontWeight.W_600,
                        color=DesignTokens.TEXT_PRIMARY,
                    ),
                    ft.Text(self.messages["saved_empty_subtitle"], size=13, color=DesignTokens.TEXT_SECONDARY),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=DesignTokens.SPACING_SM,
            ),
            padding=DesignTokens.SPACING_XL,
            alignment=ft.Alignment(0, 0),
        )

        self.list_column = ft.Column(controls=[], spacing=DesignTokens.SPACING_MD)

        return ft.Container(
            content=ft.Column(
                controls=[self.toolbar, self.empty_state, self.list_column],
                spacing=DesignTokens.SPACING_LG,
                scroll=ft.ScrollMode.AUTO,
            ),
            expand=True,
        )

    def _render_list(self) -> None:
        words = self.collection.list()
        # Drop selections of words that are gone
        self.selected_ids &= {w.id for w in words}

        self.list_column.controls = [
            WordCard(
                word=word,
                is_saved=True,
                on_play=self._on_play,
                on_remove=self._on_remove,
                selected=word.id in self.selected_ids,
                on_select=self._on_select,
                messages=self.messages,
            ).container
            for word in words
        ]

        has_words = bool(words)
        self.empty_state.visible = not has_words
        self.list_column.visible = has_words
        self.select_btn.visible = has_words
        self.print_btn.disabled = not has_words
        self._update_toolbar()

    def _update_toolbar(self) -> None:
        self.count_text.value = self.messages["selected_count"].format(count=len(self.selected_ids))
        all_selected = bool(self.selected_ids) and len(self.selected_ids) == self.collection.count
        self.select_btn.content = self.messages["clear_selection"] if all_selected else self.messages["select_all"]

    def refresh(self) -> None:
        self._render_list()
        self.page.update()

    def _on_play(self, word: Word) -> None:
        self.page.run_task(self.player.play, word)

    def _on_remove(self, word: Word) -> None:
        try:
            self.collection.remove(word.id)
        except PersistenceWriteError:
            show_snackbar(self.page, self.messages["save_failed"], error=True)

    def _on_select(self, word: Word, selected: bool) -> None:
        if selected:
            self.selected_ids.add(word.id)
        else:
            self.selected_ids.discard(word.id)
        self._update_toolbar()
        self.page.update()

    def _on_toggle_select_all(self, e: ft.ControlEvent) -> None:
        if self.selected_ids and len(self.selected_ids) == self.collection.count:
            self.selected_ids.clear()
        else:
            self.selected_ids = set(self.collection.ids())
        self.refresh()

    def _on_print_click(self, e: ft.ControlEvent) -> None:
        self.page.run_task(self._run_print)

    async def _run_print(self) -> None:
        ids = self.selected_ids or set(self.collection.ids())
        words = self.collection.select_for_print(ids)
        if not words:
            return
        try:
            path = await self.print_service.export(words)
        except OSError as e:
            logger.error("Failed to write print document: %s", e)
            show_snackbar(self.page, str(e), error=True)
            return
        if path is not None:
            self.print_service.open_document(path)
