"""
Search View - look up a word and show its generated card.

Searches run through page.run_task() so the UI stays responsive while the
providers work; outcomes of superseded searches are dropped.
"""

from typing import Optional

import flet as ft

from ..config import Config
from ..errors import DuplicateWordError, PersistenceWriteError
from ..models import Word
from ..services import SavedCollection, SearchOrchestrator, SearchOutcome
from ..utils import setup_logger
from .audio_player import AudioPlayer
from .theme import DesignTokens, show_notice_dialog, show_snackbar
from .word_card import WordCard

logger = setup_logger(__name__)


class SearchView:
    """Search tab: query input, loading state, error banner and result card."""

    def __init__(
        self,
        page: ft.Page,
        orchestrator: SearchOrchestrator,
        collection: SavedCollection,
        player: AudioPlayer,
    ) -> None:
        self.page = page
        self.orchestrator = orchestrator
        self.collection = collection
        self.player = player
        self.messages = Config.messages()

        self.current_word: Optional[Word] = None
        self.is_loading = False

        self._container = self._build_view()
        self.collection.on_change(self.refresh)

    @property
    def container(self) -> ft.Container:
        return self._container

    # =========================================================================
    # LAYOUT
    # =========================================================================

    def _build_view(self) -> ft.Container:
        self.query_field = ft.TextField(
            hint_text=self.messages["search_hint"],
            prefix_icon=ft.Icons.SEARCH,
            on_submit=self._on_search_click,
            border_radius=DesignTokens.RADIUS_MD,
            bgcolor=DesignTokens.BG_SURFACE,
            border_color=DesignTokens.BORDER,
            focused_border_color=DesignTokens.ACCENT_PRIMARY,
            expand=True,
            autofocus=True,
        )
        self.search_btn = ft.ElevatedButton(
            self.messages["search_button"],
            icon=ft.Icons.AUTO_AWESOME,
            on_click=self._on_search_click,
            style=ft.ButtonStyle(
                bgcolor=DesignTokens.ACCENT_PRIMARY,
                color=DesignTokens.TEXT_ON_ACCENT,
                padding=ft.Padding.symmetric(horizontal=24, vertical=18),
            ),
        )

        self.loading_panel = ft.Container(
            content=ft.Column(
                controls=[
                    ft.ProgressRing(width=48, height=48, color=DesignTokens.ACCENT_PRIMARY),
                    ft.Text(
                        self.messages["loading_title"],
                        size=18,
                        weight=ft.FontWeight.W_600,
                        color=DesignTokens.TEXT_PRIMARY,
                    ),
                    ft.Text(self.messages["loading_subtitle"], size=13, color=DesignTokens.TEXT_SECONDARY),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=DesignTokens.SPACING_SM,
            ),
            padding=DesignTokens.SPACING_XL,
            alignment=ft.Alignment(0, 0),
            visible=False,
        )

        self.error_text = ft.Text("", color=DesignTokens.ACCENT_DANGER, size=14)
        self.error_banner = ft.Container(
            content=ft.Row(
                controls=[
                    ft.Icon(ft.Icons.ERROR_OUTLINE, color=DesignTokens.ACCENT_DANGER, size=20),
                    self.error_text,
                ],
                spacing=DesignTokens.SPACING_SM,
            ),
            padding=DesignTokens.SPACING_MD,
            bgcolor=DesignTokens.ACCENT_DANGER_SOFT,
            border_radius=DesignTokens.RADIUS_MD,
            visible=False,
        )

        self.empty_state = ft.Container(
            content=ft.Column(
                controls=[
                    ft.Icon(ft.Icons.TRANSLATE, size=56, color=DesignTokens.TEXT_MUTED),
                    ft.Text(
                        self.messages["empty_title"],
                        size=18,
                        weight=ft.FontWeight.W_600,
                        color=DesignTokens.TEXT_PRIMARY,
                    ),
                    ft.Text(self.messages["empty_subtitle"], size=13, color=DesignTokens.TEXT_SECONDARY),
                ],
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                spacing=DesignTokens.SPACING_SM,
            ),
            padding=DesignTokens.SPACING_XL,
            alignment=ft.Alignment(0, 0),
        )

        self.result_area = ft.Column(controls=[], visible=False)

        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Row(controls=[self.query_field, self.search_btn], spacing=DesignTokens.SPACING_SM),
                    self.error_banner,
                    self.loading_panel,
                    self.empty_state,
                    self.result_area,
                ],
                spacing=DesignTokens.SPACING_LG,
                scroll=ft.ScrollMode.AUTO,
            ),
            expand=True,
        )

    def _render_result(self) -> None:
        word = self.current_word
        if word is None:
            self.result_area.controls = []
            self.result_area.visible = False
            return

        saved = self.collection.contains(word.english)
        card = WordCard(
            word=word,
            is_saved=saved,
            on_play=self._on_play,
            on_save=self._on_save,
            on_remove=self._on_remove,
            messages=self.messages,
        )
        self.result_area.controls = [card.container]
        self.result_area.visible = True

    def refresh(self) -> None:
        """Re-render the result card (its saved state may have changed)."""
        self._render_result()
        self.page.update()

    def _set_loading(self, loading: bool) -> None:
        self.is_loading = loading
        self.loading_panel.visible = loading
        self.search_btn.disabled = loading
        if loading:
            self.error_banner.visible = False
            self.empty_state.visible = False
            self.result_area.visible = False

    # =========================================================================
    # EVENTS
    # =========================================================================

    def _on_search_click(self, e: ft.ControlEvent) -> None:
        query = self.query_field.value or ""
        if not query.strip():
            return
        self.page.run_task(self._run_search, query)

    async def _run_search(self, query: str) -> None:
        self._set_loading(True)
        self.page.update()

        outcome: Optional[SearchOutcome] = await self.orchestrator.run(query)
        if outcome is None or outcome.stale:
            return

        self._set_loading(False)
        if outcome.ok:
            self.current_word = outcome.word
            self._render_result()
        else:
            self.current_word = None
            self._render_result()
            self.error_text.value = outcome.error
            self.error_banner.visible = True
            self.empty_state.visible = True
        self.page.update()

    def _on_play(self, word: Word) -> None:
        self.page.run_task(self.player.play, word)

    def _on_save(self, word: Word) -> None:
        try:
            self.collection.add(word)
        except DuplicateWordError:
            show_notice_dialog(self.page, self.messages["duplicate_notice"])
        except PersistenceWriteError:
            show_snackbar(self.page, self.messages["save_failed"], error=True)

    def _on_remove(self, word: Word) -> None:
        saved = next((w for w in self.collection.list() if w.english == word.english), None)
        if saved is None:
            return
        try:
            self.collection.remove(saved.id)
        except PersistenceWriteError:
            show_snackbar(self.page, self.messages["save_failed"], error=True)
