"""
LingoSnap: Desktop Application
------------------------------

A Flet interface for looking up English words as illustrated, spoken
vocabulary cards and keeping a printable collection of them.
"""

import os
import sys
from pathlib import Path

# Ensure project root is on sys.path for absolute imports
_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import flet as ft
from typing import Callable, Dict

from lingosnap import __version__
from lingosnap.config import Config
from lingosnap.services import (
    AIService,
    MediaService,
    PrintService,
    SavedCollection,
    SearchOrchestrator,
)
from lingosnap.ui import AudioPlayer, DesignTokens, SavedWordsView, SearchView
from lingosnap.utils import setup_logger

logger = setup_logger("lingosnap.app")


# =============================================================================
# NAVIGATION RAIL (SIDEBAR)
# =============================================================================

def create_navigation_rail(
    on_change: Callable[[int], None],
    selected_index: int = 0
) -> ft.NavigationRail:
    """
    Create the main navigation sidebar.

    Args:
        on_change: Callback when navigation selection changes
        selected_index: Currently selected index

    Returns:
        Configured NavigationRail control
    """
    messages = Config.messages()
    return ft.NavigationRail(
        selected_index=selected_index,
        label_type=ft.NavigationRailLabelType.ALL,
        min_width=100,
        min_extended_width=200,
        extended=True,
        group_alignment=-0.9,
        destinations=[
            ft.NavigationRailDestination(
                icon=ft.Icons.SEARCH_OUTLINED,
                selected_icon=ft.Icons.SEARCH_ROUNDED,
                label=messages["tab_search"],
                padding=ft.Padding.symmetric(vertical=8),
            ),
            ft.NavigationRailDestination(
                icon=ft.Icons.BOOKMARKS_OUTLINED,
                selected_icon=ft.Icons.BOOKMARKS_ROUNDED,
                label=messages["tab_saved"],
                padding=ft.Padding.symmetric(vertical=8),
            ),
        ],
        on_change=lambda e: on_change(e.control.selected_index),
        bgcolor="transparent",
    )


# =============================================================================
# MAIN APPLICATION
# =============================================================================

class LingoSnapApp:
    """Main application controller."""

    def __init__(self, page: ft.Page) -> None:
        """
        Initialize the application.

        Args:
            page: Flet page instance
        """
        self.page = page
        self._setup_page()
        self._init_services()
        self._init_views()
        self._build_ui()

        # Release provider sessions before the window goes away
        self.page.window.prevent_close = True
        self.page.window.on_event = self._on_window_event
        self.page.update()

    def _setup_page(self) -> None:
        """Configure page settings and theme."""
        self.page.title = Config.messages()["app_title"]
        self.page.theme_mode = ft.ThemeMode.LIGHT
        self.page.bgcolor = DesignTokens.BG_PRIMARY
        self.page.theme = ft.Theme(
            color_scheme_seed=DesignTokens.ACCENT_PRIMARY,
            font_family=Config.settings["font_family"],
        )
        self.page.rtl = Config.DIRECTION == "rtl"
        self.page.padding = 0
        self.page.spacing = 0
        self.page.window.min_width = 900
        self.page.window.min_height = 650
        self.page.window.width = 1180
        self.page.window.height = 820

    def _init_services(self) -> None:
        """Wire providers, the saved collection and the print service."""
        self.media = MediaService()
        self.orchestrator = SearchOrchestrator(ai_service=AIService(), media_service=self.media)
        if not self.orchestrator.ai_service.is_configured:
            logger.warning("AI provider %s has no API key configured", Config.AI_PROVIDER)

        self.collection = SavedCollection()
        self.collection.load()
        self.collection.on_change(self._on_collection_change)

        self.print_service = PrintService()
        self.player = AudioPlayer(self.page, self.media)

    def _on_collection_change(self) -> None:
        removed = self.media.cleanup_orphaned_files(self.collection.ids())
        if removed:
            logger.debug("Removed %d orphaned audio file(s)", removed)

    def _init_views(self) -> None:
        """Initialize all view containers."""
        self.search_view = SearchView(self.page, self.orchestrator, self.collection, self.player)
        self.saved_view = SavedWordsView(self.page, self.collection, self.player, self.print_service)

        self.views: Dict[int, ft.Container] = {
            0: self.search_view.container,
            1: self.saved_view.container,
        }
        self.current_view_index: int = 0

    def _build_ui(self) -> None:
        """Build the main UI layout."""
        self.content_area = ft.Container(
            content=self.views[0],
            expand=True,
            padding=DesignTokens.SPACING_LG,
            bgcolor=DesignTokens.BG_PRIMARY,
        )

        self.nav_rail = create_navigation_rail(
            on_change=self._on_nav_change,
            selected_index=0,
        )

        sidebar = ft.Container(
            content=ft.Column(
                controls=[
                    # App branding header
                    ft.Container(
                        content=ft.Row(
                            controls=[
                                ft.Icon(
                                    ft.Icons.AUTO_STORIES,
                                    color=DesignTokens.ACCENT_PRIMARY,
                                    size=28,
                                ),
                                ft.Text(
                                    "LingoSnap",
                                    size=20,
                                    weight=ft.FontWeight.BOLD,
                                    color=DesignTokens.TEXT_PRIMARY,
                                ),
                            ],
                            alignment=ft.MainAxisAlignment.CENTER,
                            spacing=10,
                        ),
                        padding=ft.Padding.only(top=20, bottom=10),
                    ),
                    ft.Divider(height=1, color=DesignTokens.BORDER),
                    ft.Container(
                        content=self.nav_rail,
                        expand=True,
                    ),
                    ft.Container(
                        content=ft.Text(
                            f"v{__version__}",
                            size=11,
                            color=DesignTokens.TEXT_MUTED,
                            text_align=ft.TextAlign.CENTER,
                        ),
                        padding=ft.Padding.only(bottom=20),
                        alignment=ft.Alignment(0, 0),
                    ),
                ],
                spacing=0,
            ),
            width=220,
            bgcolor=DesignTokens.BG_SURFACE,
        )

        main_layout = ft.Row(
            controls=[
                sidebar,
                ft.VerticalDivider(width=1, color=DesignTokens.BORDER),
                self.content_area,
            ],
            spacing=0,
            expand=True,
        )

        self.page.add(main_layout)

    def _on_window_event(self, e) -> None:
        if e.type == ft.WindowEventType.CLOSE:
            self.page.run_task(self._shutdown)

    async def _shutdown(self) -> None:
        """Close the search providers, then the window."""
        try:
            await self.orchestrator.close()
        except Exception as e:
            logger.warning("Error while closing providers: %s", e)
        finally:
            await self.page.window.destroy()

    def _on_nav_change(self, index: int) -> None:
        """
        Handle navigation selection change.

        Args:
            index: Selected navigation index
        """
        if index == self.current_view_index:
            return

        self.current_view_index = index
        self.content_area.content = self.views[index]
        self.page.update()

    def navigate_to(self, index: int) -> None:
        """
        Programmatically navigate to a view.

        Args:
            index: View index to navigate to
        """
        if 0 <= index < len(self.views):
            self.nav_rail.selected_index = index
            self._on_nav_change(index)


def main(page: ft.Page) -> None:
    """
    Main entry point for Flet application.

    Args:
        page: Flet page instance
    """
    os.makedirs(Config.MEDIA_DIR, exist_ok=True)

    try:
        LingoSnapApp(page)
    except Exception:
        import traceback
        error_text = traceback.format_exc()
        logger.error("UI failed to start:\n%s", error_text)
        page.add(
            ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Text("UI failed to start", size=20, weight=ft.FontWeight.BOLD, color=ft.Colors.RED_400),
                        ft.Text("Copy this error when reporting the problem:", size=12, color=ft.Colors.GREY_700),
                        ft.Container(
                            content=ft.Text(error_text, size=11, selectable=True, color=ft.Colors.GREY_800),
                            padding=10,
                            bgcolor=ft.Colors.with_opacity(0.06, ft.Colors.BLACK),
                            border_radius=8,
                        ),
                    ],
                    spacing=10,
                ),
                padding=20,
            )
        )
        page.update()


if __name__ == "__main__":
    ft.run(main)
