"""Design tokens and shared feedback helpers for the UI."""

from typing import Optional

import flet as ft


class DesignTokens:
    """Centralized design tokens for consistent styling."""
    # Colors - light theme
    BG_PRIMARY = "#F9FAFB"
    BG_SURFACE = "#FFFFFF"
    BG_MUTED = "#F3F4F6"
    BORDER = "#E5E7EB"

    # Text colors
    TEXT_PRIMARY = "#1F2937"
    TEXT_SECONDARY = "#6B7280"
    TEXT_MUTED = "#9CA3AF"
    TEXT_ON_ACCENT = "#FFFFFF"

    # Accent colors
    ACCENT_PRIMARY = "#2563EB"
    ACCENT_PRIMARY_SOFT = "#EFF6FF"
    ACCENT_EXAMPLE = "#1E40AF"
    ACCENT_DANGER = "#DC2626"
    ACCENT_DANGER_SOFT = "#FEF2F2"
    ACCENT_SUCCESS = "#16A34A"
    ACCENT_DARK = "#1F2937"

    # Spacing
    SPACING_XS = 4
    SPACING_SM = 8
    SPACING_MD = 16
    SPACING_LG = 24
    SPACING_XL = 32

    # Border radius
    RADIUS_MD = 12
    RADIUS_LG = 16


def show_snackbar(page: ft.Page, message: str, error: bool = False, icon: Optional[str] = None) -> None:
    """Show a snackbar notification."""
    snackbar = ft.SnackBar(
        content=ft.Row(
            controls=[
                ft.Icon(
                    icon or (ft.Icons.ERROR_OUTLINE if error else ft.Icons.CHECK_CIRCLE_OUTLINE),
                    color=DesignTokens.TEXT_ON_ACCENT,
                    size=20,
                ),
                ft.Text(message, color=DesignTokens.TEXT_ON_ACCENT, size=14),
            ],
            spacing=12,
        ),
        bgcolor=DesignTokens.ACCENT_DANGER if error else DesignTokens.ACCENT_SUCCESS,
        duration=3500,
    )
    # Clean up old snackbars
    for ctrl in list(page.overlay):
        if isinstance(ctrl, ft.SnackBar):
            page.overlay.remove(ctrl)
    page.overlay.append(snackbar)
    snackbar.open = True
    page.update()


def show_notice_dialog(page: ft.Page, message: str) -> None:
    """Show a modal notice the user has to dismiss."""
    def close_dialog(e):
        dialog.open = False
        page.update()
        if dialog in page.overlay:
            page.overlay.remove(dialog)
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        content=ft.Text(message, size=15, color=DesignTokens.TEXT_PRIMARY),
        actions=[ft.TextButton("OK", on_click=close_dialog)],
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
