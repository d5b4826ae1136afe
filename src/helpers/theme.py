import flet as ft

# Prefer ft.Colors / ft.Icons, fall back to the lowercase modules on older Flet builds
if hasattr(ft, "Colors"):
    COLORS = ft.Colors
else:
    COLORS = getattr(ft, "colors", None)

if hasattr(ft, "Icons"):
    ICONS = ft.Icons
else:
    ICONS = getattr(ft, "icons", None)

# Accent and borders
ACCENT_COLOR = COLORS.BLUE
BORDER_BASE = getattr(COLORS, "ON_SURFACE", getattr(COLORS, "GREY", "#e0e0e0"))

# Compact training panel palette (dark card regardless of page theme)
PANEL_BG = "#0b1220"
PANEL_BORDER = "#253148"
PANEL_FIELD_BG = "#0f1724"
PANEL_INSET_BG = "#071022"
PANEL_RESULT_BG = "#071422"
PANEL_ROW_BG = "#06121a"
PANEL_TEXT = "#e5e7eb"
PANEL_MUTED = "#9ca3af"

# Common icon fallbacks
REFRESH_ICON = getattr(ICONS, "REFRESH", getattr(ICONS, "AUTORENEW", getattr(ICONS, "RESTART_ALT", None)))
DOWNLOAD_ICON = getattr(ICONS, "DOWNLOAD", getattr(ICONS, "FILE_DOWNLOAD", None))
TRAIN_ICON = getattr(ICONS, "ROCKET_LAUNCH", getattr(ICONS, "PLAY_ARROW", None))

__all__ = [
    "COLORS",
    "ICONS",
    "ACCENT_COLOR",
    "BORDER_BASE",
    "PANEL_BG",
    "PANEL_BORDER",
    "PANEL_FIELD_BG",
    "PANEL_INSET_BG",
    "PANEL_RESULT_BG",
    "PANEL_ROW_BG",
    "PANEL_TEXT",
    "PANEL_MUTED",
    "REFRESH_ICON",
    "DOWNLOAD_ICON",
    "TRAIN_ICON",
]
