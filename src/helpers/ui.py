from typing import Optional, Callable
import flet as ft

from .theme import COLORS, ICONS, ACCENT_COLOR, BORDER_BASE


def WITH_OPACITY(opacity: float, color):
    """Apply opacity if supported in this Flet build; otherwise return color as-is."""
    if hasattr(ft, "colors") and hasattr(ft.colors, "with_opacity"):
        try:
            return ft.colors.with_opacity(opacity, color)
        except Exception:
            pass
    if hasattr(COLORS, "with_opacity"):
        try:
            return COLORS.with_opacity(opacity, color)
        except Exception:
            pass
    return color


def section_title(
    title: str, icon: str, help_text: Optional[str] = None, on_help_click: Optional[Callable[..., None]] = None
) -> ft.Row:
    controls = [
        ft.Icon(icon, color=ACCENT_COLOR),
        ft.Text(title, size=16, weight=ft.FontWeight.BOLD),
    ]
    if help_text:
        info_icon = getattr(
            ICONS,
            "INFO_OUTLINE",
            getattr(ICONS, "INFO", getattr(ICONS, "HELP_OUTLINE", getattr(ICONS, "HELP", None))),
        )
        if info_icon is not None:
            controls.append(
                ft.IconButton(
                    icon=info_icon,
                    icon_color=WITH_OPACITY(0.8, BORDER_BASE),
                    tooltip=help_text,
                    on_click=on_help_click,
                )
            )
        else:
            controls.append(ft.Text("ⓘ", tooltip=help_text))
    return ft.Row(controls)


def make_empty_placeholder(text: str, icon) -> ft.Container:
    """Centered, subtle placeholder shown when a panel has no content."""
    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(icon, color=WITH_OPACITY(0.45, BORDER_BASE), size=18),
                ft.Text(text, size=12, color=WITH_OPACITY(0.7, BORDER_BASE)),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            spacing=6,
        ),
        padding=10,
    )


def labeled_value(label: str, value, size: int = 14, label_color=None, value_color=None) -> ft.Text:
    """Bold ``label:`` followed by a plain value, as a single Text with spans."""
    return ft.Text(
        spans=[
            ft.TextSpan(f"{label}: ", ft.TextStyle(weight=ft.FontWeight.BOLD, color=label_color)),
            ft.TextSpan("" if value is None else str(value), ft.TextStyle(color=value_color)),
        ],
        size=size,
    )


def link_text(text: str, url: str, size: int = 14) -> ft.Text:
    """Underlined hyperlink that opens ``url`` in a new browsing context."""
    url_target = getattr(getattr(ft, "UrlTarget", None), "BLANK", "_blank")
    return ft.Text(
        spans=[
            ft.TextSpan(
                text,
                ft.TextStyle(color=ACCENT_COLOR, decoration=ft.TextDecoration.UNDERLINE),
                url=url,
                url_target=url_target,
            )
        ],
        size=size,
    )


def open_url(page: ft.Page, url: str) -> None:
    """Open ``url`` in a new browser tab/window."""
    try:
        page.launch_url(url, web_window_name="_blank")
    except TypeError:
        page.launch_url(url)


def show_alert(page: ft.Page, message: str, title: str = "Notice") -> ft.AlertDialog:
    """Open a modal dialog that must be dismissed before continuing."""
    dlg = ft.AlertDialog(modal=True, title=ft.Text(title), content=ft.Text(message))

    def _close(_=None):
        dlg.open = False
        page.update()

    dlg.actions = [ft.TextButton("OK", on_click=_close)]
    if hasattr(page, "open"):
        page.open(dlg)
    else:
        page.dialog = dlg
        dlg.open = True
        page.update()
    return dlg


__all__ = [
    "WITH_OPACITY",
    "section_title",
    "make_empty_placeholder",
    "labeled_value",
    "link_text",
    "open_url",
    "show_alert",
]
