"""Training tab: Active session section builder."""

from __future__ import annotations

import flet as ft


def build_session_section(
    *,
    section_title,
    ICONS,
    BORDER_BASE,
    WITH_OPACITY,
    _mk_help_handler,
    session_tf: ft.TextField,
) -> ft.Container:
    help_text = "The session created when your cleaned dataset was saved. Training always uses this dataset."
    return ft.Container(
        content=ft.Column(
            [
                section_title(
                    "Active Session",
                    getattr(ICONS, "FINGERPRINT", ICONS.KEY),
                    help_text,
                    on_help_click=_mk_help_handler(help_text),
                ),
                ft.Container(
                    content=ft.Column(
                        [
                            session_tf,
                            ft.Text(
                                "The training backend uses this id to find your cleaned dataset.",
                                size=11,
                                color=WITH_OPACITY(0.6, BORDER_BASE),
                            ),
                        ],
                        spacing=4,
                    ),
                    border=ft.border.all(1, WITH_OPACITY(0.1, BORDER_BASE)),
                    border_radius=8,
                    padding=10,
                ),
            ],
            spacing=12,
        ),
        width=760,
    )
