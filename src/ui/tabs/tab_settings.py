"""Settings tab builder for ModelTrainer Studio.

Composes the Settings tab from controls created in ``settings_controller``.
"""

from __future__ import annotations

import flet as ft


def _card(*, section_title, ICONS, BORDER_BASE, WITH_OPACITY, _mk_help_handler, title, icon, help_text, rows):
    return ft.Container(
        content=ft.Column(
            [
                section_title(title, icon, help_text, on_help_click=_mk_help_handler(help_text)),
                ft.Container(
                    content=ft.Column(rows, spacing=8),
                    border=ft.border.all(1, WITH_OPACITY(0.1, BORDER_BASE)),
                    border_radius=8,
                    padding=10,
                ),
            ],
            spacing=12,
        ),
        width=760,
    )


def build_settings_tab(
    *,
    section_title,
    ICONS,
    BORDER_BASE,
    WITH_OPACITY,
    _mk_help_handler,
    backend_url_tf: ft.TextField,
    backend_save_btn: ft.Control,
    backend_reset_btn: ft.Control,
    backend_status: ft.Text,
    session_tf: ft.TextField,
    session_save_btn: ft.Control,
    session_clear_btn: ft.Control,
    db_info_text: ft.Text,
    db_refresh_btn: ft.Control,
    db_clear_logs_btn: ft.Control,
    log_level_dd: ft.Dropdown,
    recent_logs: ft.Column,
) -> ft.Container:
    common = dict(
        section_title=section_title,
        ICONS=ICONS,
        BORDER_BASE=BORDER_BASE,
        WITH_OPACITY=WITH_OPACITY,
        _mk_help_handler=_mk_help_handler,
    )

    backend_card = _card(
        title="Training Backend",
        icon=getattr(ICONS, "CLOUD", ICONS.SETTINGS),
        help_text="Base URL of the service that serves /hyperparameters and /train-model.",
        rows=[
            backend_url_tf,
            ft.Row([backend_save_btn, backend_reset_btn], wrap=True),
            backend_status,
        ],
        **common,
    )

    session_card = _card(
        title="Active Session",
        icon=getattr(ICONS, "FINGERPRINT", ICONS.KEY),
        help_text="Session id returned when a cleaned dataset was saved. Both training views read it.",
        rows=[
            session_tf,
            ft.Row([session_save_btn, session_clear_btn], wrap=True),
        ],
        **common,
    )

    db_card = _card(
        title="Database",
        icon=getattr(ICONS, "STORAGE", ICONS.FOLDER),
        help_text="Local SQLite database holding settings and application logs.",
        rows=[
            db_info_text,
            ft.Row([db_refresh_btn, db_clear_logs_btn], wrap=True),
            log_level_dd,
            ft.Text("Recent logs", size=12, weight=ft.FontWeight.W_500),
            ft.Container(
                content=recent_logs,
                border=ft.border.all(1, WITH_OPACITY(0.1, BORDER_BASE)),
                border_radius=6,
                padding=8,
            ),
        ],
        **common,
    )

    return ft.Container(
        content=ft.Column(
            [
                ft.Row(
                    [ft.Column([backend_card, session_card, db_card], spacing=20)],
                    alignment=ft.MainAxisAlignment.CENTER,
                )
            ],
            scroll=ft.ScrollMode.AUTO,
            spacing=0,
        ),
        padding=16,
    )
