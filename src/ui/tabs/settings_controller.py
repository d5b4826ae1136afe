"""Settings tab controller for ModelTrainer Studio.

Builds the Settings controls (backend URL, active session, database
maintenance) and wires their handlers. Layout lives in ``tab_settings.py``.
"""

from __future__ import annotations

import logging
import os

import flet as ft

from db import get_db_path, get_log_count, get_logs, clear_logs
from helpers.error_messages import friendly_error
from helpers.logging_config import app_logger, get_logger, set_global_log_level
from helpers.session import SessionProvider
from helpers.settings import (
    DEFAULT_BACKEND_URL,
    load_backend_url,
    reset_backend_url,
    save_backend_url,
)
from helpers.theme import BORDER_BASE, ICONS, REFRESH_ICON
from helpers.ui import WITH_OPACITY, make_empty_placeholder
from ui.tabs.tab_settings import build_settings_tab


logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
RECENT_LOG_LIMIT = 20
NO_LOGS_TEXT = "No log entries"


def build_settings_tab_with_logic(
    page: ft.Page,
    *,
    section_title,
    _mk_help_handler,
    session_provider: SessionProvider,
) -> ft.Control:
    def _snack(msg: str) -> None:
        try:
            page.snack_bar = ft.SnackBar(ft.Text(msg))
            page.open(page.snack_bar)
            page.update()
        except Exception as ex:
            logger.debug("Snack bar not shown: %s", ex)

    # ---------- Backend ----------
    backend_url_tf = ft.TextField(
        label="Backend URL",
        value=load_backend_url(),
        hint_text=DEFAULT_BACKEND_URL,
        width=520,
    )
    backend_status = ft.Text("", size=12, color=WITH_OPACITY(0.7, BORDER_BASE))

    def on_save_backend(_):
        url = (backend_url_tf.value or "").strip()
        if not url.startswith(("http://", "https://")):
            _snack("Enter a URL starting with http:// or https://")
            return
        try:
            save_backend_url(url)
        except Exception as ex:
            logger.exception("Saving backend URL failed")
            _snack(friendly_error(ex, "Saving backend URL"))
            return
        backend_url_tf.value = load_backend_url()
        backend_status.value = f"Using {backend_url_tf.value}"
        logger.info("Backend URL set to %s", backend_url_tf.value)
        _snack("Backend URL saved")

    def on_reset_backend(_):
        try:
            reset_backend_url()
        except Exception as ex:
            logger.exception("Resetting backend URL failed")
            _snack(friendly_error(ex, "Resetting backend URL"))
            return
        backend_url_tf.value = load_backend_url()
        backend_status.value = f"Using {backend_url_tf.value}"
        _snack("Backend URL reset")

    backend_save_btn = ft.ElevatedButton("Save", icon=ICONS.SAVE, on_click=on_save_backend)
    backend_reset_btn = ft.TextButton("Reset to default", icon=getattr(ICONS, "RESTORE", REFRESH_ICON), on_click=on_reset_backend)

    # ---------- Session ----------
    session_tf = ft.TextField(
        label="Session ID",
        value=session_provider.get(),
        hint_text="Paste the session id of a cleaned dataset",
        width=520,
    )

    def on_save_session(_):
        sid = (session_tf.value or "").strip()
        if not sid:
            _snack("Enter a session id to save")
            return
        try:
            session_provider.set(sid)
        except Exception as ex:
            logger.exception("Saving session failed")
            _snack(friendly_error(ex, "Saving session"))
            return
        _snack("Active session saved")

    def on_clear_session(_):
        try:
            session_provider.clear()
        except Exception as ex:
            logger.exception("Clearing session failed")
            _snack(friendly_error(ex, "Clearing session"))
            return
        session_tf.value = ""
        _snack("Active session cleared")

    session_save_btn = ft.ElevatedButton("Save", icon=ICONS.SAVE, on_click=on_save_session)
    session_clear_btn = ft.TextButton("Clear", icon=getattr(ICONS, "CLEAR", ICONS.DELETE), on_click=on_clear_session)

    # ---------- Database ----------
    db_info_text = ft.Text("", size=12, selectable=True)
    recent_logs = ft.Column(spacing=2, scroll=ft.ScrollMode.AUTO, height=180)

    def render_recent_logs() -> None:
        rows = get_logs(limit=RECENT_LOG_LIMIT)
        if not rows:
            recent_logs.controls = [
                make_empty_placeholder(NO_LOGS_TEXT, getattr(ICONS, "ARTICLE", ICONS.DESCRIPTION))
            ]
            return
        recent_logs.controls = [
            ft.Text(
                f"{row['timestamp']}  {row['level']}  {row['logger']}: {row['message']}",
                size=11,
                font_family="monospace",
                selectable=True,
                data=row["id"],
            )
            for row in rows
        ]

    def refresh_db_info(_=None):
        try:
            path = os.path.abspath(get_db_path())
            db_info_text.value = f"Path: {path}\nLog entries: {get_log_count()}"
            render_recent_logs()
        except Exception as ex:
            db_info_text.value = friendly_error(ex, "Reading database info")
        try:
            page.update()
        except Exception as ex:
            logger.debug("Page update skipped: %s", ex)

    def on_clear_logs_click(_):
        confirm_dlg = ft.AlertDialog(
            modal=True,
            title=ft.Text("Clear logs?"),
            content=ft.Text("This deletes every stored log entry. This cannot be undone."),
        )

        def _close_dialog():
            confirm_dlg.open = False
            page.update()

        def _do_clear(_e):
            try:
                deleted = clear_logs()
                _close_dialog()
                _snack(f"Cleared {deleted} log entries")
            except Exception as ex:
                _close_dialog()
                _snack(friendly_error(ex, "Clearing logs"))
            refresh_db_info()

        confirm_dlg.actions = [
            ft.TextButton("Cancel", on_click=lambda e: _close_dialog()),
            ft.TextButton("Clear", on_click=_do_clear),
        ]
        page.open(confirm_dlg)

    db_refresh_btn = ft.TextButton("Refresh", icon=REFRESH_ICON, on_click=refresh_db_info)
    db_clear_logs_btn = ft.OutlinedButton("Clear logs", icon=ICONS.DELETE, on_click=on_clear_logs_click)

    def on_log_level_change(e):
        name = e.control.value or "INFO"
        set_global_log_level(getattr(logging, name))
        logger.info("Log level set to %s", name)
        refresh_db_info()
        _snack(f"Log level: {name}")

    log_level_dd = ft.Dropdown(
        label="Log level",
        value=logging.getLevelName(app_logger.level),
        options=[ft.dropdown.Option(level) for level in LOG_LEVELS],
        width=200,
        on_change=on_log_level_change,
    )

    def on_session_change(session_id: str) -> None:
        session_tf.value = session_id

    session_provider.subscribe(on_session_change)
    refresh_db_info()

    return build_settings_tab(
        section_title=section_title,
        ICONS=ICONS,
        BORDER_BASE=BORDER_BASE,
        WITH_OPACITY=WITH_OPACITY,
        _mk_help_handler=_mk_help_handler,
        backend_url_tf=backend_url_tf,
        backend_save_btn=backend_save_btn,
        backend_reset_btn=backend_reset_btn,
        backend_status=backend_status,
        session_tf=session_tf,
        session_save_btn=session_save_btn,
        session_clear_btn=session_clear_btn,
        db_info_text=db_info_text,
        db_refresh_btn=db_refresh_btn,
        db_clear_logs_btn=db_clear_logs_btn,
        log_level_dd=log_level_dd,
        recent_logs=recent_logs,
    )
