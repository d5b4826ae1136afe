import flet as ft

from db import init_db
from helpers.logging_config import get_logger
from helpers.session import SessionProvider
from helpers.settings import load_backend_url
from helpers.theme import ACCENT_COLOR, COLORS, ICONS
from helpers.ui import WITH_OPACITY, section_title
from ui.tabs.settings_controller import build_settings_tab_with_logic
from ui.tabs.training.compact_panel import build_compact_training_panel
from ui.tabs.training_controller import build_training_tab_with_logic


logger = get_logger(__name__)

APP_TITLE = "ModelTrainer Studio"


def main(page: ft.Page):
    init_db()

    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.theme = ft.Theme(color_scheme_seed=ACCENT_COLOR)
    page.window_min_width = 900
    page.window_min_height = 640

    about_dialog = ft.AlertDialog(
        title=ft.Text("About"),
        content=ft.Text(
            f"{APP_TITLE}\n\n"
            "Pick a model, tweak its default hyperparameters and train it on your cleaned dataset "
            "through the training backend. Metrics and a model download link are shown when training finishes.\n"
            "Built with Flet."
        ),
        actions=[ft.TextButton("Close", on_click=lambda e: page.close(about_dialog))],
    )

    def toggle_theme(_):
        page.theme_mode = ft.ThemeMode.DARK if page.theme_mode == ft.ThemeMode.LIGHT else ft.ThemeMode.LIGHT
        page.update()

    page.appbar = ft.AppBar(
        title=ft.Text(APP_TITLE, weight=ft.FontWeight.BOLD),
        center_title=False,
        bgcolor=WITH_OPACITY(0.03, COLORS.BLUE),
        actions=[
            ft.IconButton(
                icon=getattr(ICONS, "DARK_MODE", getattr(ICONS, "BRIGHTNESS_4", None)),
                tooltip="Toggle theme",
                on_click=toggle_theme,
            ),
            ft.IconButton(
                icon=getattr(ICONS, "INFO_OUTLINE", ICONS.INFO),
                tooltip="About",
                on_click=lambda e: page.open(about_dialog),
            ),
        ],
    )

    # Reusable: build a click handler that opens a small dialog with the given help text
    def _mk_help_handler(text: str):
        def _handler(e):
            try:
                page.open(ft.AlertDialog(title=ft.Text("Info"), content=ft.Text(text)))
            except Exception:
                page.snack_bar = ft.SnackBar(ft.Text(text))
                page.open(page.snack_bar)

        return _handler

    # One session shared by both training views and the Settings tab
    session_provider = SessionProvider()

    training_tab, _ = build_training_tab_with_logic(
        page,
        section_title=section_title,
        _mk_help_handler=_mk_help_handler,
        session_provider=session_provider,
        get_base_url=load_backend_url,
    )

    compact_panel, _ = build_compact_training_panel(
        page,
        session_provider=session_provider,
        get_base_url=load_backend_url,
    )
    quick_train_tab = ft.Container(
        content=ft.Column(
            [ft.Row([compact_panel], alignment=ft.MainAxisAlignment.CENTER)],
            scroll=ft.ScrollMode.AUTO,
        ),
        padding=24,
    )

    settings_tab = build_settings_tab_with_logic(
        page,
        section_title=section_title,
        _mk_help_handler=_mk_help_handler,
        session_provider=session_provider,
    )

    tabs = ft.Tabs(
        tabs=[
            ft.Tab(text="Train Model", icon=getattr(ICONS, "SCIENCE", ICONS.PLAY_CIRCLE), content=training_tab),
            ft.Tab(text="Quick Train", icon=getattr(ICONS, "BOLT", ICONS.PLAY_CIRCLE), content=quick_train_tab),
            ft.Tab(text="Settings", icon=ICONS.SETTINGS, content=settings_tab),
        ],
        expand=1,
    )

    page.add(tabs)
    logger.info("%s started (backend: %s)", APP_TITLE, load_backend_url())


def run():
    ft.app(target=main)


if __name__ == "__main__":
    run()
