import flet as ft
import pytest

import main as app_main
from helpers.session import SessionProvider
from helpers.settings import load_active_session, load_backend_url
from helpers.ui import section_title
from ui.tabs.settings_controller import build_settings_tab_with_logic
from ui.tabs.training.compact_panel import build_compact_training_panel
from ui.tabs.training_controller import build_training_tab_with_logic


pytestmark = pytest.mark.integration


class AppPage:
    """Page stand-in for building the whole application shell."""

    def __init__(self):
        self.controls = []
        self.opened = []
        self.title = None
        self.theme_mode = None
        self.theme = None
        self.appbar = None
        self.snack_bar = None
        self.window_min_width = None
        self.window_min_height = None

    def add(self, *controls):
        self.controls.extend(controls)

    def update(self):
        return None

    def open(self, ctl):
        self.opened.append(ctl)

    def close(self, ctl):
        ctl.open = False

    def run_task(self, handler, *args):
        return None


def test_training_tab_builds(page, help_handler):
    tab, workflow = build_training_tab_with_logic(
        page,
        section_title=section_title,
        _mk_help_handler=help_handler,
        session_provider=SessionProvider(persist=False),
        get_base_url=load_backend_url,
    )
    assert isinstance(tab, ft.Control)
    assert workflow.phase == "idle"


def test_compact_panel_builds(page):
    panel, workflow = build_compact_training_panel(
        page, session_provider=SessionProvider(persist=False), get_base_url=load_backend_url
    )
    assert isinstance(panel, ft.Container)
    assert workflow.result is None


def test_settings_tab_builds(page, help_handler, find_controls):
    tab = build_settings_tab_with_logic(
        page,
        section_title=section_title,
        _mk_help_handler=help_handler,
        session_provider=SessionProvider(persist=False),
    )
    assert isinstance(tab, ft.Control)
    info = [t for t in find_controls(tab, ft.Text) if (t.value or "").startswith("Path:")]
    assert info and "Log entries:" in info[0].value


def test_views_share_one_session(page, help_handler, find_controls):
    provider = SessionProvider()
    training_tab, _ = build_training_tab_with_logic(
        page,
        section_title=section_title,
        _mk_help_handler=help_handler,
        session_provider=provider,
        get_base_url=load_backend_url,
    )
    panel, compact_workflow = build_compact_training_panel(
        page, session_provider=provider, get_base_url=load_backend_url
    )
    settings_tab = build_settings_tab_with_logic(
        page, section_title=section_title, _mk_help_handler=help_handler, session_provider=provider
    )

    session_field = find_controls(settings_tab, ft.TextField, label="Session ID")[0]
    session_field.value = "shared-123"
    find_controls(settings_tab, ft.ElevatedButton, text="Save")[1].on_click(None)

    assert find_controls(training_tab, ft.TextField, label="Active Session ID")[0].value == "shared-123"
    assert compact_workflow.session_id == "shared-123"
    assert load_active_session() == "shared-123"


def test_main_builds_three_tabs():
    page = AppPage()
    app_main.main(page)

    tabs = page.controls[0]
    assert isinstance(tabs, ft.Tabs)
    assert [t.text for t in tabs.tabs] == ["Train Model", "Quick Train", "Settings"]
    assert page.title == app_main.APP_TITLE
