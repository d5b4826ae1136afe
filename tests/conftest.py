import asyncio
import inspect
from typing import Any, List

import pytest

from db.core import _DB_PATH_OVERRIDE, close_all_connections, init_db


@pytest.fixture(params=["asyncio"])  # Use only asyncio backend for anyio-based tests
def anyio_backend(request):
    return request.param


@pytest.fixture(autouse=True)
def isolated_db(tmp_path, monkeypatch):
    """Point settings and log storage at a throwaway database for every test."""
    monkeypatch.delenv("MODELTRAINER_BACKEND_URL", raising=False)
    monkeypatch.delenv("MODELTRAINER_SESSION_ID", raising=False)
    db_path = str(tmp_path / "test.db")
    _DB_PATH_OVERRIDE["path"] = db_path
    init_db(db_path)
    yield db_path
    close_all_connections()
    _DB_PATH_OVERRIDE.clear()


class DummyPage:
    """Minimal stand-in for ft.Page used by controller tests.

    - controls / overlay collections
    - snack_bar / dialog attributes
    - update() / update_async()
    - open() / close() for dialogs and snack bars
    - run_task() runs the async handler to completion synchronously
    - launch_url() records opened URLs
    """

    def __init__(self):
        self.controls: List[Any] = []
        self.overlay: List[Any] = []
        self.snack_bar = None
        self.dialog = None
        self.opened: List[Any] = []
        self.launched: List[Any] = []
        self.update_count = 0

    def add(self, *controls):
        self.controls.extend(controls)

    def update(self):
        self.update_count += 1

    async def update_async(self):
        self.update()

    def open(self, ctl):
        self.opened.append(ctl)
        self.dialog = ctl

    def close(self, ctl):
        ctl.open = False

    def run_task(self, handler, *args):
        if inspect.iscoroutinefunction(handler):
            return asyncio.run(handler(*args))
        return asyncio.run(handler)

    def launch_url(self, url, **kwargs):
        self.launched.append((url, kwargs))


@pytest.fixture
def page() -> DummyPage:
    return DummyPage()


def _mk_help_handler(_msg: str):
    def handler(_=None):  # noqa: ARG001
        return None

    return handler


@pytest.fixture
def help_handler():
    return _mk_help_handler


def iter_controls(root):
    """Depth-first walk over a Flet control tree (content / controls / actions)."""
    stack = [root]
    while stack:
        ctl = stack.pop()
        if ctl is None:
            continue
        yield ctl
        children = []
        content = getattr(ctl, "content", None)
        if content is not None and not isinstance(content, str):
            children.append(content)
        children.extend(getattr(ctl, "controls", None) or [])
        children.extend(reversed(getattr(ctl, "tabs", None) or []))
        stack.extend(reversed(children))


@pytest.fixture
def find_controls():
    def _find(root, kind, **attrs):
        return [
            c
            for c in iter_controls(root)
            if isinstance(c, kind) and all(getattr(c, k, None) == v for k, v in attrs.items())
        ]

    return _find
