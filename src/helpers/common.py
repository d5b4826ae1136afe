import asyncio

import flet as ft


def schedule_task(page: ft.Page, handler):
    """Run an async handler from a sync Flet event.

    Prefers ``page.run_task`` and falls back to ``asyncio.create_task`` when
    the page does not provide it.
    """
    if hasattr(page, "run_task") and callable(getattr(page, "run_task")):
        return page.run_task(handler)
    return asyncio.create_task(handler())


__all__ = ["schedule_task"]
