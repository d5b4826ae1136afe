import asyncio

from helpers import common


class DummyPage:
    def __init__(self):
        self.tasks = []

    def run_task(self, handler):
        self.tasks.append(handler)
        return "scheduled"


def test_schedule_task_prefers_page_run_task():
    page = DummyPage()

    async def handler():
        return None

    assert common.schedule_task(page, handler) == "scheduled"
    assert page.tasks == [handler]


def test_schedule_task_without_run_task_uses_event_loop():
    ran = []

    async def handler():
        ran.append(True)

    async def go():
        task = common.schedule_task(object(), handler)
        await task

    asyncio.run(go())
    assert ran == [True]
