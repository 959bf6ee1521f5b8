import asyncio
import contextlib

import pytest

from lifecycle.task_registry import create_tracked_task, TaskCategory, TaskRegistry, TaskStatus


async def forever():
    await asyncio.sleep(10)


async def returns(value):
    return value


async def explodes():
    raise ValueError("boom")


def test_instance_is_singleton():
    assert TaskRegistry.instance() is TaskRegistry.instance()
    first = TaskRegistry.instance()
    TaskRegistry.reset()
    assert TaskRegistry.instance() is not first


@pytest.mark.asyncio
async def test_records_outcomes():
    ok = create_tracked_task(returns(7), category=TaskCategory.GENERAL, description="ok")
    bad = create_tracked_task(explodes(), category=TaskCategory.API, description="bad")
    slow = create_tracked_task(forever(), category=TaskCategory.BACKGROUND, description="slow")

    await ok
    with pytest.raises(ValueError):
        await bad
    slow.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await slow
    await asyncio.sleep(0)

    registry = TaskRegistry.instance()
    records = {r.info.description: r for r in registry.list_all()}
    assert records["ok"].finished_return == 7
    assert isinstance(records["bad"].finished_with_error, ValueError)
    assert records["slow"].cancelled
    assert [records[k].status for k in ("ok", "bad", "slow")] == [
        TaskStatus.COMPLETED, TaskStatus.FAILED, TaskStatus.CANCELLED,
    ]
    assert registry.failed() == [records["bad"]]
    assert registry.active() == []
    assert registry.summary() == "Tasks: total=3, running=0, failed=1"


@pytest.mark.asyncio
async def test_finished_animation_records_are_pruned():
    registry = TaskRegistry.instance()
    for _ in range(5):
        task = create_tracked_task(returns(None), category=TaskCategory.ANIMATION, description="effect")
        await task

    running = create_tracked_task(forever(), category=TaskCategory.ANIMATION, description="effect")
    try:
        animation = [r for r in registry.list_all() if r.info.category == TaskCategory.ANIMATION]
        assert len(animation) == 1
        assert animation[0].task is running
    finally:
        running.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await running


@pytest.mark.asyncio
async def test_tasks_for_shutdown_excludes():
    a = create_tracked_task(forever(), category=TaskCategory.API, description="a")
    b = create_tracked_task(forever(), category=TaskCategory.SYSTEM, description="b")
    try:
        assert TaskRegistry.instance().get_tasks_for_shutdown(exclude=[a]) == [b]
    finally:
        for task in (a, b):
            task.cancel()
        await asyncio.gather(a, b, return_exceptions=True)
