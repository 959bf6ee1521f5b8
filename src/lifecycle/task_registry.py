"""
Task Registry
-------------

Every long-lived asyncio task in the controller (effect loop, state poller,
API server) is created through create_tracked_task() so that failures are
logged as they happen and shutdown can find whatever is still running.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from itertools import count
from typing import Any, Dict, Iterable, List, Optional

from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.TASK)


class TaskCategory(Enum):
    """What a tracked task belongs to"""
    API = auto()
    ANIMATION = auto()
    BACKGROUND = auto()
    SYSTEM = auto()
    GENERAL = auto()


class TaskStatus(Enum):
    RUNNING = auto()
    COMPLETED = auto()
    CANCELLED = auto()
    FAILED = auto()


@dataclass(frozen=True)
class TaskInfo:
    id: int
    category: TaskCategory
    description: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class TaskRecord:
    task: asyncio.Task
    info: TaskInfo
    cancelled: bool = False
    finished_with_error: Optional[BaseException] = None
    finished_return: Optional[Any] = None

    @property
    def status(self) -> TaskStatus:
        if not self.task.done():
            return TaskStatus.RUNNING
        # read from the task: done callbacks run one loop turn later
        if self.task.cancelled():
            return TaskStatus.CANCELLED
        if self.task.exception() is not None:
            return TaskStatus.FAILED
        return TaskStatus.COMPLETED

    def label(self) -> str:
        return f"#{self.info.id} {self.info.category.name} '{self.info.description}'"


class TaskRegistry:
    """
    Process-wide registry of tracked tasks.

    Records outlive their tasks so failures stay visible, with one exception:
    the animation engine starts a new task per effect, so animation records
    that finished cleanly are dropped whenever a new task registers.
    """

    _instance: Optional["TaskRegistry"] = None

    def __init__(self) -> None:
        self._records: Dict[asyncio.Task, TaskRecord] = {}
        self._ids = count(1)

    @classmethod
    def instance(cls) -> "TaskRegistry":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def register(self, task: asyncio.Task, category: TaskCategory, description: str) -> int:
        self._drop_finished_animations()

        info = TaskInfo(id=next(self._ids), category=category, description=description)
        record = TaskRecord(task=task, info=info)
        self._records[task] = record
        task.add_done_callback(self._task_done)

        log.debug("Task registered", task=record.label())
        return info.id

    def _drop_finished_animations(self) -> None:
        for task in [
            t for t, r in self._records.items()
            if r.info.category == TaskCategory.ANIMATION and r.status == TaskStatus.COMPLETED
        ]:
            del self._records[task]

    def _task_done(self, task: asyncio.Task) -> None:
        record = self._records.get(task)
        if record is None:
            return

        if task.cancelled():
            record.cancelled = True
            log.debug("Task cancelled", task=record.label())
            return

        error = task.exception()
        if error is not None:
            record.finished_with_error = error
            log.error("Task failed", task=record.label(), error=repr(error))
            return

        record.finished_return = task.result()
        log.debug("Task completed", task=record.label())

    # --- queries ---

    def list_all(self) -> List[TaskRecord]:
        return list(self._records.values())

    def _with_status(self, status: TaskStatus) -> List[TaskRecord]:
        return [r for r in self._records.values() if r.status == status]

    def active(self) -> List[TaskRecord]:
        return self._with_status(TaskStatus.RUNNING)

    def failed(self) -> List[TaskRecord]:
        return self._with_status(TaskStatus.FAILED)

    def summary(self) -> str:
        return (
            f"Tasks: total={len(self._records)}, running={len(self.active())}, "
            f"failed={len(self.failed())}"
        )

    def get_tasks_for_shutdown(self, exclude: Optional[Iterable[asyncio.Task]] = None) -> List[asyncio.Task]:
        """Running tracked tasks, minus `exclude`"""
        skip = set(exclude or ())
        tasks = [r.task for r in self.active() if r.task not in skip]
        log.debug("Tasks pending cancellation", count=len(tasks))
        return tasks


def create_tracked_task(
    coro,
    *,
    category: TaskCategory,
    description: str,
    loop: Optional[asyncio.AbstractEventLoop] = None
) -> asyncio.Task:
    """Schedule `coro` on the running loop and register it"""
    task = (loop or asyncio.get_running_loop()).create_task(coro)
    TaskRegistry.instance().register(task, category, description)
    return task
