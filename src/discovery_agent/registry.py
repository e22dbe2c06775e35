"""Driver registry dispatching task events to registered adapters."""

from __future__ import annotations

import logging
from typing import Dict

from .drivers import TaskDriver
from .events import TaskEvent, TaskRunning, TaskStopped

LOG = logging.getLogger(__name__)


class DriverRegistry:
    """Dispatch task events to registered driver adapters."""

    def __init__(self) -> None:
        self._drivers: Dict[str, TaskDriver] = {}

    def register(self, name: str, driver: TaskDriver) -> None:
        if name in self._drivers:
            raise ValueError(f"driver '{name}' already registered")
        self._drivers[name] = driver

    def handle(self, event: TaskEvent) -> None:
        if not self._drivers:
            LOG.warning("no drivers registered; event %r is dropped", event)
        if isinstance(event, TaskRunning):
            self._on_task_running(event)
        elif isinstance(event, TaskStopped):
            self._on_task_stopped(event)
        else:
            raise TypeError(f"Unsupported event type: {type(event)!r}")

    def _on_task_running(self, event: TaskRunning) -> None:
        LOG.debug("Task %s is running; registering", event.task.task_id)
        for driver in self._drivers.values():
            driver.on_task_running(event.task)

    def _on_task_stopped(self, event: TaskStopped) -> None:
        LOG.debug(
            "Task %s desired status is %s; deregistering",
            event.task.task_id,
            event.task.desired_status or "unknown",
        )
        for driver in self._drivers.values():
            driver.on_task_stopped(event.task)
