"""Abstract interfaces for task-aware drivers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from public_discovery.models import Task


class TaskDriver(ABC):
    """Base class for driver adapters managed by :class:`DriverRegistry`."""

    @abstractmethod
    def on_task_running(self, task: Task) -> None:
        """Make ``task`` reachable under its advertised name."""

    @abstractmethod
    def on_task_stopped(self, task: Task) -> None:
        """Remove any state associated with ``task``."""
