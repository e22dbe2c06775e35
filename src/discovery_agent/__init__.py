"""Event handling layer between task state changes and discovery drivers."""

from .events import TaskRunning, TaskStopped, parse_event  # noqa: F401
from .registry import DriverRegistry  # noqa: F401

__all__ = [
    "DriverRegistry",
    "TaskRunning",
    "TaskStopped",
    "parse_event",
]
