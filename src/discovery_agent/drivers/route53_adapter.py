"""Adapter between the public discovery driver and the registry contract."""

from __future__ import annotations

from public_discovery.driver import PublicDiscoveryDriver
from public_discovery.models import Task

from .base import TaskDriver


class Route53DriverAdapter(TaskDriver):
    """Wrap :class:`~public_discovery.driver.PublicDiscoveryDriver` for registry use."""

    def __init__(self, driver: PublicDiscoveryDriver) -> None:
        self._driver = driver

    @property
    def driver(self) -> PublicDiscoveryDriver:
        return self._driver

    def on_task_running(self, task: Task) -> None:
        self._driver.register_task(task)

    def on_task_stopped(self, task: Task) -> None:
        self._driver.deregister_task(task)


def build_route53_adapter(driver: PublicDiscoveryDriver) -> Route53DriverAdapter:
    return Route53DriverAdapter(driver)
