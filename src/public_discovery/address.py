"""Resolve the public address of a task from its elastic network interface."""

from __future__ import annotations

import logging

from .exceptions import NotFoundError
from .models import NetworkInterface, Task

LOG = logging.getLogger(__name__)


class AddressResolver:
    """Look up task network interfaces through the EC2 API."""

    def __init__(self, ec2_client) -> None:
        self._client = ec2_client

    def describe_interface(self, interface_id: str) -> NetworkInterface:
        response = self._client.describe_network_interfaces(
            NetworkInterfaceIds=[interface_id]
        )
        interfaces = response.get("NetworkInterfaces") or []
        if not interfaces:
            return NetworkInterface(interface_id=interface_id)
        return NetworkInterface.from_api(interface_id, interfaces[0])

    def resolve(self, task: Task) -> NetworkInterface:
        """Return the task's interface, guaranteed to carry a public address."""

        interface_id = task.network_interface_id()
        if not interface_id:
            raise NotFoundError(
                f"Task {task.task_id} does not have a network interface."
            )

        interface = self.describe_interface(interface_id)
        if not interface.public_address:
            raise NotFoundError(
                f"Task {task.task_id} does not have a public ip address."
            )

        LOG.debug(
            "Task %s interface %s has public address %s",
            task.task_id,
            interface_id,
            interface.public_address,
        )
        return interface

    def resolve_public_address(self, task: Task) -> str:
        return self.resolve(task).public_address  # type: ignore[return-value]
