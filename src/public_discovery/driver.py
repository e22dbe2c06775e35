"""Route 53 public discovery driver.

This module provides the reconciler that keeps one multi-value answer A
record per running task.  It resolves the task's public address and DNS
policy, then writes a single change to the hosted zone: an ``UPSERT`` when a
task becomes reachable, a ``DELETE`` of the previously registered record set
when it goes away.  Nothing is cached between calls; the hosted zone is the
only source of truth.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .address import AddressResolver
from .config import DiscoveryConfig, TagSourceKind
from .locator import RecordSetLocator
from .models import NetworkInterface, RecordSet, Task
from .tags import InterfaceTagSource, TagSource, TaskTagSource, parse_ttl

LOG = logging.getLogger(__name__)

UPSERT = "UPSERT"
DELETE = "DELETE"


@dataclass(frozen=True)
class ChangeResult:
    """A change submitted to the hosted zone."""

    action: str
    record: RecordSet
    change_id: Optional[str] = None
    status: Optional[str] = None


class PublicDiscoveryDriver:
    """Register and deregister task addresses in a Route 53 hosted zone."""

    def __init__(
        self,
        config: DiscoveryConfig,
        *,
        ec2_client,
        route53_client,
        ecs_client=None,
        resolver: Optional[AddressResolver] = None,
        locator: Optional[RecordSetLocator] = None,
    ) -> None:
        if config.tag_source is TagSourceKind.TASK and ecs_client is None:
            raise ValueError("an ECS client is required to read task tags")
        self._config = config
        self._route53 = route53_client
        self._ecs = ecs_client
        self._resolver = resolver or AddressResolver(ec2_client)
        self._locator = locator or RecordSetLocator(route53_client)

    @property
    def config(self) -> DiscoveryConfig:
        return self._config

    # ------------------------------------------------------------------
    # Task lifecycle
    # ------------------------------------------------------------------
    def register_task(self, task: Task) -> ChangeResult:
        """Create or refresh the record set of a reachable task."""

        interface = self._resolver.resolve(task)
        tags = self._tag_source(task, interface)
        record = self.build_record(task, interface.public_address, tags)

        LOG.info(
            "UPSERT '%s' with address '%s' for set '%s'.",
            record.name,
            record.address,
            record.set_identifier,
        )
        return self._submit(UPSERT, record)

    def deregister_task(self, task: Task) -> Optional[ChangeResult]:
        """Delete the record set of a task, if one was ever registered."""

        set_identifier = task.task_id
        existing = self._locator.find_by_set_identifier(
            self._config.hosted_zone_id, set_identifier
        )
        if existing is None or existing.address is None:
            LOG.info(
                "No resource record sets found with set identifier: '%s'.",
                set_identifier,
            )
            return None

        record = RecordSet(
            name=existing.name,
            set_identifier=set_identifier,
            values=(existing.address,),
            ttl=existing.ttl,
        )
        LOG.info(
            "DELETE '%s' with address '%s' for set '%s'.",
            record.name,
            record.address,
            set_identifier,
        )
        return self._submit(DELETE, record)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def build_record(self, task: Task, address: str, tags: TagSource) -> RecordSet:
        context = f"Task {task.task_id}"
        name = tags.require(self._config.name_tag, context)
        ttl = parse_ttl(tags.get(self._config.ttl_tag), self._config.default_ttl, context)
        return RecordSet(
            name=self._config.record_name(name),
            set_identifier=task.task_id,
            values=(address,),
            ttl=ttl,
        )

    def _tag_source(self, task: Task, interface: NetworkInterface) -> TagSource:
        if self._config.tag_source is TagSourceKind.TASK:
            return TaskTagSource(self._ecs, task.task_arn)
        return InterfaceTagSource(interface)

    def _submit(self, action: str, record: RecordSet) -> ChangeResult:
        response = self._route53.change_resource_record_sets(
            HostedZoneId=self._config.hosted_zone_id,
            ChangeBatch={
                "Changes": [{"Action": action, "ResourceRecordSet": record.to_api()}]
            },
        )
        info = response.get("ChangeInfo") or {}
        return ChangeResult(
            action=action,
            record=record,
            change_id=info.get("Id"),
            status=info.get("Status"),
        )
