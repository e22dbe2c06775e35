"""Event primitives consumed by the driver registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from public_discovery.exceptions import InvalidInputError
from public_discovery.models import NetworkAttachment, Task

LOG = logging.getLogger(__name__)

TASK_STATE_CHANGE = "ECS Task State Change"


@dataclass(frozen=True)
class TaskRunning:
    """A task whose desired status is RUNNING and should be reachable."""

    task: Task


@dataclass(frozen=True)
class TaskStopped:
    """A task leaving service; any desired status other than RUNNING."""

    task: Task


TaskEvent = Union[TaskRunning, TaskStopped]


def parse_task(detail: Mapping[str, Any]) -> Task:
    task_arn = detail.get("taskArn")
    if not task_arn:
        raise InvalidInputError("Unknown task ARN!")

    return Task(
        task_arn=str(task_arn),
        desired_status=str(detail.get("desiredStatus", "")),
        last_status=detail.get("lastStatus"),
        attachments=tuple(
            NetworkAttachment.from_api(entry)
            for entry in detail.get("attachments") or ()
        ),
    )


def parse_event(event: Mapping[str, Any]) -> TaskEvent:
    """Turn an EventBridge task state change into a registry event."""

    if not isinstance(event, Mapping):
        raise InvalidInputError("Unknown task ARN!")

    detail_type = event.get("detail-type")
    if detail_type is not None and detail_type != TASK_STATE_CHANGE:
        LOG.debug("Handling unexpected event type '%s'", detail_type)

    detail = event.get("detail")
    task = parse_task(detail if isinstance(detail, Mapping) else {})
    if task.is_running:
        return TaskRunning(task)
    return TaskStopped(task)
