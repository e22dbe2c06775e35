"""Tag lookup helpers and the sources tasks advertise their DNS policy from."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

from .exceptions import InvalidInputError, NotFoundError
from .models import NetworkInterface, Tag, parse_tags

LOG = logging.getLogger(__name__)


def get_tag(key: str, tags: Iterable[Tag]) -> Optional[str]:
    """Return the value of the first tag named ``key``."""

    return next((tag.value for tag in tags if tag.key == key), None)


def get_required_tag(key: str, tags: Iterable[Tag], context: str) -> str:
    value = get_tag(key, tags)
    if not value:
        raise NotFoundError(f"{context} does not have the '{key}' tag.")
    return value


def parse_ttl(value: Optional[str], default: int, context: str) -> int:
    """Interpret a TTL tag value in seconds, falling back to ``default``."""

    if value is None or not value.strip():
        return default
    try:
        ttl = int(value.strip())
    except ValueError:
        raise InvalidInputError(
            f"{context} has an invalid TTL tag value '{value}'."
        ) from None
    if ttl < 0:
        raise InvalidInputError(f"{context} has a negative TTL tag value '{value}'.")
    return ttl


class TagSource(ABC):
    """Flat key/value tag collection attached to some resource of a task."""

    @abstractmethod
    def tags(self) -> Sequence[Tag]:
        """Return every tag of the backing resource."""

    def get(self, key: str) -> Optional[str]:
        return get_tag(key, self.tags())

    def require(self, key: str, context: str) -> str:
        return get_required_tag(key, self.tags(), context)


class InterfaceTagSource(TagSource):
    """Tags read off an already described network interface."""

    def __init__(self, interface: NetworkInterface) -> None:
        self._interface = interface

    def tags(self) -> Sequence[Tag]:
        return self._interface.tags


class TaskTagSource(TagSource):
    """Tags of the ECS task itself, fetched once on first use."""

    def __init__(self, ecs_client, task_arn: str) -> None:
        self._client = ecs_client
        self._task_arn = task_arn
        self._tags: Optional[Sequence[Tag]] = None

    def tags(self) -> Sequence[Tag]:
        if self._tags is None:
            LOG.debug("Listing tags for task %s", self._task_arn)
            response = self._client.list_tags_for_resource(resourceArn=self._task_arn)
            self._tags = parse_tags(response.get("tags"))
        return self._tags
