"""Configuration data structures for the public discovery driver.

The driver only needs to know which hosted zone it writes to and how a task
advertises its DNS policy.  Loading these values from the environment or a
YAML file is the job of :mod:`ecs_discovery_lambda.config`; this module keeps
the core free of any particular configuration source.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NAME_TAG = "public-discovery:name"
TTL_TAG = "public-discovery:ttl"
DEFAULT_TTL = 60


class TagSourceKind(Enum):
    """Where the name/TTL tags of a task are read from.

    ``INTERFACE`` reuses the network interface that was already described to
    find the public address, so it costs no extra call.  ``TASK`` lists the
    tags of the ECS task itself, which requires the service to propagate its
    tags to tasks.
    """

    INTERFACE = "interface"
    TASK = "task"

    @classmethod
    def parse(cls, value: str) -> "TagSourceKind":
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(
                f"Unsupported tag source '{value}' (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class DiscoveryConfig:
    """Driver level configuration knobs."""

    hosted_zone_id: str
    hosted_zone_name: str
    default_ttl: int = DEFAULT_TTL
    tag_source: TagSourceKind = TagSourceKind.INTERFACE
    name_tag: str = NAME_TAG
    ttl_tag: str = TTL_TAG

    def record_name(self, label: str) -> str:
        """Return the fully qualified record name for ``label``."""

        return f"{label}.{self.hosted_zone_name}"
