"""Value objects describing tasks, interfaces and DNS record sets.

Each type knows how to build itself from the dictionaries returned by the
AWS APIs (``from_api``) so the rest of the package never indexes raw
responses directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence, Tuple

RUNNING = "RUNNING"
ENI_ATTACHMENT = "eni"
NETWORK_INTERFACE_ID = "networkInterfaceId"
RECORD_TYPE = "A"


@dataclass(frozen=True)
class Tag:
    key: str
    value: str

    @classmethod
    def from_api(cls, entry: Mapping[str, Any]) -> "Tag":
        # EC2 uses Key/Value, ECS uses key/value.
        key = entry.get("Key", entry.get("key"))
        value = entry.get("Value", entry.get("value"))
        return cls(key=str(key), value="" if value is None else str(value))


def parse_tags(entries: Optional[Iterable[Mapping[str, Any]]]) -> Tuple[Tag, ...]:
    return tuple(Tag.from_api(entry) for entry in entries or ())


@dataclass(frozen=True)
class NetworkAttachment:
    """One network attachment of a task and its name/value details."""

    type: str
    details: Sequence[Tuple[str, str]] = ()

    def detail(self, name: str) -> Optional[str]:
        return next((value for key, value in self.details if key == name), None)

    @classmethod
    def from_api(cls, entry: Mapping[str, Any]) -> "NetworkAttachment":
        details = tuple(
            (str(item.get("name")), str(item.get("value")))
            for item in entry.get("details") or ()
            if item.get("value") is not None
        )
        return cls(type=str(entry.get("type", "")), details=details)


@dataclass(frozen=True)
class Task:
    """The parts of an ECS task the reconciler cares about."""

    task_arn: str
    desired_status: str
    last_status: Optional[str] = None
    attachments: Sequence[NetworkAttachment] = ()

    @property
    def task_id(self) -> str:
        """Trailing path segment of the task ARN, used as set identifier."""

        return self.task_arn[self.task_arn.rfind("/") + 1:]

    @property
    def is_running(self) -> bool:
        return self.desired_status == RUNNING

    def attachment(self, attachment_type: str) -> Optional[NetworkAttachment]:
        return next(
            (a for a in self.attachments if a.type == attachment_type), None
        )

    def network_interface_id(self) -> Optional[str]:
        eni = self.attachment(ENI_ATTACHMENT)
        if eni is None:
            return None
        return eni.detail(NETWORK_INTERFACE_ID)


@dataclass(frozen=True)
class NetworkInterface:
    interface_id: str
    public_address: Optional[str] = None
    tags: Sequence[Tag] = ()

    @classmethod
    def from_api(cls, interface_id: str, entry: Mapping[str, Any]) -> "NetworkInterface":
        association = entry.get("Association") or {}
        return cls(
            interface_id=str(entry.get("NetworkInterfaceId", interface_id)),
            public_address=association.get("PublicIp"),
            tags=parse_tags(entry.get("TagSet")),
        )


@dataclass(frozen=True)
class RecordSet:
    """A multi-value answer A record set inside a hosted zone."""

    name: str
    set_identifier: Optional[str]
    values: Sequence[str] = ()
    ttl: Optional[int] = None
    type: str = RECORD_TYPE
    multi_value_answer: bool = True

    @property
    def address(self) -> Optional[str]:
        return self.values[0] if self.values else None

    def matches(self, set_identifier: str) -> bool:
        return (
            self.multi_value_answer
            and self.type == RECORD_TYPE
            and self.set_identifier == set_identifier
        )

    def to_api(self) -> dict:
        data: dict = {
            "MultiValueAnswer": self.multi_value_answer,
            "Name": self.name,
            "ResourceRecords": [{"Value": value} for value in self.values],
            "SetIdentifier": self.set_identifier,
            "Type": self.type,
        }
        if self.ttl is not None:
            data["TTL"] = self.ttl
        return data

    @classmethod
    def from_api(cls, entry: Mapping[str, Any]) -> "RecordSet":
        return cls(
            name=str(entry["Name"]),
            set_identifier=entry.get("SetIdentifier"),
            values=tuple(
                str(record["Value"]) for record in entry.get("ResourceRecords") or ()
            ),
            ttl=entry.get("TTL"),
            type=str(entry.get("Type", "")),
            multi_value_answer=bool(entry.get("MultiValueAnswer", False)),
        )
