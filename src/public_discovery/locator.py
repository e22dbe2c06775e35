"""Find the record set registered for a task inside a hosted zone."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .models import RecordSet

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageCursor:
    """Position returned by Route 53 when a listing is truncated."""

    record_name: Optional[str] = None
    record_type: Optional[str] = None
    record_identifier: Optional[str] = None

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> "PageCursor":
        return cls(
            record_name=response.get("NextRecordName"),
            record_type=response.get("NextRecordType"),
            record_identifier=response.get("NextRecordIdentifier"),
        )

    def as_params(self) -> Dict[str, str]:
        params = {
            "StartRecordName": self.record_name,
            "StartRecordType": self.record_type,
            "StartRecordIdentifier": self.record_identifier,
        }
        return {key: value for key, value in params.items() if value is not None}


class RecordSetLocator:
    """Linear, page by page search over the record sets of a zone.

    Zones used for public discovery hold a handful to a few hundred record
    sets, so walking the listing is cheap enough and avoids keeping any index
    of our own.  The search stops on the first page containing a match.
    """

    def __init__(self, route53_client) -> None:
        self._client = route53_client

    def find_by_set_identifier(
        self, zone_id: str, set_identifier: str
    ) -> Optional[RecordSet]:
        cursor: Optional[PageCursor] = None
        pages = 0
        while True:
            params: Dict[str, str] = {"HostedZoneId": zone_id}
            if cursor is not None:
                params.update(cursor.as_params())
            response = self._client.list_resource_record_sets(**params)
            pages += 1

            for entry in response.get("ResourceRecordSets", []):
                record = RecordSet.from_api(entry)
                if record.matches(set_identifier):
                    LOG.debug(
                        "Found record set %s for set '%s' on page %d",
                        record.name,
                        set_identifier,
                        pages,
                    )
                    return record

            if not response.get("IsTruncated"):
                LOG.debug(
                    "No record set for set '%s' after %d page(s)", set_identifier, pages
                )
                return None

            next_cursor = PageCursor.from_response(response)
            if not next_cursor.as_params() or next_cursor == cursor:
                raise RuntimeError(
                    f"Listing of zone {zone_id} is truncated but did not advance "
                    f"after page {pages}"
                )
            cursor = next_cursor
