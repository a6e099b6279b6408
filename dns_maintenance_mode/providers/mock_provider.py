"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores record sets in memory
and pages through them the way Route53 does, for safe testing.
"""

import copy
import logging
from typing import Dict, List, Optional

from .base_provider import DNSProvider, DNSProviderError

logger = logging.getLogger(__name__)


def _record_key(record: Dict):
    return (record["Name"], record["Type"], record.get("SetIdentifier"))


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        config = config or {}
        self.page_size = max(1, int(config.get("page_size", 100)))
        self.records = copy.deepcopy(config.get("records", []))
        self.change_batches = []
        logger.info("Mock DNS provider initialized")

    def _start_index(self, cursor: Optional[Dict]) -> int:
        if not cursor:
            return 0

        key = (
            cursor.get("StartRecordName"),
            cursor.get("StartRecordType"),
            cursor.get("StartRecordIdentifier"),
        )
        for i, record in enumerate(self.records):
            if _record_key(record) == key:
                return i

        raise DNSProviderError("InvalidInput", f"Unknown start record {key}")

    def list_records_page(self, zone_id: str, cursor: Optional[Dict] = None) -> Dict:
        """Get one page of record sets for a zone."""
        start = self._start_index(cursor)
        end = start + self.page_size
        page = {
            "ResourceRecordSets": copy.deepcopy(self.records[start:end]),
            "IsTruncated": end < len(self.records),
            "MaxItems": str(self.page_size),
        }

        if page["IsTruncated"]:
            following = self.records[end]
            page["NextRecordName"] = following["Name"]
            page["NextRecordType"] = following["Type"]
            if following.get("SetIdentifier"):
                page["NextRecordIdentifier"] = following["SetIdentifier"]

        logger.info(f"Mock: Retrieved {len(page['ResourceRecordSets'])} records")
        return page

    def change_records(self, zone_id: str, changes: List[Dict], comment: str = "") -> Dict:
        """Apply a batch of UPSERT changes."""
        self.change_batches.append(
            {"HostedZoneId": zone_id, "Comment": comment, "Changes": copy.deepcopy(changes)}
        )

        for change in changes:
            if change["Action"] != "UPSERT":
                raise DNSProviderError(
                    "InvalidChangeBatch", f"Unsupported action {change['Action']}"
                )

            record_set = copy.deepcopy(change["ResourceRecordSet"])
            for i, existing in enumerate(self.records):
                if _record_key(existing) == _record_key(record_set):
                    self.records[i] = record_set
                    break
            else:
                self.records.append(record_set)

            logger.info(
                f"Mock: Upserted record {record_set['Name']} "
                f"weight={record_set.get('Weight')}"
            )

        return {"Id": f"/change/MOCK{len(self.change_batches)}", "Status": "INSYNC"}
