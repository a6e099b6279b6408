"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common interface over the supported DNS providers,
currently AWS Route53 and an in-memory mock, and implements the record
pagination loop on top of them.
"""

import logging
from typing import Dict, Iterable, List

from .base_provider import DNSProvider
from .mock_provider import MockDNSProvider
from .route53_provider import DEFAULT_REGION, Route53Provider
from ..utils.validators import filter_records

logger = logging.getLogger(__name__)


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict, aws_profile: str = None):
        """Initialize DNS client with configuration."""
        self.config = config
        self.aws_profile = aws_profile
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "route53")
        provider_config = dict(self.config.get("dns_providers", {}).get(provider_name) or {})

        if provider_name == "route53":
            provider_config.setdefault("profile", self.aws_profile)
            provider_config.setdefault("region", self.config.get("region", DEFAULT_REGION))
            return Route53Provider(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            raise ValueError(f"Unknown DNS provider '{provider_name}'")

    def fetch_records(
        self, zone_id: str, domain: str, record_names: Iterable[str]
    ) -> List[Dict]:
        """
        Fetch every allow-listed alias record in a zone.

        Pages are requested until the provider reports the listing is no
        longer truncated. Each page is filtered before it is accumulated, so
        the result keeps fetch order.

        Args:
            zone_id: Hosted zone to list
            domain: Domain suffix of the environment
            record_names: Allow-listed record labels

        Returns:
            The matching record sets
        """
        record_names = list(record_names)
        valid_records = []
        cursor = None
        page_count = 0
        is_truncated = True

        while is_truncated:
            response = self.provider.list_records_page(zone_id, cursor)
            page_count += 1

            filtered = filter_records(response["ResourceRecordSets"], domain, record_names)
            valid_records.extend(filtered)

            cursor = {
                "StartRecordName": response.get("NextRecordName"),
                "StartRecordType": response.get("NextRecordType"),
                "StartRecordIdentifier": response.get("NextRecordIdentifier"),
            }
            is_truncated = response["IsTruncated"]

        logger.info(
            f"Fetched {len(valid_records)} matching records from zone {zone_id} "
            f"in {page_count} pages"
        )
        return valid_records

    def submit_changes(self, zone_id: str, changes: List[Dict], comment: str = "") -> Dict:
        """Submit all changes to the provider in one batch."""
        return self.provider.change_records(zone_id, changes, comment)
