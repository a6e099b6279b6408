"""
AWS Route53 DNS provider implementation.

This module talks to Route53 through boto3, using a named credential profile
and a fixed region.
"""

import logging
from typing import Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .base_provider import DNSProvider, DNSProviderError

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-2"


def _client_error(e: ClientError) -> DNSProviderError:
    error = e.response.get("Error", {})
    return DNSProviderError(error.get("Code", "Unknown"), error.get("Message", str(e)))


class Route53Provider(DNSProvider):
    """Route53 provider backed by a boto3 session."""

    def __init__(self, config: Dict, client=None):
        """
        Initialize Route53 provider.

        Args:
            config: Provider configuration with "profile" and "region"
            client: Optional pre-built route53 client
        """
        self.config = config
        self.profile = config.get("profile")
        self.region = config.get("region", DEFAULT_REGION)
        self.client = client or self._create_client()

        logger.info(
            f"Route53 provider initialized for profile {self.profile} in {self.region}"
        )

    def _create_client(self):
        """Create the route53 client for the configured profile and region."""
        try:
            session = boto3.Session(profile_name=self.profile, region_name=self.region)
            return session.client("route53")
        except BotoCoreError as e:
            logger.error(f"Failed to create AWS session: {e}")
            raise DNSProviderError(type(e).__name__, str(e))

    def list_records_page(self, zone_id: str, cursor: Optional[Dict] = None) -> Dict:
        """Get one page of record sets for a zone."""
        params = {"HostedZoneId": zone_id}
        if cursor:
            params.update({key: value for key, value in cursor.items() if value})

        try:
            response = self.client.list_resource_record_sets(**params)
        except ClientError as e:
            logger.error(f"Failed to list record sets in zone {zone_id}: {e}")
            raise _client_error(e)
        except BotoCoreError as e:
            logger.error(f"Failed to list record sets in zone {zone_id}: {e}")
            raise DNSProviderError(type(e).__name__, str(e))

        logger.debug(
            f"Route53: Retrieved {len(response['ResourceRecordSets'])} record sets "
            f"(truncated={response['IsTruncated']})"
        )
        return response

    def change_records(self, zone_id: str, changes: List[Dict], comment: str = "") -> Dict:
        """Submit all changes in a single change batch."""
        change_batch = {"Changes": changes}
        if comment:
            change_batch["Comment"] = comment

        try:
            response = self.client.change_resource_record_sets(
                HostedZoneId=zone_id, ChangeBatch=change_batch
            )
        except ClientError as e:
            logger.error(f"Failed to change record sets in zone {zone_id}: {e}")
            raise _client_error(e)
        except BotoCoreError as e:
            logger.error(f"Failed to change record sets in zone {zone_id}: {e}")
            raise DNSProviderError(type(e).__name__, str(e))

        change_info = response["ChangeInfo"]
        logger.info(
            f"Route53: Submitted {len(changes)} changes, "
            f"change {change_info['Id']} is {change_info['Status']}"
        )
        return change_info
