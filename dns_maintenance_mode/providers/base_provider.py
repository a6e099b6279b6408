"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
Pages and changes use the Route53 record set layout.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class DNSProviderError(Exception):
    """Error reported by a DNS provider, with the provider's error code."""

    def __init__(self, code: str, message: str):
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def list_records_page(self, zone_id: str, cursor: Optional[Dict] = None) -> Dict:
        """
        Get one page of record sets for a zone.

        The cursor holds StartRecordName, StartRecordType and
        StartRecordIdentifier taken from the previous page. The returned page
        holds ResourceRecordSets, IsTruncated and, when truncated,
        NextRecordName, NextRecordType and NextRecordIdentifier.
        """
        pass

    @abstractmethod
    def change_records(self, zone_id: str, changes: List[Dict], comment: str = "") -> Dict:
        """Submit a batch of changes and return the change info."""
        pass
