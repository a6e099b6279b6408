"""
Weight Planner - Core logic for maintenance mode routing

This module turns the weighted alias records of an environment into the
UPSERT changes that send traffic either to the maintenance target or back to
the regular service targets.
"""

import copy
import logging
import re
from typing import Dict, List, Union

from ..utils.validators import compile_target_pattern, names_match, qualify

logger = logging.getLogger(__name__)

MODE_ON = "on"
FULL_WEIGHT = 100
NO_WEIGHT = 0


class WeightPlanner:
    """Assigns routing weights to weighted alias records."""

    def __init__(
        self,
        domain: str,
        maintenance_target: str,
        service_target_pattern: Union[str, re.Pattern],
    ):
        """
        Initialize the planner for one environment.

        Args:
            domain: Domain suffix of the environment
            maintenance_target: Label of the maintenance alias target, the
                domain is appended to it
            service_target_pattern: Regular expression matching the alias
                targets that serve regular traffic
        """
        self.domain = domain
        self.maintenance_target = qualify(maintenance_target, domain)
        if isinstance(service_target_pattern, str):
            service_target_pattern = compile_target_pattern(service_target_pattern)
        self.service_target_pattern = service_target_pattern

    def weight_for(self, record: Dict, mode: str) -> int:
        """Return the weight a record should carry in the given mode."""
        dns_name = record["AliasTarget"]["DNSName"]

        if mode == MODE_ON:
            if names_match(dns_name, self.maintenance_target):
                return FULL_WEIGHT
            return NO_WEIGHT

        if self.service_target_pattern.search(dns_name):
            return FULL_WEIGHT
        return NO_WEIGHT

    def plan_changes(self, records: List[Dict], mode: str) -> List[Dict]:
        """
        Build one UPSERT change per record with the weight for the mode.

        Every field of the original record set is carried over unchanged
        except Weight.

        Args:
            records: Filtered alias records
            mode: "on" routes to the maintenance target, anything else to
                the service targets

        Returns:
            List of Route53 change dicts, in record order
        """
        logger.info(f"Planning weights for {len(records)} records, mode={mode}")
        changes = []

        for record in records:
            weight = self.weight_for(record, mode)
            record_set = copy.deepcopy(record)
            record_set["Weight"] = weight

            changes.append({"Action": "UPSERT", "ResourceRecordSet": record_set})
            logger.info(
                f"Weight for {record['Name']} -> {record['AliasTarget']['DNSName']}: "
                f"{record.get('Weight')} -> {weight}"
            )

        return changes
