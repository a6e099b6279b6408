#!/usr/bin/env python3
"""
Maintenance Manager - Toggle DNS weighted routing for an environment

This module fetches the weighted alias records of an environment, shows them,
asks for confirmation and then submits the weights that either route traffic
to the maintenance target or back to the service targets.
"""

import logging
from typing import Dict, List, Optional

from rich.console import Console

from ..providers.dns_client import DNSClient
from .context import resolve_context
from .presenter import print_changes, print_planned_changes, print_records
from .weight_planner import WeightPlanner

logger = logging.getLogger(__name__)

CONFIRM_PROMPT = "Do you wish to continue? (yes/no): "


class MaintenanceManager:
    """Main class that orchestrates a maintenance mode toggle."""

    def __init__(
        self,
        config: Dict,
        profile: str,
        mode: str = "off",
        console: Optional[Console] = None,
        dns_client: Optional[DNSClient] = None,
    ):
        """
        Initialize the manager for one environment.

        Raises:
            InvalidProfileError: If the profile has no environment context
        """
        self.config = config
        self.mode = mode
        self.console = console or Console()
        self.context = resolve_context(profile, config.get("environments"))
        self.dns_client = dns_client or DNSClient(config, self.context.aws_profile)
        self.planner = WeightPlanner(
            self.context.domain,
            config["maintenance_target"],
            config["service_target_pattern"],
        )
        self.applied_changes: List[Dict] = []

    def fetch_records(self) -> List[Dict]:
        """Fetch the allow-listed alias records of the environment."""
        return self.dns_client.fetch_records(
            self.context.hosted_zone_id,
            self.context.domain,
            self.config["record_names"],
        )

    def confirm(self) -> bool:
        """Ask the user to confirm; only an exact "yes" proceeds."""
        try:
            answer = self.console.input(CONFIRM_PROMPT)
        except EOFError:
            answer = ""
        return answer.strip() == "yes"

    def run(self, dry_run: bool = False) -> bool:
        """
        Run the toggle: fetch, display, confirm, plan, submit, display.

        Returns:
            True when the changes were applied, or when nothing was applied
            because of a dry run, a declined confirmation or no matching records

        Raises:
            DNSProviderError: If listing or submitting records fails
        """
        records = self.fetch_records()
        if not records:
            self.console.print(
                f"No matching records found in this environment: {self.context.name}"
            )
            logger.warning(
                f"No matching records in zone {self.context.hosted_zone_id}, nothing to change"
            )
            return True

        print_records(records, self.context.name, self.console)

        if dry_run:
            changes = self.planner.plan_changes(records, self.mode)
            print_planned_changes(changes, self.context.name, self.console)
            self.console.print("[yellow]DRY RUN MODE - No changes will be applied[/yellow]")
            return True

        if not self.confirm():
            self.console.print("No changes made, goodbye")
            logger.info("Maintenance toggle aborted by user")
            return True

        changes = self.planner.plan_changes(records, self.mode)
        comment = f"Maintenance mode {self.mode} for {self.context.name}"
        change_info = self.dns_client.submit_changes(
            self.context.hosted_zone_id, changes, comment
        )
        logger.info(f"Change {change_info.get('Id')} status {change_info.get('Status')}")
        self.applied_changes = changes

        self.console.print(
            "Changes made, it may take more than a minute for changes to propagate"
        )
        print_changes(changes, self.context.name, self.console)
        return True
