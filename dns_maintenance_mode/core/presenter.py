"""
Terminal rendering of weighted alias records.
"""

from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table

HEADERS = ("Record", "Alias Target", "Weight")


def _format_weight(weight: Optional[int]) -> str:
    return "-" if weight is None else str(weight)


def build_table(record_sets: List[Dict]) -> Table:
    """Build the Record / Alias Target / Weight table."""
    table = Table(show_lines=True)
    table.add_column(HEADERS[0], style="cyan")
    table.add_column(HEADERS[1], style="white")
    table.add_column(HEADERS[2], style="magenta", justify="right")

    for record in record_sets:
        table.add_row(
            record["Name"],
            record["AliasTarget"]["DNSName"],
            _format_weight(record.get("Weight")),
        )

    return table


def print_records(records: List[Dict], environment: str, console: Console):
    """Print the records that are about to be changed."""
    console.print(f"You are going to make changes in this environment: {environment}")
    console.print("The following records will be changed: ")
    console.print(build_table(records))


def print_changes(changes: List[Dict], environment: str, console: Console):
    """Print the changes that have been applied."""
    console.print(f"Records have been changed in this environment: {environment}")
    console.print("The following records have been changed: ")
    console.print(build_table([change["ResourceRecordSet"] for change in changes]))


def print_planned_changes(changes: List[Dict], environment: str, console: Console):
    console.print(f"Planned weights for this environment: {environment}")
    console.print(build_table([change["ResourceRecordSet"] for change in changes]))
