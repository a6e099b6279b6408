"""
DNS Maintenance Mode - Weighted routing toggle for Route53

Switches the weighted alias records of an environment between the
maintenance target and the regular service targets.
"""

__version__ = "1.0.0"
__author__ = "DNS Maintenance Mode Team"
__description__ = "Toggle maintenance mode through Route53 weighted routing"

from .core.maintenance_manager import MaintenanceManager
from .core.weight_planner import WeightPlanner
from .providers.dns_client import DNSClient

__all__ = [
    "MaintenanceManager",
    "WeightPlanner",
    "DNSClient",
]
