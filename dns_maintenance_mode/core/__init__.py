"""
Core maintenance mode functionality.

This package contains the business logic for toggling weighted routing.
"""

from .context import EnvironmentContext, InvalidProfileError, resolve_context
from .maintenance_manager import MaintenanceManager
from .weight_planner import WeightPlanner

__all__ = [
    "EnvironmentContext",
    "InvalidProfileError",
    "MaintenanceManager",
    "WeightPlanner",
    "resolve_context",
]
