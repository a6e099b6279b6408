"""
Behave environment configuration for DNS Maintenance Mode integration tests.
"""

import logging
import shutil
import tempfile
from pathlib import Path

from dns_maintenance_mode.cli.main import get_default_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_data_dir = Path(tempfile.mkdtemp(prefix="dns_maintenance_"))
    context.test_service_target = "k8s-a7f3c2e1-0987654321.us-east-2.elb.amazonaws.com."
    context.test_legacy_target = "legacy-web-123456.us-east-2.elb.amazonaws.com."
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.config_data = get_default_config()
    context.config_data["default_provider"] = "mock"
    context.config_data["dns_providers"]["mock"] = {"page_size": 100, "records": []}
    context.answer = "no"
    context.rejection_code = None

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    logger.info(f"Completed scenario: {scenario.name}")


def after_all(context):
    """Clean up test environment after all tests."""
    shutil.rmtree(context.test_data_dir, ignore_errors=True)
    logger.info("Test environment cleanup complete")


