#!/usr/bin/env python3
"""
DNS Maintenance Mode - Command Line Interface

Main entry point for toggling maintenance mode on weighted alias records.
"""

import argparse
import copy
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import yaml

from ..core.context import DEFAULT_ENVIRONMENTS, InvalidProfileError
from ..core.maintenance_manager import MaintenanceManager
from ..providers.base_provider import DNSProviderError
from ..utils.validators import VALID_MODES

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="DNS Maintenance Mode - Toggle weighted routing to the maintenance target"
    )

    parser.add_argument(
        "--mode",
        default="off",
        choices=VALID_MODES,
        help="Whether maintenance mode is turned on or off (default: off)",
    )

    parser.add_argument(
        "--profile",
        default="invalid",
        help="Environment to change: dev, staging or production",
    )

    parser.add_argument(
        "--config", "-c", help="Configuration file path (default: built-in settings)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the planned weights without asking or making changes",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.config and not Path(args.config).exists():
        print(f"Error: Configuration file '{args.config}' not found")
        sys.exit(1)

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError) as e:
        print(f"Error: Failed to load configuration: {e}")
        sys.exit(1)

    try:
        config_logger(config, args.verbose)
    except (OSError, ValueError) as e:
        print(f"Error: Invalid logging configuration: {e}")
        sys.exit(1)

    try:
        manager = MaintenanceManager(config, args.profile, args.mode)
        manager.run(dry_run=args.dry_run)
    except InvalidProfileError as e:
        print(e)
        sys.exit(1)
    except DNSProviderError as e:
        print(e.code, e.message)
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    sys.exit(0)


def load_config(config_path: Optional[str]) -> Dict:
    """Load configuration from YAML file, merged over the defaults."""
    config = get_default_config()
    if not config_path:
        return config

    with open(config_path, "r") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise yaml.YAMLError(f"Expected a mapping at the top of {config_path}")

    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            section = config[key]
            for name, entry in value.items():
                if isinstance(entry, dict) and isinstance(section.get(name), dict):
                    section[name].update(entry)
                else:
                    section[name] = entry
        else:
            config[key] = value

    logger.info(f"Configuration loaded from {config_path}")
    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "region": "us-east-2",
        "default_provider": "route53",
        "dns_providers": {"route53": {}, "mock": {}},
        "environments": copy.deepcopy(DEFAULT_ENVIRONMENTS),
        "record_names": ["www", "app", "api", "admin", "status"],
        "maintenance_target": "maintenance",
        "service_target_pattern": "^k8s-a",
        "logging": {"level": "WARNING", "file": None},
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = "DEBUG" if verbose else logging_config.get("level", "WARNING")
    log_file = logging_config.get("file")

    if isinstance(log_level, str) and not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown logging level '{log_level}'")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


if __name__ == "__main__":
    main()
