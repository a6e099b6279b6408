"""
Environment context resolution.

Maps an environment (profile) name to the domain suffix and hosted zone that
hold its weighted alias records.
"""

import logging
from typing import Dict, NamedTuple, Optional

from ..utils.validators import validate_domain_suffix

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENTS = {
    "dev": {
        "domain": ".dev.example.com.",
        "hosted_zone_id": "Z0DEV0000000000000001",
    },
    "staging": {
        "domain": ".staging.example.com.",
        "hosted_zone_id": "Z0STAGING000000000002",
    },
    "production": {
        "domain": ".example.com.",
        "hosted_zone_id": "Z0PRODUCTION00000003",
    },
}


class InvalidProfileError(ValueError):
    """Raised when an environment name has no context."""

    def __init__(self, profile: str):
        super().__init__("Invalid AWS profile")
        self.profile = profile


class EnvironmentContext(NamedTuple):
    name: str
    domain: str
    hosted_zone_id: str
    aws_profile: str


def resolve_context(
    profile: str, environments: Optional[Dict[str, Dict]] = None
) -> EnvironmentContext:
    """
    Determine which hosted zone and domain to use for the given profile.

    Args:
        profile: Environment name, e.g. "dev", "staging" or "production"
        environments: Lookup table, defaults to DEFAULT_ENVIRONMENTS

    Returns:
        The resolved EnvironmentContext

    Raises:
        InvalidProfileError: If the profile is not in the lookup table
    """
    if environments is None:
        environments = DEFAULT_ENVIRONMENTS

    entry = environments.get(profile)
    if not entry:
        logger.error(f"No environment configured for profile '{profile}'")
        raise InvalidProfileError(profile)

    domain = entry.get("domain", "")
    hosted_zone_id = entry.get("hosted_zone_id", "")
    if not validate_domain_suffix(domain) or not hosted_zone_id:
        raise ValueError(f"Environment '{profile}' is missing a valid domain or hosted zone id")

    context = EnvironmentContext(
        name=profile,
        domain=domain,
        hosted_zone_id=hosted_zone_id,
        aws_profile=entry.get("aws_profile", profile),
    )
    logger.info(
        f"Resolved environment {profile}: domain={domain} zone={hosted_zone_id}"
    )
    return context
