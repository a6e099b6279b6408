"""
Validators - Record matching and input validation

This module decides which Route53 record sets take part in a maintenance
toggle and validates the values that drive the weight assignment.
"""

import logging
import re
from typing import Dict, Iterable, List

import dns.exception
import dns.name

logger = logging.getLogger(__name__)

VALID_MODES = ("on", "off")

OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def canonical_name(name: str) -> dns.name.Name:
    """
    Convert a record name as returned by Route53 into a comparable DNS name.

    Route53 returns absolute names with a trailing dot and escapes special
    characters in octal (``\\052`` for ``*``). dnspython reads ``\\DDD`` as a
    decimal escape, so octal escapes are rewritten to decimal first. Names
    compare case-insensitively. Names without the trailing dot stay relative
    and never equal an absolute name.

    Args:
        name: The record name to convert

    Returns:
        The parsed dns.name.Name
    """
    decimal = OCTAL_ESCAPE.sub(lambda m: "\\%03d" % int(m.group(1), 8), name.strip())
    return dns.name.from_text(decimal, origin=None)


def names_match(left: str, right: str) -> bool:
    """Compare two DNS names, returning False if either cannot be parsed."""
    if not left or not right:
        return False

    try:
        return canonical_name(left) == canonical_name(right)
    except dns.exception.DNSException as e:
        logger.debug(f"Cannot compare {left!r} and {right!r}: {e}")
        return False


def qualify(label: str, domain: str) -> str:
    """Append the environment domain suffix to a record label."""
    return label + domain


def is_alias_a_record(record: Dict) -> bool:
    """Check whether a record set is an A record that aliases another resource."""
    return record.get("Type") == "A" and bool(record.get("AliasTarget"))


def is_valid_record(record_name: str, domain: str, record_names: Iterable[str]) -> bool:
    """
    Determine whether the name is one of the known, domain-suffixed records.

    Args:
        record_name: Name of the record set
        domain: Domain suffix of the environment, e.g. ".example.com."
        record_names: Allow-listed record labels

    Returns:
        True if the name is allow-listed, False otherwise
    """
    return any(names_match(record_name, qualify(label, domain)) for label in record_names)


def filter_records(
    records: List[Dict], domain: str, record_names: Iterable[str]
) -> List[Dict]:
    """Keep only alias A records whose names are allow-listed, in order."""
    record_names = list(record_names)
    result = []

    for record in records:
        if is_alias_a_record(record) and is_valid_record(
            record.get("Name", ""), domain, record_names
        ):
            result.append(record)
        else:
            logger.debug(
                f"Skipping record {record.get('Name')} ({record.get('Type')})"
            )

    return result


def validate_domain_suffix(domain: str) -> bool:
    """
    Validate an environment domain suffix.

    A suffix is appended directly to record labels, so it has to start with a
    dot and be an absolute name.

    Args:
        domain: The suffix to validate

    Returns:
        True if valid, False otherwise
    """
    if not domain or not isinstance(domain, str):
        return False

    if not domain.startswith(".") or not domain.endswith("."):
        logger.warning(f"Domain suffix must start and end with a dot: {domain}")
        return False

    try:
        dns.name.from_text(domain[1:])
    except dns.exception.DNSException as e:
        logger.warning(f"Invalid domain suffix {domain}: {e}")
        return False

    return True


def compile_target_pattern(pattern: str) -> re.Pattern:
    """
    Compile the alias target pattern used when maintenance mode is off.

    Raises:
        ValueError: If the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid service target pattern '{pattern}': {e}")
