"""
Utility functions and helpers.

This package contains record matching and validation helpers.
"""

from .validators import (
    compile_target_pattern,
    filter_records,
    is_valid_record,
    validate_domain_suffix,
)

__all__ = [
    "compile_target_pattern",
    "filter_records",
    "is_valid_record",
    "validate_domain_suffix",
]
