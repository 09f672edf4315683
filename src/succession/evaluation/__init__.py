"""
Evaluation module for succession.

Provides:
- Heir list validation (validate_heirs)
"""

from .validate_heirs import (
    validate,
    errors_by_heir,
    check_hv1_blank_name,
    check_hv2_current_spouse,
    check_hv3_represented_heir,
    check_hv4_re_transfer_death,
    check_hv5_death_date,
    check_hv6_circular_reference,
    check_hv7_representation_scope,
    check_hv8_successor_link,
    check_hv9_duplicate_id,
)

__all__ = [
    "validate",
    "errors_by_heir",
    "check_hv1_blank_name",
    "check_hv2_current_spouse",
    "check_hv3_represented_heir",
    "check_hv4_re_transfer_death",
    "check_hv5_death_date",
    "check_hv6_circular_reference",
    "check_hv7_representation_scope",
    "check_hv8_successor_link",
    "check_hv9_duplicate_id",
]
