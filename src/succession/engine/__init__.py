"""
Share engine for succession.

Provides tier precedence, statutory share distribution, and reserved shares.
"""

from .precedence import (
    determine_active_tier,
    has_living_descendant,
    is_inheritable,
    root_members,
    slot_holders,
)
from .distribution import (
    ShareInvariantError,
    calculate_shares,
    check_share_invariant,
    find_current_spouse,
    slot_shares,
)
from .reserved import reserved_ratio, reserved_share

__all__ = [
    "determine_active_tier",
    "has_living_descendant",
    "is_inheritable",
    "root_members",
    "slot_holders",
    "ShareInvariantError",
    "calculate_shares",
    "check_share_invariant",
    "find_current_spouse",
    "slot_shares",
    "reserved_ratio",
    "reserved_share",
]
