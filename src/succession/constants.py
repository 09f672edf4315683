"""
Shared constants across succession modules.

This module is the single source of truth for:
- Numeric bounds for exact arithmetic
- Back-reference context keys
- Validator check identifiers
"""

# =============================================================================
# NUMERIC BOUNDS
# =============================================================================
# Largest integer that survives a round-trip through IEEE-754 doubles, which is
# what spreadsheet and JSON collaborators use for numbers.

SAFE_INTEGER_MAX = 2**53 - 1


# =============================================================================
# CONTEXT KEYS
# =============================================================================

# Back-reference context for heirs that reference nobody
ROOT_CONTEXT = "__root__"


# =============================================================================
# CHECK IDENTIFIERS
# =============================================================================
# Rule identifiers attached to every validation diagnostic

CHECK_BLANK_NAME = "HV1"
CHECK_CURRENT_SPOUSE = "HV2"
CHECK_REPRESENTED_HEIR = "HV3"
CHECK_RE_TRANSFER_DEATH = "HV4"
CHECK_DEATH_DATE = "HV5"
CHECK_CIRCULAR_REFERENCE = "HV6"
CHECK_REPRESENTATION_SCOPE = "HV7"
CHECK_SUCCESSOR_LINK = "HV8"
CHECK_DUPLICATE_ID = "HV9"
