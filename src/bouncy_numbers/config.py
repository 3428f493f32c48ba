"""
Global configuration and reference values for the bouncy number search.

Reference: Project Euler, Problem 112
"""

from dataclasses import dataclass


# =============================================================================
# Target Proportion
# =============================================================================

THRESHOLD = 0.99
"""Proportion of bouncy numbers the search must reach."""

THRESHOLD_MIN = 0.0
"""Exclusive lower limit for a valid threshold."""

THRESHOLD_MAX = 1.0
"""Exclusive upper limit for a valid threshold (the proportion never reaches 1)."""


# =============================================================================
# Reference Values
# =============================================================================

FIRST_BOUNCY = 101
"""Smallest bouncy number."""

REFERENCE_BOUNCY_BELOW_1000 = 525
"""Number of bouncy integers in [1, 1000]."""

REFERENCE_FIRST_OVER_50 = 538
"""First integer at which the bouncy proportion reaches 50%."""

REFERENCE_FIRST_OVER_90 = 21780
"""First integer at which the bouncy proportion reaches 90%."""

REFERENCE_FIRST_OVER_99 = 1587000
"""First integer at which the bouncy proportion reaches 99%."""


@dataclass
class ReferenceCrossing:
    """A documented (threshold, first crossing) pair."""
    threshold: float
    first_over: int


REFERENCE_CROSSINGS = [
    ReferenceCrossing(0.50, REFERENCE_FIRST_OVER_50),
    ReferenceCrossing(0.90, REFERENCE_FIRST_OVER_90),
    ReferenceCrossing(0.99, REFERENCE_FIRST_OVER_99),
]
"""Known crossings, smallest threshold first."""


# =============================================================================
# Numerical Parameters
# =============================================================================

BASE = 10
"""Number base. Each level of the counter appends one decimal digit."""

MAX_LEVEL = 18
"""Largest digit length whose values still fit in an int64 frontier."""

LARGE_LEVEL_WARNING = 9
"""Expanding to this many digits allocates a frontier of 10^9 numbers; warn."""

EXPAND_CHUNK_PARENTS = 1 << 16
"""Frontier parents expanded per vectorized block (children = 10x this)."""


# =============================================================================
# Utility Functions
# =============================================================================

def validate_threshold(threshold: float) -> float:
    """
    Check that a threshold lies strictly between 0 and 1.

    The bouncy proportion tends to 1 but never reaches it, so a threshold
    of 1 or more would expand levels until memory runs out.

    Parameters
    ----------
    threshold : float
        Target proportion of bouncy numbers.

    Returns
    -------
    float
        The threshold as a float.

    Raises
    ------
    ValueError
        If the threshold is outside (0, 1).
    """
    threshold = float(threshold)
    if not THRESHOLD_MIN < threshold < THRESHOLD_MAX:
        raise ValueError(
            f"Threshold must lie in ({THRESHOLD_MIN}, {THRESHOLD_MAX}), got {threshold}"
        )
    return threshold


# Verify the default
assert validate_threshold(THRESHOLD) == THRESHOLD, "Default threshold must be valid"
