"""
Direct digit-by-digit classification of integers.

An integer is increasing when no digit is exceeded by the digit to its
left (134468), decreasing when no digit is exceeded by the digit to its
right (664210), and bouncy when it is neither (155349). Single digits and
repdigits (5, 111) are both increasing and decreasing.

These functions read every digit of every number, so they cost O(m) per
m-digit number. They serve as the reference the level-expanding counter
is checked against.

Reference: Project Euler, Problem 112
"""

from typing import List, Optional
import numpy as np

from .config import BASE, validate_threshold


def digits_of(n: int) -> List[int]:
    """
    Return the decimal digits of n, most significant first.

    Examples
    --------
    >>> digits_of(1587000)
    [1, 5, 8, 7, 0, 0, 0]
    >>> digits_of(0)
    [0]
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return [int(c) for c in str(n)]


def is_increasing(n: int) -> bool:
    """True if the digits of n never decrease from left to right."""
    digits = digits_of(n)
    return all(a <= b for a, b in zip(digits, digits[1:]))


def is_decreasing(n: int) -> bool:
    """True if the digits of n never increase from left to right."""
    digits = digits_of(n)
    return all(a >= b for a, b in zip(digits, digits[1:]))


def is_bouncy(n: int) -> bool:
    """
    True if n is neither increasing nor decreasing.

    Examples
    --------
    >>> is_bouncy(101)
    True
    >>> is_bouncy(100)
    False
    """
    return not is_increasing(n) and not is_decreasing(n)


def classify(n: int) -> str:
    """
    Classify n as "constant", "increasing", "decreasing" or "bouncy".

    "constant" covers numbers that are both increasing and decreasing,
    i.e. single digits and repdigits.
    """
    inc = is_increasing(n)
    dec = is_decreasing(n)
    if inc and dec:
        return "constant"
    if inc:
        return "increasing"
    if dec:
        return "decreasing"
    return "bouncy"


def bouncy_mask(limit: int) -> np.ndarray:
    """
    Vectorized bouncy test for every integer in [0, limit].

    Digits are peeled off right to left; a number stays increasing while
    each newly exposed digit is <= the one to its right, and decreasing
    while it is >=.

    Parameters
    ----------
    limit : int
        Largest integer to classify.

    Returns
    -------
    np.ndarray of bool, shape (limit + 1,)
        Entry k is True iff k is bouncy.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    values = np.arange(limit + 1, dtype=np.int64)
    increasing = np.ones(limit + 1, dtype=bool)
    decreasing = np.ones(limit + 1, dtype=bool)

    right = values % BASE
    rest = values // BASE
    active = rest > 0
    while np.any(active):
        left = rest % BASE
        increasing &= ~active | (left <= right)
        decreasing &= ~active | (left >= right)
        right = left
        rest //= BASE
        active = rest > 0

    return ~increasing & ~decreasing


def count_bouncy(n: int) -> int:
    """
    Count bouncy integers in [1, n] by direct classification.

    Examples
    --------
    >>> count_bouncy(1000)
    525
    """
    if n < 1:
        return 0
    return int(np.count_nonzero(bouncy_mask(n)))


def first_over_brute(threshold: float, limit: int) -> Optional[int]:
    """
    Find the first bouncy N <= limit with count_bouncy(N) >= N * threshold.

    Applies the same first-crossing rule as the level-expanding counter,
    using a running count over the whole range at once.

    Parameters
    ----------
    threshold : float
        Target proportion, strictly between 0 and 1.
    limit : int
        Largest integer to examine.

    Returns
    -------
    int or None
        The first crossing, or None if it lies beyond limit.

    Examples
    --------
    >>> first_over_brute(0.5, 1000)
    538
    """
    threshold = validate_threshold(threshold)
    mask = bouncy_mask(limit)
    counts = np.cumsum(mask)
    values = np.arange(limit + 1, dtype=np.int64)
    hits = mask & (counts >= values * threshold)
    if not np.any(hits):
        return None
    return int(np.argmax(hits))
