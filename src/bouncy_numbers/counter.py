"""
Level-expanding counter for bouncy numbers.

The counter is a trie over decimal digit strings: the root is the empty
string, and each edge appends one digit on the right, so the nodes at
depth L are exactly the L-digit strings 00..0 through 99..9 in ascending
order. Whether a child is increasing or decreasing follows from its
parent's flags and the appended digit alone:

    child.is_decreasing = parent.is_decreasing and d <= parent.last_digit
    child.is_increasing = parent.is_increasing and d >= parent.last_digit

so each number is classified in O(1) instead of O(number of digits).

Only the deepest level (the frontier) is ever read, so the trie is held as
one flat frontier of parallel arrays that is replaced by its children at
each expansion. Strings with leading zeros re-generate shorter numbers;
only values above 10^L are new at level L+1 and enter the bouncy count.

Expansion stops at the first bouncy number N for which the running count
reaches N * threshold.

Reference: Project Euler, Problem 112
"""

import warnings
from dataclasses import dataclass
from typing import Iterator, List, Optional
import numpy as np

from .config import (
    THRESHOLD, BASE, MAX_LEVEL, LARGE_LEVEL_WARNING, EXPAND_CHUNK_PARENTS,
    validate_threshold,
)


_DIGITS = np.arange(BASE, dtype=np.int64)


# =============================================================================
# Nodes and frontier
# =============================================================================

@dataclass(frozen=True)
class Node:
    """
    One generated digit string.

    Attributes
    ----------
    value : int
        Integer value of the digit string.
    last_digit : int
        Rightmost digit.
    is_increasing : bool
        Digits never decrease left to right (leading zeros included).
    is_decreasing : bool
        Digits never increase left to right (leading zeros included).
    length : int
        Number of digits in the string, i.e. the trie level.
    """
    value: int
    last_digit: int
    is_increasing: bool
    is_decreasing: bool
    length: int

    @property
    def is_padded(self) -> bool:
        """True if the string has a leading zero and re-generates a shorter number."""
        return self.length > 1 and self.value < BASE ** (self.length - 1)

    @property
    def is_bouncy(self) -> bool:
        """True if the node is a new number that is neither increasing nor decreasing."""
        return not (self.is_increasing or self.is_decreasing or self.is_padded)


@dataclass
class Frontier:
    """
    All digit strings of one length, in ascending order.

    Position in the arrays plays the role of the sibling chain: entry i+1
    is the node generated right after entry i.
    """
    values: np.ndarray         # int64
    last_digits: np.ndarray    # int8
    is_increasing: np.ndarray  # bool
    is_decreasing: np.ndarray  # bool
    length: int

    @classmethod
    def initial(cls) -> "Frontier":
        """The ten single digits, each both increasing and decreasing."""
        return cls(
            values=_DIGITS.copy(),
            last_digits=_DIGITS.astype(np.int8),
            is_increasing=np.ones(BASE, dtype=bool),
            is_decreasing=np.ones(BASE, dtype=bool),
            length=1,
        )

    def __len__(self) -> int:
        return len(self.values)

    def node(self, i: int) -> Node:
        """Return the i-th node of the frontier."""
        return Node(
            value=int(self.values[i]),
            last_digit=int(self.last_digits[i]),
            is_increasing=bool(self.is_increasing[i]),
            is_decreasing=bool(self.is_decreasing[i]),
            length=self.length,
        )

    def __iter__(self) -> Iterator[Node]:
        for i in range(len(self)):
            yield self.node(i)

    def children(self, start: int = 0, stop: Optional[int] = None) -> "Frontier":
        """
        Append every digit to parents [start, stop).

        Children come out parent-major, digit-minor, which is ascending
        numeric order because the parents are ascending.
        """
        if stop is None:
            stop = len(self)
        n_parents = stop - start

        values = self.values[start:stop, None] * BASE + _DIGITS[None, :]
        parent_last = self.last_digits[start:stop, None]
        is_decreasing = self.is_decreasing[start:stop, None] & (_DIGITS[None, :] <= parent_last)
        is_increasing = self.is_increasing[start:stop, None] & (_DIGITS[None, :] >= parent_last)

        return Frontier(
            values=values.ravel(),
            last_digits=np.tile(_DIGITS.astype(np.int8), n_parents),
            is_increasing=is_increasing.ravel(),
            is_decreasing=is_decreasing.ravel(),
            length=self.length + 1,
        )

    @staticmethod
    def concatenate(blocks: List["Frontier"]) -> "Frontier":
        """Join consecutive blocks of the same level into one frontier."""
        if not blocks:
            raise ValueError("Cannot concatenate an empty list of blocks")
        return Frontier(
            values=np.concatenate([b.values for b in blocks]),
            last_digits=np.concatenate([b.last_digits for b in blocks]),
            is_increasing=np.concatenate([b.is_increasing for b in blocks]),
            is_decreasing=np.concatenate([b.is_decreasing for b in blocks]),
            length=blocks[0].length,
        )


# =============================================================================
# Counter state
# =============================================================================

@dataclass
class CounterState:
    """
    Aggregate state of one search.

    Attributes
    ----------
    threshold : float
        Target bouncy proportion.
    level : int
        Digit length of the current frontier.
    frontier : Frontier
        Deepest fully generated level.
    bouncy_count : int
        Bouncy numbers counted so far over all levels.
    first_over : int or None
        First crossing of the threshold, None until found.
    numbers_generated : int
        Digit strings created by expansions, padded ones included.
    """
    threshold: float
    level: int
    frontier: Frontier
    bouncy_count: int = 0
    first_over: Optional[int] = None
    numbers_generated: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.first_over is not None


def init_counter(threshold: float = THRESHOLD) -> CounterState:
    """
    Create a counter at level 1 with the single digits 0-9.

    Raises
    ------
    ValueError
        If the threshold is outside (0, 1).
    """
    threshold = validate_threshold(threshold)
    return CounterState(threshold=threshold, level=1, frontier=Frontier.initial())


def proportion(state: CounterState) -> float:
    """
    Bouncy proportion among 1..N, where N is the last number counted.

    N is first_over for a finished search, otherwise the largest number
    of the current level.
    """
    if state.first_over is not None:
        return state.bouncy_count / state.first_over
    return state.bouncy_count / (BASE ** state.level - 1)


# =============================================================================
# Expansion
# =============================================================================

def expand_level(
    state: CounterState,
    chunk_parents: int = EXPAND_CHUNK_PARENTS,
    verbose: bool = False,
) -> Optional[int]:
    """
    Generate the next digit length and count its bouncy numbers.

    Parents are expanded in blocks of chunk_parents, in ascending order.
    Within a block the running bouncy count is a cumulative sum, so the
    first crossing is located without visiting the rest of the level.

    On a crossing, state.first_over is set, state.bouncy_count includes
    the crossing number, and level and frontier are left unchanged.
    Otherwise the frontier is replaced by the new level.

    Parameters
    ----------
    state : CounterState
        Counter to advance in place.
    chunk_parents : int
        Frontier parents per vectorized block.
    verbose : bool
        Print a progress line.

    Returns
    -------
    int or None
        The crossing if it was found at this level.

    Raises
    ------
    RuntimeError
        If the search has already finished or the next level would
        exceed MAX_LEVEL.
    """
    if state.is_terminal:
        raise RuntimeError(
            f"Search already finished at {state.first_over}; start a new counter"
        )
    if chunk_parents < 1:
        raise ValueError(f"chunk_parents must be positive, got {chunk_parents}")

    next_level = state.level + 1
    if next_level > MAX_LEVEL:
        raise RuntimeError(
            f"Level {next_level} exceeds MAX_LEVEL={MAX_LEVEL}; values no longer fit in int64"
        )
    if next_level >= LARGE_LEVEL_WARNING:
        warnings.warn(
            f"Expanding to level {next_level} allocates {BASE}^{next_level} digit strings "
            f"(threshold={state.threshold})."
        )

    # Values below this bound repeat a shorter length; the bound itself is never bouncy
    lower = BASE ** state.level
    frontier = state.frontier
    blocks = []

    for start in range(0, len(frontier), chunk_parents):
        stop = min(start + chunk_parents, len(frontier))
        block = frontier.children(start, stop)

        bouncy = ~block.is_increasing & ~block.is_decreasing & (block.values > lower)
        counts = state.bouncy_count + np.cumsum(bouncy, dtype=np.int64)
        hits = bouncy & (counts >= block.values * state.threshold)

        if np.any(hits):
            idx = int(np.argmax(hits))
            state.first_over = int(block.values[idx])
            state.bouncy_count = int(counts[idx])
            state.numbers_generated += idx + 1
            if verbose:
                print(f"  Level {next_level}: crossing at {state.first_over} "
                      f"({state.bouncy_count} bouncy, proportion {proportion(state):.6f})")
            return state.first_over

        state.bouncy_count = int(counts[-1])
        state.numbers_generated += len(block)
        blocks.append(block)

    state.frontier = Frontier.concatenate(blocks)
    state.level = next_level

    if verbose:
        print(f"  Level {next_level}: {len(state.frontier)} strings, "
              f"{state.bouncy_count} bouncy, proportion {proportion(state):.6f}")

    return None


def find_first_over(
    threshold: float = THRESHOLD,
    max_level: int = MAX_LEVEL,
    verbose: bool = False,
) -> CounterState:
    """
    Run a fresh counter until the bouncy proportion reaches threshold.

    Parameters
    ----------
    threshold : float
        Target proportion, strictly between 0 and 1.
    max_level : int
        Give up after this many digits.
    verbose : bool
        Print one progress line per level.

    Returns
    -------
    CounterState
        The finished counter; first_over holds the answer.

    Raises
    ------
    ValueError
        If the threshold or max_level is invalid.
    RuntimeError
        If no crossing is found within max_level digits.

    Examples
    --------
    >>> find_first_over(0.5).first_over
    538
    """
    if not 1 <= max_level <= MAX_LEVEL:
        raise ValueError(f"max_level must lie in [1, {MAX_LEVEL}], got {max_level}")

    state = init_counter(threshold)
    if verbose:
        print(f"Searching for bouncy proportion {state.threshold}")

    while not state.is_terminal:
        if state.level >= max_level:
            raise RuntimeError(
                f"No crossing of threshold={state.threshold} within {max_level} digits "
                f"(proportion {proportion(state):.6f})"
            )
        expand_level(state, verbose=verbose)

    return state
