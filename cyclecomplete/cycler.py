"""Circular navigation over a finalized candidate list."""
from enum import Enum
from typing import Optional, Sequence


class Direction(Enum):
    FORWARD = 1
    BACKWARD = -1


def cycle(candidates: Sequence[str], previous: Optional[str], direction: Direction) -> str:
    """Return the candidate after (or before) the previous selection.

    The first candidate is returned when there is no previous selection
    or when it is no longer part of the list.
    """
    if not candidates:
        raise ValueError("no candidates to cycle through")

    if previous is None:
        return candidates[0]

    try:
        index = list(candidates).index(previous)
    except ValueError:
        return candidates[0]

    return candidates[(index + direction.value) % len(candidates)]
