"""
Partitioner for pathfinder.

Splits the root listing into contiguous chunks, one per worker. The number of
chunks is drawn at random so that, on average, each chunk holds at least two
entries.
"""

import math
import random
from typing import List, Optional, Sequence, TypeVar


T = TypeVar('T')


def choose_chunk_count(size: int, rng: Optional[random.Random] = None) -> int:
    """
    Pick the number of chunks for a sequence of the given size.

    The count is drawn uniformly from [1, ceil(size / 2)). When that range is
    empty (sizes 1 and 2) exactly one chunk is used, and sizes 3 and 4 can
    only draw one.

    Args:
        size: Number of entries to split
        rng: Random generator to draw from (module-level generator if None)

    Returns:
        Chunk count, 0 for an empty sequence
    """
    if size <= 0:
        return 0

    upper = math.ceil(size / 2)
    if upper <= 1:
        return 1

    rng = rng or random
    return rng.randint(1, upper - 1)


def partition(items: Sequence[T], rng: Optional[random.Random] = None) -> List[List[T]]:
    """
    Split a sequence into contiguous chunks.

    Concatenating the chunks in order reproduces the input exactly. Every
    chunk except possibly the last has the same length.

    Args:
        items: Ordered sequence to split
        rng: Random generator used to choose the chunk count

    Returns:
        List of chunks, empty if the input is empty
    """
    count = choose_chunk_count(len(items), rng)
    if count == 0:
        return []

    size = math.ceil(len(items) / count)
    return [list(items[i:i + size]) for i in range(0, len(items), size)]
