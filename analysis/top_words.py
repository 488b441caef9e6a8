"""Top-N word selection and font size scaling for the tag cloud."""

from dataclasses import dataclass
from typing import Mapping

from core.errors import require_positive_count


MIN_SIZE = 11   # smallest font size class (f11)
NUM_SIZES = 38  # number of size classes, so f11..f48


@dataclass(frozen=True)
class TagCloudEntry:
    """One word in the rendered cloud."""
    word: str
    count: int
    font_size: int


@dataclass(frozen=True)
class TagCloudSelection:
    """Selected entries in display order plus the table-wide max count."""
    entries: tuple[TagCloudEntry, ...]
    max_count: int

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)


def by_count_desc(item: tuple[str, int]) -> tuple[int, str]:
    """Sort key: highest count first, ties in ordinal word order."""
    word, count = item
    return (-count, word)


def by_word(item: tuple[str, int]) -> str:
    """Sort key: ordinal word order."""
    return item[0]


def calc_size(
    count: int,
    max_count: int,
    min_size: int = MIN_SIZE,
    num_sizes: int = NUM_SIZES,
) -> int:
    """
    Map a word count to a font size.

    Counts are bucketed in steps of `max_count // num_sizes + 1`; each full
    step raises the size by one, capped at min_size + num_sizes - 1.

    Args:
        count: Occurrences of the word (> 0)
        max_count: Largest count in the whole table (> 0)
        min_size: Smallest font size
        num_sizes: Number of distinct sizes (> 0)

    Returns:
        Font size in [min_size, min_size + num_sizes - 1]

    Raises:
        ValueError: If count, max_count or num_sizes is not positive
    """
    if count <= 0 or max_count <= 0:
        raise ValueError(f"count and max_count must be > 0, got {count} and {max_count}")
    if num_sizes <= 0:
        raise ValueError(f"num_sizes must be > 0, got {num_sizes}")

    increment = max_count // num_sizes + 1
    size = min_size
    for i in range(1, num_sizes + 1):
        if count < i * increment:
            return size
        size += 1
    # count >= num_sizes * increment cannot happen while count <= max_count
    return min_size + num_sizes - 1


def select_and_scale(
    table: Mapping[str, int],
    n: int,
    min_size: int = MIN_SIZE,
    num_sizes: int = NUM_SIZES,
) -> TagCloudSelection:
    """
    Pick the `n` most frequent words and size them for display.

    Ties at the cut-off are broken by ordinal word order, so repeated runs
    on the same input give the same cloud. The selected words are returned
    alphabetically.

    Args:
        table: Word -> count mapping
        n: Number of words wanted (> 0)
        min_size: Smallest font size
        num_sizes: Number of distinct sizes

    Returns:
        TagCloudSelection with entries sorted by word and the max count
        over the entire table (0 if empty)

    Raises:
        InvalidCountError: If n is not a positive integer
    """
    n = require_positive_count(n)

    if not table:
        return TagCloudSelection(entries=(), max_count=0)

    items = list(table.items())
    max_count = max(count for _, count in items)

    if len(items) > n:
        items.sort(key=by_count_desc)
        items = items[:n]
    items.sort(key=by_word)

    entries = tuple(
        TagCloudEntry(word, count, calc_size(count, max_count, min_size, num_sizes))
        for word, count in items
    )
    return TagCloudSelection(entries=entries, max_count=max_count)
