"""Analysis modules for word counting and top-N selection."""

from .word_counter import FrequencyCounter, count_words
from .top_words import (
    MIN_SIZE,
    NUM_SIZES,
    TagCloudEntry,
    TagCloudSelection,
    calc_size,
    select_and_scale,
)

__all__ = [
    "FrequencyCounter",
    "count_words",
    "MIN_SIZE",
    "NUM_SIZES",
    "TagCloudEntry",
    "TagCloudSelection",
    "calc_size",
    "select_and_scale",
]
