"""Split text into alternating runs of separators and word characters."""

from typing import Iterator

from .separators import DEFAULT_SEPARATORS, Separators


def next_token(text: str, position: int, separators: Separators = DEFAULT_SEPARATORS) -> str:
    """
    Return the run of same-class characters starting at `position`.

    If text[position] is a separator, the run is the longest stretch of
    separators from there; otherwise it is the longest stretch of word
    characters.

    Args:
        text: Text to scan
        position: Start index, 0 <= position < len(text)
        separators: Separator set

    Returns:
        Non-empty substring of text beginning at position

    Raises:
        ValueError: If position is outside the text
    """
    if not 0 <= position < len(text):
        raise ValueError(f"position {position} out of range for text of length {len(text)}")

    is_sep = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == is_sep:
        end += 1
    return text[position:end]


def iter_runs(text: str, separators: Separators = DEFAULT_SEPARATORS) -> Iterator[str]:
    """Yield consecutive runs covering the whole of `text`."""
    position = 0
    while position < len(text):
        run = next_token(text, position, separators)
        yield run
        position += len(run)


def is_word(run: str, separators: Separators = DEFAULT_SEPARATORS) -> bool:
    """Runs are homogeneous, so the first character decides."""
    return bool(run) and run[0] not in separators
