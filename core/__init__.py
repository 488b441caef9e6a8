"""Core modules for tagcloud."""

from .errors import (
    TagCloudError,
    SourceUnavailableError,
    InvalidCountError,
    SinkUnavailableError,
)
from .separators import Separators, DEFAULT_SEPARATORS
from .tokenizer import next_token, iter_runs, is_word

__all__ = [
    "TagCloudError",
    "SourceUnavailableError",
    "InvalidCountError",
    "SinkUnavailableError",
    "Separators",
    "DEFAULT_SEPARATORS",
    "next_token",
    "iter_runs",
    "is_word",
]
