"""Default configuration for tagcloud."""

from dataclasses import dataclass

from core.separators import SEPARATOR_CHARS, Separators
from analysis.top_words import MIN_SIZE, NUM_SIZES
from render.html_writer import DEFAULT_STYLESHEET


@dataclass
class Config:
    """Application configuration."""

    # Tokenization
    separators: str = SEPARATOR_CHARS

    # Font sizes (CSS classes f11..f48 by default)
    min_size: int = MIN_SIZE
    num_sizes: int = NUM_SIZES

    # Output
    stylesheet: str = DEFAULT_STYLESHEET
    encoding: str = "utf-8"

    # CLI
    default_count: int = 100

    def get_separators(self) -> Separators:
        """Immutable separator set for the tokenizer and counter."""
        return Separators.from_string(self.separators)
