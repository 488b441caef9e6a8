"""Separator characters that delimit words.

The set is built once and passed around as an immutable value.
"""

from dataclasses import dataclass


# / tab newline CR . , & ! ? space [ ] { } | - = + @ # $ % * " ( ) ' `
SEPARATOR_CHARS = "/\t\n\r.,&!? []{}|-=+@#$%*\"()'`"


@dataclass(frozen=True)
class Separators:
    """Immutable set of separator characters."""
    chars: frozenset

    @classmethod
    def from_string(cls, chars: str) -> "Separators":
        """Build a separator set from every character in `chars`."""
        return cls(frozenset(chars))

    def contains(self, char: str) -> bool:
        return char in self.chars

    def __contains__(self, char: str) -> bool:
        return char in self.chars

    def __len__(self) -> int:
        return len(self.chars)


DEFAULT_SEPARATORS = Separators.from_string(SEPARATOR_CHARS)
