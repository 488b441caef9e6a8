"""Word frequency counting over lines of text."""

from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from core.errors import SourceUnavailableError
from core.separators import DEFAULT_SEPARATORS, Separators
from core.tokenizer import is_word, iter_runs


ProgressFn = Callable[[str, int, int], None]


class FrequencyCounter:
    """Counts case-insensitive word occurrences."""

    def __init__(self, separators: Separators = DEFAULT_SEPARATORS):
        """
        Initialize counter.

        Args:
            separators: Characters that delimit words
        """
        self.separators = separators

    def count_line(self, line: str, table: dict[str, int]) -> int:
        """Add the words of one line to `table`. Returns words counted."""
        counted = 0
        for run in iter_runs(line.lower(), self.separators):
            # Separator runs are never keys
            if not is_word(run, self.separators):
                continue
            table[run] = table.get(run, 0) + 1
            counted += 1
        return counted

    def accumulate(
        self,
        lines: Iterable[str],
        on_progress: Optional[ProgressFn] = None,
        total: Optional[int] = None,
    ) -> dict[str, int]:
        """
        Count every word across all lines.

        Args:
            lines: Lines of text
            on_progress: Optional callback("count", done, total) per line
            total: Line count reported to on_progress (defaults to len(lines))

        Returns:
            Dict mapping lower-cased word -> occurrence count
        """
        if on_progress and total is None:
            lines = list(lines)
            total = len(lines)

        table: dict[str, int] = {}
        for done, line in enumerate(lines, start=1):
            self.count_line(line, table)
            if on_progress:
                on_progress("count", done, total)
        return table

    def count_file(
        self,
        path: Union[str, Path],
        encoding: str = "utf-8",
        on_progress: Optional[ProgressFn] = None,
    ) -> dict[str, int]:
        """
        Count words in a text file.

        The whole file is read before counting, so a read error never leaves
        a partially filled table behind.

        Args:
            path: Input file path
            encoding: Text encoding of the file
            on_progress: Optional callback(step_name, done, total) per line

        Returns:
            Dict mapping lower-cased word -> occurrence count

        Raises:
            SourceUnavailableError: If the file cannot be opened or decoded
        """
        try:
            with open(path, "r", encoding=encoding) as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise SourceUnavailableError(path, reason) from e

        return self.accumulate(lines, on_progress=on_progress, total=len(lines))


def count_words(lines: Iterable[str], separators: Separators = DEFAULT_SEPARATORS) -> dict[str, int]:
    """Convenience function: count words in lines with the given separators."""
    return FrequencyCounter(separators).accumulate(lines)
