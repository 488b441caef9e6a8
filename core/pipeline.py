"""End-to-end tag cloud generation: read, count, select, render."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from core.errors import SinkUnavailableError, require_positive_count
from analysis.word_counter import FrequencyCounter
from analysis.top_words import TagCloudSelection, select_and_scale
from render.html_writer import TagCloudHtmlWriter, make_title


@dataclass
class TagCloudResult:
    """Summary of one pipeline run."""
    selection: TagCloudSelection
    distinct_words: int
    total_words: int
    output_path: Path

    @property
    def entries(self) -> tuple:
        return self.selection.entries

    @property
    def max_count(self) -> int:
        return self.selection.max_count

    @classmethod
    def from_table(cls, table: dict[str, int], selection: TagCloudSelection, output_path: Path) -> "TagCloudResult":
        return cls(
            selection=selection,
            distinct_words=len(table),
            total_words=sum(table.values()),
            output_path=output_path,
        )


class TagCloudPipeline:
    """Runs the whole generation for one input/output pair."""

    def __init__(self, config=None):
        """
        Args:
            config: Config instance (defaults to config.Config())
        """
        if config is None:
            from config import Config
            config = Config()
        self.config = config
        self.counter = FrequencyCounter(config.get_separators())
        self.writer = TagCloudHtmlWriter(stylesheet=config.stylesheet)

    def count(
        self,
        input_path: Union[str, Path],
        on_progress: Optional[Callable[[str, int, int], None]] = None,
    ) -> dict[str, int]:
        """Count the words of the input file (raises SourceUnavailableError)."""
        return self.counter.count_file(
            input_path, encoding=self.config.encoding, on_progress=on_progress
        )

    def build(self, table: dict[str, int], n: int) -> TagCloudSelection:
        """Select and scale the top `n` words of an existing table."""
        return select_and_scale(
            table, n,
            min_size=self.config.min_size,
            num_sizes=self.config.num_sizes,
        )

    def write(self, selection: TagCloudSelection, output_path: Union[str, Path], title: str) -> Path:
        """Write the HTML document (raises SinkUnavailableError)."""
        output_path = Path(output_path)
        try:
            with open(output_path, "w", encoding="utf-8") as out:
                self.writer.write(out, selection.entries, title)
        except OSError as e:
            raise SinkUnavailableError(output_path, e.strerror or str(e)) from e
        return output_path

    def run(
        self,
        input_path: Union[str, Path],
        n: int,
        output_path: Union[str, Path],
        on_progress: Optional[Callable[[str, int, int], None]] = None,
        title_name: Optional[str] = None,
    ) -> TagCloudResult:
        """
        Generate the tag cloud HTML file.

        The output file is only opened after the input has been counted, so a
        missing input never leaves an empty output file behind.

        Args:
            input_path: Text file to analyse
            n: Number of words in the cloud (> 0)
            output_path: HTML file to write
            on_progress: Optional callback(step_name, done, total)
            title_name: Name shown in the title (defaults to input_path as given)

        Returns:
            TagCloudResult

        Raises:
            InvalidCountError: If n is not positive (checked before any I/O)
            SourceUnavailableError: If the input cannot be read
            SinkUnavailableError: If the output cannot be written
        """
        n = require_positive_count(n)

        table = self.count(input_path, on_progress=on_progress)
        selection = self.build(table, n)
        title = make_title(title_name if title_name is not None else str(input_path), n)
        return TagCloudResult.from_table(table, selection, self.write(selection, output_path, title))
