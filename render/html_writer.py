"""HTML tag cloud writer.

Produces the fixed document layout:

    <html>
      <head>
        <title>Top N words in FILE</title>
        <link href="tagcloud.css" rel="stylesheet" type="text/css">
      </head>
      <body>
        <h2>Top N words in FILE</h2>
        <hr>
        <div class="cdiv">
          <p class="cbox">
            <span style="cursor:default" class="fSIZE" title="count: COUNT">WORD</span>
          </p>
        </div>
      </body>
    </html>
"""

from html import escape
from typing import Iterable, TextIO

from analysis.top_words import TagCloudEntry


DEFAULT_STYLESHEET = "tagcloud.css"


def make_title(source_name: str, n: int) -> str:
    """Title shown in <title> and <h2>; n is the requested count."""
    return f"Top {n} words in {source_name}"


class TagCloudHtmlWriter:
    """Formats tag cloud entries as an HTML document."""

    def __init__(self, stylesheet: str = DEFAULT_STYLESHEET):
        self.stylesheet = stylesheet

    def header_lines(self, title: str) -> list[str]:
        title = escape(title, quote=False)
        return [
            "<html>",
            "  <head>",
            f"    <title>{title}</title>",
            f'    <link href="{escape(self.stylesheet)}" rel="stylesheet" type="text/css">',
            "  </head>",
            "  <body>",
            f"    <h2>{title}</h2>",
            "    <hr>",
            '    <div class="cdiv">',
            '      <p class="cbox">',
        ]

    def tag_line(self, entry: TagCloudEntry) -> str:
        return (
            f'        <span style="cursor:default" class="f{entry.font_size}" '
            f'title="count: {entry.count}">{escape(entry.word, quote=False)}</span>'
        )

    def footer_lines(self) -> list[str]:
        return [
            "      </p>",
            "    </div>",
            "  </body>",
            "</html>",
        ]

    def render(self, entries: Iterable[TagCloudEntry], title: str) -> list[str]:
        """
        Build every line of the document.

        Args:
            entries: Entries already in display order
            title: Document title

        Returns:
            Lines without trailing newlines
        """
        lines = self.header_lines(title)
        lines.extend(self.tag_line(entry) for entry in entries)
        lines.extend(self.footer_lines())
        return lines

    def write(self, sink: TextIO, entries: Iterable[TagCloudEntry], title: str) -> int:
        """Write the document to an open text sink. Returns lines written."""
        lines = self.render(entries, title)
        for line in lines:
            sink.write(line + "\n")
        return len(lines)
