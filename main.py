#!/usr/bin/env python3
"""
tagcloud - HTML tag cloud generator

Counts the words of a text file and writes the N most frequent ones as an
HTML tag cloud, alphabetically, with font size scaled by frequency.

Usage:
    python main.py -i input.txt -n 100 -o cloud.html
    python main.py                      # prompts for all three
"""

import sys
import time
from pathlib import Path

import click

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import Config
from core.errors import TagCloudError
from core.pipeline import TagCloudPipeline
from render.html_writer import make_title
from utils.progress import create_progress_callback, format_duration


@click.command()
@click.option("-i", "--input", "input_file", required=True, type=click.Path(dir_okay=False),
              prompt="Input the location/file name", help="Input text file")
@click.option("-n", "--count", required=True, type=click.IntRange(min=1), default=Config.default_count,
              show_default=True, prompt="How many words would you like in the tag cloud",
              help="Number of words in the cloud")
@click.option("-o", "--output", "output_file", required=True, type=click.Path(dir_okay=False),
              prompt="Input the output location/file name", help="Output HTML file")
@click.option("--stylesheet", default=Config.stylesheet, show_default=True, help="CSS file linked from the page")
@click.option("--encoding", default=Config.encoding, show_default=True, help="Input file encoding")
@click.option("-q", "--quiet", is_flag=True, default=False, help="Only print errors")
def main(
    input_file: str,
    count: int,
    output_file: str,
    stylesheet: str,
    encoding: str,
    quiet: bool,
):
    """Generate an HTML tag cloud of the most frequent words in a text file."""

    config = Config(stylesheet=stylesheet, encoding=encoding)
    pipeline = TagCloudPipeline(config)

    def step(message: str):
        if not quiet:
            click.echo(message)

    step(f"Input: {input_file}")
    step(f"Output: {output_file}")
    step(f"Words: {count}")

    started = time.monotonic()
    try:
        step("\n[1/3] Counting words...")
        table = pipeline.count(input_file, on_progress=None if quiet else create_progress_callback())
        step(f"  Distinct words: {len(table)} ({sum(table.values())} total)")

        step("[2/3] Selecting top words...")
        selection = pipeline.build(table, count)
        step(f"  Selected: {len(selection)} | Max count: {selection.max_count}")

        step("[3/3] Writing tag cloud...")
        output_path = pipeline.write(selection, output_file, make_title(input_file, count))
    except TagCloudError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    step(f"\nDone in {format_duration(time.monotonic() - started)}! Tag cloud saved to: {output_path}")


if __name__ == "__main__":
    main()
