"""Output renderers for the tag cloud."""

from .html_writer import TagCloudHtmlWriter, make_title

__all__ = ["TagCloudHtmlWriter", "make_title"]
