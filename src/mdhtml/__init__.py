"""Convert a small subset of Markdown (headers, paragraphs, links) to HTML."""

from .converter import MarkdownHTMLConverter, convert, convert_file
from .core.links import resolve_links

__version__ = "0.1.0"

__all__ = [
    "MarkdownHTMLConverter",
    "__version__",
    "convert",
    "convert_file",
    "resolve_links",
]
