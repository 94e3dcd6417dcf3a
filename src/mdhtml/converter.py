"""Main converter driver: Markdown text to an HTML fragment."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .core.links import resolve_links
from .core.model import Block
from .core.ports import InlineResolver, LineTransform, SegmenterStrategy
from .core.segmenter import BlockSegmenter
from .core.wrapper import wrap

logger = logging.getLogger("mdhtml.converter")


@dataclass
class ConvertResult:
    """Result of converting a Markdown file."""

    source: Path
    html: str
    blocks: int


def transform_line(line: str, callbacks: Iterable[LineTransform]) -> str:
    """Apply each transformation to the line, in order."""
    for callback in callbacks:
        line = callback(line)
    return line


class MarkdownHTMLConverter:
    """Converts Markdown headers, paragraphs and links into HTML.

    Each block is wrapped first and then passed through the inline
    resolvers, so links are resolved over the wrapped fragment.
    """

    def __init__(
        self,
        segmenter: SegmenterStrategy | None = None,
        inline: Iterable[InlineResolver] | None = None,
    ):
        self.segmenter = segmenter or BlockSegmenter()
        self.inline: list[LineTransform] = list(inline) if inline is not None else [resolve_links]

    def render_block(self, block: Block) -> str:
        return transform_line(wrap(block), self.inline)

    def render(self, text: str) -> tuple[list[Block], str]:
        """Segment and render text, returning the blocks and the HTML fragment."""
        blocks = self.segmenter.segment(text)
        logger.debug("Segmented %d block(s)", len(blocks))
        return blocks, "".join(self.render_block(block) for block in blocks)

    def convert(self, text: str) -> str:
        """
        Convert a Markdown document into an HTML fragment.

        Args:
            text: Markdown source; never mutated

        Returns:
            Concatenated block fragments, without <html>/<body> wrapper
        """
        _, html = self.render(text)
        return html


_default_converter = MarkdownHTMLConverter()


def convert(text: str) -> str:
    """Convert Markdown text to an HTML fragment with the default pipeline."""
    return _default_converter.convert(text)


def convert_file(
    file_path: Path,
    dest: Path | None = None,
    converter: MarkdownHTMLConverter | None = None,
    final_eol: bool = True,
) -> ConvertResult:
    """Convert a Markdown file.

    Args:
        file_path: Path to the Markdown source
        dest: Where to write the HTML (None to skip writing)
        converter: Converter to use (default pipeline if None)
        final_eol: Append a newline to the written fragment

    Returns:
        ConvertResult
    """
    if converter is None:
        converter = _default_converter

    # Decode bytes directly so a lone "\r" is not turned into a line break
    text = file_path.read_bytes().decode("utf-8")
    blocks, html = converter.render(text)

    if dest is not None:
        dest.parent.mkdir(parents=True, exist_ok=True)
        # Atomic write using temp file
        tmp_path = dest.with_name(dest.name + ".tmp")
        try:
            tmp_path.write_text(html + ("\n" if final_eol else ""), encoding="utf-8", newline="")
            tmp_path.replace(dest)
        except Exception:
            # Clean up temp file on error
            if tmp_path.exists():
                tmp_path.unlink()
            raise

    return ConvertResult(source=file_path, html=html, blocks=len(blocks))
