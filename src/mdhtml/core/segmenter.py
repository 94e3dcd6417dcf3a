"""Block segmentation of raw Markdown text."""

import re

from .model import HEADER, PARAGRAPH, Block
from .ports import SegmenterStrategy

LINE_SPLIT_RE = re.compile(r"\r?\n")
MAX_HEADER_LEVEL = 6


def header_level(line: str) -> int:
    """
    Return the header level of an already trimmed line, or 0.

    A run of more than six '#' is not a header at all; it is not
    truncated to level 6.

    Examples:
        >>> header_level("## Section")
        2
        >>> header_level("####### Seven")
        0
    """
    level = 0
    while level < len(line) and line[level] == "#":
        level += 1
    return 0 if level > MAX_HEADER_LEVEL else level


class BlockSegmenter(SegmenterStrategy):
    def segment(self, text: str) -> list[Block]:
        blocks: list[Block] = []
        current = ""

        for raw_line in LINE_SPLIT_RE.split(text):
            # Classification works on the trimmed view only
            line = raw_line.lstrip()
            level = header_level(line)

            if level:
                if current:
                    blocks.append(Block(kind=PARAGRAPH, content=current))
                    current = ""
                blocks.append(
                    Block(kind=HEADER, content=line[level:].lstrip(), level=level)
                )
            elif not line:
                if current:
                    blocks.append(Block(kind=PARAGRAPH, content=current))
                    current = ""
            else:
                current = line if not current else f"{current} {line}"

        if current:
            blocks.append(Block(kind=PARAGRAPH, content=current))

        return blocks


def segment(text: str) -> list[Block]:
    """Split text into header and paragraph blocks in source order."""
    return BlockSegmenter().segment(text)
