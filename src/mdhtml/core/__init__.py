"""Converter core: block segmentation, wrapping and inline links."""

from .links import find_link_spans, resolve_links
from .model import Block, LinkSpan
from .segmenter import BlockSegmenter, header_level, segment
from .wrapper import wrap

__all__ = [
    "Block",
    "BlockSegmenter",
    "LinkSpan",
    "find_link_spans",
    "header_level",
    "resolve_links",
    "segment",
    "wrap",
]
