from typing import Callable, Protocol

from .model import Block

LineTransform = Callable[[str], str]


class SegmenterStrategy(Protocol):
    """
    Split raw Markdown into header/paragraph blocks, in source order.
    """

    def segment(self, text: str) -> list[Block]:
        pass


class InlineResolver(Protocol):
    """
    Rewrite inline constructs of an already wrapped fragment; MUST be pure.
    """

    def __call__(self, line: str) -> str:
        pass
