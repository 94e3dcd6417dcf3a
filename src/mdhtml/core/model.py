from __future__ import annotations
from dataclasses import dataclass

HEADER = "header"
PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class Block:
    kind: str  # "header" | "paragraph"
    content: str
    level: int | None = None  # 1-6 for headers

    @property
    def is_header(self) -> bool:
        return self.kind == HEADER


@dataclass(frozen=True)
class LinkSpan:
    start: int  # offset of "["
    paren: int  # offset of the "(" opening the url
    end: int  # offset of the closing ")"

    def label(self, line: str) -> str:
        return line[self.start + 1 : self.paren - 1]

    def url(self, line: str) -> str:
        return line[self.paren + 1 : self.end]
