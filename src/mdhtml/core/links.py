"""Inline link resolution for `[label](url)` spans."""

import logging
from enum import Enum

from .model import LinkSpan

logger = logging.getLogger("mdhtml.core.links")


class ScanState(Enum):
    SEEKING_BRACKET = "seeking_bracket"
    SEEKING_PAREN = "seeking_paren"


def find_link_spans(line: str) -> list[LinkSpan]:
    """Find link spans in a line, left to right.

    Labels are plain text up to the matching ']' (parentheses inside a
    label are not balanced). Parentheses inside the url are balanced, so
    `[wiki](https://en.wikipedia.org/wiki/Foo_(bar))` keeps its trailing
    parenthesis inside the href.

    Args:
        line: Text to scan

    Returns:
        Spans in order of discovery
    """
    spans: list[LinkSpan] = []
    open_brackets: list[int] = []
    open_parens: list[int] = []
    open_paren = -1
    state = ScanState.SEEKING_BRACKET

    # A link needs "](" plus at least one more character to start
    start_bound = len(line) - 2

    for i, char in enumerate(line):
        if state is ScanState.SEEKING_BRACKET:
            if i >= start_bound:
                break
            if char == "[":
                open_brackets.append(i)
            elif char == "]":
                if line[i + 1] == "(" and open_brackets:
                    open_paren = i + 1
                    state = ScanState.SEEKING_PAREN
                elif open_brackets:
                    # False start: this ']' closes no link
                    open_brackets.pop()
        elif char == "(":
            open_parens.append(i)
        elif char == ")":
            open_parens.pop()
            if not open_parens:
                spans.append(LinkSpan(open_brackets.pop(), open_paren, i))
                open_brackets = []
                open_paren = -1
                state = ScanState.SEEKING_BRACKET

    return spans


def resolve_links(line: str) -> str:
    """Replace every well-formed `[label](url)` with an anchor tag.

    Substitution runs from the rightmost span to the leftmost so that the
    offsets of spans not yet replaced stay valid.
    """
    spans = find_link_spans(line)
    if spans:
        logger.debug("Resolved %d link(s)", len(spans))

    result = line
    for span in sorted(spans, key=lambda s: s.start, reverse=True):
        anchor = f'<a href="{span.url(line)}">{span.label(line)}</a>'
        result = result[: span.start] + anchor + result[span.end + 1 :]
    return result
