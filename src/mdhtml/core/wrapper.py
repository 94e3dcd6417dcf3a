"""Block wrapping into HTML tags.

Content is passed through verbatim: no escaping is performed, so callers
that need safe output must sanitize upstream.
"""

from .model import Block


def wrap_header(content: str, level: int) -> str:
    return f"<h{level}>{content}</h{level}>"


def wrap_paragraph(content: str) -> str:
    return f"<p>{content}</p>"


def wrap(block: Block) -> str:
    """Wrap a block in its <hN> or <p> tag."""
    if block.is_header:
        return wrap_header(block.content, block.level or 1)
    return wrap_paragraph(block.content)
