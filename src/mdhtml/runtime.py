"""Runtime wiring helper for CLI and server."""

from dataclasses import dataclass
from pathlib import Path

from .config import MdhtmlConfig, load_config
from .converter import MarkdownHTMLConverter


@dataclass
class Runtime:
    """Container for all wired components."""
    converter: MarkdownHTMLConverter
    config: MdhtmlConfig


def build_runtime(config_path: Path | None = None) -> Runtime:
    """Load configuration and build the converter."""
    config = load_config(config_path=config_path)
    return Runtime(
        converter=MarkdownHTMLConverter(),
        config=config,
    )
