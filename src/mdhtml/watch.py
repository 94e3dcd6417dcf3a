"""Watch mode for mdhtml - re-render HTML whenever the Markdown source changes."""

import logging
import signal
import sys
import time
from pathlib import Path
from typing import Any, Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .converter import MarkdownHTMLConverter, convert_file

logger = logging.getLogger("mdhtml.watch")


class DebounceHandler(FileSystemEventHandler):
    """File system event handler with debouncing for a single file."""

    def __init__(self, target: Path, on_change: Callable[[], None], debounce_ms: int = 150):
        super().__init__()
        self.target = target.resolve()
        self.on_change = on_change
        self.debounce_ms = debounce_ms

        self.pending = False
        self.last_event_time = 0.0

    def _is_target(self, path: str | bytes) -> bool:
        if isinstance(path, bytes):
            path = path.decode()
        return Path(path).resolve() == self.target

    def _touch(self) -> None:
        self.pending = True
        self.last_event_time = time.time()

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_target(event.src_path):
            self._touch()

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory and self._is_target(event.src_path):
            self._touch()

    def on_moved(self, event: FileSystemEvent) -> None:
        # Editors that save via rename land the new content on dest_path
        if not event.is_directory and self._is_target(event.dest_path):
            self._touch()

    def check_and_flush(self) -> None:
        """Check if debounce period has elapsed and flush if so."""
        if not self.pending:
            return

        elapsed = (time.time() - self.last_event_time) * 1000
        if elapsed >= self.debounce_ms:
            self.flush()

    def flush(self) -> None:
        """Run the change callback for accumulated events."""
        if not self.pending:
            return
        self.pending = False
        if self.on_change:
            self.on_change()


def watch_file(
    src: Path,
    dest: Path,
    converter: MarkdownHTMLConverter | None = None,
    debounce_ms: int = 150,
    quiet: bool = False,
    final_eol: bool = True,
) -> int:
    """
    Watch a Markdown file and re-render it to HTML on every change.

    Args:
        src: Markdown source file
        dest: HTML output file
        converter: Converter to use (default pipeline if None)
        debounce_ms: Debounce window in milliseconds
        quiet: Suppress output
        final_eol: Append a newline to the written fragment

    Returns:
        Exit code
    """
    if not src.exists():
        print(f"Error: Input not found: {src}", file=sys.stderr)
        return 1

    running = True

    def render() -> None:
        start_time = time.time()
        try:
            result = convert_file(src, dest, converter=converter, final_eol=final_eol)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: {e}", file=sys.stderr, flush=True)
            return
        duration_ms = int((time.time() - start_time) * 1000)
        logger.debug("Rendered %s -> %s (%d blocks)", src, dest, result.blocks)
        if not quiet:
            print(f"Rendered {result.blocks} block(s) to {dest} ({duration_ms}ms)", flush=True)

    def signal_handler(signum: int, frame: Any) -> None:
        nonlocal running
        running = False
        if not quiet:
            print("\nShutting down...", flush=True)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    # Initial render so the output exists before the first edit
    render()

    handler = DebounceHandler(src, render, debounce_ms)
    observer = Observer()
    observer.schedule(handler, str(src.resolve().parent), recursive=False)

    if not quiet:
        print(f"Watching {src} (debounce: {debounce_ms}ms)", flush=True)
        print("Press Ctrl+C to stop", flush=True)

    observer.start()

    try:
        while running:
            time.sleep(0.1)
            handler.check_and_flush()
    finally:
        handler.flush()
        observer.stop()
        observer.join()

    if not quiet:
        print("Watch stopped", flush=True)

    return 0
