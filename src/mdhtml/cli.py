"""CLI for mdhtml - convert Markdown headers, paragraphs and links to HTML."""

import argparse
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .converter import convert_file
from .runtime import build_runtime


def _version_string() -> str:
    return (
        f"mdhtml {__version__} "
        f"(python {platform.python_version()}, platform {platform.system().lower()})"
    )


def _write_fragment(html: str, output: Path | None, final_eol: bool) -> None:
    content = html + ("\n" if final_eol else "")
    if output is None:
        sys.stdout.write(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8", newline="")


def cmd_convert(args: argparse.Namespace, rt: Any) -> int:
    """Convert a Markdown file (or stdin) to an HTML fragment."""
    final_eol = rt.config.output.final_eol

    if args.input is None or str(args.input) == "-":
        # Read raw bytes so a lone "\r" survives as in convert()
        html = rt.converter.convert(sys.stdin.buffer.read().decode("utf-8"))
        _write_fragment(html, args.output, final_eol)
        return 0

    if not args.input.exists():
        print(f"Error: Input not found: {args.input}", file=sys.stderr)
        return 1

    result = convert_file(
        args.input,
        args.output,
        converter=rt.converter,
        final_eol=final_eol,
    )
    if args.output is None:
        _write_fragment(result.html, None, final_eol)
    elif not args.quiet:
        print(f"Wrote {result.blocks} block(s) to {args.output}", file=sys.stderr)
    return 0


def cmd_watch(args: argparse.Namespace, rt: Any) -> int:
    """Watch a Markdown file and re-render it on change."""
    try:
        from .watch import watch_file
    except ImportError as e:
        print(
            "Error: watchdog library not installed. Install with: pip install mdhtml[watch]",
            file=sys.stderr,
        )
        print(f"Details: {e}", file=sys.stderr)
        return 1

    debounce_ms = args.debounce_ms
    if debounce_ms is None:
        debounce_ms = rt.config.watch.debounce_ms

    return watch_file(
        src=args.input,
        dest=args.output,
        converter=rt.converter,
        debounce_ms=debounce_ms,
        quiet=args.quiet,
        final_eol=rt.config.output.final_eol,
    )


def cmd_serve(args: argparse.Namespace, rt: Any) -> int:
    """Start the local live-render form server."""
    try:
        import uvicorn

        from .api.app import create_app
    except ImportError as e:
        print(
            "Error: API dependencies not installed. "
            "Install with: pip install mdhtml[api]",
            file=sys.stderr
        )
        print(f"Details: {e}", file=sys.stderr)
        return 1

    server = rt.config.server
    host = args.host or server.host
    port = args.port or server.port
    enable_cors = args.cors or server.cors

    app = create_app(rt, enable_cors=enable_cors)

    print(f"Starting server on http://{host}:{port}")

    uvicorn.run(app, host=host, port=port, log_level="info")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdhtml", description="Convert Markdown to HTML"
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/mdhtml.toml)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # convert command
    parser_convert = subparsers.add_parser("convert", help="Convert Markdown to HTML")
    parser_convert.add_argument(
        "input", type=Path, nargs="?", default=None,
        help="Markdown file (default: stdin; '-' also reads stdin)"
    )
    parser_convert.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Write HTML to this file instead of stdout"
    )

    # watch command
    parser_watch = subparsers.add_parser("watch", help="Re-render HTML whenever the source changes")
    parser_watch.add_argument("input", type=Path, help="Markdown file to watch")
    parser_watch.add_argument(
        "-o", "--output", type=Path, required=True,
        help="HTML file to write on every change"
    )
    parser_watch.add_argument(
        "--debounce-ms", type=int, default=None,
        help="Debounce window in milliseconds (default: from config, 150)"
    )

    # serve command
    parser_serve = subparsers.add_parser("serve", help="Start the live-render form server")
    parser_serve.add_argument(
        "--host", default=None,
        help="Host to bind to (default: from config, 127.0.0.1)"
    )
    parser_serve.add_argument(
        "--port", type=int, default=None,
        help="Port to bind to (default: from config, 8765)"
    )
    parser_serve.add_argument(
        "--cors", action="store_true",
        help="Enable CORS (default: false)"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    rt = build_runtime(config_path=args.config)

    handlers = {
        "convert": cmd_convert,
        "watch": cmd_watch,
        "serve": cmd_serve,
    }

    handler = handlers.get(args.cmd)
    if handler:
        try:
            exit_code = handler(args, rt)
            sys.exit(exit_code)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
