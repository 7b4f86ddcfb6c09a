"""CLI entrypoints for doxycomplete commands."""

from __future__ import annotations

import argparse
import getpass
import sys
from pathlib import Path

from .config import ConfigError
from .descriptors import DescriptorError, load_descriptor
from .engine import CommentEngine
from .logging import configure_logging, get_logger
from .rendering.file_header import FileContext
from .text.abbreviations import DuplicateKeyError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doxycomplete",
        description="Generate and refresh Doxygen comments for C++ declarations.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .doxycomplete.yml or the directory holding it (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    comment_parser = subparsers.add_parser(
        "comment",
        help="Render the comment block for a declaration descriptor.",
    )
    _add_verbose_option(comment_parser, suppress_default=True)
    comment_parser.add_argument(
        "descriptor",
        help="YAML or JSON file describing the declaration (an empty file means none).",
    )
    comment_parser.add_argument(
        "--existing",
        help="File containing the current comment whose text should be kept.",
    )
    comment_parser.add_argument(
        "--indent",
        type=int,
        default=0,
        help="Number of spaces preceding the comment opener.",
    )

    header_parser = subparsers.add_parser(
        "file-header",
        help="Render the file header comment from the configured template.",
    )
    _add_verbose_option(header_parser, suppress_default=True)
    header_parser.add_argument("filename", help="Name of the file receiving the header.")
    header_parser.add_argument("--project", default="", help="Project or module name.")
    header_parser.add_argument(
        "--author",
        default=None,
        help="Author name (defaults to the current user).",
    )

    indent_parser = subparsers.add_parser(
        "indent",
        help="Compute the aligned caret column for a continuation line.",
    )
    _add_verbose_option(indent_parser, suppress_default=True)
    indent_parser.add_argument("line", help="Text of the preceding comment line.")
    indent_parser.add_argument(
        "--column",
        type=int,
        default=1,
        help="Current caret column, counted from one.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service used by editor integrations.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for doxycomplete commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    logger = get_logger("cli")

    try:
        engine = CommentEngine.from_config(Path(args.config))
    except (ConfigError, DuplicateKeyError, OSError) as exc:
        parser.exit(1, f"doxycomplete: invalid configuration: {exc}\n")

    if args.command == "comment":
        try:
            declaration = load_descriptor(Path(args.descriptor))
            existing = ""
            if args.existing:
                existing = Path(args.existing).read_text(encoding="utf-8")
        except (DescriptorError, OSError) as exc:
            parser.exit(1, f"doxycomplete comment failed: {exc}\n")
        logger.debug("Loaded descriptor from %s", args.descriptor)
        print(engine.generate_comment(declaration, existing, indent=" " * max(args.indent, 0)))
    elif args.command == "file-header":
        author = args.author if args.author is not None else getpass.getuser()
        result = engine.generate_file_comment(
            FileContext(filename=args.filename, project_name=args.project, author=author)
        )
        sys.stdout.write(result.text)
        print(f"cursor-line: {result.cursor_line}", file=sys.stderr)
    elif args.command == "indent":
        outcome = engine.indentation(args.line, args.column)
        if not outcome.success:
            parser.exit(1, "No indentation recommendation\n")
        print(outcome.column)
    elif args.command == "serve":
        from .service import run_service

        logger.info("Serving on %s:%d", args.host, args.port)
        run_service(args.host, args.port, engine_factory=lambda: engine)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
