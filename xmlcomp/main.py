"""Command-line entry point for XML-Comp."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from xmlcomp import __version__
from xmlcomp.comparer import CompareContext, compare
from xmlcomp.config import load_config
from xmlcomp.errors import ConfigurationError, XMLCompError


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging."""
    level = logging.DEBUG if debug else logging.WARNING

    # Clear any existing handlers to prevent duplication
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout is reserved for the summary
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=True)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="xml-comp",
        description=(
            "Append tags missing from a translation tree and mark tags "
            "that no longer exist in the original tree."
        ),
    )

    parser.add_argument(
        "--version", action="version", version=f"XML-Comp {__version__}"
    )
    parser.add_argument(
        "--original",
        help="Full path of the original directory, e.g. a RimWorld English folder (required)",
    )
    parser.add_argument(
        "--translation",
        help="Full path of the translation directory (required)",
    )
    parser.add_argument(
        "--doc-type",
        help="Extension of the files to compare (default: xml)",
    )
    parser.add_argument("--config-file", type=Path, help="Path to YAML configuration file")
    parser.add_argument("--debug", action="store_true", default=None, help="Enable debug logging")

    return parser


def format_summary(context: CompareContext) -> str:
    """One-line report of a finished comparison."""
    return (
        f"Documents: {context.docs} | Lines: {context.lines} | "
        f"Tags in need: {context.in_need} | "
        f"Created dirs: {context.dirs_created} | Created files: {context.files_created}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run a comparison and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=bool(args.debug))
    logger = structlog.get_logger()

    try:
        config = load_config(
            config_file=args.config_file,
            original_dir=args.original or None,
            translation_dir=args.translation or None,
            doc_type=args.doc_type,
            debug=args.debug,
        )
    except ConfigurationError as e:
        logger.error("Configuration error", **e.to_dict())
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 1

    if config.debug and not args.debug:
        setup_logging(debug=True)

    if not config.has_paths:
        parser.print_usage(sys.stderr)
        return 1

    print("Creating instance ...")
    print("Output:-")

    try:
        context = compare(config.original_dir, config.translation_dir, doc_type=config.doc_type)
    except XMLCompError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(format_summary(context))
    return 0


def run() -> None:
    """Synchronous entry point for setuptools."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    run()
