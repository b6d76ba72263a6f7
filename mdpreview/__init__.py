"""Markdown to HTML preview renderer."""

import argparse
import logging
from pathlib import Path
from typing import Optional

from mdpreview.batch import render_documents
from mdpreview.core.commonmark import CommonMarkRenderer
from mdpreview.core.patterns import Pattern, Template
from mdpreview.core.runtime import MarkdownRuntime, Renderer

logger = logging.getLogger(__name__)

HIGHLIGHT = Pattern(r"==(.+?)==", Template("<mark>$1</mark>"))


def build_renderer(
    engine: str,
    highlight: bool = False,
    custom_patterns: Optional[list[list[str]]] = None,
) -> Renderer:
    """
    builds the renderer selected on the command line.

    Args:
        engine: "patterns" or "commonmark"
        highlight: if True, register the ==text== highlight rule
        custom_patterns: [name, regex, template] triples to register

    Returns:
        configured renderer

    Raises:
        ValueError: if custom rules are requested for the commonmark engine
    """
    if engine == "commonmark":
        if highlight or custom_patterns:
            raise ValueError("Custom patterns require the patterns engine")
        return CommonMarkRenderer()

    runtime = MarkdownRuntime()
    if highlight:
        runtime.add_pattern("highlight", HIGHLIGHT)
    for name, regex, template in custom_patterns or []:
        runtime.add_pattern(name, Pattern(regex, Template(template)))
    return runtime


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for mdpreview CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 partial failure, 2 fatal error)
    """
    parser = argparse.ArgumentParser(description="Render markdown files to HTML")
    parser.add_argument(
        "source",
        help="markdown file, directory of markdown files, or ZIP archive",
    )
    parser.add_argument(
        "destination",
        nargs="?",
        default="html",
        help="output directory (default: html)",
    )
    parser.add_argument(
        "--engine",
        choices=("patterns", "commonmark"),
        default="patterns",
        help="rendering engine (default: patterns)",
    )
    parser.add_argument(
        "--highlight",
        action="store_true",
        help="render ==text== as <mark>text</mark>",
    )
    parser.add_argument(
        "--pattern",
        nargs=3,
        action="append",
        metavar=("NAME", "REGEX", "TEMPLATE"),
        help="register a custom rule; TEMPLATE may reference groups as $1, $2",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="process files but don't write HTML",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="replace existing HTML files",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="show progress bar",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress all output except errors",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )

    args = parser.parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    if args.engine == "commonmark" and (args.highlight or args.pattern):
        parser.error("--highlight and --pattern require --engine patterns")

    # validates source path exists
    source_path = Path(args.source)
    if not source_path.exists():
        logger.error("Source not found: %s", args.source)
        return 2

    try:
        renderer = build_renderer(args.engine, args.highlight, args.pattern)
        return render_documents(
            source=source_path,
            destination=Path(args.destination),
            renderer=renderer,
            dry_run=args.dry_run,
            overwrite=args.overwrite,
            quiet=args.quiet,
            show_progress=args.progress,
        )
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("Fatal error: %s", e)
        return 2
