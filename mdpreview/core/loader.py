"""Loader for markdown source files."""

import re
from pathlib import Path

from mdpreview.core.models import Document

TITLE_PATTERN = re.compile(r"^# (.+)$", re.MULTILINE)


def load_document(path: Path) -> Document:
    """
    Load a markdown file into a Document.

    The title is the first level-one heading, or the file stem when the
    document has none.

    Args:
        path: markdown file to read

    Returns:
        Loaded Document

    Raises:
        FileNotFoundError: if path doesn't exist
    """
    markdown = path.read_text(encoding="utf-8")
    return Document(
        path=path,
        title=extract_title(markdown, path.stem),
        markdown=markdown,
    )


def extract_title(markdown: str, default: str) -> str:
    """Return the first level-one heading text, or default."""
    match = TITLE_PATTERN.search(markdown)
    if match:
        return match.group(1).strip()
    return default
