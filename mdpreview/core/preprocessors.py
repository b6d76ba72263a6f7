"""line-scanning preprocessors that inject block wrapper markers."""

import re
from typing import Optional

UNORDERED_ITEM = re.compile(r"^\s*[-*+]\s+\S")
ORDERED_ITEM = re.compile(r"^\s*\d+\.\s+\S")
QUOTE_MARKER = re.compile(r"^>\s+")


def _list_type(line: str) -> Optional[str]:
    """returns 'ul' or 'ol' for list item lines, None otherwise."""
    if UNORDERED_ITEM.match(line):
        return "ul"
    if ORDERED_ITEM.match(line):
        return "ol"
    return None


def scan_lists(lines: list[str]) -> list[str]:
    """
    wraps runs of list items in <ul>/<ol> marker lines.

    Args:
        lines: markdown source lines

    Returns:
        new list of lines with opening and closing tags on their own lines
    """
    result: list[str] = []
    current: Optional[str] = None

    for line in lines:
        item_type = _list_type(line)

        # leaving a list, or switching between unordered and ordered items
        if current is not None and item_type != current:
            result.append(f"</{current}>")
            current = None

        if item_type is not None and current is None:
            result.append(f"<{item_type}>")
            current = item_type

        result.append(line)

    if current is not None:
        result.append(f"</{current}>")

    return result


def scan_blockquotes(lines: list[str]) -> list[str]:
    """
    wraps runs of quoted lines in <blockquote> marker lines.

    The leading '>' marker is stripped from every quoted line. Nested quotes
    and lazy continuation lines are not recognized.

    Args:
        lines: markdown source lines

    Returns:
        new list of lines
    """
    result: list[str] = []
    in_blockquote = False

    for line in lines:
        if QUOTE_MARKER.match(line):
            if not in_blockquote:
                result.append("<blockquote>")
                in_blockquote = True
            result.append(QUOTE_MARKER.sub("", line, count=1))
            continue

        if in_blockquote:
            result.append("</blockquote>")
            in_blockquote = False
        result.append(line)

    if in_blockquote:
        result.append("</blockquote>")

    return result


def preprocess_lists(markdown: str) -> str:
    """text-level wrapper around scan_lists."""
    return "\n".join(scan_lists(markdown.split("\n")))


def preprocess_blockquotes(markdown: str) -> str:
    """text-level wrapper around scan_blockquotes."""
    return "\n".join(scan_blockquotes(markdown.split("\n")))
