"""rendering surfaces that receive produced HTML."""

import html as html_lib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class RenderSurface(Protocol):  # pylint: disable=too-few-public-methods
    """protocol for anything that displays rendered HTML."""

    inner_html: str


@dataclass
class BufferSurface:
    """in-memory surface, useful for previews and tests."""

    inner_html: str = ""


class DocumentSurface:
    """
    surface backed by an HTML file.

    Assigning inner_html writes a complete HTML document with the assigned
    markup as its body.
    """

    def __init__(self, path: Path, title: str) -> None:
        self.path = path
        self.title = title
        self._inner_html = ""

    @property
    def inner_html(self) -> str:
        """returns the last body markup written."""
        return self._inner_html

    @inner_html.setter
    def inner_html(self, value: str) -> None:
        self._inner_html = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self._document(value), encoding="utf-8")
        logger.debug("Wrote %s", self.path)

    def _document(self, body: str) -> str:
        """wraps body markup in a standalone document."""
        title_escaped = html_lib.escape(self.title)
        return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{title_escaped}</title>
</head>
<body>
{body}
</body>
</html>
"""
