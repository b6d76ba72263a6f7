"""CommonMark reference renderer."""

from typing import Optional

from markdown_it import MarkdownIt

from mdpreview.core.runtime import Renderer


class CommonMarkRenderer(Renderer):
    """
    renders markdown with markdown-it-py in strict CommonMark mode.

    Useful as a reference when comparing against the pattern engine, which
    only covers a subset of the syntax.
    """

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark")

    def render(self, markdown: Optional[str]) -> str:
        """converts markdown to HTML, without the trailing newline."""
        if not markdown:
            return ""
        html: str = self._md.render(markdown)
        return html.rstrip("\n")
