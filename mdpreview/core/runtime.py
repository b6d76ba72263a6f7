"""pattern-table markdown rendering engine."""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Optional

from mdpreview.core.patterns import PARAGRAPH, Pattern, default_patterns
from mdpreview.surfaces import RenderSurface

logger = logging.getLogger(__name__)


class Renderer(ABC):
    """base class for markdown to HTML renderers."""

    @abstractmethod
    def render(self, markdown: Optional[str]) -> str:
        """converts markdown to an HTML string."""

    def render_to_element(self, markdown: Optional[str], target: Any) -> str:
        """
        renders markdown and writes the result into a surface.

        Args:
            markdown: markdown source
            target: surface exposing a writable inner_html attribute

        Returns:
            the rendered HTML, identical to render(markdown)

        Raises:
            TypeError: if target is not a render surface
        """
        if not isinstance(target, RenderSurface):
            raise TypeError(
                f"Render target must expose an inner_html attribute: {target!r}"
            )

        html = self.render(markdown)
        target.inner_html = html
        return html


class MarkdownRuntime(Renderer):
    """
    converts markdown to HTML with an ordered table of regex rules.

    Rendering runs every distinct preprocessing step in table order, then every
    rule's substitution in table order, in a single forward pass. The table is
    owned by the instance; add_pattern is serialized against render.
    """

    def __init__(self, extra_patterns: Optional[Mapping[str, Pattern]] = None) -> None:
        self._lock = threading.Lock()
        self._patterns = default_patterns()
        for name, pattern in (extra_patterns or {}).items():
            self.add_pattern(name, pattern)

    @property
    def patterns(self) -> dict[str, Pattern]:
        """returns a copy of the current rule table in application order."""
        with self._lock:
            return dict(self._patterns)

    def add_pattern(self, name: str, pattern: Pattern) -> None:
        """
        registers a named rule.

        Existing names are overwritten in place. New names are appended ahead
        of the terminal paragraph rule. Nothing is validated here; a malformed
        matcher or a failing callback surfaces on the next render.

        Args:
            name: rule name
            pattern: rule to register
        """
        with self._lock:
            existing = name in self._patterns
            if existing or PARAGRAPH not in self._patterns:
                self._patterns[name] = pattern
            else:
                terminal = self._patterns.pop(PARAGRAPH)
                self._patterns[name] = pattern
                self._patterns[PARAGRAPH] = terminal
        logger.debug("%s pattern %s", "Overwrote" if existing else "Registered", name)

    def render(self, markdown: Optional[str]) -> str:
        """
        converts markdown to HTML.

        Args:
            markdown: markdown source; None and "" both render to ""

        Returns:
            HTML string

        Raises:
            re.error: if a registered matcher is not a valid expression
        """
        if not markdown:
            return ""

        with self._lock:
            patterns = list(self._patterns.values())

        html = markdown

        # list rules share one scanner, so each step runs once
        applied: list[Any] = []
        for pattern in patterns:
            step = pattern.preprocessing
            if step is None or step in applied:
                continue
            applied.append(step)
            html = step(html)

        for pattern in patterns:
            html = pattern.replacement.apply(pattern.compile(), html)

        return html
