"""Data models for markdown documents."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class Document:
    """Markdown source document."""

    path: Path
    title: str
    markdown: str

    @property
    def stem(self) -> str:
        """Base name used for the rendered output file."""
        return self.path.stem
