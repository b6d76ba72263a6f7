"""HTML file exporter."""

import logging
from pathlib import Path
from typing import Optional

from mdpreview.core.models import Document
from mdpreview.core.runtime import Renderer
from mdpreview.exporters.base import Exporter
from mdpreview.surfaces import DocumentSurface

logger = logging.getLogger(__name__)


class HTMLExporter(Exporter):  # pylint: disable=too-few-public-methods
    """exports documents as standalone HTML files."""

    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer

    def output_path(self, document: Document, destination: Path) -> Path:
        """returns the file a document is written to."""
        return destination / f"{document.stem}.html"

    def export(
        self,
        document: Document,
        destination: Path,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> Optional[Path]:
        """renders document into <destination>/<stem>.html."""
        output_path = self.output_path(document, destination)

        if dry_run:
            logger.info("Would write to: %s", output_path)
            return None

        if output_path.exists() and not overwrite:
            logger.info("Skipping existing file: %s", output_path)
            return None

        surface = DocumentSurface(output_path, document.title)
        self.renderer.render_to_element(document.markdown, surface)
        return output_path
