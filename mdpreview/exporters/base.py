"""base exporter interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from mdpreview.core.models import Document


class Exporter(ABC):  # pylint: disable=too-few-public-methods
    """abstract base class for document exporters."""

    @abstractmethod
    def export(
        self,
        document: Document,
        destination: Path,
        dry_run: bool = False,
        overwrite: bool = False,
    ) -> Optional[Path]:
        """
        Export a document to the destination.

        Args:
            document: The document to export
            destination: Output directory
            dry_run: If True, don't actually write anything
            overwrite: If True, replace existing output

        Returns:
            Path written, or None if nothing was written
        """
        ...  # pylint: disable=unnecessary-ellipsis
