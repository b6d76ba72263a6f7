"""Batch rendering of markdown files."""

import logging
import tempfile
import zipfile
from pathlib import Path

from mdpreview.core.loader import load_document
from mdpreview.core.runtime import Renderer
from mdpreview.exporters.html import HTMLExporter
from mdpreview.progress import ProgressHandler

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


def discover_files(source: Path, extract_dir: Path) -> list[Path]:
    """
    discovers markdown files from source path.

    Args:
        source: path to markdown file, directory, or ZIP archive
        extract_dir: directory receiving files extracted from a ZIP archive

    Returns:
        sorted list of paths to markdown files

    Raises:
        FileNotFoundError: if source doesn't exist
    """
    if not source.exists():
        raise FileNotFoundError(f"Source not found: {source}")

    if source.is_file():
        if source.suffix == ".zip":
            return _extract_zip(source, extract_dir)
        if source.suffix in MARKDOWN_SUFFIXES:
            return [source]
        return []

    if source.is_dir():
        return _markdown_files(source)

    return []


def _markdown_files(directory: Path) -> list[Path]:
    return sorted(p for p in directory.iterdir() if p.suffix in MARKDOWN_SUFFIXES)


def _extract_zip(zip_path: Path, extract_dir: Path) -> list[Path]:
    """extracts markdown files from ZIP archive."""
    with zipfile.ZipFile(zip_path, "r") as zf:
        for name in zf.namelist():
            if Path(name).suffix in MARKDOWN_SUFFIXES:
                # keeps only the filename, preventing path traversal
                target_path = extract_dir / Path(name).name
                target_path.write_bytes(zf.read(name))

    return _markdown_files(extract_dir)


def render_documents(
    source: Path,
    destination: Path,
    renderer: Renderer,
    dry_run: bool = False,
    overwrite: bool = False,
    quiet: bool = False,
    show_progress: bool = False,
) -> int:
    """
    renders every markdown file found at source into destination.

    Args:
        source: markdown file, directory, or ZIP archive
        destination: output directory for HTML files
        renderer: renderer used for every document
        dry_run: if True, report what would be written without writing
        overwrite: if True, replace existing HTML files
        quiet: if True, suppress info output
        show_progress: if True, show a progress bar

    Returns:
        exit code (0 success, 1 if any document failed)
    """
    exporter = HTMLExporter(renderer)
    rendered = 0
    failed = 0

    with tempfile.TemporaryDirectory(prefix="mdpreview_") as extract_dir:
        with ProgressHandler(quiet=quiet, show_progress=show_progress) as progress:
            progress.start_discovery()
            files = discover_files(source, Path(extract_dir))
            progress.set_total(len(files))

            for file_path in files:
                try:
                    document = load_document(file_path)
                    output_path = exporter.export(
                        document, destination, dry_run=dry_run, overwrite=overwrite
                    )
                except Exception as e:  # pylint: disable=broad-exception-caught
                    logger.debug("Failed to render %s", file_path, exc_info=True)
                    progress.log_error(f"{file_path.name}: {e}")
                    failed += 1
                else:
                    if output_path is not None:
                        progress.log_info(f"Rendered {file_path.name} -> {output_path}")
                    rendered += 1
                progress.update(file_path.name)

            progress.finish(rendered, failed)

    return 1 if failed else 0
