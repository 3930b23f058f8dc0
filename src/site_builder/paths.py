"""Map source document paths onto the output tree."""

from __future__ import annotations

from pathlib import Path

from site_builder.errors import PathFormatError
from site_builder.schemas import DEFAULT_SOURCE_ROOT
from site_builder.types import OutputLocation


def split_document_path(
    source_path: str,
    *,
    source_root: str = DEFAULT_SOURCE_ROOT,
    document_suffix: str = ".md",
) -> OutputLocation:
    """Split a document path into its output parent directory and stem.

    Parameters
    ----------
    source_path : str
        ``/``-separated path starting with ``<source_root>/`` and ending
        with ``document_suffix``, e.g. ``src/notes/os/vmem.md``.
    source_root : str, default="src"
        Name of the source tree root.
    document_suffix : str, default=".md"
        Suffix identifying convertible documents.

    Returns
    -------
    OutputLocation
        ``("notes/os", "vmem")`` for the example above; ``parent_dir`` is
        empty for documents directly under the source root.

    Raises
    ------
    PathFormatError
        If the prefix or suffix does not match, or no stem remains.
    """
    prefix = f"{source_root.rstrip('/')}/"
    if not source_path.startswith(prefix):
        raise PathFormatError(
            f"Document path '{source_path}' does not start with '{prefix}'."
        )
    if not source_path.endswith(document_suffix):
        raise PathFormatError(
            f"Document path '{source_path}' does not end with '{document_suffix}'."
        )

    body = source_path[len(prefix) : len(source_path) - len(document_suffix)]
    if any(not segment for segment in body.split("/")):
        raise PathFormatError(
            f"Document path '{source_path}' has an empty stem or directory segment."
        )
    parent_dir, _, stem = body.rpartition("/")
    return OutputLocation(parent_dir=parent_dir, stem=stem)


def output_file_path(
    location: OutputLocation,
    output_root: Path,
    output_suffix: str = ".html",
) -> Path:
    """Return the rendered file path for ``location`` under ``output_root``."""
    return output_root / location.relative_output(output_suffix)
