"""Top-level API for building a static site from Markdown sources."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from site_builder.errors import (
    BuildError,
    ConfigError,
    ConversionError,
    DirectoryCreationError,
    EnumerationError,
    PathFormatError,
)
from site_builder.types import OutputLocation

if TYPE_CHECKING:
    from site_builder.application.results import BuildReport

__version__ = "0.1.0"


def split_document_path(
    source_path: str,
    *,
    source_root: str = "src",
    document_suffix: str = ".md",
) -> OutputLocation:
    """Split ``src/.../name.md`` into its output parent directory and stem.

    Parameters
    ----------
    source_path : str
        Document path rooted at ``source_root``.
    source_root : str, default="src"
        Source tree root name.
    document_suffix : str, default=".md"
        Document extension.

    Returns
    -------
    OutputLocation
        Output-relative parent directory and stem.
    """
    from .paths import split_document_path as _impl

    return _impl(source_path, source_root=source_root, document_suffix=document_suffix)


def ensure_output_dir(relative_dir: str, output_root: Path = Path("target")) -> Path:
    """Create ``output_root/relative_dir`` if it is missing and return it."""
    from .structure import ensure_output_dir as _impl

    return _impl(relative_dir, output_root)


def build_site(
    source_root: str = "src",
    output_root: Path = Path("target"),
    **settings: object,
) -> BuildReport:
    """Render every document under ``source_root`` into ``output_root``.

    Extra keyword arguments are forwarded to ``BuildConfig``; ``converter``
    may name any object implementing ``DocumentConverter``.

    Returns
    -------
    BuildReport
        Outputs written and failures isolated during the walk.
    """
    from .api import build_site_from_paths as _impl

    return _impl(source_root=source_root, output_root=output_root, **settings)


__all__ = [
    "BuildError",
    "ConfigError",
    "ConversionError",
    "DirectoryCreationError",
    "EnumerationError",
    "OutputLocation",
    "PathFormatError",
    "build_site",
    "ensure_output_dir",
    "split_document_path",
]
