"""Public build API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from site_builder.application.ports import DocumentConverter
from site_builder.application.results import BuildReport
from site_builder.application.use_cases import build_config, build_site


def build_site_from_paths(
    source_root: str = "src",
    output_root: Path = Path("target"),
    converter: DocumentConverter | None = None,
    **settings: object,
) -> BuildReport:
    """Build the site for the given roots.

    Remaining keyword arguments (``template``, ``pandoc``, ``timeout``,
    ``document_suffix`` ...) are validated as ``BuildConfig`` fields.
    """
    config = build_config(source_root=source_root, output_root=output_root, **settings)
    return build_site(config, converter=converter)
