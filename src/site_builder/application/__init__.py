"""Application-layer use-cases and result objects."""

from __future__ import annotations

from site_builder.application.ports import DocumentConverter
from site_builder.application.results import BuildFailure, BuildReport
from site_builder.schemas import BuildConfig


def build_config(**settings: object) -> BuildConfig:
    """Validate build settings via lazy use-case import."""
    from site_builder.application.use_cases import build_config as _impl

    return _impl(**settings)


def build_site(
    config: BuildConfig,
    *,
    converter: DocumentConverter | None = None,
) -> BuildReport:
    """Run a full site build via lazy use-case import."""
    from site_builder.application.use_cases import build_site as _impl

    return _impl(config, converter=converter)


__all__ = [
    "BuildFailure",
    "BuildReport",
    "DocumentConverter",
    "build_config",
    "build_site",
]
