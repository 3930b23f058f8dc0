"""Application use-cases orchestrating site builds."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from site_builder.adapters.pandoc import PandocConverter
from site_builder.application.ports import DocumentConverter
from site_builder.application.results import BuildReport
from site_builder.errors import ConfigError
from site_builder.logging_utils import log_success
from site_builder.schemas import BuildConfig
from site_builder.structure import ensure_output_dir
from site_builder.walker import TreeWalker

logger = logging.getLogger(__name__)


def build_config(**settings: object) -> BuildConfig:
    """Validate raw settings into a ``BuildConfig``.

    Raises
    ------
    ConfigError
        If any setting is invalid.
    """
    cleaned = {key: value for key, value in settings.items() if value is not None}
    try:
        return BuildConfig.model_validate(cleaned)
    except ValidationError as exc:
        raise ConfigError(f"Invalid build configuration: {exc}") from exc


def build_site(
    config: BuildConfig,
    *,
    converter: DocumentConverter | None = None,
) -> BuildReport:
    """Use-case: render every document under the source root.

    The output root is created first. Errors raised for files directly
    under the source root, and failure to prepare the output root, are
    fatal and propagate as ``BuildError``. Subtree failures end up in the
    returned report.
    """
    converter = converter or PandocConverter(config)

    ensure_output_dir("", config.output_root)
    if not Path(config.template).is_file():
        logger.warning("Template `%s` not found; the converter may fail.", config.template)

    walker = TreeWalker(config, converter)
    report = walker.build_tree(config.source_root)

    if report.ok:
        log_success(
            logger,
            "Built %d document(s) into `%s`",
            report.converted_count,
            config.output_root,
        )
    else:
        logger.error(
            "Built %d document(s) into `%s` with %d failure(s)",
            report.converted_count,
            config.output_root,
            len(report.failures),
        )
    return report
