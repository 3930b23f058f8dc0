"""Depth-first walk of the source tree that renders every document."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from site_builder.application.ports import DocumentConverter
from site_builder.application.results import BuildFailure, BuildReport
from site_builder.errors import BuildError, EnumerationError
from site_builder.logging_utils import log_success
from site_builder.paths import output_file_path, split_document_path
from site_builder.schemas import BuildConfig
from site_builder.structure import ensure_output_dir
from site_builder.types import DirectoryEntry

logger = logging.getLogger(__name__)

_SPECIAL_NAMES = frozenset({".", ".."})


def _other_detail(entry: os.DirEntry[str]) -> str:
    if entry.is_symlink():
        return "symlink"
    try:
        mode = entry.stat(follow_symlinks=False).st_mode
    except OSError:
        return "unknown"
    if stat.S_ISFIFO(mode):
        return "fifo"
    if stat.S_ISSOCK(mode):
        return "socket"
    if stat.S_ISBLK(mode):
        return "block-device"
    if stat.S_ISCHR(mode):
        return "char-device"
    return "unknown"


def classify_entry(entry: os.DirEntry[str]) -> DirectoryEntry:
    """Classify a scandir entry without following symlinks."""
    if entry.is_file(follow_symlinks=False):
        return DirectoryEntry(entry.name, "file")
    if entry.is_dir(follow_symlinks=False):
        return DirectoryEntry(entry.name, "directory")
    return DirectoryEntry(entry.name, "other", _other_detail(entry))


def scan_directory(dir_path: str) -> list[DirectoryEntry]:
    """List the classified entries of ``dir_path`` sorted by name.

    Raises
    ------
    EnumerationError
        If the directory cannot be opened or read.
    """
    try:
        with os.scandir(dir_path) as it:
            entries = [classify_entry(entry) for entry in it]
    except OSError as exc:
        raise EnumerationError(f"Cannot read directory `{dir_path}`: {exc}") from exc
    return sorted(entries, key=lambda item: item.name)


class TreeWalker:
    """Mirror a source tree into the output tree, one document at a time.

    A failing file aborts the directory it lives in and propagates to the
    caller. A failing subdirectory is logged and recorded in the report
    while its siblings are still built. With ``config.keep_going`` file
    failures are recorded the same way instead of propagating.
    """

    def __init__(
        self,
        config: BuildConfig,
        converter: DocumentConverter,
        report: BuildReport | None = None,
    ) -> None:
        self.config = config
        self.converter = converter
        self.report = report if report is not None else BuildReport()

    def build_tree(self, dir_path: str | None = None) -> BuildReport:
        """Walk ``dir_path`` (the source root by default) and render documents."""
        dir_path = dir_path if dir_path is not None else self.config.source_root
        logger.info("Building documents under `%s`", dir_path)

        for entry in scan_directory(dir_path):
            child_path = f"{dir_path}/{entry.name}"
            if entry.kind == "file":
                logger.debug("Found file `%s`", entry.name)
                self._visit_file(child_path)
            elif entry.kind == "directory":
                if entry.name in _SPECIAL_NAMES:
                    continue
                logger.debug("Found directory `%s`", entry.name)
                self._visit_directory(child_path)
            else:
                logger.warning("Found unknown entry `%s` (%s)", child_path, entry.detail)
                self.report.warnings.append(child_path)
        return self.report

    def build_file(self, source_path: str) -> Path | None:
        """Render a single document and return its output path.

        Returns ``None`` when the file is not a document and
        ``config.skip_non_documents`` is set.
        """
        cfg = self.config
        if cfg.skip_non_documents and not source_path.endswith(cfg.document_suffix):
            logger.info("Skipping non-document `%s`", source_path)
            self.report.skipped.append(source_path)
            return None

        location = split_document_path(
            source_path,
            source_root=cfg.source_root,
            document_suffix=cfg.document_suffix,
        )
        logger.debug(
            "Split `%s` into folder `%s` and basename `%s`",
            source_path,
            location.parent_dir,
            location.stem,
        )
        ensure_output_dir(location.parent_dir, cfg.output_root)
        dest = output_file_path(location, cfg.output_root, cfg.output_suffix)
        self.converter.convert(source_path, dest)
        log_success(logger, "Built `%s` -> `%s`", source_path, dest)
        self.report.outputs.append(dest)
        return dest

    def _visit_file(self, source_path: str) -> None:
        try:
            self.build_file(source_path)
        except BuildError as exc:
            if not self.config.keep_going:
                logger.error("Aborting build of `%s`: %s", source_path, exc)
                raise
            logger.error("Failed to build `%s`: %s", source_path, exc)
            self.report.failures.append(BuildFailure(source_path, exc))

    def _visit_directory(self, dir_path: str) -> None:
        try:
            self.build_tree(dir_path)
        except BuildError as exc:
            logger.error("Failed to build subtree `%s`: %s", dir_path, exc)
            self.report.failures.append(BuildFailure(dir_path, exc))
