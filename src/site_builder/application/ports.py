"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class DocumentConverter(Protocol):
    """Render one source document into its output file."""

    def convert(self, source_file: str, dest_file: Path) -> Path:
        """Render ``source_file`` into ``dest_file`` and return the written path.

        Raises ``ConversionError`` on failure.
        """
