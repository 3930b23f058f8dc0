"""Shared value types for the build pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

EntryKind: TypeAlias = Literal["file", "directory", "other"]


@dataclass(frozen=True)
class OutputLocation:
    """Where a rendered document lands, relative to the output root.

    Parameters
    ----------
    parent_dir : str
        ``/``-separated directory under the output root. Empty when the
        source document sits directly under the source root.
    stem : str
        Document base name without its suffix.
    """

    parent_dir: str
    stem: str

    def relative_output(self, suffix: str) -> str:
        """Return ``parent_dir/stem<suffix>`` without a leading separator."""
        name = f"{self.stem}{suffix}"
        if not self.parent_dir:
            return name
        return f"{self.parent_dir}/{name}"


@dataclass(frozen=True)
class DirectoryEntry:
    """One classified entry of a source directory."""

    name: str
    kind: EntryKind
    detail: str = ""
