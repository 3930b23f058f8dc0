"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from site_builder.errors import BuildError


@dataclass(frozen=True)
class BuildFailure:
    """A failure that was isolated instead of aborting the build."""

    path: str
    error: BuildError


@dataclass
class BuildReport:
    """Outcome of a tree walk, accumulated while it runs."""

    outputs: list[Path] = field(default_factory=list)
    failures: list[BuildFailure] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Whether the walk finished without any isolated failure."""
        return not self.failures

    @property
    def converted_count(self) -> int:
        return len(self.outputs)
