"""Shared pytest configuration, marker assignment and build fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from site_builder.errors import ConversionError


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo CLI logging setup so records reach caplog and no stale stream is kept."""
    logger = logging.getLogger("site_builder")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = True


class FakeConverter:
    """Converter double that wraps the source text into the destination."""

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.calls: list[tuple[str, Path]] = []
        self.fail_on = fail_on or set()

    def convert(self, source_file: str, dest_file: Path) -> Path:
        self.calls.append((source_file, dest_file))
        if source_file in self.fail_on:
            raise ConversionError(f"refusing to convert {source_file}")
        dest_file.write_text(f"<html>{Path(source_file).read_text()}</html>")
        return dest_file


def _write_tree(root: Path, files: dict[str, str]) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def make_converter() -> Callable[..., FakeConverter]:
    """Return a factory for recording converters."""
    return FakeConverter


@pytest.fixture
def fake_converter() -> FakeConverter:
    """Return a fresh recording converter."""
    return FakeConverter()


@pytest.fixture
def write_tree() -> Callable[[Path, dict[str, str]], None]:
    """Return a helper creating ``relative path -> content`` files under a root."""
    return _write_tree


@pytest.fixture
def site_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Work inside a temp dir holding a small ``src/`` tree."""
    _write_tree(
        tmp_path / "src",
        {
            "index.md": "# Home",
            "notes/notes.md": "# Notes",
            "notes/os/vmem.md": "# Virtual memory",
            "notes/os/sched.md": "# Scheduling",
            "about/me.md": "# Me",
        },
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path
