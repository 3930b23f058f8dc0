"""Unit tests for CLI command behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from site_builder.application.results import BuildFailure, BuildReport
from site_builder.cli import cli as cli_module
from site_builder.errors import ConversionError, EnumerationError

runner = CliRunner()


def test_help_shows_commands() -> None:
    """Ensure top-level help lists the build subcommands."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    assert "build" in result.output
    assert "split" in result.output
    assert "doctor" in result.output


def test_build_forwards_options(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the build command forwards every option to the API layer."""
    called: dict[str, object] = {}

    def fake_build(**kwargs: object) -> BuildReport:
        called.update(kwargs)
        return BuildReport(outputs=[Path("public/index.html")])

    import site_builder.api as api_module

    monkeypatch.setattr(api_module, "build_site_from_paths", fake_build)
    result = runner.invoke(
        cli_module.app,
        [
            "build",
            "--source-root",
            "content",
            "--output-root",
            "public",
            "--template",
            "tmpl/alt.tmpl",
            "--timeout",
            "30",
            "--keep-going",
            "--skip-non-documents",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Built 1 document(s) into public" in result.output
    assert called == {
        "source_root": "content",
        "output_root": Path("public"),
        "template": Path("tmpl/alt.tmpl"),
        "pandoc": "pandoc",
        "timeout": 30.0,
        "keep_going": True,
        "skip_non_documents": True,
    }


def test_build_fatal_error_uses_error_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    """Exit with the error's code when the build aborts."""

    def fake_build(**kwargs: object) -> BuildReport:
        raise EnumerationError("Cannot read directory `src`")

    import site_builder.api as api_module

    monkeypatch.setattr(api_module, "build_site_from_paths", fake_build)
    result = runner.invoke(cli_module.app, ["build"])

    assert result.exit_code == EnumerationError.exit_code
    assert "EnumerationError" in result.output
    assert "Cannot read directory" in result.output


def test_build_unexpected_error_debug_traceback(monkeypatch: pytest.MonkeyPatch) -> None:
    """Print a traceback for unexpected errors when --debug is set."""

    def fake_build(**kwargs: object) -> BuildReport:
        raise RuntimeError("boom")

    import site_builder.api as api_module

    monkeypatch.setattr(api_module, "build_site_from_paths", fake_build)
    result = runner.invoke(cli_module.app, ["--debug", "build"])

    assert result.exit_code == 1
    assert "Traceback" in result.output
    assert "boom" in result.output


def test_build_isolated_failures_exit_nonzero(monkeypatch: pytest.MonkeyPatch) -> None:
    """Exit non-zero and list failures recorded during the walk."""

    def fake_build(**kwargs: object) -> BuildReport:
        return BuildReport(
            outputs=[Path("target/index.html")],
            failures=[BuildFailure("src/notes", ConversionError("pandoc exploded"))],
        )

    import site_builder.api as api_module

    monkeypatch.setattr(api_module, "build_site_from_paths", fake_build)
    result = runner.invoke(cli_module.app, ["build"])

    assert result.exit_code == 1
    assert "src/notes: pandoc exploded" in result.output


def test_build_end_to_end_with_fake_pandoc(
    site_dir: Path, monkeypatch: pytest.MonkeyPatch, fake_converter
) -> None:
    """Run the real walk with a stubbed converter through the CLI."""
    import site_builder.application.use_cases as use_cases

    monkeypatch.setattr(use_cases, "PandocConverter", lambda config: fake_converter)
    result = runner.invoke(cli_module.app, ["build"])

    assert result.exit_code == 0, result.output
    assert (site_dir / "target" / "notes" / "os" / "vmem.html").is_file()
    assert len(fake_converter.calls) == 5


def test_build_rejects_invalid_timeout() -> None:
    """Reject non-positive timeouts at the CLI boundary."""
    result = runner.invoke(cli_module.app, ["build", "--timeout", "0"])
    assert result.exit_code != 0


def test_split_prints_location() -> None:
    """Show parent directory, stem and output path."""
    result = runner.invoke(cli_module.app, ["split", "src/notes/os/vmem.md"])
    assert result.exit_code == 0
    assert "parent_dir: notes/os" in result.output
    assert "stem: vmem" in result.output
    assert "output: target/notes/os/vmem.html" in result.output


def test_split_rejects_malformed_path() -> None:
    """Exit with the path-format code for a malformed document path."""
    result = runner.invoke(cli_module.app, ["split", "src/notes.txt"])
    assert result.exit_code == 3
    assert "PathFormatError" in result.output


def test_doctor_reports_toolchain(monkeypatch: pytest.MonkeyPatch) -> None:
    """Report pandoc availability and template presence."""
    import site_builder.adapters.pandoc as pandoc_module

    monkeypatch.setattr(pandoc_module, "pandoc_version", lambda executable: None)
    result = runner.invoke(cli_module.app, ["doctor", "--template", "/no/such.tmpl"])

    assert result.exit_code == 0
    assert "Python:" in result.output
    assert "pandoc: <not installed>" in result.output
    assert "missing" in result.output
