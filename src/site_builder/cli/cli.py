#!/usr/bin/env python3
"""
site_builder.cli.cli

Typer-based CLI that renders a Markdown source tree into an HTML output tree.

Examples
--------
Build ``src/`` into ``target/`` with the default template:

    site-build build

Keep building after a failing document and ignore non-Markdown files:

    site-build build --keep-going --skip-non-documents
"""

from __future__ import annotations

import sys
import traceback
from pathlib import Path

import typer

from site_builder.errors import BuildError
from site_builder.logging_utils import configure_logging

app = typer.Typer(
    name="site-build",
    help="Build a static HTML site from a tree of Markdown documents.",
    no_args_is_help=True,
)


def _print_build_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly build error.

    Parameters
    ----------
    exc : Exception
        Exception raised during the build.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    label = typer.style(f"✗ {type(exc).__name__}:", fg=typer.colors.RED, bold=True)
    typer.echo(f"{label} {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every step of the walk."),
) -> None:
    """Initialize shared CLI state."""
    configure_logging(verbose)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("build")
def build_cmd(
    ctx: typer.Context,
    source_root: str = typer.Option("src", "--source-root", help="Source tree of Markdown documents."),
    output_root: Path = typer.Option(Path("target"), "--output-root", help="Where rendered HTML is written."),
    template: Path = typer.Option(Path("tmpl/main.tmpl"), "--template", help="Pandoc template file."),
    pandoc: str = typer.Option("pandoc", "--pandoc", help="Pandoc executable."),
    timeout: float | None = typer.Option(
        None, "--timeout", min=0.001, help="Per-document converter timeout in seconds."
    ),
    keep_going: bool = typer.Option(
        False, "--keep-going", help="Record failing documents and continue instead of aborting."
    ),
    skip_non_documents: bool = typer.Option(
        False, "--skip-non-documents", help="Ignore files without the document suffix."
    ),
) -> None:
    """Render every document under the source root into the output root."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from site_builder.api import build_site_from_paths

        report = build_site_from_paths(
            source_root=source_root,
            output_root=output_root,
            template=template,
            pandoc=pandoc,
            timeout=timeout,
            keep_going=keep_going,
            skip_non_documents=skip_non_documents,
        )
    except BuildError as exc:
        raise typer.Exit(code=_print_build_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_build_error(exc, debug))

    if not report.ok:
        for failure in report.failures:
            typer.echo(f"✗ {failure.path}: {failure.error}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"✓ Built {report.converted_count} document(s) into {output_root}")


@app.command("split")
def split_cmd(
    source_path: str = typer.Argument(..., help="Document path, e.g. src/notes/os/vmem.md."),
    source_root: str = typer.Option("src", "--source-root", help="Source tree root."),
    output_root: Path = typer.Option(Path("target"), "--output-root", help="Output tree root."),
) -> None:
    """Show where a document would be rendered."""
    from site_builder.paths import output_file_path, split_document_path

    try:
        location = split_document_path(source_path, source_root=source_root)
    except BuildError as exc:
        raise typer.Exit(code=_print_build_error(exc, False))

    typer.echo(f"parent_dir: {location.parent_dir}")
    typer.echo(f"stem: {location.stem}")
    typer.echo(f"output: {output_file_path(location, output_root)}")


@app.command("doctor")
def doctor_cmd(
    pandoc: str = typer.Option("pandoc", "--pandoc", help="Pandoc executable to probe."),
    template: Path = typer.Option(Path("tmpl/main.tmpl"), "--template", help="Template to check."),
) -> None:
    """Print toolchain availability for the build."""
    from site_builder.adapters.pandoc import pandoc_version

    typer.echo(f"Python: {sys.version.split()[0]}")
    version = pandoc_version(pandoc)
    typer.echo(f"{pandoc}: {version or '<not installed>'}")
    typer.echo(f"template: {template} ({'found' if template.is_file() else 'missing'})")


if __name__ == "__main__":
    app()
