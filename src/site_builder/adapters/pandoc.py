"""Pandoc-backed document converter."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from site_builder.errors import ConversionError
from site_builder.schemas import BuildConfig

logger = logging.getLogger(__name__)


class PandocConverter:
    """Render Markdown documents to HTML by shelling out to pandoc."""

    def __init__(self, config: BuildConfig | None = None) -> None:
        self.config = config or BuildConfig()

    def command(self, source_file: str, dest_file: Path) -> list[str]:
        """Return the argument vector used to render ``source_file``."""
        cfg = self.config
        return [
            cfg.pandoc,
            source_file,
            "-f",
            cfg.input_format,
            "-t",
            cfg.output_format,
            "-o",
            str(dest_file),
            f"--template={cfg.template}",
        ]

    def convert(self, source_file: str, dest_file: Path) -> Path:
        """Run pandoc for one document.

        Raises
        ------
        ConversionError
            If pandoc cannot be launched, times out, or exits non-zero.
        """
        cmd = self.command(source_file, dest_file)
        logger.debug("Running `%s`", " ".join(cmd))
        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=False,
                timeout=self.config.timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ConversionError(
                f"`{self.config.pandoc}` timed out after {exc.timeout}s on `{source_file}`."
            ) from exc
        except OSError as exc:
            raise ConversionError(
                f"Could not launch `{self.config.pandoc}` for `{source_file}`: {exc}"
            ) from exc

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            detail = f": {stderr}" if stderr else ""
            raise ConversionError(
                f"Build with `{self.config.pandoc}` failed for `{source_file}` "
                f"(exit {completed.returncode}){detail}"
            )
        return dest_file


def pandoc_version(executable: str = "pandoc") -> str | None:
    """Return the first line of ``<executable> --version`` or ``None``."""
    try:
        completed = subprocess.run(
            [executable, "--version"],
            capture_output=True,
            text=True,
            check=False,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired):
        return None
    if completed.returncode != 0 or not completed.stdout:
        return None
    return completed.stdout.splitlines()[0].strip()
