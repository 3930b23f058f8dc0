"""Create the output directory structure on demand."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from site_builder.errors import DirectoryCreationError
from site_builder.schemas import DEFAULT_OUTPUT_ROOT

logger = logging.getLogger(__name__)


def _resolve_target(relative_dir: str, output_root: Path) -> Path:
    if relative_dir in {"", "."}:
        return output_root
    relative = PurePosixPath(relative_dir)
    if relative.is_absolute() or ".." in relative.parts:
        raise DirectoryCreationError(
            f"Output directory '{relative_dir}' must stay under '{output_root}'."
        )
    return output_root.joinpath(*relative.parts)


def ensure_output_dir(
    relative_dir: str,
    output_root: Path = DEFAULT_OUTPUT_ROOT,
) -> Path:
    """Make sure ``output_root/relative_dir`` exists as a directory.

    Calling this repeatedly with the same argument is safe: an existing
    directory is left untouched.

    Parameters
    ----------
    relative_dir : str
        Directory relative to ``output_root``. ``""`` or ``"."`` names the
        root itself.
    output_root : Path, default=Path("target")
        Root of the output tree.

    Returns
    -------
    Path
        The existing or newly created directory.

    Raises
    ------
    DirectoryCreationError
        If the path escapes the root, exists as a non-directory, or cannot
        be created.
    """
    target = _resolve_target(relative_dir, output_root)
    logger.debug("Checking `%s` structure.", target)

    if target.is_dir():
        logger.debug("`%s` already exists... Continuing.", target)
        return target
    if target.exists():
        raise DirectoryCreationError(f"`{target}` exists but is not a directory.")

    logger.warning("`%s` doesn't exist... Building.", target)
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(f"Failed to build `{target}`: {exc}") from exc
    return target
