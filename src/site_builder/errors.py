"""Exception hierarchy for the site build pipeline."""

from __future__ import annotations


class BuildError(Exception):
    """Base class for every failure raised while building the site.

    Attributes
    ----------
    exit_code : int
        Process exit status the CLI uses when this error is fatal.
    """

    exit_code: int = 1


class DirectoryCreationError(BuildError):
    """An output directory could not be created or is not a directory."""

    exit_code = 2


class PathFormatError(BuildError):
    """A document path does not have the expected prefix/suffix shape."""

    exit_code = 3


class ConversionError(BuildError):
    """The external converter failed or could not be launched."""

    exit_code = 4


class EnumerationError(BuildError):
    """A source directory could not be opened or read."""

    exit_code = 5


class ConfigError(BuildError):
    """Build configuration failed validation."""

    exit_code = 6
