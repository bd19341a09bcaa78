"""Exception hierarchy for batch office-to-PDF conversion."""

from __future__ import annotations


class OfficeToPdfError(Exception):
    """Base error for all structural (run-aborting) failures.

    Attributes
    ----------
    exit_code : int
        Process exit status the CLI uses when this error reaches the top level.
    """

    exit_code = 1


class RendererNotFoundError(OfficeToPdfError):
    """The external renderer executable could not be located."""


class ScanError(OfficeToPdfError):
    """The input directory could not be created or listed."""


class ConfigurationError(OfficeToPdfError):
    """Batch configuration failed validation."""


class RenderError(OfficeToPdfError):
    """A single document could not be rendered.

    Raised by renderer adapters and captured per file by the converter, so it
    never aborts a batch on its own.
    """
