"""Top-level API for batch office-to-PDF conversion."""

from __future__ import annotations

from pathlib import Path

from office_to_pdf.application.results import (
    AvailabilityResult,
    BatchReport,
    ConversionResult,
    FileDescriptor,
    Stats,
)
from office_to_pdf.types import DEFAULT_RENDERER

__version__ = "0.1.0"


def convert_directory(
    input_dir: Path = Path("data/input"),
    output_dir: Path = Path("data/output"),
    *,
    renderer: str = DEFAULT_RENDERER,
    timeout: float | None = None,
    fail_on_error: bool = False,
    skip_existing: bool = False,
) -> BatchReport:
    """Convert every supported document in a directory to PDF.

    Parameters
    ----------
    input_dir : Path, default="data/input"
        Directory scanned (one level deep) for ``.doc``/``.docx``/``.ppt``/``.pptx``.
    output_dir : Path, default="data/output"
        Directory receiving ``{base_name}.pdf`` files.
    renderer : str, default="libreoffice"
        Renderer executable name or path.
    timeout : float | None, default=None
        Per-document timeout in seconds; ``None`` waits indefinitely.
    fail_on_error : bool, default=False
        Report exit code 1 when any document fails.
    skip_existing : bool, default=False
        Leave documents alone when their PDF already exists.

    Returns
    -------
    BatchReport
        Final counters and the suggested process exit code.
    """
    from .api import convert_directory as _impl

    return _impl(
        input_dir=input_dir,
        output_dir=output_dir,
        renderer=renderer,
        timeout=timeout,
        fail_on_error=fail_on_error,
        skip_existing=skip_existing,
    )


def is_supported(filename: str) -> bool:
    """Return whether ``filename`` has a convertible extension."""
    from .adapters.scanner import is_supported as _impl

    return _impl(filename)


__all__ = [
    "AvailabilityResult",
    "BatchReport",
    "ConversionResult",
    "FileDescriptor",
    "Stats",
    "convert_directory",
    "is_supported",
]
