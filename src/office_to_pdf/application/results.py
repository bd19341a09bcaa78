"""Application-layer records and result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileDescriptor:
    """Candidate input document discovered by the scanner.

    Parameters
    ----------
    name : str
        Filename as listed in the directory.
    full_path : Path
        Absolute or input-relative path to the file.
    extension : str
        Lowercased suffix including the leading dot.
    base_name : str
        Filename without its final suffix, case preserved.
    """

    name: str
    full_path: Path
    extension: str
    base_name: str

    @property
    def pdf_name(self) -> str:
        """Output filename the converter writes for this document."""
        return f"{self.base_name}.pdf"


@dataclass(frozen=True)
class ConversionResult:
    """Structured per-file conversion outcome."""

    success: bool
    input_file: str
    message: str
    output_file: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class AvailabilityResult:
    """Outcome of the renderer presence check."""

    is_available: bool
    path: str | None = None
    error: str | None = None


@dataclass
class Stats:
    """Run-level counters; ``total == success + failed + skipped`` at the end."""

    total: int = 0
    success: int = 0
    failed: int = 0
    skipped: int = 0


@dataclass(frozen=True)
class BatchReport:
    """Final outcome of a batch run."""

    stats: Stats
    exit_code: int
    input_dir: Path
    output_dir: Path
