"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from office_to_pdf.application.results import (
    AvailabilityResult,
    ConversionResult,
    FileDescriptor,
    Stats,
)


class DocumentScanner(Protocol):
    """Enumerate convertible documents in a directory."""

    def scan(self, directory: Path) -> list[FileDescriptor]:
        """Return supported documents found one level deep."""


class DocumentRenderer(Protocol):
    """Turn raw document bytes into bytes of another format."""

    def locate(self) -> str:
        """Return the renderer executable path or raise."""

    def render(self, data: bytes, target_format: str, filename: str) -> bytes:
        """Render ``data`` into ``target_format`` and return the output bytes."""


class DocumentConverter(Protocol):
    """Convert one discovered document, reporting failures as values."""

    def check_availability(self) -> AvailabilityResult:
        """Check the renderer without raising."""

    def convert(self, descriptor: FileDescriptor, output_dir: Path) -> ConversionResult:
        """Convert one document into ``output_dir``."""


class ProgressReporter(Protocol):
    """Surface batch progress to the user."""

    def header(self, text: str) -> None:
        """Print a section header."""

    def info(self, text: str) -> None:
        """Print an informational line."""

    def success(self, text: str) -> None:
        """Print a success line."""

    def warning(self, text: str) -> None:
        """Print a warning line."""

    def error(self, text: str) -> None:
        """Print an error line."""

    def line(self, text: str = "") -> None:
        """Print an untagged line."""

    def divider(self) -> None:
        """Print a horizontal divider."""

    def summary(self, stats: Stats) -> None:
        """Print the final counters."""
