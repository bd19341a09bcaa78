"""Filesystem scanner for supported office documents."""

from __future__ import annotations

import logging
from pathlib import Path

from office_to_pdf.application.results import FileDescriptor
from office_to_pdf.errors import ScanError
from office_to_pdf.types import SUPPORTED_EXTENSIONS

logger = logging.getLogger(__name__)


def _extension(filename: str) -> str:
    return Path(filename).suffix.lower()


def is_supported(filename: str) -> bool:
    """Return whether ``filename`` carries a convertible extension.

    Parameters
    ----------
    filename : str
        Bare filename or path; only the final suffix is inspected.

    Returns
    -------
    bool
        ``True`` for ``.doc``, ``.docx``, ``.ppt`` and ``.pptx`` in any case.
    """
    return _extension(filename) in SUPPORTED_EXTENSIONS


def supported_extensions() -> tuple[str, ...]:
    """Return the supported extensions, lowercased with leading dots."""
    return tuple(SUPPORTED_EXTENSIONS)


def describe(path: Path) -> FileDescriptor:
    """Build a descriptor from a path without touching file contents."""
    return FileDescriptor(
        name=path.name,
        full_path=path,
        extension=_extension(path.name),
        base_name=path.stem,
    )


class FileScanner:
    """Scan one directory level for supported documents."""

    def scan(self, directory: Path) -> list[FileDescriptor]:
        """List supported documents in ``directory``.

        The directory is created when missing. Subdirectories are not
        descended into.

        Parameters
        ----------
        directory : Path
            Directory to scan.

        Returns
        -------
        list[FileDescriptor]
            Descriptors sorted by filename.

        Raises
        ------
        ScanError
            If the directory cannot be created or listed.
        """
        try:
            directory.mkdir(parents=True, exist_ok=True)
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
            found = [
                describe(entry)
                for entry in entries
                if is_supported(entry.name) and entry.is_file()
            ]
        except OSError as exc:
            raise ScanError(f"Failed to scan directory: {exc}") from exc

        logger.debug("scanned %s: %d supported file(s)", directory, len(found))
        return found
