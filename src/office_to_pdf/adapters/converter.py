"""Per-file document converter.

Every failure inside :meth:`OfficeDocumentConverter.convert` is returned as a
failed :class:`ConversionResult`; only structural errors (missing renderer,
unreadable input directory) travel as exceptions, and those are raised
elsewhere.
"""

from __future__ import annotations

import logging
from pathlib import Path

from office_to_pdf.application.ports import DocumentRenderer
from office_to_pdf.application.results import (
    AvailabilityResult,
    ConversionResult,
    FileDescriptor,
)
from office_to_pdf.errors import RendererNotFoundError
from office_to_pdf.types import PDF_FORMAT

logger = logging.getLogger(__name__)


def _reason(exc: Exception) -> str:
    text = str(exc).strip()
    return text or type(exc).__name__


class OfficeDocumentConverter:
    """Convert office documents to PDF through a renderer adapter."""

    def __init__(self, renderer: DocumentRenderer) -> None:
        self.renderer = renderer

    def check_availability(self) -> AvailabilityResult:
        """Check the renderer; never raises."""
        try:
            path = self.renderer.locate()
        except RendererNotFoundError as exc:
            return AvailabilityResult(is_available=False, error=str(exc))
        except Exception as exc:
            logger.debug("renderer availability check failed: %s", exc)
            return AvailabilityResult(
                is_available=False, error="LibreOffice not found in system PATH"
            )
        return AvailabilityResult(is_available=True, path=path)

    def convert(self, descriptor: FileDescriptor, output_dir: Path) -> ConversionResult:
        """Convert one document into ``output_dir / "{base_name}.pdf"``.

        Parameters
        ----------
        descriptor : FileDescriptor
            Document to convert.
        output_dir : Path
            Existing directory receiving the PDF.

        Returns
        -------
        ConversionResult
            ``success=False`` with the reason when reading, rendering or
            writing fails. An output file left behind by a failed write is
            not removed.
        """
        output_name = descriptor.pdf_name
        try:
            data = descriptor.full_path.read_bytes()
            pdf_bytes = self.renderer.render(data, PDF_FORMAT, descriptor.name)
            (output_dir / output_name).write_bytes(pdf_bytes)
        except Exception as exc:
            reason = _reason(exc)
            logger.warning("conversion failed for %s: %s", descriptor.name, reason)
            return ConversionResult(
                success=False,
                input_file=descriptor.name,
                error=reason,
                message=f"{descriptor.name} → Error: {reason}",
            )

        logger.info("converted %s -> %s", descriptor.name, output_name)
        return ConversionResult(
            success=True,
            input_file=descriptor.name,
            output_file=output_name,
            message=f"{descriptor.name} → {output_name}",
        )
