"""Public directory-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from office_to_pdf.application.options import RendererOptions
from office_to_pdf.application.results import (
    AvailabilityResult,
    BatchReport,
    FileDescriptor,
)
from office_to_pdf.application.use_cases import build_batch_options
from office_to_pdf.application.use_cases import diagnose_renderer
from office_to_pdf.application.use_cases import run_batch
from office_to_pdf.application.use_cases import scan_input
from office_to_pdf.types import DEFAULT_RENDERER


def convert_directory(
    input_dir: Path = Path("data/input"),
    output_dir: Path = Path("data/output"),
    renderer: str = DEFAULT_RENDERER,
    timeout: Optional[float] = None,
    fail_on_error: bool = False,
    skip_existing: bool = False,
) -> BatchReport:
    """Convert every supported document in ``input_dir`` to PDF."""
    options = build_batch_options(
        input_dir=input_dir,
        output_dir=output_dir,
        renderer=renderer,
        timeout=timeout,
        fail_on_error=fail_on_error,
        skip_existing=skip_existing,
    )
    return run_batch(options)


def list_documents(input_dir: Path = Path("data/input")) -> list[FileDescriptor]:
    """Return the documents a batch run over ``input_dir`` would convert."""
    return scan_input(input_dir)


def check_renderer(renderer: str = DEFAULT_RENDERER) -> AvailabilityResult:
    """Check for the renderer executable without converting anything."""
    return diagnose_renderer(RendererOptions(executable=renderer))
