"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from office_to_pdf.application.options import BatchOptions, RendererOptions
from office_to_pdf.application.ports import (
    DocumentConverter,
    DocumentScanner,
    ProgressReporter,
)
from office_to_pdf.application.results import (
    AvailabilityResult,
    BatchReport,
    ConversionResult,
    FileDescriptor,
    Stats,
)
from office_to_pdf.types import DEFAULT_RENDERER


def build_batch_options(
    *,
    input_dir: Path = Path("data/input"),
    output_dir: Path = Path("data/output"),
    renderer: str = DEFAULT_RENDERER,
    timeout: float | None = None,
    fail_on_error: bool = False,
    skip_existing: bool = False,
) -> BatchOptions:
    """Build typed batch options via lazy use-case import."""
    from office_to_pdf.application.use_cases import build_batch_options as _impl

    return _impl(
        input_dir=input_dir,
        output_dir=output_dir,
        renderer=renderer,
        timeout=timeout,
        fail_on_error=fail_on_error,
        skip_existing=skip_existing,
    )


def run_batch(
    options: BatchOptions,
    *,
    scanner: DocumentScanner | None = None,
    converter: DocumentConverter | None = None,
    reporter: ProgressReporter | None = None,
) -> BatchReport:
    """Run a batch conversion via lazy use-case import."""
    from office_to_pdf.application.use_cases import run_batch as _impl

    return _impl(options, scanner=scanner, converter=converter, reporter=reporter)


__all__ = [
    "AvailabilityResult",
    "BatchOptions",
    "BatchReport",
    "ConversionResult",
    "FileDescriptor",
    "RendererOptions",
    "Stats",
    "build_batch_options",
    "run_batch",
]
