"""Application use-cases orchestrating batch conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from office_to_pdf.adapters.converter import OfficeDocumentConverter
from office_to_pdf.adapters.renderer import LibreOfficeRenderer
from office_to_pdf.adapters.scanner import FileScanner, supported_extensions
from office_to_pdf.application.options import BatchOptions, RendererOptions
from office_to_pdf.application.ports import (
    DocumentConverter,
    DocumentScanner,
    ProgressReporter,
)
from office_to_pdf.application.results import (
    AvailabilityResult,
    BatchReport,
    FileDescriptor,
    Stats,
)
from office_to_pdf.errors import ConfigurationError, RendererNotFoundError, ScanError
from office_to_pdf.infrastructure.reporting import ConsoleReporter
from office_to_pdf.schemas import BatchConfig
from office_to_pdf.types import DEFAULT_RENDERER

logger = logging.getLogger(__name__)

INSTALL_GUIDANCE: tuple[tuple[str, str], ...] = (
    (
        "Debian/Ubuntu",
        "sudo apt install libreoffice-core libreoffice-common libreoffice-headless",
    ),
    ("Arch Linux", "sudo pacman -S libreoffice-fresh libreoffice-fresh-headless"),
    ("Fedora/RHEL/CentOS", "sudo yum install libreoffice"),
    ("macOS", "brew install libreoffice"),
    ("Windows", "Download from https://www.libreoffice.org/download/download/"),
)


def build_batch_options(
    *,
    input_dir: Path = Path("data/input"),
    output_dir: Path = Path("data/output"),
    renderer: str = DEFAULT_RENDERER,
    timeout: float | None = None,
    fail_on_error: bool = False,
    skip_existing: bool = False,
) -> BatchOptions:
    """Build typed option object from command/API params."""
    try:
        config = BatchConfig(
            input_dir=input_dir,
            output_dir=output_dir,
            renderer=renderer,
            timeout=timeout,
            fail_on_error=fail_on_error,
            skip_existing=skip_existing,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid batch configuration: {exc}") from exc

    return BatchOptions(
        input_dir=config.input_dir,
        output_dir=config.output_dir,
        renderer=RendererOptions(executable=config.renderer, timeout=config.timeout),
        fail_on_error=config.fail_on_error,
        skip_existing=config.skip_existing,
    )


def build_converter(renderer: RendererOptions) -> OfficeDocumentConverter:
    """Create the default LibreOffice-backed converter."""
    return OfficeDocumentConverter(
        LibreOfficeRenderer(executable=renderer.executable, timeout=renderer.timeout)
    )


def ensure_directories(*directories: Path) -> None:
    """Create each directory with parents; existing directories are left alone."""
    for directory in directories:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ScanError(f"Failed to create directory {directory}: {exc}") from exc


def _report_missing_renderer(reporter: ProgressReporter) -> None:
    reporter.error("LibreOffice is not installed or not found in PATH")
    reporter.line()
    reporter.warning("Please install LibreOffice first:")
    reporter.line()
    for platform_name, command in INSTALL_GUIDANCE:
        reporter.line(f"  {platform_name}:")
        reporter.line(f"    {command}")
        reporter.line()


def _should_skip(descriptor: FileDescriptor, options: BatchOptions) -> bool:
    return options.skip_existing and (options.output_dir / descriptor.pdf_name).exists()


def run_batch(
    options: BatchOptions,
    *,
    scanner: DocumentScanner | None = None,
    converter: DocumentConverter | None = None,
    reporter: ProgressReporter | None = None,
) -> BatchReport:
    """Use-case: convert every supported document in the input directory.

    Parameters
    ----------
    options : BatchOptions
        Directories, renderer settings and policy switches.
    scanner, converter, reporter
        Collaborators; defaults are the filesystem scanner, the LibreOffice
        converter and the console reporter.

    Returns
    -------
    BatchReport
        Final counters and the exit code the process should use.

    Raises
    ------
    RendererNotFoundError
        If the renderer availability check fails. Nothing is scanned or converted.
    ScanError
        If the input or output directory cannot be created or listed.
    """
    scanner = scanner or FileScanner()
    converter = converter or build_converter(options.renderer)
    reporter = reporter or ConsoleReporter()

    reporter.header("📄 Office Document to PDF Converter")
    reporter.line()
    reporter.info("Checking LibreOffice installation...")
    availability = converter.check_availability()
    if not availability.is_available:
        _report_missing_renderer(reporter)
        raise RendererNotFoundError(availability.error or "LibreOffice not found in system PATH")

    reporter.success(f"LibreOffice found at: {availability.path}")
    reporter.line()

    ensure_directories(options.input_dir, options.output_dir)

    reporter.info("Scanning input directory...")
    files = scanner.scan(options.input_dir)
    stats = Stats(total=len(files))

    if not files:
        reporter.warning("No files found to convert")
        reporter.line()
        reporter.info(
            f"Please place your files ({', '.join(supported_extensions())}) "
            f"in: {options.input_dir}"
        )
        reporter.line()
        return BatchReport(
            stats=stats,
            exit_code=0,
            input_dir=options.input_dir,
            output_dir=options.output_dir,
        )

    plural = "s" if len(files) > 1 else ""
    reporter.success(f"Found {len(files)} file{plural} to convert")
    reporter.line()

    reporter.header("Converting documents to PDF...")
    reporter.divider()

    for descriptor in files:
        if _should_skip(descriptor, options):
            reporter.warning(f"{descriptor.name} → skipped ({descriptor.pdf_name} exists)")
            stats.skipped += 1
            continue

        result = converter.convert(descriptor, options.output_dir)
        if result.success:
            reporter.success(result.message)
            stats.success += 1
        else:
            reporter.error(result.message)
            stats.failed += 1

    reporter.line()
    reporter.summary(stats)

    if stats.success > 0:
        reporter.line()
        reporter.success(f"Conversion complete! Check {options.output_dir} for PDFs.")
        reporter.line()

    exit_code = 1 if options.fail_on_error and stats.failed > 0 else 0
    logger.info(
        "batch finished: total=%d success=%d failed=%d skipped=%d exit_code=%d",
        stats.total,
        stats.success,
        stats.failed,
        stats.skipped,
        exit_code,
    )
    return BatchReport(
        stats=stats,
        exit_code=exit_code,
        input_dir=options.input_dir,
        output_dir=options.output_dir,
    )


def scan_input(
    input_dir: Path, *, scanner: DocumentScanner | None = None
) -> list[FileDescriptor]:
    """Use-case: list documents a batch run would pick up."""
    scanner = scanner or FileScanner()
    return scanner.scan(input_dir)


def diagnose_renderer(
    renderer: RendererOptions, *, converter: DocumentConverter | None = None
) -> AvailabilityResult:
    """Use-case: check the renderer without converting anything."""
    converter = converter or build_converter(renderer)
    return converter.check_availability()
