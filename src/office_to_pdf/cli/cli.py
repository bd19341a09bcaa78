#!/usr/bin/env python3
"""
office_to_pdf.cli.app

Typer-based CLI for batch-converting office documents to PDF.

Rendering is delegated to a locally installed LibreOffice; the CLI only
scans, dispatches and reports.

Examples
--------
Convert everything in ``data/input`` into ``data/output``:

    office-to-pdf convert

Use other directories and stop with a failing status on any bad document:

    office-to-pdf convert --input-dir ./docs --output-dir ./pdf --fail-on-error

Check the renderer installation:

    office-to-pdf doctor
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from office_to_pdf.errors import RendererNotFoundError
from office_to_pdf.types import DEFAULT_RENDERER, SUPPORTED_EXTENSIONS

app = typer.Typer(
    name="office-to-pdf",
    help="Batch-convert office documents (.doc/.docx/.ppt/.pptx) to PDF.",
    no_args_is_help=True,
)

INPUT_DIR_HELP = "Directory scanned (non-recursively) for documents."
RENDERER_HELP = "Renderer executable name or path."
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# -----------------------------
# Utilities
# -----------------------------
def _configure_logging(debug: bool, verbose: bool) -> None:
    """Enable library logging when requested; stay silent otherwise."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
    elif verbose:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


def _print_fatal_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo("", err=True)
    typer.secho(f"✗ Fatal error: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    typer.echo("", err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks and debug logs."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show informational logs."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    verbose : bool, default=False
        Whether to enable INFO-level logging.
    """
    _configure_logging(debug, verbose)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input_dir: Path = typer.Option(
        Path("data/input"),
        "--input-dir",
        envvar="OFFICE_TO_PDF_INPUT_DIR",
        file_okay=False,
        help=INPUT_DIR_HELP,
    ),
    output_dir: Path = typer.Option(
        Path("data/output"),
        "--output-dir",
        envvar="OFFICE_TO_PDF_OUTPUT_DIR",
        file_okay=False,
        help="Directory receiving the generated PDFs.",
    ),
    renderer: str = typer.Option(
        DEFAULT_RENDERER,
        "--renderer",
        envvar="OFFICE_TO_PDF_RENDERER",
        help=RENDERER_HELP,
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        envvar="OFFICE_TO_PDF_TIMEOUT",
        help="Seconds to wait for each document (default: wait indefinitely).",
    ),
    fail_on_error: bool = typer.Option(
        False,
        "--fail-on-error",
        help="Exit with status 1 when any document fails to convert.",
    ),
    skip_existing: bool = typer.Option(
        False,
        "--skip-existing",
        help="Skip documents whose PDF already exists in the output directory.",
    ),
) -> None:
    """Convert every supported document in the input directory to PDF.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    input_dir : Path
        Directory scanned for documents; created when missing.
    output_dir : Path
        Destination directory; created when missing.
    renderer : str, default="libreoffice"
        Renderer executable.
    timeout : float | None, default=None
        Per-document timeout in seconds.

    Notes
    -----
    - Individual document failures are reported but do not change the exit
      status unless ``--fail-on-error`` is given.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from office_to_pdf.api import convert_directory

        report = convert_directory(
            input_dir=input_dir,
            output_dir=output_dir,
            renderer=renderer,
            timeout=timeout,
            fail_on_error=fail_on_error,
            skip_existing=skip_existing,
        )
    except RendererNotFoundError as exc:
        # Installation guidance has already been printed.
        raise typer.Exit(code=exc.exit_code)
    except Exception as exc:
        # Structural errors carry their own exit code; anything else still gets a clean message.
        raise typer.Exit(code=_print_fatal_error(exc, debug))

    if report.exit_code:
        raise typer.Exit(code=report.exit_code)


@app.command("scan")
def scan_cmd(
    ctx: typer.Context,
    input_dir: Path = typer.Option(
        Path("data/input"),
        "--input-dir",
        envvar="OFFICE_TO_PDF_INPUT_DIR",
        file_okay=False,
        help=INPUT_DIR_HELP,
    ),
) -> None:
    """List the documents a conversion run would pick up."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from office_to_pdf.api import list_documents

        documents = list_documents(input_dir)
    except Exception as exc:
        raise typer.Exit(code=_print_fatal_error(exc, debug))

    if not documents:
        typer.echo(f"No supported documents in {input_dir}")
        return
    for document in documents:
        typer.echo(f"{document.name} → {document.pdf_name}")
    typer.echo(f"{len(documents)} document(s) in {input_dir}")


@app.command("doctor")
def doctor_cmd(
    renderer: str = typer.Option(
        DEFAULT_RENDERER,
        "--renderer",
        envvar="OFFICE_TO_PDF_RENDERER",
        help=RENDERER_HELP,
    ),
) -> None:
    """Print interpreter, renderer and format diagnostics."""
    import importlib.metadata as metadata

    from office_to_pdf.api import check_renderer

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ("typer", "pydantic"):
        try:
            typer.echo(f"{module}: {metadata.version(module)}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")
    typer.echo(f"extensions: {', '.join(SUPPORTED_EXTENSIONS)}")

    availability = check_renderer(renderer)
    if availability.is_available:
        typer.echo(f"renderer: {availability.path}")
        return
    typer.echo(f"renderer: <not found> ({availability.error})")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
