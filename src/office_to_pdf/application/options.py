"""Typed option objects consumed by the batch use-case."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from office_to_pdf.types import DEFAULT_RENDERER


@dataclass(frozen=True)
class RendererOptions:
    """External renderer invocation settings."""

    executable: str = DEFAULT_RENDERER
    timeout: float | None = None


@dataclass(frozen=True)
class BatchOptions:
    """Directories and policy switches for one batch run."""

    input_dir: Path
    output_dir: Path
    renderer: RendererOptions = RendererOptions()
    fail_on_error: bool = False
    skip_existing: bool = False
