"""Pydantic schemas for runtime validation of batch inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from office_to_pdf.types import DEFAULT_RENDERER


class BatchConfig(BaseModel):
    """Validated configuration for one batch run."""

    model_config = ConfigDict(extra="forbid")

    input_dir: Path = Path("data/input")
    output_dir: Path = Path("data/output")
    renderer: str = DEFAULT_RENDERER
    timeout: float | None = Field(default=None, gt=0)
    fail_on_error: bool = False
    skip_existing: bool = False

    @field_validator("renderer")
    @classmethod
    def _validate_renderer(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("renderer executable name cannot be empty.")
        return value
