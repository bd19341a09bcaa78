"""Shared type aliases for converter modules."""

from __future__ import annotations

from typing import Literal

type SupportedExtension = Literal[".doc", ".docx", ".ppt", ".pptx"]
type TargetFormat = Literal["pdf"]

SUPPORTED_EXTENSIONS: tuple[SupportedExtension, ...] = (".doc", ".docx", ".ppt", ".pptx")
PDF_FORMAT: TargetFormat = "pdf"
DEFAULT_RENDERER = "libreoffice"
