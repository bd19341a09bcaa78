"""Fixtures providing a stand-in renderer executable."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

FAKE_RENDERER = """#!/bin/sh
# Mimics `libreoffice --headless --convert-to pdf --outdir DIR FILE`.
out=""
src=""
while [ $# -gt 0 ]; do
  case "$1" in
    --outdir) out="$2"; shift 2 ;;
    *) src="$1"; shift ;;
  esac
done
name=$(basename "$src")
case "$name" in
  *broken*) echo "Error: source file could not be loaded" >&2; exit 1 ;;
esac
cp "$src" "$out/${name%.*}.pdf"
"""


@pytest.fixture
def fake_libreoffice(tmp_path: Path) -> Path:
    """Write an executable shell script that copies its input to ``<stem>.pdf``."""
    if os.name == "nt":
        pytest.skip("fake renderer is a POSIX shell script")
    script = tmp_path / "bin" / "fake-libreoffice"
    script.parent.mkdir()
    script.write_text(FAKE_RENDERER, encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script
