#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/office_to_pdf"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    # Only the renderer adapter may spawn processes.
    for path in PACKAGE.rglob("*.py"):
        if path.name == "renderer.py":
            continue
        _assert_no_imports(path, ["import subprocess", "from subprocess"])

    # Ports, options and results stay free of UI and validation libraries.
    for name in ("options.py", "ports.py", "results.py"):
        _assert_no_imports(
            PACKAGE / "application" / name,
            ["import typer", "from typer", "import pydantic", "from pydantic"],
        )

    for path in (PACKAGE / "adapters").glob("*.py"):
        _assert_no_imports(path, ["import typer", "from typer", "office_to_pdf.cli"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
