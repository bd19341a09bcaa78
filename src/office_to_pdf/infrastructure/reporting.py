"""Console progress reporter."""

from __future__ import annotations

import typer

from office_to_pdf.application.results import Stats

DIVIDER = "─" * 60


class ConsoleReporter:
    """Print tagged, colored progress lines through Typer."""

    def __init__(self, *, color: bool | None = None) -> None:
        self.color = color

    def _emit(self, text: str, **style: object) -> None:
        typer.secho(text, color=self.color, **style)

    def header(self, text: str) -> None:
        self._emit(text, fg=typer.colors.CYAN, bold=True)

    def info(self, text: str) -> None:
        self._emit(f"ℹ {text}", fg=typer.colors.BLUE)

    def success(self, text: str) -> None:
        self._emit(f"✓ {text}", fg=typer.colors.GREEN)

    def warning(self, text: str) -> None:
        self._emit(f"⚠ {text}", fg=typer.colors.YELLOW)

    def error(self, text: str) -> None:
        self._emit(f"✗ {text}", fg=typer.colors.RED)

    def line(self, text: str = "") -> None:
        self._emit(text)

    def divider(self) -> None:
        self._emit(DIVIDER, dim=True)

    def summary(self, stats: Stats) -> None:
        """Print the final counters block."""
        self.divider()
        self.header("Summary")
        self._emit(f"  Total:   {stats.total}")
        self._emit(f"  Success: {stats.success}", fg=typer.colors.GREEN)
        self._emit(
            f"  Failed:  {stats.failed}",
            fg=typer.colors.RED if stats.failed else None,
        )
        self._emit(
            f"  Skipped: {stats.skipped}",
            fg=typer.colors.YELLOW if stats.skipped else None,
        )
        self.divider()
