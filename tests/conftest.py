"""Shared pytest configuration, marker assignment and renderer fakes."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from office_to_pdf.errors import RenderError, RendererNotFoundError


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


class FakeRenderer:
    """In-memory renderer that fails for selected filenames."""

    def __init__(
        self,
        *,
        failing: Iterable[str] = (),
        available: bool = True,
        path: str = "/usr/bin/libreoffice",
    ) -> None:
        self.failing = set(failing)
        self.available = available
        self.path = path
        self.calls: list[tuple[bytes, str, str]] = []

    def locate(self) -> str:
        if not self.available:
            raise RendererNotFoundError("LibreOffice not found in system PATH")
        return self.path

    def render(self, data: bytes, target_format: str, filename: str) -> bytes:
        self.calls.append((data, target_format, filename))
        if filename in self.failing:
            raise RenderError(f"cannot load {filename}")
        return b"%PDF-1.7\n" + data


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    """Renderer that converts everything successfully."""
    return FakeRenderer()


@pytest.fixture
def make_documents(tmp_path: Path) -> Callable[..., Path]:
    """Create files with the given names inside ``tmp_path / "input"``."""

    def _make(*names: str, directory: Path | None = None) -> Path:
        target = directory or tmp_path / "input"
        target.mkdir(parents=True, exist_ok=True)
        for name in names:
            (target / name).write_bytes(f"content of {name}".encode())
        return target

    return _make


@pytest.fixture
def renderer_factory() -> type[FakeRenderer]:
    """Expose the fake renderer class for tests that need custom failures."""
    return FakeRenderer
