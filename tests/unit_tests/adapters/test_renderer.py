"""Unit tests for the LibreOffice renderer adapter."""

from __future__ import annotations

import os
import stat
import subprocess
import time
from pathlib import Path

import pytest

from office_to_pdf.adapters import renderer as renderer_module
from office_to_pdf.adapters.renderer import LibreOfficeRenderer, safe_input_filename
from office_to_pdf.errors import RenderError, RendererNotFoundError


def _completed(
    args: list[str], returncode: int = 0, stdout: bytes = b"", stderr: bytes = b""
) -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)


def _outdir(args: list[str]) -> Path:
    return Path(args[args.index("--outdir") + 1])


@pytest.mark.parametrize(
    ("os_name", "expected"),
    [("posix", ["which", "libreoffice"]), ("nt", ["where", "libreoffice"])],
)
def test_lookup_command_is_platform_specific(
    monkeypatch: pytest.MonkeyPatch, os_name: str, expected: list[str]
) -> None:
    """Use ``which`` on POSIX and ``where`` on Windows."""
    monkeypatch.setattr(renderer_module.os, "name", os_name)
    assert renderer_module.lookup_command("libreoffice") == expected


def test_locate_returns_first_line(monkeypatch: pytest.MonkeyPatch) -> None:
    """Return the first path printed by the lookup command."""

    def fake_run(args: list[str], **kwargs: object) -> subprocess.CompletedProcess[bytes]:
        assert kwargs["check"] is True
        return _completed(args, stdout=b"/usr/bin/libreoffice\n/opt/lo/libreoffice\n")

    monkeypatch.setattr(renderer_module.subprocess, "run", fake_run)

    assert LibreOfficeRenderer().locate() == "/usr/bin/libreoffice"


@pytest.mark.parametrize(
    "error",
    [
        subprocess.CalledProcessError(1, ["which", "libreoffice"]),
        FileNotFoundError("which"),
    ],
)
def test_locate_raises_when_missing(monkeypatch: pytest.MonkeyPatch, error: Exception) -> None:
    """Raise RendererNotFoundError when lookup fails."""

    def fake_run(args: list[str], **kwargs: object) -> subprocess.CompletedProcess[bytes]:
        raise error

    monkeypatch.setattr(renderer_module.subprocess, "run", fake_run)

    with pytest.raises(RendererNotFoundError, match="not found in system PATH"):
        LibreOfficeRenderer().locate()


def test_locate_raises_on_empty_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Treat a silent successful lookup as not found."""
    monkeypatch.setattr(
        renderer_module.subprocess, "run", lambda args, **_: _completed(args, stdout=b"  \n")
    )

    with pytest.raises(RendererNotFoundError):
        LibreOfficeRenderer().locate()


def test_render_runs_headless_conversion(monkeypatch: pytest.MonkeyPatch) -> None:
    """Write input to a temp dir, run the renderer and return the produced PDF."""
    seen: dict[str, object] = {}

    def fake_run(
        args: list[str], timeout: float | None = None
    ) -> subprocess.CompletedProcess[bytes]:
        seen["args"] = args
        seen["timeout"] = timeout
        source = Path(args[-1])
        seen["input"] = source.read_bytes()
        (_outdir(args) / f"{source.stem}.pdf").write_bytes(b"%PDF-data")
        return _completed(args)

    monkeypatch.setattr(renderer_module, "run_renderer", fake_run)

    result = LibreOfficeRenderer("soffice", timeout=30).render(b"doc-bytes", "pdf", "Deck.PPTX")

    args = seen["args"]
    assert isinstance(args, list)
    assert result == b"%PDF-data"
    assert seen["input"] == b"doc-bytes"
    assert seen["timeout"] == 30
    assert args[0] == "soffice"
    assert args[1].startswith("-env:UserInstallation=file:")
    assert "--headless" in args
    assert args[args.index("--convert-to") + 1] == "pdf"
    assert Path(args[-1]).name == "Deck.PPTX"


def test_render_cleans_up_temp_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove the working directory once the call returns."""
    seen: list[Path] = []

    def fake_run(
        args: list[str], timeout: float | None = None
    ) -> subprocess.CompletedProcess[bytes]:
        source = Path(args[-1])
        seen.append(source.parent)
        (_outdir(args) / f"{source.stem}.pdf").write_bytes(b"pdf")
        return _completed(args)

    monkeypatch.setattr(renderer_module, "run_renderer", fake_run)

    LibreOfficeRenderer().render(b"x", "pdf", "a.doc")

    assert seen and not seen[0].exists()


@pytest.mark.parametrize(
    ("filename", "written"),
    [
        ("../../evil.docx", "evil.docx"),
        ("..\\..\\evil.pptx", "evil.pptx"),
        ("", "document.bin"),
        ("..", "document.bin"),
    ],
)
def test_render_writes_input_inside_temp_dir(
    monkeypatch: pytest.MonkeyPatch, filename: str, written: str
) -> None:
    """Keep the staged input inside the working directory whatever name is passed."""
    seen: list[list[str]] = []

    def fake_run(
        args: list[str], timeout: float | None = None
    ) -> subprocess.CompletedProcess[bytes]:
        source = Path(args[-1])
        seen.append(args)
        assert source.read_bytes() == b"x"
        (_outdir(args) / f"{source.stem}.pdf").write_bytes(b"pdf")
        return _completed(args)

    monkeypatch.setattr(renderer_module, "run_renderer", fake_run)

    assert LibreOfficeRenderer().render(b"x", "pdf", filename) == b"pdf"

    (args,) = seen
    source = Path(args[-1])
    assert source.name == written
    assert source.parent == _outdir(args).parent
    assert source.parent.name.startswith("office-to-pdf-")


def test_render_nonzero_exit_includes_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise RenderError carrying renderer stderr on failure."""
    monkeypatch.setattr(
        renderer_module,
        "run_renderer",
        lambda args, timeout=None: _completed(
            args, returncode=1, stderr=b"Error: source file could not be loaded"
        ),
    )

    with pytest.raises(RenderError, match="source file could not be loaded"):
        LibreOfficeRenderer().render(b"x", "pdf", "a.doc")


def test_render_missing_output_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise RenderError when the renderer exits cleanly without output."""
    monkeypatch.setattr(
        renderer_module, "run_renderer", lambda args, timeout=None: _completed(args)
    )

    with pytest.raises(RenderError, match="did not produce an output file"):
        LibreOfficeRenderer().render(b"x", "pdf", "a.doc")


def test_render_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Translate subprocess timeouts into RenderError."""

    def fake_run(
        args: list[str], timeout: float | None = None
    ) -> subprocess.CompletedProcess[bytes]:
        raise subprocess.TimeoutExpired(args, 5)

    monkeypatch.setattr(renderer_module, "run_renderer", fake_run)

    with pytest.raises(RenderError, match="timed out after 5"):
        LibreOfficeRenderer(timeout=5).render(b"x", "pdf", "a.doc")


def test_render_missing_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Translate a missing executable into RenderError."""

    def fake_run(
        args: list[str], timeout: float | None = None
    ) -> subprocess.CompletedProcess[bytes]:
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(renderer_module, "run_renderer", fake_run)

    with pytest.raises(RenderError, match="not found"):
        LibreOfficeRenderer("nope").render(b"x", "pdf", "a.doc")


def test_render_rejects_other_formats() -> None:
    """Only PDF output is supported."""
    with pytest.raises(RenderError, match="Unsupported target format"):
        LibreOfficeRenderer().render(b"x", "odt", "a.doc")


@pytest.mark.skipif(os.name == "nt", reason="needs a POSIX shell")
def test_render_timeout_kills_forked_children(tmp_path: Path) -> None:
    """Kill the renderer's whole process group so forked workers do not survive."""
    marker = tmp_path / "survivor"
    script = tmp_path / "forking-renderer"
    script.write_text(f'#!/bin/sh\n(sleep 1; touch "{marker}") &\nwait\n', encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)

    with pytest.raises(RenderError, match="timed out"):
        LibreOfficeRenderer(str(script), timeout=0.2).render(b"x", "pdf", "a.docx")

    time.sleep(1.5)
    assert not marker.exists()


@pytest.mark.skipif(os.name == "nt", reason="needs a POSIX shell")
def test_run_renderer_returns_completed_process(tmp_path: Path) -> None:
    """Collect exit status and both output streams."""
    script = tmp_path / "renderer"
    script.write_text("#!/bin/sh\necho out\necho err >&2\nexit 3\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)

    completed = renderer_module.run_renderer([str(script)], timeout=10)

    assert completed.returncode == 3
    assert completed.stdout.strip() == b"out"
    assert completed.stderr.strip() == b"err"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("report.docx", "report.docx"),
        ("../../etc/passwd.doc", "passwd.doc"),
        ("..\\..\\secret.ppt", "secret.ppt"),
        ("", "document.bin"),
        ("   ", "document.bin"),
        ("/", "document.bin"),
    ],
)
def test_safe_input_filename(value: str, expected: str) -> None:
    """Sanitize filenames before writing them into the temp dir."""
    assert safe_input_filename(value) == expected
