"""LibreOffice renderer adapter.

The renderer is treated as an opaque blocking call: bytes go in, bytes come
out. Each call runs a headless LibreOffice process inside its own temporary
directory, with a throwaway user profile so concurrent desktop sessions do
not hold the profile lock.
"""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import subprocess
from collections.abc import Sequence
from pathlib import Path
from tempfile import TemporaryDirectory

from office_to_pdf.errors import RenderError, RendererNotFoundError
from office_to_pdf.types import DEFAULT_RENDERER, PDF_FORMAT

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "LibreOffice not found in system PATH"


def lookup_command(executable: str) -> list[str]:
    """Return the platform lookup command for ``executable``."""
    if os.name == "nt":
        return ["where", executable]
    return ["which", executable]


def safe_input_filename(filename: str) -> str:
    """Return a filesystem-safe document filename for temp-dir writes."""
    raw = filename.strip()
    if not raw:
        return "document.bin"
    # Normalize Windows-style separators before basename extraction.
    normalized = raw.replace("\\", "/")
    candidate = Path(normalized).name
    if candidate in {"", ".", ".."}:
        return "document.bin"
    return candidate


def _kill_process_tree(process: subprocess.Popen[bytes]) -> None:
    if os.name == "nt":
        process.kill()
        return
    # The group may already be gone if the renderer exited on its own.
    with contextlib.suppress(ProcessLookupError):
        os.killpg(process.pid, signal.SIGKILL)


def run_renderer(
    command: Sequence[str], timeout: float | None = None
) -> subprocess.CompletedProcess[bytes]:
    """Run the renderer in its own session and wait for it.

    The ``libreoffice`` launcher forks ``soffice.bin``; on timeout the whole
    process group is killed so no renderer outlives the call.

    Raises
    ------
    subprocess.TimeoutExpired
        After the process group has been killed and reaped.
    """
    process = subprocess.Popen(
        list(command),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        start_new_session=os.name != "nt",
    )
    try:
        stdout, stderr = process.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        _kill_process_tree(process)
        process.communicate()
        raise
    return subprocess.CompletedProcess(list(command), process.returncode, stdout, stderr)


def _decode(stream: bytes | None) -> str:
    if not stream:
        return ""
    return stream.decode(errors="replace").strip()


class LibreOfficeRenderer:
    """Render office documents through a headless LibreOffice process.

    Parameters
    ----------
    executable : str, default="libreoffice"
        Renderer executable name or path.
    timeout : float | None, default=None
        Seconds to wait for one conversion; ``None`` waits indefinitely.
    """

    def __init__(self, executable: str = DEFAULT_RENDERER, timeout: float | None = None) -> None:
        self.executable = executable
        self.timeout = timeout

    def locate(self) -> str:
        """Resolve the executable through the platform lookup command.

        Returns
        -------
        str
            First path reported by ``which``/``where``.

        Raises
        ------
        RendererNotFoundError
            If the lookup command fails or prints nothing.
        """
        try:
            completed = subprocess.run(
                lookup_command(self.executable),
                capture_output=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise RendererNotFoundError(NOT_FOUND_MESSAGE) from exc

        lines = _decode(completed.stdout).splitlines()
        if not lines:
            raise RendererNotFoundError(NOT_FOUND_MESSAGE)
        return lines[0].strip()

    def build_command(self, input_path: Path, output_dir: Path, profile_dir: Path) -> list[str]:
        """Return the argument vector for one headless conversion."""
        return [
            self.executable,
            f"-env:UserInstallation={profile_dir.as_uri()}",
            "--headless",
            "--nologo",
            "--nolockcheck",
            "--nodefault",
            "--nofirststartwizard",
            "--convert-to",
            PDF_FORMAT,
            "--outdir",
            str(output_dir),
            str(input_path),
        ]

    def render(self, data: bytes, target_format: str, filename: str) -> bytes:
        """Render document bytes into ``target_format``.

        Parameters
        ----------
        data : bytes
            Full input document contents.
        target_format : str
            Output format token; only ``"pdf"`` is accepted.
        filename : str
            Original filename; its suffix tells LibreOffice which import
            filter to use.

        Returns
        -------
        bytes
            Rendered document.

        Raises
        ------
        RenderError
            If the format is unsupported, the process fails or times out, or
            no output file is produced.
        """
        target = target_format.lstrip(".").lower()
        if target != PDF_FORMAT:
            raise RenderError(f"Unsupported target format: {target_format}")

        with TemporaryDirectory(prefix="office-to-pdf-") as tmp:
            tmp_dir = Path(tmp)
            input_path = tmp_dir / safe_input_filename(filename)
            output_dir = tmp_dir / "out"
            output_dir.mkdir()
            input_path.write_bytes(data)

            command = self.build_command(input_path, output_dir, tmp_dir / "profile")
            logger.debug("running renderer: %s", command)
            try:
                completed = run_renderer(command, timeout=self.timeout)
            except FileNotFoundError as exc:
                raise RenderError(NOT_FOUND_MESSAGE) from exc
            except subprocess.TimeoutExpired as exc:
                raise RenderError(f"LibreOffice timed out after {self.timeout}s") from exc

            if completed.returncode != 0:
                stderr = _decode(completed.stderr)
                raise RenderError(
                    f"LibreOffice conversion failed: {stderr or 'unknown error'}"
                )

            output_path = output_dir / f"{input_path.stem}.{target}"
            if not output_path.exists():
                stderr = _decode(completed.stderr)
                raise RenderError(
                    "LibreOffice conversion did not produce an output file"
                    + (f": {stderr}" if stderr else "")
                )
            return output_path.read_bytes()
