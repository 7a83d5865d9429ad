"""Export sinks: where finished GMGN/Axiom text ends up."""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Protocol, Sequence

from walletbeam.settings import Settings, get_settings

LOGGER = logging.getLogger(__name__)


class ExportSinkError(RuntimeError):
    """Raised when the clipboard or download target rejects the content."""


class ExportSink(Protocol):
    """Destination for encoded wallet lists."""

    def copy_text(self, content: str) -> None:
        """Place ``content`` on the clipboard."""

    def download_text(self, content: str, filename: str) -> str:
        """Save ``content`` as ``filename`` and return where it went."""


class LocalExportSink:
    """Clipboard via platform commands, downloads into the export directory."""

    _CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
        ("pbcopy",),
        ("wl-copy",),
        ("xclip", "-selection", "clipboard"),
        ("xsel", "--clipboard", "--input"),
    )

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        output_dir: Path | None = None,
        clipboard_command: Sequence[str] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        export_settings = self.settings.export
        self.output_dir = output_dir or export_settings.output_dir
        if clipboard_command is not None:
            self._clipboard_command: tuple[str, ...] | None = tuple(clipboard_command)
        elif export_settings.clipboard_command:
            self._clipboard_command = tuple(shlex.split(export_settings.clipboard_command))
        else:
            self._clipboard_command = None
        self._timeout = export_settings.clipboard_timeout_seconds

    def copy_text(self, content: str) -> None:
        command = self._resolve_clipboard_command()
        if not command:
            raise ExportSinkError("No clipboard command available (install pbcopy, wl-copy, xclip or xsel)")
        try:
            subprocess.run(
                list(command),
                input=content.encode("utf-8"),
                check=True,
                capture_output=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            LOGGER.warning("Clipboard command %s failed: %s", command[0], exc)
            raise ExportSinkError(f"Clipboard write failed: {exc}") from exc

    def download_text(self, content: str, filename: str) -> str:
        safe_name = Path(filename).name
        if not safe_name:
            raise ExportSinkError("Download filename must not be empty")
        path = Path(self.output_dir) / safe_name
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            LOGGER.warning("Unable to write export %s: %s", path, exc)
            raise ExportSinkError(f"Unable to save {safe_name}: {exc}") from exc
        return str(path)

    def _resolve_clipboard_command(self) -> tuple[str, ...] | None:
        if self._clipboard_command:
            return self._clipboard_command
        for candidate in self._CLIPBOARD_COMMANDS:
            if shutil.which(candidate[0]):
                return candidate
        return None


__all__ = ["ExportSink", "ExportSinkError", "LocalExportSink"]
