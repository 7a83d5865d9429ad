"""Session orchestration for wallet list conversion.

``WalletListService`` is the state object behind every front end: it owns the
wallet collection, the selected preview format and the last status message.
Each user action runs to completion and reports its outcome through
:attr:`WalletListService.status`; failures never disturb the collection.
"""

from __future__ import annotations

import logging
from typing import Optional

from walletbeam.normalization.normalizer import EmptyInputError, MalformedPayloadError, parse_followings
from walletbeam.normalization.schema import CanonicalWalletRecord
from walletbeam.observability import Observability, get_observability
from walletbeam.settings import Settings, get_settings

from .collection import WalletCollection
from .encoders import encode
from .models import ExportFormat, SortDirection, SortField, WalletEdit
from .sinks import ExportSink, ExportSinkError, LocalExportSink

LOGGER = logging.getLogger(__name__)


class WalletListService:
    """Coordinates parsing, editing, previewing and exporting one wallet list."""

    def __init__(
        self,
        *,
        sink: ExportSink | None = None,
        collection: WalletCollection | None = None,
        settings: Settings | None = None,
        observability: Observability | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.sink = sink or LocalExportSink(settings=self.settings)
        self.collection = collection or WalletCollection()
        self.observability = observability or get_observability(component="wallet_list", settings=self.settings)
        self.preview_format = self._default_format()
        self.pasted_text = ""
        self.status = ""

    def _default_format(self) -> ExportFormat:
        return ExportFormat(self.settings.export.default_format)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def process(self, raw_text: str) -> bool:
        """Parse pasted GMGN data and replace the collection on success."""

        self.pasted_text = raw_text or ""
        try:
            records = parse_followings(self.pasted_text)
        except EmptyInputError as exc:
            self.status = f"Processing failed: {exc}"
            return False
        except MalformedPayloadError as exc:
            LOGGER.info("Rejected pasted payload (%s): %s", exc.reason, exc)
            self.status = f"Processing failed: {exc}"
            self.observability.emit_event("wallets.rejected", reason=exc.reason)
            return False

        self.collection.load(records)
        self.preview_format = self._default_format()
        self.status = f"Processed {len(records)} wallets"
        self.observability.emit_event(
            "wallets.processed",
            wallet_count=len(records),
            kol_count=sum(1 for record in records if record.is_kol),
        )
        return True

    # ------------------------------------------------------------------
    # Preview
    # ------------------------------------------------------------------

    @property
    def records(self) -> list[CanonicalWalletRecord]:
        return self.collection.records

    @property
    def preview(self) -> str:
        """Encoded output for the selected format in the current display order."""

        return self.render(self.preview_format)

    def render(self, fmt: ExportFormat | str | None = None) -> str:
        return encode(self.collection.records, fmt or self.preview_format)

    def select_format(self, fmt: ExportFormat | str) -> None:
        self.preview_format = ExportFormat(fmt)

    # ------------------------------------------------------------------
    # Collection edits
    # ------------------------------------------------------------------

    def sort_by(self, field: SortField | str, direction: SortDirection | str | None = None) -> None:
        self.collection.sort_by(field, direction)

    def edit(self, address: str, patch: WalletEdit) -> Optional[CanonicalWalletRecord]:
        return self.collection.edit(address, patch)

    def delete(self, address: str) -> bool:
        return self.collection.delete(address)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def copy(self, fmt: ExportFormat | str | None = None) -> bool:
        """Copy the encoded list to the clipboard and preview that format."""

        resolved = ExportFormat(fmt) if fmt else self.preview_format
        content = self.render(resolved)
        try:
            self.sink.copy_text(content)
        except ExportSinkError as exc:
            self.status = f"Copy failed: {exc}"
            return False
        self.preview_format = resolved
        self.status = f"Copied {resolved.label} format to clipboard"
        self.observability.emit_event("wallets.exported", format=resolved.value, target="clipboard")
        return True

    def download(self, fmt: ExportFormat | str | None = None, *, filename: str | None = None) -> Optional[str]:
        """Save the encoded list (``<format>_wallets.txt`` by default); returns the location."""

        resolved = ExportFormat(fmt) if fmt else self.preview_format
        target = filename or resolved.filename
        content = self.render(resolved)
        try:
            location = self.sink.download_text(content, target)
        except ExportSinkError as exc:
            self.status = f"Download failed: {exc}"
            return None
        self.status = f"Downloaded {resolved.label} format as {target}"
        self.observability.emit_event("wallets.exported", format=resolved.value, target="download")
        return location

    def reset(self) -> None:
        """Return to the initial empty state."""

        self.collection.reset()
        self.pasted_text = ""
        self.preview_format = self._default_format()
        self.status = ""


__all__ = ["WalletListService"]
