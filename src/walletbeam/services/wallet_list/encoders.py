"""Encoders rendering canonical wallets into the supported import formats."""

from __future__ import annotations

import json
from typing import Callable, Dict, Iterable, List

from pydantic import TypeAdapter, ValidationError

from walletbeam.derivation.emoji import emoji_for_name
from walletbeam.normalization.normalizer import MalformedPayloadError
from walletbeam.normalization.schema import CanonicalWalletRecord

from .models import AxiomExportItem, ExportFormat

EXPORT_CONTENT_TYPE = "text/plain;charset=utf-8"

_AXIOM_LIST = TypeAdapter(List[AxiomExportItem])


def encode_gmgn_lines(records: Iterable[CanonicalWalletRecord]) -> str:
    """Render the GMGN import list: ``address,`` or ``address:annotation,`` per line."""

    lines = []
    for record in records:
        if record.has_custom_annotation and record.custom_annotation:
            lines.append(f"{record.address}:{record.custom_annotation},")
        else:
            lines.append(f"{record.address},")
    return "\n".join(lines)


def build_axiom_items(records: Iterable[CanonicalWalletRecord]) -> List[AxiomExportItem]:
    """Map records to Axiom entries, deriving the emoji from the display name."""

    return [
        AxiomExportItem(
            tracked_address=record.address,
            name=record.display_name,
            emoji=emoji_for_name(record.display_name),
            alerts_enabled=True,
        )
        for record in records
    ]


def encode_axiom_json(records: Iterable[CanonicalWalletRecord]) -> str:
    """Render the Axiom import list as indented JSON."""

    payload = [item.model_dump(by_alias=True) for item in build_axiom_items(records)]
    return json.dumps(payload, ensure_ascii=False, indent=2)


def parse_axiom_export(text: str) -> List[AxiomExportItem]:
    """Read an Axiom import list back into models.

    Raises:
        MalformedPayloadError: ``text`` is not JSON or not a list of Axiom entries.
    """

    try:
        return _AXIOM_LIST.validate_json(text)
    except ValidationError as exc:
        reason = MalformedPayloadError.UNEXPECTED_SHAPE
        if any(error.get("type") == "json_invalid" for error in exc.errors()):
            reason = MalformedPayloadError.INVALID_JSON
        raise MalformedPayloadError(f"Invalid Axiom export: {exc.error_count()} error(s)", reason=reason) from exc


_ENCODERS: Dict[ExportFormat, Callable[[Iterable[CanonicalWalletRecord]], str]] = {
    ExportFormat.GMGN: encode_gmgn_lines,
    ExportFormat.AXIOM: encode_axiom_json,
}


def encode(records: Iterable[CanonicalWalletRecord], fmt: ExportFormat | str) -> str:
    """Dispatch to the encoder registered for ``fmt``."""

    try:
        resolved = ExportFormat(fmt.lower().strip() if isinstance(fmt, str) else fmt)
    except ValueError as exc:
        raise ValueError(f"Unsupported export format: {fmt}") from exc
    return _ENCODERS[resolved](records)


__all__ = [
    "EXPORT_CONTENT_TYPE",
    "build_axiom_items",
    "encode",
    "encode_axiom_json",
    "encode_gmgn_lines",
    "parse_axiom_export",
]
