"""Wallet list conversion service primitives."""

from .collection import WalletCollection
from .encoders import EXPORT_CONTENT_TYPE, encode, encode_axiom_json, encode_gmgn_lines, parse_axiom_export
from .models import AxiomExportItem, ExportFormat, SortDirection, SortField, WalletEdit
from .service import WalletListService
from .sinks import ExportSink, ExportSinkError, LocalExportSink

__all__ = [
    "AxiomExportItem",
    "EXPORT_CONTENT_TYPE",
    "ExportFormat",
    "ExportSink",
    "ExportSinkError",
    "LocalExportSink",
    "SortDirection",
    "SortField",
    "WalletCollection",
    "WalletEdit",
    "WalletListService",
    "encode",
    "encode_axiom_json",
    "encode_gmgn_lines",
    "parse_axiom_export",
]
