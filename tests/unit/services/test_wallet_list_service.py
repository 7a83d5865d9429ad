"""Tests for the WalletListService orchestration logic."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, Dict, List, Tuple

from walletbeam.services.wallet_list import (
    ExportFormat,
    ExportSinkError,
    SortField,
    WalletEdit,
    WalletListService,
)


class _StubSink:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.copied: List[str] = []
        self.downloads: List[Tuple[str, str]] = []

    def copy_text(self, content: str) -> None:
        if self.fail:
            raise ExportSinkError("clipboard unavailable")
        self.copied.append(content)

    def download_text(self, content: str, filename: str) -> str:
        if self.fail:
            raise ExportSinkError("disk full")
        self.downloads.append((content, filename))
        return f"/tmp/exports/{filename}"


class _StubObservability:
    def __init__(self) -> None:
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def emit_event(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))


def _settings(default_format: str = "gmgn") -> SimpleNamespace:
    return SimpleNamespace(
        export=SimpleNamespace(default_format=default_format),
        observability=SimpleNamespace(structured_logging=False, service_name="walletbeam"),
    )


def _service(sink: _StubSink | None = None, default_format: str = "gmgn") -> WalletListService:
    return WalletListService(
        sink=sink or _StubSink(),
        settings=_settings(default_format),
        observability=_StubObservability(),
    )


def _payload() -> str:
    return json.dumps(
        {
            "code": 0,
            "msg": "success",
            "data": {
                "followings": [
                    {"address": "walletA", "name": "MyNote", "twitter_name": "RealName", "total_profit": 10.0},
                    {"address": "walletB", "name": "Ansem", "twitter_name": "Ansem", "total_profit": 500.0, "tags": ["kol"]},
                    {"address": "walletC", "name": None, "twitter_name": None},
                ]
            },
        }
    )


def test_process_loads_records_and_reports_status():
    service = _service()

    assert service.process(_payload()) is True

    assert [record.address for record in service.records] == ["walletA", "walletB", "walletC"]
    assert service.status == "Processed 3 wallets"
    assert service.preview_format is ExportFormat.GMGN
    assert service.preview == "walletA:MyNote,\nwalletB,\nwalletC,"
    assert service.observability.events == [("wallets.processed", {"wallet_count": 3, "kol_count": 1})]


def test_process_uses_configured_default_format():
    service = _service(default_format="axiom")
    service.process(_payload())

    assert service.preview_format is ExportFormat.AXIOM
    assert json.loads(service.preview)[0]["trackedAddress"] == "walletA"


def test_failed_process_keeps_previous_collection():
    service = _service()
    service.process(_payload())

    assert service.process("{not json") is False

    assert service.status.startswith("Processing failed: Invalid JSON")
    assert len(service.records) == 3
    assert service.observability.events[-1] == ("wallets.rejected", {"reason": "invalid_json"})


def test_shape_error_keeps_previous_collection():
    service = _service()
    service.process(_payload())
    before = service.records

    assert service.process('{"data": {}}') is False

    assert service.status.startswith("Processing failed: Unexpected payload shape")
    assert service.records == before
    assert service.observability.events[-1] == ("wallets.rejected", {"reason": "unexpected_shape"})


def test_blank_paste_is_rejected_without_event():
    service = _service()

    assert service.process("   ") is False

    assert service.status == "Processing failed: Paste the GMGN followed-wallet data first"
    assert service.observability.events == []


def test_empty_collection_renders_encoder_output():
    service = _service()

    assert service.preview == ""
    assert service.render(ExportFormat.AXIOM) == "[]"


def test_axiom_preview_after_deleting_every_wallet():
    service = _service(default_format="axiom")
    service.process(_payload())

    for address in ("walletA", "walletB", "walletC"):
        service.delete(address)

    assert service.preview == "[]"


def test_preview_follows_sort_and_edits():
    service = _service()
    service.process(_payload())

    service.sort_by(SortField.TOTAL_PROFIT)
    service.edit("walletC", WalletEdit(custom_annotation="fresh"))
    service.delete("walletA")

    assert service.preview == "walletB,\nwalletC:fresh,"


def test_copy_sends_rendered_text_and_switches_preview():
    sink = _StubSink()
    service = _service(sink)
    service.process(_payload())

    assert service.copy(ExportFormat.AXIOM) is True

    assert service.preview_format is ExportFormat.AXIOM
    assert service.status == "Copied AXIOM format to clipboard"
    assert sink.copied == [service.render(ExportFormat.AXIOM)]
    assert service.observability.events[-1] == ("wallets.exported", {"format": "axiom", "target": "clipboard"})


def test_copy_failure_is_reported_in_status():
    service = _service(_StubSink(fail=True))
    service.process(_payload())

    assert service.copy("gmgn") is False

    assert service.status == "Copy failed: clipboard unavailable"
    assert len(service.records) == 3


def test_download_uses_format_filename():
    sink = _StubSink()
    service = _service(sink)
    service.process(_payload())

    location = service.download(ExportFormat.GMGN)

    assert location == "/tmp/exports/gmgn_wallets.txt"
    assert sink.downloads == [("walletA:MyNote,\nwalletB,\nwalletC,", "gmgn_wallets.txt")]
    assert service.status == "Downloaded GMGN format as gmgn_wallets.txt"


def test_download_accepts_custom_filename():
    sink = _StubSink()
    service = _service(sink)
    service.process(_payload())

    service.download("axiom", filename="tracked.json")

    assert sink.downloads[0][1] == "tracked.json"
    assert service.status == "Downloaded AXIOM format as tracked.json"


def test_download_failure_returns_none():
    service = _service(_StubSink(fail=True))
    service.process(_payload())

    assert service.download() is None
    assert service.status == "Download failed: disk full"


def test_reset_returns_to_initial_state():
    service = _service(default_format="gmgn")
    service.process(_payload())
    service.select_format("axiom")
    service.sort_by("total_profit")

    service.reset()

    assert service.records == []
    assert service.pasted_text == ""
    assert service.status == ""
    assert service.preview_format is ExportFormat.GMGN
    assert service.collection.sort_field is None
