"""Unit tests for the GMGN and Axiom encoders."""

from __future__ import annotations

import json

import pytest

from walletbeam.derivation.emoji import emoji_for_name
from walletbeam.normalization.normalizer import MalformedPayloadError
from walletbeam.normalization.schema import CanonicalWalletRecord
from walletbeam.services.wallet_list.encoders import (
    encode,
    encode_axiom_json,
    encode_gmgn_lines,
    parse_axiom_export,
)
from walletbeam.services.wallet_list.models import ExportFormat


def _build_records() -> list[CanonicalWalletRecord]:
    return [
        CanonicalWalletRecord(address="0xABCDEF1234567890", display_name="0xABCDEF"),
        CanonicalWalletRecord(
            address="So1ana111",
            display_name="MyNote",
            custom_annotation="MyNote",
            has_custom_annotation=True,
            twitter_display_name="RealName",
        ),
        CanonicalWalletRecord(address="Bob222", display_name="鲸鱼", twitter_display_name="鲸鱼"),
    ]


def test_gmgn_lines_include_annotations_only_when_present():
    assert encode_gmgn_lines(_build_records()) == "0xABCDEF1234567890,\nSo1ana111:MyNote,\nBob222,"


def test_gmgn_lines_for_empty_collection():
    assert encode_gmgn_lines([]) == ""


def test_axiom_json_entries():
    payload = json.loads(encode_axiom_json(_build_records()))

    assert payload[1] == {
        "trackedAddress": "So1ana111",
        "name": "MyNote",
        "emoji": emoji_for_name("MyNote"),
        "alertsEnabled": True,
    }
    assert [item["trackedAddress"] for item in payload] == ["0xABCDEF1234567890", "So1ana111", "Bob222"]
    assert all(item["alertsEnabled"] is True for item in payload)


def test_axiom_json_is_indented_and_keeps_unicode():
    text = encode_axiom_json(_build_records())

    assert text.startswith('[\n  {\n    "trackedAddress": "0xABCDEF1234567890"')
    assert '"name": "鲸鱼"' in text
    assert encode_axiom_json(_build_records()) == text


def test_axiom_round_trip_preserves_addresses_and_names():
    records = _build_records()

    items = parse_axiom_export(encode_axiom_json(records))

    assert [(item.tracked_address, item.name) for item in items] == [
        (record.address, record.display_name) for record in records
    ]


def test_parse_axiom_export_rejects_invalid_json():
    with pytest.raises(MalformedPayloadError) as excinfo:
        parse_axiom_export("[{")
    assert excinfo.value.reason == MalformedPayloadError.INVALID_JSON


def test_parse_axiom_export_rejects_wrong_shape():
    with pytest.raises(MalformedPayloadError) as excinfo:
        parse_axiom_export('{"trackedAddress": "x"}')
    assert excinfo.value.reason == MalformedPayloadError.UNEXPECTED_SHAPE


@pytest.mark.parametrize("fmt", [ExportFormat.GMGN, "gmgn", " GMGN "])
def test_encode_dispatches_gmgn(fmt):
    assert encode(_build_records(), fmt) == encode_gmgn_lines(_build_records())


def test_encode_dispatches_axiom():
    assert encode(_build_records(), "axiom") == encode_axiom_json(_build_records())


def test_encode_rejects_unknown_format():
    with pytest.raises(ValueError):
        encode(_build_records(), "csv")


def test_export_filenames():
    assert ExportFormat.GMGN.filename == "gmgn_wallets.txt"
    assert ExportFormat.AXIOM.filename == "axiom_wallets.txt"
