"""Tests for the editable wallet collection."""

from __future__ import annotations

import pytest

from walletbeam.normalization.schema import CanonicalWalletRecord
from walletbeam.services.wallet_list.collection import WalletCollection
from walletbeam.services.wallet_list.models import SortDirection, SortField, WalletEdit


def _record(address: str, profit: float | None = None, ratio: float | None = None, **extra) -> CanonicalWalletRecord:
    fields = {"address": address, "display_name": address[:8], "total_profit": profit, "total_profit_ratio": ratio}
    fields.update(extra)
    return CanonicalWalletRecord(**fields)


def _collection() -> WalletCollection:
    return WalletCollection(
        [
            _record("w1", profit=100, ratio=0.5),
            _record("w2", profit=None, ratio=0.1),
            _record("w3", profit=900, ratio=None),
            _record("w4", profit=100, ratio=2.0),
            _record("w5", profit=-50, ratio=-0.2),
        ]
    )


def _addresses(collection: WalletCollection) -> list[str]:
    return [record.address for record in collection.records]


def test_insertion_order_without_sort():
    assert _addresses(_collection()) == ["w1", "w2", "w3", "w4", "w5"]


def test_sort_descending_keeps_missing_last_and_ties_stable():
    collection = _collection()
    collection.sort_by(SortField.TOTAL_PROFIT)

    assert collection.sort_direction is SortDirection.DESCENDING
    assert _addresses(collection) == ["w3", "w1", "w4", "w5", "w2"]


def test_repeating_the_field_flips_direction():
    collection = _collection()
    collection.sort_by("total_profit", "descending")
    collection.sort_by("total_profit", "descending")

    assert collection.sort_direction is SortDirection.ASCENDING
    assert _addresses(collection) == ["w5", "w1", "w4", "w3", "w2"]

    collection.sort_by("total_profit")
    assert collection.sort_direction is SortDirection.DESCENDING


def test_new_field_resets_to_descending():
    collection = _collection()
    collection.sort_by(SortField.TOTAL_PROFIT)
    collection.sort_by(SortField.TOTAL_PROFIT)
    collection.sort_by(SortField.TOTAL_PROFIT_RATIO)

    assert collection.sort_field is SortField.TOTAL_PROFIT_RATIO
    assert collection.sort_direction is SortDirection.DESCENDING
    assert _addresses(collection) == ["w4", "w1", "w2", "w5", "w3"]


def test_new_field_accepts_explicit_direction():
    collection = _collection()
    collection.sort_by(SortField.TOTAL_PROFIT_RATIO, SortDirection.ASCENDING)

    assert _addresses(collection) == ["w5", "w2", "w1", "w4", "w3"]


def test_clear_sort_restores_payload_order():
    collection = _collection()
    collection.sort_by(SortField.TOTAL_PROFIT)
    collection.clear_sort()

    assert collection.sort_field is None
    assert _addresses(collection) == ["w1", "w2", "w3", "w4", "w5"]


def test_unknown_sort_field_is_rejected():
    with pytest.raises(ValueError):
        _collection().sort_by("followers_count")


def test_edit_sets_annotation_and_display_name():
    collection = _collection()

    updated = collection.edit("w1", WalletEdit(custom_annotation="  alpha caller  "))

    assert updated is not None
    assert updated.custom_annotation == "alpha caller"
    assert updated.display_name == "alpha caller"
    assert updated.has_custom_annotation is True
    assert collection.get("w1") == updated
    assert _addresses(collection) == ["w1", "w2", "w3", "w4", "w5"]


def test_clearing_annotation_falls_back_to_twitter_name():
    collection = WalletCollection(
        [
            _record(
                "So1ana111xyz",
                display_name="note",
                custom_annotation="note",
                has_custom_annotation=True,
                twitter_display_name="Ansem",
            )
        ]
    )

    updated = collection.edit("So1ana111xyz", WalletEdit(custom_annotation="   "))

    assert updated.custom_annotation is None
    assert updated.has_custom_annotation is False
    assert updated.display_name == "Ansem"


def test_clearing_annotation_without_twitter_name_uses_truncated_address():
    collection = WalletCollection(
        [_record("So1ana111xyz", display_name="note", custom_annotation="note", has_custom_annotation=True)]
    )

    updated = collection.edit("So1ana111xyz", WalletEdit(custom_annotation=""))

    assert updated.display_name == "So1ana11"
    assert updated.custom_annotation is None


@pytest.mark.parametrize("value,expected", [("  blknoiz06 ", "blknoiz06"), ("   ", None), ("", None), (None, None)])
def test_twitter_username_is_normalized(value, expected):
    collection = _collection()

    updated = collection.edit("w2", WalletEdit(twitter_username=value))

    assert updated.twitter_username == expected


def test_edit_leaves_unset_fields_alone():
    collection = WalletCollection([_record("w1", custom_annotation="keep", has_custom_annotation=True)])

    updated = collection.edit("w1", WalletEdit(twitter_username="someone"))

    assert updated.custom_annotation == "keep"
    assert updated.twitter_username == "someone"


def test_edit_unknown_address_is_a_no_op():
    collection = _collection()
    before = collection.records

    assert collection.edit("missing", WalletEdit(custom_annotation="x")) is None
    assert collection.records == before


def test_delete_missing_address_leaves_records_untouched():
    collection = WalletCollection([_record("a"), _record("b"), _record("c")])

    assert collection.delete("zzz") is False
    assert _addresses(collection) == ["a", "b", "c"]


def test_delete_removes_exactly_one_record_and_is_idempotent():
    collection = WalletCollection([_record("a"), _record("b"), _record("c")])

    assert collection.delete("b") is True
    assert collection.delete("b") is False
    assert _addresses(collection) == ["a", "c"]
    assert "b" not in collection


def test_reset_clears_records_and_sort():
    collection = _collection()
    collection.sort_by(SortField.TOTAL_PROFIT)

    collection.reset()

    assert len(collection) == 0
    assert collection.sort_field is None
    assert collection.records == []


def test_load_rejects_duplicate_addresses():
    with pytest.raises(ValueError):
        WalletCollection([_record("a"), _record("a")])


def test_form_patch_without_note_change_keeps_display_name():
    collection = WalletCollection([_record("So1ana111xyz", display_name="Alice", twitter_display_name="")])
    current = collection.get("So1ana111xyz")

    patch = WalletEdit.from_form(current, custom_annotation="", twitter_username="alice_x")
    updated = collection.edit("So1ana111xyz", patch)

    assert patch.model_fields_set == {"twitter_username"}
    assert updated.display_name == "Alice"
    assert updated.twitter_username == "alice_x"


def test_form_patch_with_new_note_updates_display_name():
    current = _record("So1ana111xyz", display_name="Alice", twitter_username="alice_x")
    collection = WalletCollection([current])

    patch = WalletEdit.from_form(current, custom_annotation="whale", twitter_username="alice_x")
    updated = collection.edit("So1ana111xyz", patch)

    assert patch.model_fields_set == {"custom_annotation"}
    assert updated.display_name == "whale"
    assert updated.twitter_username == "alice_x"


def test_form_patch_clearing_existing_note():
    current = _record("So1ana111xyz", display_name="note", custom_annotation="note", has_custom_annotation=True)

    patch = WalletEdit.from_form(current, custom_annotation="", twitter_username="")

    assert patch.model_fields_set == {"custom_annotation"}
    assert WalletCollection([current]).edit("So1ana111xyz", patch).display_name == "So1ana11"
