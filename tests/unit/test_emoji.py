"""Unit tests for walletbeam.derivation.emoji."""

from __future__ import annotations

import pytest

from walletbeam.derivation.emoji import emoji_for_name, name_hash, utf16_code_units
from walletbeam.normalization.reference_data import EMOJI_PALETTE


def test_emoji_palette_size_is_fixed():
    """The palette is part of the output contract; resizing it reshuffles every emoji."""
    assert len(EMOJI_PALETTE) == 329
    assert EMOJI_PALETTE[0] == "🚗"


def test_known_hashes():
    assert name_hash("") == 0
    assert name_hash("a") == 97
    assert name_hash("ab") == 97 * 31 + 98


def test_hash_uses_utf16_code_units():
    # "😀" is the surrogate pair D83D DE00.
    assert list(utf16_code_units("😀")) == [0xD83D, 0xDE00]
    assert name_hash("😀") == 0xD83D * 31 + 0xDE00


def test_hash_wraps_to_signed_32_bits():
    value = name_hash("a considerably longer wallet display name " * 20)
    assert -(2**31) <= value < 2**31


@pytest.mark.parametrize(
    "name,expected",
    [
        ("", "🚗"),
        ("a", "🕷️"),
    ],
)
def test_known_emoji(name, expected):
    assert emoji_for_name(name) == expected


@pytest.mark.parametrize("name", ["0xABCDEF12", "MyNote", "鲸鱼 🐳", "x" * 500])
def test_emoji_is_deterministic_and_from_palette(name):
    first = emoji_for_name(name)
    assert first == emoji_for_name(name)
    assert first in EMOJI_PALETTE
