"""Stable emoji selection for wallet display names."""

from __future__ import annotations

from typing import Iterator

from walletbeam.normalization.reference_data import EMOJI_PALETTE

_INT32_SPAN = 1 << 32
_INT32_MAX = (1 << 31) - 1


def utf16_code_units(text: str) -> Iterator[int]:
    """Yield the UTF-16 code units of ``text`` (surrogate pairs split)."""

    encoded = text.encode("utf-16-le", "surrogatepass")
    for offset in range(0, len(encoded), 2):
        yield int.from_bytes(encoded[offset : offset + 2], "little")


def _to_int32(value: int) -> int:
    value %= _INT32_SPAN
    return value - _INT32_SPAN if value > _INT32_MAX else value


def name_hash(name: str) -> int:
    """Return the signed 32-bit ``hash * 31 + unit`` rolling hash of ``name``."""

    result = 0
    for unit in utf16_code_units(name):
        result = _to_int32((result << 5) - result + unit)
    return result


def emoji_for_name(name: str) -> str:
    """Pick the palette emoji for ``name``; identical names always agree."""

    return EMOJI_PALETTE[abs(name_hash(name)) % len(EMOJI_PALETTE)]


__all__ = ["emoji_for_name", "name_hash", "utf16_code_units"]
