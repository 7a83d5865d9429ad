"""Pixel avatars generated from wallet addresses.

Each address maps to a symmetric 8x8 grid rendered as an SVG data URL. The
mapping depends only on the first characters of the address, so the same
wallet always renders the same picture without any stored state.
"""

from __future__ import annotations

import base64
import string
from dataclasses import dataclass
from typing import Optional, Tuple

from walletbeam.derivation.emoji import utf16_code_units
from walletbeam.normalization.reference_data import (
    AVATAR_BACKGROUNDS,
    AVATAR_GRID_SIZE,
    AVATAR_PALETTES,
    AVATAR_SEED_LENGTH,
)

_HEX_DIGITS = frozenset(string.hexdigits)
_EDGE_ROWS_FILL = 30
_CENTER_ROWS_FILL = 65


@dataclass(frozen=True, slots=True)
class AvatarGrid:
    """Resolved avatar: colours plus a row-major grid of cell fills.

    Attributes:
        palette_index: Index into ``AVATAR_PALETTES``.
        background: Background colour of the SVG.
        cells: ``size`` rows of ``size`` entries; ``None`` marks an empty cell.
    """

    palette_index: int
    background: str
    cells: Tuple[Tuple[Optional[str], ...], ...]

    @property
    def size(self) -> int:
        return len(self.cells)


def _pick_index(hex_digits: str, options: int) -> int:
    try:
        index = int(hex_digits or "0", 16) % options
    except ValueError:
        index = 0
    return index if 0 <= index < options else 0


def _fill_threshold(row: int, size: int) -> int:
    if row < 2 or row >= size - 2:
        return _EDGE_ROWS_FILL
    return _CENTER_ROWS_FILL


def build_avatar_grid(address: str) -> AvatarGrid:
    """Compute the avatar grid for ``address``.

    Short, empty, or non-hex addresses never raise: missing hex digits select
    palette and background 0, and an empty seed leaves every cell blank.
    """

    seed = list(utf16_code_units(address or ""))[:AVATAR_SEED_LENGTH]
    hex_digits = "".join(chr(unit) for unit in seed if chr(unit) in _HEX_DIGITS)
    palette_index = _pick_index(hex_digits[:2], len(AVATAR_PALETTES))
    background_index = _pick_index(hex_digits[2:4], len(AVATAR_BACKGROUNDS))
    colors = AVATAR_PALETTES[palette_index]

    size = AVATAR_GRID_SIZE
    half = (size + 1) // 2
    grid: list[list[Optional[str]]] = [[None] * size for _ in range(size)]
    for y in range(size):
        threshold = _fill_threshold(y, size)
        for x in range(half):
            code = seed[(y * 4 + x) % len(seed)] if seed else 0
            if code % 100 >= threshold:
                continue
            grid[y][x] = colors[abs((code + y * x) % 4)]
            if x < size // 2:
                grid[y][size - 1 - x] = grid[y][x]

    return AvatarGrid(
        palette_index=palette_index,
        background=AVATAR_BACKGROUNDS[background_index],
        cells=tuple(tuple(row) for row in grid),
    )


def render_avatar_svg(grid: AvatarGrid) -> str:
    """Render ``grid`` as a compact SVG document (one unit per cell)."""

    size = grid.size
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" '
        f'viewBox="0 0 {size} {size}" style="background-color: {grid.background};">'
    ]
    for y, row in enumerate(grid.cells):
        for x, color in enumerate(row):
            if color:
                parts.append(f'<rect x="{x}" y="{y}" width="1" height="1" fill="{color}" />')
    parts.append("</svg>")
    return "".join(parts)


def generate_pixel_avatar(address: str) -> str:
    """Return the avatar for ``address`` as an embeddable ``data:`` URL."""

    svg = render_avatar_svg(build_avatar_grid(address))
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


__all__ = ["AvatarGrid", "build_avatar_grid", "generate_pixel_avatar", "render_avatar_svg"]
