"""Deterministic visuals and display helpers derived from wallet data."""

from .avatar import AvatarGrid, build_avatar_grid, generate_pixel_avatar, render_avatar_svg
from .emoji import emoji_for_name, name_hash
from .formatting import format_profit_ratio, format_profit_shorthand, format_signed_profit

__all__ = [
    "AvatarGrid",
    "build_avatar_grid",
    "emoji_for_name",
    "format_profit_ratio",
    "format_profit_shorthand",
    "format_signed_profit",
    "generate_pixel_avatar",
    "name_hash",
    "render_avatar_svg",
]
