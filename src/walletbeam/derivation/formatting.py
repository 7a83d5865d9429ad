"""Display formatting for wallet performance metrics."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def _fixed(value: float, places: int) -> str:
    # Half away from zero on the exact binary value, matching how the GMGN
    # web UI rounds.
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_profit_shorthand(profit: float) -> str:
    """Format ``profit`` as ``$1.2M`` / ``$3.4K`` / ``$56.7``.

    The sign is left to the caller; negative values keep their minus sign
    after the dollar symbol (``$-1.5K``).
    """

    magnitude = abs(profit)
    if magnitude >= 1_000_000:
        return f"${_fixed(profit / 1_000_000, 1)}M"
    if magnitude >= 1_000:
        return f"${_fixed(profit / 1_000, 1)}K"
    return f"${_fixed(profit, 1)}"


def format_signed_profit(profit: float) -> str:
    """Shorthand profit with an explicit ``+`` for non-negative values."""

    prefix = "+" if profit >= 0 else ""
    return f"{prefix}{format_profit_shorthand(profit)}"


def format_profit_ratio(ratio: float) -> str:
    """Render a profit ratio (``0.1234``) as a signed percentage (``+12.34%``)."""

    prefix = "+" if ratio >= 0 else ""
    return f"{prefix}{_fixed(ratio * 100, 2)}%"


__all__ = ["format_profit_ratio", "format_profit_shorthand", "format_signed_profit"]
