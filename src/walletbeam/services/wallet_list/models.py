"""Pydantic models and enums supporting wallet list conversion."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from walletbeam.normalization.schema import CanonicalWalletRecord


class ExportFormat(str, Enum):
    """Supported output formats."""

    GMGN = "gmgn"
    AXIOM = "axiom"

    @property
    def label(self) -> str:
        return self.value.upper()

    @property
    def filename(self) -> str:
        return f"{self.value}_wallets.txt"


class SortField(str, Enum):
    """Numeric wallet fields the collection can be ordered by."""

    TOTAL_PROFIT = "total_profit"
    TOTAL_PROFIT_RATIO = "total_profit_ratio"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> "SortDirection":
        if self is SortDirection.DESCENDING:
            return SortDirection.ASCENDING
        return SortDirection.DESCENDING


class WalletEdit(BaseModel):
    """Partial update for one wallet; only explicitly set fields are applied."""

    custom_annotation: Optional[str] = None
    twitter_username: Optional[str] = None

    @classmethod
    def from_form(
        cls, record: CanonicalWalletRecord, *, custom_annotation: str, twitter_username: str
    ) -> "WalletEdit":
        """Build a patch holding only the form fields that differ from ``record``.

        An untouched note box must not clear the name, so unchanged text is
        left out of the patch.
        """

        changes: dict[str, str] = {}
        if custom_annotation != (record.custom_annotation or ""):
            changes["custom_annotation"] = custom_annotation
        if twitter_username != (record.twitter_username or ""):
            changes["twitter_username"] = twitter_username
        return cls(**changes)


class AxiomExportItem(BaseModel):
    """One entry of the Axiom tracked-wallet import list."""

    model_config = ConfigDict(populate_by_name=True)

    tracked_address: str = Field(alias="trackedAddress", min_length=1)
    name: str
    emoji: str
    alerts_enabled: bool = Field(default=True, alias="alertsEnabled")


__all__ = ["AxiomExportItem", "ExportFormat", "SortDirection", "SortField", "WalletEdit"]
