"""Schema definitions for raw and canonical wallet records.

``RawWalletRecord`` mirrors one entry of the GMGN ``data.followings`` list and
is validated strictly: a field carrying an unexpected JSON type is rejected
instead of coerced. ``CanonicalWalletRecord`` is the normalized form shared by
the encoders, the collection manager and the UI.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RawWalletRecord(BaseModel):
    """A wallet as exported by GMGN; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", strict=True, allow_inf_nan=False)

    address: str = Field(min_length=1)
    name: Optional[str] = None
    twitter_username: Optional[str] = None
    twitter_name: Optional[str] = None
    avatar: Optional[str] = None
    total_profit: Optional[float] = None
    total_profit_pnl: Optional[float] = None
    tags: Optional[List[Any]] = None

    @property
    def twitter_name_provided(self) -> bool:
        """bool: True when the payload carried ``twitter_name`` at all (even as null)."""

        return "twitter_name" in self.model_fields_set


class CanonicalWalletRecord(BaseModel):
    """Normalized wallet used throughout the conversion pipeline.

    Attributes:
        address: Wallet address; identity key within a collection.
        display_name: Name shown to the user, never empty.
        custom_annotation: User-authored label, distinct from Twitter metadata.
        has_custom_annotation: Mirrors ``custom_annotation is not None``.
        twitter_username: Twitter handle, if known.
        twitter_display_name: Twitter display name, if known.
        avatar_url: Remote avatar URL supplied by the platform.
        total_profit: Total realized + unrealized profit in USD.
        total_profit_ratio: Total profit as a ratio of cost (``0.25`` = 25%).
        is_kol: True when the platform tagged the wallet as a KOL.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    address: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    custom_annotation: Optional[str] = None
    has_custom_annotation: bool = False
    twitter_username: Optional[str] = None
    twitter_display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    total_profit: Optional[float] = None
    total_profit_ratio: Optional[float] = None
    is_kol: bool = False

    @model_validator(mode="after")
    def _check_annotation_flag(self) -> "CanonicalWalletRecord":
        if self.has_custom_annotation != (self.custom_annotation is not None):
            raise ValueError("has_custom_annotation must match custom_annotation presence")
        return self


__all__ = ["CanonicalWalletRecord", "RawWalletRecord"]
