"""Wallet normalization for GMGN followed-wallet payloads.

Parses the pasted API response, validates its shape, and maps each raw wallet
to a :class:`CanonicalWalletRecord`. Whether ``name`` is a user annotation or
just the wallet's Twitter display name is inferred heuristically: GMGN stores
both in overlapping fields, so a name that differs from ``twitter_name`` (or a
wallet whose ``twitter_name`` is explicitly null) is treated as the user's own
label.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, List

from pydantic import ValidationError

from walletbeam.normalization.reference_data import FALLBACK_NAME_LENGTH, KOL_TAG
from walletbeam.normalization.schema import CanonicalWalletRecord, RawWalletRecord

LOGGER = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when nothing was pasted."""


class MalformedPayloadError(ValueError):
    """Raised when the payload is not JSON or does not have the followings shape."""

    INVALID_JSON = "invalid_json"
    UNEXPECTED_SHAPE = "unexpected_shape"

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


def fallback_name(address: str) -> str:
    """Return the truncated address used when a wallet has no name."""

    return address[:FALLBACK_NAME_LENGTH]


def _is_custom_annotation(raw: RawWalletRecord) -> bool:
    if raw.twitter_name_provided and raw.twitter_name is None:
        return True
    return bool(raw.twitter_name) and raw.twitter_name != raw.name


def normalize_wallet(raw: RawWalletRecord) -> CanonicalWalletRecord:
    """Map one validated raw wallet to its canonical record."""

    is_custom = _is_custom_annotation(raw)
    custom_annotation = raw.name if is_custom and raw.name else None
    return CanonicalWalletRecord(
        address=raw.address,
        display_name=raw.name or fallback_name(raw.address),
        custom_annotation=custom_annotation,
        has_custom_annotation=custom_annotation is not None,
        twitter_username=raw.twitter_username,
        twitter_display_name=raw.twitter_name,
        avatar_url=raw.avatar,
        total_profit=raw.total_profit,
        total_profit_ratio=raw.total_profit_pnl,
        is_kol=isinstance(raw.tags, list) and KOL_TAG in raw.tags,
    )


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "record"
    return f"{location}: {first.get('msg', 'invalid value')}"


def extract_followings(payload: Any) -> List[Any]:
    """Return the raw ``data.followings`` list or raise a shape error."""

    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            "Unexpected payload shape: top level must be a JSON object",
            reason=MalformedPayloadError.UNEXPECTED_SHAPE,
        )
    data = payload.get("data")
    if not isinstance(data, dict):
        raise MalformedPayloadError(
            "Unexpected payload shape: missing 'data' object; copy the complete API response",
            reason=MalformedPayloadError.UNEXPECTED_SHAPE,
        )
    followings = data.get("followings")
    if not isinstance(followings, list):
        raise MalformedPayloadError(
            "Unexpected payload shape: 'data.followings' must be a list; copy the complete API response",
            reason=MalformedPayloadError.UNEXPECTED_SHAPE,
        )
    return followings


def normalize_followings(followings: Iterable[Any]) -> List[CanonicalWalletRecord]:
    """Validate and normalize raw wallet dictionaries, dropping repeated addresses."""

    records: List[CanonicalWalletRecord] = []
    seen: set[str] = set()
    for index, item in enumerate(followings):
        try:
            raw = RawWalletRecord.model_validate(item)
        except ValidationError as exc:
            raise MalformedPayloadError(
                f"Unexpected payload shape: followings[{index}] {_describe_validation_error(exc)}",
                reason=MalformedPayloadError.UNEXPECTED_SHAPE,
            ) from exc
        if raw.address in seen:
            LOGGER.warning("Skipping repeated wallet address %s at followings[%s]", raw.address, index)
            continue
        seen.add(raw.address)
        records.append(normalize_wallet(raw))
    return records


def parse_followings(raw_text: str) -> List[CanonicalWalletRecord]:
    """Parse pasted GMGN JSON into canonical wallet records.

    Args:
        raw_text: The pasted API response,
            ``{"code": 0, "msg": "success", "data": {"followings": [...]}}``.

    Returns:
        Canonical records in payload order, one per distinct address.

    Raises:
        EmptyInputError: ``raw_text`` is blank.
        MalformedPayloadError: The text is not JSON (``reason="invalid_json"``)
            or lacks the followings list (``reason="unexpected_shape"``).
    """

    if raw_text is None or not raw_text.strip():
        raise EmptyInputError("Paste the GMGN followed-wallet data first")
    try:
        payload = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise MalformedPayloadError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            reason=MalformedPayloadError.INVALID_JSON,
        ) from exc

    records = normalize_followings(extract_followings(payload))
    LOGGER.debug("Normalized %s wallet records", len(records))
    return records


__all__ = [
    "EmptyInputError",
    "MalformedPayloadError",
    "extract_followings",
    "fallback_name",
    "normalize_followings",
    "normalize_wallet",
    "parse_followings",
]
