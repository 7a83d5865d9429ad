"""In-memory wallet collection with sorting and in-place edits."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from walletbeam.normalization.normalizer import fallback_name
from walletbeam.normalization.schema import CanonicalWalletRecord

from .models import SortDirection, SortField, WalletEdit

LOGGER = logging.getLogger(__name__)


class WalletCollection:
    """Owns the canonical records of one conversion session.

    Records keep their payload order; an active sort only changes the view
    returned by :attr:`records`, so clearing the sort restores payload order.
    Edits and deletes address records by wallet address and silently ignore
    unknown addresses.
    """

    def __init__(self, records: Iterable[CanonicalWalletRecord] | None = None) -> None:
        self._records: List[CanonicalWalletRecord] = []
        self._sort_field: Optional[SortField] = None
        self._sort_direction = SortDirection.DESCENDING
        if records is not None:
            self.load(records)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def sort_field(self) -> Optional[SortField]:
        return self._sort_field

    @property
    def sort_direction(self) -> SortDirection:
        return self._sort_direction

    @property
    def records(self) -> List[CanonicalWalletRecord]:
        """Records in display order (sorted when a sort is active)."""

        if self._sort_field is None:
            return list(self._records)
        attribute = self._sort_field.value
        present = [record for record in self._records if getattr(record, attribute) is not None]
        missing = [record for record in self._records if getattr(record, attribute) is None]
        present.sort(
            key=lambda record: getattr(record, attribute),
            reverse=self._sort_direction is SortDirection.DESCENDING,
        )
        return present + missing

    def get(self, address: str) -> Optional[CanonicalWalletRecord]:
        for record in self._records:
            if record.address == address:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CanonicalWalletRecord]:
        return iter(self.records)

    def __contains__(self, address: object) -> bool:
        return any(record.address == address for record in self._records)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def load(self, records: Iterable[CanonicalWalletRecord]) -> None:
        """Replace every record with ``records``; addresses must be unique."""

        incoming = list(records)
        addresses = [record.address for record in incoming]
        if len(set(addresses)) != len(addresses):
            raise ValueError("Wallet addresses must be unique within a collection")
        self._records = incoming

    def sort_by(self, field: SortField | str, direction: SortDirection | str | None = None) -> None:
        """Sort by ``field``; repeating the active field flips the direction.

        A newly selected field sorts by ``direction`` (descending by default).
        Records without a value for ``field`` stay last either way.
        """

        resolved = SortField(field)
        if resolved is self._sort_field:
            self._sort_direction = self._sort_direction.flipped()
        else:
            self._sort_field = resolved
            self._sort_direction = SortDirection(direction) if direction else SortDirection.DESCENDING
        LOGGER.debug("Sorting wallets by %s (%s)", self._sort_field.value, self._sort_direction.value)

    def clear_sort(self) -> None:
        self._sort_field = None
        self._sort_direction = SortDirection.DESCENDING

    def edit(self, address: str, patch: WalletEdit) -> Optional[CanonicalWalletRecord]:
        """Apply ``patch`` to the wallet at ``address`` and return the new record.

        Setting ``custom_annotation`` to blank text removes the annotation and
        falls back to the Twitter display name, then the truncated address.
        Blank ``twitter_username`` values are stored as ``None``.
        """

        for index, current in enumerate(self._records):
            if current.address == address:
                break
        else:
            LOGGER.debug("Ignoring edit for unknown wallet %s", address)
            return None

        updates: dict[str, object] = {}
        if "custom_annotation" in patch.model_fields_set:
            annotation = (patch.custom_annotation or "").strip()
            if annotation:
                updates.update(custom_annotation=annotation, has_custom_annotation=True, display_name=annotation)
            else:
                updates.update(
                    custom_annotation=None,
                    has_custom_annotation=False,
                    display_name=current.twitter_display_name or fallback_name(current.address),
                )
        if "twitter_username" in patch.model_fields_set:
            updates["twitter_username"] = (patch.twitter_username or "").strip() or None

        if not updates:
            return current
        updated = CanonicalWalletRecord.model_validate({**current.model_dump(), **updates})
        self._records[index] = updated
        return updated

    def delete(self, address: str) -> bool:
        """Remove the wallet at ``address``; returns False when it was absent."""

        remaining = [record for record in self._records if record.address != address]
        removed = len(remaining) != len(self._records)
        self._records = remaining
        return removed

    def reset(self) -> None:
        """Drop every record and the active sort."""

        self._records = []
        self.clear_sort()


__all__ = ["WalletCollection"]
