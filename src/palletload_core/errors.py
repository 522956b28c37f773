from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .models import ItemSpec
    from .settings import PackingLimits


class PackingError(Exception):
    """Base class for everything the packing core reports."""


class CatalogEntryMissing(PackingError, KeyError):
    def __init__(self, identifier: str) -> None:
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"Article '{self.identifier}' not found in catalog"


class InvalidManifestEntry(PackingError, ValueError):
    pass


class InvalidPalletBase(PackingError, ValueError):
    pass


class ItemExceedsUnitCapacity(PackingError):
    """A single item instance that does not fit on a pallet even alone.

    These are collected next to the plan instead of aborting the run.
    """

    def __init__(self, item: "ItemSpec", index: int, limits: "PackingLimits") -> None:
        self.item = item
        self.index = index
        self.limits = limits
        super().__init__(str(self))

    def __str__(self) -> str:
        item = self.item
        limits = self.limits
        return (
            f"Article '{item.id}' ({item.length:g} x {item.width:g} x {item.height:g} cm) "
            f"exceeds unit capacity {limits.max_length:g} x {limits.max_width:g} x "
            f"{limits.max_height:g} cm"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemExceedsUnitCapacity):
            return NotImplemented
        return (self.item, self.index, self.limits) == (other.item, other.index, other.limits)

    def __hash__(self) -> int:
        return hash((self.item, self.index, self.limits))
