from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Optional

from .errors import CatalogEntryMissing
from .models import ItemSpec


class Catalog(Mapping[str, ItemSpec]):
    """Read-only article lookup keyed by article id."""

    def __init__(self, items: Iterable[ItemSpec] = ()) -> None:
        self._items: Dict[str, ItemSpec] = {}
        for item in items:
            # later rows win, same as re-reading a catalog file
            self._items[item.id] = item

    def __getitem__(self, identifier: str) -> ItemSpec:
        return self.get(identifier)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._items

    def get(self, identifier: str) -> ItemSpec:  # type: ignore[override]
        if not isinstance(identifier, str):
            raise CatalogEntryMissing(identifier)
        try:
            return self._items[identifier.strip()]
        except KeyError:
            raise CatalogEntryMissing(identifier) from None

    def find(self, identifier: str) -> Optional[ItemSpec]:
        if not isinstance(identifier, str):
            return None
        return self._items.get(identifier.strip())

    def pallets(self) -> list[ItemSpec]:
        return [item for item in self._items.values() if item.is_pallet]
