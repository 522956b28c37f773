from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from .errors import ItemExceedsUnitCapacity
from .units import CM, KG

PALLET_UNIT = "palette"

DEFAULT_COLOR = 0x999999


@dataclass(frozen=True)
class ItemSpec:
    """Catalog article. Dimensions in cm, weight in kg."""

    id: str
    name: str
    length: CM
    width: CM
    height: CM
    weight: KG = 0.0
    color: int = DEFAULT_COLOR
    unit: str = ""

    @property
    def is_pallet(self) -> bool:
        return self.unit.strip().lower() == PALLET_UNIT


@dataclass(frozen=True)
class LoadEntry:
    item: ItemSpec
    quantity: int


@dataclass(frozen=True)
class ItemPlacement:
    """Item position: ``pos_l``/``pos_z`` are centre offsets from the pallet
    centre, ``pos_h`` is the base height above the pallet floor."""

    item: ItemSpec
    pos_l: CM
    pos_z: CM
    pos_h: CM

    @property
    def top(self) -> CM:
        return self.pos_h + self.item.height

    @property
    def footprint(self) -> Tuple[float, float, float, float]:
        half_l = self.item.length / 2
        half_b = self.item.width / 2
        return (
            self.pos_l - half_l,
            self.pos_z - half_b,
            self.pos_l + half_l,
            self.pos_z + half_b,
        )


@dataclass(frozen=True)
class PalletPlan:
    id: int
    items: Tuple[ItemPlacement, ...]
    max_l: CM
    max_b: CM
    final_height: CM
    final_weight: KG
    drawing_offset_x: CM = 0.0

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class PlacementPlan:
    pallets: Tuple[PalletPlan, ...]
    rejected: Tuple[ItemExceedsUnitCapacity, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[PalletPlan]:
        return iter(self.pallets)

    def __len__(self) -> int:
        return len(self.pallets)

    def __getitem__(self, index: int) -> PalletPlan:
        return self.pallets[index]

    @property
    def item_count(self) -> int:
        return sum(pallet.item_count for pallet in self.pallets)
