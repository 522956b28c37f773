from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .aggregator import pallet_height, pallet_weight
from .models import ItemPlacement, ItemSpec, PalletPlan
from .units import CM


@dataclass
class PackingState:
    """Row/layer cursors of the pallet currently being filled.

    Lengths run along the pallet length (x), depths along its width (z).
    Cursor values are offsets from the pallet centre. ``usable_l`` and
    ``usable_b`` bound the rows and layers; they start at the base
    footprint and widen when an overhanging item is centred on the empty
    pallet.
    """

    pallet_id: int
    base: ItemSpec
    drawing_offset_x: CM
    current_h: CM
    usable_l: CM
    usable_b: CM
    x_cursor: CM
    z_cursor: CM
    max_z_in_row: CM
    max_l: CM
    max_b: CM
    layer_height: CM = 0.0
    is_layer_full: bool = False
    items: List[ItemPlacement] = field(default_factory=list)

    @classmethod
    def fresh(cls, pallet_id: int, base: ItemSpec, drawing_offset_x: CM = 0.0) -> "PackingState":
        return cls(
            pallet_id=pallet_id,
            base=base,
            drawing_offset_x=drawing_offset_x,
            current_h=base.height,
            usable_l=base.length,
            usable_b=base.width,
            x_cursor=-base.length / 2,
            z_cursor=-base.width / 2,
            max_z_in_row=-base.width / 2,
            max_l=base.length,
            max_b=base.width,
        )

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def row_start(self) -> CM:
        return -self.usable_l / 2

    @property
    def row_end(self) -> CM:
        return self.usable_l / 2

    @property
    def layer_start(self) -> CM:
        return -self.usable_b / 2

    @property
    def layer_end(self) -> CM:
        return self.usable_b / 2

    @property
    def next_stack_height(self) -> CM:
        if self.is_layer_full:
            return self.current_h + self.layer_height
        return self.current_h

    def place_centered(self, item: ItemSpec) -> ItemPlacement:
        """First item of an empty pallet, centred on the base."""
        placement = ItemPlacement(item=item, pos_l=0.0, pos_z=0.0, pos_h=self.current_h)
        self.items.append(placement)
        self.usable_l = max(self.base.length, item.length)
        self.usable_b = max(self.base.width, item.width)
        self.max_l = max(self.max_l, item.length)
        self.max_b = max(self.max_b, item.width)
        self.layer_height = item.height
        self.is_layer_full = False
        # the rest of the first row continues right of the centred item
        self.x_cursor = item.length / 2
        self.z_cursor = -item.width / 2
        self.max_z_in_row = item.width / 2
        return placement

    def place(self, item: ItemSpec, pos_l: CM, pos_z: CM) -> ItemPlacement:
        placement = ItemPlacement(item=item, pos_l=pos_l, pos_z=pos_z, pos_h=self.current_h)
        self.items.append(placement)
        self.x_cursor += item.length
        self.max_z_in_row = max(self.max_z_in_row, self.z_cursor + item.width)
        self.layer_height = max(self.layer_height, item.height)
        self.max_l = max(self.max_l, 2 * (abs(pos_l) + item.length / 2))
        self.max_b = max(self.max_b, 2 * (abs(pos_z) + item.width / 2))
        return placement

    def advance_row(self) -> None:
        self.x_cursor = self.row_start
        self.z_cursor = self.max_z_in_row

    def close_layer(self) -> None:
        self.is_layer_full = True

    def open_layer(self, item: ItemSpec) -> None:
        self.current_h = self.next_stack_height
        self.x_cursor = self.row_start
        self.z_cursor = self.layer_start
        self.max_z_in_row = self.layer_start
        self.layer_height = item.height
        self.is_layer_full = False

    def freeze(self) -> PalletPlan:
        items = tuple(self.items)
        return PalletPlan(
            id=self.pallet_id,
            items=items,
            max_l=self.max_l,
            max_b=self.max_b,
            final_height=pallet_height(items, self.base),
            final_weight=pallet_weight(items, self.base),
            drawing_offset_x=self.drawing_offset_x,
        )
