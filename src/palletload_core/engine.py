from __future__ import annotations

import logging
import math
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .catalog import Catalog
from .decision import Outcome, decide, exceeds_unit_capacity
from .errors import InvalidManifestEntry, InvalidPalletBase, ItemExceedsUnitCapacity
from .models import ItemSpec, LoadEntry, PalletPlan, PlacementPlan
from .settings import PackingLimits, load_settings
from .state import PackingState
from .validation import validate_item_spec, validate_pallet_base, validate_quantity

logger = logging.getLogger(__name__)

ManifestLike = Iterable[Union[LoadEntry, Tuple[ItemSpec, int]]]

# One row advance plus one layer advance plus the placement itself.
MAX_STEPS_PER_ITEM = 4

DEFAULT_GAP_FACTOR = 1.5


def normalize_manifest(manifest: ManifestLike) -> List[LoadEntry]:
    """Validate the manifest and return it as a list of ``LoadEntry``."""
    entries: List[LoadEntry] = []
    for position, entry in enumerate(manifest, start=1):
        if not isinstance(entry, LoadEntry):
            try:
                item, quantity = entry
            except (TypeError, ValueError):
                raise InvalidManifestEntry(
                    f"Manifest entry {position}: expected (item, quantity), got {entry!r}"
                ) from None
            entry = LoadEntry(item=item, quantity=quantity)
        if not isinstance(entry.item, ItemSpec):
            raise InvalidManifestEntry(
                f"Manifest entry {position}: expected an ItemSpec, got {entry.item!r}"
            )
        errors = validate_quantity(entry.quantity) + validate_item_spec(entry.item)
        if errors:
            raise InvalidManifestEntry(f"Manifest entry {position}: " + "; ".join(errors))
        entries.append(entry)
    return entries


def expand_manifest(manifest: Sequence[LoadEntry]) -> Iterator[ItemSpec]:
    """Item instances in manifest order, ``quantity`` copies per entry."""
    for entry in manifest:
        for _ in range(entry.quantity):
            yield entry.item


class PalletPacker:
    """Greedy row/layer packer.

    Items are taken strictly in manifest order. Each one goes into the
    active row, a new row or a new layer of the current pallet; when none
    of those fit a new pallet is started. Finished pallets are never
    revisited.
    """

    def __init__(
        self,
        limits: Optional[PackingLimits] = None,
        *,
        gap_factor: Optional[float] = None,
    ) -> None:
        settings = load_settings()
        self.limits = limits if limits is not None else settings.limits
        self.gap_factor = gap_factor if gap_factor is not None else settings.gap_factor
        if not math.isfinite(self.gap_factor) or self.gap_factor <= 0:
            raise ValueError(f"gap_factor must be positive, got {self.gap_factor!r}")

    def _new_pallet(self, base: ItemSpec, previous: Optional[PackingState]) -> PackingState:
        if previous is None:
            return PackingState.fresh(1, base, 0.0)
        offset = previous.drawing_offset_x + base.length * self.gap_factor
        return PackingState.fresh(previous.pallet_id + 1, base, offset)

    def _try_place(self, state: PackingState, item: ItemSpec) -> bool:
        for _ in range(MAX_STEPS_PER_ITEM):
            decision = decide(state, item, self.limits)
            logger.debug(
                "pallet %d, article %s: %s (%s)",
                state.pallet_id,
                item.id,
                decision.outcome.value,
                decision.reason,
            )
            if decision.outcome is Outcome.PLACED:
                if decision.centered:
                    state.place_centered(item)
                else:
                    state.place(item, decision.pos_l, decision.pos_z)
                return True
            if decision.outcome is Outcome.ADVANCE_ROW:
                state.advance_row()
            elif decision.outcome is Outcome.ADVANCE_LAYER:
                state.close_layer()
                state.open_layer(item)
            else:
                return False
        raise RuntimeError(
            f"Placement of article '{item.id}' did not settle after {MAX_STEPS_PER_ITEM} steps"
        )

    def pack(self, manifest: ManifestLike, base: ItemSpec) -> PlacementPlan:
        errors = validate_pallet_base(base, self.limits)
        if errors:
            raise InvalidPalletBase("; ".join(errors))
        entries = normalize_manifest(manifest)

        finished: List[PalletPlan] = []
        rejected: List[ItemExceedsUnitCapacity] = []
        current = self._new_pallet(base, None)

        for index, item in enumerate(expand_manifest(entries)):
            if exceeds_unit_capacity(item, base, self.limits):
                error = ItemExceedsUnitCapacity(item, index, self.limits)
                logger.warning("%s, item skipped", error)
                rejected.append(error)
                continue
            if self._try_place(current, item):
                continue
            finished.append(current.freeze())
            current = self._new_pallet(base, current)
            logger.info(
                "Article '%s' does not fit on pallet %d, starting pallet %d",
                item.id,
                current.pallet_id - 1,
                current.pallet_id,
            )
            if not self._try_place(current, item):
                raise RuntimeError(
                    f"Article '{item.id}' did not fit on an empty pallet"
                )

        finished.append(current.freeze())
        return PlacementPlan(pallets=tuple(finished), rejected=tuple(rejected))


def pack(
    manifest: ManifestLike,
    base: ItemSpec,
    limits: Optional[PackingLimits] = None,
) -> PlacementPlan:
    return PalletPacker(limits).pack(manifest, base)


def pack_from_catalog(
    manifest: ManifestLike,
    catalog: Catalog,
    base_id: Optional[str] = None,
    limits: Optional[PackingLimits] = None,
) -> PlacementPlan:
    """Look up the pallet base in ``catalog`` and pack ``manifest`` on it.

    Raises ``CatalogEntryMissing`` before any placement when the base is
    not in the catalog.
    """
    if base_id is None:
        base_id = load_settings().pallet_base_id
    base = catalog.get(base_id)
    return PalletPacker(limits).pack(manifest, base)
