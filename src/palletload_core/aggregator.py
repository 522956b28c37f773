from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple

from .models import ItemPlacement, ItemSpec, PlacementPlan
from .units import CM, KG


@dataclass(frozen=True)
class PalletSummary:
    id: int
    item_count: int
    counts: Dict[str, int]
    names: Dict[str, str]
    max_l: CM
    max_b: CM
    height: CM
    weight: KG


@dataclass(frozen=True)
class PlanSummary:
    overall_height: CM
    overall_weight: KG
    final_l: CM
    final_b: CM
    pallets: Tuple[PalletSummary, ...]

    @property
    def pallet_count(self) -> int:
        return len(self.pallets)

    def __iter__(self) -> Iterator[object]:
        # unpacks as (overall_height, overall_weight, pallets)
        return iter((self.overall_height, self.overall_weight, self.pallets))


def pallet_height(items: Iterable[ItemPlacement], base: ItemSpec) -> CM:
    height = base.height
    for placement in items:
        height = max(height, placement.top)
    return height


def pallet_weight(items: Iterable[ItemPlacement], base: ItemSpec) -> KG:
    return base.weight + sum(placement.item.weight for placement in items)


def article_counts(items: Iterable[ItemPlacement]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for placement in items:
        counts[placement.item.id] = counts.get(placement.item.id, 0) + 1
    return counts


def summarize(plan: PlacementPlan, base: ItemSpec) -> PlanSummary:
    """Per-pallet and overall figures for a finished plan.

    Heights and weights are recomputed from the placements, so the result
    only depends on the plan and the pallet base.
    """

    summaries = []
    overall_height = base.height
    overall_weight = 0.0
    final_l = base.length
    final_b = base.width
    for pallet in plan.pallets:
        height = pallet_height(pallet.items, base)
        weight = pallet_weight(pallet.items, base)
        names: Dict[str, str] = {}
        for placement in pallet.items:
            names.setdefault(placement.item.id, placement.item.name)
        summaries.append(
            PalletSummary(
                id=pallet.id,
                item_count=pallet.item_count,
                counts=article_counts(pallet.items),
                names=names,
                max_l=pallet.max_l,
                max_b=pallet.max_b,
                height=height,
                weight=weight,
            )
        )
        overall_height = max(overall_height, height)
        overall_weight += weight
        final_l = max(final_l, pallet.max_l)
        final_b = max(final_b, pallet.max_b)
    return PlanSummary(
        overall_height=overall_height,
        overall_weight=overall_weight,
        final_l=final_l,
        final_b=final_b,
        pallets=tuple(summaries),
    )
