from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from palletload_core.aggregator import summarize
from palletload_core.models import ItemPlacement, ItemSpec, PlacementPlan
from palletload_core.units import color_to_hex


def _item_to_dict(item: ItemSpec) -> Dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "length": item.length,
        "width": item.width,
        "height": item.height,
        "weight": item.weight,
        "color": color_to_hex(item.color),
    }


def _placement_to_dict(placement: ItemPlacement) -> Dict[str, Any]:
    return {
        "id": placement.item.id,
        "posL": placement.pos_l,
        "posZ": placement.pos_z,
        "posH": placement.pos_h,
    }


def plan_to_dict(plan: PlacementPlan, base: ItemSpec) -> Dict[str, Any]:
    """JSON-serialisable view of a plan. Article data is listed once."""
    summary = summarize(plan, base)
    articles: Dict[str, Dict[str, Any]] = {}
    for pallet in plan:
        for placement in pallet.items:
            articles.setdefault(placement.item.id, _item_to_dict(placement.item))
    return {
        "base": _item_to_dict(base),
        "articles": articles,
        "pallets": [
            {
                "id": pallet.id,
                "maxL": pallet.max_l,
                "maxB": pallet.max_b,
                "finalHeight": pallet.final_height,
                "finalWeight": pallet.final_weight,
                "drawingOffsetX": pallet.drawing_offset_x,
                "items": [_placement_to_dict(p) for p in pallet.items],
            }
            for pallet in plan
        ],
        "summary": {
            "overallHeight": summary.overall_height,
            "overallWeight": summary.overall_weight,
            "finalL": summary.final_l,
            "finalB": summary.final_b,
            "palletCount": summary.pallet_count,
        },
        "rejected": [
            {"id": error.item.id, "index": error.index, "message": str(error)}
            for error in plan.rejected
        ],
    }


def save_plan(path: str, plan: PlacementPlan, base: ItemSpec) -> None:
    target = Path(path)
    if target.parent and not target.parent.exists():
        target.parent.mkdir(parents=True, exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(plan_to_dict(plan, base), f, ensure_ascii=False, indent=2)
