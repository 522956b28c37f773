from __future__ import annotations

from typing import List

from palletload_core.aggregator import PalletSummary, summarize
from palletload_core.models import ItemSpec, PlacementPlan
from palletload_core.units import format_float


def format_pallet(summary: PalletSummary) -> str:
    lines = [f"Pallet #{summary.id}"]
    if not summary.counts:
        lines.append("  (empty)")
    for article, count in summary.counts.items():
        lines.append(f"  {count}x {summary.names.get(article, article)} ({article})")
    lines.append(
        f"  L: {format_float(summary.max_l)} cm | B: {format_float(summary.max_b)} cm"
    )
    lines.append(
        f"  H: {format_float(summary.height)} cm | G: {format_float(summary.weight)} kg"
    )
    return "\n".join(lines)


def format_report(plan: PlacementPlan, base: ItemSpec) -> str:
    summary = summarize(plan, base)
    blocks: List[str] = []
    if plan.item_count == 0:
        blocks.append("No load.")
    else:
        blocks.extend(format_pallet(pallet) for pallet in summary.pallets)

    totals = [
        f"L: {format_float(summary.final_l)} cm",
        f"B: {format_float(summary.final_b)} cm",
        f"H: {format_float(summary.overall_height)} cm",
    ]
    if plan.item_count == 0:
        totals.append(f"Weight: {format_float(summary.overall_weight)} kg (empty)")
    else:
        totals.append(
            f"Weight: {format_float(summary.overall_weight)} kg "
            f"({summary.pallet_count} pallet(s))"
        )
    blocks.append("Total: " + " | ".join(totals))

    if plan.rejected:
        rejected = ["Not loaded:"]
        rejected.extend(f"  {error}" for error in plan.rejected)
        blocks.append("\n".join(rejected))
    return "\n\n".join(blocks)
