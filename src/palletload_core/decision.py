from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import ItemSpec
from .settings import PackingLimits
from .state import PackingState

EPS = 1e-6


class Outcome(Enum):
    PLACED = "placed"
    ADVANCE_ROW = "advance_row"
    ADVANCE_LAYER = "advance_layer"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class Decision:
    outcome: Outcome
    pos_l: float = 0.0
    pos_z: float = 0.0
    centered: bool = False
    reason: str = ""


def _overflow(reason: str) -> Decision:
    return Decision(Outcome.OVERFLOW, reason=reason)


def exceeds_unit_capacity(item: ItemSpec, base: ItemSpec, limits: PackingLimits) -> bool:
    """True when ``item`` cannot go even on an otherwise empty pallet."""
    return (
        max(base.length, item.length) > limits.max_length + EPS
        or max(base.width, item.width) > limits.max_width + EPS
        or base.height + item.height > limits.max_height + EPS
    )


def decide(state: PackingState, item: ItemSpec, limits: PackingLimits) -> Decision:
    """Next step for ``item`` on the pallet described by ``state``.

    Rules are tried in a fixed order: centred start of an empty pallet,
    then the active row, a new row, a new layer, and finally overflow to
    another pallet. ``state`` is not modified.
    """

    if state.is_empty:
        if state.current_h + item.height > limits.max_height + EPS:
            return _overflow("too tall for an empty pallet")
        if (
            max(state.max_l, item.length) > limits.max_length + EPS
            or max(state.max_b, item.width) > limits.max_width + EPS
        ):
            return _overflow("footprint exceeds unit limits")
        return Decision(Outcome.PLACED, 0.0, 0.0, centered=True, reason="empty pallet")

    base = state.base
    if item.length > base.length + EPS or item.width > base.width + EPS:
        return _overflow("overhanging items only start an empty pallet")

    if state.next_stack_height + item.height > limits.max_height + EPS:
        return _overflow("height limit reached")

    if state.is_layer_full:
        return Decision(Outcome.ADVANCE_LAYER, reason="layer closed")

    if (
        item.length <= state.row_end - state.x_cursor + EPS
        and state.z_cursor + item.width <= state.layer_end + EPS
    ):
        pos_l = state.x_cursor + item.length / 2
        pos_z = state.z_cursor + item.width / 2
        envelope_l = max(state.max_l, 2 * (abs(pos_l) + item.length / 2))
        envelope_b = max(state.max_b, 2 * (abs(pos_z) + item.width / 2))
        if envelope_l > limits.max_length + EPS or envelope_b > limits.max_width + EPS:
            return _overflow("row placement exceeds unit footprint")
        return Decision(Outcome.PLACED, pos_l, pos_z, reason="current row")

    if item.width <= state.layer_end - state.max_z_in_row + EPS:
        return Decision(Outcome.ADVANCE_ROW, reason="row full")

    if state.current_h + state.layer_height + item.height > limits.max_height + EPS:
        return _overflow("no height left for another layer")
    return Decision(Outcome.ADVANCE_LAYER, reason="layer full")
