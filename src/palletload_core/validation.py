from __future__ import annotations

import math

from .models import ItemSpec
from .settings import PackingLimits


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_item_spec(item: ItemSpec) -> list[str]:
    errors: list[str] = []
    for name in ("length", "width", "height"):
        value = getattr(item, name)
        if not _is_number(value) or not math.isfinite(value) or value <= 0:
            errors.append(f"Article '{item.id}': {name} must be a positive number, got {value!r}")
    weight = item.weight
    if not _is_number(weight) or not math.isfinite(weight) or weight < 0:
        errors.append(f"Article '{item.id}': weight must be >= 0, got {weight!r}")
    return errors


def validate_quantity(quantity: object) -> list[str]:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        return [f"Quantity must be an integer, got {quantity!r}"]
    if quantity <= 0:
        return [f"Quantity must be greater than 0, got {quantity}"]
    return []


def validate_pallet_base(base: ItemSpec, limits: PackingLimits) -> list[str]:
    errors = validate_item_spec(base)
    if errors:
        return errors
    if base.length > limits.max_length or base.width > limits.max_width:
        errors.append(
            f"Pallet base '{base.id}' footprint {base.length:g} x {base.width:g} cm "
            f"exceeds {limits.max_length:g} x {limits.max_width:g} cm"
        )
    if base.height > limits.max_height:
        errors.append(
            f"Pallet base '{base.id}' height {base.height:g} cm exceeds {limits.max_height:g} cm"
        )
    return errors
