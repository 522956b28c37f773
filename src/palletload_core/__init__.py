"""Greedy pallet load planning."""

from .aggregator import PalletSummary, PlanSummary, summarize
from .catalog import Catalog
from .decision import Decision, Outcome, decide
from .engine import PalletPacker, expand_manifest, pack, pack_from_catalog
from .errors import (
    CatalogEntryMissing,
    InvalidManifestEntry,
    InvalidPalletBase,
    ItemExceedsUnitCapacity,
    PackingError,
)
from .models import ItemPlacement, ItemSpec, LoadEntry, PalletPlan, PlacementPlan
from .settings import PackingLimits, Settings, load_limits, load_settings
from .state import PackingState

__all__ = [
    "Catalog",
    "CatalogEntryMissing",
    "Decision",
    "InvalidManifestEntry",
    "InvalidPalletBase",
    "ItemExceedsUnitCapacity",
    "ItemPlacement",
    "ItemSpec",
    "LoadEntry",
    "Outcome",
    "PackingError",
    "PackingLimits",
    "PackingState",
    "PalletPacker",
    "PalletPlan",
    "PalletSummary",
    "PlacementPlan",
    "PlanSummary",
    "Settings",
    "decide",
    "expand_manifest",
    "load_limits",
    "load_settings",
    "pack",
    "pack_from_catalog",
    "summarize",
]
