from __future__ import annotations

from typing import Iterable, List, Tuple

from palletload_core.catalog import Catalog
from palletload_core.errors import InvalidManifestEntry
from palletload_core.models import LoadEntry

Request = Tuple[str, int]


def parse_request(text: str) -> Request:
    """Parse ``ARTICLE:QTY`` (or ``ARTICLE=QTY``). A bare article means 1."""
    raw = text.strip()
    for sep in (":", "="):
        if sep in raw:
            article, _, qty_text = raw.rpartition(sep)
            break
    else:
        article, qty_text = raw, "1"
    article = article.strip()
    if not article:
        raise InvalidManifestEntry(f"Missing article number in {text!r}")
    try:
        quantity = int(qty_text.strip())
    except ValueError:
        raise InvalidManifestEntry(f"Invalid quantity in {text!r}") from None
    if quantity <= 0:
        raise InvalidManifestEntry(f"Quantity must be greater than 0 in {text!r}")
    return article, quantity


def build_manifest(catalog: Catalog, requests: Iterable[Request]) -> List[LoadEntry]:
    """Resolve ``(article, quantity)`` requests against the catalog.

    Order is kept and repeated articles stay separate entries. Pallets
    cannot be loaded as cargo.
    """
    manifest: List[LoadEntry] = []
    for article, quantity in requests:
        item = catalog.get(article)
        if item.is_pallet:
            raise InvalidManifestEntry(f"Article '{item.id}' is a pallet, not cargo")
        if quantity <= 0:
            raise InvalidManifestEntry(
                f"Quantity for '{item.id}' must be greater than 0, got {quantity}"
            )
        manifest.append(LoadEntry(item=item, quantity=quantity))
    return manifest
