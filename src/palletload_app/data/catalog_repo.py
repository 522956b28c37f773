import csv
import logging
import os
from functools import lru_cache
from typing import List, Optional

from palletload_core.catalog import Catalog
from palletload_core.models import ItemSpec
from palletload_core.units import parse_color, parse_float

from .paths import catalog_csv_path

logger = logging.getLogger(__name__)

DELIMITER = ";"

COLUMNS = ("id", "name", "length", "width", "height", "weight", "unit", "color")


def _parse_row(values: List[str], line_no: int, path: str) -> ItemSpec:
    values = [value.strip() for value in values]
    try:
        return ItemSpec(
            id=values[0],
            name=values[1],
            length=parse_float(values[2]),
            width=parse_float(values[3]),
            height=parse_float(values[4]),
            weight=parse_float(values[5]),
            unit=values[6],
            color=parse_color(values[7]),
        )
    except ValueError as e:
        raise ValueError(f"Invalid catalog row {line_no} in {path}: {e}")


def read_catalog(path: str) -> Catalog:
    """Parse a semicolon separated catalog file. The first line is a header."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Catalog file not found: {path}")
    items = []
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.reader(f, delimiter=DELIMITER)
        header = next(reader, None)
        if header is None:
            return Catalog()
        for line_no, values in enumerate(reader, start=2):
            if not any(value.strip() for value in values):
                continue
            if len(values) != len(header):
                logger.warning(
                    "Skipping catalog row %d in %s: expected %d columns, got %d",
                    line_no,
                    path,
                    len(header),
                    len(values),
                )
                continue
            if len(values) < len(COLUMNS):
                raise ValueError(
                    f"Catalog {path} needs columns {', '.join(COLUMNS)}"
                )
            items.append(_parse_row(values, line_no, path))
    return Catalog(items)


@lru_cache(maxsize=None)
def load_default_catalog() -> Catalog:
    return read_catalog(catalog_csv_path())


def load_catalog(path: Optional[str] = None) -> Catalog:
    """Catalog from ``path`` or, when omitted, the cached default catalog."""
    if path is None:
        return load_default_catalog()
    return read_catalog(path)
