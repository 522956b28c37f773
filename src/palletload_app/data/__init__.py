from .cache import clear_catalog_cache
from .catalog_repo import load_catalog, load_default_catalog, read_catalog
from .paths import catalog_csv_path

__all__ = [
    "catalog_csv_path",
    "clear_catalog_cache",
    "load_catalog",
    "load_default_catalog",
    "read_catalog",
]
