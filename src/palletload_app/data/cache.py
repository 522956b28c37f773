def clear_catalog_cache() -> None:
    from .catalog_repo import load_default_catalog

    load_default_catalog.cache_clear()
