"""Catalog, reporting and drawing around the pallet load planner."""
