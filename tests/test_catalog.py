import pytest

from palletload_app.data import (
    catalog_csv_path,
    clear_catalog_cache,
    load_catalog,
    read_catalog,
)
from palletload_app.data import paths
from palletload_core import Catalog, CatalogEntryMissing, ItemSpec

HEADER = "id;name;length;width;height;weight;unit;color\n"


def _write(tmp_path, body):
    path = tmp_path / "catalog.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return str(path)


def test_read_catalog_parses_rows(tmp_path):
    path = _write(
        tmp_path,
        "PAL-EU;Euro pallet;120;80;15;25;Palette;8B5A2B\n"
        "K-6040;Carton 60x40;60;40;40;12,5;Stk;C19A6B\n",
    )

    catalog = read_catalog(path)

    assert len(catalog) == 2
    carton = catalog.get("K-6040")
    assert carton == ItemSpec("K-6040", "Carton 60x40", 60, 40, 40, 12.5, 0xC19A6B, "Stk")
    assert catalog.get("PAL-EU").is_pallet
    assert not carton.is_pallet
    assert [item.id for item in catalog.pallets()] == ["PAL-EU"]


def test_rows_with_wrong_column_count_are_skipped(tmp_path, caplog):
    path = _write(
        tmp_path,
        "K-1;Short row;10;10\n"
        "\n"
        "K-2;Carton;10;10;10;1;Stk;FFFFFF\n",
    )

    catalog = read_catalog(path)

    assert list(catalog) == ["K-2"]
    assert "Skipping catalog row 2" in caplog.text


def test_bad_number_names_the_row(tmp_path):
    path = _write(tmp_path, "K-1;Carton;ten;10;10;1;Stk;FFFFFF\n")

    with pytest.raises(ValueError, match="row 2"):
        read_catalog(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_catalog(str(tmp_path / "missing.csv"))


def test_bundled_catalog_has_euro_pallet(monkeypatch):
    monkeypatch.delenv(paths.CATALOG_ENV, raising=False)
    clear_catalog_cache()

    base = load_catalog().get("PAL-EU")

    assert (base.length, base.width, base.height, base.weight) == (120, 80, 15, 25)
    clear_catalog_cache()


def test_catalog_path_from_environment(tmp_path, monkeypatch):
    path = _write(tmp_path, "X-1;Thing;10;10;10;1;Stk;FFFFFF\n")
    monkeypatch.setenv(paths.CATALOG_ENV, path)
    clear_catalog_cache()

    assert catalog_csv_path() == path
    assert "X-1" in load_catalog()
    clear_catalog_cache()


def test_catalog_lookup_behaviour():
    item = ItemSpec("K", "Carton", 10, 10, 10)
    catalog = Catalog([item])

    assert catalog["K"] is item
    assert catalog.get(" K ") is item
    assert catalog.find("missing") is None
    with pytest.raises(CatalogEntryMissing, match="missing"):
        catalog.get("missing")
    with pytest.raises(KeyError):
        catalog["missing"]


def test_non_string_identifier_is_missing():
    catalog = Catalog([ItemSpec("K", "Carton", 10, 10, 10)])

    with pytest.raises(CatalogEntryMissing):
        catalog.get(None)
    assert catalog.find(None) is None
