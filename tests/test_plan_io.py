import json

import pytest

from palletload_app.plan_io import plan_to_dict, save_plan
from palletload_core import ItemSpec, LoadEntry, PackingLimits, PalletPacker

BASE = ItemSpec("PAL-EU", "Euro pallet", 120, 80, 15, 25, color=0x8B5A2B, unit="Palette")
LIMITS = PackingLimits(max_length=285, max_width=180, max_height=160)
CARTON = ItemSpec("K-4030", "Karton 40×30", 40, 30, 20, 5, color=0xD2B48C)


def _pack(manifest):
    return PalletPacker(LIMITS, gap_factor=1.5).pack(manifest, BASE)


def test_plan_to_dict_lists_articles_once():
    data = plan_to_dict(_pack([LoadEntry(CARTON, 2)]), BASE)

    assert list(data["articles"]) == ["K-4030"]
    assert data["articles"]["K-4030"]["color"] == "#d2b48c"
    assert data["base"]["id"] == "PAL-EU"
    pallet = data["pallets"][0]
    assert pallet["id"] == 1
    assert pallet["items"][0] == {"id": "K-4030", "posL": 0.0, "posZ": 0.0, "posH": 15}
    assert data["summary"]["palletCount"] == 1
    assert data["summary"]["overallWeight"] == pytest.approx(35)
    assert data["rejected"] == []


def test_save_plan_writes_json(tmp_path):
    target = tmp_path / "out" / "plan.json"
    tower = ItemSpec("TOWER", "Tower", 40, 30, 150, 1)

    save_plan(str(target), _pack([LoadEntry(CARTON, 1), LoadEntry(tower, 1)]), BASE)

    with open(target, "r", encoding="utf-8") as f:
        data = json.load(f)
    assert data["articles"]["K-4030"]["name"] == "Karton 40×30"
    assert data["rejected"][0]["id"] == "TOWER"
    assert data["rejected"][0]["index"] == 1
