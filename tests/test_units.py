import pytest

from palletload_core.units import color_to_hex, format_float, parse_color, parse_float


def test_parse_float_accepts_comma():
    assert parse_float("12,5") == 12.5


def test_parse_float_reads_catalog_weight_cell():
    row = "K-6040;Carton 60x40;60;40;40;12,5;Stk;C19A6B".split(";")

    assert [parse_float(cell) for cell in row[2:6]] == [60.0, 40.0, 40.0, 12.5]


def test_parse_float_strips_whitespace():
    assert parse_float(" 15 ") == 15.0


def test_parse_float_rejects_empty_cell():
    with pytest.raises(ValueError):
        parse_float("")


def test_format_float_defaults_to_one_digit():
    assert format_float(35) == "35.0"
    assert format_float(1.234, 2) == "1.23"


@pytest.mark.parametrize("text", ["8B4513", "0x8B4513", "#8B4513", " 8b4513 "])
def test_parse_color_variants(text):
    assert parse_color(text) == 0x8B4513


def test_parse_color_rejects_garbage():
    with pytest.raises(ValueError):
        parse_color("brown")


def test_color_to_hex():
    assert color_to_hex(0x8B4513) == "#8b4513"
