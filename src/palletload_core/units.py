CM = float
KG = float


def parse_float(value: str) -> float:
    text = value.strip()
    if not text:
        raise ValueError("empty input")
    text = text.replace(",", ".")
    return float(text)


def format_float(value: float, ndigits: int = 1) -> str:
    return f"{value:.{ndigits}f}"


def parse_color(value: str) -> int:
    """Parse an RGB colour written as ``8B4513``, ``0x8B4513`` or ``#8B4513``."""
    text = value.strip().lstrip("#")
    if not text:
        raise ValueError("empty colour")
    return int(text, 16)


def color_to_hex(value: int) -> str:
    return f"#{int(value) & 0xFFFFFF:06x}"
