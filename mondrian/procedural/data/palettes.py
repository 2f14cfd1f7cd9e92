"""
Our data: the fixed Mondrian palette (RGB 0–255) and the weighted random pick.
WHITE is both the background and the most likely draw.
"""
from enum import Enum


class PaletteColor(Enum):
    WHITE = 0xFFFFFF
    BLUE = 0x0000FF
    RED = 0xFF0000
    YELLOW = 0xFFD500

    @property
    def hex_color(self) -> int:
        return self.value

    @property
    def rgb(self) -> tuple[int, int, int]:
        v = self.value
        return (v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF

    @classmethod
    def from_name(cls, name: str) -> "PaletteColor":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown palette color: {name!r}") from None


# Bucket (int(sample * 10)) → color. Buckets 0–6 fall through to WHITE.
_BUCKETS: dict[int, PaletteColor] = {
    7: PaletteColor.RED,
    8: PaletteColor.BLUE,
    9: PaletteColor.YELLOW,
}


def random_color(sample: float) -> PaletteColor:
    """
    Map a uniform sample in [0, 1) to a palette color:
    70% WHITE, 10% each RED, BLUE, YELLOW.
    """
    return _BUCKETS.get(int(sample * 10), PaletteColor.WHITE)
