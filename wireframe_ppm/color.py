#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """Immutable 8-bit RGB triple."""
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name, val in (('r', self.r), ('g', self.g), ('b', self.b)):
            if isinstance(val, bool) or not isinstance(val, int):
                raise ValueError(f"Color channel {name} must be an int, got {val!r}")
            if val < 0 or val > 255:
                raise ValueError(f"Color channel {name} out of range 0-255: {val}")

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    @classmethod
    def from_hex(cls, hex_str) -> 'Color':
        """
        Parse a hex color string.
        Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
        Raises ValueError on anything else.
        """
        val = str(hex_str).strip().lstrip('#')
        if len(val) != 6:
            raise ValueError(f"Expected #RRGGBB, got {hex_str!r}")
        try:
            r = int(val[0:2], 16)
            g = int(val[2:4], 16)
            b = int(val[4:6], 16)
        except ValueError:
            raise ValueError(f"Invalid hex color {hex_str!r}") from None
        return cls(r, g, b)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


# Face palette of the demo cube
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)
PURPLE = Color(128, 0, 128)
CYAN = Color(0, 255, 255)

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
