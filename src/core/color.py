# core/color.py
import math
from typing import Tuple
from core.vector import Vector3

# Maps [0, 1] onto 0..255 without 1.0 landing on 256.
QUANTIZE_SCALE = 255.999

class Color:
    """
    An 8-bit RGB triplet, one per output pixel.
    """
    def __init__(self, r: int, g: int, b: int):
        self.r = r
        self.g = g
        self.b = b

    @classmethod
    def from_normalized(cls, v: Vector3) -> "Color":
        """
        Quantizes a color whose components are nominally in [0, 1).
        Out-of-range components are clamped into [0, 1] first; NaN or infinite
        components raise ValueError.
        """
        channels = []
        for c in v:
            if not math.isfinite(c):
                raise ValueError(f"Cannot quantize non-finite color component: {v!r}")
            c = min(1.0, max(0.0, c))
            channels.append(int(QUANTIZE_SCALE * c))
        return cls(*channels)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __str__(self) -> str:
        return f"{self.r} {self.g} {self.b}"

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"
