"""Color models - RGB and HSL representations"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RgbColor:
    """Color as red, green and blue channels (0-255)"""

    r: int
    g: int
    b: int

    def as_tuple(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b


@dataclass(frozen=True)
class HslColor:
    """Color as hue (degrees), saturation and lightness (percent)"""

    h: int
    s: int
    l: int  # noqa: E741

    def as_tuple(self) -> tuple[int, int, int]:
        return self.h, self.s, self.l
