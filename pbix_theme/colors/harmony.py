"""
Hue-rotation harmonies in HSL space. Base color is returned as given; derived colors
are lowercase #rrggbb.
"""
import math

from .utils import hsl_to_rgb, parse_hex, rgb_to_hex, rgb_to_hsl


def _rotate(base: str, degrees: float) -> str:
    h, s, l = rgb_to_hsl(*parse_hex(base))
    h = 0.0 if math.isnan(h) else h
    return rgb_to_hex(*hsl_to_rgb((h + degrees) % 360.0, s, l))


def complementary(base: str) -> list[str]:
    return [base, _rotate(base, 180)]


def triadic(base: str) -> list[str]:
    return [base, _rotate(base, 120), _rotate(base, 240)]


def analogous(base: str, count: int = 3) -> list[str]:
    """
    Base followed by neighbours alternating either side of it in 30° steps:
    +30, -30, +60, -60, ...
    """
    colors = [base]
    for i in range(1, count):
        offset = (1 if i % 2 == 1 else -1) * math.ceil(i / 2) * 30
        colors.append(_rotate(base, offset))
    return colors
