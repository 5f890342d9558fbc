"""
Random palette generation and shuffling. State goes in explicitly and comes back as a
new list; nothing here keeps a palette between calls.
"""
from ..random_utils import random_rgb, random_token
from ..schema import Color
from .utils import rgb_to_hex


def generate_random_color() -> str:
    return rgb_to_hex(*random_rgb())


def generate_random_palette(count: int = 8) -> list[Color]:
    """count unlocked colors with ids 'color-<index>-<token>'."""
    if count < 0:
        raise ValueError("count must be non-negative")
    token = random_token()
    return [
        Color(hex=generate_random_color(), locked=False, id=f"color-{i}-{token}")
        for i in range(count)
    ]


def shuffle_unlocked(colors: list[Color]) -> list[Color]:
    """New palette where every unlocked entry gets a fresh color; locked entries are kept."""
    return [
        c if c.locked else Color(hex=generate_random_color(), locked=False, id=c.id)
        for c in colors
    ]
