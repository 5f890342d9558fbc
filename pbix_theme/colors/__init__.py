# Colors: parsing, conversion, contrast, harmonies and random generation

from .utils import (
    InvalidColorError,
    parse_hex,
    is_valid_hex,
    normalize_hex,
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hex_to_hsl,
    hsl_to_rgb,
    relative_luminance,
    contrast_ratio,
    is_light_color,
)
from .harmony import complementary, triadic, analogous
from .generate import generate_random_color, generate_random_palette, shuffle_unlocked

__all__ = [
    "InvalidColorError",
    "parse_hex",
    "is_valid_hex",
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hex_to_hsl",
    "hsl_to_rgb",
    "relative_luminance",
    "contrast_ratio",
    "is_light_color",
    "complementary",
    "triadic",
    "analogous",
    "generate_random_color",
    "generate_random_palette",
    "shuffle_unlocked",
]
