"""
Palette classifier: perceptual statistics over a palette's colors and the descriptive
tags derived from them with fixed thresholds.

Hue mean is a plain arithmetic mean of hue mod 360 (not a circular mean). Palettes
straddling 0°/360° can land on the opposite side of the wheel; tag output depends on
this exact behaviour, so it is kept.
"""
import logging
import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..colors.utils import InvalidColorError, parse_hex

logger = logging.getLogger(__name__)

TAG_VOCABULARY: tuple[str, ...] = (
    "dark",
    "light",
    "warm",
    "cool",
    "reds",
    "blues",
    "greens",
    "pastels",
    "neutrals",
    "high-contrast",
)

DARK_MAX_LIGHTNESS = 0.38
LIGHT_MIN_LIGHTNESS = 0.62
HIGH_CONTRAST_MIN_SPREAD = 0.45
PASTEL_MAX_SATURATION = 0.5
PASTEL_MIN_LIGHTNESS = 0.75
NEUTRAL_MAX_SATURATION = 0.22
NEUTRAL_MAX_MEAN_SATURATION = 0.25
NEUTRAL_MAX_HUE_DEVIATION = 60.0
FAMILY_SHARE = 0.4
FAMILY_MIN_COUNT = 2


@dataclass
class PaletteStats:
    """Aggregate statistics the tags are derived from."""

    count: int
    mean_hue: float  # 0–360, arithmetic
    mean_saturation: float  # 0–1
    mean_lightness: float  # 0–1
    contrast_spread: float  # max - min relative luminance
    hue_deviation: float  # mean |signed hue distance to mean_hue|, degrees
    family_threshold: int
    reds_count: int = 0
    blues_count: int = 0
    greens_count: int = 0
    pastel_count: int = 0
    neutral_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "mean_hue": self.mean_hue,
            "mean_saturation": self.mean_saturation,
            "mean_lightness": self.mean_lightness,
            "contrast_spread": self.contrast_spread,
            "hue_deviation": self.hue_deviation,
            "family_threshold": self.family_threshold,
            "reds_count": self.reds_count,
            "blues_count": self.blues_count,
            "greens_count": self.greens_count,
            "pastel_count": self.pastel_count,
            "neutral_count": self.neutral_count,
        }


def _hsl_arrays(rgb: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Vectorized RGB (N, 3) 0–255 -> hue (0–360), saturation, lightness (0–1).
    Achromatic colors get hue 0.
    """
    r = rgb[:, 0] / 255.0
    g = rgb[:, 1] / 255.0
    b = rgb[:, 2] / 255.0
    cmax = np.maximum(np.maximum(r, g), b)
    cmin = np.minimum(np.minimum(r, g), b)
    delta = cmax - cmin
    lightness = (cmax + cmin) / 2.0
    chromatic = delta > 0
    denom = np.where(lightness < 0.5, cmax + cmin, 2.0 - cmax - cmin)
    sat = np.zeros_like(r)
    np.divide(delta, denom, out=sat, where=chromatic & (denom > 0))
    delta_safe = np.where(chromatic, delta, 1.0)  # np.select evaluates every branch
    hue = np.select(
        [chromatic & (cmax == r), chromatic & (cmax == g), chromatic],
        [
            60.0 * (((g - b) / delta_safe) % 6),
            60.0 * ((b - r) / delta_safe + 2),
            60.0 * ((r - g) / delta_safe + 4),
        ],
        default=0.0,
    )
    hue = ((hue % 360.0) + 360.0) % 360.0
    return hue, sat, lightness


def _luminance(rgb: np.ndarray) -> np.ndarray:
    c = rgb / 255.0
    lin = np.where(c <= 0.03928, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    return 0.2126 * lin[:, 0] + 0.7152 * lin[:, 1] + 0.0722 * lin[:, 2]


def palette_stats(colors: list[str]) -> PaletteStats:
    """
    Statistics for a non-empty palette. Raises InvalidColorError on the first
    unparseable color and ValueError for an empty palette.
    """
    if not colors:
        raise ValueError("palette_stats needs at least one color")
    rgb = np.array([parse_hex(c) for c in colors], dtype=np.float64)
    n = len(colors)
    hue, sat, light = _hsl_arrays(rgb)
    lum = _luminance(rgb)

    mean_hue = float(hue.sum() / n) % 360.0
    hue_dev = float(np.abs(((hue - mean_hue + 540.0) % 360.0) - 180.0).sum() / n)
    threshold = max(FAMILY_MIN_COUNT, math.ceil(n * FAMILY_SHARE))

    return PaletteStats(
        count=n,
        mean_hue=mean_hue,
        mean_saturation=float(sat.sum() / n),
        mean_lightness=float(light.sum() / n),
        contrast_spread=float(lum.max() - lum.min()),
        hue_deviation=hue_dev,
        family_threshold=threshold,
        reds_count=int(np.count_nonzero((hue < 25) | (hue >= 345))),
        blues_count=int(np.count_nonzero((hue >= 190) & (hue < 265))),
        greens_count=int(np.count_nonzero((hue >= 85) & (hue < 165))),
        pastel_count=int(np.count_nonzero((sat <= PASTEL_MAX_SATURATION) & (light >= PASTEL_MIN_LIGHTNESS))),
        neutral_count=int(np.count_nonzero(sat < NEUTRAL_MAX_SATURATION)),
    )


def tags_from_stats(stats: PaletteStats) -> list[str]:
    """Apply the fixed thresholds. Tags come back in vocabulary order."""
    tags: list[str] = []
    if stats.mean_lightness <= DARK_MAX_LIGHTNESS:
        tags.append("dark")
    if stats.mean_lightness >= LIGHT_MIN_LIGHTNESS:
        tags.append("light")
    if stats.mean_hue >= 330 or stats.mean_hue < 70:
        tags.append("warm")
    if 90 <= stats.mean_hue <= 300:
        tags.append("cool")
    t = stats.family_threshold
    if stats.reds_count >= t:
        tags.append("reds")
    if stats.blues_count >= t:
        tags.append("blues")
    if stats.greens_count >= t:
        tags.append("greens")
    if stats.pastel_count >= t:
        tags.append("pastels")
    if stats.neutral_count >= t or (
        stats.mean_saturation < NEUTRAL_MAX_MEAN_SATURATION
        and stats.hue_deviation < NEUTRAL_MAX_HUE_DEVIATION
    ):
        tags.append("neutrals")
    if stats.contrast_spread >= HIGH_CONTRAST_MIN_SPREAD:
        tags.append("high-contrast")
    return tags


def classify_palette(colors: list[str] | None) -> list[str]:
    """
    Descriptive tags for a palette. Fail-soft: an empty palette or any unparseable
    color yields [] instead of raising.
    """
    if not colors:
        return []
    try:
        stats = palette_stats(list(colors))
    except InvalidColorError as e:
        logger.debug("classify_palette: %s, no tags", e)
        return []
    return tags_from_stats(stats)
