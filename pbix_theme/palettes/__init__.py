# Palettes: classification, deterministic naming, discovery

from .classifier import TAG_VOCABULARY, PaletteStats, palette_stats, tags_from_stats, classify_palette
from .namer import djb2, palette_seed, generate_palette_name
from .discovery import (
    PRESET_PALETTES,
    CATEGORIES,
    normalize_provider_records,
    tag_palettes,
    filter_by_category,
    fallback_presets,
)

__all__ = [
    "TAG_VOCABULARY",
    "PaletteStats",
    "palette_stats",
    "tags_from_stats",
    "classify_palette",
    "djb2",
    "palette_seed",
    "generate_palette_name",
    "PRESET_PALETTES",
    "CATEGORIES",
    "normalize_provider_records",
    "tag_palettes",
    "filter_by_category",
    "fallback_presets",
]
