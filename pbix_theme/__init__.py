# PBIX theme creator: palette -> report theme, CSS variables, tags and names

from .schema import Color, Palette
from .tokens import map_semantic_tokens, REPORT_TOKEN_DEFAULTS, UI_TOKEN_DEFAULTS
from .theme import assemble_theme, merge_style_overrides, load_override_table, OverrideTableError, validate_theme
from .palettes import classify_palette, generate_palette_name
from .css import to_css, palette_to_css, parse_css_colors
from .export import export_palette

__all__ = [
    "Color",
    "Palette",
    "map_semantic_tokens",
    "REPORT_TOKEN_DEFAULTS",
    "UI_TOKEN_DEFAULTS",
    "assemble_theme",
    "merge_style_overrides",
    "load_override_table",
    "OverrideTableError",
    "validate_theme",
    "classify_palette",
    "generate_palette_name",
    "to_css",
    "palette_to_css",
    "parse_css_colors",
    "export_palette",
]
