# Theme: catalogue, assembly, override merge, basic checks

from .catalogue import GLOBAL_STYLES, VISUAL_STYLE_MAP, VISUAL_TYPES
from .assembler import assemble_theme, build_visual_styles, MAX_DATA_COLORS
from .merge import OverrideTableError, merge_style_overrides, load_override_table
from .validate import validate_theme

__all__ = [
    "GLOBAL_STYLES",
    "VISUAL_STYLE_MAP",
    "VISUAL_TYPES",
    "assemble_theme",
    "build_visual_styles",
    "MAX_DATA_COLORS",
    "OverrideTableError",
    "merge_style_overrides",
    "load_override_table",
    "validate_theme",
]
