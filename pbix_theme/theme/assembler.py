"""
Theme assembler: palette -> report theme document.

The document carries only schema keys (name, dataColors, background, foreground,
tableAccent, optional visualStyles). Semantic tokens drive the literal colors written
into visualStyles and are then discarded.
"""
from typing import Any

from ..schema import Palette
from ..tokens import map_semantic_tokens
from .catalogue import GLOBAL_STYLES, VISUAL_STYLE_MAP

DEFAULT_THEME_NAME = "Generated theme"
DEFAULT_BACKGROUND = "#ffffff"
DEFAULT_FOREGROUND = "#000000"
DEFAULT_TABLE_ACCENT = "#0078d4"
MAX_DATA_COLORS = 20


def solid(color: str) -> dict[str, Any]:
    """Schema fill literal: {"solid": {"color": color}}."""
    return {"solid": {"color": color}}


def property_entry(prop: str, color: str) -> dict[str, Any]:
    """Single-property object: {prop: {"solid": {"color": color}}}."""
    return {prop: solid(color)}


def _as_palette(palette: Palette | dict[str, Any]) -> Palette:
    if isinstance(palette, Palette):
        return palette
    return Palette.from_dict(palette)


def _build_cards(
    cards: dict[str, dict[str, str]],
    sources: dict[str, str],
) -> dict[str, list[dict[str, Any]]]:
    out: dict[str, list[dict[str, Any]]] = {}
    for card, props in cards.items():
        out[card] = [property_entry(prop, sources.get(src, src)) for prop, src in props.items()]
    return out


def build_visual_styles(
    tokens: dict[str, str],
    background: str = DEFAULT_BACKGROUND,
    foreground: str = DEFAULT_FOREGROUND,
) -> dict[str, Any]:
    """
    visualStyles tree from the fixed catalogue:
    {visualType: {"*": {card: [{property: {"solid": {"color": c}}}]}}}, plus '*'/'*' globals.
    """
    sources = {**tokens, "background": background, "foreground": foreground}
    styles: dict[str, Any] = {"*": {"*": _build_cards(GLOBAL_STYLES, sources)}}
    for visual, cards in VISUAL_STYLE_MAP.items():
        styles[visual] = {"*": _build_cards(cards, sources)}
    return styles


def assemble_theme(
    palette: Palette | dict[str, Any],
    *,
    include_visual_styles: bool = False,
) -> dict[str, Any]:
    """
    Build the theme document for a palette.
    dataColors = first MAX_DATA_COLORS colors in order (no dedup). Missing background /
    foreground / tableAccent default to white / black / first data color.
    visualStyles is present only when include_visual_styles is true.
    """
    pal = _as_palette(palette)
    colors = list(pal.colors or [])
    data_colors = colors[:MAX_DATA_COLORS]
    background = pal.background or DEFAULT_BACKGROUND
    foreground = pal.foreground or DEFAULT_FOREGROUND
    theme: dict[str, Any] = {
        "name": pal.name or DEFAULT_THEME_NAME,
        "dataColors": data_colors,
        "background": background,
        "foreground": foreground,
        "tableAccent": pal.table_accent or (data_colors[0] if data_colors else DEFAULT_TABLE_ACCENT),
    }
    if include_visual_styles:
        tokens = map_semantic_tokens(colors)
        theme["visualStyles"] = build_visual_styles(tokens, background, foreground)
    return theme
