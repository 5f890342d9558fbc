"""
Export formats for a palette: simple report theme JSON, CSS variables with UI tokens,
and a palette JSON with its tokens. Produces content plus a suggested filename; writing
or copying it is the caller's job.
"""
import json
import re
from dataclasses import dataclass
from typing import Any, Literal

from .colors.utils import normalize_hex
from .css import to_css
from .schema import Color
from .tokens import map_semantic_tokens

ExportFormat = Literal["powerbi", "css", "json"]
EXPORT_FORMATS: tuple[str, ...] = ("powerbi", "css", "json")

SIMPLE_THEME_BACKGROUND = "#FFFFFF"
SIMPLE_THEME_FOREGROUND = "#0F172A"
SIMPLE_THEME_TABLE_ACCENT = "#3B82F6"


@dataclass
class ExportResult:
    content: str
    filename: str
    content_type: str


def _hexes(colors: list[Color] | list[str]) -> list[str]:
    return [c.hex if isinstance(c, Color) else c for c in colors]


def file_slug(theme_name: str) -> str:
    """'My Nice  Theme' -> 'my_nice_theme'."""
    return re.sub(r"\s+", "_", theme_name).lower()


def simple_report_theme(colors: list[Color] | list[str], theme_name: str = "Custom Theme") -> dict[str, Any]:
    """Minimal theme with uppercase dataColors; unparseable entries are upper-cased as given."""
    data_colors = [normalize_hex(h, upper=True, default=str(h).upper()) for h in _hexes(colors)]
    return {
        "name": theme_name,
        "dataColors": data_colors,
        "background": SIMPLE_THEME_BACKGROUND,
        "foreground": SIMPLE_THEME_FOREGROUND,
        "tableAccent": data_colors[0] if data_colors else SIMPLE_THEME_TABLE_ACCENT,
    }


def export_palette(
    colors: list[Color] | list[str],
    theme_name: str,
    fmt: ExportFormat | str,
    tokens: dict[str, str] | None = None,
) -> ExportResult:
    """Render one export format. tokens default to the "ui" target for the colors."""
    hexes = _hexes(colors)
    if tokens is None:
        tokens = map_semantic_tokens(hexes, target="ui")
    slug = file_slug(theme_name)
    if fmt == "powerbi":
        content = json.dumps(simple_report_theme(hexes, theme_name), indent=2)
        return ExportResult(content, f"{slug}_theme.json", "application/json")
    if fmt == "css":
        return ExportResult(to_css(hexes, tokens), f"{slug}_variables.css", "text/css")
    if fmt == "json":
        content = json.dumps({"name": theme_name, "colors": hexes, "semanticTokens": tokens}, indent=2)
        return ExportResult(content, f"{slug}_palette.json", "application/json")
    raise ValueError(f"Unknown export format: {fmt!r} (expected one of {', '.join(EXPORT_FORMATS)})")
