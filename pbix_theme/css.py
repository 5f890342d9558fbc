"""
CSS serializer: colors and semantic tokens as a :root custom-property block.
"""
import re
from typing import Any

from .schema import Palette
from .tokens import map_semantic_tokens

_COLOR_VAR_RE = re.compile(r"--color-(\d+)\s*:\s*([^;]+);")


def to_css(colors: list[str], tokens: dict[str, str]) -> str:
    """
    ':root {' + one '--color-N' line per color (1-indexed) + one '--<token>' line per
    token in mapping order + '}'. Values are written as given.
    """
    lines = [":root {"]
    lines.extend(f"  --color-{i}: {c};" for i, c in enumerate(colors, start=1))
    lines.extend(f"  --{name}: {value};" for name, value in tokens.items())
    lines.append("}")
    return "\n".join(lines)


def palette_to_css(palette: Palette | dict[str, Any]) -> str:
    """Report tokens plus --background / --foreground (white / black when unset)."""
    pal = palette if isinstance(palette, Palette) else Palette.from_dict(palette)
    colors = list(pal.colors or [])
    tokens = {
        **map_semantic_tokens(colors),
        "background": pal.background or "#ffffff",
        "foreground": pal.foreground or "#000000",
    }
    return to_css(colors, tokens)


def parse_css_colors(text: str) -> list[str]:
    """--color-N values from a serialized block, ordered by N."""
    found = [(int(n), value.strip()) for n, value in _COLOR_VAR_RE.findall(text)]
    return [value for _, value in sorted(found)]
