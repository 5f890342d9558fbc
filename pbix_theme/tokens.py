"""
Semantic token mapper: ordered colors -> named roles.
Assignment is positional (role i <- colors[i]); a missing or unparseable entry
gets that role's fixed default, so every key always resolves.
"""
from typing import Literal

from .colors.utils import is_valid_hex

TokenTarget = Literal["report", "ui"]

# Report-theme roles in positional order with their fallbacks
REPORT_TOKEN_DEFAULTS: dict[str, str] = {
    "primary": "#0b6efd",
    "accent": "#0fcfdf",
    "success": "#06d6a0",
    "warning": "#ffd166",
    "info": "#7b61ff",
    "neutral": "#6b7280",
    "danger": "#ef476f",
}

# CSS / UI-preview roles (5 positional)
UI_TOKEN_DEFAULTS: dict[str, str] = {
    "primary": "#3b82f6",
    "accent": "#10b981",
    "success": "#22c55e",
    "warning": "#f59e0b",
    "error": "#ef4444",
}

# UI surface tokens: fixed, never taken from the palette
UI_SURFACE_TOKENS: dict[str, str] = {
    "background": "#ffffff",
    "foreground": "#0f172a",
    "muted": "#64748b",
}

_DEFAULTS_BY_TARGET: dict[str, dict[str, str]] = {
    "report": REPORT_TOKEN_DEFAULTS,
    "ui": UI_TOKEN_DEFAULTS,
}


def map_semantic_tokens(colors: list[str] | None, target: TokenTarget = "report") -> dict[str, str]:
    """
    Fully populated role -> color mapping. Valid entries are used verbatim
    (case preserved); the "ui" target also carries the fixed surface tokens.
    """
    defaults = _DEFAULTS_BY_TARGET.get(target)
    if defaults is None:
        raise ValueError(f"Unknown token target: {target!r}")
    colors = colors or []
    tokens: dict[str, str] = {}
    for i, (role, fallback) in enumerate(defaults.items()):
        value = colors[i] if i < len(colors) else None
        tokens[role] = value if is_valid_hex(value) else fallback
    if target == "ui":
        tokens.update(UI_SURFACE_TOKENS)
    return tokens
