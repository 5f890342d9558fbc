"""
Basic theme checks run before handing a document to the strict external schema
validator. Returns error strings; an empty list means the basics pass.
"""
import re
from typing import Any

_STRICT_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def validate_theme(theme: Any) -> list[str]:
    errors: list[str] = []
    if not isinstance(theme, dict):
        return ["theme must be a JSON object"]
    data_colors = theme.get("dataColors")
    if not isinstance(data_colors, list) or not data_colors:
        errors.append("dataColors must be a non-empty array")
        data_colors = data_colors if isinstance(data_colors, list) else []
    if not theme.get("background"):
        errors.append("background is missing")
    if not theme.get("foreground"):
        errors.append("foreground is missing")
    for i, c in enumerate(data_colors):
        if not isinstance(c, str) or not _STRICT_HEX_RE.match(c):
            errors.append(f"dataColors[{i}] ({c}) is not a valid hex color")
    return errors
