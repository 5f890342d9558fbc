"""
Palette discovery: fixed presets, normalization of palette-provider feed payloads into
{id, title, author, colors} records, and tag/category browsing over those records.
Fetching the feeds is left to the caller; everything here works on already-loaded data.
"""
import logging
from typing import Any

from .classifier import TAG_VOCABULARY, classify_palette
from .namer import generate_palette_name

logger = logging.getLogger(__name__)

MIN_PROVIDER_COLORS = 3
MAX_PROVIDER_RECORDS = 36

PRESET_PALETTES: list[dict[str, Any]] = [
    {"title": "Ocean Sunset", "colors": ["#264653", "#2A9D8F", "#E9C46A", "#F4A261", "#E76F51"]},
    {"title": "Deep Blue", "colors": ["#0D1B2A", "#1B263B", "#415A77", "#778DA9", "#E0E1DD"]},
    {"title": "Neon Pop", "colors": ["#F72585", "#7209B7", "#3A0CA3", "#4361EE", "#4CC9F0"]},
    {"title": "Dusty Rose", "colors": ["#22223B", "#4A4E69", "#9A8C98", "#C9ADA7", "#F2E9E4"]},
    {"title": "Minimal Red", "colors": ["#2B2D42", "#8D99AE", "#EDF2F4", "#EF233C", "#D90429"]},
    {"title": "Happy Day", "colors": ["#073B4C", "#118AB2", "#06D6A0", "#FFD166", "#EF476F"]},
    {"title": "Cool Night", "colors": ["#0B132B", "#1C2541", "#3A506B", "#5BC0BE", "#6FFFE9"]},
    {"title": "Pastel Warm", "colors": ["#F6BD60", "#F7EDE2", "#F5CAC3", "#84A59D", "#F28482"]},
]

_TAG_LABELS: dict[str, str] = {
    "dark": "Dark",
    "light": "Light",
    "warm": "Warm",
    "cool": "Cool",
    "blues": "Blues",
    "reds": "Reds",
    "greens": "Greens",
    "pastels": "Pastels",
    "neutrals": "Neutrals",
    "high-contrast": "High Contrast",
}

# (id, label) in display order; "all" disables filtering
CATEGORIES: list[tuple[str, str]] = [("all", "All")] + [
    (tag, _TAG_LABELS[tag])
    for tag in ("dark", "light", "warm", "cool", "blues", "reds", "greens", "pastels", "neutrals", "high-contrast")
]

PROVIDERS: tuple[str, ...] = ("colourlovers", "lospec")


def _prefix_hash(colors: list[Any]) -> list[str]:
    return [f"#{str(h).lstrip('#')}" for h in colors]


def _usable(item: Any) -> bool:
    return isinstance(item, dict) and isinstance(item.get("colors"), list) and len(item["colors"]) >= MIN_PROVIDER_COLORS


def _from_colourlovers(payload: list[Any]) -> list[dict[str, Any]]:
    records = []
    for p in [p for p in payload if _usable(p)][:MAX_PROVIDER_RECORDS]:
        records.append({
            "id": str(p.get("id", "")),
            "title": p.get("title") or "Untitled",
            "author": p.get("userName") or "Unknown",
            "colors": _prefix_hash(p["colors"]),
            "stats": {
                "views": p.get("numViews") or 0,
                "votes": p.get("numVotes") or 0,
                "comments": p.get("numComments") or 0,
                "rank": p.get("rank") or 0,
            },
        })
    return records


def _from_lospec(payload: list[Any]) -> list[dict[str, Any]]:
    records = []
    for idx, p in enumerate([p for p in payload if _usable(p)][:MAX_PROVIDER_RECORDS]):
        name = p.get("name") or ""
        records.append({
            "id": f"lospec-{idx}-{name}"[:60],
            "title": name or "Untitled",
            "author": p.get("author") or "Lospec",
            "colors": _prefix_hash(p["colors"]),
        })
    return records


def normalize_provider_records(provider: str, payload: Any) -> list[dict[str, Any]]:
    """
    Map a provider feed payload (already decoded JSON) to palette records.
    Records with fewer than 3 colors are dropped and at most 36 are kept; colors
    gain a leading '#'. A payload that is not a list yields [].
    """
    if provider not in PROVIDERS:
        raise ValueError(f"Unknown palette provider: {provider!r}")
    if not isinstance(payload, list):
        logger.warning("Provider %s payload is %s, expected a list, no records", provider, type(payload).__name__)
        return []
    if provider == "colourlovers":
        return _from_colourlovers(payload)
    return _from_lospec(payload)


def tag_palettes(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Copies of records with "tags" (classifier) and "name" (namer) attached."""
    tagged = []
    for rec in records:
        colors = list(rec.get("colors") or [])
        tags = classify_palette(colors)
        tagged.append({**rec, "tags": tags, "name": generate_palette_name(colors, tags)})
    return tagged


def filter_by_category(records: list[dict[str, Any]], category: str) -> list[dict[str, Any]]:
    """Records whose tags include category; "all" keeps everything."""
    if category == "all":
        return list(records)
    if category not in TAG_VOCABULARY:
        raise ValueError(f"Unknown category: {category!r}")
    return [r for r in records if category in (r.get("tags") or [])]


def fallback_presets() -> list[dict[str, Any]]:
    """Tagged preset records, used when no provider feed is available."""
    records = [
        {"id": f"preset-{i}", "title": p["title"], "colors": list(p["colors"])}
        for i, p in enumerate(PRESET_PALETTES)
    ]
    return tag_palettes(records)
