#!/usr/bin/env python3
"""
CLI: Tag and name palettes, then filter by category.
Reads a saved provider feed (ColourLovers / Lospec JSON) or falls back to the presets.
Usage:
  python scripts/browse_palettes.py
  python scripts/browse_palettes.py --category dark
  python scripts/browse_palettes.py --feed top.json --provider colourlovers --json
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from pbix_theme.palettes import (
    CATEGORIES,
    fallback_presets,
    filter_by_category,
    normalize_provider_records,
    tag_palettes,
)
from pbix_theme.palettes.discovery import PROVIDERS
from pbix_theme.workflow_utils import setup_logging

logger = logging.getLogger(__name__)


def _load_records(feed: Path | None, provider: str) -> tuple[str, list[dict]]:
    if feed is None:
        return "presets", fallback_presets()
    try:
        with open(feed, encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Feed %s unreadable (%s), using presets", feed, e)
        return "presets", fallback_presets()
    records = normalize_provider_records(provider, payload)
    if not records:
        logger.warning("Feed %s had no usable palettes, using presets", feed)
        return "presets", fallback_presets()
    return provider, tag_palettes(records)


def main() -> int:
    parser = argparse.ArgumentParser(description="Tag, name and filter palettes.")
    parser.add_argument("--feed", type=Path, default=None, help="Saved provider feed JSON.")
    parser.add_argument(
        "--provider",
        choices=PROVIDERS,
        default="colourlovers",
        help="Feed format (default: colourlovers).",
    )
    parser.add_argument(
        "--category",
        choices=[c for c, _ in CATEGORIES],
        default="all",
        help="Only show palettes with this tag (default: all).",
    )
    parser.add_argument("--json", action="store_true", help="Print records as JSON.")
    args = parser.parse_args()
    setup_logging("INFO")

    source, records = _load_records(args.feed, args.provider)
    shown = filter_by_category(records, args.category)

    if args.json:
        print(json.dumps({"provider": source, "palettes": shown}, indent=2))
        return 0

    label = dict(CATEGORIES)[args.category]
    print(f"Source: {source}  Category: {label}  ({len(shown)}/{len(records)})")
    if not shown:
        print(f'No palettes match "{label}". Try a different category.')
    for rec in shown:
        author = f" • {rec['author']}" if rec.get("author") else ""
        print(f"  {rec['name']:<28} {rec.get('title') or 'Palette'}{author}")
        print(f"    {' '.join(rec['colors'])}  [{', '.join(rec['tags'])}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
