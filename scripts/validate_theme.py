#!/usr/bin/env python3
"""
CLI: Basic checks on a generated theme JSON (non-empty #rrggbb dataColors, background,
foreground). Exit 0 pass, 2 unreadable input, 3 check failure.
Usage:
  python scripts/validate_theme.py out/theme.json
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json

from pbix_theme.theme import validate_theme


def main() -> int:
    parser = argparse.ArgumentParser(description="Run basic checks on a theme JSON file.")
    parser.add_argument("theme", type=Path, help="Theme JSON file.")
    args = parser.parse_args()

    try:
        with open(args.theme, encoding="utf-8") as f:
            theme = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read theme {args.theme}: {e}", file=sys.stderr)
        return 2

    errors = validate_theme(theme)
    if errors:
        print("Validation failed:", file=sys.stderr)
        for err in errors:
            print(f" - {err}", file=sys.stderr)
        return 3
    print("Theme looks valid (basic checks passed).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
