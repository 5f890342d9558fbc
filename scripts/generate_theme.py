#!/usr/bin/env python3
"""
CLI: Turn a palette JSON file into a report theme JSON.
Usage:
  python scripts/generate_theme.py samples/palette.json
  python scripts/generate_theme.py palette.json out/theme.json
  python scripts/generate_theme.py palette.json out/theme.json --visuals --mapping overrides.yaml
  python scripts/generate_theme.py palette.json out/theme.json --semantic --css --out-dir out/
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json
import logging

from pbix_theme.config import get_output_dir, load_config
from pbix_theme.css import palette_to_css
from pbix_theme.schema import Palette
from pbix_theme.theme import OverrideTableError, assemble_theme, load_override_table, merge_style_overrides
from pbix_theme.tokens import map_semantic_tokens
from pbix_theme.workflow_utils import log_structured, setup_logging

logger = logging.getLogger(__name__)


def _write_json(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate a report theme JSON from a palette JSON ({name?, colors, background?, foreground?, tableAccent?})."
    )
    parser.add_argument("palette", type=Path, help="Input palette JSON file.")
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="Output theme JSON file (default: <output.dir>/theme.json from config).",
    )
    parser.add_argument(
        "--visuals",
        action="store_true",
        default=None,
        help="Include per-visual styling (visualStyles).",
    )
    parser.add_argument(
        "--mapping",
        type=Path,
        default=None,
        help="Override table (JSON or YAML) merged into visualStyles.",
    )
    parser.add_argument(
        "--semantic",
        action="store_true",
        help="Also write semantic tokens to a separate JSON file.",
    )
    parser.add_argument(
        "--css",
        action="store_true",
        help="Also write CSS variables to a separate file.",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Directory for the --semantic / --css files (default: output file's directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(config.get("logging", {}).get("level", "INFO"))
    theme_cfg = config.get("theme", {})
    out_cfg = config.get("output", {})

    if not args.palette.exists():
        logger.error("Palette file not found: %s", args.palette)
        return 2
    try:
        with open(args.palette, encoding="utf-8") as f:
            palette = Palette.from_dict(json.load(f))
    except (OSError, json.JSONDecodeError, AttributeError) as e:
        logger.error("Cannot read palette %s: %s", args.palette, e)
        return 2

    palette.name = palette.name or theme_cfg.get("name")
    palette.background = palette.background or theme_cfg.get("background")
    palette.foreground = palette.foreground or theme_cfg.get("foreground")
    output = args.output or get_output_dir(config) / "theme.json"
    include_visuals = args.visuals if args.visuals is not None else bool(theme_cfg.get("include_visual_styles"))

    theme = assemble_theme(palette, include_visual_styles=include_visuals)

    if args.mapping:
        try:
            merge_style_overrides(theme, load_override_table(args.mapping))
            print(f"Merged visual mapping from {args.mapping}")
        except OverrideTableError as e:
            log_structured("error", event="mapping_failed", mapping=str(args.mapping), error=str(e))

    out_dir = args.out_dir or output.parent
    if args.semantic:
        tokens_path = out_dir / out_cfg.get("tokens_filename", "semantic.tokens.json")
        _write_json(tokens_path, map_semantic_tokens(palette.colors))
        print(f"Wrote semantic tokens to {tokens_path}")
    if args.css:
        css_path = out_dir / out_cfg.get("css_filename", "theme.vars.css")
        _write_text(css_path, palette_to_css(palette))
        print(f"Wrote CSS variables to {css_path}")

    _write_json(output, theme)
    print(f"Wrote theme to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
