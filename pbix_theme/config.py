"""
Load and expose app config (YAML). Used by the CLI scripts for theme defaults, output
locations and log level; the engine functions themselves take explicit arguments.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def _defaults() -> dict[str, Any]:
    return {
        "theme": {
            "name": "Generated theme",
            "background": "#ffffff",
            "foreground": "#000000",
            "include_visual_styles": False,
        },
        "output": {
            "dir": "out",
            "css_filename": "theme.vars.css",
            "tokens_filename": "semantic.tokens.json",
        },
        "logging": {"level": "INFO"},
    }


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve output directory (relative to project root if needed)."""
    out = config.get("output", {})
    d = out.get("dir", "out")
    p = Path(d)
    if not p.is_absolute():
        p = _project_root() / p
    return p
