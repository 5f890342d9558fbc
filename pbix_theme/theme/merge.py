"""
Style merge: layer a user override table onto an assembled theme.

Override table shape: {visualType: {cardName: {propertyName: tokenNameOrColor}}}.
A value naming a semantic token resolves to that token's color; anything else is used
verbatim as a literal color. Each (visual, card, property) appends one
{property: {"solid": {"color": c}}} object to visualStyles[visual]["*"][card].
Existing entries are never replaced, so repeated merges stack.
"""
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..tokens import map_semantic_tokens
from .assembler import property_entry

logger = logging.getLogger(__name__)


class OverrideTableError(ValueError):
    """Override table (or the theme it targets) does not have the expected nested shape."""
    def __init__(self, message: str, path: tuple[str, ...] = ()):
        where = "/".join(path)
        super().__init__(f"{message} (at {where})" if where else message)
        self.path = path


def _check_mapping(value: Any, path: tuple[str, ...], what: str) -> dict:
    if not isinstance(value, dict):
        raise OverrideTableError(f"{what} must be a mapping, got {type(value).__name__}", path)
    for key in value:
        if not isinstance(key, str):
            raise OverrideTableError(f"{what} keys must be strings, got {key!r}", path)
    return value


def _plan_entries(overrides: dict[str, Any], tokens: dict[str, str]) -> list[tuple[str, str, dict[str, Any]]]:
    """Validate the whole table and return the (visual, card, entry) appends in table order."""
    _check_mapping(overrides, (), "override table")
    planned: list[tuple[str, str, dict[str, Any]]] = []
    for visual, cards in overrides.items():
        _check_mapping(cards, (visual,), "visual entry")
        for card, props in cards.items():
            _check_mapping(props, (visual, card), "card entry")
            for prop, value in props.items():
                if not isinstance(value, str) or not value:
                    raise OverrideTableError(
                        f"property value must be a token name or color string, got {value!r}",
                        (visual, card, prop),
                    )
                color = tokens.get(value, value)
                planned.append((visual, card, property_entry(prop, color)))
    return planned


def _check_target(theme: dict[str, Any], planned: list[tuple[str, str, dict[str, Any]]]) -> None:
    """Existing visualStyles levels the merge would append into must be mappings / lists."""
    styles = theme.get("visualStyles")
    if styles is None:
        return
    if not isinstance(styles, dict):
        raise OverrideTableError("theme visualStyles must be a mapping", ("visualStyles",))
    for visual, card, _ in planned:
        vis = styles.get(visual)
        if vis is None:
            continue
        if not isinstance(vis, dict):
            raise OverrideTableError("visual entry must be a mapping", ("visualStyles", visual))
        star = vis.get("*")
        if star is None:
            continue
        if not isinstance(star, dict):
            raise OverrideTableError("'*' entry must be a mapping", ("visualStyles", visual, "*"))
        existing = star.get(card)
        if existing is not None and not isinstance(existing, list):
            raise OverrideTableError("card entry must be a list", ("visualStyles", visual, "*", card))


def merge_style_overrides(
    theme: dict[str, Any],
    overrides: dict[str, Any] | None,
    *,
    tokens: dict[str, str] | None = None,
) -> dict[str, Any]:
    """
    Append override entries into theme (mutated and returned).
    Empty / None overrides return theme untouched. Tokens default to the report
    tokens of theme["dataColors"]. Raises OverrideTableError before any mutation
    when the table or the targeted visualStyles levels are malformed.
    """
    if not overrides:
        return theme
    if tokens is None:
        tokens = map_semantic_tokens(theme.get("dataColors") or [])
    planned = _plan_entries(overrides, tokens)
    _check_target(theme, planned)

    styles = theme.setdefault("visualStyles", {})
    for visual, card, entry in planned:
        cards = styles.setdefault(visual, {}).setdefault("*", {})
        cards.setdefault(card, []).append(entry)
    logger.debug("Merged %d override entries into %d visuals", len(planned), len(overrides))
    return theme


def load_override_table(path: Path | str) -> dict[str, Any]:
    """Read an override table from JSON (.json) or YAML (anything else)."""
    p = Path(path)
    try:
        with open(p, encoding="utf-8") as f:
            if p.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise OverrideTableError(f"cannot read override table {p}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise OverrideTableError(f"cannot parse override table {p}: {e}") from e
    if data is None:
        return {}
    return _check_mapping(data, (), "override table")
