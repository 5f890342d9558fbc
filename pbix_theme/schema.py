"""
Records shared across the engine: a palette entry (Color) and an ordered Palette
with optional theme metadata. Values only; every transformation returns new data.
"""
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Color:
    """One palette entry. locked and id are passed through untouched by the engine."""

    hex: str
    locked: bool = False
    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"hex": self.hex, "locked": self.locked, "id": self.id}


@dataclass
class Palette:
    """
    Ordered colors plus optional metadata. Index 0 is the nominal primary source.
    Field names follow the palette JSON consumed by the CLI
    ({name?, colors, background?, foreground?, tableAccent?}).
    """

    colors: list[str] = field(default_factory=list)
    name: str | None = None
    background: str | None = None
    foreground: str | None = None
    table_accent: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Palette":
        raw = data.get("colors") or []
        colors = [c.get("hex", "") if isinstance(c, dict) else c for c in raw]
        return cls(
            colors=list(colors),
            name=data.get("name"),
            background=data.get("background"),
            foreground=data.get("foreground"),
            table_accent=data.get("tableAccent"),
        )

    @classmethod
    def from_colors(cls, colors: list[Color], name: str | None = None) -> "Palette":
        return cls(colors=[c.hex for c in colors], name=name)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"colors": list(self.colors)}
        if self.name is not None:
            d["name"] = self.name
        if self.background is not None:
            d["background"] = self.background
        if self.foreground is not None:
            d["foreground"] = self.foreground
        if self.table_accent is not None:
            d["tableAccent"] = self.table_accent
        return d
