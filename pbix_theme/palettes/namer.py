"""
Deterministic palette namer.

Seed: DJB2 over the concatenated lowercase hex strings (order-sensitive).
Theme: first classifier tag in THEME_PRIORITY picks one word bank (banks are never mixed).
Words: adjective = bank[(seed + 17) % len], noun = bank[(seed + 91) % len].
Suffixes: extra words appended under fixed seed-modulo conditions tied to tags.
All salts, moduli and word lists are part of the output contract; changing any of them
renames every palette.
"""
from ..colors.utils import InvalidColorError, normalize_hex
from .classifier import classify_palette

DJB2_INIT = 5381
ADJECTIVE_SALT = 17
NOUN_SALT = 91
PASTEL_SUFFIX_SALT = 53
CONTRAST_SUFFIX_SALT = 131

# (tag, bank) in selection priority; "cool" is the default bank
THEME_PRIORITY: tuple[tuple[str, str], ...] = (
    ("pastels", "pastel"),
    ("reds", "reds"),
    ("blues", "blues"),
    ("greens", "greens"),
    ("dark", "dark"),
    ("light", "light"),
    ("neutrals", "neutrals"),
    ("warm", "warm"),
)
DEFAULT_BANK = "cool"

WORD_BANKS: dict[str, dict[str, list[str]]] = {
    "pastel": {
        "adjectives": ["Soft", "Powder", "Dreamy", "Gentle", "Milky", "Whisper", "Cotton", "Blush"],
        "nouns": ["Meadow", "Petal", "Cloud", "Sorbet", "Macaron", "Breeze", "Blossom", "Lullaby"],
    },
    "reds": {
        "adjectives": ["Crimson", "Scarlet", "Ember", "Ruby", "Blazing", "Cardinal", "Molten", "Fiery"],
        "nouns": ["Flame", "Rose", "Sunset", "Garnet", "Lantern", "Cherry", "Poppy", "Furnace"],
    },
    "blues": {
        "adjectives": ["Azure", "Cobalt", "Tidal", "Glacial", "Sapphire", "Midnight", "Arctic", "Coastal"],
        "nouns": ["Lagoon", "Harbor", "Tide", "Horizon", "Reef", "Fjord", "Current", "Sky"],
    },
    "greens": {
        "adjectives": ["Verdant", "Mossy", "Emerald", "Fern", "Wild", "Jade", "Lush", "Sage"],
        "nouns": ["Forest", "Grove", "Canopy", "Meadow", "Thicket", "Valley", "Orchard", "Glade"],
    },
    "dark": {
        "adjectives": ["Shadow", "Obsidian", "Nocturne", "Ink", "Smoky", "Velvet", "Onyx", "Dusky"],
        "nouns": ["Night", "Eclipse", "Abyss", "Cavern", "Raven", "Void", "Shade", "Nebula"],
    },
    "light": {
        "adjectives": ["Bright", "Luminous", "Airy", "Radiant", "Pearl", "Ivory", "Glowing", "Silver"],
        "nouns": ["Daybreak", "Halo", "Dawn", "Morning", "Glow", "Lantern", "Prism", "Shore"],
    },
    "neutrals": {
        "adjectives": ["Stone", "Muted", "Quiet", "Slate", "Ashen", "Linen", "Pebble", "Urban"],
        "nouns": ["Concrete", "Canvas", "Driftwood", "Granite", "Studio", "Atelier", "Paper", "Clay"],
    },
    "warm": {
        "adjectives": ["Golden", "Amber", "Sunny", "Toasted", "Honeyed", "Spiced", "Copper", "Autumn"],
        "nouns": ["Harvest", "Desert", "Terracotta", "Saffron", "Bonfire", "Canyon", "Marigold", "Sunrise"],
    },
    "cool": {
        "adjectives": ["Frosted", "Misty", "Serene", "Crisp", "Polar", "Breezy", "Moonlit", "Silent"],
        "nouns": ["Glacier", "Aurora", "Mist", "Tundra", "Orbit", "Drift", "Lake", "Frost"],
    },
}

PASTEL_SUFFIXES = ["Dream", "Haze", "Bloom"]
CONTRAST_SUFFIXES = ["Pop", "Punch", "Spark"]


def djb2(text: str) -> int:
    """32-bit unsigned DJB2: h = h * 33 + ord(ch), starting at 5381."""
    h = DJB2_INIT
    for ch in text:
        h = ((h << 5) + h + ord(ch)) & 0xFFFFFFFF
    return h


def palette_seed(colors: list[str]) -> int:
    """Seed over canonical lowercase hex; unparseable entries contribute their raw lowercase text."""
    parts = []
    for c in colors:
        try:
            parts.append(normalize_hex(c))
        except InvalidColorError:
            parts.append(str(c).strip().lower())
    return djb2("".join(parts))


def select_bank(tags: list[str]) -> str:
    tag_set = set(tags)
    for tag, bank in THEME_PRIORITY:
        if tag in tag_set:
            return bank
    return DEFAULT_BANK


def generate_palette_name(colors: list[str], tags: list[str] | None = None) -> str:
    """
    Two to four word name, stable for a given color order. tags defaults to
    classify_palette(colors); pass precomputed tags to avoid classifying twice.
    """
    colors = list(colors or [])
    if tags is None:
        tags = classify_palette(colors)
    seed = palette_seed(colors)
    bank = WORD_BANKS[select_bank(tags)]
    adjectives = bank["adjectives"]
    nouns = bank["nouns"]
    words = [
        adjectives[(seed + ADJECTIVE_SALT) % len(adjectives)],
        nouns[(seed + NOUN_SALT) % len(nouns)],
    ]
    if "pastels" in tags and seed % 3 == 0:
        words.append(PASTEL_SUFFIXES[(seed + PASTEL_SUFFIX_SALT) % len(PASTEL_SUFFIXES)])
    if "high-contrast" in tags and seed % 5 == 0:
        words.append(CONTRAST_SUFFIXES[(seed + CONTRAST_SUFFIX_SALT) % len(CONTRAST_SUFFIXES)])
    return " ".join(words)
