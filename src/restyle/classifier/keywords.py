"""Static keyword table: phrases mapped to style tags.

Phrases are written in normalized form (lowercase, single spaces, no
punctuation). Hyphenated prompt words arrive split, so ``retro gaming`` also
matches "retro-gaming" and ``tech forward`` matches "tech-forward".
"""

from __future__ import annotations

from restyle.model.tags import StyleTag
from restyle.templates.palette import NAMED_COLORS

_THEME_PHRASES: dict[str, tuple[str, ...]] = {
    "bauhaus": (
        "bauhaus",
        "bauhaus aesthetic",
        "bauhaus aesthetics",
        "constructivist",
        "constructivism",
        "de stijl",
        "mondrian",
        "geometric",
        "mid century modern",
    ),
    "modern": (
        "modern",
        "tech",
        "techy",
        "tech forward",
        "high tech",
        "futuristic",
        "sleek",
        "startup",
        "saas",
        "contemporary",
    ),
    "glassy": (
        "glassy",
        "glass",
        "glassmorphism",
        "reflective",
        "frosted",
        "frosted glass",
        "translucent",
        "shiny",
        "glossy",
    ),
    "retro-gaming": (
        "retro",
        "gaming",
        "retro gaming",
        "arcade",
        "pixel",
        "pixelated",
        "pixel art",
        "8 bit",
        "8bit",
        "16 bit",
        "16bit",
        "video game",
        "video games",
        "nintendo",
        "sega",
    ),
    "festive": (
        "christmas",
        "xmas",
        "festive",
        "holiday",
        "holiday season",
        "noel",
        "yuletide",
        "santa",
        "winter wonderland",
    ),
    "minimalist": (
        "minimal",
        "minimalist",
        "minimalism",
        "clean",
        "simple",
        "plain",
        "understated",
    ),
}

_MOOD_PHRASES: dict[str, tuple[str, ...]] = {
    "friendly": (
        "friendly",
        "approachable",
        "welcoming",
        "warm",
        "playful",
        "fun",
        "cheerful",
        "soft",
    ),
    "dark": (
        "dark",
        "dark mode",
        "dark theme",
        "night",
        "night mode",
        "midnight",
        "moody",
        "noir",
    ),
    "elegant": (
        "elegant",
        "luxury",
        "luxurious",
        "classy",
        "sophisticated",
        "refined",
        "upscale",
    ),
}

# Spellings that differ from the palette key.
_HUE_ALIASES: dict[str, str] = {
    "grey": "gray",
    "dark grey": "gray",
    "navy blue": "navy",
    "forest": "forest-green",
    "hunter": "hunter-green",
    "aqua": "turquoise",
    "fuchsia": "magenta",
    "off white": "cream",
    "ivory": "cream",
    "golden": "gold",
}


def _build_table() -> dict[tuple[str, ...], StyleTag]:
    table: dict[tuple[str, ...], StyleTag] = {}

    def add(phrase: str, tag: StyleTag) -> None:
        key = tuple(phrase.split())
        existing = table.get(key)
        if existing is not None and existing != tag:
            raise ValueError(f"Phrase {phrase!r} maps to both {existing} and {tag}")
        table[key] = tag

    for theme, phrases in _THEME_PHRASES.items():
        for phrase in phrases:
            add(phrase, StyleTag.theme(theme))
    for mood, phrases in _MOOD_PHRASES.items():
        for phrase in phrases:
            add(phrase, StyleTag.mood(mood))
    for color in NAMED_COLORS:
        add(color.replace("-", " "), StyleTag.hue(color))
    for alias, color in _HUE_ALIASES.items():
        add(alias, StyleTag.hue(color))
    return table


KEYWORDS: dict[tuple[str, ...], StyleTag] = _build_table()

MAX_PHRASE_LENGTH = max(len(key) for key in KEYWORDS)
