"""Named colors and the small amount of color math templates need.

Colors are carried as lowercase ``#rrggbb`` strings throughout so that the
emitted text is stable byte for byte.
"""

from __future__ import annotations

# Keys are the hue tag values (``hue:<key>``); multi-word names are hyphenated.
NAMED_COLORS: dict[str, str] = {
    "red": "#c62828",
    "crimson": "#b0102e",
    "scarlet": "#e0301e",
    "burgundy": "#7a1f2b",
    "maroon": "#800000",
    "orange": "#ef6c00",
    "amber": "#ffb300",
    "gold": "#c9a227",
    "yellow": "#f9d71c",
    "lime": "#7cb342",
    "green": "#2e7d32",
    "dark-green": "#1b4d2b",
    "hunter-green": "#355e3b",
    "forest-green": "#228b22",
    "emerald": "#2e8b57",
    "mint": "#3eb489",
    "olive": "#6b7a2a",
    "sage": "#87a96b",
    "teal": "#00807f",
    "turquoise": "#1fb5ad",
    "cyan": "#00acc1",
    "sky-blue": "#4aa8e0",
    "light-blue": "#64b5f6",
    "blue": "#1e63d6",
    "dark-blue": "#0d2c6b",
    "royal-blue": "#2b50c8",
    "navy": "#1a2a5a",
    "indigo": "#3f3aa8",
    "purple": "#6a1b9a",
    "violet": "#7e57c2",
    "lavender": "#9b87d6",
    "magenta": "#c2185b",
    "pink": "#e86a9a",
    "hot-pink": "#ff3d8b",
    "rose": "#d4506e",
    "coral": "#f26b5b",
    "salmon": "#f08a6c",
    "brown": "#6d4c41",
    "chocolate": "#5a3521",
    "tan": "#b08d64",
    "beige": "#c8b48f",
    "cream": "#d9c7a0",
    "black": "#111111",
    "charcoal": "#2f3437",
    "gray": "#6b7280",
    "silver": "#9ea7b3",
    "white": "#f5f5f5",
}

WHITE = "#ffffff"
BLACK = "#000000"
INK = "#111111"


def parse_hex(color: str) -> tuple[int, int, int]:
    """Parse ``#rgb`` or ``#rrggbb`` into an RGB triple."""
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def to_hex(rgb: tuple[float, float, float]) -> str:
    r, g, b = (max(0, min(255, round(c))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def mix(a: str, b: str, weight: float) -> str:
    """Blend *a* toward *b*; ``weight`` 0 returns *a*, 1 returns *b*."""
    ra, ga, ba = parse_hex(a)
    rb, gb, bb = parse_hex(b)
    return to_hex((
        ra + (rb - ra) * weight,
        ga + (gb - ga) * weight,
        ba + (bb - ba) * weight,
    ))


def lighten(color: str, amount: float) -> str:
    return mix(color, WHITE, amount)


def darken(color: str, amount: float) -> str:
    return mix(color, BLACK, amount)


def alpha(color: str, opacity: float) -> str:
    """Render *color* with the given opacity as an ``rgba()`` value."""
    r, g, b = parse_hex(color)
    return f"rgba({r}, {g}, {b}, {opacity:.2f})"


def luminance(color: str) -> float:
    """WCAG relative luminance in [0, 1]."""

    def channel(c: int) -> float:
        s = c / 255
        return s / 12.92 if s <= 0.03928 else ((s + 0.055) / 1.055) ** 2.4

    r, g, b = (channel(c) for c in parse_hex(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: str, b: str) -> float:
    la, lb = luminance(a), luminance(b)
    hi, lo = max(la, lb), min(la, lb)
    return (hi + 0.05) / (lo + 0.05)


def readable_on(background: str) -> str:
    """Pick near-white or near-black text, whichever contrasts more."""
    if contrast_ratio(background, WHITE) >= contrast_ratio(background, INK):
        return WHITE
    return INK


def shift_toward_contrast(color: str, background: str, minimum: float = 3.0) -> str:
    """Darken or lighten *color* until it reaches *minimum* contrast on *background*."""
    target = BLACK if luminance(background) > 0.5 else WHITE
    result = color
    step = 0
    while contrast_ratio(result, background) < minimum and step < 10:
        step += 1
        result = mix(color, target, step / 10)
    return result
