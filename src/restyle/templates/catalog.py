"""Built-in template catalog.

Each template pairs a default parameter set with a build function. Builds
start from :func:`base_descriptor` and override what makes the theme
recognizable, always reading colors, radius, font and density from the params
so that hue tags and combinable moods flow through.
"""

from __future__ import annotations

from dataclasses import replace

from restyle.model.style import Scheme, StyleDescriptor, TemplateParams
from restyle.templates.base import SYSTEM_FONT, Template, TemplateFamily, base_descriptor
from restyle.templates.palette import (
    INK,
    NAMED_COLORS,
    WHITE,
    alpha,
    darken,
    lighten,
    mix,
    readable_on,
)

BAUHAUS_YELLOW = "#f4c20d"


# ---------------------------------------------------------------------------
# Themes
# ---------------------------------------------------------------------------


def _minimal(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    if p.scheme is Scheme.LIGHT:
        d = replace(d, background="#fafafa", border_color="#e5e7eb", control_border="#d1d5db")
    return replace(
        d,
        heading_weight="600",
        heading_letter_spacing="-0.01em",
        shadow="none",
        transition="color 150ms ease, background-color 150ms ease",
    )


def _bauhaus(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    if p.scheme is Scheme.LIGHT:
        d = replace(d, background="#f5f1e6", text=INK, heading_color=INK)
    return replace(
        d,
        heading_transform="uppercase",
        heading_letter_spacing="0.08em",
        heading_weight="800",
        border_color=INK if p.scheme is Scheme.LIGHT else WHITE,
        border_width="3px",
        shadow=f"6px 6px 0 {p.accent}",
        card_decoration=f"0.5rem solid {BAUHAUS_YELLOW}",
        button_border=f"3px solid {INK}",
        button_transform="uppercase",
        button_letter_spacing="0.06em",
        button_shadow=f"4px 4px 0 {INK}",
        control_border=INK if p.scheme is Scheme.LIGHT else WHITE,
        focus_ring=f"0 0 0 3px {BAUHAUS_YELLOW}",
        transition="transform 120ms linear",
    )


def _modern(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    if p.scheme is Scheme.LIGHT:
        d = replace(
            d,
            background=f"linear-gradient(180deg, {lighten(p.primary, 0.94)} 0%, {WHITE} 60%)",
        )
    return replace(
        d,
        heading_letter_spacing="-0.02em",
        heading_weight="700",
        shadow=f"0 10px 30px -12px {alpha(p.primary, 0.35)}",
        border_color=alpha(p.primary, 0.12),
        button_background=f"linear-gradient(135deg, {p.primary} 0%, {p.accent} 100%)",
        button_shadow=f"0 6px 16px -6px {alpha(p.primary, 0.6)}",
        primary_hover=darken(p.primary, 0.1),
        focus_ring=f"0 0 0 3px {alpha(p.accent, 0.45)}",
    )


def _glassy(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    midpoint = mix(p.primary, p.accent, 0.5)
    text = readable_on(midpoint)
    return replace(
        d,
        background=f"linear-gradient(135deg, {p.primary} 0%, {p.accent} 100%) fixed",
        text=text,
        muted=alpha(text, 0.78),
        heading_color=text,
        heading_shadow="0 1px 2px rgba(0, 0, 0, 0.25)",
        surface=alpha(WHITE, 0.18),
        border_color=alpha(WHITE, 0.35),
        shadow="0 8px 32px rgba(31, 38, 135, 0.25)",
        backdrop="blur(14px) saturate(160%)",
        button_background=alpha(WHITE, 0.25),
        on_primary=text,
        primary_hover=alpha(WHITE, 0.38),
        button_border=f"1px solid {alpha(WHITE, 0.5)}",
        button_shadow="inset 0 1px 0 rgba(255, 255, 255, 0.4)",
        control_background=alpha(WHITE, 0.22),
        control_border=alpha(WHITE, 0.45),
        control_text=text,
        focus_ring=f"0 0 0 3px {alpha(WHITE, 0.55)}",
        link=text,
    )


def _retro_gaming(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    base = "#0b0b1a" if p.scheme is Scheme.DARK else lighten(p.primary, 0.9)
    stripe = mix(base, p.primary, 0.06)
    text = mix(WHITE, p.primary, 0.18) if p.scheme is Scheme.DARK else INK
    return replace(
        d,
        background=(
            f"repeating-linear-gradient(0deg, {base} 0px, {base} 2px, "
            f"{stripe} 2px, {stripe} 4px)"
        ),
        text=text,
        muted=mix(text, base, 0.35),
        line_height="1.8",
        heading_color=p.primary if p.scheme is Scheme.DARK else darken(p.primary, 0.4),
        heading_shadow=f"3px 3px 0 {p.accent}",
        heading_transform="uppercase",
        heading_letter_spacing="0.05em",
        surface=mix(base, p.primary, 0.04) if p.scheme is Scheme.DARK else WHITE,
        border_color=p.primary,
        border_width="3px",
        shadow=f"6px 6px 0 {p.accent}",
        button_background=p.primary,
        on_primary=readable_on(p.primary),
        primary_hover=p.accent,
        button_border=f"3px solid {lighten(p.primary, 0.4)}",
        button_transform="uppercase",
        button_shadow=f"4px 4px 0 {darken(p.primary, 0.55)}",
        control_background=base,
        control_border=p.primary,
        control_text=text,
        focus_ring=f"0 0 0 3px {p.accent}",
        link=p.accent,
        transition="none",
    )


def _hue(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    return replace(
        d,
        border_color=mix(p.primary, d.background, 0.55),
        shadow=f"0 2px 10px {alpha(p.primary, 0.15)}",
        card_decoration=f"4px solid {p.primary}",
        control_border=mix(p.primary, d.background, 0.5),
    )


def _festive(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    snow = alpha(WHITE, 0.85) if p.scheme is Scheme.DARK else alpha(p.primary, 0.14)
    ground = darken(p.accent, 0.55) if p.scheme is Scheme.DARK else lighten(p.accent, 0.92)
    return replace(
        d,
        background=f"radial-gradient({snow} 2px, transparent 2.5px) 0 0 / 32px 32px, {ground}",
        heading_color=darken(p.accent, 0.1) if p.scheme is Scheme.LIGHT else lighten(p.primary, 0.5),
        heading_shadow=f"1px 1px 0 {lighten(p.primary, 0.6)}",
        border_color=p.accent,
        border_width="2px",
        shadow=f"0 6px 18px {alpha(p.accent, 0.25)}",
        card_decoration=f"0.4rem dashed {p.primary}",
        button_border=f"2px solid {p.accent}",
        button_shadow=f"0 4px 0 {darken(p.accent, 0.2)}",
        control_border=p.accent,
        link=p.primary if p.scheme is Scheme.LIGHT else lighten(p.primary, 0.4),
    )


# ---------------------------------------------------------------------------
# Moods
# ---------------------------------------------------------------------------


def _friendly(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    return replace(
        d,
        heading_weight="800",
        shadow=f"0 4px 14px {alpha(p.primary, 0.18)}",
        button_radius="9999px",
        button_shadow=f"0 3px 0 {darken(p.primary, 0.2)}",
    )


def _dark(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    return replace(d, shadow="0 1px 3px rgba(0, 0, 0, 0.6)")


def _elegant(p: TemplateParams) -> StyleDescriptor:
    d = base_descriptor(p)
    return replace(
        d,
        heading_weight="600",
        heading_letter_spacing="0.02em",
        border_color=mix(p.accent, d.background, 0.5),
        shadow="0 1px 2px rgba(0, 0, 0, 0.06)",
        card_decoration=f"1px solid {p.accent}",
        button_letter_spacing="0.12em",
        button_transform="uppercase",
        line_height="1.75",
    )


BUILTIN_TEMPLATES: tuple[Template, ...] = (
    Template(
        name="minimal",
        family=TemplateFamily.THEME,
        defaults=TemplateParams(
            primary="#1f2937",
            accent="#2563eb",
            radius="0.375rem",
            font=SYSTEM_FONT,
        ),
        build=_minimal,
        tags=frozenset({"minimalist"}),
        description="Quiet neutral fallback with light borders and no shadows.",
    ),
    Template(
        name="bauhaus",
        family=TemplateFamily.THEME,
        defaults=TemplateParams(
            primary="#d62828",
            accent="#1d4ed8",
            radius="0",
            font='"Futura", "Century Gothic", "Avenir Next", "Helvetica Neue", Arial, sans-serif',
            density=1.1,
        ),
        build=_bauhaus,
        tags=frozenset({"bauhaus"}),
        description="Primary colors, heavy rules, hard offset shadows, geometric type.",
    ),
    Template(
        name="modern",
        family=TemplateFamily.THEME,
        defaults=TemplateParams(
            primary="#4f46e5",
            accent="#06b6d4",
            radius="0.75rem",
            font='"Inter", "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif',
            density=1.05,
        ),
        build=_modern,
        tags=frozenset({"modern"}),
        description="Tech-forward gradients, soft elevation, tight headings.",
    ),
    Template(
        name="glassy",
        family=TemplateFamily.THEME,
        defaults=TemplateParams(
            primary="#5b8def",
            accent="#c084fc",
            radius="1.25rem",
            font='"SF Pro Display", "Segoe UI", "Helvetica Neue", Arial, sans-serif',
            density=1.1,
        ),
        build=_glassy,
        tags=frozenset({"glassy"}),
        description="Frosted translucent surfaces over a vivid gradient.",
    ),
    Template(
        name="retro-gaming",
        family=TemplateFamily.THEME,
        defaults=TemplateParams(
            primary="#39ff14",
            accent="#ff2bd6",
            radius="0",
            font='"Press Start 2P", "VT323", "Courier New", monospace',
            density=1.15,
            scheme=Scheme.DARK,
        ),
        build=_retro_gaming,
        tags=frozenset({"retro-gaming"}),
        description="Arcade scanlines, pixel type, neon borders and hard shadows.",
    ),
    Template(
        name="festive",
        family=TemplateFamily.THEME,
        defaults=TemplateParams(
            primary=NAMED_COLORS["red"],
            accent="#1b5e20",
            radius="0.75rem",
            font='"Mountains of Christmas", Georgia, "Times New Roman", serif',
            density=1.1,
        ),
        build=_festive,
        tags=frozenset({"festive"}),
        description="Holiday red and evergreen with falling snow and stitched card edges.",
    ),
    Template(
        name="hue",
        family=TemplateFamily.HUE,
        defaults=TemplateParams(
            primary=NAMED_COLORS["hunter-green"],
            accent="#b08d57",
            radius="0.5rem",
            font=SYSTEM_FONT,
        ),
        build=_hue,
        description="Monochrome theme built around a single color (hunter green by default).",
    ),
    Template(
        name="friendly",
        family=TemplateFamily.MOOD,
        defaults=TemplateParams(
            primary="#f97316",
            accent="#14b8a6",
            radius="1.25rem",
            font='"Nunito", "Quicksand", "Segoe UI", Roboto, sans-serif',
            density=1.2,
        ),
        build=_friendly,
        tags=frozenset({"friendly"}),
        combinable=True,
        contributes=frozenset({"radius", "density"}),
        description="Rounded, roomy and warm.",
    ),
    Template(
        name="dark",
        family=TemplateFamily.MOOD,
        defaults=TemplateParams(
            primary="#8b5cf6",
            accent="#22d3ee",
            radius="0.5rem",
            font=SYSTEM_FONT,
            scheme=Scheme.DARK,
        ),
        build=_dark,
        tags=frozenset({"dark"}),
        combinable=True,
        contributes=frozenset({"scheme"}),
        description="Dark surfaces with luminous accents.",
    ),
    Template(
        name="elegant",
        family=TemplateFamily.MOOD,
        defaults=TemplateParams(
            primary="#1f2a44",
            accent="#b8860b",
            radius="0.25rem",
            font='"Playfair Display", Didot, "Bodoni MT", Georgia, serif',
            density=1.2,
        ),
        build=_elegant,
        tags=frozenset({"elegant"}),
        combinable=True,
        contributes=frozenset({"font"}),
        description="Serif display type, hairline gold rules, generous leading.",
    ),
)
