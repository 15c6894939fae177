"""Template definition and the scheme-aware descriptor every template starts from."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable

from restyle.model.style import Scheme, StyleDescriptor, TemplateParams
from restyle.templates.palette import (
    INK,
    WHITE,
    alpha,
    darken,
    lighten,
    mix,
    readable_on,
    shift_toward_contrast,
)

Builder = Callable[[TemplateParams], StyleDescriptor]

SYSTEM_FONT = (
    'system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'
)


class TemplateFamily(StrEnum):
    THEME = "theme"
    MOOD = "mood"
    HUE = "hue"


@dataclass(frozen=True)
class Template:
    """A named, immutable style preset.

    ``build`` maps a parameter set to a descriptor; ``defaults`` is the
    parameter set used when nothing overrides it. A combinable template may
    lend the params named in ``contributes`` to a template that outranks it.
    """

    name: str
    family: TemplateFamily
    defaults: TemplateParams
    build: Builder = field(compare=False, repr=False)
    tags: frozenset[str] = frozenset()
    combinable: bool = False
    contributes: frozenset[str] = frozenset()
    description: str = ""

    def render(self, params: TemplateParams | None = None) -> StyleDescriptor:
        return self.build(params or self.defaults)


def base_descriptor(p: TemplateParams) -> StyleDescriptor:
    """Derive a complete, readable descriptor from the params alone."""
    if p.scheme is Scheme.DARK:
        background = mix(darken(p.primary, 0.82), INK, 0.5)
        surface = lighten(background, 0.07)
        text = mix("#eceff4", p.primary, 0.06)
        heading = shift_toward_contrast(lighten(p.primary, 0.55), background, 4.5)
        hover = lighten(p.primary, 0.15)
        border = mix(p.primary, background, 0.65)
    else:
        background = lighten(p.primary, 0.95)
        surface = WHITE
        text = mix(INK, p.primary, 0.12)
        heading = shift_toward_contrast(darken(p.primary, 0.2), background, 4.5)
        hover = darken(p.primary, 0.12)
        border = mix(p.primary, background, 0.78)

    return StyleDescriptor(
        background=background,
        text=text,
        muted=mix(text, background, 0.4),
        font_body=p.font,
        font_heading=p.font,
        heading_color=heading,
        surface=surface,
        border_color=border,
        radius=p.radius,
        primary=p.primary,
        on_primary=readable_on(p.primary),
        primary_hover=hover,
        button_radius=p.radius,
        control_background=surface,
        control_border=border,
        control_text=text,
        focus_ring=f"0 0 0 3px {alpha(p.accent, 0.35)}",
        accent=p.accent,
        link=shift_toward_contrast(p.accent, background, 4.5),
        spacing=round(p.density, 3),
    )
