"""Style model: template parameters, built descriptors, and resolved styles."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from enum import StrEnum
from typing import Any

from restyle.model.tags import StyleTag, TagSet


class Scheme(StrEnum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class TemplateParams:
    """The small parameter set every template is a function of."""

    primary: str  # hex color
    accent: str  # hex color
    radius: str  # CSS length
    font: str  # font stack
    density: float = 1.0  # spacing multiplier
    scheme: Scheme = Scheme.LIGHT

    def with_overrides(self, **changes: Any) -> TemplateParams:
        return replace(self, **changes)


PARAM_NAMES = frozenset(f.name for f in fields(TemplateParams))

# Params that follow the structurally winning template.
STRUCTURAL_PARAMS = frozenset({"radius", "font", "density", "scheme"})


@dataclass(frozen=True)
class StyleDescriptor:
    """Concrete visual properties produced by one template build.

    Values are CSS value strings. An empty string means "leave the base
    style alone" and the emitter skips the declaration.
    """

    # page
    background: str
    text: str
    muted: str
    font_body: str
    font_heading: str
    line_height: str = "1.6"

    # headings
    heading_color: str = ""
    heading_weight: str = "700"
    heading_transform: str = "none"
    heading_letter_spacing: str = "normal"
    heading_shadow: str = ""

    # cards
    surface: str = ""
    border_color: str = ""
    border_width: str = "1px"
    border_style: str = "solid"
    radius: str = "0.5rem"
    shadow: str = "none"
    backdrop: str = ""
    card_decoration: str = ""  # border-top value

    # buttons
    button_background: str = ""  # falls back to primary
    primary: str = ""
    on_primary: str = ""
    primary_hover: str = ""
    button_radius: str = ""
    button_border: str = "none"
    button_transform: str = "none"
    button_shadow: str = "none"
    button_letter_spacing: str = "normal"

    # form controls
    control_background: str = ""
    control_border: str = ""
    control_text: str = ""
    focus_ring: str = ""

    # links and accents
    accent: str = ""
    link: str = ""

    spacing: float = 1.0  # rem
    transition: str = "all 150ms ease-in-out"


@dataclass(frozen=True)
class ResolvedStyle:
    """The filled-in parameter set chosen for one generation request."""

    template: str
    params: TemplateParams
    descriptor: StyleDescriptor
    tags: TagSet = field(default_factory=TagSet)
    contributors: tuple[str, ...] = ()  # combinable templates that supplied params
    shadowed: tuple[str, ...] = ()  # matched templates that lost structurally
    discarded: tuple[StyleTag, ...] = ()  # hue tags that lost the tie-break
    hue_override: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "template": self.template,
            "tags": list(self.tags.names()),
            "params": asdict(self.params),
            "contributors": list(self.contributors),
            "shadowed": list(self.shadowed),
            "discarded": [t.name for t in self.discarded],
            "hue_override": self.hue_override,
        }
