"""Stylesheet emitter: serialize a ResolvedStyle into scoped style rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from restyle.errors import StylesheetParseError
from restyle.model.style import ResolvedStyle, StyleDescriptor
from restyle.stylesheet.parser import parse_stylesheet
from restyle.stylesheet.roles import DEFAULT_SCOPE, role_selectors

__all__ = ["COLOR_PROPERTIES", "EmitOptions", "ImportantPolicy", "emit"]


class ImportantPolicy(StrEnum):
    """Which declarations may carry ``!important``."""

    NONE = "none"
    COLORS = "colors"
    ALL = "all"


COLOR_PROPERTIES = frozenset({
    "color",
    "background",
    "background-color",
    "border-color",
})

_FORBIDDEN_IN_SCOPE = ("{", "}", ";", "/*", "*/", ",", "@")


@dataclass(frozen=True)
class EmitOptions:
    scope: str = DEFAULT_SCOPE
    important: ImportantPolicy = ImportantPolicy.NONE
    header: bool = True

    def __post_init__(self) -> None:
        if not self.scope.strip():
            raise ValueError("scope must not be empty")
        for token in _FORBIDDEN_IN_SCOPE:
            if token in self.scope:
                raise ValueError(f"scope must not contain {token!r}: {self.scope!r}")
        try:
            sheet = parse_stylesheet(f"{self.scope} {{}}")
        except StylesheetParseError as exc:
            raise ValueError(f"scope is not a valid selector: {self.scope!r}") from exc
        # Ids are reserved for the injected element and the host page.
        if any(selector.specificity[0] for selector in sheet.selectors):
            raise ValueError(f"scope must not contain an id selector: {self.scope!r}")
        object.__setattr__(self, "important", ImportantPolicy(self.important))


Block = tuple[tuple[str, ...], list[tuple[str, str]]]


def _rem(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return f"{text}rem"


def _border(width: str, style: str, color: str) -> str:
    if not color or width in ("0", "0px"):
        return "none"
    return f"{width} {style} {color}"


def _blocks(d: StyleDescriptor, scope: str) -> list[Block]:
    s = d.spacing
    button_background = d.button_background or d.primary
    card = [
        ("background", d.surface),
        ("color", d.text),
        ("border", _border(d.border_width, d.border_style, d.border_color)),
        ("border-top", d.card_decoration),
        ("border-radius", d.radius),
        ("box-shadow", d.shadow),
        ("backdrop-filter", d.backdrop),
        ("-webkit-backdrop-filter", d.backdrop),
        ("transition", d.transition),
    ]
    return [
        (role_selectors("page", scope), [
            ("background", d.background),
            ("color", d.text),
            ("font-family", d.font_body),
            ("line-height", d.line_height),
        ]),
        (role_selectors("section", scope), [
            ("margin-bottom", _rem(2 * s)),
        ]),
        (role_selectors("heading", scope), [
            ("font-family", d.font_heading),
            ("color", d.heading_color),
            ("font-weight", d.heading_weight),
            ("text-transform", d.heading_transform),
            ("letter-spacing", d.heading_letter_spacing),
            ("text-shadow", d.heading_shadow),
        ]),
        (role_selectors("text", scope), [
            ("color", d.text),
            ("line-height", d.line_height),
        ]),
        (role_selectors("muted", scope), [
            ("color", d.muted),
        ]),
        (role_selectors("card", scope), card),
        (role_selectors("card-body", scope), [
            ("padding", _rem(1.5 * s)),
        ]),
        (role_selectors("button", scope), [
            ("background", button_background),
            ("color", d.on_primary),
            ("border", d.button_border),
            ("border-radius", d.button_radius or d.radius),
            ("font-family", d.font_heading),
            ("text-transform", d.button_transform),
            ("letter-spacing", d.button_letter_spacing),
            ("box-shadow", d.button_shadow),
            ("padding", f"{_rem(0.5 * s)} {_rem(1.25 * s)}"),
            ("transition", d.transition),
            ("cursor", "pointer"),
        ]),
        (role_selectors("button-hover", scope), [
            ("background", d.primary_hover),
            ("color", d.on_primary),
        ]),
        (role_selectors("button-focus", scope), [
            ("outline", "none"),
            ("box-shadow", d.focus_ring),
        ]),
        (role_selectors("control", scope), [
            ("background", d.control_background),
            ("color", d.control_text),
            ("border", _border(d.border_width, "solid", d.control_border)),
            ("border-radius", d.radius),
            ("font-family", d.font_body),
            ("padding", f"{_rem(0.5 * s)} {_rem(0.75 * s)}"),
        ]),
        (role_selectors("control-focus", scope), [
            ("outline", "none"),
            ("border-color", d.accent),
            ("box-shadow", d.focus_ring),
        ]),
        (role_selectors("placeholder", scope), [
            ("color", d.muted),
        ]),
        (role_selectors("label", scope), [
            ("color", d.text),
            ("font-family", d.font_heading),
            ("font-weight", "600"),
        ]),
        (role_selectors("link", scope), [
            ("color", d.link),
        ]),
    ]


def _needs_important(prop: str, policy: ImportantPolicy) -> bool:
    if policy is ImportantPolicy.ALL:
        return True
    if policy is ImportantPolicy.COLORS:
        return prop in COLOR_PROPERTIES
    return False


def _header(style: ResolvedStyle) -> str:
    tags = ",".join(style.tags.names()) or "none"
    parts = [f"template={style.template}", f"tags={tags}"]
    if style.hue_override:
        parts.append(f"hue={style.hue_override}")
    return f"/* restyle: {'; '.join(parts)} */"


def emit(style: ResolvedStyle, options: EmitOptions | None = None) -> str:
    """Serialize *style* into a self-contained stylesheet.

    Output depends only on *style* and *options*, so repeated calls produce
    byte-identical text. Declarations with empty values are skipped.
    """
    options = options or EmitOptions()
    chunks: list[str] = []
    if options.header:
        chunks.append(_header(style))

    for selectors, declarations in _blocks(style.descriptor, options.scope):
        lines = []
        for prop, value in declarations:
            if not value:
                continue
            suffix = " !important" if _needs_important(prop, options.important) else ""
            lines.append(f"  {prop}: {value}{suffix};")
        if not lines:
            continue
        chunks.append(",\n".join(selectors) + " {\n" + "\n".join(lines) + "\n}")

    return "\n\n".join(chunks) + "\n"
