from restyle.stylesheet.emitter import COLOR_PROPERTIES, EmitOptions, ImportantPolicy, emit
from restyle.stylesheet.model import Declaration, Selector, Stylesheet, StyleRule, compute_specificity
from restyle.stylesheet.parser import parse_stylesheet
from restyle.stylesheet.roles import (
    DEFAULT_INJECTION_ID,
    DEFAULT_SCOPE,
    REQUIRED_ROLES,
    ROLE_SELECTORS,
    role_selectors,
)

__all__ = [
    "COLOR_PROPERTIES",
    "DEFAULT_INJECTION_ID",
    "DEFAULT_SCOPE",
    "Declaration",
    "EmitOptions",
    "ImportantPolicy",
    "REQUIRED_ROLES",
    "ROLE_SELECTORS",
    "Selector",
    "StyleRule",
    "Stylesheet",
    "compute_specificity",
    "emit",
    "parse_stylesheet",
    "role_selectors",
]
