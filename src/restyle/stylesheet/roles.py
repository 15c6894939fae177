"""Structural roles of the demo page and the selectors that reach them.

Selectors here are relative; the emitter prefixes each one with the scope.
Card roots are matched with a compound class selector because the base card
component is only identifiable by its utility classes.
"""

from __future__ import annotations

DEFAULT_SCOPE = "html:root body"

# Element id of the <style> block the caller injects output into.
DEFAULT_INJECTION_ID = "dynamic-styles"

ROLE_SELECTORS: dict[str, tuple[str, ...]] = {
    "page": ("",),
    "section": ("section",),
    "heading": ("h1", "h2", "h3", "h4"),
    "text": ("p",),
    "muted": (".text-muted-foreground",),
    "card": (".rounded-lg.border", ".card"),
    "card-body": (".rounded-lg.border > div", ".card > div"),
    "button": ("button", ".btn"),
    "button-hover": ("button:hover", ".btn:hover"),
    "button-focus": ("button:focus-visible", ".btn:focus-visible"),
    "control": ("input", "textarea", "select"),
    "control-focus": ("input:focus", "textarea:focus", "select:focus"),
    "placeholder": ("input::placeholder", "textarea::placeholder"),
    "label": ("label",),
    "link": ("a",),
}

# Roles a usable stylesheet must style.
REQUIRED_ROLES: tuple[str, ...] = ("page", "heading", "card", "button", "control")


def scoped(scope: str, selector: str) -> str:
    if not selector:
        return scope
    return f"{scope} {selector}"


def role_selectors(role: str, scope: str = DEFAULT_SCOPE) -> tuple[str, ...]:
    return tuple(scoped(scope, s) for s in ROLE_SELECTORS[role])
