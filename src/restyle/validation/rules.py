"""Validation rules for generated stylesheets.

Each rule is a function taking a Stylesheet and a ValidationPolicy and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from dataclasses import dataclass

from restyle.model.diagnostic import Diagnostic, Severity
from restyle.stylesheet.emitter import COLOR_PROPERTIES, ImportantPolicy
from restyle.stylesheet.model import Specificity, Stylesheet
from restyle.stylesheet.roles import (
    DEFAULT_INJECTION_ID,
    DEFAULT_SCOPE,
    REQUIRED_ROLES,
    role_selectors,
)

# Value fragments that would make the stylesheet depend on something outside itself.
EXTERNAL_REFERENCES = ("url(", "@import", "expression(", "://", "image-set(")


@dataclass(frozen=True)
class ValidationPolicy:
    """What a stylesheet must satisfy to be injected."""

    scope: str = DEFAULT_SCOPE
    injection_id: str = DEFAULT_INJECTION_ID
    important: ImportantPolicy = ImportantPolicy.NONE
    min_specificity: Specificity = (0, 1, 1)


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_not_empty(sheet: Stylesheet, policy: ValidationPolicy) -> list[Diagnostic]:
    """At least one rule with at least one declaration."""
    if any(rule.declarations for rule in sheet.rules):
        return []
    return [
        Diagnostic(
            rule="check_not_empty",
            severity=Severity.ERROR,
            message="Stylesheet has no declarations.",
            fix="Fall back to the default template's stylesheet.",
        )
    ]


def check_self_contained(sheet: Stylesheet, policy: ValidationPolicy) -> list[Diagnostic]:
    """No declaration may reference an external resource."""
    diagnostics: list[Diagnostic] = []
    for rule in sheet.rules:
        for decl in rule.declarations:
            lowered = decl.value.lower()
            for fragment in EXTERNAL_REFERENCES:
                if fragment in lowered:
                    diagnostics.append(
                        Diagnostic(
                            rule="check_self_contained",
                            severity=Severity.ERROR,
                            message=f"Value references an external resource ({fragment!r}).",
                            selector=rule.selector_text,
                            prop=decl.prop,
                            fix="Use gradients or colors instead of external resources.",
                        )
                    )
                    break
    return diagnostics


def check_injection_id_untargeted(
    sheet: Stylesheet, policy: ValidationPolicy
) -> list[Diagnostic]:
    """Rules must not target the element the stylesheet is injected into."""
    diagnostics: list[Diagnostic] = []
    for selector in sheet.selectors:
        if selector.targets_id(policy.injection_id):
            diagnostics.append(
                Diagnostic(
                    rule="check_injection_id_untargeted",
                    severity=Severity.ERROR,
                    message=f"Selector targets the injection element #{policy.injection_id}.",
                    selector=selector.text,
                    fix="Target page roles, not the style element.",
                )
            )
    return diagnostics


def check_specificity_floor(sheet: Stylesheet, policy: ValidationPolicy) -> list[Diagnostic]:
    """Every selector must reach the policy's minimum specificity."""
    diagnostics: list[Diagnostic] = []
    for selector in sheet.selectors:
        if selector.specificity < policy.min_specificity:
            diagnostics.append(
                Diagnostic(
                    rule="check_specificity_floor",
                    severity=Severity.ERROR,
                    message=(
                        f"Specificity {selector.specificity} is below the required "
                        f"{policy.min_specificity}."
                    ),
                    selector=selector.text,
                    fix=f"Prefix the selector with the scope {policy.scope!r}.",
                )
            )
    return diagnostics


def check_important_policy(sheet: Stylesheet, policy: ValidationPolicy) -> list[Diagnostic]:
    """``!important`` only where the policy allows it."""
    if policy.important is ImportantPolicy.ALL:
        return []
    diagnostics: list[Diagnostic] = []
    for rule in sheet.rules:
        for decl in rule.declarations:
            if not decl.important:
                continue
            if policy.important is ImportantPolicy.COLORS and decl.prop in COLOR_PROPERTIES:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_important_policy",
                    severity=Severity.ERROR,
                    message=f"!important is not allowed under policy {policy.important.value!r}.",
                    selector=rule.selector_text,
                    prop=decl.prop,
                    fix="Raise specificity through the scope instead.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Coverage rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_required_roles(sheet: Stylesheet, policy: ValidationPolicy) -> list[Diagnostic]:
    """Each required page role should be styled by some rule."""
    present = {s.text for s in sheet.selectors}
    diagnostics: list[Diagnostic] = []
    for role in REQUIRED_ROLES:
        if not present.intersection(role_selectors(role, policy.scope)):
            diagnostics.append(
                Diagnostic(
                    rule="check_required_roles",
                    severity=Severity.WARNING,
                    message=f"No rule styles the {role!r} role.",
                    fix=f"Add a rule for {role_selectors(role, policy.scope)[0]!r}.",
                )
            )
    return diagnostics


ALL_RULES = [
    check_not_empty,
    check_self_contained,
    check_injection_id_untargeted,
    check_specificity_floor,
    check_important_policy,
    check_required_roles,
]
