"""Stylesheet validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from restyle.errors import StylesheetValidationError
from restyle.model.diagnostic import Diagnostic
from restyle.stylesheet.model import Stylesheet
from restyle.stylesheet.parser import parse_stylesheet
from restyle.validation.rules import ALL_RULES, ValidationPolicy

RuleFunc = Callable[[Stylesheet, ValidationPolicy], list[Diagnostic]]


def validate(
    sheet: Stylesheet | str,
    policy: ValidationPolicy | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *sheet*.

    Accepts either a parsed Stylesheet or style text; text that does not
    parse raises StylesheetParseError. Returns the full list of diagnostics
    (errors, warnings, info).
    """
    if isinstance(sheet, str):
        sheet = parse_stylesheet(sheet)
    policy = policy or ValidationPolicy()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(sheet, policy))
    return diagnostics


def validate_or_raise(
    sheet: Stylesheet | str,
    policy: ValidationPolicy | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`StylesheetValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(sheet, policy=policy, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise StylesheetValidationError(errors)
    return diagnostics
