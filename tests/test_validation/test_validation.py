"""Tests for stylesheet validation rules."""

import pytest

from restyle.classifier import classify
from restyle.model.diagnostic import Diagnostic, Severity
from restyle.model.style import ResolvedStyle
from restyle.model.tags import TagSet
from restyle.resolver import resolve
from restyle.stylesheet import EmitOptions, ImportantPolicy, emit, parse_stylesheet
from restyle.templates import DEFAULT_REGISTRY
from restyle.validation import (
    StylesheetValidationError,
    ValidationPolicy,
    validate,
    validate_or_raise,
)

SCOPE = "html:root body"

# A sheet that styles every required role and passes all rules.
VALID = f"""
{SCOPE} {{ background: #fafafa; color: #111111; }}
{SCOPE} h1 {{ font-weight: 700; }}
{SCOPE} .rounded-lg.border {{ border-radius: 0; }}
{SCOPE} button {{ background: #d62828; }}
{SCOPE} input {{ border: 1px solid #111111; }}
"""


def _by_rule(diagnostics: list[Diagnostic], rule: str) -> list[Diagnostic]:
    return [d for d in diagnostics if d.rule == rule]


# ---------------------------------------------------------------------------
# Emitted output is valid
# ---------------------------------------------------------------------------


class TestEmittedOutput:
    def test_default_output_is_clean(self):
        assert validate(emit(resolve(TagSet()))) == []

    def test_every_template_is_clean(self):
        for template in DEFAULT_REGISTRY:
            style = ResolvedStyle(
                template=template.name,
                params=template.defaults,
                descriptor=template.render(),
            )
            diagnostics = validate(emit(style))
            assert diagnostics == [], (template.name, [str(d) for d in diagnostics])

    def test_suggestions_are_clean(self):
        from restyle.session import STYLE_SUGGESTIONS

        for prompt in STYLE_SUGGESTIONS:
            assert validate(emit(resolve(classify(prompt)))) == []

    def test_colors_policy_matches_emitter(self):
        options = EmitOptions(important=ImportantPolicy.COLORS)
        policy = ValidationPolicy(important=ImportantPolicy.COLORS)
        assert validate(emit(resolve(TagSet.of("modern")), options), policy) == []

    def test_hand_written_sheet(self):
        assert validate(VALID) == []


# ---------------------------------------------------------------------------
# Error rules
# ---------------------------------------------------------------------------


class TestNotEmpty:
    def test_empty_sheet(self):
        errors = _by_rule(validate(""), "check_not_empty")
        assert len(errors) == 1
        assert errors[0].is_error

    def test_rules_without_declarations(self):
        assert _by_rule(validate(f"{SCOPE} p {{ }}"), "check_not_empty")


class TestSelfContained:
    def test_url_rejected(self):
        diagnostics = validate(f"{SCOPE} p {{ background: url(http://example.com/a.png); }}")
        errors = _by_rule(diagnostics, "check_self_contained")
        assert len(errors) == 1
        assert errors[0].prop == "background"
        assert errors[0].selector == f"{SCOPE} p"

    def test_gradient_allowed(self):
        diagnostics = validate(f"{SCOPE} p {{ background: linear-gradient(#fff, #000); }}")
        assert _by_rule(diagnostics, "check_self_contained") == []


class TestInjectionId:
    def test_targeting_style_element_rejected(self):
        errors = _by_rule(validate("#dynamic-styles { display: none; }"), "check_injection_id_untargeted")
        assert len(errors) == 1

    def test_custom_injection_id(self):
        policy = ValidationPolicy(injection_id="theme")
        diagnostics = validate(f"{SCOPE} #theme {{ color: red; }}", policy)
        assert _by_rule(diagnostics, "check_injection_id_untargeted")


class TestSpecificityFloor:
    def test_bare_element_rejected(self):
        errors = _by_rule(validate("p { color: red; }"), "check_specificity_floor")
        assert len(errors) == 1
        assert errors[0].selector == "p"
        assert SCOPE in errors[0].fix

    def test_each_selector_in_list_checked(self):
        diagnostics = validate(f"{SCOPE} p, h1 {{ color: red; }}")
        errors = _by_rule(diagnostics, "check_specificity_floor")
        assert [d.selector for d in errors] == ["h1"]

    def test_scoped_selector_passes(self):
        assert _by_rule(validate(f"{SCOPE} p {{ color: red; }}"), "check_specificity_floor") == []


class TestImportantPolicy:
    SHEET = f"{SCOPE} p {{ color: red !important; border-radius: 0 !important; }}"

    def test_none_rejects_all(self):
        errors = _by_rule(validate(self.SHEET), "check_important_policy")
        assert {d.prop for d in errors} == {"color", "border-radius"}

    def test_colors_allows_color_properties(self):
        policy = ValidationPolicy(important=ImportantPolicy.COLORS)
        errors = _by_rule(validate(self.SHEET, policy), "check_important_policy")
        assert [d.prop for d in errors] == ["border-radius"]

    def test_all_allows_everything(self):
        policy = ValidationPolicy(important=ImportantPolicy.ALL)
        assert _by_rule(validate(self.SHEET, policy), "check_important_policy") == []


# ---------------------------------------------------------------------------
# Warning rules
# ---------------------------------------------------------------------------


class TestRequiredRoles:
    def test_missing_roles_are_warnings(self):
        warnings = _by_rule(validate(f"{SCOPE} p {{ color: red; }}"), "check_required_roles")
        assert len(warnings) == 5
        assert all(d.severity is Severity.WARNING for d in warnings)

    def test_any_role_selector_counts(self):
        sheet = VALID.replace(f"{SCOPE} .rounded-lg.border", f"{SCOPE} .card")
        assert _by_rule(validate(sheet), "check_required_roles") == []


# ---------------------------------------------------------------------------
# Validator entry points
# ---------------------------------------------------------------------------


class TestValidator:
    def test_accepts_parsed_stylesheet(self):
        assert validate(parse_stylesheet(VALID)) == []

    def test_extra_rules(self):
        def no_red(sheet, policy):
            return [
                Diagnostic(rule="no_red", severity=Severity.INFO, message="red found")
                for rule in sheet.rules
                for decl in rule.declarations
                if decl.value == "red"
            ]

        diagnostics = validate(f"{VALID}\n{SCOPE} p {{ color: red; }}", extra_rules=[no_red])
        assert _by_rule(diagnostics, "no_red")

    def test_validate_or_raise_raises_on_errors(self):
        with pytest.raises(StylesheetValidationError) as exc_info:
            validate_or_raise("p { color: red; }")
        assert all(d.is_error for d in exc_info.value.diagnostics)
        assert "Validation failed" in str(exc_info.value)

    def test_validate_or_raise_returns_warnings(self):
        warnings = validate_or_raise(f"{SCOPE} p {{ color: red; }}")
        assert warnings
        assert not any(d.is_error for d in warnings)

    def test_diagnostic_str(self):
        diag = Diagnostic(
            rule="r", severity=Severity.ERROR, message="bad", selector="p", prop="color"
        )
        assert str(diag) == "ERROR [p { color }]: bad"
