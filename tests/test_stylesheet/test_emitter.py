"""Tests for serializing resolved styles into scoped stylesheets."""

import pytest

from restyle.classifier import classify
from restyle.model.tags import TagSet
from restyle.resolver import resolve
from restyle.stylesheet import (
    COLOR_PROPERTIES,
    DEFAULT_SCOPE,
    EmitOptions,
    ImportantPolicy,
    emit,
    parse_stylesheet,
    role_selectors,
)


@pytest.fixture
def minimal():
    return resolve(TagSet())


@pytest.fixture
def retro():
    return resolve(classify("Give everything a retro-gaming flair"))


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class TestEmitOptions:
    def test_defaults(self):
        options = EmitOptions()
        assert options.scope == DEFAULT_SCOPE
        assert options.important is ImportantPolicy.NONE
        assert options.header is True

    def test_important_coerced_from_string(self):
        assert EmitOptions(important="colors").important is ImportantPolicy.COLORS

    def test_empty_scope_rejected(self):
        with pytest.raises(ValueError, match="empty"):
            EmitOptions(scope="  ")

    @pytest.mark.parametrize("scope", ["a{", "a}", "a;b", "a, b", "@media", "a /* x */"])
    def test_scope_that_would_break_rules_rejected(self, scope):
        with pytest.raises(ValueError):
            EmitOptions(scope=scope)

    @pytest.mark.parametrize("scope", ["#dynamic-styles", "body #main", "main#app"])
    def test_id_scope_rejected(self, scope):
        with pytest.raises(ValueError, match="id selector"):
            EmitOptions(scope=scope)

    @pytest.mark.parametrize("scope", ["html body!", "html body !important"])
    def test_unparseable_scope_rejected(self, scope):
        with pytest.raises(ValueError, match="not a valid selector"):
            EmitOptions(scope=scope)

    def test_class_scope_accepted(self):
        assert EmitOptions(scope="main.preview").scope == "main.preview"


# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------


class TestEmitShape:
    def test_header(self, minimal):
        css = emit(minimal)
        assert css.startswith("/* restyle: template=minimal; tags=none */\n")

    def test_header_lists_tags_and_hue(self):
        css = emit(resolve(classify("hunter green christmas")))
        assert css.splitlines()[0] == (
            "/* restyle: template=festive; tags=hue:hunter-green,festive; hue=hunter-green */"
        )

    def test_no_header(self, minimal):
        css = emit(minimal, EmitOptions(header=False))
        assert css.startswith(f"{DEFAULT_SCOPE} {{\n")

    def test_ends_with_newline(self, minimal):
        assert emit(minimal).endswith("}\n")

    def test_declaration_layout(self, minimal):
        css = emit(minimal)
        assert f"{DEFAULT_SCOPE} button,\n{DEFAULT_SCOPE} .btn {{\n" in css
        assert "\n  cursor: pointer;\n" in css

    def test_deterministic(self, retro):
        assert emit(retro) == emit(retro)

    def test_parses_back(self, retro):
        sheet = parse_stylesheet(emit(retro))
        assert sheet.rules
        for selector in sheet.selectors:
            assert selector.text.startswith(DEFAULT_SCOPE)

    def test_required_roles_present(self, minimal):
        sheet = parse_stylesheet(emit(minimal))
        for role in ("page", "heading", "card", "button", "control"):
            assert sheet.rule_for(role_selectors(role)[0]) is not None

    def test_custom_scope(self, minimal):
        sheet = parse_stylesheet(emit(minimal, EmitOptions(scope="main.preview")))
        assert all(s.text.startswith("main.preview") for s in sheet.selectors)
        assert sheet.rule_for("main.preview h1") is not None

    def test_empty_values_skipped(self, minimal):
        css = emit(minimal)
        assert "backdrop-filter" not in css
        assert ": ;" not in css

    def test_no_external_references(self):
        for prompt in ("bauhaus", "glassy", "christmas", "retro", "modern", "navy"):
            css = emit(resolve(classify(prompt)))
            assert "url(" not in css
            assert "@import" not in css


# ---------------------------------------------------------------------------
# !important policy
# ---------------------------------------------------------------------------


class TestImportantPolicy:
    def test_none(self, retro):
        assert "!important" not in emit(retro)

    def test_colors(self, retro):
        sheet = parse_stylesheet(emit(retro, EmitOptions(important=ImportantPolicy.COLORS)))
        important = [d for r in sheet.rules for d in r.declarations if d.important]
        assert important
        assert all(d.prop in COLOR_PROPERTIES for d in important)
        radius = sheet.rule_for(f"{DEFAULT_SCOPE} button").declarations
        assert not next(d for d in radius if d.prop == "border-radius").important

    def test_all(self, retro):
        sheet = parse_stylesheet(emit(retro, EmitOptions(important=ImportantPolicy.ALL)))
        assert all(d.important for r in sheet.rules for d in r.declarations)


# ---------------------------------------------------------------------------
# Template fingerprints
# ---------------------------------------------------------------------------


class TestTemplateFingerprints:
    def test_retro_gaming(self, retro):
        sheet = parse_stylesheet(emit(retro))
        page = sheet.rule_for(DEFAULT_SCOPE).properties
        assert page["font-family"] == '"Press Start 2P", "VT323", "Courier New", monospace'
        assert page["background"].startswith("repeating-linear-gradient(")

        button = sheet.rule_for(f"{DEFAULT_SCOPE} button").properties
        assert button["background"] == "#39ff14"
        assert button["text-transform"] == "uppercase"
        assert button["border-radius"] == "0"

    def test_glassy_uses_backdrop_filter(self):
        sheet = parse_stylesheet(emit(resolve(TagSet.of("glassy"))))
        card = sheet.rule_for(f"{DEFAULT_SCOPE} .rounded-lg.border").properties
        assert card["backdrop-filter"].startswith("blur(")
        assert card["background"].startswith("rgba(255, 255, 255")

    def test_bauhaus_hard_shadow(self):
        sheet = parse_stylesheet(emit(resolve(TagSet.of("bauhaus"))))
        card = sheet.rule_for(f"{DEFAULT_SCOPE} .card").properties
        assert card["border"] == "3px solid #111111"
        assert card["border-radius"] == "0"
        assert card["box-shadow"] == "6px 6px 0 #1d4ed8"

    def test_festive_stitched_cards(self):
        sheet = parse_stylesheet(emit(resolve(TagSet.of("festive"))))
        card = sheet.rule_for(f"{DEFAULT_SCOPE} .card").properties
        assert "dashed" in card["border-top"]

    def test_hue_recolors_buttons(self):
        sheet = parse_stylesheet(emit(resolve(TagSet.of("hue:hunter-green"))))
        button = sheet.rule_for(f"{DEFAULT_SCOPE} button").properties
        assert button["background"] == "#355e3b"

    def test_friendly_pill_buttons_on_modern(self):
        style = resolve(classify("Update the site to feel modern, friendly, and tech-forward"))
        sheet = parse_stylesheet(emit(style))
        card = sheet.rule_for(f"{DEFAULT_SCOPE} .card").properties
        assert card["border-radius"] == "1.25rem"

    def test_density_scales_padding(self, minimal):
        sheet = parse_stylesheet(emit(minimal))
        body = sheet.rule_for(f"{DEFAULT_SCOPE} .card > div").properties
        assert body["padding"] == "1.5rem"
