"""Tests for the string-in, string-out generation entry points."""

from restyle.engine import Generation, StaticTemplateEngine, generate, render
from restyle.model.tags import TagSet
from restyle.resolver import resolve
from restyle.stylesheet import EmitOptions, ImportantPolicy, emit
from restyle.validation import ValidationPolicy, validate


class TestGenerate:
    def test_returns_stylesheet_text(self):
        css = generate("Give everything a retro-gaming flair")
        assert css.startswith("/* restyle: template=retro-gaming;")
        assert "Press Start 2P" in css

    def test_gibberish_matches_default(self):
        assert generate("asdkjasdasd") == emit(resolve(TagSet()))

    def test_empty_prompt_matches_default(self):
        assert generate("") == generate("asdkjasdasd")

    def test_options_flow_through(self):
        css = generate("bauhaus", options=EmitOptions(header=False, important=ImportantPolicy.COLORS))
        assert not css.startswith("/*")
        assert "!important" in css


class TestRender:
    def test_generation_record(self):
        result = render("I want it as a hunter green theme")
        assert isinstance(result, Generation)
        assert result.style.template == "hue"
        assert result.style.hue_override == "hunter-green"
        assert result.diagnostics == ()
        assert result.fell_back is False

    def test_uses_engine(self):
        class FixedEngine(StaticTemplateEngine):
            def classify(self, prompt):
                return TagSet.of("glassy")

        assert render("anything", FixedEngine()).style.template == "glassy"

    def test_invalid_output_falls_back_to_default(self):
        options = EmitOptions(important=ImportantPolicy.ALL)
        policy = ValidationPolicy(important=ImportantPolicy.NONE)
        result = render("bauhaus", options=options, policy=policy)
        assert result.fell_back is True
        assert result.style.template == "minimal"
        assert any(d.is_error for d in result.diagnostics)
        assert "!important" not in result.stylesheet

    def test_unscoped_output_falls_back_to_default_options(self):
        result = render("bauhaus", options=EmitOptions(scope="body"))
        assert result.fell_back is True
        assert result.style.template == "minimal"
        assert result.stylesheet == emit(resolve(TagSet()))
        assert not any(d.is_error for d in validate(result.stylesheet))

    def test_policy_defaults_to_options(self):
        result = render("bauhaus", options=EmitOptions(important=ImportantPolicy.ALL))
        assert result.fell_back is False
        assert result.style.template == "bauhaus"

    def test_validation_can_be_skipped(self):
        options = EmitOptions(important=ImportantPolicy.ALL)
        policy = ValidationPolicy(important=ImportantPolicy.NONE)
        result = render("bauhaus", options=options, policy=policy, validate_output=False)
        assert result.fell_back is False
        assert result.style.template == "bauhaus"
        assert result.diagnostics == ()
