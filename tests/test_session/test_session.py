"""Tests for the generation session state machine."""

import pytest

from restyle.config import RestyleConfig
from restyle.engine import StaticTemplateEngine
from restyle.errors import InvalidPromptError
from restyle.events import (
    EventBus,
    GenerationFailed,
    GenerationStarted,
    PromptRejected,
    StyleApplied,
    StylesReset,
)
from restyle.session import IDLE, STYLE_SUGGESTIONS, GenerationStatus, StyleSession


class BrokenEngine(StaticTemplateEngine):
    name = "broken"

    def classify(self, prompt):
        raise RuntimeError("classifier exploded")


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def events(bus):
    collected = []
    bus.on_all(collected.append)
    return collected


@pytest.fixture
def session(bus):
    return StyleSession(bus=bus)


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------


class TestSuggestions:
    def test_six_suggestions(self):
        assert len(STYLE_SUGGESTIONS) == 6
        assert STYLE_SUGGESTIONS[3] == "Give everything a retro-gaming flair"

    def test_select(self, session):
        assert session.select_suggestion(5) == "Make it feel like Christmas"
        assert session.selected_suggestion == 5

    def test_select_out_of_range(self, session):
        with pytest.raises(IndexError):
            session.select_suggestion(6)
        with pytest.raises(IndexError):
            session.select_suggestion(-1)
        assert session.selected_suggestion is None


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_starts_idle(self, session):
        assert session.state == IDLE
        assert session.state.status is GenerationStatus.IDLE
        assert session.state.stylesheet == ""

    def test_applied(self, session, events):
        state = session.generate(STYLE_SUGGESTIONS[3])
        assert state.status is GenerationStatus.APPLIED
        assert state.template == "retro-gaming"
        assert "Press Start 2P" in state.stylesheet
        assert session.state is state

        assert [type(e) for e in events] == [GenerationStarted, StyleApplied]
        applied = events[1]
        assert applied.template == "retro-gaming"
        assert applied.tags == ("retro-gaming",)
        assert applied.stylesheet == state.stylesheet

    def test_regenerate_replaces_stylesheet(self, session):
        first = session.generate("bauhaus").stylesheet
        second = session.generate("glassy").stylesheet
        assert first != second
        assert session.state.template == "glassy"

    def test_gibberish_applies_default(self, session):
        state = session.generate("asdkjasdasd")
        assert state.status is GenerationStatus.APPLIED
        assert state.template == "minimal"

    @pytest.mark.parametrize("prompt", ["", "   ", "\n\t"])
    def test_blank_prompt_rejected(self, session, events, prompt):
        with pytest.raises(InvalidPromptError):
            session.generate(prompt)
        assert session.state == IDLE
        assert [type(e) for e in events] == [PromptRejected]

    def test_blank_prompt_keeps_applied_style(self, session):
        applied = session.generate("bauhaus")
        with pytest.raises(InvalidPromptError):
            session.generate("  ")
        assert session.state == applied

    def test_engine_failure(self, bus, events):
        session = StyleSession(engine=BrokenEngine(), bus=bus)
        state = session.generate("bauhaus")
        assert state.status is GenerationStatus.FAILED
        assert "classifier exploded" in state.error
        assert state.stylesheet == ""
        assert [type(e) for e in events] == [GenerationStarted, GenerationFailed]

    def test_failure_keeps_previous_stylesheet(self, bus):
        session = StyleSession(bus=bus)
        applied = session.generate("bauhaus")
        session.engine = BrokenEngine()
        state = session.generate("glassy")
        assert state.status is GenerationStatus.FAILED
        assert state.stylesheet == applied.stylesheet
        assert state.template == "bauhaus"

    def test_config_flows_to_output(self, bus):
        session = StyleSession(bus=bus, config=RestyleConfig(header=False, scope="body.app"))
        state = session.generate("bauhaus")
        assert state.stylesheet.startswith("body.app {")


class TestReset:
    def test_reset_returns_idle(self, session, events):
        session.select_suggestion(5)
        session.generate(STYLE_SUGGESTIONS[5])
        state = session.reset()
        assert state == IDLE
        assert session.selected_suggestion is None
        assert events[-1] == StylesReset(previous_template="festive")

    def test_reset_from_idle(self, session, events):
        assert session.reset() == IDLE
        assert events == [StylesReset(previous_template=None)]

    def test_regenerate_after_reset_is_identical(self, session):
        before = session.generate(STYLE_SUGGESTIONS[1]).stylesheet
        session.reset()
        after = session.generate(STYLE_SUGGESTIONS[1]).stylesheet
        assert before == after
