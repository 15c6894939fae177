"""Caller-side generation lifecycle with explicit state.

The engine is stateless; the stylesheet currently applied to a page lives
here, in a :class:`StyleState` value the rendering layer reads and injects.
Every transition returns the new state instead of mutating a document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from restyle.config import RestyleConfig
from restyle.engine import StyleEngine, create_engine, render
from restyle.errors import InvalidPromptError
from restyle.events import (
    EventBus,
    GenerationFailed,
    GenerationStarted,
    PromptRejected,
    StyleApplied,
    StylesReset,
)

logger = logging.getLogger(__name__)

STYLE_SUGGESTIONS: tuple[str, ...] = (
    "Make it appear with Bauhaus aesthetics",
    "Update the site to feel modern, friendly, and tech-forward",
    "I want it to look glassy and reflective",
    "Give everything a retro-gaming flair",
    "I want it as a hunter green theme",
    "Make it feel like Christmas",
)


class GenerationStatus(StrEnum):
    IDLE = "idle"
    GENERATING = "generating"
    APPLIED = "applied"
    FAILED = "failed"


@dataclass(frozen=True)
class StyleState:
    status: GenerationStatus = GenerationStatus.IDLE
    prompt: str = ""
    stylesheet: str = ""  # empty means "no custom styles applied"
    template: str | None = None
    error: str = ""


IDLE = StyleState()


class StyleSession:
    """Drives ``Idle -> Generating -> {Applied | Failed}`` for one page.

    Generation replaces the whole stylesheet; reset returns to Idle with no
    stylesheet. Regenerating the same prompt after a reset yields
    byte-identical output.
    """

    def __init__(
        self,
        engine: StyleEngine | None = None,
        bus: EventBus | None = None,
        config: RestyleConfig | None = None,
    ) -> None:
        self.config = config or RestyleConfig()
        self.bus = bus or EventBus()
        self.engine = engine or create_engine(self.config, bus=self.bus)
        self._state = IDLE
        self._selected: int | None = None

    @property
    def state(self) -> StyleState:
        return self._state

    @property
    def selected_suggestion(self) -> int | None:
        return self._selected

    def select_suggestion(self, index: int) -> str:
        """Pick a quick suggestion; returns the prompt text to generate from."""
        if not 0 <= index < len(STYLE_SUGGESTIONS):
            raise IndexError(f"No suggestion at index {index}")
        self._selected = index
        return STYLE_SUGGESTIONS[index]

    def generate(self, prompt: str) -> StyleState:
        """Generate and apply a stylesheet for *prompt*.

        Raises InvalidPromptError for a blank prompt, leaving the state
        unchanged.
        """
        if not prompt or not prompt.strip():
            self.bus.emit(PromptRejected(prompt=prompt or "", reason="empty prompt"))
            raise InvalidPromptError("Please enter a style description or select a suggestion.")

        previous = self._state
        self._state = replace(previous, status=GenerationStatus.GENERATING, prompt=prompt, error="")
        self.bus.emit(GenerationStarted(prompt=prompt))
        try:
            result = render(
                prompt,
                self.engine,
                self.config.emit_options(),
                policy=self.config.validation_policy(),
                validate_output=self.config.validate_output,
            )
        except Exception as exc:
            # Keep whatever was applied before; only the status records the failure.
            logger.exception("generation failed for prompt %r", prompt)
            self._state = replace(previous, status=GenerationStatus.FAILED, prompt=prompt, error=str(exc))
            self.bus.emit(GenerationFailed(prompt=prompt, error=str(exc)))
            return self._state

        self._state = StyleState(
            status=GenerationStatus.APPLIED,
            prompt=prompt,
            stylesheet=result.stylesheet,
            template=result.style.template,
        )
        self.bus.emit(
            StyleApplied(
                prompt=prompt,
                template=result.style.template,
                tags=result.style.tags.names(),
                stylesheet=result.stylesheet,
            )
        )
        return self._state

    def reset(self) -> StyleState:
        """Remove custom styles and return to Idle."""
        previous = self._state.template
        self._state = IDLE
        self._selected = None
        self.bus.emit(StylesReset(previous_template=previous))
        return self._state
