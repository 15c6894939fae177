"""Event system: bus and event types for the generation lifecycle."""

from restyle.events.bus import EventBus
from restyle.events.types import (
    BackendDegraded,
    GenerationFailed,
    GenerationStarted,
    PromptRejected,
    StyleApplied,
    StylesReset,
)

__all__ = [
    "BackendDegraded",
    "EventBus",
    "GenerationFailed",
    "GenerationStarted",
    "PromptRejected",
    "StyleApplied",
    "StylesReset",
]
