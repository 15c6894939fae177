"""Event types emitted around one generation request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationStarted:
    prompt: str


@dataclass(frozen=True)
class StyleApplied:
    prompt: str
    template: str
    tags: tuple[str, ...]
    stylesheet: str


@dataclass(frozen=True)
class GenerationFailed:
    prompt: str
    error: str


@dataclass(frozen=True)
class PromptRejected:
    prompt: str
    reason: str


@dataclass(frozen=True)
class StylesReset:
    previous_template: str | None


@dataclass(frozen=True)
class BackendDegraded:
    """The model-backed engine fell back to static classification."""

    engine: str
    reason: str
