"""Engine capability protocols."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from restyle.model.style import ResolvedStyle
from restyle.model.tags import HUE_PREFIX, MOODS, THEMES, TagSet
from restyle.templates.palette import NAMED_COLORS

# Every tag name a backend may propose.
TAG_VOCABULARY: tuple[str, ...] = (
    THEMES + MOODS + tuple(f"{HUE_PREFIX}{color}" for color in NAMED_COLORS)
)


@runtime_checkable
class StyleEngine(Protocol):
    """The ``{classify, resolve}`` capability both engine variants provide.

    Implementations must be total: any string classifies, any tag set
    resolves.
    """

    name: str

    def classify(self, prompt: str) -> TagSet: ...

    def resolve(self, tags: TagSet) -> ResolvedStyle: ...


class TagBackend(Protocol):
    """A model-backed source of tag proposals.

    Given a prompt and the closed vocabulary, returns tag names in the order
    the backend detected them. May raise; the engine owns retry and fallback.
    """

    def suggest_tags(self, prompt: str, vocabulary: Sequence[str]) -> list[str]: ...
