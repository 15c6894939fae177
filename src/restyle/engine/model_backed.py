"""Model-backed engine: a backend proposes tags, the static path backs it up."""

from __future__ import annotations

import logging
from typing import Sequence

from restyle.engine.base import TAG_VOCABULARY, StyleEngine, TagBackend
from restyle.engine.retry import RetryPolicy, with_retry
from restyle.engine.static import StaticTemplateEngine
from restyle.errors import BackendError
from restyle.events import BackendDegraded, EventBus
from restyle.model.style import ResolvedStyle
from restyle.model.tags import TagSet

logger = logging.getLogger(__name__)


class ModelBackedEngine:
    """Classify through a :class:`TagBackend`, degrading to *fallback* on failure.

    Backend errors are retried per *retry* (non-retryable errors are not).
    When the backend still fails, or proposes nothing inside the vocabulary,
    the prompt is classified by the fallback engine instead. Resolution is
    always the fallback's pure resolver, so the engine stays total.
    """

    name = "model"

    def __init__(
        self,
        backend: TagBackend,
        fallback: StyleEngine | None = None,
        retry: RetryPolicy | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self._backend = backend
        self._fallback = fallback or StaticTemplateEngine()
        self._retry = retry or RetryPolicy()
        self._bus = bus

    def classify(self, prompt: str) -> TagSet:
        prompt = prompt or ""
        try:
            names = with_retry(
                lambda: self._backend.suggest_tags(prompt, TAG_VOCABULARY),
                self._retry,
            )
            tags = _proposals_to_tags(names)
        except Exception as exc:  # any backend failure degrades to the static path
            return self._degrade(prompt, f"backend failed: {exc}")

        if not tags:
            return self._degrade(prompt, "backend proposed no known tags")
        return tags

    def resolve(self, tags: TagSet) -> ResolvedStyle:
        return self._fallback.resolve(tags)

    def _degrade(self, prompt: str, reason: str) -> TagSet:
        logger.warning("%s engine degrading to %s: %s", self.name, self._fallback.name, reason)
        if self._bus is not None:
            self._bus.emit(BackendDegraded(engine=self.name, reason=reason))
        return self._fallback.classify(prompt)


def _proposals_to_tags(names: object) -> TagSet:
    """Convert a backend answer to tags; a malformed answer is a backend error."""
    if not isinstance(names, (list, tuple)):
        raise BackendError(
            f"expected a list of tag names, got {type(names).__name__}", retryable=False
        )
    malformed = [n for n in names if not isinstance(n, str)]
    if malformed:
        raise BackendError(f"non-string tag proposals: {malformed!r}", retryable=False)
    tags = TagSet.of(*names)
    if len(tags) < len(set(names)):
        logger.debug("dropped unknown tag proposals from %r", names)
    return tags


class StubTagBackend:
    """Stub backend that returns canned tag proposals for testing.

    *responses* maps a prompt substring to the tag names to propose. The
    first *failures* calls raise a retryable BackendError.
    """

    def __init__(
        self,
        responses: dict[str, list[str]] | None = None,
        *,
        failures: int = 0,
        retryable: bool = True,
    ) -> None:
        self._responses = responses or {}
        self._failures = failures
        self._retryable = retryable
        self.calls: list[str] = []

    def suggest_tags(self, prompt: str, vocabulary: Sequence[str]) -> list[str]:
        self.calls.append(prompt)
        if len(self.calls) <= self._failures:
            raise BackendError("stub backend failure", retryable=self._retryable)
        for key, names in self._responses.items():
            if key.lower() in prompt.lower():
                return list(names)
        return []
