from __future__ import annotations

from restyle.classifier import classify
from restyle.model.style import ResolvedStyle
from restyle.model.tags import TagSet
from restyle.resolver import resolve
from restyle.templates import DEFAULT_REGISTRY, TemplateRegistry


class StaticTemplateEngine:
    """Deterministic engine: keyword classification plus template resolution."""

    name = "static"

    def __init__(self, registry: TemplateRegistry | None = None) -> None:
        self.registry = registry or DEFAULT_REGISTRY

    def classify(self, prompt: str) -> TagSet:
        return classify(prompt)

    def resolve(self, tags: TagSet) -> ResolvedStyle:
        return resolve(tags, self.registry)
