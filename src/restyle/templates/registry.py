"""Template registry: an immutable name and tag index over a template catalog."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator

from restyle.errors import TemplateNotFoundError
from restyle.model.tags import StyleTag, TagKind
from restyle.templates.base import Template


class TemplateRegistry:
    """Read-only lookup of templates by name and by the tags they answer for.

    Every theme or mood tag maps to at most one template; every hue tag maps
    to the registry's hue template. The registry is populated once in the
    constructor and never mutated afterwards, so concurrent reads need no
    locking.
    """

    def __init__(
        self,
        templates: Iterable[Template],
        *,
        default: str = "minimal",
        hue: str = "hue",
    ) -> None:
        by_name: dict[str, Template] = {}
        by_tag: dict[str, Template] = {}
        for template in templates:
            if template.name in by_name:
                raise ValueError(f"Duplicate template name: {template.name!r}")
            by_name[template.name] = template
            for tag in sorted(template.tags):
                owner = by_tag.get(tag)
                if owner is not None:
                    raise ValueError(
                        f"Tag {tag!r} maps to both {owner.name!r} and {template.name!r}"
                    )
                by_tag[tag] = template

        for required in (default, hue):
            if required not in by_name:
                raise ValueError(f"Registry is missing required template {required!r}")

        self._templates = MappingProxyType(by_name)
        self._by_tag = MappingProxyType(by_tag)
        self._default = by_name[default]
        self._hue = by_name[hue]

    def get(self, name: str) -> Template | None:
        """Return the template called *name*, or None."""
        return self._templates.get(name)

    def require(self, name: str) -> Template:
        """Return the template called *name*; raise if it is not registered."""
        template = self._templates.get(name)
        if template is None:
            raise TemplateNotFoundError(name)
        return template

    def all(self) -> tuple[Template, ...]:
        return tuple(self._templates.values())

    def names(self) -> tuple[str, ...]:
        return tuple(self._templates)

    def for_tag(self, tag: StyleTag) -> Template | None:
        if tag.kind is TagKind.HUE:
            return self._hue
        return self._by_tag.get(tag.value)

    @property
    def default(self) -> Template:
        return self._default

    @property
    def hue(self) -> Template:
        return self._hue

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[Template]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)
