"""Resolver: choose and parameterize exactly one template for a tag set."""

from __future__ import annotations

import logging
from typing import Any

from restyle.model.style import PARAM_NAMES, ResolvedStyle
from restyle.model.tags import StyleTag, TagKind, TagSet
from restyle.templates import DEFAULT_REGISTRY, NAMED_COLORS, Template, TemplateRegistry

logger = logging.getLogger(__name__)

# Lower ranks win structurally: explicit themes, then moods, then hue-only.
KIND_PRECEDENCE: dict[TagKind, int] = {
    TagKind.THEME: 0,
    TagKind.MOOD: 1,
    TagKind.HUE: 2,
}


def _candidates(tags: TagSet, registry: TemplateRegistry) -> list[Template]:
    """Matched templates ordered by precedence, then by detection order."""
    ranked: list[tuple[int, int, Template]] = []
    seen: set[str] = set()
    for position, tag in enumerate(tags):
        template = registry.for_tag(tag)
        if template is None or template.name in seen:
            continue
        seen.add(template.name)
        ranked.append((KIND_PRECEDENCE[tag.kind], position, template))
    ranked.sort(key=lambda item: (item[0], item[1]))
    return [template for _, _, template in ranked]


def _split_hues(tags: TagSet) -> tuple[StyleTag | None, tuple[StyleTag, ...]]:
    """First known hue wins; every other hue tag is discarded."""
    winner: StyleTag | None = None
    discarded: list[StyleTag] = []
    for tag in tags.of_kind(TagKind.HUE):
        if winner is None and tag.value in NAMED_COLORS:
            winner = tag
        else:
            discarded.append(tag)
    return winner, tuple(discarded)


def resolve(tags: TagSet, registry: TemplateRegistry | None = None) -> ResolvedStyle:
    """Resolve *tags* into one ResolvedStyle.

    Rules:
        - No usable tags: the registry's default template, unmodified.
        - The highest-precedence template supplies structure (font, radius,
          density, scheme) and default colors.
        - Lower-ranked combinable templates lend the params they declare in
          ``contributes``; the first contributor of a param keeps it.
          Non-combinable losers are recorded as shadowed.
        - The first-detected hue tag overrides the primary color whichever
          template wins; later hue tags are discarded.

    Never raises for a tag set drawn from the vocabulary.
    """
    registry = registry or DEFAULT_REGISTRY
    candidates = _candidates(tags, registry)

    if not candidates:
        default = registry.default
        logger.debug("no template matched %s; using %s", list(tags.names()), default.name)
        return ResolvedStyle(
            template=default.name,
            params=default.defaults,
            descriptor=default.render(),
            tags=tags,
        )

    winner, *others = candidates
    params = winner.defaults
    overrides: dict[str, Any] = {}
    contributors: list[str] = []
    shadowed: list[str] = []

    for template in others:
        if template is registry.hue:
            continue
        if not template.combinable:
            shadowed.append(template.name)
            continue
        lent = sorted((template.contributes & PARAM_NAMES) - set(overrides))
        for name in lent:
            overrides[name] = getattr(template.defaults, name)
        if lent:
            contributors.append(template.name)

    hue, discarded = _split_hues(tags)
    if hue is not None:
        overrides["primary"] = NAMED_COLORS[hue.value]

    if overrides:
        params = params.with_overrides(**overrides)

    logger.debug(
        "resolved %s -> %s (contributors=%s shadowed=%s hue=%s)",
        list(tags.names()),
        winner.name,
        contributors,
        shadowed,
        hue.value if hue else None,
    )
    return ResolvedStyle(
        template=winner.name,
        params=params,
        descriptor=winner.render(params),
        tags=tags,
        contributors=tuple(contributors),
        shadowed=tuple(shadowed),
        discarded=discarded,
        hue_override=hue.value if hue else None,
    )
