"""Stylesheet model: Selector, Declaration, StyleRule, and Stylesheet dataclasses."""

from __future__ import annotations

import re
from dataclasses import dataclass

Specificity = tuple[int, int, int]

_ATTRIBUTE_RE = re.compile(r"\[[^\]]*\]")
_PSEUDO_ELEMENT_RE = re.compile(r"::[A-Za-z-]+")
_PSEUDO_CLASS_RE = re.compile(r":[A-Za-z-]+(?:\([^)]*\))?")
_ID_RE = re.compile(r"#[A-Za-z_][\w-]*")
_CLASS_RE = re.compile(r"\.[A-Za-z_][\w-]*")
_COMBINATOR_RE = re.compile(r"[\s>+~]+")
_ELEMENT_RE = re.compile(r"^[A-Za-z][\w-]*$")


def compute_specificity(selector: str) -> Specificity:
    """CSS specificity of a single complex selector as (ids, classes, elements).

    Attribute selectors and pseudo-classes count as classes; pseudo-elements
    count as elements. Arguments of functional pseudo-classes are not
    descended into.
    """
    text = selector
    b = len(_ATTRIBUTE_RE.findall(text))
    text = _ATTRIBUTE_RE.sub(" ", text)
    c = len(_PSEUDO_ELEMENT_RE.findall(text))
    text = _PSEUDO_ELEMENT_RE.sub("", text)
    b += len(_PSEUDO_CLASS_RE.findall(text))
    text = _PSEUDO_CLASS_RE.sub("", text)
    a = len(_ID_RE.findall(text))
    text = _ID_RE.sub("", text)
    b += len(_CLASS_RE.findall(text))
    text = _CLASS_RE.sub("", text)
    c += sum(1 for part in _COMBINATOR_RE.split(text) if _ELEMENT_RE.match(part))
    return (a, b, c)


@dataclass(frozen=True)
class Selector:
    """One complex selector and its specificity triple."""

    text: str
    specificity: Specificity

    @classmethod
    def parse(cls, text: str) -> Selector:
        text = " ".join(text.split())
        return cls(text=text, specificity=compute_specificity(text))

    def targets_id(self, element_id: str) -> bool:
        return f"#{element_id}" in _ID_RE.findall(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    prop: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.prop}: {self.value}{suffix}"


@dataclass(frozen=True)
class StyleRule:
    """A selector list paired with its declarations."""

    selectors: tuple[Selector, ...]
    declarations: tuple[Declaration, ...]

    @property
    def selector_text(self) -> str:
        return ", ".join(s.text for s in self.selectors)

    @property
    def properties(self) -> dict[str, str]:
        """Declarations as a dict; a later duplicate property wins."""
        return {d.prop: d.value for d in self.declarations}


@dataclass(frozen=True)
class Stylesheet:
    """A collection of style rules in source order."""

    rules: tuple[StyleRule, ...]

    def rules_matching(self, fragment: str) -> list[StyleRule]:
        """Rules with at least one selector containing *fragment*."""
        return [r for r in self.rules if any(fragment in s.text for s in r.selectors)]

    def rule_for(self, selector: str) -> StyleRule | None:
        """The first rule whose selector list contains exactly *selector*."""
        wanted = " ".join(selector.split())
        for rule in self.rules:
            if any(s.text == wanted for s in rule.selectors):
                return rule
        return None

    @property
    def selectors(self) -> list[Selector]:
        return [s for r in self.rules for s in r.selectors]
