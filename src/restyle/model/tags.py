"""Style tags: the closed vocabulary the classifier maps prompts onto."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator


class TagKind(StrEnum):
    THEME = "theme"
    MOOD = "mood"
    HUE = "hue"


THEMES: tuple[str, ...] = (
    "bauhaus",
    "modern",
    "glassy",
    "retro-gaming",
    "festive",
    "minimalist",
)

MOODS: tuple[str, ...] = (
    "friendly",
    "dark",
    "elegant",
)

HUE_PREFIX = "hue:"


@dataclass(frozen=True)
class StyleTag:
    """A detected stylistic intent: a theme family, a mood, or an explicit hue."""

    kind: TagKind
    value: str

    @property
    def name(self) -> str:
        if self.kind is TagKind.HUE:
            return f"{HUE_PREFIX}{self.value}"
        return self.value

    def __str__(self) -> str:
        return self.name

    @classmethod
    def theme(cls, value: str) -> StyleTag:
        return cls(TagKind.THEME, value)

    @classmethod
    def mood(cls, value: str) -> StyleTag:
        return cls(TagKind.MOOD, value)

    @classmethod
    def hue(cls, value: str) -> StyleTag:
        return cls(TagKind.HUE, value)

    @classmethod
    def parse(cls, name: str) -> StyleTag | None:
        """Parse a rendered tag name, returning None outside the vocabulary.

        Case is ignored and runs of spaces or underscores read as a hyphen,
        so ``"HUE: Hunter Green"`` parses as ``hue:hunter-green``.
        """
        from restyle.templates.palette import NAMED_COLORS

        name = name.strip().lower().replace("_", " ")
        if name.startswith(HUE_PREFIX):
            color = "-".join(name[len(HUE_PREFIX):].split())
            return cls.hue(color) if color in NAMED_COLORS else None
        name = "-".join(name.split())
        if name in THEMES:
            return cls.theme(name)
        if name in MOODS:
            return cls.mood(name)
        return None


@dataclass(frozen=True)
class TagSet:
    """Duplicate-free tags in first-detection order.

    Equality is order-sensitive. Membership accepts either a StyleTag or a
    rendered name such as ``"hue:hunter-green"``.
    """

    tags: tuple[StyleTag, ...] = field(default=())

    def __post_init__(self) -> None:
        seen: dict[StyleTag, None] = {}
        for tag in self.tags:
            seen.setdefault(tag, None)
        object.__setattr__(self, "tags", tuple(seen))

    @classmethod
    def of(cls, *names: str) -> TagSet:
        """Build a tag set from rendered names, skipping unknown ones."""
        parsed = (StyleTag.parse(n) for n in names)
        return cls(tuple(t for t in parsed if t is not None))

    def __iter__(self) -> Iterator[StyleTag]:
        return iter(self.tags)

    def __len__(self) -> int:
        return len(self.tags)

    def __bool__(self) -> bool:
        return bool(self.tags)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self.names()
        return item in self.tags

    def of_kind(self, kind: TagKind) -> tuple[StyleTag, ...]:
        return tuple(t for t in self.tags if t.kind is kind)

    def names(self) -> tuple[str, ...]:
        return tuple(t.name for t in self.tags)

    def index(self, tag: StyleTag) -> int:
        """Detection position of *tag*."""
        return self.tags.index(tag)
