"""Lexical classifier: normalize a prompt and scan it for keyword phrases."""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass

from restyle.classifier.keywords import KEYWORDS, MAX_PHRASE_LENGTH
from restyle.model.tags import StyleTag, TagSet

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"[^\W_]+")


@dataclass(frozen=True)
class KeywordMatch:
    """One phrase hit: the tag it maps to and the token span it consumed."""

    tag: StyleTag
    start: int
    end: int
    phrase: str


def normalize(prompt: str) -> str:
    """Fold case and strip diacritics so "Noël" and "NOEL" read the same."""
    decomposed = unicodedata.normalize("NFKD", prompt)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def tokenize(prompt: str) -> list[str]:
    return _TOKEN_RE.findall(normalize(prompt))


def _lookup(tokens: list[str], start: int) -> tuple[StyleTag, int] | None:
    """Longest phrase starting at *start*, as (tag, length)."""
    longest = min(MAX_PHRASE_LENGTH, len(tokens) - start)
    for length in range(longest, 0, -1):
        tag = KEYWORDS.get(tuple(tokens[start:start + length]))
        if tag is not None:
            return tag, length
    # Plural fallback for one-word entries ("holidays", "pixels").
    word = tokens[start]
    if len(word) > 3 and word.endswith("s"):
        tag = KEYWORDS.get((word[:-1],))
        if tag is not None:
            return tag, 1
    return None


def scan(tokens: list[str]) -> list[KeywordMatch]:
    """Greedy longest-match scan, left to right.

    A matched phrase consumes its tokens, so "dark green" yields the hue and
    never the ``dark`` mood.
    """
    matches: list[KeywordMatch] = []
    i = 0
    while i < len(tokens):
        hit = _lookup(tokens, i)
        if hit is None:
            i += 1
            continue
        tag, length = hit
        matches.append(
            KeywordMatch(tag=tag, start=i, end=i + length, phrase=" ".join(tokens[i:i + length]))
        )
        i += length
    return matches


def classify(prompt: str | None) -> TagSet:
    """Map a free-text prompt to tags in first-detection order.

    Total over all strings: a prompt with no recognizable keyword yields an
    empty tag set rather than an error.
    """
    tokens = tokenize(prompt or "")
    matches = scan(tokens)
    tags = TagSet(tuple(m.tag for m in matches))
    logger.debug("classified %d token(s) into tags %s", len(tokens), list(tags.names()))
    return tags
