"""Lark-based parser that turns style text back into a Stylesheet model.

Syntax example:
    /* restyle: template=bauhaus */
    html:root body .rounded-lg.border { border: 3px solid #111111; }
    html:root body button:hover { background: #b31f1f !important; }
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from restyle.errors import StylesheetParseError
from restyle.stylesheet.model import Declaration, Selector, Stylesheet, StyleRule

__all__ = ["parse_stylesheet"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Stylesheet model objects."""

    def declaration(self, items: list[Token]) -> Declaration:
        prop, value, *rest = items
        return Declaration(
            prop=str(prop).lower(),
            value=" ".join(str(value).split()),
            important=bool(rest),
        )

    def declarations(self, items: list[Declaration]) -> tuple[Declaration, ...]:
        return tuple(items)

    def rule(self, items: list[object]) -> StyleRule:
        raw_selectors = str(items[0])
        declarations = items[1]
        selectors = tuple(
            Selector.parse(part) for part in raw_selectors.split(",") if part.strip()
        )
        return StyleRule(selectors=selectors, declarations=declarations)  # type: ignore[arg-type]

    def start(self, items: list[StyleRule]) -> Stylesheet:
        return Stylesheet(rules=tuple(items))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse style text into a Stylesheet containing all rules in source order.

    Raises StylesheetParseError with line and column when the text is not in
    the supported subset.
    """
    try:
        tree = _parser().parse(source)
    except Exception as e:
        # Errors at end of input report -1 positions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        if line is not None and line < 1:
            line = column = None
        raise StylesheetParseError(str(e), line=line, column=column) from e
    return StylesheetTransformer().transform(tree)
