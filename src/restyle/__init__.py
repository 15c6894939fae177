"""restyle: turn a natural-language style prompt into an override stylesheet."""
from __future__ import annotations

__version__ = "0.1.0"

from restyle.classifier import classify
from restyle.config import RestyleConfig
from restyle.engine import (
    ModelBackedEngine,
    StaticTemplateEngine,
    StyleEngine,
    create_engine,
    generate,
    render,
)
from restyle.model import ResolvedStyle, StyleTag, TagSet
from restyle.resolver import resolve
from restyle.session import STYLE_SUGGESTIONS, StyleSession, StyleState
from restyle.stylesheet import EmitOptions, ImportantPolicy, emit

__all__ = [
    "EmitOptions",
    "ImportantPolicy",
    "ModelBackedEngine",
    "ResolvedStyle",
    "RestyleConfig",
    "STYLE_SUGGESTIONS",
    "StaticTemplateEngine",
    "StyleEngine",
    "StyleSession",
    "StyleState",
    "StyleTag",
    "TagSet",
    "__version__",
    "classify",
    "create_engine",
    "emit",
    "generate",
    "render",
    "resolve",
]
