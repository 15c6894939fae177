"""Core data model for restyle."""

from restyle.model.diagnostic import Diagnostic, Severity
from restyle.model.style import (
    PARAM_NAMES,
    STRUCTURAL_PARAMS,
    ResolvedStyle,
    Scheme,
    StyleDescriptor,
    TemplateParams,
)
from restyle.model.tags import MOODS, THEMES, StyleTag, TagKind, TagSet

__all__ = [
    "Diagnostic",
    "MOODS",
    "PARAM_NAMES",
    "ResolvedStyle",
    "STRUCTURAL_PARAMS",
    "Scheme",
    "Severity",
    "StyleDescriptor",
    "StyleTag",
    "TagKind",
    "TagSet",
    "TemplateParams",
    "THEMES",
]
