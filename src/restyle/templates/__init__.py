"""Template registry, built-in catalog, and color palette."""

from restyle.templates.base import SYSTEM_FONT, Template, TemplateFamily, base_descriptor
from restyle.templates.catalog import BUILTIN_TEMPLATES
from restyle.templates.palette import NAMED_COLORS
from restyle.templates.registry import TemplateRegistry

DEFAULT_REGISTRY = TemplateRegistry(BUILTIN_TEMPLATES)

__all__ = [
    "BUILTIN_TEMPLATES",
    "DEFAULT_REGISTRY",
    "NAMED_COLORS",
    "SYSTEM_FONT",
    "Template",
    "TemplateFamily",
    "TemplateRegistry",
    "base_descriptor",
]
