"""Engines: the static template engine, the model-backed variant, and entry points."""

from restyle.engine.base import TAG_VOCABULARY, StyleEngine, TagBackend
from restyle.engine.factory import create_engine
from restyle.engine.generate import Generation, generate, render
from restyle.engine.model_backed import ModelBackedEngine, StubTagBackend
from restyle.engine.retry import NO_RETRY, RetryPolicy, with_retry
from restyle.engine.static import StaticTemplateEngine

__all__ = [
    "Generation",
    "ModelBackedEngine",
    "NO_RETRY",
    "RetryPolicy",
    "StaticTemplateEngine",
    "StubTagBackend",
    "StyleEngine",
    "TAG_VOCABULARY",
    "TagBackend",
    "create_engine",
    "generate",
    "render",
    "with_retry",
]
