from __future__ import annotations

from restyle.config import RestyleConfig
from restyle.engine.base import StyleEngine, TagBackend
from restyle.engine.model_backed import ModelBackedEngine
from restyle.engine.static import StaticTemplateEngine
from restyle.errors import ConfigError
from restyle.events import EventBus
from restyle.templates import TemplateRegistry


def create_engine(
    config: RestyleConfig | None = None,
    *,
    backend: TagBackend | None = None,
    registry: TemplateRegistry | None = None,
    bus: EventBus | None = None,
) -> StyleEngine:
    """Select the engine variant named by *config*.

    The ``model`` variant needs a *backend*; the static engine it degrades
    to shares *registry*.
    """
    config = config or RestyleConfig()
    static = StaticTemplateEngine(registry)
    if config.engine == "static":
        return static
    if backend is None:
        raise ConfigError("engine 'model' requires a tag backend")
    return ModelBackedEngine(
        backend,
        fallback=static,
        retry=config.retry_policy(),
        bus=bus,
    )
