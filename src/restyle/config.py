from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any, Mapping

from restyle.errors import ConfigError
from restyle.stylesheet.emitter import EmitOptions, ImportantPolicy
from restyle.stylesheet.roles import DEFAULT_INJECTION_ID, DEFAULT_SCOPE
from restyle.validation.rules import ValidationPolicy

if TYPE_CHECKING:
    from restyle.engine.retry import RetryPolicy

ENGINES = ("static", "model")

ENV_PREFIX = "RESTYLE_"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass(frozen=True)
class RestyleConfig:
    engine: str = "static"  # "static" or "model"
    scope: str = DEFAULT_SCOPE
    important: str = ImportantPolicy.NONE.value
    injection_id: str = DEFAULT_INJECTION_ID
    validate_output: bool = True
    header: bool = True
    max_retries: int = 2
    retry_base_delay: float = 0.5

    def __post_init__(self) -> None:
        if self.engine not in ENGINES:
            raise ConfigError(f"Unknown engine {self.engine!r}; expected one of {ENGINES}")
        if self.important not in {p.value for p in ImportantPolicy}:
            raise ConfigError(f"Unknown !important policy {self.important!r}")
        if self.max_retries < 0:
            raise ConfigError("max_retries must be >= 0")
        try:
            self.emit_options()
        except ValueError as exc:
            raise ConfigError(str(exc), cause=exc) from exc

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RestyleConfig:
        """Build a config from ``RESTYLE_*`` variables, e.g. ``RESTYLE_ENGINE=model``."""
        environ = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            kwargs[f.name] = _coerce(f.name, f.type, raw)
        return cls(**kwargs)

    def emit_options(self) -> EmitOptions:
        return EmitOptions(
            scope=self.scope,
            important=ImportantPolicy(self.important),
            header=self.header,
        )

    def validation_policy(self) -> ValidationPolicy:
        return ValidationPolicy(
            scope=self.scope,
            injection_id=self.injection_id,
            important=ImportantPolicy(self.important),
        )

    def retry_policy(self) -> RetryPolicy:
        from restyle.engine.retry import RetryPolicy

        return RetryPolicy(max_retries=self.max_retries, base_delay=self.retry_base_delay)


def _coerce(name: str, annotation: object, raw: str) -> object:
    """Coerce an environment string to the field's annotated type."""
    raw = raw.strip()
    try:
        if annotation in ("bool", bool):
            lowered = raw.lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise ValueError(f"not a boolean: {raw!r}")
        if annotation in ("int", int):
            return int(raw)
        if annotation in ("float", float):
            return float(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid value for {ENV_PREFIX}{name.upper()}: {raw!r}", cause=exc) from exc
    return raw
