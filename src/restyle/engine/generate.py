"""The string-in, string-out entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from restyle.engine.base import StyleEngine
from restyle.engine.static import StaticTemplateEngine
from restyle.errors import StylesheetParseError
from restyle.model.diagnostic import Diagnostic
from restyle.model.style import ResolvedStyle
from restyle.model.tags import TagSet
from restyle.stylesheet.emitter import EmitOptions, emit
from restyle.validation import ValidationPolicy, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Generation:
    """Everything produced for one prompt."""

    prompt: str
    style: ResolvedStyle
    stylesheet: str
    diagnostics: tuple[Diagnostic, ...] = field(default=())
    fell_back: bool = False


def _policy_for(options: EmitOptions) -> ValidationPolicy:
    return ValidationPolicy(scope=options.scope, important=options.important)


def _passes(stylesheet: str, policy: ValidationPolicy) -> bool:
    try:
        return not any(d.is_error for d in validate(stylesheet, policy))
    except StylesheetParseError:
        return False


def render(
    prompt: str,
    engine: StyleEngine | None = None,
    options: EmitOptions | None = None,
    *,
    policy: ValidationPolicy | None = None,
    validate_output: bool = True,
) -> Generation:
    """Classify, resolve and emit *prompt*.

    With *validate_output*, a stylesheet that fails validation is replaced by
    the engine's default-template stylesheet so the caller always receives
    injectable text. When even that fails under *options*, the default
    template is emitted with default options instead.
    """
    engine = engine or StaticTemplateEngine()
    options = options or EmitOptions()
    prompt = prompt or ""

    style = engine.resolve(engine.classify(prompt))
    stylesheet = emit(style, options)
    if not validate_output:
        return Generation(prompt=prompt, style=style, stylesheet=stylesheet)

    policy = policy or _policy_for(options)
    try:
        diagnostics = tuple(validate(stylesheet, policy))
    except StylesheetParseError as exc:
        logger.warning("emitted stylesheet for %s did not parse: %s", style.template, exc)
        diagnostics = None

    if diagnostics is not None and not any(d.is_error for d in diagnostics):
        return Generation(prompt, style, stylesheet, diagnostics)

    if diagnostics:
        logger.warning(
            "stylesheet for %s failed validation: %s",
            style.template,
            "; ".join(str(d) for d in diagnostics if d.is_error),
        )
    fallback = engine.resolve(TagSet())
    fallback_sheet = emit(fallback, options)
    if not _passes(fallback_sheet, policy):
        logger.warning("default stylesheet failed validation; emitting with default options")
        fallback_sheet = emit(fallback, EmitOptions())
    return Generation(
        prompt=prompt,
        style=fallback,
        stylesheet=fallback_sheet,
        diagnostics=diagnostics or (),
        fell_back=True,
    )


def generate(
    prompt: str,
    engine: StyleEngine | None = None,
    options: EmitOptions | None = None,
    *,
    policy: ValidationPolicy | None = None,
    validate_output: bool = True,
) -> str:
    """Return a non-empty stylesheet for any prompt."""
    return render(
        prompt,
        engine,
        options,
        policy=policy,
        validate_output=validate_output,
    ).stylesheet
