"""CLI commands for looking inside the engine: classify, inspect, templates, suggestions."""

from __future__ import annotations

import json

import click

from restyle.classifier import classify as classify_prompt
from restyle.classifier import scan, tokenize
from restyle.cli.options import load_config, style_options
from restyle.engine import StaticTemplateEngine, render
from restyle.session import STYLE_SUGGESTIONS
from restyle.templates import DEFAULT_REGISTRY


@click.command()
@click.argument("prompt")
def classify(prompt: str) -> None:
    """Print the style tags detected in PROMPT, in detection order."""
    matches = scan(tokenize(prompt))
    if not matches:
        click.echo("(no tags)")
        return
    tags = classify_prompt(prompt)
    for tag in tags:
        phrases = sorted({m.phrase for m in matches if m.tag == tag})
        click.echo(f"{tag.name}\t{', '.join(phrases)}")


@click.command()
@click.argument("prompt")
@style_options
@click.option("--json", "as_json", is_flag=True, help="Emit machine-readable JSON")
def inspect(prompt: str, scope: str | None, important: str | None, as_json: bool) -> None:
    """Show how PROMPT is classified and resolved."""
    config = load_config(scope=scope, important=important)
    result = render(
        prompt,
        StaticTemplateEngine(),
        config.emit_options(),
        policy=config.validation_policy(),
        validate_output=config.validate_output,
    )
    info = result.style.to_dict()
    info["fell_back"] = result.fell_back
    info["diagnostics"] = [str(d) for d in result.diagnostics]

    if as_json:
        click.echo(json.dumps(info, indent=2))
        return

    click.echo(f"Prompt:    {prompt}")
    click.echo(f"Tags:      {', '.join(info['tags']) or '(none)'}")
    click.echo(f"Template:  {info['template']}")
    if info["hue_override"]:
        click.echo(f"Hue:       {info['hue_override']}")
    if info["contributors"]:
        click.echo(f"Combined:  {', '.join(info['contributors'])}")
    if info["shadowed"]:
        click.echo(f"Shadowed:  {', '.join(info['shadowed'])}")
    if info["discarded"]:
        click.echo(f"Discarded: {', '.join(info['discarded'])}")
    click.echo("Params:")
    for key, value in info["params"].items():
        click.echo(f"  {key}: {value}")
    for line in info["diagnostics"]:
        click.echo(f"  {line}")


@click.command()
def templates() -> None:
    """List the registered templates."""
    for template in DEFAULT_REGISTRY:
        marker = " (default)" if template is DEFAULT_REGISTRY.default else ""
        if template is DEFAULT_REGISTRY.hue:
            tags = "hue:*"
        else:
            tags = ", ".join(sorted(template.tags))
        click.echo(f"{template.name}{marker}\t[{template.family.value}] {tags}")
        if template.description:
            click.echo(f"    {template.description}")


@click.command()
def suggestions() -> None:
    """List the quick style suggestions."""
    for index, suggestion in enumerate(STYLE_SUGGESTIONS):
        click.echo(f"{index}. {suggestion}")
