#!/usr/bin/env python3
"""inputmask CLI - mask, unmask and replay keystrokes against a template."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from inputmask import __version__
from inputmask.core.exceptions import InputMaskError
from inputmask.core.patterns import DEFAULT_TOKEN_CHAR
from inputmask.core.preset_loader import PresetConfig, PresetLoader
from inputmask.defaults import DEFAULT_PRESETS, get_preset, list_presets
from inputmask.engine import InputMask, create_input_mask_from_pattern
from inputmask.observability import configure_logging, load_logging_config
from inputmask.wrappers import MaskedField


def template_options(func: Any) -> Any:
    """Options selecting the template a command works against."""
    options = [
        click.option("--preset", "-p", help="Name of a built-in or loaded preset"),
        click.option("--pattern", help="Pattern string, e.g. '(###) ###-####'"),
        click.option(
            "--token-char",
            default=None,
            help=f"Placeholder character used in --pattern (default: {DEFAULT_TOKEN_CHAR})",
        ),
        click.option(
            "--presets-file",
            type=click.Path(exists=True, dir_okay=False),
            help="YAML file with additional presets",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _load_extra_presets(presets_file: str | None) -> dict[str, PresetConfig]:
    if not presets_file:
        return {}
    return PresetLoader().load_presets(Path(presets_file))


def _resolve_mask(
    preset: str | None,
    pattern: str | None,
    token_char: str | None,
    presets_file: str | None,
) -> InputMask:
    if bool(preset) == bool(pattern):
        raise click.UsageError("Specify exactly one of --preset or --pattern")
    if preset and token_char is not None:
        raise click.UsageError("--token-char only applies to --pattern")
    try:
        if pattern:
            return create_input_mask_from_pattern(
                pattern, token_char=token_char or DEFAULT_TOKEN_CHAR
            )
        return get_preset(preset, extra=_load_extra_presets(presets_file))
    except InputMaskError as e:
        raise click.ClickException(e.message) from e


@click.group()
@click.version_option(version=__version__, prog_name="inputmask")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the log level (default: INPUTMASK_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """inputmask: reversible input masking for form fields."""
    ctx.ensure_object(dict)
    try:
        config = load_logging_config()
        if log_level:
            config = config.model_copy(update={"level": log_level.upper()})
        configure_logging(config)
    except InputMaskError as e:
        raise click.ClickException(e.message) from e


@cli.command()
@click.argument("value")
@template_options
def mask(
    value: str,
    preset: str | None,
    pattern: str | None,
    token_char: str | None,
    presets_file: str | None,
) -> None:
    """Format a raw VALUE into the template."""
    input_mask = _resolve_mask(preset, pattern, token_char, presets_file)
    click.echo(input_mask.mask(value))


@cli.command()
@click.argument("prev_value")
@click.argument("masked_value")
@template_options
def unmask(
    prev_value: str,
    masked_value: str,
    preset: str | None,
    pattern: str | None,
    token_char: str | None,
    presets_file: str | None,
) -> None:
    """Recover the raw value after one edit turned PREV_VALUE's display into MASKED_VALUE."""
    input_mask = _resolve_mask(preset, pattern, token_char, presets_file)
    result = input_mask.unmask(prev_value, masked_value)
    if result is None:
        raise click.ClickException("Could not infer the edit from the masked value")
    click.echo(result)


@cli.command("type")
@click.argument("text")
@click.option(
    "--backspace",
    "-b",
    type=int,
    default=0,
    help="Number of backspaces to apply after typing",
)
@template_options
def type_command(
    text: str,
    backspace: int,
    preset: str | None,
    pattern: str | None,
    token_char: str | None,
    presets_file: str | None,
) -> None:
    """Replay TEXT keystroke by keystroke and show every display value."""
    field = MaskedField(_resolve_mask(preset, pattern, token_char, presets_file))
    for character, display in zip(text, field.type(text)):
        click.echo(f"{character!r:>6} -> {display}")
    for _ in range(backspace):
        click.echo(f"{'<BS>':>6} -> {field.backspace()}")
    click.echo(f"raw: {field.raw}")


@cli.command()
@click.option(
    "--presets-file",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with additional presets",
)
def presets(presets_file: str | None) -> None:
    """List available presets."""
    try:
        extra = _load_extra_presets(presets_file)
    except InputMaskError as e:
        raise click.ClickException(e.message) from e

    for name in list_presets(extra):
        preset = extra.get(name) or DEFAULT_PRESETS[name]
        description = f"  {preset.description}" if preset.description else ""
        click.echo(f"{name:<16}{preset.pattern}{description}")


if __name__ == "__main__":
    cli()
