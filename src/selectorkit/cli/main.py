"""selectorkit CLI entry point: Click group with subcommands."""
from __future__ import annotations

import dataclasses
import json
import logging
from typing import TextIO

import click

from selectorkit import __version__
from selectorkit.config import LOG_LEVELS, SelectorKitConfig
from selectorkit.errors import SelectorKitError
from selectorkit.objects import Rectangle, to_json
from selectorkit.selector import SimpleSelector

# CLI part kind -> SimpleSelector method name.
_PART_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to SELECTORKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build CSS selectors from typed parts."""
    try:
        config = SelectorKitConfig.from_env()
        if log_level:
            config = dataclasses.replace(config, log_level=log_level.upper())
        logging.basicConfig(level=config.log_level)
    except ValueError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc
    ctx.obj = config


class PartParamType(click.ParamType):
    """A ``KIND=VALUE`` selector part, e.g. ``class=active``."""

    name = "part"

    def convert(
        self,
        value: str | tuple[str, str],
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> tuple[str, str]:
        if isinstance(value, tuple):
            return value
        kind, sep, text = value.partition("=")
        method = _PART_METHODS.get(kind.strip().lower())
        if not sep or method is None:
            self.fail(
                f"{value!r} is not KIND=VALUE with KIND one of: {', '.join(_PART_METHODS)}",
                param,
                ctx,
            )
        return method, text


@cli.command()
@click.argument("parts", nargs=-1, required=True, type=PartParamType())
def build(parts: tuple[tuple[str, str], ...]) -> None:
    """Build a compound selector from KIND=VALUE PARTS and print it.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Parts are applied in the order given and must follow CSS order.

    \b
    Example:
        selectorkit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    selector = SimpleSelector()
    try:
        for method, value in parts:
            selector = getattr(selector, method)(value)
    except SelectorKitError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(selector.stringify())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(f"{Rectangle(width, height).get_area():g}")


@cli.command("to-json")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--indent", type=int, default=None, help="Indent width")
@click.option("--sort-keys", is_flag=True, default=False, help="Sort object keys")
@click.pass_obj
def to_json_command(
    config: SelectorKitConfig,
    source: TextIO,
    indent: int | None,
    sort_keys: bool,
) -> None:
    """Re-emit the JSON in SOURCE (a path or -) using the configured layout."""
    codec = config.codec
    if indent is not None:
        codec = dataclasses.replace(codec, indent=indent)
    if sort_keys:
        codec = dataclasses.replace(codec, sort_keys=sort_keys)

    try:
        value = json.load(source)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Invalid JSON: {exc}") from exc
    click.echo(to_json(value, config=codec))
