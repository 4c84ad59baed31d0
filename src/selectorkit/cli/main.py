"""selectorkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from selectorkit import __version__
from selectorkit.errors import ParseError, SelectorError
from selectorkit.objects import Rectangle, from_json, to_json
from selectorkit.selector import Combinator, SimpleSelector, css_selector_builder

_COMBINATOR_NAMES = {
    "descendant": Combinator.DESCENDANT,
    "child": Combinator.CHILD,
    "adjacent": Combinator.ADJACENT_SIBLING,
    "sibling": Combinator.GENERAL_SIBLING,
}


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """selectorkit - build CSS selectors and inspect simple objects."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--element", help="Element (type) name")
@click.option("--id", "id_", help="Element id")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attrs", multiple=True, help="Attribute condition (repeatable)")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)"
)
@click.option("--pseudo-element", help="Pseudo-element")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a simple selector from its parts and print it."""
    result = SimpleSelector()
    try:
        if element:
            result = result.element(element)
        if id_:
            result = result.id(id_)
        for name in classes:
            result = result.class_(name)
        for condition in attrs:
            result = result.attr(condition)
        for name in pseudo_classes:
            result = result.pseudo_class(name)
        if pseudo_element:
            result = result.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(css_selector_builder.stringify(result))


@cli.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two selectors with a combinator and print the result.

    COMBINATOR is one of descendant, child, adjacent, sibling, or the raw
    character (' ', '>', '+', '~').
    """
    token = _COMBINATOR_NAMES.get(combinator.lower(), combinator)
    compound = css_selector_builder.combine(
        css_selector_builder.element(left), token, css_selector_builder.element(right)
    )
    click.echo(compound.stringify())


# ---------------------------------------------------------------------------
# Rectangles
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("width", type=float, required=False)
@click.argument("height", type=float, required=False)
@click.option("--json", "json_text", help='Rectangle as JSON, e.g. {"width":2,"height":3}')
def area(width: float | None, height: float | None, json_text: str | None) -> None:
    """Print the area of a rectangle given as WIDTH HEIGHT or as JSON."""
    if json_text is not None:
        try:
            rect = from_json(Rectangle.from_fields, json_text)
        except ParseError as exc:
            click.echo(f"Parse error: {exc}", err=True)
            sys.exit(1)
        except KeyError as exc:
            click.echo(f"Missing field: {exc.args[0]}", err=True)
            sys.exit(1)
    elif width is not None and height is not None:
        rect = Rectangle(width, height)
    else:
        raise click.UsageError("Provide WIDTH and HEIGHT, or --json")

    try:
        text = f"{rect.area():g}"
    except (TypeError, ValueError) as exc:
        click.echo(f"Invalid rectangle: {exc}", err=True)
        sys.exit(1)
    click.echo(text)


@cli.command("to-json")
@click.argument("width", type=float)
@click.argument("height", type=float)
def to_json_command(width: float, height: float) -> None:
    """Print the JSON form of a rectangle."""
    click.echo(to_json(Rectangle(width, height)))
