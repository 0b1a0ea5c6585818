"""CLI commands: selectorkit selector / combine -- render CSS selectors."""

from __future__ import annotations

import sys
from typing import Any, Iterable

import click

from selectorkit.errors import SelectorError
from selectorkit.selector import SelectorBuilder

# CLI part kind -> SelectorBuilder method name
_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


class PartType(click.ParamType):
    """A ``kind=value`` selector part, e.g. ``class=container``."""

    name = "part"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> tuple[str, str]:
        if isinstance(value, tuple):
            return value
        kind, sep, text = value.partition("=")
        kind = kind.strip().lower()
        if not sep or kind not in _METHODS:
            self.fail(
                f"{value!r} is not KIND=VALUE with KIND one of "
                f"{', '.join(_METHODS)}",
                param,
                ctx,
            )
        return kind, text


PART = PartType()


def _build(parts: Iterable[tuple[str, str]]) -> SelectorBuilder:
    chain = SelectorBuilder()
    for kind, text in parts:
        getattr(chain, _METHODS[kind])(text)
    return chain


@click.command()
@click.argument("parts", nargs=-1, required=True, type=PART)
def selector(parts: tuple[tuple[str, str], ...]) -> None:
    """Build one selector from PARTS applied in the given order.

    \b
    Example:
        selectorkit selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        chain = _build(parts)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(chain.stringify())


@click.command()
@click.argument("combinator")
@click.option("--left", "-l", "left", multiple=True, required=True, type=PART,
              help="Part of the left-hand selector (repeatable)")
@click.option("--right", "-r", "right", multiple=True, required=True, type=PART,
              help="Part of the right-hand selector (repeatable)")
def combine(
    combinator: str,
    left: tuple[tuple[str, str], ...],
    right: tuple[tuple[str, str], ...],
) -> None:
    """Join two selectors with COMBINATOR (' ', '+', '~' or '>')."""
    try:
        chain = SelectorBuilder().combine(_build(left), combinator, _build(right))
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(chain.stringify())
