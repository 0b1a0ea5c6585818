"""CLI commands: selectorkit area / json."""

from __future__ import annotations

import json
import sys

import click

from selectorkit.config import SelectorkitConfig
from selectorkit.rectangle import build_rectangle
from selectorkit.serialization import deserialize, serialize


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    value = build_rectangle(width, height).area()
    click.echo(int(value) if value.is_integer() else value)


@click.command("json")
@click.argument("text")
@click.option("--compact/--indent", default=True, help="Compact or indented output")
@click.option("--ascii", "ensure_ascii", is_flag=True, help="Escape non-ASCII characters")
@click.option("--sort-keys", is_flag=True, help="Sort object keys")
def json_cmd(text: str, compact: bool, ensure_ascii: bool, sort_keys: bool) -> None:
    """Parse TEXT as JSON and print it re-serialised."""
    try:
        value = deserialize(text)
    except json.JSONDecodeError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    config = SelectorkitConfig(
        compact_json=compact, ensure_ascii=ensure_ascii, sort_keys=sort_keys
    )
    click.echo(serialize(value, config))
