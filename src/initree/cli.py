"""Command-line access to INI files."""

from __future__ import annotations

import logging
import sys

import click

from ._converters import Char, Long, Short
from ._document import Document
from ._types import IniError

_TYPES = {
    "bool": bool,
    "char": Char,
    "short": Short,
    "int": int,
    "long": Long,
    "float": float,
    "str": str,
}


def _fail(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def _load(path: str, *, missing_ok: bool = False) -> Document:
    document = Document()
    if not document.load(path) and not missing_ok:
        _fail(f"cannot read {path}")
    return document


def _save(document: Document, path: str) -> None:
    if not document.save(path):
        _fail(f"cannot write {path}")


@click.group("initree")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Read and edit INI files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command("get")
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("section")
@click.argument("key")
@click.option(
    "--type",
    "type_name",
    type=click.Choice(sorted(_TYPES)),
    default="str",
    show_default=True,
    help="Decode the first value as this type.",
)
@click.option("--vector", is_flag=True, help="Decode every value, one per line.")
@click.option("--default", default=None, help="Printed when the key is missing.")
def get_command(
    file: str, section: str, key: str, type_name: str, vector: bool, default: str | None
) -> None:
    """Print the value of SECTION/KEY.

    Examples:\n
        initree get app.ini server port --type int\n
        initree get app.ini server hosts --vector\n
    """
    document = _load(file)
    value = document.get(section, key)
    if value is None:
        if default is None:
            _fail(f"key '{key}' not found in section '{section}'")
        click.echo(default)
        return
    type_ = _TYPES[type_name]
    try:
        if vector:
            for item in value.get_vector_as(type_):
                click.echo(item)
        elif type_ is str:
            click.echo(str(value))
        else:
            click.echo(value.get_as(type_))
    except IniError as e:
        _fail(str(e))


@cli.command("set")
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("section")
@click.argument("key")
@click.argument("values", nargs=-1, required=True)
def set_command(file: str, section: str, key: str, values: tuple[str, ...]) -> None:
    """Set SECTION/KEY to VALUES, creating FILE if needed."""
    document = _load(file, missing_ok=True)
    document.set(section, key, list(values))
    _save(document, file)


@cli.command("remove")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("section")
@click.argument("key", required=False)
def remove_command(file: str, section: str, key: str | None) -> None:
    """Remove KEY from SECTION, or the whole SECTION."""
    document = _load(file)
    removed = document.remove_section(section) if key is None else document.remove_key(section, key)
    if not removed:
        _fail(f"'{section if key is None else key}' not found")
    _save(document, file)


@cli.command("clear")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("section")
def clear_command(file: str, section: str) -> None:
    """Remove every key of SECTION, keeping the section."""
    document = _load(file)
    document.clear_section(section)
    _save(document, file)


@cli.command("sections")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def sections_command(file: str) -> None:
    """List section names."""
    for name in _load(file).sections():
        click.echo(name)


@cli.command("keys")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("section")
def keys_command(file: str, section: str) -> None:
    """List the keys of SECTION."""
    document = _load(file)
    try:
        found = document.require_section(section)
    except IniError as e:
        _fail(str(e))
    for key in found:
        click.echo(key)


@cli.command("dump")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
def dump_command(file: str) -> None:
    """Print FILE as it would be saved."""
    click.echo(_load(file).dumps(), nl=False)


def main() -> None:
    cli()
