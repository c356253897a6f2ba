"""methodical CLI — inspect declarations and check objects against them."""

import importlib
import logging

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from methodical import __version__

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """methodical — runtime interface conformance for duck-typed objects.

    Declare the methods an object must (and may) provide in a YAML or JSON
    file, then check real objects against it.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ── Show ─────────────────────────────────────────────────────────────


@main.command()
@click.argument("declaration_path")
def show(declaration_path: str):
    """Print the normalized interface a declaration file describes."""
    interface = _load_or_fail(declaration_path)
    descriptor = interface.get_interface()

    if not descriptor.required and not descriptor.optional:
        console.print("[yellow]The declaration does not name any methods.[/]")
        return

    title = f'Interface "{interface.name}"' if interface.name else "Interface"
    table = Table(title=title)
    table.add_column("Method", style="cyan")
    table.add_column("Kind")

    for method_name in descriptor.required:
        table.add_row(method_name, "[bold]required[/]")
    for method_name in descriptor.optional or {}:
        table.add_row(method_name, "[dim]optional[/]")

    console.print(table)


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("declaration_path")
@click.argument("target")
@click.option("--name", default=None, help="Interface name to use in error messages")
def check(declaration_path: str, target: str, name: str | None):
    """Check an importable object against a declaration.

    TARGET is written as package.module:attribute.
    """
    from methodical.errors import ConformanceError

    interface = _load_or_fail(declaration_path, name=name)
    obj = _import_target(target)

    console.print(f"\n[bold blue]methodical[/] — Checking {target}\n")

    try:
        interface.check(obj)
    except ConformanceError as e:
        console.print(Panel(str(e), title="[red]FAIL[/]"))
        for method_name in e.missing:
            console.print(f"  [red]x[/] {method_name}")
        raise SystemExit(1)

    console.print(f"  [green]v[/] {len(interface.get_interface().required)} required method(s) implemented")
    console.print("\n[green]PASS[/]")


# ── From class ───────────────────────────────────────────────────────


@main.command("from-class")
@click.argument("target")
def from_class(target: str):
    """Print the declaration derived from a class's own methods.

    TARGET is written as package.module:ClassName.
    """
    from methodical.interface import Methodical
    from methodical.loader import dump_interface

    cls = _import_target(target)
    try:
        interface = Methodical.from_constructor(cls)
    except TypeError as e:
        raise click.UsageError(f"{target}: {e}")

    click.echo(dump_interface(interface), nl=False)


def _load_or_fail(declaration_path: str, name: str | None = None):
    from methodical.errors import DeclarationFileError
    from methodical.loader import load_interface

    try:
        return load_interface(declaration_path, name=name)
    except DeclarationFileError as e:
        raise click.UsageError(str(e))


def _import_target(target: str):
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.UsageError(f"Target must look like package.module:attribute, got {target!r}")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise click.UsageError(f"Cannot import {module_name}: {e}")

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise click.UsageError(f"{module_name} has no attribute {attr_path!r}")
    return obj


if __name__ == "__main__":
    main()
