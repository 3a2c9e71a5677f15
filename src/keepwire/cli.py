from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()

import datetime
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from keepwire import config
from keepwire import timestamps as ts
from keepwire.codec import loads, loads_nodes
from keepwire.exc import WireError
from keepwire.models import Item, Reminder
from keepwire.tokens import Dismissed

app = typer.Typer(help="keepwire: inspect notes sync payloads")
console = Console()

logger = logging.getLogger(__name__)


@app.callback()
def main() -> None:
    try:
        level = config.log_level()
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)
    logging.basicConfig(level=level)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"[red]Cannot read {escape(str(path))}: {exc.strerror}[/red]")
        raise typer.Exit(code=1)


def _fail(exc: WireError) -> NoReturn:
    logger.debug("Decode failed", exc_info=exc)
    console.print(f"[red]Incompatible wire data: {escape(str(exc))}[/red]")
    raise typer.Exit(code=1)


def _when(value: Optional[datetime.datetime]) -> str:
    return ts.encode(value) if value is not None else "—"


@app.command()
def inspect(
    path: Path = typer.Argument(..., help="JSON file holding a node or an array of nodes"),
) -> None:
    """Decode notes, lists and list items and show them as a table."""
    try:
        nodes = loads_nodes(_read(path))
    except WireError as exc:
        _fail(exc)

    if not nodes:
        console.print("[green]No nodes.[/green]")
        return

    table = Table(title=f"Nodes in {path.name}")
    table.add_column("Type", style="magenta")
    table.add_column("ID", style="dim")
    table.add_column("Parent", style="dim")
    table.add_column("Title / Text", style="cyan")
    table.add_column("Color")
    table.add_column("Flag", style="yellow")
    table.add_column("Updated", style="yellow")
    for node in nodes:
        if isinstance(node, Item):
            label, color, flag = node.text, "—", "checked" if node.checked else ""
        else:
            label, color, flag = node.title, node.color.name, "archived" if node.archived else ""
        table.add_row(
            node.TYPE.value,
            node.id,
            node.parent_id or "—",
            label,
            color,
            flag,
            _when(node.timestamps.updated),
        )
    console.print(table)


@app.command()
def reminder(
    path: Path = typer.Argument(..., help="JSON file holding one reminder"),
) -> None:
    """Decode a reminder and show when it fires."""
    try:
        rem = loads(_read(path), Reminder)
    except WireError as exc:
        _fail(exc)

    try:
        when = rem.to_datetime()
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    state = "dismissed" if rem.dismissed is Dismissed.DISMISSED else "pending"
    console.print(f"[magenta]{state}[/magenta] {rem.description}")
    console.print(f"fires at [yellow]{when.isoformat()}[/yellow] ({rem.time.period.name.lower()})")


@app.command()
def timestamp(
    value: str = typer.Argument(..., help="Wire timestamp, e.g. 2024-03-05T17:00:00.000Z"),
) -> None:
    """Decode a single wire timestamp."""
    try:
        parsed = ts.decode(value)
    except WireError as exc:
        _fail(exc)
    console.print("unset" if parsed is None else parsed.isoformat())
