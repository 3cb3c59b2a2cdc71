from __future__ import annotations

from importlib import metadata
import typer
from rich.console import Console
from rich.table import Table

from fellmore.core.audit import audit_sink
from fellmore.core.config import FellmoreConfig, load_config, resolve_config_path
from fellmore.engine.engine import Engine
from fellmore.screens import Screens
from fellmore.world.loader import load_world
from fellmore.world.models import DIRECTIONS


app = typer.Typer(add_completion=False, help="Lands of Fellmore: a small text adventure")
console = Console()


def _get_version() -> str:
    try:
        return metadata.version("fellmore")
    except metadata.PackageNotFoundError:
        return "0.0.0+local"


def _get_config(config_path: str | None) -> FellmoreConfig:
    try:
        return load_config(resolve_config_path(config_path))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"❌ Could not load config: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(code=2)


def _write(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _ask(prompt: str) -> str:
    return console.input(prompt, markup=False)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Fellmore version and exit.",
        is_eager=True,
    ),
):
    if version:
        console.print(_get_version())
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit()


@app.command("play")
def play(
    config: str | None = typer.Option(None, "--config", help="Path to fellmore.yaml"),
    skip_title: bool = typer.Option(False, "--skip-title", help="Start playing without the title menu."),
):
    cfg = _get_config(config)
    if not skip_title:
        screens = Screens(console, _ask, clear_screen=cfg.clear_screen)
        if not screens.title_menu():
            return

    audit = audit_sink(cfg.audit_path) if cfg.audit_enabled else None
    engine = Engine(load_world(), _write, _ask, audit=audit, prompt=cfg.prompt)
    engine.run()


@app.command("rooms")
def rooms():
    world = load_world()

    table = Table(title="Fellmore Rooms")
    table.add_column("ID", justify="right")
    for direction in DIRECTIONS:
        table.add_column(direction.capitalize(), justify="right")
    table.add_column("Effect")

    for room_id in sorted(world.rooms):
        room = world.get_room(room_id)
        exits = [str(room.exits.get(direction, "")) for direction in DIRECTIONS]
        table.add_row(str(room_id), *exits, room.effect.value)

    console.print(table)
