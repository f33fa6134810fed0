"""Command Line Interface for Room Layout.

This module provides a simple CLI for inspecting, rendering and exporting
room layouts described in JSON files.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core.errors import PlacementError
from .core.model import Corner, Side, Wall
from .core.room import Room
from .io.parser import load_room, save_room
from .visualization.generator import generate_room_images
from .visualization.text import TextRenderer

app = typer.Typer(
    name="roomlayout",
    help="A CLI tool for natural furniture placement in rectangular rooms",
    no_args_is_help=True,
)
console = Console()


def build_demo_room() -> Room:
    """Living room furnished with every placement mode."""
    room = Room(5.0, 4.0, 2.5)

    sofa = room.place("Sofa", 2.0, 0.8, 0.8).in_corner(Corner.NORTH_EAST).with_gap(0.2).build()
    room.place("TV", 1.2, 0.3, 0.6).on_wall(Wall.NORTH).centered().build()
    room.place("Coffee Table", 1.0, 0.6, 0.4).in_center().shift_south(0.5).build()
    chair = room.place("Chair", 0.6, 0.6, 0.9).next_to(sofa).on_side(Side.WEST).with_gap(0.1).build()
    room.place("Side Table", 0.4, 0.4, 0.5).next_to(chair).on_side(Side.SOUTH).with_gap(0.05).build()
    room.place("Bookshelf", 0.3, 1.5, 2.0).on_wall(Wall.EAST).from_north(1.0).with_gap(0.1).build()
    room.place("Desk", 1.2, 0.6, 0.75).in_corner(Corner.SOUTH_WEST).with_gap(0.15).build()

    room.place_door("Main", 0.9, 2.1).on_wall(Wall.SOUTH).from_east(0.5).build()
    room.place_window("Casement", 1.2, 1.2, 0.9).on_wall(Wall.WEST).centered().build()
    return room


def _print_room(room: Room) -> None:
    console.print(f"[bold]{room}[/bold]")

    if room.furniture:
        table = Table(title=f"Furniture: {len(room.furniture)}")
        table.add_column("Name", style="cyan")
        table.add_column("Size (W x L x H)", justify="center")
        table.add_column("Position", justify="center", style="green")
        table.add_column("Rotation", justify="right")
        for f in room.furniture:
            table.add_row(
                f.name,
                f"{f.width:.2f} x {f.length:.2f} x {f.height:.2f}",
                f"({f.x:.2f}, {f.y:.2f})",
                f"{f.rotation:.0f}",
            )
        console.print(table)

    if room.wall_items:
        table = Table(title=f"Doors and windows: {len(room.wall_items)}")
        table.add_column("Kind", style="cyan")
        table.add_column("Type", style="green")
        table.add_column("Wall", style="magenta")
        table.add_column("Position", justify="right")
        table.add_column("Size (W x H)", justify="center")
        table.add_column("Bottom", justify="right")
        for item in room.wall_items:
            table.add_row(
                item.kind,
                item.type,
                str(item.wall),
                f"{item.position:.2f}",
                f"{item.width:.2f} x {item.height:.2f}",
                f"{item.bottom_height:.2f}",
            )
        console.print(table)


def _write_views(room: Room, out: Path, text: bool, images: bool, scale: Optional[int]) -> None:
    if text:
        paths = TextRenderer(room, scale).save_all(out)
        console.print(f"[green]✓[/green] Saved {len(paths)} text views to {out}")
    if images:
        paths = generate_room_images(room, out)
        console.print(f"[green]✓[/green] Saved {len(paths)} images to {out}")


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Natural furniture placement in rectangular rooms."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def show(layout: Path = typer.Argument(..., help="Path to layout JSON file")):
    """Show the resolved positions of a layout."""
    try:
        room = load_room(layout)
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (PlacementError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    _print_room(room)


@app.command()
def render(
    layout: Path = typer.Argument(..., help="Path to layout JSON file"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Directory for saved views"),
    text: bool = typer.Option(True, "--text/--no-text", help="Save text views (with --out)"),
    images: bool = typer.Option(False, "--images/--no-images", help="Save PNG views (with --out)"),
    scale: Optional[int] = typer.Option(None, "--scale", "-s", min=1, help="Characters per meter"),
):
    """Print the floor plan of a layout and optionally save every view."""
    try:
        room = load_room(layout)
        renderer = TextRenderer(room, scale)
        console.print(renderer.floor_plan(), markup=False, highlight=False, soft_wrap=True)
        if out is not None:
            _write_views(room, out, text, images, scale)
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (PlacementError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def export(
    layout: Path = typer.Argument(..., help="Path to layout JSON file"),
    out: Path = typer.Option(..., "--out", "-o", help="Path to output layout JSON file"),
):
    """Resolve every placement of a layout and save absolute positions."""
    try:
        room = load_room(layout)
        path = save_room(room, out)
    except FileNotFoundError as e:
        console.print(f"[red]Error: File not found - {e}[/red]")
        raise typer.Exit(1)
    except (PlacementError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Resolved layout saved to {path}")


@app.command()
def demo(
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Directory for saved views"),
    images: bool = typer.Option(False, "--images/--no-images", help="Save PNG views (with --out)"),
):
    """Build the demo living room and print it."""
    room = build_demo_room()
    _print_room(room)
    console.print(TextRenderer(room).floor_plan(), markup=False, highlight=False, soft_wrap=True)
    if out is not None:
        _write_views(room, out, True, images, None)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
