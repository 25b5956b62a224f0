"""Typer CLI application."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from oklch_names.codec.annotation import Placement
from oklch_names.config import Settings
from oklch_names.core.document import TextDocument
from oklch_names.core.span import Position, Span
from oklch_names.edit.plan import EditPlan, PlanStatus
from oklch_names.errors import TransactionFailed

# Outcomes that mean the command could not do its job, as opposed to
# finding nothing to do.
_FAILURE_STATUSES = {PlanStatus.NO_BUFFER, PlanStatus.CANCELLED, PlanStatus.PALETTE_UNAVAILABLE}


def _css_files(path: Path) -> list[Path]:
    if path.is_dir():
        return sorted(set(path.glob("*.css")) | set(path.glob("*.CSS")))
    return [path]


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install oklch-names[cli]")

    from oklch_names.cli.picker import ConsolePicker
    from oklch_names.commands import ColorCommands

    app = typer.Typer(
        name="oklch-names",
        help="Name, annotate and swap oklch() colors in stylesheets.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    # stdout carries document text, so reports go to stderr
    console = Console(stderr=True)
    state: dict[str, object] = {}

    @app.callback()
    def configure(
        palette: Annotated[Optional[Path], typer.Option("--palette", "-p", help="Palette JSON file (default: $OKLCH_NAMES_PALETTE)")] = None,
        placement: Annotated[Optional[Placement], typer.Option("--placement", help="Annotation placement", case_sensitive=False)] = None,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ) -> None:
        """Name, annotate and swap oklch() colors in stylesheets."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )
        try:
            settings = Settings.from_env()
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        state["settings"] = settings.with_overrides(palette_path=palette, placement=placement)

    def get_commands() -> ColorCommands:
        settings: Settings = state["settings"]  # type: ignore[assignment]
        if settings.palette_path is None:
            console.print("[red]No palette given. Use --palette or set OKLCH_NAMES_PALETTE.[/]")
            raise typer.Exit(1)
        return ColorCommands.from_path(
            settings.palette_path,
            ConsolePicker(console),
            placement=settings.placement,
        )

    def finish(plan: EditPlan, doc: TextDocument, output: Optional[Path], in_place: bool) -> None:
        """Report a plan and write the document where it was asked to go."""
        if plan.status in _FAILURE_STATUSES:
            console.print(f"[red]{plan.message}[/]")
            raise typer.Exit(1)
        if not plan.ok:
            console.print(f"[yellow]{plan.message}[/]")
        else:
            console.print(f"[green]{plan.message}[/]")

        if in_place:
            if plan.has_edits:
                doc.save()
        elif output is not None:
            doc.save(output)
        else:
            sys.stdout.write(doc.text)

    def run_batch(path: Path, output: Optional[Path], in_place: bool, run) -> None:
        """Apply run to one file, or to every .css file in a directory."""
        if not path.is_dir():
            doc = TextDocument.load(path)
            try:
                plan = run(doc)
            except TransactionFailed as e:
                console.print(f"[red]{e}[/]")
                raise typer.Exit(1)
            finish(plan, doc, output, in_place)
            return

        if not in_place and output is None:
            console.print("[red]Directories need --in-place or --output DIR[/]")
            raise typer.Exit(1)
        if output is not None and not in_place:
            output.mkdir(parents=True, exist_ok=True)

        files = _css_files(path)
        changed = 0
        for f in files:
            doc = TextDocument.load(f)
            try:
                plan = run(doc)
            except TransactionFailed as e:
                console.print(f"[red]{f.name}[/]: {e}")
                raise typer.Exit(1)
            if plan.status in _FAILURE_STATUSES:
                console.print(f"[red]{plan.message}[/]")
                raise typer.Exit(1)
            if plan.has_edits:
                changed += 1
                console.print(f"[green]{f.name}[/]: {plan.message}")
            else:
                console.print(f"[dim]{f.name}[/]: {plan.message}")
            if in_place:
                if plan.has_edits:
                    doc.save()
            else:
                doc.save(output / f.name)

        console.print(f"\n[bold]Changed {changed}/{len(files)} files[/]")

    @app.command()
    def hover(
        path: Annotated[Path, typer.Argument(help="Stylesheet to inspect")],
        line: Annotated[int, typer.Argument(min=1, help="Line number (1-based)")],
        column: Annotated[int, typer.Argument(min=1, help="Column number (1-based)")],
    ) -> None:
        """Show the palette name of the color at LINE:COLUMN."""
        commands = get_commands()
        doc = TextDocument.load(path)
        if line > doc.line_count:
            console.print(f"[red]{path.name} has only {doc.line_count} lines[/]")
            raise typer.Exit(1)
        if not commands.available:
            console.print("[red]Color palette is not loaded.[/]")
            raise typer.Exit(1)

        result = commands.hover(doc, Position(line - 1, column - 1))
        if result is None:
            console.print(f"[dim]No named color at {line}:{column}[/]")
            raise typer.Exit(1)
        print(result.text)

    @app.command()
    def annotate(
        path: Annotated[Path, typer.Argument(help="Stylesheet or directory of .css files")],
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file or directory")] = None,
        in_place: Annotated[bool, typer.Option("--in-place", "-i", help="Overwrite original files")] = False,
    ) -> None:
        """Add or refresh a /* Name */ comment after every oklch() color."""
        commands = get_commands()
        run_batch(path, output, in_place, commands.annotate_all)

    @app.command()
    def strip(
        path: Annotated[Path, typer.Argument(help="Stylesheet or directory of .css files")],
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file or directory")] = None,
        in_place: Annotated[bool, typer.Option("--in-place", "-i", help="Overwrite original files")] = False,
    ) -> None:
        """Remove the name comment after every oklch() color."""
        commands = get_commands()
        run_batch(path, output, in_place, commands.remove_all_annotations)

    @app.command()
    def replace(
        path: Annotated[Path, typer.Argument(help="Stylesheet to edit")],
        line: Annotated[int, typer.Argument(min=1, help="Line number (1-based)")],
        column: Annotated[int, typer.Argument(min=1, help="Column number (1-based)")],
        color: Annotated[Optional[str], typer.Option("--color", "-c", help="Palette name to use (prompts if omitted)")] = None,
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file")] = None,
        in_place: Annotated[bool, typer.Option("--in-place", "-i", help="Overwrite the original file")] = False,
    ) -> None:
        """Replace the color at LINE:COLUMN with a palette color, keeping its alpha."""
        commands = get_commands()
        doc = TextDocument.load(path)
        if line > doc.line_count:
            console.print(f"[red]{path.name} has only {doc.line_count} lines[/]")
            raise typer.Exit(1)
        offset = doc.offset_at(Position(line - 1, column - 1))
        cursor = Span(offset, offset)

        try:
            if color is None:
                plan = commands.select_color(doc, cursor)
            else:
                entry = commands.palette.find_entry(color) if commands.available else None
                if commands.available and entry is None:
                    console.print(f"[red]No palette color named {color!r}[/]")
                    raise typer.Exit(1)
                plan = commands.replace_color(doc, cursor, entry)
        except TransactionFailed as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)
        finish(plan, doc, output, in_place)

    @app.command("convert-gray")
    def convert_gray(
        path: Annotated[Path, typer.Argument(help="Stylesheet or directory of .css files")],
        to: Annotated[Optional[str], typer.Option("--to", "-t", help="Target gray family (prompts if omitted)")] = None,
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file or directory")] = None,
        in_place: Annotated[bool, typer.Option("--in-place", "-i", help="Overwrite original files")] = False,
    ) -> None:
        """Move every Slate/Gray/Zinc/Neutral/Stone color to another gray family."""
        from oklch_names.edit.planner import GRAY_FAMILIES

        commands = get_commands()
        if to is None:
            run_batch(path, output, in_place, commands.convert_gray_family)
            return

        family = next((f for f in GRAY_FAMILIES if f.lower() == to.lower()), None)
        if family is None:
            console.print(f"[red]Unknown gray family {to!r}. Choose from {', '.join(GRAY_FAMILIES)}[/]")
            raise typer.Exit(1)
        run_batch(path, output, in_place, lambda doc: commands.convert_to_family(doc, family))

    @app.command()
    def palette(
        query: Annotated[Optional[str], typer.Argument(help="Filter by name or oklch() value")] = None,
    ) -> None:
        """List palette colors."""
        commands = get_commands()
        if not commands.available:
            console.print("[red]Color palette is not loaded.[/]")
            raise typer.Exit(1)

        entries = commands.palette.search(query or "")
        if not entries:
            console.print(f"[yellow]No colors match {query!r}[/]")
            raise typer.Exit(1)

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Name")
        table.add_column("Value")
        for entry in entries:
            table.add_row(entry.name, entry.literal())
        Console().print(table)

    return app
