"""CLI entry point for AutoBreak.

Usage:
    autobreak run drawing.yaml                     # Compute the break for the active sheet
    autobreak run drawing.yaml --apply -o out.yaml # Apply it and save the document
    autobreak info drawing.yaml                    # Show views and candidacy
    autobreak settings --settings break.yaml       # Show effective settings
    autobreak schema                               # JSON schemas of the engine
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from autobreak.core.contracts import ALLOWED_ORIENTATIONS, describe_failure
from autobreak.core.logging import setup_logging

app = typer.Typer(name="autobreak", help="Automatic break lines for drawing views")
console = Console()


def _load_or_exit(loader, path: Path | None):
    try:
        return loader(path)
    except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
        console.print(f"[red]Cannot load {path}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def run(
    document: Path = typer.Argument(..., help="Drawing document (YAML)"),
    settings: Path = typer.Option(None, "--settings", "-s", help="Break settings (YAML)"),
    apply: bool = typer.Option(False, "--apply", help="Add the break to the document"),
    output: Path = typer.Option(None, "--output", "-o", help="Where to save the updated document"),
    log_level: str = typer.Option("WARNING", help="Logging level"),
) -> None:
    """Compute (and optionally apply) the auto-break for the active sheet."""
    setup_logging(log_level)
    from autobreak.host import (
        BreakHandler,
        BreakSession,
        HostError,
        InMemoryDrawingHost,
        load_document,
        load_settings,
        save_document,
    )

    doc = _load_or_exit(load_document, document)
    session = BreakSession(_load_or_exit(load_settings, settings))
    handler = BreakHandler(InMemoryDrawingHost(doc), session)

    try:
        result = handler.auto_break(apply=apply)
    except (HostError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if result.failure is not None:
        console.print(f"[yellow]Cannot apply auto-break:[/yellow] {describe_failure(result.failure)}")
        raise typer.Exit(1)

    console.print(f"[green]Break for view '{result.request.view_id}':[/green]")
    console.print_json(result.request.model_dump_json())

    if apply and output is not None:
        save_document(doc, output)
        console.print(f"[green]Saved[/green] {output}")


@app.command()
def info(document: Path = typer.Argument(..., help="Drawing document (YAML)")) -> None:
    """Show the active sheet's views and whether they can be auto-broken."""
    from autobreak.host import HostError, InMemoryDrawingHost, load_document
    from autobreak.steps.auto_break import classify_orientation

    doc = _load_or_exit(load_document, document)
    host = InMemoryDrawingHost(doc)
    try:
        sheet = host.active_sheet()
    except HostError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{doc.name} / {sheet.name}")
    table.add_column("View", style="cyan")
    table.add_column("Camera", style="green")
    table.add_column("Size", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Axis", style="dim")
    table.add_column("Breaks", justify="right")
    table.add_column("Candidate", style="yellow")

    for view in host.active_sheet_views():
        candidate = view.camera_orientation in ALLOWED_ORIENTATIONS and not view.is_degenerate
        table.add_row(
            view.id,
            view.camera_orientation.value,
            f"{view.width:g} x {view.height:g}",
            f"{view.area:g}",
            classify_orientation(view),
            str(view.break_count),
            "Y" if candidate else "N",
        )
    console.print(table)


@app.command()
def settings(
    settings_file: Path = typer.Option(None, "--settings", "-s", help="Break settings (YAML)"),
) -> None:
    """Show the effective break settings after range coercion."""
    from autobreak.host import load_settings

    cfg = _load_or_exit(load_settings, settings_file)
    table = Table(title="Break settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("style", cfg.style.name.lower())
    table.add_row("gap", f"{cfg.gap:g}")
    table.add_row("symbols", str(cfg.symbols))
    table.add_row("range_percent", f"{cfg.range_percent:g}")
    console.print(table)


@app.command()
def schema() -> None:
    """Print JSON schemas for the auto-break input, output and config."""
    from autobreak.steps.auto_break import AutoBreakStep

    schemas = {
        "input": AutoBreakStep.input_type.model_json_schema(),
        "output": AutoBreakStep.output_type.model_json_schema(),
        "config": AutoBreakStep.config_type.model_json_schema(),
    }
    console.print_json(json.dumps(schemas))


if __name__ == "__main__":
    app()
