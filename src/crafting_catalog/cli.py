# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface for inspecting and validating action catalogs."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .errors import CatalogError, CatalogIntegrityError, CatalogNotFoundError, CatalogValidationError
from .loader import load_catalog
from .model_action import Action
from .model_catalog import ActionCatalog
from .settings import CatalogSettings
from .types import JSONValue

app = typer.Typer(help="Inspect the crafting action catalog.", no_args_is_help=True)


@dataclass(slots=True)
class CLIState:
    """Options shared by every sub-command."""

    settings: CatalogSettings
    console: Console


@app.callback()
def main(
    ctx: typer.Context,
    catalog: Annotated[
        Path | None,
        typer.Option("--catalog", "-c", help="Catalog document to load instead of the bundled data."),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Reject actions that appear in more than one group."),
    ] = False,
) -> None:
    """Resolve settings from the environment and command line options."""

    settings = CatalogSettings.from_env()
    updates: dict[str, object] = {}
    if catalog is not None:
        updates["catalog_path"] = catalog
    if strict:
        updates["strict_membership"] = True
    ctx.obj = CLIState(
        settings=CatalogSettings.model_validate({**settings.model_dump(), **updates}),
        console=Console(),
    )


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):  # pragma: no cover - callback always runs first
        raise typer.BadParameter("CLI state not initialised")
    return state


def _open_catalog(state: CLIState) -> ActionCatalog:
    try:
        return load_catalog(state.settings)
    except (CatalogError, FileNotFoundError) as exc:
        state.console.print(Panel(f"[red]{escape(str(exc))}[/red]", title="Catalog error", border_style="red"))
        raise typer.Exit(code=1) from exc


def _emit_json(payload: JSONValue) -> None:
    typer.echo(json.dumps(payload, indent=2))


def _actions_table(title: str, actions: tuple[Action, ...], catalog: ActionCatalog) -> Table:
    table = Table(title=title)
    table.add_column("Short name", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Group", style="magenta")
    for action in actions:
        group = catalog.group_of(action.short_name) or "-"
        table.add_row(escape(action.short_name), escape(action.name), escape(group))
    return table


JsonOption = Annotated[bool, typer.Option("--json", help="Emit JSON instead of a table.")]


@app.command("classes")
def classes_command(ctx: typer.Context, as_json: JsonOption = False) -> None:
    """List craftable classes in display order."""

    state = _state(ctx)
    catalog = _open_catalog(state)
    if as_json:
        _emit_json(list(catalog.list_classes()))
        return
    table = Table(title="Classes")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Class", style="cyan")
    for position, name in enumerate(catalog.list_classes(), start=1):
        table.add_row(str(position), escape(name))
    state.console.print(table)


@app.command("actions")
def actions_command(
    ctx: typer.Context,
    group: Annotated[str | None, typer.Option("--group", "-g", help="Only list actions of this group.")] = None,
    as_json: JsonOption = False,
) -> None:
    """List actions in declaration order or for a single group."""

    state = _state(ctx)
    catalog = _open_catalog(state)
    try:
        actions = catalog.resolve_group_actions(group) if group is not None else catalog.list_actions()
    except CatalogNotFoundError as exc:
        state.console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    if as_json:
        _emit_json([action.to_dict() for action in actions])
        return
    state.console.print(_actions_table(escape(group or "Actions"), actions, catalog))


@app.command("groups")
def groups_command(ctx: typer.Context, as_json: JsonOption = False) -> None:
    """List action groups with their members."""

    state = _state(ctx)
    catalog = _open_catalog(state)
    if as_json:
        _emit_json([group.to_dict() for group in catalog.list_groups()])
        return
    table = Table(title="Action groups")
    table.add_column("Group", style="magenta", no_wrap=True)
    table.add_column("Actions")
    for group in catalog.list_groups():
        table.add_row(escape(group.name), escape(", ".join(group.actions)))
    state.console.print(table)
    ungrouped = catalog.ungrouped_actions()
    if ungrouped:
        names = ", ".join(action.short_name for action in ungrouped)
        state.console.print(f"[yellow]Ungrouped:[/yellow] {escape(names)}")


@app.command("show")
def show_command(
    ctx: typer.Context,
    short_name: Annotated[str, typer.Argument(help="Short name of the action.")],
) -> None:
    """Show a single action."""

    state = _state(ctx)
    catalog = _open_catalog(state)
    try:
        action = catalog.get_action(short_name)
    except CatalogNotFoundError as exc:
        state.console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    group = catalog.group_of(short_name) or "-"
    state.console.print(
        Panel(
            f"[bold]{escape(action.name)}[/bold]\nGroup: {escape(group)}",
            title=f"[cyan]{escape(action.short_name)}[/cyan]",
        ),
    )


@app.command("validate")
def validate_command(
    ctx: typer.Context,
    path: Annotated[Path | None, typer.Argument(help="Catalog document to validate.")] = None,
) -> None:
    """Validate a catalog document and report its version and checksum."""

    state = _state(ctx)
    settings = state.settings
    if path is not None:
        settings = CatalogSettings.model_validate({**settings.model_dump(), "catalog_path": path})
    source = str(settings.catalog_path) if settings.catalog_path is not None else "bundled catalog"
    try:
        catalog = load_catalog(settings)
    except (CatalogValidationError, CatalogIntegrityError, FileNotFoundError) as exc:
        state.console.print(f"[red]invalid[/red] {escape(source)}: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    state.console.print(
        f"[green]valid[/green] {escape(source)}: version {escape(catalog.get_version())}, "
        f"{len(catalog.list_actions())} actions in {len(catalog.list_groups())} groups",
    )


@app.command("version")
def version_command(ctx: typer.Context) -> None:
    """Print the catalog version and content checksum."""

    state = _state(ctx)
    catalog = _open_catalog(state)
    typer.echo(f"{catalog.get_version()} {catalog.checksum}")


__all__ = ["app"]
