"""CLI interface for monitor_scoring."""

import csv
import json
import logging
import re
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from monitor_scoring.consts import (
    DEFAULT_DATA_DIR,
    PART1_MAX,
    PART2_MAX,
    PART3_MAX,
    PART4_MAX,
    SCORE_COLOR_FAIR_RATIO,
    SCORE_COLOR_GOOD_RATIO,
    STATE_KEY,
    TOTAL_MAX,
)
from monitor_scoring.evaluators.detection import EARLY_BONUS_MAX
from monitor_scoring.evaluators.registry import EvaluatorRegistry
from monitor_scoring.models.model_catalog import CATEGORY_LABELS, CapabilityCategory, SeverityLevel
from monitor_scoring.models.model_storage import AppState
from monitor_scoring.models.model_system import System
from monitor_scoring.storage.base import PermanentStorage
from monitor_scoring.storage.file_manager import FileManager
from monitor_scoring.storage.http_storage import HttpStorage
from monitor_scoring.workspace import (
    UnknownSystemError,
    UnknownToolError,
    add_scenario,
    add_system,
    add_tool,
    default_state,
    delete_tool,
    get_system,
    load_app_state,
    remove_scenario,
    rename_tool,
    resolve_active_system,
    save_app_state,
    score_all,
    toggle_capability,
    toggle_default_capability,
    toggle_scenario,
    toggle_tool,
    update_system,
)

app = typer.Typer(
    name="mscore",
    help="Monitoring conformance scoring - evaluate systems against the observability rubric",
)

console = Console()

DataDirOption = typer.Option(DEFAULT_DATA_DIR, "--data-dir", help="Local data directory")
RemoteOption = typer.Option(
    None, "--remote", help="Base URL of a monitor-data API server (overrides --data-dir)"
)


def _configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _get_storage(data_dir: Path, remote: str | None) -> PermanentStorage:
    if remote:
        return HttpStorage(remote)
    return FileManager(data_dir)


def _load_state(data_dir: Path, remote: str | None) -> AppState:
    with _get_storage(data_dir, remote) as storage:
        return load_app_state(storage)


def _get_score_color(score: float, maximum: float) -> str:
    """Get color for score display relative to the part maximum."""
    if score >= maximum * SCORE_COLOR_GOOD_RATIO:
        return "green"
    elif score >= maximum * SCORE_COLOR_FAIR_RATIO:
        return "blue"
    else:
        return "red"


def _fmt(score: float, maximum: float) -> str:
    color = _get_score_color(score, maximum)
    return f"[{color}]{score:g}[/{color}]"


def _to_snake(name: str) -> str:
    """Convert camelCase field names to snake_case."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _save_or_exit(storage: PermanentStorage, state: AppState) -> None:
    if not save_app_state(storage, state):
        console.print("[red]Error:[/red] Save failed, check the storage backend")
        raise typer.Exit(1)


@app.command()
def init(
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
    force: bool = typer.Option(False, "--force", help="Overwrite existing state"),
) -> None:
    """Store the default tool catalog and sample system."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        if storage.exists(STATE_KEY) and not force:
            console.print("[yellow]State already exists.[/yellow] Use --force to overwrite.")
            raise typer.Exit(1)

        state = default_state()
        _save_or_exit(storage, state)
        console.print(
            f"[green]Initialized state with {len(state.systems)} system(s) "
            f"and {len(state.tools)} tool(s)[/green]"
        )


@app.command()
def dashboard(
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Show every system with its part scores and total."""
    _configure_logging()
    state = _load_state(data_dir, remote)
    scores = score_all(state)

    table = Table(title=f"Systems ({len(state.systems)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Tier", justify="center", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Config", justify="right")
    table.add_column("Detect", justify="right")
    table.add_column("Alert", justify="right")
    table.add_column("Team", justify="right")
    table.add_column("Package", style="magenta")

    for system in state.systems:
        breakdown = scores[system.id]
        table.add_row(
            system.id,
            system.name,
            system.tier.value,
            _fmt(breakdown.total, TOTAL_MAX),
            _fmt(breakdown.part1, PART1_MAX),
            _fmt(breakdown.part2, PART2_MAX),
            _fmt(breakdown.part3, PART3_MAX),
            _fmt(breakdown.part4, PART4_MAX),
            breakdown.package_level.value,
        )

    console.print(table)


@app.command()
def score(
    system_id: str | None = typer.Argument(None, help="System ID to score (default: first system)"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
    as_json: bool = typer.Option(False, "--json", help="Print the breakdown as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Show the detailed score breakdown of one system."""
    _configure_logging(verbose)
    state = _load_state(data_dir, remote)

    try:
        if system_id is None:
            system = resolve_active_system(state)
        else:
            system = get_system(state, system_id)
    except UnknownSystemError:
        console.print(f"[red]Error:[/red] Unknown system '{system_id or '<none>'}'")
        raise typer.Exit(1)

    breakdown = EvaluatorRegistry().evaluate(system, state.catalog)

    if as_json:
        console.print_json(breakdown.model_dump_json(by_alias=True))
        return

    console.print(f"\n[bold]{system.name}[/bold] ({system.tier.value}) - ID: {system.id}")
    console.print(f"Total: {_fmt(breakdown.total, TOTAL_MAX)} / {TOTAL_MAX}\n")

    table = Table(title="Score Breakdown")
    table.add_column("Part", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Max", justify="right", style="dim")
    table.add_row("1. Configuration & standardization", _fmt(breakdown.part1, PART1_MAX), str(PART1_MAX))
    table.add_row("2. Fault detection", _fmt(breakdown.part2, PART2_MAX), str(PART2_MAX))
    table.add_row("3. Alert configuration", _fmt(breakdown.part3, PART3_MAX), str(PART3_MAX))
    table.add_row("4. Operations team", _fmt(breakdown.part4, PART4_MAX), str(PART4_MAX))
    console.print(table)

    console.print(f"\nPackage coverage: [magenta]{breakdown.package_level.value}[/magenta]")
    if breakdown.missing_caps:
        missing = ", ".join(CATEGORY_LABELS[c] for c in breakdown.missing_caps)
        console.print(f"Missing mandatory capabilities: [red]{missing}[/red]")

    # Recorded for reference, not scored
    console.print(
        f"[dim]Detection time avg/max (min): "
        f"{system.avg_detection_time:g} / {system.max_detection_time:g}[/dim]"
    )
    early_bonus = min(EARLY_BONUS_MAX, system.early_detection_count)
    console.print(f"[dim]Early detection bonus: +{early_bonus:g}[/dim]")


@app.command("add-system")
def add_system_command(
    name: str = typer.Argument(..., help="Display name of the new system"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Add a system built from the default template."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        state, system = add_system(load_app_state(storage), name)
        _save_or_exit(storage, state)
        console.print(f"[green]Added system {system.id}[/green]")


@app.command("set")
def set_fields(
    system_id: str = typer.Argument(..., help="System ID to edit"),
    assignments: list[str] = typer.Argument(..., help="field=value pairs, e.g. accuracyRate=10"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Set scoring inputs of a system."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        state = load_app_state(storage)

        changes: dict[str, str] = {}
        for assignment in assignments:
            field, sep, value = assignment.partition("=")
            if not sep or not field:
                console.print(f"[red]Error:[/red] Expected field=value, got '{assignment}'")
                raise typer.Exit(1)
            name = _to_snake(field.strip())
            if name not in System.model_fields or name == "id":
                console.print(f"[red]Error:[/red] Unknown field '{field}'")
                raise typer.Exit(1)
            changes[name] = value.strip()

        try:
            state = update_system(state, system_id, **changes)
        except UnknownSystemError:
            console.print(f"[red]Error:[/red] Unknown system '{system_id}'")
            raise typer.Exit(1)
        except ValidationError as e:
            console.print(f"[red]Error:[/red] Invalid value: {e.errors()[0]['msg']}")
            raise typer.Exit(1)

        _save_or_exit(storage, state)
        console.print(f"[green]Updated {system_id}[/green]")


@app.command("select-tool")
def select_tool(
    system_id: str = typer.Argument(..., help="System ID"),
    tool_id: str = typer.Argument(..., help="Tool ID to select or deselect"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Toggle a tool for a system (selecting enables its default capabilities)."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        try:
            state = toggle_tool(load_app_state(storage), system_id, tool_id)
        except UnknownSystemError:
            console.print(f"[red]Error:[/red] Unknown system '{system_id}'")
            raise typer.Exit(1)

        _save_or_exit(storage, state)
        selected = tool_id in get_system(state, system_id).selected_tool_ids
        console.print(f"[green]{'Selected' if selected else 'Deselected'} {tool_id}[/green]")


@app.command()
def capability(
    system_id: str = typer.Argument(..., help="System ID"),
    tool_id: str = typer.Argument(..., help="Selected tool ID"),
    category: CapabilityCategory = typer.Argument(..., help="Capability category"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Toggle one enabled capability of a tool for a system."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        try:
            state = toggle_capability(load_app_state(storage), system_id, tool_id, category)
        except UnknownSystemError:
            console.print(f"[red]Error:[/red] Unknown system '{system_id}'")
            raise typer.Exit(1)

        _save_or_exit(storage, state)
        enabled = category in get_system(state, system_id).capabilities_for(tool_id)
        console.print(
            f"[green]{'Enabled' if enabled else 'Disabled'} {category.value} for {tool_id}[/green]"
        )


@app.command()
def check(
    system_id: str = typer.Argument(..., help="System ID"),
    scenario_id: str = typer.Argument(..., help="Scenario ID to mark or unmark"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Toggle a standard scenario as implemented for a system."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        try:
            state = toggle_scenario(load_app_state(storage), system_id, scenario_id)
        except UnknownSystemError:
            console.print(f"[red]Error:[/red] Unknown system '{system_id}'")
            raise typer.Exit(1)

        _save_or_exit(storage, state)
        checked = scenario_id in get_system(state, system_id).checked_scenario_ids
        console.print(f"[green]{'Checked' if checked else 'Unchecked'} {scenario_id}[/green]")


@app.command()
def tools(
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """List the tool catalog and its standard scenarios."""
    _configure_logging()
    state = _load_state(data_dir, remote)

    if not state.tools:
        console.print("[yellow]No tools in catalog.[/yellow]")
        return

    for tool in state.tools:
        caps = ", ".join(CATEGORY_LABELS[c] for c in tool.default_capabilities) or "-"
        table = Table(title=f"{tool.name} ({tool.id}) - {caps}")
        table.add_column("ID", style="dim")
        table.add_column("Category", style="cyan")
        table.add_column("Metric", style="bold")
        table.add_column("Level")
        table.add_column("Threshold", style="dim")
        for scenario in tool.scenarios:
            table.add_row(
                scenario.id,
                CATEGORY_LABELS[scenario.category],
                scenario.metric,
                scenario.level.value,
                scenario.threshold,
            )
        console.print(table)


@app.command("add-tool")
def add_tool_command(
    name: str = typer.Argument(..., help="Tool display name"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Add an empty tool to the catalog."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        state, tool = add_tool(load_app_state(storage), name)
        _save_or_exit(storage, state)
        console.print(f"[green]Added tool {tool.id}[/green]")


@app.command("rename-tool")
def rename_tool_command(
    tool_id: str = typer.Argument(..., help="Tool ID"),
    name: str = typer.Argument(..., help="New display name"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Rename a catalog tool."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        try:
            state = rename_tool(load_app_state(storage), tool_id, name)
        except UnknownToolError:
            console.print(f"[red]Error:[/red] Unknown tool '{tool_id}'")
            raise typer.Exit(1)

        _save_or_exit(storage, state)
        console.print(f"[green]Renamed {tool_id} to {name}[/green]")


@app.command("delete-tool")
def delete_tool_command(
    tool_id: str = typer.Argument(..., help="Tool ID"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Remove a tool from the catalog (systems keep their references)."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        try:
            state = delete_tool(load_app_state(storage), tool_id)
        except UnknownToolError:
            console.print(f"[red]Error:[/red] Unknown tool '{tool_id}'")
            raise typer.Exit(1)

        _save_or_exit(storage, state)
        console.print(f"[green]Deleted tool {tool_id}[/green]")


@app.command("default-cap")
def default_cap(
    tool_id: str = typer.Argument(..., help="Tool ID"),
    category: CapabilityCategory = typer.Argument(..., help="Capability category"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Toggle a default capability of a catalog tool."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        try:
            state = toggle_default_capability(load_app_state(storage), tool_id, category)
        except UnknownToolError:
            console.print(f"[red]Error:[/red] Unknown tool '{tool_id}'")
            raise typer.Exit(1)

        _save_or_exit(storage, state)
        defaults = ", ".join(c.value for c in state.catalog.get(tool_id).default_capabilities)
        console.print(f"[green]Default capabilities of {tool_id}: {defaults or '-'}[/green]")


@app.command("add-scenario")
def add_scenario_command(
    tool_id: str = typer.Argument(..., help="Tool ID"),
    metric: str = typer.Argument(..., help="Metric name"),
    category: CapabilityCategory = typer.Option(
        CapabilityCategory.HOST, "--category", "-c", help="Capability category"
    ),
    level: SeverityLevel = typer.Option(SeverityLevel.ORANGE, "--level", help="Severity level"),
    threshold: str = typer.Option("", "--threshold", "-t", help="Threshold description"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Add a standard scenario to a tool."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        try:
            state = add_scenario(load_app_state(storage), tool_id, category, metric, level, threshold)
        except UnknownToolError:
            console.print(f"[red]Error:[/red] Unknown tool '{tool_id}'")
            raise typer.Exit(1)

        _save_or_exit(storage, state)
        console.print(f"[green]Added scenario to {tool_id}[/green]")


@app.command("remove-scenario")
def remove_scenario_command(
    tool_id: str = typer.Argument(..., help="Tool ID"),
    scenario_id: str = typer.Argument(..., help="Scenario ID"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Remove a standard scenario from a tool."""
    _configure_logging()
    with _get_storage(data_dir, remote) as storage:
        try:
            state = remove_scenario(load_app_state(storage), tool_id, scenario_id)
        except UnknownToolError:
            console.print(f"[red]Error:[/red] Unknown tool '{tool_id}'")
            raise typer.Exit(1)

        _save_or_exit(storage, state)
        console.print(f"[green]Removed {scenario_id} from {tool_id}[/green]")


@app.command()
def export(
    format: str = typer.Option("json", "--format", "-f", help="Export format (json, csv)"),
    output: str = typer.Option("scores.json", "--output", "-o", help="Output file path"),
    data_dir: Path = DataDirOption,
    remote: str = RemoteOption,
) -> None:
    """Export every system's score breakdown to a file."""
    _configure_logging()
    state = _load_state(data_dir, remote)
    scores = score_all(state)
    output_path = Path(output)

    try:
        if format == "json":
            data = [
                {
                    "id": system.id,
                    "name": system.name,
                    "tier": system.tier.value,
                    **scores[system.id].model_dump(mode="json", by_alias=True),
                }
                for system in state.systems
            ]
            output_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

        elif format == "csv":
            with output_path.open("w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)

                writer.writerow([
                    "id",
                    "name",
                    "tier",
                    "part1",
                    "part2",
                    "part3",
                    "part4",
                    "total",
                    "package_level",
                    "missing_caps",
                ])

                for system in state.systems:
                    breakdown = scores[system.id]
                    writer.writerow([
                        system.id,
                        system.name,
                        system.tier.value,
                        breakdown.part1,
                        breakdown.part2,
                        breakdown.part3,
                        breakdown.part4,
                        breakdown.total,
                        breakdown.package_level.value,
                        "; ".join(c.value for c in breakdown.missing_caps),
                    ])

        else:
            console.print(f"[red]Error:[/red] Unsupported format '{format}'. Use 'json' or 'csv'.")
            raise typer.Exit(1)

        console.print(f"[green]Exported {len(state.systems)} systems to {output_path}[/green]")

    except OSError as e:
        console.print(f"[red]Error exporting:[/red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
