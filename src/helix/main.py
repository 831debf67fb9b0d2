"""
Helix - CLI Entry Point.

Usage:
    helix catalog ingredients --search lime     Browse a catalog
    helix blend flavour ING_LIME:70 ING_HONEY   Show the derived profile
    helix analyze synthesis COMP_001 COMP_002   Stream an analysis
    helix generate ingredient "Yuzu"            Profile a new entry
    helix snapshots flavour                     List saved snapshots
    helix health                                Check configuration
"""

import asyncio
import json
import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table

app = typer.Typer(
    name="helix",
    help="Helix - R&D lab for research synthesis, flavour and beverage design.",
    add_completion=False,
)
console = Console()

BLEND_LAB_NAMES = ("synthesis", "flavour", "cordial")
ANALYSIS_LAB_NAMES = (*BLEND_LAB_NAMES, "gastronomy")

# Which profile field holds the free-text objective, per lab
OBJECTIVE_FIELDS = {
    "synthesis": "research_objective",
    "flavour": "objective",
    "cordial": "objective",
    "gastronomy": "objective",
}


def _fail(message: str) -> NoReturn:
    console.print(f"[red]❌ {message}[/red]")
    raise typer.Exit(1)


def _parse_item(raw: str) -> tuple[str, float]:
    """ID or ID:WEIGHT."""
    from helix.engine.composition import DEFAULT_WEIGHT

    entity_id, sep, weight = raw.rpartition(":")
    if not sep:
        return raw, DEFAULT_WEIGHT
    try:
        return entity_id, float(weight)
    except ValueError:
        _fail(f"Invalid weight in '{raw}' (expected ID:WEIGHT)")


def _build_blend_lab(lab_name: str, items: list[str], mode: str = "standard", persist: bool = False):
    from helix.catalog.loader import CATALOG_MODELS, load_records
    from helix.labs import BLEND_LABS
    from helix.store import get_default_store

    if lab_name not in BLEND_LABS:
        _fail(f"Unknown lab '{lab_name}'. Choose from: {', '.join(BLEND_LAB_NAMES)}")

    lab_class, catalog_name = BLEND_LABS[lab_name]
    model, _ = CATALOG_MODELS[catalog_name]
    store = get_default_store() if persist else None
    lab = lab_class(catalog=load_records(catalog_name, model), mode=mode, store=store)

    for raw in items:
        entity_id, weight = _parse_item(raw)
        if entity_id not in lab.catalog:
            console.print(f"[yellow]⚠️  Unknown {catalog_name} id '{entity_id}' (kept, contributes nothing)[/yellow]")
        if not lab.add_entity(entity_id, weight):
            console.print(f"[yellow]⚠️  '{entity_id}' is already in the composition[/yellow]")
    return lab


def _print_profile(lab) -> None:
    from helix.prompts.templates import fmt

    table = Table(title=f"{lab.name.title()} profile")
    table.add_column("Field")
    table.add_column("Value", justify="right")
    derived = set(lab.variant.target_fields) if lab.variant else set()
    for name, value in lab.profile.model_dump().items():
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = fmt(value)
        label = f"[bold]{name}[/bold]" if name in derived else name
        table.add_row(label, str(value))
    console.print(table)


def _print_composition(lab) -> None:
    if not len(lab.composition):
        console.print("[dim]Empty composition.[/dim]")
        return
    table = Table(title="Composition")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Weight", justify="right")
    table.add_column("Share", justify="right")
    percentages = lab.percentages
    for item in lab.composition:
        entity = lab.catalog.get(item.entity_id)
        name = entity.name if entity is not None else "[dim](missing)[/dim]"
        table.add_row(item.entity_id, name, f"{item.weight:g}", f"{percentages[item.entity_id]:.1f}%")
    console.print(table)


async def _stream_analysis(lab) -> bool:
    ok = True
    async for event in lab.run_analysis():
        if event["type"] == "chunk":
            console.print(event["content"], end="", markup=False, highlight=False)
        elif event["type"] == "error":
            console.print(f"\n[red]❌ {event['error']}[/red]")
            ok = False
    console.print()
    return ok


@app.callback()
def main(
    log_prompts: bool = typer.Option(False, "--log-prompts", "-l", help="Log all LLM prompts to prompt_logs/"),
) -> None:
    """Configure logging before any command runs."""
    from helix.config import settings
    from helix.llm.prompt_logger import enable_prompt_logging

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if log_prompts:
        enable_prompt_logging(True)


@app.command()
def version() -> None:
    """Show version information."""
    from helix import __version__

    console.print(f"Helix version {__version__}")


@app.command()
def health() -> None:
    """Check configuration and bundled data."""
    from helix.catalog.loader import CATALOG_MODELS, load_records
    from helix.config import get_settings

    console.print("\n[bold]Helix Health Check[/bold]\n")

    try:
        settings = get_settings()
    except Exception as e:
        console.print(f"\n[red]❌ Configuration error: {e}[/red]")
        console.print("[dim]Check your .env file and HELIX_* environment variables.[/dim]")
        raise typer.Exit(1)

    console.print("✅ Configuration loaded")
    console.print(f"   Environment: {settings.helix_env}")
    console.print(f"   Log level: {settings.log_level}")

    if settings.openai_api_key:
        console.print("✅ OpenAI API key configured")
    else:
        console.print("⚠️  OPENAI_API_KEY not set (analysis and generation will fail)")

    console.print(f"\n[bold]Catalogs[/bold] ({settings.helix_data_dir})")
    empty = 0
    for name, (model, _) in CATALOG_MODELS.items():
        count = len(load_records(name, model))
        if count:
            console.print(f"  ✅ {name}: {count} records")
        else:
            empty += 1
            console.print(f"  ❌ {name}: no records")

    console.print(f"\n[dim]Snapshot store: {settings.helix_store_path}[/dim]")

    if empty:
        console.print(f"\n[red]{empty} catalog(s) failed to load.[/red]")
        raise typer.Exit(1)
    console.print("\n[green]All checks passed![/green]")


@app.command()
def catalog(
    kind: str = typer.Argument(..., help="components, ingredients, techniques, raw_materials, animal_products, crops"),
    search: str = typer.Option("", "--search", "-s", help="Free-text search"),
    category: str = typer.Option("All", "--category", "-c", help="Category filter"),
    source: str = typer.Option(None, "--source", help="Load from a file path or URL instead of bundled data"),
) -> None:
    """Browse a catalog."""
    from helix.catalog.filters import category_options, filter_records
    from helix.catalog.loader import CATALOG_MODELS, load_records

    if kind not in CATALOG_MODELS:
        _fail(f"Unknown catalog '{kind}'. Choose from: {', '.join(CATALOG_MODELS)}")

    model, category_field = CATALOG_MODELS[kind]
    records = load_records(source or kind, model)
    if not records:
        _fail(f"No {kind} loaded.")

    matches = filter_records(records, search=search, category=category, category_field=category_field)

    table = Table(title=f"{kind} ({len(matches)}/{len(records)})")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Category")
    for record in matches:
        name = getattr(record, "name", None) or getattr(record, "ingredient", None) or getattr(record, "crop_name", "")
        table.add_row(getattr(record, "id", "-"), name, str(getattr(record, category_field, "")))
    console.print(table)
    console.print(f"[dim]Categories: {', '.join(category_options(records, category_field))}[/dim]")


@app.command()
def blend(
    lab_name: str = typer.Argument(..., metavar="LAB", help="synthesis, flavour or cordial"),
    items: list[str] = typer.Argument(..., help="Entity ids as ID or ID:WEIGHT"),
) -> None:
    """Compose entities and show the derived profile."""
    lab = _build_blend_lab(lab_name, items)
    _print_composition(lab)
    _print_profile(lab)


@app.command()
def analyze(
    lab_name: str = typer.Argument(..., metavar="LAB", help="synthesis, flavour, cordial or gastronomy"),
    items: list[str] = typer.Argument(None, help="Entity ids as ID or ID:WEIGHT (blend labs)"),
    mode: str = typer.Option("standard", "--mode", "-m", help="standard, deep or grounded"),
    objective: str = typer.Option(None, "--objective", "-o", help="High-level objective"),
    synthesize: bool = typer.Option(False, "--synthesize", help="Cordial: derive the specification from the objective first"),
    ingredient: str = typer.Option(None, "--ingredient", help="Gastronomy: primary ingredient id"),
    technique: str = typer.Option(None, "--technique", help="Gastronomy: technique id"),
    params: list[str] = typer.Option(None, "--param", "-p", help="Gastronomy: NAME=VALUE technique parameter"),
    save: str = typer.Option(None, "--save", help="Save the result as a named snapshot"),
) -> None:
    """Stream an analysis for a lab."""
    from helix.labs import CordialLab, GastronomyLab
    from helix.llm.model_router import ANALYSIS_MODES

    if lab_name not in ANALYSIS_LAB_NAMES:
        _fail(f"Unknown lab '{lab_name}'. Choose from: {', '.join(ANALYSIS_LAB_NAMES)}")
    if mode not in ANALYSIS_MODES:
        _fail(f"Unknown mode '{mode}'. Choose from: {', '.join(ANALYSIS_MODES)}")

    if lab_name == "gastronomy":
        if save:
            _fail("Snapshots are not kept for the gastronomy lab.")
        lab = GastronomyLab(mode=mode)
        if not lab.load_data():
            _fail(lab.data_error)
        if ingredient and lab.select_ingredient(ingredient) is None:
            _fail(f"Unknown ingredient '{ingredient}'")
        if technique and lab.select_technique(technique) is None:
            _fail(f"Unknown technique '{technique}'")
        for raw in params or []:
            name, sep, value = raw.partition("=")
            if not sep or not lab.set_parameter(name.strip(), value.strip()):
                _fail(f"Cannot set parameter '{raw}'")
    else:
        lab = _build_blend_lab(lab_name, items or [], mode=mode, persist=bool(save))

    if objective:
        lab.update_profile(**{OBJECTIVE_FIELDS[lab_name]: objective})

    if synthesize:
        if not isinstance(lab, CordialLab):
            _fail("--synthesize only applies to the cordial lab.")
        with Live(Spinner("dots", text="Synthesizing profile..."), console=console, transient=True):
            ok = asyncio.run(lab.synthesize_profile())
        if not ok:
            _fail(lab.error)
        console.print(Panel(lab.rationale, title="Profile rationale", border_style="green"))

    if isinstance(lab, GastronomyLab):
        console.print(f"[dim]Objective: {lab.objective}[/dim]\n")
    else:
        _print_composition(lab)
        _print_profile(lab)

    ok = asyncio.run(_stream_analysis(lab))
    if not ok:
        raise typer.Exit(1)

    if save:
        snapshot = lab.save_snapshot(save)
        console.print(f"\n[green]✅ Saved snapshot '{snapshot.name}' ({snapshot.id})[/green]")


@app.command()
def generate(
    kind: str = typer.Argument(..., help="component or ingredient"),
    name: str = typer.Argument(..., help="Name to profile"),
    fast: bool = typer.Option(False, "--fast", help="Use the standard model instead of the deep one"),
) -> None:
    """Generate a catalog entry with structured output."""
    from helix.catalog.generate import generate_component_profile, generate_ingredient_profile
    from helix.llm.errors import GenerationError

    generators = {"component": generate_component_profile, "ingredient": generate_ingredient_profile}
    if kind not in generators:
        _fail(f"Unknown kind '{kind}'. Choose from: {', '.join(generators)}")
    if not name.strip():
        _fail("Please enter a name.")

    try:
        with Live(Spinner("dots", text=f"Profiling {name}..."), console=console, transient=True):
            record = asyncio.run(generators[kind](name.strip(), fast=fast))
    except GenerationError as e:
        _fail(f"Generation Failed: {e.user_message}")

    console.print_json(json.dumps(record.model_dump(mode="json", by_alias=True)))


@app.command()
def snapshots(
    lab_name: str = typer.Argument(..., metavar="LAB", help="synthesis, flavour or cordial"),
) -> None:
    """List saved snapshots for a lab, newest first."""
    from helix.store import SnapshotRepository, get_default_store

    if lab_name not in BLEND_LAB_NAMES:
        _fail(f"Unknown lab '{lab_name}'. Choose from: {', '.join(BLEND_LAB_NAMES)}")

    saved = SnapshotRepository.for_lab(get_default_store(), lab_name).list()
    if not saved:
        console.print("[dim]No snapshots saved.[/dim]")
        return

    table = Table(title=f"{lab_name} snapshots")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Items", justify="right")
    table.add_column("Saved")
    for snapshot in saved:
        table.add_row(
            snapshot.id,
            snapshot.name,
            str(len(snapshot.composition)),
            snapshot.saved_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)


@app.command("delete-snapshot")
def delete_snapshot(
    lab_name: str = typer.Argument(..., metavar="LAB", help="synthesis, flavour or cordial"),
    snapshot_id: str = typer.Argument(..., metavar="ID"),
) -> None:
    """Delete a saved snapshot."""
    from helix.store import SnapshotRepository, get_default_store

    if lab_name not in BLEND_LAB_NAMES:
        _fail(f"Unknown lab '{lab_name}'. Choose from: {', '.join(BLEND_LAB_NAMES)}")

    if not SnapshotRepository.for_lab(get_default_store(), lab_name).delete(snapshot_id):
        _fail(f"No {lab_name} snapshot with id '{snapshot_id}'")
    console.print(f"[green]✅ Deleted snapshot {snapshot_id}[/green]")


if __name__ == "__main__":
    app()
