"""
Garden Recipes: CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load and validate the species catalog.
  4. Execute action (recommend, explain, succession).
  5. Report result to stdout.

Install and run::

    pip install -e .
    garden-recipes --help
    garden-recipes validate-config
    garden-recipes validate-catalog
    garden-recipes recommend --space patio --sun partial --goal herbs
    garden-recipes recommend --json-out --json-dir data/outputs/recipes
    garden-recipes explain Tomato --with Basil --with Potato
    garden-recipes succession Lettuce --bedmate Carrot --date 2026-05-20
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import List, Optional

import typer

from garden_recipes.taxonomy.garden_taxonomy import GoalTag, SpaceTier, SunTier

app = typer.Typer(
    name="garden-recipes",
    help="Garden recipe recommender: small companion-planted crop sets for beginners.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from garden_recipes.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from garden_recipes.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_catalog_or_exit(config, catalog_path: Optional[str] = None):
    """Load the species catalog, printing a friendly error and exiting on failure."""
    from garden_recipes.catalog.loader import CatalogError, load_catalog

    path = Path(catalog_path) if catalog_path else Path(config.catalog.catalog_path)
    try:
        return load_catalog(path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except CatalogError as exc:
        typer.echo(f"[ERROR] Catalog invalid:\n{exc}", err=True)
        raise typer.Exit(code=1)


def _find_or_exit(catalog, name: str):
    """Resolve a species by name, exiting with an error if it is not in the catalog."""
    from garden_recipes.catalog.loader import find_species

    species = find_species(catalog, name)
    if species is None:
        typer.echo(f"[ERROR] Species not found in catalog: '{name}'", err=True)
        raise typer.Exit(code=1)
    return species


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    zone = config.succession.hardiness_zone
    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Catalog path:     {config.catalog.catalog_path}")
    typer.echo(f"  Default space:    {config.recipe.space.value}")
    typer.echo(f"  Default sun:      {config.recipe.sun.value}")
    typer.echo(f"  Default goal:     {config.recipe.goal.value}")
    typer.echo(f"  Succession limit: {config.succession.limit}")
    typer.echo(f"  Hardiness zone:   {zone if zone is not None else '(any)'}")
    typer.echo(f"  Recipes dir:      {config.output.recipes_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(mode="json"), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("validate-catalog")
def validate_catalog(
    catalog_path: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to catalog JSON (default: catalog.catalog_path from config).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Validate a species catalog file and print a per-category summary."""
    from collections import Counter

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    catalog = _load_catalog_or_exit(config, catalog_path)

    typer.echo(f"  Validated {len(catalog)} species.")
    for category, count in sorted(Counter(s.category for s in catalog).items()):
        typer.echo(f"    {category:<22} {count}")
    missing_seasons = sum(1 for s in catalog if not s.planting_seasons)
    if missing_seasons:
        typer.echo(f"  {missing_seasons} species have no planting season data.")
    typer.echo("[OK] Catalog valid.")


@app.command("recommend")
def recommend(
    space: Optional[SpaceTier] = typer.Option(
        None,
        "--space",
        help="Growing space tier (default: recipe.space from config).",
    ),
    sun: Optional[SunTier] = typer.Option(
        None,
        "--sun",
        help="Sun exposure tier (default: recipe.sun from config).",
    ),
    goal: Optional[GoalTag] = typer.Option(
        None,
        "--goal",
        help="What the grower wants out of the garden (default: recipe.goal).",
    ),
    catalog_path: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to catalog JSON (default: catalog.catalog_path from config).",
    ),
    instructions: bool = typer.Option(
        False,
        "--instructions",
        help="Print beginner planting steps under each species.",
    ),
    show_skipped: bool = typer.Option(
        False,
        "--show-skipped",
        help="List ranked candidates that were rejected and why.",
    ),
    json_out: bool = typer.Option(
        False,
        "--json-out",
        help="Also write the recipe as JSON (into output.recipes_dir from config).",
    ),
    json_dir: Optional[str] = typer.Option(
        None,
        "--json-dir",
        help="Directory for --json-out (default: output.recipes_dir from config).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Recommend a small, compatible set of species for the given constraints.

    An empty recipe is a valid answer: it means nothing in the catalog fits.
    """
    from garden_recipes.recommendations.reporter import write_recipe_json
    from garden_recipes.recommendations.selector import select_recipe
    from garden_recipes.reporting.formatters import format_recipe_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    space = space or config.recipe.space
    sun = sun or config.recipe.sun
    goal = goal or config.recipe.goal

    catalog = _load_catalog_or_exit(config, catalog_path)
    selection = select_recipe(catalog, space, sun, goal)

    typer.echo(
        format_recipe_table(
            selection, space, sun, goal,
            show_instructions=instructions,
            show_skipped=show_skipped,
        )
    )

    if json_out:
        out_dir = Path(json_dir) if json_dir else Path(config.output.recipes_dir)
        path = write_recipe_json(selection.picked, space, sun, goal, out_dir)
        typer.echo("")
        typer.echo(f"  JSON written: {path}")

    typer.echo("")
    typer.echo(f"[OK] Recipe ready ({len(selection.picked)} species).")


@app.command("explain")
def explain(
    name: str = typer.Argument(..., help="Species to explain (id, common or taxonomic name)."),
    with_names: Optional[List[str]] = typer.Option(
        None,
        "--with",
        help="Compare only against these species (repeatable). Default: whole catalog.",
    ),
    catalog_path: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to catalog JSON (default: catalog.catalog_path from config).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Show companion and antagonist notes for one species."""
    from garden_recipes.recommendations.synergy import get_synergy_notes
    from garden_recipes.reporting.formatters import format_synergy_notes

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    catalog = _load_catalog_or_exit(config, catalog_path)
    focal = _find_or_exit(catalog, name)
    others = [_find_or_exit(catalog, n) for n in with_names] if with_names else catalog

    typer.echo(format_synergy_notes(focal, get_synergy_notes(focal, others)))


@app.command("succession")
def succession(
    name: str = typer.Argument(..., help="Species that just finished (id, common or taxonomic name)."),
    bedmates: Optional[List[str]] = typer.Option(
        None,
        "--bedmate",
        help="Species still growing in the same bed (repeatable).",
    ),
    zone: Optional[float] = typer.Option(
        None,
        "--zone",
        help="USDA hardiness zone, e.g. 7 or 8.5 (default: succession.hardiness_zone).",
    ),
    harvest_date: Optional[str] = typer.Option(
        None,
        "--date",
        help="Harvest date YYYY-MM-DD (default: today).",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        min=1,
        help="Maximum suggestions (default: succession.limit from config).",
    ),
    catalog_path: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to catalog JSON (default: catalog.catalog_path from config).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Suggest what to plant after a crop is harvested."""
    from garden_recipes.recommendations.succession import suggest_succession
    from garden_recipes.reporting.formatters import format_succession_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        when = date.fromisoformat(harvest_date) if harvest_date else date.today()
    except ValueError:
        typer.echo(f"[ERROR] Invalid date format: '{harvest_date}'. Use YYYY-MM-DD.", err=True)
        raise typer.Exit(code=1)

    catalog = _load_catalog_or_exit(config, catalog_path)
    finished = _find_or_exit(catalog, name)
    bed = [_find_or_exit(catalog, n) for n in bedmates or []]

    candidates = suggest_succession(
        finished,
        catalog,
        hardiness_zone=zone if zone is not None else config.succession.hardiness_zone,
        bedmates=bed,
        harvest_date=when,
        limit=limit or config.succession.limit,
    )
    typer.echo(format_succession_table(finished, candidates))


if __name__ == "__main__":
    app()
