"""
Recipe report writer: structured JSON output for a picked recipe.

Pure I/O: consumes an in-memory recipe and writes one file.  Synergy notes
are computed for each entry against the rest of the recipe so the file is
self-explanatory without the catalog.

Output file
-----------
  data/outputs/recipes/
    recipe_{space}_{sun}_{goal}_{date}.json
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Sequence

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.synergy import get_synergy_notes
from garden_recipes.taxonomy.garden_taxonomy import GoalTag, SpaceTier, SunTier

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"


def build_recipe_payload(
    recipe:   Sequence[SpeciesRecord],
    space:    SpaceTier,
    sun:      SunTier,
    goal:     GoalTag,
    run_date: date,
) -> dict:
    """Return the JSON-serialisable report dict for ``recipe``."""
    entries = []
    for rank, species in enumerate(recipe, start=1):
        notes = get_synergy_notes(species, recipe)
        entries.append(
            {
                "rank":             rank,
                "identity":         species.identity,
                "display_name":     species.display_name,
                "taxonomic_name":   species.taxonomic_name,
                "category":         species.category,
                "growth_habit":     species.growth_habit,
                "spacing_inches":   species.spacing_inches,
                "planting_seasons": sorted(species.planting_seasons),
                "harvest_days":     species.harvest_days,
                "synergy_notes":    [n.model_dump(mode="json") for n in notes],
            }
        )

    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at":   run_date.isoformat(),
        "constraints": {
            "space": SpaceTier(space).value,
            "sun":   SunTier(sun).value,
            "goal":  GoalTag(goal).value,
        },
        "size":    len(entries),
        "entries": entries,
    }


def write_recipe_json(
    recipe:     Sequence[SpeciesRecord],
    space:      SpaceTier,
    sun:        SunTier,
    goal:       GoalTag,
    output_dir: Path,
    run_date:   date | None = None,
) -> Path:
    """Write ``recipe`` to a structured JSON file.

    Args:
        recipe:     Output of ``pick_recipe()``.
        space:      Space tier the recipe was built for.
        sun:        Sun tier the recipe was built for.
        goal:       Goal the recipe was built for.
        output_dir: Target directory (created if missing).
        run_date:   Date label. Defaults to today.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    payload = build_recipe_payload(recipe, space, sun, goal, run_date)

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / (
        f"recipe_{payload['constraints']['space']}_{payload['constraints']['sun']}_"
        f"{payload['constraints']['goal']}_{run_date}.json"
    )
    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    logger.info("Recipe JSON written: %s (%d entries)", json_path, len(recipe))
    return json_path
