"""
Tests for garden_recipes/recommendations/reporter.py.

What we test
------------
build_recipe_payload():
  - Top-level keys, schema version and constraint values.
  - One entry per species with 1-based rank and sorted seasons.
  - Synergy notes are computed against the rest of the recipe.
  - Empty recipe -> size 0, no entries.

write_recipe_json():
  - File name encodes constraints and date; output dir is created.
  - Written JSON equals the built payload.
"""

from __future__ import annotations

import json
from datetime import date

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.reporter import (
    SCHEMA_VERSION,
    build_recipe_payload,
    write_recipe_json,
)
from garden_recipes.taxonomy.garden_taxonomy import GoalTag, SpaceTier, SunTier

RUN_DATE = date(2026, 5, 1)

RECIPE = [
    SpeciesRecord(species_id="tomato", display_name="Tomato", taxonomic_name="Solanum lycopersicum",
                  planting_seasons=["Summer", "Spring"], harvest_days=75,
                  explicit_companions=["Basil"]),
    SpeciesRecord(species_id="basil", display_name="Basil", growth_habit="herb"),
]


class TestBuildRecipePayload:
    def test_top_level(self):
        payload = build_recipe_payload(RECIPE, SpaceTier.SMALL_BED, SunTier.FULL, GoalTag.COOKING, RUN_DATE)
        assert payload["schema_version"] == SCHEMA_VERSION
        assert payload["generated_at"] == "2026-05-01"
        assert payload["constraints"] == {"space": "small-bed", "sun": "full", "goal": "cooking"}
        assert payload["size"] == 2

    def test_entries(self):
        payload = build_recipe_payload(RECIPE, SpaceTier.SMALL_BED, SunTier.FULL, GoalTag.COOKING, RUN_DATE)
        first, second = payload["entries"]
        assert first["rank"] == 1 and second["rank"] == 2
        assert first["identity"] == "tomato"
        assert first["planting_seasons"] == ["Spring", "Summer"]
        assert first["synergy_notes"] == [
            {"type": "companion", "related_species_name": "Basil", "message": "Companion of Basil"}
        ]
        assert second["synergy_notes"][0]["related_species_name"] == "Tomato"

    def test_empty_recipe(self):
        payload = build_recipe_payload([], "patio", "shade", "herbs", RUN_DATE)
        assert payload["size"] == 0
        assert payload["entries"] == []
        assert payload["constraints"]["space"] == "patio"


class TestWriteRecipeJson:
    def test_writes_file(self, tmp_path):
        out_dir = tmp_path / "nested" / "recipes"
        path = write_recipe_json(RECIPE, SpaceTier.SMALL_BED, SunTier.FULL, GoalTag.COOKING,
                                 out_dir, run_date=RUN_DATE)
        assert path == out_dir / "recipe_small-bed_full_cooking_2026-05-01.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == build_recipe_payload(
            RECIPE, SpaceTier.SMALL_BED, SunTier.FULL, GoalTag.COOKING, RUN_DATE
        )
