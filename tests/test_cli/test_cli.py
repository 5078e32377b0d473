"""
Tests for garden_recipes/cli.py, driven through typer's CliRunner.

What we test
------------
- validate-config: OK path, --full JSON dump, missing file exits 1.
- validate-catalog: per-category summary; invalid catalog exits 1.
- recommend: non-string list items in the catalog exit 1 with [ERROR].
- recommend: recipe table for explicit constraints, config defaults,
  --show-skipped, --json-out into --json-dir or output.recipes_dir, and
  rejection of unknown enum values.
- explain: companion/conflict notes; unknown species exits 1.
- succession: ranked suggestions; bad date and unknown bedmate exit 1.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from garden_recipes.cli import app

runner = CliRunner()

CATALOG = [
    {"species_id": "onion", "display_name": "Onion", "category": "Sustenance",
     "planting_seasons": ["Spring"], "explicit_companions": ["Carrot"]},
    {"species_id": "bean", "display_name": "Bean", "category": "Nitrogen/Bio-Mass",
     "planting_seasons": ["Spring"], "harvest_days": 55},
    {"species_id": "pepper", "display_name": "Pepper", "category": "Sustenance",
     "planting_seasons": ["Spring"]},
    {"species_id": "tomato", "display_name": "Tomato", "category": "Sustenance",
     "taxonomic_name": "Solanum lycopersicum", "planting_seasons": ["Spring"],
     "explicit_companions": ["Basil", "Carrot", "Marigold"]},
    {"id": "basil", "common_name": "Basil", "category": "Dye/Fiber/Aromatic",
     "growth_habit": "herb", "planting_season": ["Spring", "Summer"]},
    {"species_id": "potato", "display_name": "Potato", "category": "Sustenance",
     "taxonomic_name": "Solanum tuberosum", "planting_seasons": ["Spring"]},
    {"species_id": "carrot", "display_name": "Carrot", "category": "Sentinel/Miner",
     "taxonomic_name": "Daucus carota", "planting_seasons": ["Spring"], "harvest_days": 70},
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("GARDEN_RECIPES_CATALOG_PATH", "GARDEN_RECIPES_LOG_LEVEL", "GARDEN_RECIPES_DEBUG"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def catalog_path(tmp_path) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path


@pytest.fixture
def config_path(tmp_path, catalog_path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(
        f'[catalog]\ncatalog_path = "{catalog_path.as_posix()}"\n'
        '[recipe]\nspace = "small-bed"\nsun = "full"\ngoal = "cooking"\n'
        f'[output]\nrecipes_dir = "{(tmp_path / "recipes").as_posix()}"\n'
        '[logging]\nlevel = "WARNING"\nlog_file = ""\n',
        encoding="utf-8",
    )
    return path


def _invoke(*args: str):
    return runner.invoke(app, list(args))


class TestValidateConfig:
    def test_ok(self, config_path):
        result = _invoke("validate-config", "--config", str(config_path))
        assert result.exit_code == 0, result.output
        assert "[OK] Config valid." in result.output
        assert "Default goal:     cooking" in result.output

    def test_full_dump(self, config_path):
        result = _invoke("validate-config", "--config", str(config_path), "--full")
        assert result.exit_code == 0
        assert '"goal": "cooking"' in result.output

    def test_missing_config(self, tmp_path):
        result = _invoke("validate-config", "--config", str(tmp_path / "nope.toml"))
        assert result.exit_code == 1
        assert "[ERROR]" in result.output

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")
        result = _invoke("validate-config", "--config", str(path))
        assert result.exit_code == 1
        assert "Config validation failed" in result.output


class TestValidateCatalog:
    def test_summary(self, config_path):
        result = _invoke("validate-catalog", "--config", str(config_path))
        assert result.exit_code == 0, result.output
        assert "Validated 7 species." in result.output
        assert "Sustenance" in result.output
        assert "[OK] Catalog valid." in result.output

    def test_invalid_catalog(self, config_path, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps([{"display_name": ""}]), encoding="utf-8")
        result = _invoke("validate-catalog", "--config", str(config_path), "--catalog", str(bad))
        assert result.exit_code == 1
        assert "Catalog invalid" in result.output

    @pytest.mark.parametrize(
        "entry",
        [
            {"display_name": "Tomato", "companion_crops": [5]},
            {"display_name": "Tomato", "planting_seasons": [1]},
        ],
    )
    def test_non_string_list_items(self, config_path, tmp_path, entry):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps([entry]), encoding="utf-8")
        result = _invoke("recommend", "--config", str(config_path), "--catalog", str(bad))
        assert result.exit_code == 1
        assert "[ERROR] Catalog invalid" in result.output

    def test_missing_catalog(self, config_path, tmp_path):
        result = _invoke("validate-catalog", "--config", str(config_path),
                         "--catalog", str(tmp_path / "none.json"))
        assert result.exit_code == 1
        assert "Catalog file not found" in result.output


class TestRecommend:
    def test_uses_config_defaults(self, config_path):
        result = _invoke("recommend", "--config", str(config_path))
        assert result.exit_code == 0, result.output
        assert "Goal: cooking" in result.output
        assert "Bean" in result.output and "Tomato" in result.output
        assert "[OK] Recipe ready" in result.output

    def test_explicit_constraints(self, config_path):
        result = _invoke("recommend", "--config", str(config_path),
                         "--space", "windowsill", "--sun", "shade", "--goal", "salads")
        assert result.exit_code == 0, result.output
        assert "Picked 0 of up to 3" in result.output
        assert "(no feasible plan for these constraints)" in result.output

    def test_show_skipped(self, config_path):
        result = _invoke("recommend", "--config", str(config_path), "--show-skipped")
        assert result.exit_code == 0
        assert "Skipped candidates:" in result.output

    def test_json_out_with_dir(self, config_path, tmp_path):
        out_dir = tmp_path / "json"
        result = _invoke("recommend", "--config", str(config_path),
                         "--json-out", "--json-dir", str(out_dir))
        assert result.exit_code == 0, result.output
        files = list(out_dir.glob("recipe_small-bed_full_cooking_*.json"))
        assert len(files) == 1
        data = json.loads(files[0].read_text(encoding="utf-8"))
        names = {e["display_name"] for e in data["entries"]}
        assert not {"Onion", "Bean"} <= names

    def test_json_out_defaults_to_recipes_dir(self, config_path, tmp_path):
        result = _invoke("recommend", "--config", str(config_path), "--json-out")
        assert result.exit_code == 0, result.output
        assert len(list((tmp_path / "recipes").glob("recipe_*.json"))) == 1

    def test_no_json_without_flag(self, config_path, tmp_path):
        result = _invoke("recommend", "--config", str(config_path),
                         "--json-dir", str(tmp_path / "json"))
        assert result.exit_code == 0
        assert not (tmp_path / "json").exists()
        assert not (tmp_path / "recipes").exists()

    def test_unknown_space_rejected(self, config_path):
        result = _invoke("recommend", "--config", str(config_path), "--space", "farm")
        assert result.exit_code != 0


class TestExplain:
    def test_with_names(self, config_path):
        result = _invoke("explain", "Tomato", "--with", "Basil", "--with", "Potato",
                         "--config", str(config_path))
        assert result.exit_code == 0, result.output
        assert "=== Synergy: Tomato ===" in result.output
        assert "Avoid planting near Potato" in result.output
        assert "Companion of Basil" in result.output

    def test_whole_catalog(self, config_path):
        result = _invoke("explain", "onion", "--config", str(config_path))
        assert result.exit_code == 0
        assert "Avoid planting near Bean" in result.output
        assert "Companion of Carrot" in result.output

    def test_unknown_species(self, config_path):
        result = _invoke("explain", "Okra", "--config", str(config_path))
        assert result.exit_code == 1
        assert "Species not found" in result.output


class TestSuccession:
    def test_suggestions(self, config_path):
        result = _invoke("succession", "Tomato", "--date", "2026-04-15", "--config", str(config_path))
        assert result.exit_code == 0, result.output
        assert "=== Succession after Tomato ===" in result.output
        assert "Bean" in result.output

    def test_bedmate_excludes_antagonist(self, config_path):
        result = _invoke("succession", "Tomato", "--date", "2026-04-15", "--bedmate", "Onion",
                         "--limit", "10", "--config", str(config_path))
        assert result.exit_code == 0, result.output
        assert "Bean" not in result.output
        assert "Companion of Onion" in result.output

    def test_bad_date(self, config_path):
        result = _invoke("succession", "Tomato", "--date", "April", "--config", str(config_path))
        assert result.exit_code == 1
        assert "Invalid date format" in result.output

    def test_unknown_bedmate(self, config_path):
        result = _invoke("succession", "Tomato", "--bedmate", "Okra", "--config", str(config_path))
        assert result.exit_code == 1
