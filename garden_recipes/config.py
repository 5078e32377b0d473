"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``     : committed static defaults
  2. ``config/local.toml``       : optional local overrides (gitignored)
  3. ``.env``                    : local env overrides (gitignored)
  4. Environment variables       : ``GARDEN_RECIPES_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

Rule tables (antagonists, shade list, goal profiles, tier sizes) live in
``recommendations/rules.py``.  Configuration only covers where the catalog
lives, CLI defaults, output paths and logging.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from garden_recipes.taxonomy.garden_taxonomy import GoalTag, SpaceTier, SunTier

# ── Sub-config models ─────────────────────────────────────────────────────────


class CatalogConfig(BaseModel):
    """Where the species catalog export is read from."""

    model_config = ConfigDict(frozen=True)

    catalog_path: str = "config/catalog/starter_catalog.json"


class RecipeConfig(BaseModel):
    """Default grower constraints used when CLI options are omitted."""

    model_config = ConfigDict(frozen=True)

    space: SpaceTier = SpaceTier.SMALL_BED
    sun: SunTier = SunTier.FULL
    goal: GoalTag = GoalTag.SALADS


class SuccessionConfig(BaseModel):
    """Succession suggester defaults."""

    model_config = ConfigDict(frozen=True)

    limit: int = 3
    hardiness_zone: Optional[float] = None

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"succession limit must be >= 1, got {v}.")
        return v

    @field_validator("hardiness_zone")
    @classmethod
    def validate_zone(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not 1.0 <= v <= 13.0:
            raise ValueError(f"hardiness_zone must be in [1, 13], got {v}.")
        return v


class OutputConfig(BaseModel):
    """Filesystem paths for report output."""

    model_config = ConfigDict(frozen=True)

    recipes_dir: str = "data/outputs/recipes"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = "data/logs/garden_recipes.log"
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Every CLI command receives an ``AppConfig`` built by ``load_config()``.
    """

    model_config = ConfigDict(frozen=True)

    catalog: CatalogConfig = CatalogConfig()
    recipe: RecipeConfig = RecipeConfig()
    succession: SuccessionConfig = SuccessionConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent

ENV_PREFIX = "GARDEN_RECIPES_"


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        pydantic.ValidationError: If merged values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    raw = _apply_env_overrides(raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply GARDEN_RECIPES_* env vars to the raw config dict.

    Supported overrides:
      GARDEN_RECIPES_CATALOG_PATH → raw["catalog"]["catalog_path"]
      GARDEN_RECIPES_LOG_LEVEL    → raw["logging"]["level"]
      GARDEN_RECIPES_DEBUG        → raw["debug"]
    """
    if catalog_path := os.environ.get(f"{ENV_PREFIX}CATALOG_PATH"):
        raw.setdefault("catalog", {})["catalog_path"] = catalog_path

    if log_level := os.environ.get(f"{ENV_PREFIX}LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get(f"{ENV_PREFIX}DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        catalog=CatalogConfig(**raw.get("catalog", {})),
        recipe=RecipeConfig(**raw.get("recipe", {})),
        succession=SuccessionConfig(**raw.get("succession", {})),
        output=OutputConfig(**raw.get("output", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
