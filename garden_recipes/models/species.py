"""
Species record model: the read-only catalog row the engine works over.

``SpeciesRecord`` is supplied by an external catalog store and is never
mutated by the engine.  Recipes returned by the selector are lists of the
*same* record objects that came in, not copies.

Catalog exports use the original column names (``common_name``, ``name``,
``scientific_name``, ``planting_season``, ``companion_crops``, ``id``).
``normalize_catalog_keys`` maps those onto the field names below, so a raw
export row can be passed straight to ``SpeciesRecord(**row)``.

Missing optional data is always representable: ``None`` for scalars, empty
collections for seasons and companions.  The engine treats "unknown" as
neutral, never as a reason to reject a record.

Key derived values:
  - ``identity``          : ``species_id`` → ``taxonomic_name`` → ``display_name``
  - ``dedup_key``         : normalized taxonomic name, else display name
  - ``spacing_min_inches``: first integer in ``spacing_inches`` (``"18-24"`` → 18)
"""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from garden_recipes.taxonomy.garden_taxonomy import SEASON_ALIASES, CropCategory

_FIRST_INT_RE = re.compile(r"\d+")

# Original catalog column → model field, in priority order.
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "species_id":          ("id",),
    "display_name":        ("common_name", "name"),
    "taxonomic_name":      ("scientific_name",),
    "planting_seasons":    ("planting_season",),
    "explicit_companions": ("companion_crops",),
}


class SpeciesRecord(BaseModel):
    """One candidate plant species from the catalog.

    Attributes:
        species_id: Stable catalog key, or ``None`` when the catalog has none.
        display_name: Human-readable common name, e.g. ``"Cherry Tomato"``.
        taxonomic_name: Binomial name, e.g. ``"Solanum lycopersicum"``, or ``None``.
        category: Coarse functional grouping; exact-equality comparisons only.
        growth_habit: Free-form habit (``"vine"``, ``"herb"``, ``"tree"`` …) or ``None``.
        planting_seasons: Season tags; empty means unknown.
        harvest_days: Days from planting to harvest, or ``None``.
        spacing_inches: Free-form spacing string, e.g. ``"12"`` or ``"18-24"``.
        explicit_companions: Free-text names declared as beneficial neighbours.
        hardiness_zone_min: Lowest USDA zone (8.5 = 8b) the species tolerates.
        hardiness_zone_max: Highest USDA zone the species tolerates.
        min_container_gal: Smallest workable container in gallons.
        propagation_method: ``"direct_sow"``, ``"transplant"``, ``"both"`` or ``None``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    species_id: Optional[str] = None
    display_name: str
    taxonomic_name: Optional[str] = None
    category: str = CropCategory.OTHER.value
    growth_habit: Optional[str] = None
    planting_seasons: frozenset[str] = frozenset()
    harvest_days: Optional[int] = None
    spacing_inches: Optional[str] = None
    explicit_companions: tuple[str, ...] = ()
    hardiness_zone_min: Optional[float] = None
    hardiness_zone_max: Optional[float] = None
    min_container_gal: Optional[float] = None
    propagation_method: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def apply_catalog_aliases(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return normalize_catalog_keys(data)
        return data

    @field_validator("display_name")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("display_name must not be blank.")
        return v

    @field_validator(
        "species_id", "taxonomic_name", "growth_habit", "spacing_inches",
        "propagation_method", mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return CropCategory.OTHER.value
        return v

    @field_validator("planting_seasons", mode="before")
    @classmethod
    def normalize_seasons(cls, v: Any) -> Any:
        if v is None:
            return frozenset()
        return frozenset(_normalize_season(s) for s in _string_items(v, "planting_seasons"))

    @field_validator("explicit_companions", mode="before")
    @classmethod
    def normalize_companions(cls, v: Any) -> Any:
        if v is None:
            return ()
        return tuple(_string_items(v, "explicit_companions"))

    @field_validator("harvest_days")
    @classmethod
    def validate_harvest_days(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError(f"harvest_days must be positive, got {v}.")
        return v

    @model_validator(mode="after")
    def validate_zone_ordering(self) -> "SpeciesRecord":
        lo, hi = self.hardiness_zone_min, self.hardiness_zone_max
        if lo is not None and hi is not None and hi < lo:
            raise ValueError(
                f"hardiness_zone_max ({hi}) must be >= hardiness_zone_min ({lo})."
            )
        return self

    # ── Derived values ────────────────────────────────────────────────────────

    @property
    def identity(self) -> str:
        """Stable unique key: catalog id, else taxonomic name, else display name."""
        return self.species_id or self.taxonomic_name or self.display_name

    @property
    def dedup_key(self) -> str:
        """Key used to keep two records of one species out of the same recipe."""
        return (self.taxonomic_name or self.display_name).strip().lower()

    @property
    def spacing_min_inches(self) -> Optional[int]:
        """Smallest/primary spacing value in inches, or ``None`` if unparseable."""
        if not self.spacing_inches:
            return None
        match = _FIRST_INT_RE.search(self.spacing_inches)
        return int(match.group()) if match else None

    @property
    def habit(self) -> Optional[str]:
        """Lower-cased growth habit, or ``None``."""
        return self.growth_habit.strip().lower() if self.growth_habit else None


def _string_items(v: Any, field_name: str) -> list[str]:
    """Stripped, non-blank strings from a string or a list of strings.

    Raises:
        ValueError: If ``v`` is not a string or list, or an item is not a string.
    """
    if isinstance(v, str):
        v = [v]
    if not isinstance(v, (list, tuple, set, frozenset)):
        raise ValueError(f"{field_name} must be a string or a list of strings.")
    items: list[str] = []
    for item in v:
        if item is None:
            continue
        if not isinstance(item, str):
            raise ValueError(
                f"{field_name} entries must be strings, got {type(item).__name__} ({item!r})."
            )
        if item.strip():
            items.append(item.strip())
    return items


def _normalize_season(tag: str) -> str:
    """Canonical ``Season`` value for known season words, else title-cased text."""
    season = SEASON_ALIASES.get(tag.lower())
    return season.value if season is not None else tag.title()


def normalize_catalog_keys(row: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``row`` with original catalog column names mapped to fields.

    A field already present with a non-null value wins over its aliases; among
    aliases the first non-null one wins (``common_name`` before ``name``).
    """
    out = dict(row)
    for field_name, aliases in _KEY_ALIASES.items():
        if out.get(field_name) is not None:
            continue
        for alias in aliases:
            value = out.get(alias)
            if value is not None and not (isinstance(value, str) and not value.strip()):
                out[field_name] = value
                break
    return out
