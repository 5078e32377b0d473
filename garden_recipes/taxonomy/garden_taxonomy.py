"""
Closed enumerations for grower constraints and engine outcomes.

Three orthogonal dimensions describe every recipe request:
  - ``SpaceTier``: the *where*: how much planting area is available?
  - ``SunTier``  : the *light*: how much direct sun does the spot get?
  - ``GoalTag``  : the *why*:   what does the grower want to harvest?

``SPACE_TIER_MAX`` is the canonical size contract: every ``SpaceTier`` maps
to the maximum number of species a recipe may contain for that tier.

Categories are free-form strings on catalog records and are compared by exact
equality.  ``CropCategory`` names the values the scoring rules refer to; a
record may carry any other category string.

Usage example::

    from garden_recipes.taxonomy.garden_taxonomy import SpaceTier, GoalTag

This module has NO imports from any other ``garden_recipes`` package.
"""

from enum import StrEnum


class SpaceTier(StrEnum):
    """Available planting area, smallest to largest."""

    WINDOWSILL = "windowsill"
    """A few pots on a ledge."""

    PATIO = "patio"
    """Patio or balcony: three to six containers."""

    SMALL_BED = "small-bed"
    """A 4x4 or 4x8 raised bed."""

    BIG_YARD = "big-yard"
    """Multiple beds or in-ground rows."""

    @property
    def is_container(self) -> bool:
        """True for the two container-sized tiers."""
        return self in CONTAINER_TIERS


class SunTier(StrEnum):
    """Direct-sun exposure of the planting spot."""

    FULL = "full"
    """Six or more hours of direct sunlight."""

    PARTIAL = "partial"
    """Three to six hours of direct sunlight."""

    SHADE = "shade"
    """Less than three hours of direct sunlight."""


class GoalTag(StrEnum):
    """Grower intent; drives the ranking bonuses in the selector."""

    SALADS = "salads"
    COOKING = "cooking"
    HERBS = "herbs"
    FLOWERS = "flowers"


class Season(StrEnum):
    """Planting season tags used in catalog ``planting_seasons``."""

    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"
    WINTER = "Winter"


class CropCategory(StrEnum):
    """Functional catalog categories referenced by the scoring rules."""

    SUSTENANCE = "Sustenance"
    """General food crops; small flat ranking bonus."""

    NITROGEN_BIOMASS = "Nitrogen/Bio-Mass"
    """Legumes and cover crops that fix nitrogen or build biomass."""

    DYE_FIBER_AROMATIC = "Dye/Fiber/Aromatic"
    """Flowers, dye plants and aromatics; favoured by the flowers goal."""

    SENTINEL_MINER = "Sentinel/Miner"
    """Pest sentinels and deep-rooted mineral miners."""

    OTHER = "Other"
    """Fallback for records with no category."""


class SynergyType(StrEnum):
    """Kind of explanatory synergy note."""

    COMPANION = "companion"
    ANTAGONIST = "antagonist"


class SkipReason(StrEnum):
    """Why the greedy pass rejected a ranked candidate."""

    DUPLICATE_SPECIES = "duplicate_species"
    CATEGORY_CAP = "category_cap"
    ANTAGONIST = "antagonist"


# ── Integrity contracts ───────────────────────────────────────────────────────

CONTAINER_TIERS: frozenset[SpaceTier] = frozenset(
    {SpaceTier.WINDOWSILL, SpaceTier.PATIO}
)

SPACE_TIER_MAX: dict[SpaceTier, int] = {
    SpaceTier.WINDOWSILL: 3,
    SpaceTier.PATIO:      4,
    SpaceTier.SMALL_BED:  5,
    SpaceTier.BIG_YARD:   6,
}

# Lower-cased catalog season text → canonical ``Season``.
SEASON_ALIASES: dict[str, Season] = {
    **{s.value.lower(): s for s in Season},
    "autumn": Season.FALL,
}
