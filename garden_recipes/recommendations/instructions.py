"""
Plain-language planting steps for beginners.

``get_plain_instructions(species, space)`` returns short imperative lines in
a fixed order: container or spacing, planting season, propagation, harvest
timing, watering.  Lines whose data is missing are skipped, except the
container line which falls back to a generic drainage tip.
"""

from __future__ import annotations

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.taxonomy.garden_taxonomy import Season, SpaceTier

_SEASON_ORDER = {s.value: i for i, s in enumerate(Season)}


def get_plain_instructions(species: SpeciesRecord, space: SpaceTier) -> list[str]:
    """Return beginner planting steps for ``species`` in the given space tier."""
    lines: list[str] = []

    if SpaceTier(space).is_container:
        gal = species.min_container_gal
        if gal is None:
            lines.append("Use a pot with drainage holes")
        elif gal <= 2:
            lines.append(f"Use a small pot ({gal:g}+ gallon)")
        elif gal <= 5:
            lines.append(f"Use a medium pot ({gal:g}+ gallon)")
        else:
            lines.append(f"Use a large pot ({gal:g}+ gallon)")
    elif species.spacing_inches:
        lines.append(f'Space plants {species.spacing_inches}" apart')

    if species.planting_seasons:
        seasons = sorted(species.planting_seasons, key=lambda s: (_SEASON_ORDER.get(s, 9), s))
        lines.append(f"Plant in {' or '.join(seasons)}")

    method = (species.propagation_method or "").lower()
    if method == "direct_sow":
        lines.append("Sow seeds directly in soil")
    elif method == "transplant":
        lines.append("Start indoors or buy seedlings")
    else:
        lines.append("Sow seeds or buy seedlings")

    days = species.harvest_days
    if days is not None:
        months = round(days / 30)
        if days <= 30:
            lines.append(f"Ready to pick in about {days} days, one of the fastest!")
        elif days <= 60:
            lines.append(f"Ready to pick in about {days} days")
        elif days <= 90:
            lines.append(f"Harvest in about {months} months")
        else:
            lines.append(f"Harvest in about {months} months, worth the wait!")

    lines.append("Water when the top inch of soil feels dry")
    return lines
