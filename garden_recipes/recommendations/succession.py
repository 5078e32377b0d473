"""
Succession suggester: what to plant after a crop finishes.

Candidates must pass three gates before they are scored:

    1. Season timing    plantable in the harvest month or the month after
    2. Hardiness zone   inside the candidate's zone range (no data = fits)
    3. Bedmates         not antagonistic to anything still in the bed

Score (higher is better)
------------------------
    different genus than the finished crop     +8  "Good rotation"
    same genus                                 -5
    plantable in the harvest month             +6  "Plant now"
    plantable only the month after             +3  "Plant next month"
    harvest_days <= 45                         +4  "Quick harvest"
    45 < harvest_days <= 75                    +2
    companion of any bedmate (once)            +5  "Companion of <name>"
    Nitrogen/Bio-Mass after a Sustenance crop  +4  "N-fixer after feeder"
    companion of the finished crop             +3  "Follows well"

Ties: faster harvest first (unknown last), then catalog order.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from garden_recipes.models.recipe import SuccessionCandidate
from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.classifier import (
    is_antagonist,
    is_explicit_companion,
)
from garden_recipes.taxonomy.garden_taxonomy import CropCategory

log = logging.getLogger(__name__)

_MONTH_NAMES: tuple[str, ...] = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

_UNKNOWN_HARVEST_DAYS = 999


def season_keywords_for_month(month: int) -> tuple[str, ...]:
    """Season keywords for a 1-based calendar month (northern hemisphere)."""
    if 3 <= month <= 5:
        return ("spring",)
    if 6 <= month <= 8:
        return ("summer",)
    if 9 <= month <= 11:
        return ("fall", "autumn")
    return ("winter",)


def plantable_in_month(species: SpeciesRecord, month: int) -> bool:
    """True if a planting season tag names the month or its season.

    Records without season data are never plantable here.
    """
    if not species.planting_seasons:
        return False
    keywords = season_keywords_for_month(month)
    month_name = _MONTH_NAMES[month - 1]
    short_month = month_name[:3]
    for tag in species.planting_seasons:
        lower = tag.lower()
        if any(kw in lower for kw in keywords):
            return True
        if month_name in lower or short_month in lower:
            return True
    return False


def fits_hardiness_zone(species: SpeciesRecord, zone: float) -> bool:
    """True if ``zone`` is inside the species' zone range; missing data fits."""
    lo, hi = species.hardiness_zone_min, species.hardiness_zone_max
    if lo is None or hi is None:
        return True
    return lo <= zone <= hi


def genus_key(species: SpeciesRecord) -> str:
    """Genus (first word of the taxonomic name) as a rotation family proxy."""
    if species.taxonomic_name:
        genus = species.taxonomic_name.strip().split()[0].lower()
        if genus:
            return genus
    return species.category.lower()


def suggest_succession(
    finished:       SpeciesRecord,
    catalog:        Sequence[SpeciesRecord],
    hardiness_zone: Optional[float] = None,
    bedmates:       Sequence[SpeciesRecord] = (),
    harvest_date:   Optional[date] = None,
    limit:          int = 3,
) -> list[SuccessionCandidate]:
    """Suggest the best follow-up species after ``finished`` is harvested.

    Args:
        finished:       The crop that just finished.
        catalog:        Full catalog to draw candidates from.
        hardiness_zone: Grower's USDA zone, or ``None`` to skip the zone gate.
        bedmates:       Species still growing in the same bed.
        harvest_date:   When ``finished`` comes out.  Defaults to today.
        limit:          Maximum suggestions returned.

    Returns:
        Up to ``limit`` candidates, best first.
    """
    if harvest_date is None:
        harvest_date = date.today()
    month = harvest_date.month
    next_month = month % 12 + 1
    finished_genus = genus_key(finished)

    scored: list[tuple[int, int, int, SuccessionCandidate]] = []
    for position, candidate in enumerate(catalog):
        if candidate is finished or candidate.identity == finished.identity:
            continue

        now = plantable_in_month(candidate, month)
        later = plantable_in_month(candidate, next_month)
        if not now and not later:
            continue
        if hardiness_zone is not None and not fits_hardiness_zone(candidate, hardiness_zone):
            continue
        if any(is_antagonist(candidate, bm) for bm in bedmates):
            continue

        score = 0
        reasons: list[str] = []

        if genus_key(candidate) != finished_genus:
            score += 8
            reasons.append("Good rotation")
        else:
            score -= 5

        if now:
            score += 6
            reasons.append("Plant now")
        else:
            score += 3
            reasons.append("Plant next month")

        days = candidate.harvest_days
        if days is not None:
            if days <= 45:
                score += 4
                reasons.append("Quick harvest")
            elif days <= 75:
                score += 2

        for bm in bedmates:
            if is_explicit_companion(candidate, bm):
                score += 5
                reasons.append(f"Companion of {bm.display_name}")
                break

        if (
            finished.category == CropCategory.SUSTENANCE
            and candidate.category == CropCategory.NITROGEN_BIOMASS
        ):
            score += 4
            reasons.append("N-fixer after feeder")

        if is_explicit_companion(candidate, finished):
            score += 3
            reasons.append("Follows well")

        scored.append((
            -score,
            days if days is not None else _UNKNOWN_HARVEST_DAYS,
            position,
            SuccessionCandidate(species=candidate, score=score, reasons=tuple(reasons)),
        ))

    scored.sort(key=lambda row: row[:3])
    log.debug(
        "Succession for %s: %d eligible candidate(s).",
        finished.display_name, len(scored),
    )
    return [row[3] for row in scored[:limit]]
