"""
Recipe selector: turns a catalog plus grower constraints into a bounded,
diverse, mutually-compatible planting recipe.

Usage flow
----------
1. passes_feasibility(species, space, sun)
   -> bool  (shade list + container spacing filters)

2. rank_candidates(catalog, space, sun, goal)
   -> list[RankedCandidate]  (feasible only, goal score descending, stable)

3. select_recipe(catalog, space, sun, goal)
   -> RecipeSelection  (picked records + rejected candidates with reasons)

4. pick_recipe(catalog, space, sun, goal)
   -> list[SpeciesRecord]  (the public entry point; ``select_recipe().picked``)

Greedy acceptance
-----------------
One pass over the ranked list with three accumulators:

    used_keys        set of dedup keys already accepted
    category_counts  accepted members per category (cap 2)
    picked           the growing recipe

A candidate is skipped when its dedup key is used, its category is full, it is
antagonistic to any picked species, or ``companion_score(candidate, picked)
<= -10``.  The pass stops as soon as the recipe reaches the tier maximum.
There is no backtracking: an under-filled recipe is returned as is.

Empty catalogs, fully filtered catalogs and over-constrained catalogs all
yield a shorter (possibly empty) list, never an exception.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Sequence

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.name_index import normalize_name
from garden_recipes.recommendations.rules import (
    ANTAGONIST_THRESHOLD,
    CATEGORY_CAP,
    CONTAINER_MAX_SPACING,
    SHADE_TOLERANT_NAMES,
)
from garden_recipes.recommendations.scorer import (
    GoalScoreComponents,
    compute_goal_score,
    score_pair,
)
from garden_recipes.taxonomy.garden_taxonomy import (
    SPACE_TIER_MAX,
    GoalTag,
    SkipReason,
    SpaceTier,
    SunTier,
)

log = logging.getLogger(__name__)


@dataclass
class RankedCandidate:
    """A feasible catalog record with its goal ranking score.

    Attributes:
        species:    The catalog record (same object as in the input catalog).
        score:      ``components.total``.
        components: Ranking score breakdown.
        position:   Index of the record in the input catalog.
    """

    species:    SpeciesRecord
    score:      int
    components: GoalScoreComponents
    position:   int


@dataclass
class RecipeSelection:
    """Outcome of one greedy pass.

    Attributes:
        picked:    Accepted records, in acceptance order.
        skipped:   ``(record, reason)`` for every ranked candidate rejected
                   before the recipe filled up.
        max_size:  Tier maximum the pass was bounded by.
    """

    picked:   list[SpeciesRecord] = field(default_factory=list)
    skipped:  list[tuple[SpeciesRecord, SkipReason]] = field(default_factory=list)
    max_size: int = 0

    @property
    def is_full(self) -> bool:
        return len(self.picked) >= self.max_size


# ── Feasibility ───────────────────────────────────────────────────────────────


def is_shade_tolerant(species: SpeciesRecord) -> bool:
    """True if the display name contains an entry of ``SHADE_TOLERANT_NAMES``.

    Plain substring test on the normalized name, so "Peppermint" and
    "Romaine Lettuce" both qualify.
    """
    text = normalize_name(species.display_name)
    return any(normalize_name(entry) in text for entry in SHADE_TOLERANT_NAMES)


def passes_feasibility(
    species: SpeciesRecord,
    space:   SpaceTier,
    sun:     SunTier,
) -> bool:
    """Return False if ``species`` cannot grow under the given constraints.

    Rules:
        - Shade tier: the name must match the shade-tolerant list.
        - Container tiers: parsed spacing must not exceed 18 inches.
          Absent or unparseable spacing never excludes a record.
    """
    if sun == SunTier.SHADE and not is_shade_tolerant(species):
        return False
    if space.is_container:
        spacing = species.spacing_min_inches
        if spacing is not None and spacing > CONTAINER_MAX_SPACING:
            return False
    return True


# ── Ranking ───────────────────────────────────────────────────────────────────


def rank_candidates(
    catalog: Sequence[SpeciesRecord],
    space:   SpaceTier,
    sun:     SunTier,
    goal:    GoalTag,
) -> list[RankedCandidate]:
    """Filter infeasible records, score the rest, and sort by score descending.

    Ties keep catalog order (Python's sort is stable).
    """
    ranked: list[RankedCandidate] = []
    for position, species in enumerate(catalog):
        if not passes_feasibility(species, space, sun):
            continue
        components = compute_goal_score(species, space, goal)
        ranked.append(
            RankedCandidate(
                species=species,
                score=components.total,
                components=components,
                position=position,
            )
        )
    ranked.sort(key=lambda rc: -rc.score)
    return ranked


# ── Greedy acceptance ─────────────────────────────────────────────────────────


def select_recipe(
    catalog: Sequence[SpeciesRecord],
    space:   SpaceTier | str,
    sun:     SunTier | str,
    goal:    GoalTag | str,
) -> RecipeSelection:
    """Run the full selection and keep the rejection trail.

    Args:
        catalog: Read-only catalog records.  May be empty.
        space:   ``SpaceTier`` (or its string value).
        sun:     ``SunTier`` (or its string value).
        goal:    ``GoalTag`` (or its string value).

    Returns:
        ``RecipeSelection`` whose ``picked`` list is the recipe.

    Raises:
        ValueError: If ``space``, ``sun`` or ``goal`` is outside its enum.
    """
    space, sun, goal = SpaceTier(space), SunTier(sun), GoalTag(goal)
    max_size = SPACE_TIER_MAX[space]
    selection = RecipeSelection(max_size=max_size)

    used_keys: set[str] = set()
    category_counts: dict[str, int] = defaultdict(int)

    ranked = rank_candidates(catalog, space, sun, goal)
    for rc in ranked:
        if len(selection.picked) >= max_size:
            break
        species = rc.species

        reason = _rejection_reason(species, selection.picked, used_keys, category_counts)
        if reason is not None:
            selection.skipped.append((species, reason))
            log.debug("Skipped %s (%s).", species.display_name, reason.value)
            continue

        selection.picked.append(species)
        used_keys.add(species.dedup_key)
        category_counts[species.category] += 1

    log.info(
        "Selected %d/%d species (space=%s sun=%s goal=%s) from %d feasible of %d.",
        len(selection.picked), max_size, space.value, sun.value, goal.value,
        len(ranked), len(catalog),
    )
    return selection


def pick_recipe(
    catalog: Sequence[SpeciesRecord],
    space:   SpaceTier | str,
    sun:     SunTier | str,
    goal:    GoalTag | str,
) -> list[SpeciesRecord]:
    """Return the recommended recipe for the given constraints.

    The result holds at most the tier maximum (3/4/5/6), no two records with
    the same dedup key, at most two records per category, and no antagonist
    pair.  Identical inputs always give identical output.
    """
    return select_recipe(catalog, space, sun, goal).picked


def _rejection_reason(
    species:         SpeciesRecord,
    picked:          list[SpeciesRecord],
    used_keys:       set[str],
    category_counts: dict[str, int],
) -> SkipReason | None:
    """Return why ``species`` cannot join ``picked``, or None to accept it."""
    if species.dedup_key in used_keys:
        return SkipReason.DUPLICATE_SPECIES
    if category_counts[species.category] >= CATEGORY_CAP:
        return SkipReason.CATEGORY_CAP
    pairs = [score_pair(species, other) for other in picked]
    # No antagonist pair enters the recipe, whatever the summed score.
    if any(p.antagonist for p in pairs):
        return SkipReason.ANTAGONIST
    if sum(p.total for p in pairs) <= ANTAGONIST_THRESHOLD:
        return SkipReason.ANTAGONIST
    return None
