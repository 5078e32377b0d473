"""
Candidate scoring: pairwise companion score and goal ranking score.

Two independent scores live here.

companion_score(candidate, already_placed) : signed int
---------------------------------------------------------
Sum over every already-placed species ``other`` of ``score_pair(candidate, other).total``:

    antagonist pair       -15   exclusive: nothing else counts for that pair
    explicit companion     +5
    season overlap         +2 shared / 0 disjoint / +1 either side unknown
    habit complement       +2 complementary vertical pair
                           +1 different, both known
                            0 identical or either unknown

The total is a sum, not an average: more placed species means larger
totals in either direction.  An empty ``already_placed`` scores exactly 0.

compute_goal_score(candidate, space, goal) : ranking score
-----------------------------------------------------------
Context score used to order candidates before greedy acceptance.
Independent of anything already selected:

    preferred name (whole word, first match only)      +20
    herbs goal and herb habit                           +10
    flowers goal and aromatic category or herb habit     +8
    Sustenance category                                  +2
    harvest_days <= 60                                   +3
    60 < harvest_days <= 90                              +1
    container tier and herb habit                        +3
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.classifier import (
    is_antagonist,
    is_explicit_companion,
)
from garden_recipes.recommendations.name_index import name_index
from garden_recipes.recommendations.rules import (
    ANTAGONIST_PENALTY,
    COMPANION_BONUS,
    COMPLEMENTARY_HABITS,
    CONTAINER_HERB_BONUS,
    GOAL_PROFILES,
    HABIT_COMPLEMENT_BONUS,
    HABIT_DIFFERENT_BONUS,
    HERB_HABIT,
    MEDIUM_HARVEST_BONUS,
    MEDIUM_HARVEST_DAYS,
    PREFERRED_NAME_BONUS,
    QUICK_HARVEST_BONUS,
    QUICK_HARVEST_DAYS,
    SEASON_SHARED_BONUS,
    SEASON_UNKNOWN_BONUS,
    SUSTENANCE_BONUS,
)
from garden_recipes.taxonomy.garden_taxonomy import CropCategory, GoalTag, SpaceTier


# ── Pairwise ──────────────────────────────────────────────────────────────────


@dataclass
class PairScore:
    """Score breakdown of one candidate against one already-placed species.

    Attributes:
        antagonist:      True if the pair is antagonistic (bonuses are then 0).
        companion_bonus: ``COMPANION_BONUS`` or 0.
        season_bonus:    0, 1 or 2.
        habit_bonus:     0, 1 or 2.
    """

    antagonist:      bool
    companion_bonus: int = 0
    season_bonus:    int = 0
    habit_bonus:     int = 0

    @property
    def total(self) -> int:
        if self.antagonist:
            return ANTAGONIST_PENALTY
        return self.companion_bonus + self.season_bonus + self.habit_bonus


def season_overlap_score(a: SpeciesRecord, b: SpeciesRecord) -> int:
    """+2 when the seasons intersect, 0 when disjoint, +1 when either is unknown."""
    if not a.planting_seasons or not b.planting_seasons:
        return SEASON_UNKNOWN_BONUS
    if a.planting_seasons & b.planting_seasons:
        return SEASON_SHARED_BONUS
    return 0


def habit_complement_score(a: SpeciesRecord, b: SpeciesRecord) -> int:
    """Reward vertical diversity between two growth habits."""
    a_habit, b_habit = a.habit, b.habit
    if not a_habit or not b_habit or a_habit == b_habit:
        return 0
    for h1, h2 in COMPLEMENTARY_HABITS:
        if (h1 in a_habit and h2 in b_habit) or (h2 in a_habit and h1 in b_habit):
            return HABIT_COMPLEMENT_BONUS
    return HABIT_DIFFERENT_BONUS


def score_pair(candidate: SpeciesRecord, other: SpeciesRecord) -> PairScore:
    """Score ``candidate`` against a single already-placed species."""
    if is_antagonist(candidate, other):
        return PairScore(antagonist=True)
    return PairScore(
        antagonist=False,
        companion_bonus=COMPANION_BONUS if is_explicit_companion(candidate, other) else 0,
        season_bonus=season_overlap_score(candidate, other),
        habit_bonus=habit_complement_score(candidate, other),
    )


def companion_score(
    candidate:      SpeciesRecord,
    already_placed: Sequence[SpeciesRecord],
) -> int:
    """Signed compatibility of ``candidate`` with everything already placed."""
    total = 0
    for other in already_placed:
        total += score_pair(candidate, other).total
    return total


# ── Goal ranking ──────────────────────────────────────────────────────────────


@dataclass
class GoalScoreComponents:
    """Breakdown of the goal/context ranking score for one candidate.

    Attributes:
        preferred_name_bonus: 20 on a preferred-name match, else 0.
        habit_bonus:          Goal-specific habit/category affinity.
        category_bonus:       2 for the Sustenance category.
        harvest_bonus:        3, 1 or 0 by harvest duration.
        container_bonus:      3 for herbs on a container tier.
        matched_name:         The preferred name that matched, if any.
    """

    preferred_name_bonus: int
    habit_bonus:          int
    category_bonus:       int
    harvest_bonus:        int
    container_bonus:      int
    matched_name:         Optional[str] = None

    @property
    def total(self) -> int:
        return (
            self.preferred_name_bonus
            + self.habit_bonus
            + self.category_bonus
            + self.harvest_bonus
            + self.container_bonus
        )


def compute_goal_score(
    candidate: SpeciesRecord,
    space:     SpaceTier,
    goal:      GoalTag,
) -> GoalScoreComponents:
    """Compute the ranking score of ``candidate`` for a space tier and goal."""
    profile = GOAL_PROFILES[goal]
    idx = name_index(candidate.display_name)
    is_herb = candidate.habit == HERB_HABIT

    matched_name = next(
        (pref for pref in profile.preferred_names if idx.contains_phrase(pref)),
        None,
    )
    preferred_name_bonus = PREFERRED_NAME_BONUS if matched_name else 0

    habit_bonus = 0
    if profile.herb_habit_bonus and is_herb:
        habit_bonus += profile.herb_habit_bonus
    if profile.aromatic_bonus and (
        candidate.category in profile.aromatic_categories or is_herb
    ):
        habit_bonus += profile.aromatic_bonus

    category_bonus = (
        SUSTENANCE_BONUS if candidate.category == CropCategory.SUSTENANCE else 0
    )

    harvest_bonus = 0
    if candidate.harvest_days is not None:
        if candidate.harvest_days <= QUICK_HARVEST_DAYS:
            harvest_bonus = QUICK_HARVEST_BONUS
        elif candidate.harvest_days <= MEDIUM_HARVEST_DAYS:
            harvest_bonus = MEDIUM_HARVEST_BONUS

    container_bonus = CONTAINER_HERB_BONUS if space.is_container and is_herb else 0

    return GoalScoreComponents(
        preferred_name_bonus=preferred_name_bonus,
        habit_bonus=habit_bonus,
        category_bonus=category_bonus,
        harvest_bonus=harvest_bonus,
        container_bonus=container_bonus,
        matched_name=matched_name,
    )
