"""
Immutable rule tables for the recipe engine.

Every table here is content, not user input: changing a list is a content
update, never a runtime configuration switch.  The classifier, scorer and
selector reference these tables by index or key and never re-declare them
inline.

Tables
------
ANTAGONIST_RULES      : name-fragment groups that must never share a bed.
COMPLEMENTARY_HABITS  : growth-habit pairs that stack vertically (+2).
SHADE_TOLERANT_NAMES  : the only names allowed under ``SunTier.SHADE``.
GOAL_PROFILES         : per-goal preferred names and ranking affinities.

Scoring constants
-----------------
Pairwise (``companion_score``):
    ANTAGONIST_PENALTY      -15   exclusive; no bonuses for that pair
    COMPANION_BONUS          +5
    SEASON_SHARED_BONUS      +2   0 when both known and disjoint
    SEASON_UNKNOWN_BONUS     +1
    HABIT_COMPLEMENT_BONUS   +2
    HABIT_DIFFERENT_BONUS    +1

Greedy acceptance:
    ANTAGONIST_THRESHOLD    -10   skip when companion_score <= threshold
    CATEGORY_CAP              2
    CONTAINER_MAX_SPACING    18   inches, container tiers only

Ranking (goal alignment):
    PREFERRED_NAME_BONUS    +20   first preferred-name match only
    SUSTENANCE_BONUS         +2
    QUICK_HARVEST_BONUS      +3   harvest_days <= 60
    MEDIUM_HARVEST_BONUS     +1   60 < harvest_days <= 90
    CONTAINER_HERB_BONUS     +3
"""

from __future__ import annotations

from dataclasses import dataclass, field

from garden_recipes.taxonomy.garden_taxonomy import CropCategory, GoalTag

# ── Scoring constants ─────────────────────────────────────────────────────────

ANTAGONIST_PENALTY = -15
COMPANION_BONUS = 5
SEASON_SHARED_BONUS = 2
SEASON_UNKNOWN_BONUS = 1
HABIT_COMPLEMENT_BONUS = 2
HABIT_DIFFERENT_BONUS = 1

ANTAGONIST_THRESHOLD = -10
CATEGORY_CAP = 2
CONTAINER_MAX_SPACING = 18

PREFERRED_NAME_BONUS = 20
SUSTENANCE_BONUS = 2
QUICK_HARVEST_DAYS = 60
QUICK_HARVEST_BONUS = 3
MEDIUM_HARVEST_DAYS = 90
MEDIUM_HARVEST_BONUS = 1
CONTAINER_HERB_BONUS = 3

HERB_HABIT = "herb"


# ── Antagonists ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class AntagonistRule:
    """Two groups of name fragments whose members must not be planted together.

    Any species whose name matches a fragment in ``group_a`` is antagonistic
    toward any species whose name matches a fragment in ``group_b``, and vice
    versa.
    """

    group_a: tuple[str, ...]
    group_b: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.group_a or not self.group_b:
            raise ValueError(
                f"AntagonistRule needs at least one fragment per group, "
                f"got group_a={self.group_a!r}, group_b={self.group_b!r}."
            )


ANTAGONIST_RULES: tuple[AntagonistRule, ...] = (
    AntagonistRule(("onion", "garlic", "shallot", "leek", "chive", "scallion"),
                   ("bean", "pea", "lentil", "chickpea", "lima")),
    AntagonistRule(("tomato",), ("potato",)),
    AntagonistRule(("tomato",), ("corn",)),
    AntagonistRule(("tomato",), ("fennel",)),
    AntagonistRule(("cabbage", "broccoli", "kale", "cauliflower", "brussels"),
                   ("tomato", "pepper", "strawberry")),
    AntagonistRule(("fennel",), ("bean", "pepper", "eggplant", "carrot")),
    AntagonistRule(("walnut", "black walnut"),
                   ("tomato", "pepper", "eggplant", "potato", "blueberry")),
    AntagonistRule(("dill", "coriander", "cilantro", "parsnip"), ("carrot",)),
    AntagonistRule(("sage",), ("cucumber",)),
    AntagonistRule(("mint",), ("parsley",)),
    AntagonistRule(("sunflower",), ("potato",)),
    AntagonistRule(("potato",), ("squash", "cucumber", "zucchini", "pumpkin")),
    AntagonistRule(("bean",), ("pepper",)),
    AntagonistRule(("corn",), ("celery",)),
    AntagonistRule(("onion",), ("asparagus",)),
    AntagonistRule(("pepper",), ("fennel",)),
    AntagonistRule(("pepper",), ("kohlrabi",)),
    AntagonistRule(("squash", "zucchini", "pumpkin"), ("potato",)),
    AntagonistRule(("cucumber",), ("potato",)),
    AntagonistRule(("cucumber", "squash", "zucchini"), ("melon",)),
    AntagonistRule(("eggplant",), ("fennel",)),
    AntagonistRule(("eggplant",), ("pepper",)),
    AntagonistRule(("celery",), ("parsnip", "parsley")),
)


# ── Growth habits ─────────────────────────────────────────────────────────────

# Tall/structural habit paired with a lower, space-sharing one.
COMPLEMENTARY_HABITS: tuple[tuple[str, str], ...] = (
    ("tree", "ground cover"),
    ("shrub", "ground cover"),
    ("vine", "herb"),
    ("upright", "spreading"),
    ("vine", "upright"),
)


# ── Sun ───────────────────────────────────────────────────────────────────────

SHADE_TOLERANT_NAMES: tuple[str, ...] = (
    "Lettuce", "Spinach", "Arugula", "Mint", "Parsley", "Cilantro",
    "Radish", "Mesclun", "Kale", "Chamomile", "Calendula", "Nasturtium",
)


# ── Goals ─────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class GoalProfile:
    """Ranking affinities for one ``GoalTag``.

    Attributes:
        preferred_names:  Names that earn ``PREFERRED_NAME_BONUS`` on a whole-word match.
        herb_habit_bonus: Added when the candidate's habit is ``herb``.
        aromatic_bonus:   Added when the candidate is ``Dye/Fiber/Aromatic``
                          or has the ``herb`` habit.
    """

    preferred_names: tuple[str, ...]
    herb_habit_bonus: int = 0
    aromatic_bonus: int = 0
    aromatic_categories: frozenset[str] = field(
        default_factory=lambda: frozenset({CropCategory.DYE_FIBER_AROMATIC.value})
    )


GOAL_PROFILES: dict[GoalTag, GoalProfile] = {
    GoalTag.SALADS: GoalProfile(
        preferred_names=(
            "Lettuce", "Tomato", "Cucumber", "Radish", "Spinach", "Arugula",
            "Mesclun", "Cherry Tomato", "Snap Pea", "Carrot",
        ),
    ),
    GoalTag.COOKING: GoalProfile(
        preferred_names=(
            "Tomato", "Pepper", "Onion", "Garlic", "Bean", "Squash",
            "Eggplant", "Potato", "Sweet Potato", "Okra",
        ),
    ),
    GoalTag.HERBS: GoalProfile(
        preferred_names=(
            "Basil", "Mint", "Rosemary", "Thyme", "Cilantro", "Parsley",
            "Chamomile", "Lavender", "Oregano", "Dill",
        ),
        herb_habit_bonus=10,
    ),
    GoalTag.FLOWERS: GoalProfile(
        preferred_names=(
            "Marigold", "Sunflower", "Zinnia", "Nasturtium", "Calendula",
            "Echinacea", "Cosmos", "Rose", "Lavender", "Bee Balm",
        ),
        aromatic_bonus=8,
    ),
}
