"""
ASCII terminal formatters for CLI commands.

All formatters accept in-memory engine outputs and return plain multi-line
strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from typing import Sequence

from garden_recipes.models.recipe import SuccessionCandidate, SynergyNote
from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.instructions import get_plain_instructions
from garden_recipes.recommendations.selector import RecipeSelection
from garden_recipes.recommendations.synergy import get_synergy_notes
from garden_recipes.taxonomy.garden_taxonomy import (
    GoalTag,
    SpaceTier,
    SunTier,
    SynergyType,
)


def _cell(value: object, width: int) -> str:
    text = "-" if value is None or value == "" else str(value)
    return text[:width]


# ── Recipe ────────────────────────────────────────────────────────────────────


def format_recipe_table(
    selection:         RecipeSelection,
    space:             SpaceTier,
    sun:               SunTier,
    goal:              GoalTag,
    show_instructions: bool = False,
    show_skipped:      bool = False,
) -> str:
    """Format a recipe as an ASCII table with synergy notes per entry.

    Example::

        === Garden Recipe ===
          Space: small-bed   Sun: full   Goal: cooking
          Picked 2 of up to 5

          #  Species                Category            Habit     Spacing  Harvest
          ---------------------------------------------------------------------
          1  Onion                  Sustenance          bulb      4        90d
             + Companion of Carrot

    Args:
        selection:         Output of ``select_recipe()``.
        space:             Space tier (header + instructions).
        sun:               Sun tier (header).
        goal:              Goal (header).
        show_instructions: Append beginner planting steps under each entry.
        show_skipped:      Append the list of rejected candidates.

    Returns:
        Multi-line string.
    """
    space, sun, goal = SpaceTier(space), SunTier(sun), GoalTag(goal)
    recipe = selection.picked

    lines: list[str] = []
    lines.append("")
    lines.append("=== Garden Recipe ===")
    lines.append(f"  Space: {space.value}   Sun: {sun.value}   Goal: {goal.value}")
    lines.append(f"  Picked {len(recipe)} of up to {selection.max_size}")

    if not recipe:
        lines.append("")
        lines.append("  (no feasible plan for these constraints)")
    else:
        lines.append("")
        header = (
            f"  {'#':>2}  {'Species':<22}  {'Category':<18}  "
            f"{'Habit':<12}  {'Spacing':>7}  {'Harvest':>7}"
        )
        lines.append(header)
        lines.append("  " + "-" * (len(header) - 2))
        for rank, species in enumerate(recipe, start=1):
            harvest = f"{species.harvest_days}d" if species.harvest_days else None
            lines.append(
                f"  {rank:>2}  {_cell(species.display_name, 22):<22}  "
                f"{_cell(species.category, 18):<18}  "
                f"{_cell(species.growth_habit, 12):<12}  "
                f"{_cell(species.spacing_inches, 7):>7}  {_cell(harvest, 7):>7}"
            )
            for note in get_synergy_notes(species, recipe):
                lines.append(f"      {_note_marker(note)} {note.message}")
            if show_instructions:
                for step in get_plain_instructions(species, space):
                    lines.append(f"      - {step}")

    if show_skipped and selection.skipped:
        lines.append("")
        lines.append("  Skipped candidates:")
        for species, reason in selection.skipped:
            lines.append(f"    {species.display_name:<28} {reason.value}")

    return "\n".join(lines)


# ── Synergy ───────────────────────────────────────────────────────────────────


def _note_marker(note: SynergyNote) -> str:
    return "!" if note.type == SynergyType.ANTAGONIST else "+"


def format_synergy_notes(focal: SpeciesRecord, notes: Sequence[SynergyNote]) -> str:
    """Format synergy notes for one focal species, antagonists first."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Synergy: {focal.display_name} ===")
    if not notes:
        lines.append("  (no known companions or conflicts)")
        return "\n".join(lines)

    antagonists = [n for n in notes if n.type == SynergyType.ANTAGONIST]
    companions  = [n for n in notes if n.type == SynergyType.COMPANION]
    for label, group in (("Conflicts", antagonists), ("Companions", companions)):
        if not group:
            continue
        lines.append(f"  {label}:")
        for note in group:
            lines.append(f"    {_note_marker(note)} {note.message}")
    return "\n".join(lines)


# ── Succession ────────────────────────────────────────────────────────────────


def format_succession_table(
    finished:   SpeciesRecord,
    candidates: Sequence[SuccessionCandidate],
) -> str:
    """Format follow-up suggestions after ``finished`` is harvested."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Succession after {finished.display_name} ===")
    if not candidates:
        lines.append("  (no plantable follow-up crops found)")
        return "\n".join(lines)

    header = f"  {'#':>2}  {'Species':<22}  {'Score':>5}  Reasons"
    lines.append(header)
    lines.append("  " + "-" * 60)
    for rank, cand in enumerate(candidates, start=1):
        reasons = "; ".join(cand.reasons) or "-"
        lines.append(
            f"  {rank:>2}  {_cell(cand.species.display_name, 22):<22}  "
            f"{cand.score:>5}  {reasons}"
        )
    return "\n".join(lines)
