"""
Synergy notes: user-facing explanations of companion and antagonist links.

Presentation support only.  Nothing here feeds back into ``pick_recipe``.
"""

from __future__ import annotations

from typing import Sequence

from garden_recipes.models.recipe import SynergyNote
from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.classifier import (
    is_antagonist,
    is_explicit_companion,
)
from garden_recipes.taxonomy.garden_taxonomy import SynergyType


def get_synergy_notes(
    focal:  SpeciesRecord,
    others: Sequence[SpeciesRecord],
) -> list[SynergyNote]:
    """Return at most one note per other species, in ``others`` order.

    The focal species itself (same identity or dedup key) is skipped.  An
    antagonist link wins over a companion link for the same other species;
    neutral pairs produce no note.
    """
    notes: list[SynergyNote] = []
    for other in others:
        if other is focal or _same_species(focal, other):
            continue
        name = other.display_name
        if is_antagonist(focal, other):
            notes.append(
                SynergyNote(
                    type=SynergyType.ANTAGONIST,
                    related_species_name=name,
                    message=f"Avoid planting near {name}",
                )
            )
        elif is_explicit_companion(focal, other):
            notes.append(
                SynergyNote(
                    type=SynergyType.COMPANION,
                    related_species_name=name,
                    message=f"Companion of {name}",
                )
            )
    return notes


def _same_species(a: SpeciesRecord, b: SpeciesRecord) -> bool:
    return a.identity == b.identity or a.dedup_key == b.dedup_key
