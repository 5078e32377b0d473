"""
Tests for garden_recipes/recommendations/synergy.py.

What we test
------------
- One note per related species, in ``others`` order; neutral pairs are silent.
- Antagonist notes win over companion notes for the same pair.
- The focal species (same object, identity or dedup key) is skipped.
- Message wording for both note types.
- Empty ``others`` -> [].
"""

from __future__ import annotations

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.synergy import get_synergy_notes
from garden_recipes.taxonomy.garden_taxonomy import SynergyType


def _sp(name: str, **kwargs) -> SpeciesRecord:
    return SpeciesRecord(display_name=name, **kwargs)


TOMATO = _sp("Tomato", taxonomic_name="Solanum lycopersicum",
             explicit_companions=["Basil", "Carrot", "Marigold"])


class TestGetSynergyNotes:
    def test_mixed_recipe(self):
        others = [TOMATO, _sp("Basil"), _sp("Potato"), _sp("Lettuce")]
        notes = get_synergy_notes(TOMATO, others)
        assert [(n.type, n.related_species_name) for n in notes] == [
            (SynergyType.COMPANION, "Basil"),
            (SynergyType.ANTAGONIST, "Potato"),
        ]

    def test_messages(self):
        notes = get_synergy_notes(TOMATO, [_sp("Basil"), _sp("Potato")])
        assert notes[0].message == "Companion of Basil"
        assert notes[1].message == "Avoid planting near Potato"

    def test_antagonist_wins_over_companion(self):
        tomato = _sp("Tomato", explicit_companions=["Potato"])
        notes = get_synergy_notes(tomato, [_sp("Potato")])
        assert len(notes) == 1
        assert notes[0].type is SynergyType.ANTAGONIST

    def test_same_species_record_skipped(self):
        roma = _sp("Roma", taxonomic_name="solanum lycopersicum ", explicit_companions=["Tomato"])
        assert get_synergy_notes(TOMATO, [roma]) == []

    def test_companion_listed_by_other_side(self):
        marigold = _sp("French Marigold", explicit_companions=["Squash"])
        squash = _sp("Squash")
        notes = get_synergy_notes(squash, [marigold])
        assert notes[0].related_species_name == "French Marigold"

    def test_empty_others(self):
        assert get_synergy_notes(TOMATO, []) == []
