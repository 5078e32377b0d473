"""
Tests for garden_recipes/recommendations/instructions.py.

What we test
------------
- Container tiers: pot size line from min_container_gal, drainage fallback.
- Bed tiers: spacing line; omitted when spacing is unknown.
- Seasons listed in calendar order.
- Propagation wording per method.
- Harvest wording by duration band.
- Watering line always last.
"""

from __future__ import annotations

import pytest

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.instructions import get_plain_instructions
from garden_recipes.taxonomy.garden_taxonomy import SpaceTier


def _sp(**kwargs) -> SpeciesRecord:
    return SpeciesRecord(display_name="Plant", **kwargs)


class TestContainerLine:
    @pytest.mark.parametrize(
        "gal, expected",
        [
            (1, "Use a small pot (1+ gallon)"),
            (2.5, "Use a medium pot (2.5+ gallon)"),
            (5, "Use a medium pot (5+ gallon)"),
            (10, "Use a large pot (10+ gallon)"),
            (None, "Use a pot with drainage holes"),
        ],
    )
    def test_pot_size(self, gal, expected):
        assert get_plain_instructions(_sp(min_container_gal=gal), SpaceTier.PATIO)[0] == expected

    def test_container_ignores_spacing(self):
        lines = get_plain_instructions(_sp(spacing_inches="12"), SpaceTier.WINDOWSILL)
        assert not any(line.startswith("Space plants") for line in lines)


class TestBedLines:
    def test_spacing_line(self):
        lines = get_plain_instructions(_sp(spacing_inches="18-24"), SpaceTier.SMALL_BED)
        assert lines[0] == 'Space plants 18-24" apart'

    def test_no_spacing_no_line(self):
        lines = get_plain_instructions(_sp(planting_seasons=["Spring"]), SpaceTier.BIG_YARD)
        assert lines[0] == "Plant in Spring"

    def test_accepts_string_tier(self):
        assert get_plain_instructions(_sp(), "patio")[0] == "Use a pot with drainage holes"


class TestSeasonAndPropagation:
    def test_seasons_in_calendar_order(self):
        lines = get_plain_instructions(_sp(planting_seasons=["Fall", "Spring"]), SpaceTier.SMALL_BED)
        assert "Plant in Spring or Fall" in lines

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("direct_sow", "Sow seeds directly in soil"),
            ("transplant", "Start indoors or buy seedlings"),
            ("both", "Sow seeds or buy seedlings"),
            (None, "Sow seeds or buy seedlings"),
        ],
    )
    def test_propagation(self, method, expected):
        assert expected in get_plain_instructions(_sp(propagation_method=method), SpaceTier.SMALL_BED)


class TestHarvestAndWatering:
    @pytest.mark.parametrize(
        "days, expected",
        [
            (28, "Ready to pick in about 28 days, one of the fastest!"),
            (45, "Ready to pick in about 45 days"),
            (70, "Harvest in about 2 months"),
            (120, "Harvest in about 4 months, worth the wait!"),
        ],
    )
    def test_harvest_wording(self, days, expected):
        assert expected in get_plain_instructions(_sp(harvest_days=days), SpaceTier.SMALL_BED)

    def test_no_harvest_data_no_line(self):
        lines = get_plain_instructions(_sp(), SpaceTier.SMALL_BED)
        assert not any("Harvest" in line or "Ready to pick" in line for line in lines)

    def test_watering_always_last(self):
        for space in SpaceTier:
            assert get_plain_instructions(_sp(), space)[-1] == "Water when the top inch of soil feels dry"
