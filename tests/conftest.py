"""
Shared pytest fixtures for the garden recipes test suite.

Provides:
  - ``starter_catalog``: the committed ``config/catalog/starter_catalog.json``
    loaded through the real loader.
  - ``onion_bean_pool``: the five-species cooking pool with declared
    antagonists (Onion vs Bean).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from garden_recipes.models.species import SpeciesRecord

PROJECT_ROOT = Path(__file__).resolve().parent.parent
STARTER_CATALOG_PATH = PROJECT_ROOT / "config" / "catalog" / "starter_catalog.json"


def species(display_name: str, **kwargs) -> SpeciesRecord:
    """Build a ``SpeciesRecord`` with a Sustenance default category."""
    kwargs.setdefault("category", "Sustenance")
    return SpeciesRecord(display_name=display_name, **kwargs)


@pytest.fixture
def starter_catalog() -> list[SpeciesRecord]:
    """The committed starter catalog, validated by ``load_catalog``."""
    from garden_recipes.catalog.loader import load_catalog

    return load_catalog(STARTER_CATALOG_PATH)


@pytest.fixture
def onion_bean_pool() -> list[SpeciesRecord]:
    """Onion, Bean, Pepper, Tomato, Basil: all Spring, no harvest data."""
    return [
        species("Onion", taxonomic_name="Allium cepa", planting_seasons=["Spring"]),
        species(
            "Bean",
            taxonomic_name="Phaseolus vulgaris",
            category="Nitrogen/Bio-Mass",
            planting_seasons=["Spring"],
        ),
        species("Pepper", taxonomic_name="Capsicum annuum", planting_seasons=["Spring"]),
        species(
            "Tomato",
            taxonomic_name="Solanum lycopersicum",
            growth_habit="vine",
            planting_seasons=["Spring"],
            explicit_companions=["Basil", "Carrot", "Marigold"],
        ),
        species(
            "Basil",
            taxonomic_name="Ocimum basilicum",
            category="Dye/Fiber/Aromatic",
            growth_habit="herb",
            planting_seasons=["Spring"],
        ),
    ]
