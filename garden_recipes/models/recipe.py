"""
Explanatory output models derived from a recipe.

``SynergyNote`` is a transient, user-facing explanation of why two species
do or do not belong together.  ``SuccessionCandidate`` couples a suggested
follow-up species with its score and the reasons behind it.

Neither is persisted; both are built on demand from catalog records.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.taxonomy.garden_taxonomy import SynergyType


class SynergyNote(BaseModel):
    """One companion or antagonist note about a related species.

    Attributes:
        type: ``SynergyType.COMPANION`` or ``SynergyType.ANTAGONIST``.
        related_species_name: Display name of the other species.
        message: Short sentence for the UI, e.g. ``"Avoid planting near Potato"``.
    """

    model_config = ConfigDict(frozen=True)

    type: SynergyType
    related_species_name: str
    message: str


class SuccessionCandidate(BaseModel):
    """A follow-up species suggested after a harvest.

    Attributes:
        species: The suggested catalog record.
        score: Signed succession score (higher is better).
        reasons: Short human-readable reason tokens, in scoring order.
    """

    model_config = ConfigDict(frozen=True)

    species: SpeciesRecord
    score: int
    reasons: tuple[str, ...] = ()
