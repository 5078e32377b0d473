"""
Compatibility classifier: antagonist and explicit-companion checks.

is_antagonist(a, b)
    True when the two display names fall on opposite sides of any rule in
    ``ANTAGONIST_RULES``.  Symmetric by construction: memberships are
    compared side-against-opposite-side, so argument order never matters.
    Names no rule recognises are never antagonistic.

is_explicit_companion(a, b)
    True when either record's ``explicit_companions`` list names the other.
    A companion entry matches a species when:
      - the entry occurs as whole words in the species' display name
        (``"Tomato"`` matches ``"Cherry Tomato"``), or
      - the display name occurs as whole words in the entry
        (``"Basil"`` matches ``"Sweet Basil (Genovese)"``), or
      - the entry equals the species' taxonomic name, case-insensitively.
"""

from __future__ import annotations

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.name_index import (
    SIDE_A,
    SIDE_B,
    antagonist_memberships,
    name_index,
    normalize_name,
)

_OPPOSITE_SIDE = {SIDE_A: SIDE_B, SIDE_B: SIDE_A}


def is_antagonist(a: SpeciesRecord, b: SpeciesRecord) -> bool:
    """Return True if ``a`` and ``b`` must never share a recipe."""
    a_members = antagonist_memberships(a.display_name)
    if not a_members:
        return False
    b_members = antagonist_memberships(b.display_name)
    return any(
        (rule_idx, _OPPOSITE_SIDE[side]) in b_members
        for rule_idx, side in a_members
    )


def is_explicit_companion(a: SpeciesRecord, b: SpeciesRecord) -> bool:
    """Return True if either record declares the other as a companion."""
    return _lists_companion(a, b) or _lists_companion(b, a)


def _lists_companion(owner: SpeciesRecord, other: SpeciesRecord) -> bool:
    """True if ``owner.explicit_companions`` names ``other``."""
    if not owner.explicit_companions:
        return False
    other_idx = name_index(other.display_name)
    other_taxon = normalize_name(other.taxonomic_name) if other.taxonomic_name else None
    for entry in owner.explicit_companions:
        entry_idx = name_index(entry)
        if not entry_idx.tokens:
            continue
        if other_idx.contains_phrase(entry):
            return True
        if entry_idx.contains_phrase(other.display_name):
            return True
        if other_taxon and entry_idx.text == other_taxon:
            return True
    return False
