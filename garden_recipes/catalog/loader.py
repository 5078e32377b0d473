"""
Catalog loader: JSON export -> validated ``SpeciesRecord`` list.

The catalog store itself is external.  This module is the adapter that reads
a JSON export of it (``config/catalog/starter_catalog.json`` or any file with
the same shape) and hands the engine frozen, validated records.

File format
-----------
A JSON array of objects.  Each object uses either the ``SpeciesRecord``
field names or the original export columns (``common_name``/``name``,
``scientific_name``, ``planting_season``, ``companion_crops``, ``id``).
Unknown keys are ignored.  Objects whose keys all start with ``_comment``
are skipped.

Validation rules
----------------
- The top level must be an array.
- Every entry must validate as a ``SpeciesRecord``.
- Duplicate non-null ``species_id`` values are rejected.

All failures raise ``CatalogError`` (a ``ValueError``); a missing file raises
``FileNotFoundError``.

Usage
-----
    from garden_recipes.catalog.loader import load_catalog

    catalog = load_catalog(Path("config/catalog/starter_catalog.json"))
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from garden_recipes.models.species import SpeciesRecord
from garden_recipes.recommendations.name_index import warm_name_index

log = logging.getLogger(__name__)

_MAX_REPORTED_ERRORS = 5


class CatalogError(ValueError):
    """Raised when a catalog file cannot be turned into valid records."""


def _is_comment_entry(rec: Any) -> bool:
    return isinstance(rec, dict) and bool(rec) and all(
        str(k).startswith("_comment") for k in rec
    )


def parse_catalog(raw: Any) -> list[SpeciesRecord]:
    """Validate already-decoded catalog JSON.

    Args:
        raw: Decoded JSON (expected: list of dicts).

    Returns:
        Records in file order, comment entries removed.

    Raises:
        CatalogError: On a non-array top level, invalid entries, or
            duplicate ``species_id`` values.
    """
    if not isinstance(raw, list):
        raise CatalogError("Catalog JSON must contain an array of species objects.")

    records: list[SpeciesRecord] = []
    errors: list[tuple[int, str]] = []
    for i, rec in enumerate(raw):
        if _is_comment_entry(rec):
            continue
        if not isinstance(rec, dict):
            errors.append((i, f"expected an object, got {type(rec).__name__}"))
            continue
        try:
            records.append(SpeciesRecord(**rec))
        except ValidationError as exc:
            errors.append((i, str(exc)))

    if errors:
        lines = [f"{len(errors)} catalog entr{'y' if len(errors) == 1 else 'ies'} failed validation:"]
        for idx, msg in errors[:_MAX_REPORTED_ERRORS]:
            lines.append(f"  Entry #{idx}: {msg}")
        if len(errors) > _MAX_REPORTED_ERRORS:
            lines.append(f"  ... and {len(errors) - _MAX_REPORTED_ERRORS} more.")
        raise CatalogError("\n".join(lines))

    seen_ids: set[str] = set()
    for rec in records:
        if rec.species_id is None:
            continue
        if rec.species_id in seen_ids:
            raise CatalogError(f"Duplicate species_id '{rec.species_id}' in catalog.")
        seen_ids.add(rec.species_id)

    return records


def load_catalog(path: Path) -> list[SpeciesRecord]:
    """Load, validate and index a catalog JSON file.

    Name indexes for every display name are built here, once per load, so
    the engine's pairwise passes only do lookups.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        CatalogError: If the file is not valid JSON or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    log.info("Loading catalog from %s", path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog JSON parse error in {path}: {exc}") from exc

    records = parse_catalog(raw)
    indexed = warm_name_index(r.display_name for r in records)
    log.info("Loaded %d species (%d distinct names indexed).", len(records), indexed)
    return records


def find_species(catalog: list[SpeciesRecord], name: str) -> SpeciesRecord | None:
    """Look up a record by id, display name or taxonomic name (case-insensitive).

    Returns the first match in catalog order, or ``None``.
    """
    needle = name.strip().lower()
    if not needle:
        return None
    for rec in catalog:
        candidates = (rec.species_id, rec.display_name, rec.taxonomic_name)
        if any(c is not None and c.strip().lower() == needle for c in candidates):
            return rec
    return None
