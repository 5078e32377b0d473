"""
Normalized, pre-tokenized name index for free-text catalog names.

Name-fragment matching for antagonist groups, goal preferred names and
companion lists goes through ``NameIndex``.  The shade list uses a plain
substring test on ``normalize_name`` output instead (see the selector).  Names
are normalized and tokenized once per distinct string and memoized, so a
pairwise pass over a catalog never re-parses the same name.

Matching rules
--------------
- Normalization: lower-case, every non-alphanumeric run becomes one space.
- A multi-character fragment matches when its tokens appear as a contiguous
  run of whole words in the name.  Each name word may carry a plural ``s``
  or ``es`` (``"Green Beans"`` matches ``"bean"``, ``"Cherry Tomatoes"``
  matches ``"tomato"``), but ``"pea"`` never matches ``"peach"`` or
  ``"pepper"``.
- A single-character fragment falls back to substring matching.
- Blank fragments never match.

Antagonist memberships
----------------------
``antagonist_memberships(name)`` precomputes, per name, the set of
``(rule_index, side)`` pairs the name belongs to in ``ANTAGONIST_RULES``.
``is_antagonist`` then reduces to a set lookup.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

from garden_recipes.recommendations.rules import ANTAGONIST_RULES

log = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_PLURAL_SUFFIXES = ("s", "es")

SIDE_A = "a"
SIDE_B = "b"


def normalize_name(name: str) -> str:
    """Lower-case ``name`` and collapse punctuation/whitespace runs to one space."""
    return _NON_ALNUM_RE.sub(" ", name.lower()).strip()


def _word_matches(word: str, fragment_word: str) -> bool:
    if word == fragment_word:
        return True
    return any(word == fragment_word + suffix for suffix in _PLURAL_SUFFIXES)


@dataclass(frozen=True)
class NameIndex:
    """Normalized text and word tokens for one name."""

    text: str
    tokens: tuple[str, ...]

    def contains_phrase(self, fragment: str) -> bool:
        """True if ``fragment`` occurs in this name as whole words."""
        frag = name_index(fragment)
        if not frag.tokens:
            return False
        if len(frag.text) == 1:
            return frag.text in self.text
        width = len(frag.tokens)
        for start in range(len(self.tokens) - width + 1):
            window = self.tokens[start:start + width]
            if all(_word_matches(w, f) for w, f in zip(window, frag.tokens)):
                return True
        return False

    def matches_any(self, fragments: Iterable[str]) -> bool:
        """True if any fragment occurs in this name as whole words."""
        return any(self.contains_phrase(f) for f in fragments)


@lru_cache(maxsize=8192)
def name_index(name: str) -> NameIndex:
    """Return the memoized ``NameIndex`` for ``name``."""
    text = normalize_name(name)
    return NameIndex(text=text, tokens=tuple(text.split()))


@lru_cache(maxsize=8192)
def antagonist_memberships(name: str) -> frozenset[tuple[int, str]]:
    """Return every ``(rule_index, side)`` of ``ANTAGONIST_RULES`` that ``name`` falls in."""
    idx = name_index(name)
    members: set[tuple[int, str]] = set()
    for i, rule in enumerate(ANTAGONIST_RULES):
        if idx.matches_any(rule.group_a):
            members.add((i, SIDE_A))
        if idx.matches_any(rule.group_b):
            members.add((i, SIDE_B))
    return frozenset(members)


def warm_name_index(names: Iterable[str]) -> int:
    """Build indexes and antagonist memberships for ``names`` up front.

    Returns:
        Number of distinct names indexed.
    """
    distinct = set(names)
    for name in distinct:
        antagonist_memberships(name)
    log.debug("Indexed %d distinct species names.", len(distinct))
    return len(distinct)
