from __future__ import annotations

import logging
from typing import List, Mapping, Sequence

logger = logging.getLogger(__name__)


def branch(partials: Sequence[str], candidates: Sequence[str], max_expansions: int) -> List[str]:
    """
    One character step of the expansion.

    Every existing partial spelling is extended with the primary (first)
    candidate. For the other candidates, copies of the partials are added
    after them, one partial at a time, until the total reaches
    ``max_expansions``. Partials are never dropped, so the primary path
    always runs to the end of the word.
    """
    primary, alternates = candidates[0], candidates[1:]
    grown: List[str] = []
    for partial in partials:
        for alt in alternates:
            if len(partials) + len(grown) >= max_expansions:
                break
            grown.append(partial + alt)
    return [partial + primary for partial in partials] + grown


def expand(folded_word: str, table: Mapping[str, Sequence[str]], max_expansions: int) -> List[str]:
    """Latin spellings of a digraph-folded word, at most ``max_expansions`` of them."""
    partials = [""]
    capped = False
    for ch in folded_word:
        candidates = table[ch]
        wanted = len(partials) * len(candidates)
        partials = branch(partials, candidates, max_expansions)
        if not capped and len(partials) < wanted:
            capped = True
            logger.debug("Skipping expansions past %d for token [%s]", max_expansions, folded_word)
    return partials
