# src/greeklish/pipeline.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from .config import Settings
from .expander import expand
from .preprocess import fold_digraphs, is_transliterable
from .stemmer import variants

logger = logging.getLogger(__name__)

# Type of the tokens generated next to a Greek token.
TOKEN_TYPE = "greeklish_word"
WORD_TYPE = "word"


@dataclass
class GreeklishToken:
    term: str
    position_increment: int = 1
    type: str = WORD_TYPE


def candidate_words(word: str, settings: Settings) -> List[str]:
    if settings.generate_variants:
        return variants(word)
    return [word]


def generate(candidates: Iterable[str], settings: Settings) -> List[str]:
    """
    Greeklish spellings for each candidate word, concatenated in order.

    The budget applies per candidate, so with morphological variants on the
    total can exceed ``settings.max_expansions``. Nothing is deduplicated.
    """
    table = settings.table
    out: List[str] = []
    for word in candidates:
        out.extend(expand(fold_digraphs(word), table, settings.max_expansions))
    return out


def transliterate(word: str, settings: Optional[Settings] = None) -> Optional[List[str]]:
    """
    Returns None when ``word`` is not a lowercase Greek word; otherwise the
    ordered, non-empty list of spellings for it (and its siblings when
    variant generation is on).
    """
    if not is_transliterable(word):
        return None
    settings = settings or Settings()
    return generate(candidate_words(word, settings), settings)


def expand_terms(words: Iterable[str], settings: Optional[Settings] = None) -> Dict[str, Optional[List[str]]]:
    settings = settings or Settings()
    logger.debug(
        "Max expansions: [%d] Generate Greek variants [%s] Special mapping [%s]",
        settings.max_expansions,
        settings.generate_variants,
        settings.use_special_mapping,
    )
    out: Dict[str, Optional[List[str]]] = {}
    for w in words:
        if w not in out:
            out[w] = transliterate(w, settings)
    return out


def greeklish_filter(tokens: Iterable[str], settings: Optional[Settings] = None) -> Iterator[GreeklishToken]:
    """
    Token-stream step: every input token passes through unchanged; a Greek
    token is followed by its spellings on the same position (increment 0),
    typed ``greeklish_word`` and emitted last-generated first.
    """
    settings = settings or Settings()
    for term in tokens:
        yield GreeklishToken(term)
        spellings = transliterate(term, settings)
        if not spellings:
            continue
        for spelling in reversed(spellings):
            yield GreeklishToken(spelling, position_increment=0, type=TOKEN_TYPE)
