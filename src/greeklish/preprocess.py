import unicodedata

import regex as re
from rapidfuzz.utils import default_process

from .tables import DIGRAPHS, GREEK_CHARACTERS, PLACEHOLDERS

_GREEK_WORD = re.compile(rf"[{GREEK_CHARACTERS}]+")
_DIGRAPH = re.compile("|".join(re.escape(d) for d in DIGRAPHS))


def is_transliterable(word: str) -> bool:
    """True iff ``word`` is made only of the 24 lowercase Greek letters."""
    return bool(word) and _GREEK_WORD.fullmatch(word) is not None


def fold_digraphs(word: str) -> str:
    # single left-to-right pass, so "γγκ" folds to "Γκ" and never re-splits
    return _DIGRAPH.sub(lambda m: PLACEHOLDERS[m.group(0)], word)


def normalize_token(s: str) -> str:
    """
    Lowercase, strip punctuation, drop tonos/dialytika and turn final sigma
    into σ, so raw text tokens can reach the alphabet check.
    """
    s = default_process(s or "")
    s = unicodedata.normalize("NFD", s)
    s = re.sub(r"\p{Mn}+", "", s)
    s = unicodedata.normalize("NFC", s)
    return s.replace("ς", "σ")
