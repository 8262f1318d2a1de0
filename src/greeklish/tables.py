from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, List, Sequence, Tuple

# Tokens that contain only these characters are transliterated.
GREEK_CHARACTERS = "αβγδεζηθικλμνξοπρστυφχψω"


class RuleTableError(ValueError):
    """Raised when a rule table is incomplete or malformed."""


class RuleTable(Mapping):
    """
    Read-only mapping key -> tuple of replacement strings.

    Built once from a literal list of ``(key, [replacements])`` pairs.
    Iteration follows declaration order.
    """

    def __init__(self, name: str, pairs: Iterable[Tuple[str, Sequence[str]]]):
        self.name = name
        self._data = MappingProxyType({k: tuple(v) for k, v in pairs})

    def __getitem__(self, key: str) -> Tuple[str, ...]:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"RuleTable({self.name!r}, {len(self)} keys)"

    def updated(self, name: str, pairs: Iterable[Tuple[str, Sequence[str]]]) -> "RuleTable":
        """Copy of this table with some keys overridden."""
        merged = dict(self._data)
        merged.update({k: tuple(v) for k, v in pairs})
        return RuleTable(name, merged.items())


@dataclass(frozen=True)
class SuffixRule:
    suffix: str
    replacements: Tuple[str, ...]


# Each digraph is folded into one uppercase Greek letter, which the
# alphabet check never accepts.
DIGRAPHS = RuleTable(
    "digraphs",
    [
        ("αι", ["Α"]),
        ("ει", ["Ε"]),
        ("οι", ["Ο"]),
        ("ου", ["Υ"]),
        ("ευ", ["Φ"]),
        ("αυ", ["Β"]),
        ("μπ", ["Μ"]),
        ("γγ", ["Γ"]),
        ("γκ", ["Κ"]),
        ("ντ", ["Ν"]),
    ],
)

PLACEHOLDERS = {digraph: glyphs[0] for digraph, glyphs in DIGRAPHS.items()}

CONVERSIONS = RuleTable(
    "default",
    [
        # digraphs
        (PLACEHOLDERS["αι"], ["ai", "e"]),
        (PLACEHOLDERS["ει"], ["ei", "i"]),
        (PLACEHOLDERS["οι"], ["oi", "i"]),
        (PLACEHOLDERS["ου"], ["ou", "oy", "u"]),
        (PLACEHOLDERS["ευ"], ["eu", "ef", "ev", "ey"]),
        (PLACEHOLDERS["αυ"], ["au", "af", "av", "ay"]),
        (PLACEHOLDERS["μπ"], ["mp", "b"]),
        (PLACEHOLDERS["γγ"], ["gg", "g"]),
        (PLACEHOLDERS["γκ"], ["gk", "g"]),
        (PLACEHOLDERS["ντ"], ["nt", "d"]),
        # letters
        ("α", ["a"]),
        ("β", ["b", "v"]),
        ("γ", ["g"]),
        ("δ", ["d"]),
        ("ε", ["e"]),
        ("ζ", ["z"]),
        ("η", ["h", "i"]),
        ("θ", ["th"]),
        ("ι", ["i"]),
        ("κ", ["k"]),
        ("λ", ["l"]),
        ("μ", ["m"]),
        ("ν", ["n"]),
        ("ξ", ["ks", "x"]),
        ("ο", ["o"]),
        ("π", ["p"]),
        ("ρ", ["r"]),
        ("σ", ["s"]),
        ("τ", ["t"]),
        ("υ", ["y", "u", "i"]),
        ("φ", ["f", "ph"]),
        ("χ", ["x", "h", "ch"]),
        ("ψ", ["ps"]),
        ("ω", ["w", "o", "v"]),
    ],
)

# Keyboard-position renderings (ω on V, ψ on C, υ on Y) come first.
SPECIAL_CONVERSIONS = CONVERSIONS.updated(
    "special",
    [
        (PLACEHOLDERS["ου"], ["oy", "ou", "u"]),
        (PLACEHOLDERS["ευ"], ["ey", "eu", "ef", "ev"]),
        (PLACEHOLDERS["αυ"], ["ay", "au", "af", "av"]),
        ("η", ["h", "i"]),
        ("ι", ["i"]),
        ("υ", ["y", "u", "i"]),
        ("ψ", ["c", "ps"]),
        ("ω", ["v", "o", "w"]),
    ],
)

# First match wins: longer suffixes must stay above the shorter ones they end with.
SUFFIX_RULES: Tuple[SuffixRule, ...] = tuple(
    SuffixRule(suffix, tuple(replacements))
    for suffix, replacements in [
        ("ματοσ", ["μα", "ματων", "ματα"]),  # κουρεματοσ, ασυρματοσ
        ("ματα", ["μα", "ματων", "ματοσ"]),  # ενδυματα
        ("ματων", ["μα", "ματα", "ματοσ"]),  # ασυρματων, ενδυματων
        ("ασ", ["α", "ων", "εσ"]),  # πορτασ, χαρτοφυλακασ
        ("εια", ["ειο", "ειων", "ειου", "ειασ"]),  # γραφεια, ενεργεια
        ("ειο", ["εια", "ειων", "ειου"]),  # γραφειο
        ("ειου", ["εια", "ειου", "ειο", "ειων"]),  # γραφειου
        ("ειων", ["εια", "ειου", "ειο", "ειασ"]),  # ασφαλειων, γραφειων
        ("ιου", ["ι", "ια", "ιων", "ιο"]),  # πεδιου, κυνηγιου
        ("ια", ["ιου", "ι", "ιων", "ιασ", "ιο"]),  # πεδια, αρμονια
        ("ιων", ["ιου", "ια", "ι", "ιο"]),  # καλωδιων, κατοικιδιων
        ("οσ", ["η", "ουσ", "ου", "οι", "ων"]),  # κλιματισμοσ
        ("οι", ["οσ", "ου", "ων"]),  # μυλοι, οδηγοι, σταθμοι
        ("εισ", ["η", "ησ", "εων"]),  # συνδεσεισ, τηλεορασεισ
        ("εσ", ["η", "ασ", "ων", "ησ", "α"]),  # αλυσιδεσ
        ("ησ", ["ων", "εσ", "η", "εων"]),  # γυμναστικησ, εκτυπωσησ
        ("ων", ["οσ", "εσ", "α", "η", "ησ", "ου", "οι", "ο", "α"]),  # ινων, καρτων
        ("ου", ["ων", "α", "ο", "οσ"]),  # λαδιου, μοντελισμου
        ("ο", ["α", "ου", "εων", "ων"]),  # αυτοκινητο
        ("η", ["οσ", "ουσ", "εων", "εισ", "ησ", "ων"]),  # ψυξη, τηλεοραση
        ("α", ["ο", "ου", "ων", "ασ", "εσ"]),  # γιλεκα, ομπρελα
        ("ι", ["ιου", "ια", "ιων"]),  # γιαουρτι, γραναζι
    ]
)


def _check_replacements(table: Mapping, errors: List[str]) -> None:
    name = getattr(table, "name", "table")
    for key, values in table.items():
        if not values:
            errors.append(f"{name}: '{key}' has no replacements")
        elif any(not v for v in values):
            errors.append(f"{name}: '{key}' has an empty replacement")


def check_tables() -> None:
    """
    Verify that every character a validated word can fold into has a mapping
    in both conversion tables, and that no rule is empty.
    """
    errors: List[str] = []

    glyphs = [g for values in DIGRAPHS.values() for g in values]
    for glyph in glyphs:
        if len(glyph) != 1 or glyph in GREEK_CHARACTERS:
            errors.append(f"digraphs: placeholder '{glyph}' clashes with the alphabet")
    _check_replacements(DIGRAPHS, errors)

    required = set(GREEK_CHARACTERS) | set(glyphs)
    for table in (CONVERSIONS, SPECIAL_CONVERSIONS):
        _check_replacements(table, errors)
        missing = sorted(required - set(table))
        if missing:
            errors.append(f"{table.name}: no mapping for {', '.join(missing)}")

    for rule in SUFFIX_RULES:
        if not rule.suffix or not rule.replacements:
            errors.append(f"suffixes: rule '{rule.suffix}' is empty")
        elif any(not r for r in rule.replacements):
            errors.append(f"suffixes: rule '{rule.suffix}' has an empty replacement")

    if errors:
        raise RuleTableError("Rule table error: " + "; ".join(errors))


check_tables()
