from __future__ import annotations

from typing import List, Optional, Sequence

from .tables import SUFFIX_RULES, SuffixRule


def find_rule(word: str, rules: Sequence[SuffixRule] = SUFFIX_RULES) -> Optional[SuffixRule]:
    # rule order is the priority, not suffix length
    for rule in rules:
        if word.endswith(rule.suffix):
            return rule
    return None


def variants(word: str, rules: Sequence[SuffixRule] = SUFFIX_RULES) -> List[str]:
    """
    Singular/plural/case siblings of ``word``.

    The word itself always comes first, followed by one word per replacement
    of the first matching suffix rule, in declaration order. Duplicates are
    kept. A word no rule matches comes back alone.
    """
    out = [word]
    rule = find_rule(word, rules)
    if rule is None:
        return out
    stem = word[: len(word) - len(rule.suffix)]
    out.extend(stem + replacement for replacement in rule.replacements)
    return out


class ReverseStemmer:
    """Stateless wrapper around :func:`variants` for hosts that inject collaborators."""

    def __init__(self, rules: Sequence[SuffixRule] = SUFFIX_RULES):
        self.rules = tuple(rules)

    def __call__(self, word: str) -> List[str]:
        return variants(word, self.rules)
