import pytest

from greeklish import tables
from greeklish.tables import (
    CONVERSIONS,
    DIGRAPHS,
    GREEK_CHARACTERS,
    PLACEHOLDERS,
    SPECIAL_CONVERSIONS,
    SUFFIX_RULES,
    RuleTable,
    RuleTableError,
    check_tables,
)


def test_alphabet():
    assert len(GREEK_CHARACTERS) == 24
    assert "ς" not in GREEK_CHARACTERS


def test_tables_are_complete():
    check_tables()
    glyphs = {g[0] for g in DIGRAPHS.values()}
    assert len(glyphs) == len(DIGRAPHS) == 10
    for table in (CONVERSIONS, SPECIAL_CONVERSIONS):
        assert set(GREEK_CHARACTERS) | glyphs <= set(table)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CONVERSIONS["α"] = ("x",)
    assert isinstance(CONVERSIONS["β"], tuple)


def test_special_table_only_overrides():
    assert SPECIAL_CONVERSIONS["ψ"] == ("c", "ps")
    assert SPECIAL_CONVERSIONS["β"] == CONVERSIONS["β"]
    assert CONVERSIONS["ψ"] == ("ps",)


def test_special_table_puts_y_first_in_upsilon_digraphs():
    assert SPECIAL_CONVERSIONS[PLACEHOLDERS["ου"]] == ("oy", "ou", "u")
    assert SPECIAL_CONVERSIONS[PLACEHOLDERS["ευ"]] == ("ey", "eu", "ef", "ev")
    assert SPECIAL_CONVERSIONS[PLACEHOLDERS["αυ"]] == ("ay", "au", "af", "av")
    assert CONVERSIONS[PLACEHOLDERS["αυ"]] == ("au", "af", "av", "ay")


def test_longer_suffixes_come_first():
    order = [r.suffix for r in SUFFIX_RULES]
    assert order.index("ματοσ") < order.index("οσ")
    assert order.index("ειου") < order.index("ου")
    assert order[-3:] == ["η", "α", "ι"]


def test_incomplete_table_is_rejected(monkeypatch):
    broken = RuleTable("default", [(k, v) for k, v in CONVERSIONS.items() if k != "ω"])
    monkeypatch.setattr(tables, "CONVERSIONS", broken)
    with pytest.raises(RuleTableError, match="no mapping for ω"):
        check_tables()


def test_empty_replacement_is_rejected(monkeypatch):
    monkeypatch.setattr(tables, "SPECIAL_CONVERSIONS", CONVERSIONS.updated("special", [("η", [])]))
    with pytest.raises(RuleTableError, match="'η' has no replacements"):
        check_tables()
