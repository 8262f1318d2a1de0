import pytest

from greeklish.expander import branch, expand
from greeklish.preprocess import fold_digraphs
from greeklish.tables import CONVERSIONS, SPECIAL_CONVERSIONS

FULL = [
    "autokinhto", "aftokinhto", "avtokinhto", "aytokinhto",
    "autokinito", "aftokinito", "avtokinito", "aytokinito",
]


def test_branch_order():
    assert branch(["a", "b"], ["x", "y", "z"], 10) == ["ax", "bx", "ay", "az", "by", "bz"]


def test_branch_stops_copying_at_budget():
    assert branch(["a", "b"], ["x", "y", "z"], 3) == ["ax", "bx", "ay"]
    assert branch(["a", "b"], ["x", "y", "z"], 2) == ["ax", "bx"]


def test_branch_single_candidate_never_copies():
    assert branch(["a", "b"], ["x"], 100) == ["ax", "bx"]


def test_full_expansion_order():
    assert expand(fold_digraphs("αυτοκινητο"), CONVERSIONS, 10) == FULL


def test_capped_expansion_is_a_prefix():
    for k in range(1, len(FULL) + 1):
        assert expand(fold_digraphs("αυτοκινητο"), CONVERSIONS, k) == FULL[:k]


def test_zero_budget_gives_primary_spelling():
    assert expand(fold_digraphs("αυτοκινητο"), CONVERSIONS, 0) == ["autokinhto"]


@pytest.mark.parametrize("word", ["αυτοκινητο", "ξεσκεπαστοσ", "ευχαριστω", "ψυχη", "βιβλιο"])
@pytest.mark.parametrize("k", [1, 2, 3, 7, 20])
def test_budget_respected(word, k):
    out = expand(fold_digraphs(word), CONVERSIONS, k)
    assert 1 <= len(out) <= k
    assert out[0] == expand(fold_digraphs(word), CONVERSIONS, 1)[0]


def test_digraph_alternatives():
    assert expand(fold_digraphs("ομπρελα"), CONVERSIONS, 10) == ["omprela", "obrela"]
    assert expand(fold_digraphs("ντοματα"), CONVERSIONS, 10) == ["ntomata", "domata"]


def test_special_mapping_keyboard_renderings():
    out = expand("ωιψηυ", SPECIAL_CONVERSIONS, 20)
    assert len(out) == 20
    expected = [
        "oichu", "wichi", "wichu", "vipsiy",
        "oipsiy", "wipsiy", "viciy", "oiciy",
        "wiciy", "vipshy", "oipshy", "wipshy",
        "vichy", "oichy", "wichy",
    ]
    for w in expected:
        assert w in out
    assert out[0] == "vichy"


def test_default_mapping_has_no_keyboard_renderings():
    out = expand("ωιψηυ", CONVERSIONS, 20)
    assert out[0] == "wipshy"
    assert not any("c" in s for s in out)
