import pytest
from WordleFilter.filter import Filter, MustBe, MustNotBe

WORDS = ["crane", "sleep", "apple", "level", "stare", "abbey"]


def test_empty_filter_matches_everything():
    flt = Filter()
    assert flt.is_empty()
    assert all(flt.matches(w) for w in WORDS)
    assert flt.summary() == []


@pytest.mark.parametrize("word,expected", [
    ("crane", True),
    ("stare", True),
    ("sleep", False),
    ("abbey", False),
])
def test_must_be(word, expected):
    flt = Filter()
    flt.set_must_be(4, "e")
    assert flt.matches(word) is expected
    assert not flt.is_empty()


def test_must_not_be():
    flt = Filter()
    flt.add_must_not_be(0, "s")
    flt.add_must_not_be(0, "a")
    assert not flt.matches("sleep")
    assert not flt.matches("apple")
    assert flt.matches("crane")


def test_must_not_be_sorted_and_deduplicated():
    flt = Filter()
    for c in "dad":
        flt.add_must_not_be(2, c)
    assert flt.positional[2] == MustNotBe(("a", "d"))


def test_must_be_replaces_must_not_be_and_back():
    flt = Filter()
    flt.add_must_not_be(1, "l")
    flt.set_must_be(1, "l")
    assert flt.positional[1] == MustBe("l")
    assert flt.matches("sleep")
    flt.add_must_not_be(1, "t")
    assert flt.positional[1] == MustNotBe(("t",))
    assert flt.matches("crane")


def test_must_occur_counts_duplicates():
    flt = Filter()
    flt.add_must_occur("e")
    flt.add_must_occur("e")
    assert flt.matches("sleep")
    assert flt.matches("level")
    assert not flt.matches("crane")
    flt.add_must_occur("e")
    assert not flt.matches("sleep")


def test_must_occur_unique():
    flt = Filter()
    flt.add_must_occur("p", unique=True)
    flt.add_must_occur("p", unique=True)
    assert flt.must_occur == ["p"]
    assert flt.matches("sleep")


def test_must_not_occur():
    flt = Filter()
    flt.add_must_not_occur("e")
    assert not flt.matches("crane")
    assert flt.matches("abbey") is False
    flt2 = Filter()
    flt2.add_must_not_occur("z")
    assert all(flt2.matches(w) for w in WORDS)


def test_must_be_exempt_from_must_not_occur():
    flt = Filter()
    flt.set_must_be(0, "a")
    flt.add_must_not_occur("a")
    assert flt.matches("abbey")
    # a second 'a' outside the pinned position is still excluded
    assert not flt.matches("aroma")


def test_wrong_number_of_positions():
    with pytest.raises(ValueError):
        Filter(5, [None] * 4)


def test_summary():
    flt = Filter()
    flt.set_must_be(0, "s")
    flt.add_must_not_be(2, "e")
    flt.add_must_not_be(2, "a")
    flt.add_must_occur("l")
    flt.add_must_not_occur("x")
    assert flt.summary() == [
        "- char 1 must be s",
        "- char 3 must not be a, e",
        "- word must contain: l",
        "- word must not contain: x",
    ]
