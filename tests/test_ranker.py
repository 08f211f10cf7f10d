from WordleFilter.filter import Filter
from WordleFilter.ranker import (COMMON, NONE, RARE, SINGLE, Match,
                                 format_matches, rank_matches)


def test_common_before_rare():
    words = [("abcde", True), ("fghij", False), ("klmno", True)]
    assert rank_matches(words, Filter(), 10) == [
        Match("abcde", True), Match("klmno", True), Match("fghij", False)]


def test_only_matches():
    words = [("crane", True), ("sleep", False), ("apple", True)]
    flt = Filter()
    flt.add_must_not_occur("a")
    assert rank_matches(words, flt, 10) == [Match("sleep", False)]


def test_truncated_to_max_words():
    words = [(f"wor{c}{c}", c in "ace") for c in "abcdef"]
    ranked = rank_matches(words, Filter(), 4)
    assert [m.word for m in ranked] == ["woraa", "worcc", "woree", "worbb"]


def test_stops_when_common_full():
    words = [("aaaaa", False), ("bbbbb", True), ("ccccc", True),
             ("ddddd", False)]
    ranked = rank_matches(words, Filter(), 2)
    assert ranked == [Match("bbbbb", True), Match("ccccc", True)]


def test_format_no_matches():
    assert format_matches([]) == [(NONE, "No matches")]


def test_format_single_match():
    lines = format_matches([Match("crane", False)])
    assert lines[-1] == (SINGLE, "- crane")


def test_format_multiple_matches():
    lines = format_matches([Match("crane", True), Match("roate", False)])
    assert lines[1:] == [(COMMON, "- crane"), (RARE, "- roate")]
