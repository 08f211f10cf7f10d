"""Select the words matching a filter, common words first."""
from dataclasses import dataclass

# Line styles
NONE = "none"
SINGLE = "single"
COMMON = "common"
RARE = "rare"


@dataclass(frozen=True)
class Match:
    word: str
    common: bool


def rank_matches(words, flt, max_words):
    """Return up to max_words Matches for flt

    words is a sequence of (word, common) pairs. Order within common and
    rare words is kept. Scanning stops once max_words common words are
    found, so rare matches past that point are never looked at."""
    common = []
    rare = []
    for word, is_common in words:
        if not flt.matches(word):
            continue
        if is_common:
            common.append(Match(word, True))
        else:
            rare.append(Match(word, False))
        if len(common) >= max_words:
            break
    return (common + rare)[:max_words]


def format_matches(matches):
    """Return list of (style, text) lines listing matches"""
    if not matches:
        return [(NONE, "No matches")]
    lines = [(None, "Matches:")]
    for m in matches:
        if len(matches) == 1:
            style = SINGLE
        else:
            style = COMMON if m.common else RARE
        lines.append((style, f"- {m.word}"))
    return lines
