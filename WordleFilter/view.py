"""Lay out what the user sees after each keystroke."""
from .input_mode import describe
from .ranker import format_matches, rank_matches

MAX_WORDS = 10

# Suggested when no filter has been defined
START_WORDS = ["slate", "carle", "stare", "roate"]

HELP = ("Press + for 'character must occur', - for 'must not occur',"
        " 1-5 for 'must be in position', esc for any position")

# Line style for invalid input messages
INVALID = "invalid"


def build_lines(words, flt, mode, max_words=MAX_WORDS, message=None):
    """Return list of (style, text) lines for the current state

    style is None for plain text, otherwise one of the ranker styles
    or INVALID."""
    if flt.is_empty():
        lines = [(None, "No filter defined yet. Good starting words:")]
        lines += [(None, f"- {w}") for w in START_WORDS]
    else:
        lines = format_matches(rank_matches(words, flt, max_words))
    summary = flt.summary()
    if summary:
        lines.append((None, "Filter:"))
        lines += [(None, s) for s in summary]
    lines.append((None, HELP))
    lines.append((None, describe(mode)))
    if message:
        lines.append((INVALID, message))
    return lines
