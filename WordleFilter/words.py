"""Read, write and generate the word list.

The word list has one word per line, prefixed by '+' for a common word
or any other character (normally '-') for a rare one:

    +slate
    -roate
"""
import itertools
import logging
import string

from wordfreq import iter_wordlist, zipf_frequency

from .errors import VocabularyError
from .filter import WORD_LENGTH

log = logging.getLogger(__name__)


def load_words(path, word_length=WORD_LENGTH):
    """Return list of (word, common) pairs read from path

    Lines which are not exactly word_length + 1 characters long are
    skipped."""
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise VocabularyError(f"Cannot read word list {path}: {e}") from e
    words = [(line[1:], line.startswith("+")) for line in lines
             if len(line) == word_length + 1]
    log.debug(f"Read {len(words)} words from {path}, skipped"
              f" {len(lines) - len(words)} lines")
    return words


def build_word_list(word_length=WORD_LENGTH, threshold=3.0, minimum=1.0):
    """Return list of (word, common) pairs from wordfreq's English list

    Words are in order of decreasing frequency. Only words with a
    zipf_frequency() of at least minimum are included; those at or
    above threshold are common."""
    words = []
    frequent = itertools.takewhile(
        lambda w: zipf_frequency(w, "en") >= minimum,
        iter_wordlist("en"))
    for w in frequent:
        if (len(w) != word_length or
                not all(c in string.ascii_lowercase for c in w)):
            continue
        words.append((w, zipf_frequency(w, "en") >= threshold))
    log.debug(f"Selected {len(words)} words from wordfreq")
    return words


def write_words(words, path):
    """Write (word, common) pairs to path in word list format"""
    try:
        with open(path, "w", encoding="utf-8") as f:
            for word, common in words:
                f.write(f"{'+' if common else '-'}{word}\n")
    except OSError as e:
        raise VocabularyError(f"Cannot write word list {path}: {e}") from e
