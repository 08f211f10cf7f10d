"""Constraints on the letters of the word being searched for.

There are two kinds of constraints:
- occurrence: a letter must occur (possibly several times) or must not occur
- positional: the letter at a position must be x, or must not be any of x, y, z

A positional 'must be' replaces any 'must not be' at that position and the
other way round, so a position never carries both.
"""
from dataclasses import dataclass, field

WORD_LENGTH = 5


@dataclass(frozen=True)
class MustBe:
    """The letter at the position is exactly char"""
    char: str


@dataclass(frozen=True)
class MustNotBe:
    """The letter at the position is none of chars"""
    chars: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "chars", tuple(sorted(set(self.chars))))


@dataclass
class Filter:
    """Positional and occurrence constraints a word has to satisfy"""
    word_length: int = WORD_LENGTH
    positional: list = None
    must_occur: list = field(default_factory=list)
    must_not_occur: list = field(default_factory=list)

    def __post_init__(self):
        if self.positional is None:
            self.positional = [None] * self.word_length
        if len(self.positional) != self.word_length:
            raise ValueError(f"Expected {self.word_length} positions,"
                             f" got {len(self.positional)}")

    def set_must_be(self, pos, c):
        """Require letter c at pos, dropping any 'must not be' there"""
        self.positional[pos] = MustBe(c)

    def add_must_not_be(self, pos, c):
        """Forbid letter c at pos, dropping any 'must be' there"""
        current = self.positional[pos]
        if isinstance(current, MustNotBe):
            self.positional[pos] = MustNotBe(current.chars + (c,))
        else:
            self.positional[pos] = MustNotBe((c,))

    def add_must_occur(self, c, unique=False):
        """Require letter c somewhere in the word

        Each entry requires one more occurrence, so adding 'e' twice
        requires two e's. With unique=True nothing is added if c is
        already required."""
        if unique and c in self.must_occur:
            return
        self.must_occur.append(c)
        self.must_occur.sort()

    def add_must_not_occur(self, c):
        """Forbid letter c in any position not pinned by 'must be'"""
        self.must_not_occur.append(c)
        self.must_not_occur.sort()

    def matches(self, word):
        """Return True if word satisfies every constraint"""
        for c, p in zip(word, self.positional):
            if isinstance(p, MustBe):
                if c != p.char:
                    return False
            elif isinstance(p, MustNotBe):
                if c in p.chars:
                    return False
        # Remove matched letters so repeated entries need repeated letters
        letters = list(word)
        for c in self.must_occur:
            try:
                letters.remove(c)
            except ValueError:
                return False
        # A letter pinned by 'must be' is exempt from 'must not occur'
        masked_word = "".join(c for c, p in zip(word, self.positional)
                              if not isinstance(p, MustBe))
        return not any(c in masked_word for c in self.must_not_occur)

    def is_empty(self):
        """Return True if no constraint has been set"""
        return (all(p is None for p in self.positional) and
                not self.must_occur and
                not self.must_not_occur)

    def summary(self):
        """Return list of lines describing the active constraints"""
        lines = []
        for i, p in enumerate(self.positional):
            if isinstance(p, MustBe):
                lines.append(f"- char {i + 1} must be {p.char}")
            elif isinstance(p, MustNotBe):
                lines.append(f"- char {i + 1} must not be"
                             f" {', '.join(p.chars)}")
        if self.must_occur:
            lines.append(f"- word must contain: {', '.join(self.must_occur)}")
        if self.must_not_occur:
            lines.append("- word must not contain: "
                         f"{', '.join(self.must_not_occur)}")
        return lines
