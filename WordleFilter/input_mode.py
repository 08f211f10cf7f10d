"""Turn keystrokes into changes of the input mode or of the filter.

Keys:
- `+` for 'character must occur'
- `-` for 'character must not occur'
- `1-5` for 'character must (not) be in position'
- `esc` or `*` for any position
- any lowercase character to apply the chosen filter
"""
import logging
import string
from dataclasses import dataclass, field

from .errors import InvalidInputError

log = logging.getLogger(__name__)

# Key event kinds. Only RELEASE events are acted upon.
PRESS = "press"
REPEAT = "repeat"
RELEASE = "release"

# Names for keys that are not printable characters
ESC = "esc"
ENTER = "enter"
TAB = "tab"
BACKSPACE = "backspace"


@dataclass(frozen=True)
class KeyEvent:
    code: str
    modifiers: frozenset = field(default_factory=frozenset)
    kind: str = RELEASE

    def __str__(self):
        return "+".join(sorted(self.modifiers) + [self.code])


@dataclass(frozen=True)
class Positional:
    """Letter at position must be (must=True) or must not be (must=False)"""
    position: int
    must: bool


@dataclass(frozen=True)
class Global:
    """Letter must occur (must=True) or must not occur (must=False)"""
    must: bool = False


DEFAULT_INPUT_MODE = Global(False)


def read_key(events):
    """Return the first key release from events

    Press and repeat events for the same key are skipped so each keystroke
    is only processed once."""
    for event in events:
        if event.kind == RELEASE:
            return event
    raise EOFError("No more key events")


def describe(mode):
    """Return a prompt describing how the next character is applied"""
    if isinstance(mode, Positional):
        rule = "must be" if mode.must else "must not be"
        what = f"'position {mode.position + 1} character {rule}'"
    elif mode.must:
        what = "'word must contain'"
    else:
        what = "'word must not contain'"
    return f"Press any character to filter on {what}"


def process_key(mode, key, flt):
    """Apply key to mode and flt, return the new mode

    flt is changed in place when key is a letter. Raises InvalidInputError,
    leaving mode and flt alone, if key has modifiers or no meaning."""
    if key.modifiers:
        raise InvalidInputError(f"Invalid input: {key}")
    code = key.code
    positions = [str(i + 1) for i in range(len(flt.positional))]

    # user selects to filter on 'must occur' or 'must not occur'
    if code in ("+", "-"):
        must = code == "+"
        if isinstance(mode, Positional):
            return Positional(mode.position, must)
        return Global(must)

    # user selects a position to filter on
    if code in positions:
        return Positional(int(code) - 1, mode.must)

    # user selects to filter globally
    if code in (ESC, "*"):
        return DEFAULT_INPUT_MODE

    if len(code) != 1 or code not in string.ascii_lowercase:
        raise InvalidInputError(f"Invalid input: {key}")

    # user selects a character to filter on
    if isinstance(mode, Positional):
        if mode.must:
            flt.set_must_be(mode.position, code)
        else:
            flt.add_must_not_be(mode.position, code)
            # A letter in the wrong position is still in the word. Repeating
            # this must not raise the number of occurrences required.
            flt.add_must_occur(code, unique=True)
    elif mode.must:
        # Not deduplicated: pressing 'e' twice requires two e's
        flt.add_must_occur(code)
    else:
        flt.add_must_not_occur(code)
    log.debug(f"Applied {code!r} in mode {mode}")
    return mode
