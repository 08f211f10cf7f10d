"""Interactive curses screen, redrawn after every keystroke."""
import curses
import logging

from .errors import InvalidInputError
from .filter import Filter
from .input_mode import (BACKSPACE, DEFAULT_INPUT_MODE, ENTER, ESC, TAB,
                         KeyEvent, process_key, read_key)
from .ranker import COMMON, NONE, RARE, SINGLE
from .view import INVALID, MAX_WORDS, build_lines

log = logging.getLogger(__name__)

ESC_CODE = 27

# Color pair numbers
PAIR_NONE = 1
PAIR_SINGLE = 2
PAIR_COMMON = 3
PAIR_INVALID = 4


def init_colors():
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_NONE, curses.COLOR_RED, -1)
    curses.init_pair(PAIR_SINGLE, curses.COLOR_GREEN, -1)
    curses.init_pair(PAIR_COMMON, curses.COLOR_WHITE, -1)
    curses.init_pair(PAIR_INVALID, curses.COLOR_YELLOW, -1)


def style_attr(style):
    """Return the curses attribute for a line style."""
    if style == NONE:
        return curses.color_pair(PAIR_NONE)
    if style == SINGLE:
        return curses.color_pair(PAIR_SINGLE) | curses.A_BOLD
    if style == COMMON:
        return curses.color_pair(PAIR_COMMON)
    if style == RARE:
        return curses.color_pair(PAIR_COMMON) | curses.A_DIM
    if style == INVALID:
        return curses.color_pair(PAIR_INVALID)
    return 0


def translate_key(ch, next_ch=-1):
    """Return KeyEvent for the curses key code ch

    next_ch is the code read immediately after an ESC, or -1 if there was
    none; ESC followed by a key is how terminals send Alt+key. Returns None
    for codes that are not keys (e.g. terminal resize)."""
    if ch == ESC_CODE:
        if next_ch == -1:
            return KeyEvent(ESC)
        inner = translate_key(next_ch)
        if inner is None:
            return None
        return KeyEvent(inner.code, inner.modifiers | {"alt"})
    if ch in (10, 13, curses.KEY_ENTER):
        return KeyEvent(ENTER)
    if ch == 9:
        return KeyEvent(TAB)
    if ch in (8, 127, curses.KEY_BACKSPACE):
        return KeyEvent(BACKSPACE)
    if 1 <= ch <= 26:
        return KeyEvent(chr(ch + ord("a") - 1), frozenset({"ctrl"}))
    if ch == curses.KEY_RESIZE:
        return None
    if 32 <= ch < 127:
        return KeyEvent(chr(ch))
    return KeyEvent(f"key{ch}")


def curses_events(stdscr):
    """Generate KeyEvents from stdscr

    A terminal reports each keystroke once, so every event is a release."""
    while True:
        ch = stdscr.getch()
        next_ch = -1
        if ch == ESC_CODE:
            stdscr.nodelay(True)
            next_ch = stdscr.getch()
            stdscr.nodelay(False)
        key = translate_key(ch, next_ch)
        if key is not None:
            yield key


def safe_addstr(win, y, x, text, attr=0):
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


def draw(stdscr, lines):
    stdscr.erase()
    height, width = stdscr.getmaxyx()
    for y, (style, text) in enumerate(lines[:height]):
        safe_addstr(stdscr, y, 0, text[:width - 1], style_attr(style))
    stdscr.refresh()


def run(stdscr, words, max_words=MAX_WORDS, flt=None):
    """Run the filter loop until interrupted"""
    curses.set_escdelay(25)
    try:
        curses.curs_set(0)
    except curses.error:
        # Terminal can't hide the cursor
        pass
    init_colors()
    flt = flt if flt else Filter()
    mode = DEFAULT_INPUT_MODE
    message = None
    events = curses_events(stdscr)
    while True:
        draw(stdscr, build_lines(words, flt, mode, max_words, message))
        key = read_key(events)
        message = None
        try:
            mode = process_key(mode, key, flt)
        except InvalidInputError as e:
            log.debug(str(e))
            message = "Invalid input"


def assist(words, max_words=MAX_WORDS):
    """Run the interactive filter in a curses screen"""
    curses.wrapper(run, words, max_words)
