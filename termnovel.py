#!/usr/bin/env python3
"""\
Usages:
    termnovel            prompt for a novel name, then search for it
    termnovel NAME...    search for NAME

Options:
    -s N, --strip N  drop the last N paragraphs of every chapter (default 3)
    -v, --version    print version
    -h, --help       print short, long help
    --debug          write a debug log to the temp directory

Key Binding:
    Quit             : q         ESC
    Scroll down      : DOWN      j
    Scroll up        : UP        k
    Page down        : PGDN      f
    Page up          : PGUP      b
    Beginning of ch  : HOME      g
    End of ch        : END       G

Selection prompts:
    Type to narrow the list, UP/DOWN to move, ENTER to pick, ESC to cancel.
"""


__version__ = "0.3.0"
__build_time__ = "2026-10-19 19:50:00"
__license__ = "MIT"
__author__ = "Lee Hanken"
__email__ = ""
__url__ = "https://github.com/macsplit/termnovel"


import curses
import sys
import re
import os
import shutil
import tempfile
import textwrap
import logging
import unicodedata
from collections import namedtuple
from difflib import SequenceMatcher as SM
from urllib.parse import quote_plus, urljoin

import requests
import pyfiglet
from bs4 import BeautifulSoup


logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


# key bindings
SCROLL_DOWN = {curses.KEY_DOWN, ord("j")}
SCROLL_UP = {curses.KEY_UP, ord("k")}
PAGE_DOWN = {curses.KEY_NPAGE, ord("f")}
PAGE_UP = {curses.KEY_PPAGE, ord("b")}
CH_HOME = {curses.KEY_HOME, ord("g")}
CH_END = {curses.KEY_END, ord("G")}
QUIT = {ord("q"), 27}
ESCAPE = 27
ENTER = {10, 13, curses.KEY_ENTER}
BACKSPACE = {8, 127, curses.KEY_BACKSPACE}

# getch results that are not key presses; the reader only redraws on these
NON_PRESS = {-1, curses.KEY_RESIZE, curses.KEY_MOUSE}

# escape sequences ncurses leaves undecoded when the terminal sends CSI
# cursor keys that differ from its terminfo entry
ESCAPE_SEQUENCES = {
    "[A": curses.KEY_UP, "OA": curses.KEY_UP,
    "[B": curses.KEY_DOWN, "OB": curses.KEY_DOWN,
    "[C": curses.KEY_RIGHT, "OC": curses.KEY_RIGHT,
    "[D": curses.KEY_LEFT, "OD": curses.KEY_LEFT,
    "[5~": curses.KEY_PPAGE, "[6~": curses.KEY_NPAGE,
    "[H": curses.KEY_HOME, "OH": curses.KEY_HOME, "[1~": curses.KEY_HOME, "[7~": curses.KEY_HOME,
    "[F": curses.KEY_END, "OF": curses.KEY_END, "[4~": curses.KEY_END, "[8~": curses.KEY_END,
}


# colorscheme, tailwind slate approximated on the 256 colour cube
# (fg, bg) for 256 colour terminals, then for 8 colour terminals
TITLE_COLORS = (234, 252)
KEYS_COLORS = (255, 60)
TITLE_COLORS_8 = (curses.COLOR_BLACK, curses.COLOR_WHITE)
KEYS_COLORS_8 = (curses.COLOR_WHITE, curses.COLOR_BLUE)
COLORSUPPORT = False


# virtual canvas geometry
CANVAS_HEIGHT = 100
GUTTER_WIDTH = 5
BANNER_HEIGHT = 7
BANNER_FONT = "standard"
BANNER_RENDER_WIDTH = 1000
PUNCTUATION_FOLD = str.maketrans({
    "\u2018": "'", "\u2019": "'", "\u201c": '"', "\u201d": '"',
    "\u2013": "-", "\u2014": "-", "\u2026": "...",
})

MIN_COLS = 40
MIN_ROWS = 12

# site
BASE_URL = "https://novelbin.me/"
SEARCH_URL = BASE_URL + "search?keyword="
ARCHIVE_URL = BASE_URL + "ajax/chapter-archive?novelId="
USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) termnovel/" + __version__
HTTP_TIMEOUT = 15

# footer paragraphs (navigation, ads) at the end of every chapter page
TRAILING_STRIP = 3

DEBUG_LOG = os.path.join(tempfile.gettempdir(), "termnovel-debug.log")

RUNNING = "running"
QUIT_STATE = "quit"


class TermnovelError(Exception):
    pass


class FetchError(TermnovelError):
    """A page could not be retrieved (network failure or HTTP error)."""

    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(f"could not fetch {url}: {reason}")


class FontError(TermnovelError):
    pass


class UsageError(TermnovelError):
    pass


# =============================================================================
# CONTENT MODEL
# =============================================================================

class Chapter(namedtuple("Chapter", "novel_title chapter_ordinal chapter_title paragraphs")):
    """One loaded chapter. Paragraphs are frozen into a tuple."""
    __slots__ = ()

    def __new__(cls, novel_title, chapter_ordinal, chapter_title, paragraphs=()):
        return super().__new__(
            cls, novel_title, chapter_ordinal, chapter_title, tuple(paragraphs)
        )

    @property
    def content_text(self):
        return "\n\n".join(self.paragraphs)


# render input snapshot for one frame
Frame = namedtuple("Frame", "chapter width height")


# =============================================================================
# BANNER RENDERER
# =============================================================================

class Banner:
    """Large glyph text for the chapter headers.

    The font is loaded once here; a missing font is a startup failure,
    never a per-frame one.
    """

    def __init__(self, font=BANNER_FONT):
        self.font = font
        try:
            self.figlet = pyfiglet.Figlet(font=font, width=BANNER_RENDER_WIDTH)
        except (pyfiglet.FontNotFound, pyfiglet.FontError) as e:
            raise FontError(f"cannot load banner font '{font}': {e}") from e
        self._cache = {}

    def render(self, text):
        if text not in self._cache:
            self._cache[text] = self._render(text)
        return self._cache[text]

    def printable(self, text):
        """Fold text onto the glyphs the font has; anything else becomes '?'."""
        text = text.translate(PUNCTUATION_FOLD)
        text = "".join(
            ch for ch in unicodedata.normalize("NFKD", text)
            if not unicodedata.combining(ch)
        )
        chars = self.figlet.Font.chars
        return "".join(ch if ord(ch) in chars else "?" for ch in text)

    def _render(self, text):
        if not text.strip():
            return ""
        text = self.printable(text)
        lines = [line.rstrip() for line in str(self.figlet.renderText(text)).split("\n")]
        while lines and not lines[-1]:
            lines.pop()
        while lines and not lines[0]:
            lines.pop(0)
        return "\n".join(lines)


# =============================================================================
# VIRTUAL CANVAS COMPOSITOR
# =============================================================================

class Canvas:
    """Off-screen character grid with one style name per cell."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.cells = [[" "] * width for _ in range(height)]
        self.styles = [["text"] * width for _ in range(height)]

    def put(self, y, x, text, style="text"):
        if not 0 <= y < self.height:
            return
        row, row_styles = self.cells[y], self.styles[y]
        for i, ch in enumerate(text):
            col = x + i
            if col >= self.width:
                break
            if col < 0:
                continue
            row[col] = ch
            row_styles[col] = style

    def lines(self):
        return ["".join(row) for row in self.cells]

    def dump(self):
        return "\n".join(self.lines())

    def runs(self, y):
        """Yield (x, text, style) for each stretch of equally styled cells."""
        row, row_styles = self.cells[y], self.styles[y]
        start = 0
        for col in range(1, self.width + 1):
            if col == self.width or row_styles[col] != row_styles[start]:
                yield start, "".join(row[start:col]), row_styles[start]
                start = col


def draw_panel(canvas, y, x, height, width, title=""):
    """Draw a bordered panel and return its inner (y, x, height, width)."""
    if height < 2 or width < 2:
        return y, x, 0, 0
    inner = width - 2
    canvas.put(y, x, "┌" + "─" * inner + "┐", "border")
    for row in range(y + 1, y + height - 1):
        canvas.put(row, x, "│", "border")
        canvas.put(row, x + width - 1, "│", "border")
    canvas.put(y + height - 1, x, "└" + "─" * inner + "┘", "border")
    if title:
        canvas.put(y, x + 1, title[:inner], "heading")
    return y + 1, x + 1, height - 2, inner


def wrap_content(text, width):
    """Word wrap to width, keeping blank lines as paragraph separators.

    Every word survives in order. Tabs are expanded to spaces and other
    whitespace control characters become spaces, since a terminal cell
    cannot hold them.
    """
    width = max(1, width)
    lines = []
    for raw in text.split("\n"):
        wrapped = textwrap.wrap(
            raw, width,
            break_long_words=True,
            break_on_hyphens=False,
            expand_tabs=True,
            replace_whitespace=True,
        )
        lines.extend(wrapped or [""])
    return lines


def content_width(width):
    return max(1, width - GUTTER_WIDTH - 2)


def canvas_height(chapter, width):
    needed = 2 * BANNER_HEIGHT + len(wrap_content(chapter.content_text, content_width(width))) + 2
    return max(CANVAS_HEIGHT, needed)


def canvas_size(chapter, cols, rows):
    """(width, height) of the canvas for a cols x rows terminal.

    A terminal at least as tall as the canvas loses one column; the height
    is then recomputed for the narrower wrap.
    """
    height = canvas_height(chapter, cols)
    if rows < height:
        return cols, height
    width = max(1, cols - 1)
    return width, canvas_height(chapter, width)


def compose(frame, banner):
    """Lay the gutter, both banner panels and the content panel out on one
    canvas. Depends only on the frame and the banner font."""
    canvas = Canvas(frame.width, frame.height)

    for n in range(1, frame.height + 1):
        canvas.put(n - 1, 0, f"{n:>4} ", "dim")

    x = GUTTER_WIDTH
    width = frame.width - GUTTER_WIDTH
    y = 0
    headers = (
        ("CHAPTER NUMBER", frame.chapter.chapter_ordinal),
        ("CHAPTER NAME", frame.chapter.chapter_title),
    )
    for title, text in headers:
        top, left, height, inner = draw_panel(canvas, y, x, BANNER_HEIGHT, width, title)
        glyphs = banner.render(text).split("\n")
        for i, line in enumerate(glyphs[:height]):
            canvas.put(top + i, left, line[:inner])
        y += BANNER_HEIGHT

    top, left, height, inner = draw_panel(canvas, y, x, frame.height - y, width, "CONTENT")
    for i, line in enumerate(wrap_content(frame.chapter.content_text, inner)[:height]):
        canvas.put(top + i, left, line)
    return canvas


# =============================================================================
# SCROLL STATE
# =============================================================================

class ScrollState:
    """Line offset into the virtual canvas, always clamped to
    0 <= offset <= max(0, virtual_height - viewport height)."""

    def __init__(self, virtual_height=CANVAS_HEIGHT, viewport=(0, 0)):
        self.offset = 0
        self.virtual_height = virtual_height
        self.viewport = viewport

    @property
    def max_offset(self):
        return max(0, self.virtual_height - self.viewport[1])

    @property
    def has_above(self):
        return self.offset > 0

    @property
    def has_below(self):
        return self.offset < self.max_offset

    def clamp(self):
        self.offset = max(0, min(self.offset, self.max_offset))

    def resize(self, virtual_height, viewport):
        self.virtual_height = virtual_height
        self.viewport = (viewport[0], max(0, viewport[1]))
        self.clamp()

    def scroll(self, delta):
        self.offset += delta
        self.clamp()

    def scroll_down(self):
        self.scroll(1)

    def scroll_up(self):
        self.scroll(-1)

    def scroll_page_down(self):
        self.scroll(self.viewport[1])

    def scroll_page_up(self):
        self.scroll(-self.viewport[1])

    def scroll_to_top(self):
        self.offset = 0

    def scroll_to_bottom(self):
        self.offset = self.max_offset


# =============================================================================
# TERMINAL DRAWING
# =============================================================================

def init_colors():
    global COLORSUPPORT
    try:
        curses.start_color()
        curses.use_default_colors()
        if curses.COLORS >= 256:
            curses.init_pair(1, *TITLE_COLORS)
            curses.init_pair(2, *KEYS_COLORS)
        else:
            curses.init_pair(1, *TITLE_COLORS_8)
            curses.init_pair(2, *KEYS_COLORS_8)
        COLORSUPPORT = True
    except curses.error:
        COLORSUPPORT = False
    logger.debug("colour support: %s", COLORSUPPORT)


def init_screen(stdscr):
    init_colors()
    stdscr.keypad(True)
    try:
        curses.curs_set(0)
    except curses.error:
        pass  # terminal cannot hide the cursor


def style_attr(style):
    if style == "dim":
        return curses.A_DIM
    if style == "heading":
        return curses.A_BOLD
    if style == "bar":
        return curses.color_pair(1) if COLORSUPPORT else curses.A_REVERSE
    if style == "keys":
        return curses.color_pair(2) if COLORSUPPORT else curses.A_REVERSE | curses.A_BOLD
    return curses.A_NORMAL


def scroll_hint(scroll):
    if scroll.has_above and scroll.has_below:
        return "  ▲▼ more"
    if scroll.has_below:
        return "  ▼ more"
    if scroll.has_above:
        return "  ▲ more"
    return ""


def title_segments(novel_title, scroll):
    return [
        (novel_title, "bar"),
        (scroll_hint(scroll), "bar"),
        ("  ↓ | ↑ | PageDown | PageUp | Home | End  ", "keys"),
        ("  Quit: ", "bar"),
        (" Esc ", "keys"),
    ]


def draw_title_bar(stdscr, segments, cols):
    stdscr.addnstr(0, 0, " " * cols, cols, style_attr("bar"))
    x = 0
    for text, style in segments:
        if x >= cols:
            break
        if not text:
            continue
        stdscr.addnstr(0, x, text, cols - x, style_attr(style))
        x += len(text)


def canvas_pad(canvas):
    # one spare column so writing the last cell never fails
    pad = curses.newpad(canvas.height, canvas.width + 1)
    for y in range(canvas.height):
        for x, text, style in canvas.runs(y):
            if style == "text" and not text.strip():
                continue
            pad.addstr(y, x, text, style_attr(style))
    return pad


def read_key(win):
    """Blocking getch that folds a raw escape sequence into one key.

    A lone ESC comes back as ESCAPE. Recognised CSI/SS3 sequences come back
    as their curses.KEY_* code, unknown ones as -1.
    """
    key = win.getch()
    if key != ESCAPE:
        return key
    win.nodelay(True)
    try:
        first = win.getch()
        if first == -1:
            return ESCAPE
        sequence = chr(first) if 0 <= first < 256 else ""
        if sequence in ("[", "O"):
            # CSI runs to a final byte in 0x40-0x7e, SS3 is one more byte
            while True:
                ch = win.getch()
                if not 0 <= ch < 256:
                    break
                sequence += chr(ch)
                if sequence[0] == "O" or 0x40 <= ch <= 0x7e:
                    break
    finally:
        win.nodelay(False)
    logger.debug("escape sequence %r", sequence)
    return ESCAPE_SEQUENCES.get(sequence, -1)


def show_loading(stdscr, text):
    rows, cols = stdscr.getmaxyx()
    stdscr.erase()
    stdscr.addnstr(0, 0, text, cols - 1)
    stdscr.refresh()


def create_dialog(stdscr, width, height, title=""):
    rows, cols = stdscr.getmaxyx()
    stdscr.erase()
    stdscr.noutrefresh()
    dialog = curses.newwin(height, width, max(0, (rows - height) // 2), max(0, (cols - width) // 2))
    dialog.keypad(True)
    dialog.box()
    if title:
        dialog.addnstr(0, 2, f" {title} ", width - 4, curses.A_BOLD)
    return dialog


def message(stdscr, title, text):
    """Centred message box, closed by any key."""
    rows, cols = stdscr.getmaxyx()
    width = min(60, cols - 4)
    lines = textwrap.wrap(text, width - 4) or [""]
    height = min(len(lines) + 4, rows - 2)
    while True:
        dialog = create_dialog(stdscr, width, height, title)
        for i, line in enumerate(lines[:height - 4]):
            dialog.addnstr(1 + i, 2, line.center(width - 4), width - 4)
        dialog.addnstr(height - 2, 2, "Press any key", width - 4, curses.A_DIM)
        dialog.refresh()
        if read_key(dialog) != curses.KEY_RESIZE:
            return


# =============================================================================
# FUZZY SELECTION
# =============================================================================

def is_subsequence(needle, haystack):
    it = iter(haystack)
    return all(ch in it for ch in needle)


def fuzzy_filter(query, labels):
    """Indices of labels matching query, best match first."""
    needle = "".join(query.lower().split())
    if not needle:
        return list(range(len(labels)))
    scored = []
    for i, label in enumerate(labels):
        haystack = label.lower()
        if not is_subsequence(needle, haystack):
            continue
        score = sum(b.size for b in SM(None, needle, haystack).get_matching_blocks())
        scored.append((-score, i))
    scored.sort()
    return [i for _, i in scored]


def choose(stdscr, prompt, labels):
    """Fuzzy selection dialog. Returns the index into labels, or None when
    the user cancels or there is nothing to choose from."""
    if not labels:
        logger.info("%s no results", prompt)
        message(stdscr, prompt, "No results")
        return None

    query = ""
    current = 0
    while True:
        matches = fuzzy_filter(query, labels)
        current = max(0, min(current, len(matches) - 1))

        rows, cols = stdscr.getmaxyx()
        longest = max(len(f"{i+1}. {label}") for i, label in enumerate(labels))
        width = min(max(longest + 8, len(prompt) + 8, 60), cols - 4)
        height = max(7, min(len(labels) + 6, rows - 4))
        display_height = height - 5

        dialog = create_dialog(stdscr, width, height, prompt)
        dialog.addnstr(1, 2, f"> {query}", width - 4)

        start_idx = max(0, current - display_height // 2)
        end_idx = min(len(matches), start_idx + display_height)
        for row, i in enumerate(range(start_idx, end_idx)):
            attr = curses.A_REVERSE if i == current else 0
            index = matches[i]
            dialog.addnstr(2 + row, 2, f"{index+1}. {labels[index]}", width - 4, attr)
        if not matches:
            dialog.addnstr(2, 2, "No matches", width - 4, curses.A_DIM)

        help_text = f"{len(matches)}/{len(labels)}  Enter: Select | Esc: Cancel"
        dialog.addnstr(height - 2, 2, help_text, width - 4, curses.A_DIM)
        dialog.refresh()

        key = read_key(dialog)
        if key == ESCAPE:
            logger.info("%s cancelled", prompt)
            return None
        elif key in ENTER:
            if matches:
                logger.info("%s picked %r", prompt, labels[matches[current]])
                return matches[current]
        elif key == curses.KEY_UP:
            current -= 1
        elif key == curses.KEY_DOWN:
            current += 1
        elif key == curses.KEY_PPAGE:
            current -= display_height
        elif key == curses.KEY_NPAGE:
            current += display_height
        elif key in BACKSPACE:
            query = query[:-1]
            current = 0
        elif 32 <= key <= 126:
            query += chr(key)
            current = 0


# =============================================================================
# READING VIEW
# =============================================================================

class ReadingView:

    def __init__(self, chapter, banner):
        self.chapter = chapter
        self.banner = banner
        self.scroll = ScrollState()
        self.state = RUNNING
        self.size = (0, 0)

    @property
    def running(self):
        return self.state == RUNNING

    def quit(self):
        self.state = QUIT_STATE

    def run(self, stdscr):
        logger.info("reading %r chapter %r", self.chapter.novel_title, self.chapter.chapter_ordinal)
        while self.running:
            self.draw(stdscr)
            self.handle_key(read_key(stdscr))
        logger.info("reader closed at offset %d", self.scroll.offset)

    def draw(self, stdscr):
        rows, cols = stdscr.getmaxyx()
        if (rows, cols) != self.size:
            logger.debug("terminal size %dx%d", cols, rows)
            self.size = (rows, cols)

        width, height = canvas_size(self.chapter, cols, rows)
        frame = Frame(self.chapter, width, height)
        self.scroll.resize(frame.height, (cols, rows - 1))
        canvas = compose(frame, self.banner)

        stdscr.erase()
        draw_title_bar(stdscr, title_segments(self.chapter.novel_title, self.scroll), cols)
        stdscr.noutrefresh()
        pad = canvas_pad(canvas)
        pad.noutrefresh(self.scroll.offset, 0, 1, 0, rows - 1, cols - 1)
        curses.doupdate()

    def handle_key(self, key):
        if key in NON_PRESS:
            return
        if key in QUIT:
            self.quit()
        elif key in SCROLL_DOWN:
            self.scroll.scroll_down()
        elif key in SCROLL_UP:
            self.scroll.scroll_up()
        elif key in PAGE_DOWN:
            self.scroll.scroll_page_down()
        elif key in PAGE_UP:
            self.scroll.scroll_page_up()
        elif key in CH_HOME:
            self.scroll.scroll_to_top()
        elif key in CH_END:
            self.scroll.scroll_to_bottom()


def read(stdscr, chapter, banner=None):
    init_screen(stdscr)
    ReadingView(chapter, banner or Banner()).run(stdscr)


def prepare_terminal():
    # deliver a lone ESC without the default one second wait
    os.environ.setdefault("ESCDELAY", "25")


def launch(chapter, banner=None):
    """Open the reading view on an already loaded chapter."""
    prepare_terminal()
    curses.wrapper(read, chapter, banner)


# =============================================================================
# SITE: URLS, FETCHING, EXTRACTION
# =============================================================================

SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT})


def fetch(url):
    logger.debug("GET %s", url)
    try:
        r = SESSION.get(url, timeout=HTTP_TIMEOUT)
        r.raise_for_status()
    except requests.RequestException as e:
        logger.error("GET %s failed: %s", url, e)
        raise FetchError(url, e) from e
    logger.debug("GET %s -> %d, %d bytes", url, r.status_code, len(r.content))
    return r.text


def search_url(name):
    return SEARCH_URL + quote_plus(" ".join(name.split()))


def novel_slug(title):
    slug = re.sub(r"[():]", "", title.lower())
    return slug.replace(" ", "-")


def archive_url(title):
    return ARCHIVE_URL + novel_slug(title)


def parse_search_results(markup):
    soup = BeautifulSoup(markup, "html.parser")
    results = []
    for a in soup.select("h3.novel-title a"):
        title = a.get_text().strip()
        if not title:
            continue
        results.append((title, archive_url(title)))
    return results


def parse_chapters(markup, base=BASE_URL):
    soup = BeautifulSoup(markup, "html.parser")
    chapters = []
    for el in soup.select(".nchr-text.chapter-title"):
        label = el.get_text().strip()
        if not label:
            continue
        anchor = el.find_parent("a")
        if anchor is None or not anchor.get("href"):
            logger.debug("chapter %r has no link, skipped", label)
            continue
        chapters.append((label, urljoin(base, anchor["href"])))
    return chapters


def parse_chapter_content(markup, strip=TRAILING_STRIP):
    soup = BeautifulSoup(markup, "html.parser")
    paragraphs = [p.get_text().strip() for p in soup.find_all("p")]
    if strip > 0:
        paragraphs = paragraphs[:-strip]
    return paragraphs


def split_chapter_label(label):
    """'Chapter 12: The Return' -> ('12', 'The Return')"""
    parts = label.split()
    ordinal = parts[1].rstrip(":.-") if len(parts) > 1 else ""
    title = " ".join(parts[2:])
    return ordinal, title


def search(name):
    results = parse_search_results(fetch(search_url(name)))
    logger.info("search %r: %d results", name, len(results))
    return results


def list_chapters(locator):
    chapters = parse_chapters(fetch(locator))
    logger.info("%s: %d chapters", locator, len(chapters))
    return chapters


def fetch_chapter(locator, strip=TRAILING_STRIP):
    paragraphs = parse_chapter_content(fetch(locator), strip)
    logger.info("%s: %d paragraphs", locator, len(paragraphs))
    return paragraphs


# =============================================================================
# SESSION
# =============================================================================

def session(stdscr, name, banner, strip=TRAILING_STRIP):
    """search -> pick novel -> list chapters -> pick chapter -> read"""
    init_screen(stdscr)

    show_loading(stdscr, f"Searching for '{name}'...")
    novels = search(name)
    index = choose(stdscr, "Select a novel:", [title for title, _ in novels])
    if index is None:
        return
    novel_title, archive = novels[index]

    show_loading(stdscr, f"Loading chapters of {novel_title}...")
    chapters = list_chapters(archive)
    index = choose(stdscr, "Select a chapter:", [label for label, _ in chapters])
    if index is None:
        return
    label, locator = chapters[index]

    show_loading(stdscr, f"Loading {label}...")
    paragraphs = fetch_chapter(locator, strip)
    ordinal, chapter_title = split_chapter_label(label)
    chapter = Chapter(novel_title, ordinal, chapter_title, paragraphs)
    ReadingView(chapter, banner).run(stdscr)


def parse_strip(value):
    if re.fullmatch(r"[0-9]+", value) is None:
        raise UsageError(f"strip count must be a non-negative number, got '{value}'")
    return int(value)


def parse_args(args):
    opts = {
        "help": None,
        "version": False,
        "debug": False,
        "strip": TRAILING_STRIP,
        "name": "",
    }
    args = list(args)
    words = []
    while args:
        arg = args.pop(0)
        if arg == "-h":
            opts["help"] = "short"
        elif arg == "--help":
            opts["help"] = "long"
        elif arg in {"-v", "-V", "--version"}:
            opts["version"] = True
        elif arg == "--debug":
            opts["debug"] = True
        elif arg in {"-s", "--strip"}:
            if not args:
                raise UsageError(f"{arg} needs a number")
            opts["strip"] = parse_strip(args.pop(0))
        elif arg.startswith("--strip="):
            opts["strip"] = parse_strip(arg.split("=", 1)[1])
        else:
            words.append(arg)
    opts["name"] = " ".join(words)
    return opts


def prompt_novel_name():
    try:
        return input("Enter the name of the novel: ").strip()
    except EOFError:
        return ""


def main():
    try:
        opts = parse_args(sys.argv[1:])
    except UsageError as e:
        sys.exit(f"ERROR: {e}")

    if opts["help"]:
        hlp = __doc__.rstrip()
        if opts["help"] == "short":
            hlp = re.search("(\n|.)*(?=\n\nKey)", hlp).group()
        print(hlp)
        sys.exit()

    if opts["version"]:
        print(__version__)
        print(__license__, "License")
        print("Copyright (c) 2026", __author__)
        print(__url__)
        sys.exit()

    if opts["debug"]:
        logging.basicConfig(
            filename=DEBUG_LOG,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        logger.debug("termnovel %s (built %s)", __version__, __build_time__)

    termc, termr = shutil.get_terminal_size()
    if termc < MIN_COLS or termr < MIN_ROWS:
        sys.exit(f"ERR: Screen was too small (min {MIN_COLS}cols x {MIN_ROWS}rows).")

    try:
        banner = Banner()
        name = opts["name"] or prompt_novel_name()
        if not name:
            sys.exit()
        prepare_terminal()
        curses.wrapper(session, name, banner, opts["strip"])
    except TermnovelError as e:
        logger.error("%s", e)
        sys.exit(f"ERROR: {e}")
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
