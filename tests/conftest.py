"""Test configuration and fixtures for termnovel tests."""

import os
import sys

import pytest
import pexpect

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

import termnovel


@pytest.fixture(scope="session")
def banner():
    return termnovel.Banner()


@pytest.fixture
def chapter():
    return termnovel.Chapter(
        "Test Novel",
        "12",
        "The Return",
        [
            "The rain had not stopped for three days.",
            "She pulled her coat tighter and stepped out onto the road, "
            "counting the lamps until the inn came into view.",
            "Nobody was waiting for her.",
        ],
    )


@pytest.fixture
def empty_chapter():
    return termnovel.Chapter("Test Novel", "1", "Nothing Here", [])


def _spawn_reader(paragraphs, rows=24, cols=80):
    """Run the reading view on a canned chapter inside a pseudo terminal."""
    script = (
        "import termnovel\n"
        f"termnovel.launch(termnovel.Chapter('Test Novel', '7', 'Rain', {paragraphs!r}))\n"
    )
    env = dict(os.environ, TERM="xterm-256color")
    proc = pexpect.spawn(
        sys.executable, ["-c", script],
        cwd=ROOT, env=env, dimensions=(rows, cols), timeout=10,
    )
    return proc


@pytest.fixture
def reader_process():
    proc = _spawn_reader([f"Paragraph number {n} of the chapter." for n in range(1, 31)])
    proc.expect("CONTENT", timeout=10)

    yield proc

    if proc.isalive():
        proc.terminate(force=True)


@pytest.fixture
def spawn_reader():
    procs = []

    def spawn(paragraphs, rows=24, cols=80):
        proc = _spawn_reader(paragraphs, rows, cols)
        procs.append(proc)
        return proc

    yield spawn

    for proc in procs:
        if proc.isalive():
            proc.terminate(force=True)


class FakeWindow:
    """Stand-in for a curses window: records writes, replays queued keys."""

    def __init__(self, rows=24, cols=80, keys=()):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.written = []
        self.refreshed = []
        self.delay = True

    def getmaxyx(self):
        return self.rows, self.cols

    def getch(self):
        if not self.keys:
            if self.delay:
                raise AssertionError("blocking read with no keys queued")
            return -1
        return self.keys.pop(0)

    def nodelay(self, flag):
        self.delay = not flag

    def keypad(self, flag):
        pass

    def box(self):
        pass

    def erase(self):
        self.written = []

    def addstr(self, y, x, text, attr=0):
        self.written.append((y, x, text))

    def addnstr(self, y, x, text, n, attr=0):
        self.written.append((y, x, text[:n]))

    def refresh(self):
        pass

    def noutrefresh(self, *args):
        self.refreshed.append(args)


@pytest.fixture
def fake_window():
    return FakeWindow


@pytest.fixture
def fake_curses(monkeypatch):
    """Replace pad creation and screen update; returns the pads created."""
    pads = []

    def newpad(rows, cols):
        pad = FakeWindow(rows, cols)
        pads.append(pad)
        return pad
    monkeypatch.setattr(termnovel.curses, "newpad", newpad)
    monkeypatch.setattr(termnovel.curses, "doupdate", lambda: None)
    return pads
