import contextlib


class LineSource:
    """Pull lines one at a time with a single line of lookahead.

    Wraps any iterable of text lines (an open file, a list, a generator).
    Exceptions raised by the iterable, such as ``OSError`` from a /proc read,
    propagate from whichever of ``peek`` or ``next`` triggered the read.
    """

    def __init__(self, lines):
        self._lines = iter(lines)
        self._peeked = None
        self._exhausted = False

    def _fill(self):
        if self._peeked is None and not self._exhausted:
            try:
                line = next(self._lines)
            except StopIteration:
                self._exhausted = True
                return
            self._peeked = line.rstrip('\r\n')

    def peek(self):
        self._fill()
        return self._peeked

    def next(self):
        self._fill()
        line, self._peeked = self._peeked, None
        return line

    def __repr__(self):
        return "LineSource(lines={!r}, peeked={!r}, exhausted={!r})".format(self._lines, self._peeked, self._exhausted)


@contextlib.contextmanager
def open_lines(path):
    # /proc paths are raw bytes, keep undecodable ones round-trippable
    with open(path, 'r', encoding='utf-8', errors='surrogateescape') as f:
        yield LineSource(f)
