import procmaps
from procmaps import MappingIndex, Usage


LINES = [
    "00400000-00452000 r-xp 00000000 08:02 173521 /usr/bin/cat",
    "Rss: 8 kB",
    "00652000-00653000 rw-p 00052000 08:02 173521 /usr/bin/cat",
    "01b5e000-01b7f000 rw-p 00000000 00:00 0 [heap]",
    "Rss: 12 kB",
]


def test_lookup():
    index = MappingIndex(procmaps.collect(LINES))
    assert len(index) == 3
    mapping, usage = index.lookup(0x400000)
    assert mapping.mode == 'r-xp'
    assert usage.rss == 8 << 10
    mapping, usage = index.lookup(0x1b60000)
    assert mapping.path == '[heap]'


def test_lookup_end_is_exclusive():
    index = MappingIndex(procmaps.collect(LINES))
    assert index.lookup(0x452000) is None
    assert index.lookup(0x451fff)[0].start == 0x400000
    assert index.lookup(0) is None


def test_overlapping_is_sorted():
    index = MappingIndex(procmaps.collect(LINES))
    records = index.overlapping(0x451000, 0x1b5f000)
    assert [m.start for m, _ in records] == [0x400000, 0x652000, 0x1b5e000]
    assert index.overlapping(0x700000, 0x700000) == []


def test_empty_range_is_not_indexed():
    index = MappingIndex()
    index.add(procmaps.parse_header("00400000-00400000 ---p 00000000 00:00 0"))
    assert len(index) == 0
    index.add(procmaps.parse_header("00400000-00401000 ---p 00000000 00:00 0"), Usage())
    assert index.lookup(0x400800) == (index.lookup(0x400000)[0], Usage())
