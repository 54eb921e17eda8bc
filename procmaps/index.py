import intervaltree


def _bounds(interval):
    return interval.begin, interval.end


class MappingIndex:
    """Address lookup over parsed ``(mapping, usage)`` records."""

    def __init__(self, records=()):
        self.tree = intervaltree.IntervalTree()
        for mapping, usage in records:
            self.add(mapping, usage)

    def add(self, mapping, usage=None):
        # intervaltree rejects null intervals, an empty range maps no address anyway
        if mapping.start < mapping.end:
            self.tree.addi(mapping.start, mapping.end, (mapping, usage))

    def lookup(self, address):
        intervals = self.tree[address]
        if not intervals:
            return None
        return min(intervals, key=_bounds).data

    def overlapping(self, start, end):
        if start >= end:
            return []
        return [i.data for i in sorted(self.tree.overlap(start, end), key=_bounds)]

    def __len__(self):
        return len(self.tree)

    def __repr__(self):
        return "MappingIndex(mappings={!r})".format(len(self))
