"""Parse /proc/<pid>/maps and /proc/<pid>/smaps.

There is no block delimiter, any line containing ``-`` is the next header.
"""
import os
import errno
import logging

from .types import Mapping, Usage, USAGE_SIZE_FIELDS, VmFlags
from .decode import (
    parse_hex,
    parse_decimal,
    parse_permissions,
    parse_device,
    parse_sized_value,
    parse_vm_flags,
    split_fields,
)
from .lines import LineSource, open_lines
from .exceptions import (
    DeadProcess,
    FormatDrift,
    MalformedHeader,
    MalformedUsage,
    ParserStateError,
    UnrecognizedKey,
)

logger = logging.getLogger(__name__)

VM_FLAGS_TAG = 'VmFlags'

USAGE_KEYS = {
    'Size': 'size',
    'KernelPageSize': 'kernel_page_size',
    'MMUPageSize': 'mmu_page_size',
    'Rss': 'rss',
    'Pss': 'pss',
    'Pss_Dirty': 'pss_dirty',
    'Shared_Clean': 'shared_clean',
    'Shared_Dirty': 'shared_dirty',
    'Private_Clean': 'private_clean',
    'Private_Dirty': 'private_dirty',
    'Referenced': 'referenced',
    'Anonymous': 'anonymous',
    'KSM': 'ksm',
    'LazyFree': 'lazy_free',
    'AnonHugePages': 'anon_huge_pages',
    'ShmemHugePages': 'shmem_huge_pages',
    'ShmemPmdMapped': 'shmem_pmd_mapped',
    'FilePmdMapped': 'file_pmd_mapped',
    'Shared_Hugetlb': 'shared_hugetlb',
    'Private_Hugetlb': 'private_hugetlb',
    'Swap': 'swap',
    'SwapPss': 'swap_pss',
    'Locked': 'locked',
    'THPeligible': 'thp_eligible',
    'ProtectionKey': 'protection_key',
}


def _is_header(line):
    return '-' in line


def parse_header(line):
    row = split_fields(line, 5)
    if len(row) < 5:
        raise MalformedHeader(line)
    _start, sep, _end = row[0].partition('-')
    start = parse_hex(_start)
    end = parse_hex(_end)
    permissions = parse_permissions(row[1])
    offset = parse_hex(row[2])
    device = parse_device(row[3])
    inode = parse_decimal(row[4])
    if not sep or None in (start, end, permissions, offset, device, inode):
        raise MalformedHeader(line)
    if len(row) > 5:
        path = row[5]
    else:
        path = None
    return Mapping(start, end, permissions, offset, device, inode, path)


def parse_usage(source):
    fields = {}
    while True:
        line = source.peek()
        if line is None or _is_header(line):
            break
        source.next()
        if line.startswith(VM_FLAGS_TAG):
            if line.startswith(VM_FLAGS_TAG + ':'):
                data = line[len(VM_FLAGS_TAG) + 1:]
            else:
                data = line
            fields['vm_flags'] = parse_vm_flags(data)
            continue
        sized = parse_sized_value(line)
        if sized is None:
            raise MalformedUsage(line)
        key, value = sized
        try:
            name = USAGE_KEYS[key]
        except KeyError:
            raise UnrecognizedKey(key) from None
        if name == 'thp_eligible':
            value = value != 0
        fields[name] = value
    return Usage(**fields)


def skip_usage(source):
    skipped = 0
    while True:
        line = source.peek()
        if line is None or _is_header(line):
            return skipped
        source.next()
        skipped += 1


class _State:
    def __init__(self, source):
        if not isinstance(source, LineSource):
            source = LineSource(source)
        self._source = source
        self._consumed = False

    def _consume(self):
        if self._consumed:
            raise ParserStateError('{!r} has already been advanced'.format(self))
        self._consumed = True
        return self._source

    def __repr__(self):
        return "{}(source={!r}, consumed={!r})".format(type(self).__name__, self._source, self._consumed)


class ExpectHeader(_State):
    def next_mapping(self):
        # mapping is None at end of stream, a MalformedHeader carries the ExpectUsage to resume from
        source = self._consume()
        line = source.next()
        if line is None:
            return ExpectUsage(source, exhausted=True), None
        try:
            mapping = parse_header(line)
        except MalformedHeader as e:
            e.state = ExpectUsage(source)
            raise
        return ExpectUsage(source), mapping


class ExpectUsage(_State):
    def __init__(self, source, exhausted=False):
        super().__init__(source)
        self._exhausted = exhausted

    def next_usage(self, strict=False):
        """Returns ``(ExpectHeader, usage)``, usage is None for a malformed block.

        Errors raised from here carry the ``ExpectHeader`` to resume from in
        their ``state`` attribute.
        """
        source = self._consume()
        if self._exhausted:
            return ExpectHeader(source), None
        try:
            usage = parse_usage(source)
        except MalformedUsage as e:
            skipped = skip_usage(source)
            if strict:
                e.state = ExpectHeader(source)
                raise
            logger.warning('%s, skipped %d remaining lines of the block', e, skipped)
            return ExpectHeader(source), None
        except FormatDrift as e:
            skip_usage(source)
            e.state = ExpectHeader(source)
            raise
        return ExpectHeader(source), usage

    def skip_usage(self):
        source = self._consume()
        skipped = skip_usage(source)
        logger.debug('Skipped usage block of %d lines', skipped)
        return ExpectHeader(source)


# a parse session starts out expecting a header
Parser = ExpectHeader


def iter_smaps(lines, predicate=None):
    state = Parser(lines)
    while True:
        state, mapping = state.next_mapping()
        if mapping is None:
            return
        if predicate is not None and not predicate(mapping):
            state = state.skip_usage()
            continue
        state, usage = state.next_usage(strict=True)
        yield mapping, usage


def collect(lines, predicate=None):
    return list(iter_smaps(lines, predicate))


def read_all(path):
    return read_filter(path, None)


def read_filter(path, predicate):
    with open_lines(path) as source:
        return collect(source, predicate)


def read_pid(pid, predicate=None, detailed=True):
    path = "/proc/%d/%s" % (pid, 'smaps' if detailed else 'maps')
    logger.debug('Reading %s', path)
    try:
        return read_filter(path, predicate)
    except OSError as e:
        if e.errno in (errno.ENOENT, errno.ESRCH) and not os.path.exists("/proc/%d" % (pid,)):
            raise DeadProcess('Process %d does not exist' % (pid,))
        raise


def sum_usage(usages):
    totals = dict.fromkeys(USAGE_SIZE_FIELDS, 0)
    thp_eligible = False
    vm_flags = VmFlags(0)
    for usage in usages:
        for name in USAGE_SIZE_FIELDS:
            totals[name] += getattr(usage, name)
        thp_eligible = thp_eligible or usage.thp_eligible
        vm_flags |= usage.vm_flags
    return Usage(thp_eligible=thp_eligible, vm_flags=vm_flags, **totals)
