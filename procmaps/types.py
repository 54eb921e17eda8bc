import enum
from collections import namedtuple


class Permissions(enum.Flag):
    X = 1 << 0
    W = 1 << 1
    R = 1 << 2
    # S and P are categories, a decoded mapping has exactly one of them
    S = 1 << 3
    P = 1 << 4


class VmFlags(enum.Flag):
    # mnemonics from Documentation/filesystems/proc.rst, upper-cased
    RD = 1 << 0   # readable
    WR = 1 << 1   # writable
    EX = 1 << 2   # executable
    SH = 1 << 3   # shared
    MR = 1 << 4   # may read
    MW = 1 << 5   # may write
    ME = 1 << 6   # may execute
    MS = 1 << 7   # may share
    GD = 1 << 8   # stack segment grows down
    PF = 1 << 9   # pure PFN range
    DW = 1 << 10  # disabled write to the mapped file
    LO = 1 << 11  # pages are locked in memory
    IO = 1 << 12  # memory mapped I/O area
    SR = 1 << 13  # sequential read advise provided
    RR = 1 << 14  # random read advise provided
    DC = 1 << 15  # do not copy area on fork
    DE = 1 << 16  # do not expand area on remapping
    AC = 1 << 17  # area is accountable
    NR = 1 << 18  # swap space is not reserved for the area
    HT = 1 << 19  # area uses huge tlb pages
    SF = 1 << 20  # synchronous page faults (since 4.15)
    NL = 1 << 21  # non-linear mapping (removed in 4.0)
    AR = 1 << 22  # architecture specific flag
    WF = 1 << 23  # wipe on fork (since 4.14)
    DD = 1 << 24  # do not include area into core dump
    SD = 1 << 25  # soft-dirty (since 3.13)
    MM = 1 << 26  # mixed map area
    HG = 1 << 27  # huge page advise
    NH = 1 << 28  # no-huge page advise
    MG = 1 << 29  # mergeable advise
    UM = 1 << 30  # userfaultfd missing pages tracking (since 4.3)
    UW = 1 << 31  # userfaultfd wprotect pages tracking (since 4.3)


Device = namedtuple("Device", "major minor".split())


class Mapping(namedtuple("Mapping", "start end permissions offset device inode path".split())):
    __slots__ = ()

    @property
    def size(self):
        return self.end - self.start

    @property
    def mode(self):
        perms = self.permissions
        return ''.join((
            'r' if Permissions.R in perms else '-',
            'w' if Permissions.W in perms else '-',
            'x' if Permissions.X in perms else '-',
            's' if Permissions.S in perms else 'p',
        ))

    def __repr__(self):
        return "Mapping(start=0x{:x}, end=0x{:x}, mode={!r}, offset=0x{:x}, device={!r}, inode={!r}, path={!r})".format(
            self.start, self.end, self.mode, self.offset, self.device, self.inode, self.path)


USAGE_SIZE_FIELDS = (
    'size',
    'kernel_page_size',
    'mmu_page_size',
    'rss',
    'pss',
    'pss_dirty',
    'shared_clean',
    'shared_dirty',
    'private_clean',
    'private_dirty',
    'referenced',
    'anonymous',
    'ksm',
    'lazy_free',
    'anon_huge_pages',
    'shmem_huge_pages',
    'shmem_pmd_mapped',
    'file_pmd_mapped',
    'shared_hugetlb',
    'private_hugetlb',
    'swap',
    'swap_pss',
    'locked',
)

Usage = namedtuple(
    "Usage",
    USAGE_SIZE_FIELDS + ('thp_eligible', 'protection_key', 'vm_flags'),
    defaults=(0,) * len(USAGE_SIZE_FIELDS) + (False, None, VmFlags(0)),
)
