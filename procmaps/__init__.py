from .proc_maps import (
    Parser,
    ExpectHeader,
    ExpectUsage,
    parse_header,
    parse_usage,
    skip_usage,
    iter_smaps,
    collect,
    read_all,
    read_filter,
    read_pid,
    sum_usage,
)
from .types import (
    Mapping,
    Usage,
    Device,
    Permissions,
    VmFlags,
)
from .lines import LineSource, open_lines
from .index import MappingIndex
from .exceptions import (
    ProcMapsException,
    DeadProcess,
    ParserStateError,
    MalformedHeader,
    MalformedUsage,
    FormatDrift,
    UnrecognizedKey,
    UnrecognizedUnit,
    UnrecognizedVmFlag,
)
from . import decode
