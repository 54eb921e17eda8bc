import re
import functools
import operator

from .types import Permissions, VmFlags, Device
from .exceptions import UnrecognizedUnit, UnrecognizedVmFlag


_HEX_RE = re.compile(r'[0-9a-fA-F]+')
_DECIMAL_RE = re.compile(r'[0-9]+')
# fields are separated by ASCII whitespace only, str.split would also break on \x1c-\x1f
ASCII_WHITESPACE = ' \t\n\x0c\r'
_ASCII_WHITESPACE_RE = re.compile('[' + ASCII_WHITESPACE + ']+')

UNIT_SHIFTS = {
    'kB': 10,
    'mB': 20,
    'gB': 30,
    'tB': 40,
}

VM_FLAG_MNEMONICS = {flag.name.lower(): flag for flag in VmFlags}


def split_fields(data, maxsplit=0):
    data = data.strip(ASCII_WHITESPACE)
    if not data:
        return []
    return _ASCII_WHITESPACE_RE.split(data, maxsplit)


def parse_hex(token):
    if _HEX_RE.fullmatch(token) is None:
        return None
    return int(token, 16)


def parse_decimal(token):
    if _DECIMAL_RE.fullmatch(token) is None:
        return None
    return int(token)


def parse_permissions(token):
    if len(token) != 4:
        return None
    read, write, execute, shared = token
    perms = Permissions(0)
    if read == 'r':
        perms |= Permissions.R
    elif read != '-':
        return None
    if write == 'w':
        perms |= Permissions.W
    elif write != '-':
        return None
    if execute == 'x':
        perms |= Permissions.X
    elif execute != '-':
        return None
    if shared == 's':
        perms |= Permissions.S
    elif shared == 'p':
        perms |= Permissions.P
    else:
        return None
    return perms


def parse_device(token):
    major, sep, minor = token.partition(':')
    if not sep:
        return None
    major = parse_hex(major)
    minor = parse_hex(minor)
    if major is None or minor is None:
        return None
    return Device(major, minor)


def parse_sized_value(line):
    tokens = split_fields(line)
    if len(tokens) < 2:
        return None
    key = tokens[0].rstrip(':')
    shift = 0
    if len(tokens) > 2:
        unit = tokens[2]
        if unit not in UNIT_SHIFTS:
            raise UnrecognizedUnit(unit)
        shift = UNIT_SHIFTS[unit]
    if len(tokens) > 3:
        return None
    value = parse_decimal(tokens[1])
    if value is None:
        return None
    return key, value << shift


def parse_vm_flags(data):
    flags = []
    for mnemonic in split_fields(data):
        try:
            flags.append(VM_FLAG_MNEMONICS[mnemonic])
        except KeyError:
            raise UnrecognizedVmFlag(mnemonic) from None
    return functools.reduce(operator.or_, flags, VmFlags(0))
