import pytest
import procmaps
from procmaps.decode import (
    parse_hex,
    parse_decimal,
    parse_permissions,
    parse_device,
    parse_sized_value,
    parse_vm_flags,
)
from procmaps import Permissions, VmFlags, Device


def test_parse_hex():
    assert parse_hex('00400000') == 0x400000
    assert parse_hex('7ffd1C5e7000') == 0x7ffd1c5e7000


def test_parse_hex_is_strict():
    assert parse_hex('0x10') is None
    assert parse_hex('+10') is None
    assert parse_hex('-10') is None
    assert parse_hex('1_0') is None
    assert parse_hex('') is None
    assert parse_hex('10g') is None


def test_parse_decimal():
    assert parse_decimal('173521') == 173521
    assert parse_decimal('ff') is None
    assert parse_decimal('-1') is None


def test_parse_permissions():
    assert parse_permissions('r-xp') == Permissions.R | Permissions.X | Permissions.P
    assert parse_permissions('rw-s') == Permissions.R | Permissions.W | Permissions.S
    assert parse_permissions('---p') == Permissions.P


def test_parse_permissions_rejects_bad_tokens():
    assert parse_permissions('rwxX') is None
    assert parse_permissions('wrxp') is None
    assert parse_permissions('rwx-') is None
    assert parse_permissions('rwx') is None
    assert parse_permissions('rwxps') is None


def test_parse_device():
    assert parse_device('08:02') == Device(major=8, minor=2)
    assert parse_device('fd:1a') == Device(0xfd, 0x1a)
    assert parse_device('0802') is None
    assert parse_device('08:zz') is None


def test_parse_sized_value_units():
    assert parse_sized_value('Size: 72 kB') == ('Size', 73728)
    assert parse_sized_value('Size: 3 mB') == ('Size', 3 << 20)
    assert parse_sized_value('Size: 3 gB') == ('Size', 3 << 30)
    assert parse_sized_value('Size: 3 tB') == ('Size', 3 << 40)


def test_parse_sized_value_without_unit():
    assert parse_sized_value('THPeligible:    1') == ('THPeligible', 1)
    assert parse_sized_value('ProtectionKey:         0') == ('ProtectionKey', 0)


def test_parse_sized_value_grammar_failures():
    assert parse_sized_value('Size: 72 kB extra') is None
    assert parse_sized_value('Size:') is None
    assert parse_sized_value('') is None
    assert parse_sized_value('Size: many kB') is None


def test_parse_sized_value_unknown_unit():
    with pytest.raises(procmaps.UnrecognizedUnit) as excinfo:
        parse_sized_value('Size: 72 KB')
    assert excinfo.value.unit == 'KB'


def test_parse_vm_flags():
    assert parse_vm_flags('rd ex mr me') == VmFlags.RD | VmFlags.EX | VmFlags.MR | VmFlags.ME
    assert parse_vm_flags('uw') == VmFlags.UW


def test_parse_vm_flags_empty():
    assert parse_vm_flags('') == VmFlags(0)
    assert parse_vm_flags('   ') == VmFlags(0)


def test_parse_vm_flags_unknown_mnemonic():
    try:
        parse_vm_flags('rd zz')
    except procmaps.UnrecognizedVmFlag as e:
        assert e.flag == 'zz'
        assert isinstance(e, procmaps.FormatDrift)
        return
    assert False, "should have raised procmaps.UnrecognizedVmFlag"


def test_parse_vm_flags_is_case_sensitive():
    with pytest.raises(procmaps.UnrecognizedVmFlag):
        parse_vm_flags('RD')


def test_vm_flags_vocabulary_is_closed():
    assert len(procmaps.decode.VM_FLAG_MNEMONICS) == 32
    assert parse_vm_flags(' '.join(procmaps.decode.VM_FLAG_MNEMONICS)).value == 0xffffffff


def test_unrecognized_vm_flag_hides_lookup_error():
    with pytest.raises(procmaps.UnrecognizedVmFlag) as excinfo:
        parse_vm_flags('zz')
    assert excinfo.value.__suppress_context__
