import pytest
from hypothesis import given, strategies as st

from rvlab.elfdyn import (
    DT_ADDRNUM,
    DT_ADDRRNGHI,
    DT_ADDRRNGLO,
    DT_EXTRANUM,
    DT_MIPS_NUM,
    DT_PROCNUM,
    DT_VALNUM,
    DT_VALRNGHI,
    DT_VALRNGLO,
    DT_VERSIONTAGNUM,
    ELF_NOTE_ABI,
    NT_GNU_ABI_TAG,
    AuxType,
    CompressionType,
    DynamicFlag,
    DynamicFlag1,
    DynamicTag,
    NoteType,
    dt_addrtagidx,
    dt_extratagidx,
    dt_valtagidx,
    dt_versiontagidx,
)


def _tags_between(low, high):
    return [tag for tag in DynamicTag if low <= tag <= high]


def test_header_values_are_pinned():
    assert DynamicTag(1) is DynamicTag.NEEDED
    assert DynamicTag(0x6FFFFEF5) is DynamicTag.GNU_HASH
    assert AuxType(6) is AuxType.PAGESZ
    assert AuxType(25) is AuxType.RANDOM
    assert NoteType(0x53494749) is NoteType.SIGINFO
    assert CompressionType(2) is CompressionType.ZSTD


def test_aliases_share_members():
    assert DynamicTag(32) is DynamicTag.ENCODING is DynamicTag.PREINIT_ARRAY
    assert NoteType(1) is NoteType.VERSION is NoteType.PRSTATUS
    assert NoteType(2) is NoteType.FPREGSET is NoteType.PRFPREG
    assert ELF_NOTE_ABI == NT_GNU_ABI_TAG
    assert DT_PROCNUM == DT_MIPS_NUM


def test_val_range_tags_index_within_count():
    tags = _tags_between(DT_VALRNGLO, DT_VALRNGHI)
    indices = [dt_valtagidx(tag) for tag in tags]
    assert indices
    assert all(0 <= idx < DT_VALNUM for idx in indices)
    assert len(set(indices)) == len(indices)


def test_val_range_high_maps_to_zero():
    assert dt_valtagidx(DT_VALRNGHI) == 0
    assert dt_valtagidx(DynamicTag.SYMINENT) == 0


def test_addr_range_tags_index_within_count():
    tags = _tags_between(DT_ADDRRNGLO, DT_ADDRRNGHI)
    indices = [dt_addrtagidx(tag) for tag in tags]
    assert len(indices) == DT_ADDRNUM
    assert sorted(indices) == list(range(DT_ADDRNUM))
    assert dt_addrtagidx(DynamicTag.SYMINFO) == 0


def test_version_tags_index_within_count():
    tags = [
        DynamicTag.VERSYM,
        DynamicTag.RELACOUNT,
        DynamicTag.RELCOUNT,
        DynamicTag.FLAGS_1,
        DynamicTag.VERDEF,
        DynamicTag.VERDEFNUM,
        DynamicTag.VERNEED,
        DynamicTag.VERNEEDNUM,
    ]
    indices = [dt_versiontagidx(tag) for tag in tags]
    assert all(0 <= idx < DT_VERSIONTAGNUM for idx in indices)
    assert len(set(indices)) == len(indices)
    assert dt_versiontagidx(DynamicTag.VERNEEDNUM) == 0


def test_extra_tags_index_within_count():
    indices = [dt_extratagidx(DynamicTag.AUXILIARY), dt_extratagidx(DynamicTag.FILTER)]
    assert all(0 <= idx < DT_EXTRANUM for idx in indices)
    assert dt_extratagidx(DynamicTag.FILTER) == 0
    assert indices[0] != indices[1]


@given(st.integers(min_value=0, max_value=DT_VALRNGHI - DT_VALRNGLO))
def test_valtagidx_counts_down(offset):
    assert dt_valtagidx(DT_VALRNGHI - offset) == offset


@given(st.integers(min_value=0, max_value=DT_ADDRRNGHI - DT_ADDRRNGLO))
def test_addrtagidx_counts_down(offset):
    assert dt_addrtagidx(DT_ADDRRNGHI - offset) == offset


@given(st.integers(min_value=0, max_value=(1 << 32) - 1))
def test_extratagidx_is_a_word(tag):
    result = dt_extratagidx(tag)
    assert 0 <= result < (1 << 32)


@given(st.integers(min_value=0, max_value=(1 << 32) - 1))
def test_extratagidx_ignores_top_bit(tag):
    assert dt_extratagidx(tag) == dt_extratagidx(tag ^ (1 << 31))


def test_dynamic_flags_combine():
    combined = DynamicFlag(DynamicFlag.ORIGIN | DynamicFlag.BIND_NOW)
    assert DynamicFlag.ORIGIN in combined
    assert DynamicFlag.BIND_NOW in combined
    assert DynamicFlag.TEXTREL not in combined


def test_dynamic_flag1_bits_are_distinct_powers_of_two():
    values = [member.value for member in DynamicFlag1]
    assert len(set(values)) == len(values)
    assert all(value & (value - 1) == 0 for value in values)
    assert all(DynamicFlag1(member.value) is member for member in DynamicFlag1)
    assert DynamicFlag1(0x08000000) is DynamicFlag1.PIE


@pytest.mark.parametrize("value", [0x7FFFFFFF, 0x6FFFFFFF])
def test_compression_range_markers(value):
    assert CompressionType(value).value == value
    assert CompressionType.LOOS < CompressionType.HIOS < CompressionType.LOPROC


def test_unknown_aux_type_rejected():
    with pytest.raises(ValueError):
        AuxType(28)