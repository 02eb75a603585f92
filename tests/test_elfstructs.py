import pytest
from hypothesis import given
from hypothesis import strategies as st

from rvlab.elfconst import (
    ELFMAG,
    EI_NIDENT,
    ElfClass,
    ElfData,
    FileType,
    Machine,
    SegmentType,
    SymbolBinding,
    SymbolType,
)
from rvlab.elfstructs import (
    AuxEntry,
    CompressionHeader,
    DynamicEntry,
    ElfFormatError,
    FileHeader,
    Ident,
    Layout,
    NoteHeader,
    ProgramHeader,
    Relocation,
    SectionHeader,
    Symbol,
    iter_program_headers,
    iter_section_headers,
)

LAYOUTS = [
    Layout(ElfClass.CLASS32, ElfData.LSB),
    Layout(ElfClass.CLASS32, ElfData.MSB),
    Layout(ElfClass.CLASS64, ElfData.LSB),
    Layout(ElfClass.CLASS64, ElfData.MSB),
]

u32 = st.integers(0, 2**32 - 1)
u16 = st.integers(0, 2**16 - 1)
u8 = st.integers(0, 255)


def test_file_header_sizes_match_spec():
    assert Layout(ElfClass.CLASS32).struct_size("ehdr") == 52
    assert Layout(ElfClass.CLASS64).struct_size("ehdr") == 64


@pytest.mark.parametrize("layout", LAYOUTS)
def test_ident_occupies_start_of_file_header(layout):
    assert layout.struct_size("ehdr") - EI_NIDENT > 0
    assert layout.struct_size("nhdr") == NoteHeader().pack(layout).__len__()


def test_unknown_struct_kind():
    with pytest.raises(ValueError):
        Layout().struct_size("bogus")


def test_layout_rejects_none_class():
    with pytest.raises(ElfFormatError):
        Layout(ElfClass.NONE, ElfData.LSB)
    with pytest.raises(ElfFormatError):
        Layout(ElfClass.CLASS32, 7)


def test_ident_pack_layout():
    packed = Ident(ElfClass.CLASS64, ElfData.LSB).pack()
    assert len(packed) == EI_NIDENT
    assert packed[:4] == ELFMAG
    assert packed[4] == ElfClass.CLASS64
    assert packed[5] == ElfData.LSB
    assert packed[9:] == b"\0" * 7


@pytest.mark.parametrize("layout", LAYOUTS)
def test_ident_round_trip(layout):
    ident = Ident(layout.elf_class, layout.data, 1, 3, 0)
    assert Ident.parse(ident.pack()) == ident
    assert Ident.parse(ident.pack()).layout == layout


def test_ident_bad_magic():
    data = bytearray(Ident().pack())
    data[1] = ord("X")
    with pytest.raises(ElfFormatError):
        Ident.parse(bytes(data))


def test_ident_bad_class():
    data = bytearray(Ident().pack())
    data[4] = 9
    with pytest.raises(ElfFormatError):
        Ident.parse(bytes(data))


def test_ident_too_short():
    with pytest.raises(ElfFormatError):
        Ident.parse(ELFMAG)


@pytest.mark.parametrize("layout", LAYOUTS)
def test_file_header_round_trip(layout):
    header = FileHeader(
        Ident(layout.elf_class, layout.data),
        type=FileType.EXEC,
        machine=Machine.RISCV,
        entry=0x10000,
        phoff=layout.struct_size("ehdr"),
        ehsize=layout.struct_size("ehdr"),
        phentsize=layout.struct_size("phdr"),
        phnum=1,
    )
    packed = header.pack()
    assert len(packed) == layout.struct_size("ehdr")
    assert FileHeader.parse(packed) == header


def test_file_header_truncated():
    packed = FileHeader().pack()
    with pytest.raises(ElfFormatError):
        FileHeader.parse(packed[:-1])


def test_pack_value_out_of_range():
    with pytest.raises(ElfFormatError):
        SectionHeader(flags=2**32).pack(Layout(ElfClass.CLASS32))


@pytest.mark.parametrize("layout", LAYOUTS)
@given(values=st.tuples(u32, u32, u32, u32, u32, u32, u32, u32, u32, u32))
def test_section_header_round_trip(layout, values):
    section = SectionHeader(*values)
    assert SectionHeader.parse(section.pack(layout), layout) == section


@pytest.mark.parametrize("layout", LAYOUTS)
@given(values=st.tuples(u32, u32, u32, u32, u32, u32, u32, u32))
def test_program_header_round_trip(layout, values):
    segment = ProgramHeader(*values)
    packed = segment.pack(layout)
    assert len(packed) == layout.struct_size("phdr")
    assert ProgramHeader.parse(packed, layout) == segment


@pytest.mark.parametrize("layout", LAYOUTS)
@given(name=u32, value=u32, size=u32, info=u8, other=u8, shndx=u16)
def test_symbol_round_trip(layout, name, value, size, info, other, shndx):
    symbol = Symbol(name, value, size, info, other, shndx)
    assert Symbol.parse(symbol.pack(layout), layout) == symbol


def test_symbol_kind_accessors():
    symbol = Symbol.with_kind(SymbolBinding.GLOBAL, SymbolType.FUNC, other=2)
    assert symbol.bind == SymbolBinding.GLOBAL
    assert symbol.type == SymbolType.FUNC
    assert symbol.visibility == 2


@pytest.mark.parametrize("layout", LAYOUTS)
def test_relocation_round_trip(layout):
    rel = Relocation(0x1000, 0x203)
    rela = Relocation(0x1000, 0x203, -8)
    assert Relocation.parse(rel.pack(layout), layout) == rel
    assert Relocation.parse(rela.pack(layout), layout, with_addend=True) == rela
    assert len(rela.pack(layout)) == layout.struct_size("rela")
    assert len(rel.pack(layout)) == layout.struct_size("rel")


@pytest.mark.parametrize("layout", LAYOUTS)
def test_dynamic_and_aux_round_trip(layout):
    dyn = DynamicEntry(-5, 42)
    aux = AuxEntry(6, 4096)
    assert DynamicEntry.parse(dyn.pack(layout), layout) == dyn
    assert AuxEntry.parse(aux.pack(layout), layout) == aux


@pytest.mark.parametrize("layout", LAYOUTS)
def test_compression_header_round_trip(layout):
    chdr = CompressionHeader(1, 1234, 8)
    assert CompressionHeader.parse(chdr.pack(layout), layout) == chdr


def test_note_byte_order_swaps_each_word():
    note = NoteHeader(4, 16, 3)
    little = note.pack(Layout(ElfClass.CLASS64, ElfData.LSB))
    big = note.pack(Layout(ElfClass.CLASS64, ElfData.MSB))
    words = [little[i:i + 4][::-1] for i in range(0, len(little), 4)]
    assert b"".join(words) == big


def test_parse_at_offset_and_negative_offset():
    layout = Layout()
    entry = DynamicEntry(1, 7)
    data = b"\xff" * 3 + entry.pack(layout)
    assert DynamicEntry.parse(data, layout, 3) == entry
    with pytest.raises(ElfFormatError):
        DynamicEntry.parse(data, layout, -1)


def _build_file(layout, segments, sections, shnum=None, phnum=None):
    ehsize = layout.struct_size("ehdr")
    phentsize = layout.struct_size("phdr")
    shentsize = layout.struct_size("shdr")
    phoff = ehsize
    shoff = phoff + phentsize * len(segments)
    header = FileHeader(
        Ident(layout.elf_class, layout.data),
        type=FileType.EXEC,
        phoff=phoff if segments else 0,
        shoff=shoff if sections else 0,
        ehsize=ehsize,
        phentsize=phentsize,
        phnum=len(segments) if phnum is None else phnum,
        shentsize=shentsize,
        shnum=len(sections) if shnum is None else shnum,
    )
    body = b"".join(s.pack(layout) for s in segments) + b"".join(
        s.pack(layout) for s in sections
    )
    return header, header.pack() + body


@pytest.mark.parametrize("layout", LAYOUTS)
def test_iterate_headers(layout):
    segments = [
        ProgramHeader(SegmentType.LOAD, 5, 0, 0x1000, 0x1000, 0x20, 0x30, 0x1000),
        ProgramHeader(SegmentType.NOTE, 4, 0x40, 0, 0, 8, 8, 4),
    ]
    sections = [SectionHeader(), SectionHeader(name=1, type=1, size=9)]
    header, data = _build_file(layout, segments, sections)
    parsed = FileHeader.parse(data)
    assert list(iter_program_headers(data, parsed)) == segments
    assert list(iter_section_headers(data, parsed)) == sections


def test_extended_section_count():
    layout = Layout()
    sections = [SectionHeader(size=3), SectionHeader(type=1), SectionHeader(type=3)]
    header, data = _build_file(layout, [], sections, shnum=0)
    assert list(iter_section_headers(data, header)) == sections


def test_no_tables_yield_nothing():
    header, data = _build_file(Layout(), [], [])
    assert list(iter_program_headers(data, header)) == []
    assert list(iter_section_headers(data, header)) == []


def test_small_entry_size_rejected():
    layout = Layout()
    header, data = _build_file(layout, [ProgramHeader()], [])
    header.phentsize = 4
    with pytest.raises(ElfFormatError):
        list(iter_program_headers(data, header))


def test_truncated_table_rejected():
    layout = Layout()
    header, data = _build_file(layout, [ProgramHeader(), ProgramHeader()], [])
    with pytest.raises(ElfFormatError):
        list(iter_program_headers(data[:-1], header))