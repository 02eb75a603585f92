"""Binary layouts of the ELF file structures, for 32- and 64-bit objects of either byte order."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterator, Optional, Tuple

from rvlab.elfconst import (
    EI_CLASS,
    EI_DATA,
    EI_NIDENT,
    EI_OSABI,
    EI_ABIVERSION,
    EI_VERSION,
    ELFMAG,
    EV_CURRENT,
    PN_XNUM,
    SELFMAG,
    ElfClass,
    ElfData,
    st_bind,
    st_info,
    st_type,
    st_visibility,
)


class ElfFormatError(ValueError):
    """Raised for data that is not a well-formed ELF structure."""


# Field formats for each structure, 32-bit first, 64-bit second.
_FORMATS: Dict[str, Tuple[str, str]] = {
    "ehdr": ("16sHHIIIIIHHHHHH", "16sHHIQQQIHHHHHH"),
    "shdr": ("IIIIIIIIII", "IIQQQQIIQQ"),
    "phdr": ("IIIIIIII", "IIQQQQQQ"),
    "sym": ("IIIBBH", "IBBHQQ"),
    "rel": ("II", "QQ"),
    "rela": ("IIi", "QQq"),
    "dyn": ("iI", "qQ"),
    "nhdr": ("III", "III"),
    "chdr": ("III", "IIQQ"),
    "auxv": ("II", "QQ"),
}


@lru_cache(maxsize=None)
def _compiled(fmt: str) -> struct.Struct:
    return struct.Struct(fmt)


@dataclass(frozen=True)
class Layout:
    """Word size and byte order of an ELF object."""

    elf_class: ElfClass = ElfClass.CLASS64
    data: ElfData = ElfData.LSB

    def __post_init__(self) -> None:
        try:
            elf_class = ElfClass(self.elf_class)
            data = ElfData(self.data)
        except ValueError as exc:
            raise ElfFormatError(str(exc)) from None
        if elf_class is ElfClass.NONE:
            raise ElfFormatError("ELF class must be 32- or 64-bit")
        if data is ElfData.NONE:
            raise ElfFormatError("ELF data encoding must be LSB or MSB")
        object.__setattr__(self, "elf_class", elf_class)
        object.__setattr__(self, "data", data)

    @property
    def is64(self) -> bool:
        return self.elf_class is ElfClass.CLASS64

    def _struct(self, kind: str) -> struct.Struct:
        try:
            fmt32, fmt64 = _FORMATS[kind]
        except KeyError:
            raise ValueError(f"unknown ELF structure {kind!r}") from None
        prefix = "<" if self.data is ElfData.LSB else ">"
        return _compiled(prefix + (fmt64 if self.is64 else fmt32))

    def struct_size(self, kind: str) -> int:
        """Size in bytes of the structure ``kind`` (``"ehdr"``, ``"shdr"``, ``"sym"``...)."""
        return self._struct(kind).size

    def _unpack(self, kind: str, data: bytes, offset: int) -> tuple:
        if offset < 0:
            raise ElfFormatError(f"negative offset {offset}")
        try:
            return self._struct(kind).unpack_from(data, offset)
        except struct.error:
            raise ElfFormatError(f"truncated {kind} at offset {offset}") from None

    def _pack(self, kind: str, *values: object) -> bytes:
        try:
            return self._struct(kind).pack(*values)
        except struct.error as exc:
            raise ElfFormatError(f"cannot encode {kind}: {exc}") from None


@dataclass(frozen=True)
class Ident:
    """The ``e_ident`` bytes at the start of every ELF file."""

    elf_class: ElfClass = ElfClass.CLASS64
    data: ElfData = ElfData.LSB
    version: int = EV_CURRENT
    osabi: int = 0
    abiversion: int = 0

    @property
    def layout(self) -> Layout:
        return Layout(self.elf_class, self.data)

    @classmethod
    def parse(cls, data: bytes) -> "Ident":
        if len(data) < EI_NIDENT:
            raise ElfFormatError("data too short for an ELF identification")
        if bytes(data[:SELFMAG]) != ELFMAG:
            raise ElfFormatError("bad ELF magic")
        layout = Layout(data[EI_CLASS], data[EI_DATA])
        return cls(
            layout.elf_class,
            layout.data,
            data[EI_VERSION],
            data[EI_OSABI],
            data[EI_ABIVERSION],
        )

    def pack(self) -> bytes:
        fields = (self.elf_class, self.data, self.version, self.osabi, self.abiversion)
        try:
            head = ELFMAG + bytes(int(value) for value in fields)
        except ValueError as exc:
            raise ElfFormatError(f"cannot encode identification: {exc}") from None
        return head.ljust(EI_NIDENT, b"\0")


@dataclass
class FileHeader:
    """The ELF file header."""

    ident: Ident = field(default_factory=Ident)
    type: int = 0
    machine: int = 0
    version: int = EV_CURRENT
    entry: int = 0
    phoff: int = 0
    shoff: int = 0
    flags: int = 0
    ehsize: int = 0
    phentsize: int = 0
    phnum: int = 0
    shentsize: int = 0
    shnum: int = 0
    shstrndx: int = 0

    @property
    def layout(self) -> Layout:
        return self.ident.layout

    @classmethod
    def parse(cls, data: bytes) -> "FileHeader":
        ident = Ident.parse(data)
        values = ident.layout._unpack("ehdr", data, 0)
        return cls(ident, *values[1:])

    def pack(self) -> bytes:
        return self.layout._pack(
            "ehdr",
            self.ident.pack(),
            self.type,
            self.machine,
            self.version,
            self.entry,
            self.phoff,
            self.shoff,
            self.flags,
            self.ehsize,
            self.phentsize,
            self.phnum,
            self.shentsize,
            self.shnum,
            self.shstrndx,
        )


@dataclass
class SectionHeader:
    """A section header table entry."""

    name: int = 0
    type: int = 0
    flags: int = 0
    addr: int = 0
    offset: int = 0
    size: int = 0
    link: int = 0
    info: int = 0
    addralign: int = 0
    entsize: int = 0

    @classmethod
    def parse(cls, data: bytes, layout: Layout, offset: int = 0) -> "SectionHeader":
        return cls(*layout._unpack("shdr", data, offset))

    def pack(self, layout: Layout) -> bytes:
        return layout._pack(
            "shdr",
            self.name,
            self.type,
            self.flags,
            self.addr,
            self.offset,
            self.size,
            self.link,
            self.info,
            self.addralign,
            self.entsize,
        )


@dataclass
class ProgramHeader:
    """A program header table entry describing one segment."""

    type: int = 0
    flags: int = 0
    offset: int = 0
    vaddr: int = 0
    paddr: int = 0
    filesz: int = 0
    memsz: int = 0
    align: int = 0

    @classmethod
    def parse(cls, data: bytes, layout: Layout, offset: int = 0) -> "ProgramHeader":
        values = layout._unpack("phdr", data, offset)
        if layout.is64:
            type_, flags, off, vaddr, paddr, filesz, memsz, align = values
        else:
            type_, off, vaddr, paddr, filesz, memsz, flags, align = values
        return cls(type_, flags, off, vaddr, paddr, filesz, memsz, align)

    def pack(self, layout: Layout) -> bytes:
        if layout.is64:
            values = (self.type, self.flags, self.offset, self.vaddr,
                      self.paddr, self.filesz, self.memsz, self.align)
        else:
            values = (self.type, self.offset, self.vaddr, self.paddr,
                      self.filesz, self.memsz, self.flags, self.align)
        return layout._pack("phdr", *values)


@dataclass
class Symbol:
    """A symbol table entry."""

    name: int = 0
    value: int = 0
    size: int = 0
    info: int = 0
    other: int = 0
    shndx: int = 0

    @property
    def bind(self) -> int:
        return st_bind(self.info)

    @property
    def type(self) -> int:
        return st_type(self.info)

    @property
    def visibility(self) -> int:
        return st_visibility(self.other)

    @classmethod
    def with_kind(cls, bind: int, type_: int, **fields: int) -> "Symbol":
        """Build a symbol whose ``info`` combines ``bind`` and ``type_``."""
        return cls(info=st_info(bind, type_), **fields)

    @classmethod
    def parse(cls, data: bytes, layout: Layout, offset: int = 0) -> "Symbol":
        values = layout._unpack("sym", data, offset)
        if layout.is64:
            name, info, other, shndx, value, size = values
        else:
            name, value, size, info, other, shndx = values
        return cls(name, value, size, info, other, shndx)

    def pack(self, layout: Layout) -> bytes:
        if layout.is64:
            values = (self.name, self.info, self.other, self.shndx, self.value, self.size)
        else:
            values = (self.name, self.value, self.size, self.info, self.other, self.shndx)
        return layout._pack("sym", *values)


@dataclass
class Relocation:
    """A relocation entry; ``addend`` is ``None`` for entries without one."""

    offset: int = 0
    info: int = 0
    addend: Optional[int] = None

    @classmethod
    def parse(
        cls, data: bytes, layout: Layout, offset: int = 0, with_addend: bool = False
    ) -> "Relocation":
        if with_addend:
            return cls(*layout._unpack("rela", data, offset))
        r_offset, r_info = layout._unpack("rel", data, offset)
        return cls(r_offset, r_info)

    def pack(self, layout: Layout) -> bytes:
        if self.addend is None:
            return layout._pack("rel", self.offset, self.info)
        return layout._pack("rela", self.offset, self.info, self.addend)


@dataclass
class DynamicEntry:
    """An entry of the dynamic section: a tag and its value or address."""

    tag: int = 0
    value: int = 0

    @classmethod
    def parse(cls, data: bytes, layout: Layout, offset: int = 0) -> "DynamicEntry":
        return cls(*layout._unpack("dyn", data, offset))

    def pack(self, layout: Layout) -> bytes:
        return layout._pack("dyn", self.tag, self.value)


@dataclass
class NoteHeader:
    """The fixed header in front of a note's name and descriptor."""

    namesz: int = 0
    descsz: int = 0
    type: int = 0

    @classmethod
    def parse(cls, data: bytes, layout: Layout, offset: int = 0) -> "NoteHeader":
        return cls(*layout._unpack("nhdr", data, offset))

    def pack(self, layout: Layout) -> bytes:
        return layout._pack("nhdr", self.namesz, self.descsz, self.type)


@dataclass
class CompressionHeader:
    """The header at the start of a compressed section."""

    type: int = 0
    size: int = 0
    addralign: int = 0
    reserved: int = 0

    @classmethod
    def parse(cls, data: bytes, layout: Layout, offset: int = 0) -> "CompressionHeader":
        values = layout._unpack("chdr", data, offset)
        if layout.is64:
            type_, reserved, size, addralign = values
            return cls(type_, size, addralign, reserved)
        return cls(*values)

    def pack(self, layout: Layout) -> bytes:
        if layout.is64:
            return layout._pack("chdr", self.type, self.reserved, self.size, self.addralign)
        return layout._pack("chdr", self.type, self.size, self.addralign)


@dataclass
class AuxEntry:
    """An auxiliary vector entry."""

    type: int = 0
    value: int = 0

    @classmethod
    def parse(cls, data: bytes, layout: Layout, offset: int = 0) -> "AuxEntry":
        return cls(*layout._unpack("auxv", data, offset))

    def pack(self, layout: Layout) -> bytes:
        return layout._pack("auxv", self.type, self.value)


def _check_entsize(layout: Layout, kind: str, entsize: int) -> None:
    needed = layout.struct_size(kind)
    if entsize < needed:
        raise ElfFormatError(f"{kind} entry size {entsize} is smaller than {needed}")


def iter_section_headers(data: bytes, header: FileHeader) -> Iterator[SectionHeader]:
    """Yield every section header of the file, following extended numbering."""
    if header.shoff == 0:
        return
    layout = header.layout
    count = header.shnum
    if count == 0:
        first = SectionHeader.parse(data, layout, header.shoff)
        count = first.size
    if count == 0:
        return
    _check_entsize(layout, "shdr", header.shentsize)
    for index in range(count):
        yield SectionHeader.parse(data, layout, header.shoff + index * header.shentsize)


def iter_program_headers(data: bytes, header: FileHeader) -> Iterator[ProgramHeader]:
    """Yield every program header of the file, following extended numbering."""
    if header.phoff == 0:
        return
    layout = header.layout
    count = header.phnum
    if count == PN_XNUM and header.shoff != 0:
        count = SectionHeader.parse(data, layout, header.shoff).info
    if count == 0:
        return
    _check_entsize(layout, "phdr", header.phentsize)
    for index in range(count):
        yield ProgramHeader.parse(data, layout, header.phoff + index * header.phentsize)