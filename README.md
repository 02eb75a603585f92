# rvlab

Small helpers with no dependencies, for working close to the metal from Python.

- `rvlab.printf` is a compact printf-style formatter. It supports:
  - the flags `#`, `0`, `+` and space;
  - width and precision, `*` included;
  - the length modifiers `l`, `z`, `t` and `j`;
  - the conversions `d i u x X p s c n %`.

  It also provides `strtol` and `isspace`, the `Counter` class that receives the result of a `%n` conversion, and the `Syscall` numbers (`WRITE`, `GETPID`, `CLONE`).
- `rvlab.ansi` holds terminal colour escapes. `fg_color` and `bg_color` build 24-bit colour escapes. `format_log` and `format_error` build the `[file,line,func] message` log and error lines.
- `rvlab.intlimits` holds fixed-width integer types (`IntType`, with `INT8` … `UINT64` and their `*_MIN` and `*_MAX` limits). It also has `wrap_signed` and `wrap_unsigned`.
- `rvlab.elfconst` holds ELF identification, file type, machine, section, symbol and segment constants as enums. It also has the `st_*`, `r32_*`, `r64_*` and `m_*` helpers for info fields.
- `rvlab.elfdyn` holds dynamic tags and flags, note types, auxiliary vector types and compression types. It also has the `dt_*tagidx` index helpers.
- `rvlab.elfreloc` holds relocation type enums for x86-64, i386, ARM, AArch64, RISC-V, LoongArch, MIPS, PowerPC, PowerPC64 and SPARC. It also has:
  - `reloc_name`;
  - `ppc64_local_entry_offset`;
  - `arm_eabi_version`.
- `rvlab.elfstructs` parses and packs ELF structures:
  - the identification and file header;
  - section and program headers;
  - symbols and relocations;
  - dynamic entries;
  - note and compression headers;
  - auxiliary vector entries.

  It handles both 32- and 64-bit layouts and both byte orders.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Formatting

```python
from rvlab.printf import sprintf, printf, strtol, Counter

sprintf("%05d|%x|%#x", 42, 255, 255)   # '00042|ff|0xff'
sprintf("%p", 0x1000)                  # '0x1000'
value, end = strtol("  0x1fz", 0)      # (31, 6): value and index past the digits
count = Counter()
sprintf("abc%n", count)                # count.value == 3
printf("[U] pid: %ld\n", 7)            # writes to sys.stdout unless stream= is given
```

Arguments are wrapped to 32 bits, or to 64 bits with a length modifier or `%p`, as C integer arguments would be. A `%s` argument of `None` prints `(null)`. There is no `-` (left-justify) flag: an unknown conversion character is printed as itself.

### Colours and log lines

```python
from rvlab.ansi import fg_color, format_log, CLEAR

print(fg_color(255, 135, 0) + "orange" + CLEAR)
print(format_log("main.c", 10, "main", "hello"), end="")
```

### Reading ELF headers

```python
from rvlab.elfstructs import FileHeader, iter_program_headers, iter_section_headers
from rvlab.elfconst import SegmentType

with open("program.elf", "rb") as f:
    data = f.read()
header = FileHeader.parse(data)
for phdr in iter_program_headers(data, header):
    if phdr.type == SegmentType.LOAD:
        print(hex(phdr.vaddr), phdr.memsz)
for shdr in iter_section_headers(data, header):
    print(shdr.type, shdr.size)
```

Every structure has `parse(...)` and `pack(...)`. They take a `Layout` that names the class and byte order, apart from `Ident` and `FileHeader`, which carry their own layout. Malformed or truncated input raises `rvlab.elfstructs.ElfFormatError`.

### Relocation names

```python
from rvlab.elfconst import Machine
from rvlab.elfreloc import reloc_name

reloc_name(Machine.RISCV, 2)   # 'R_RISCV_64'
```

## What it does not do

`rvlab` is a library only, with no command-line program. Its ELF support reads and writes individual headers and table entries. It does not:
- resolve section names from string tables;
- apply relocations;
- load or run programs.

`printf` writes formatted text to a Python stream and makes no system calls.