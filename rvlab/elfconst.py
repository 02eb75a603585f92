"""ELF identification, header, section, symbol and segment constants."""

from __future__ import annotations

from enum import IntEnum, IntFlag

from rvlab.intlimits import wrap_unsigned

EI_NIDENT = 16

EI_MAG0 = 0
EI_MAG1 = 1
EI_MAG2 = 2
EI_MAG3 = 3
ELFMAG0 = 0x7F
ELFMAG1 = ord("E")
ELFMAG2 = ord("L")
ELFMAG3 = ord("F")
ELFMAG = b"\x7fELF"
SELFMAG = 4

EI_CLASS = 4
EI_DATA = 5
EI_VERSION = 6
EI_OSABI = 7
EI_ABIVERSION = 8
EI_PAD = 9

EV_NONE = 0
EV_CURRENT = 1
EV_NUM = 2

ELFCLASSNUM = 3
ELFDATANUM = 3

ET_NUM = 5
ET_LOOS = 0xFE00
ET_HIOS = 0xFEFF
ET_LOPROC = 0xFF00
ET_HIPROC = 0xFFFF

EM_NUM = 259

SHN_UNDEF = 0
SHN_LORESERVE = 0xFF00
SHN_LOPROC = 0xFF00
SHN_BEFORE = 0xFF00
SHN_AFTER = 0xFF01
SHN_HIPROC = 0xFF1F
SHN_LOOS = 0xFF20
SHN_HIOS = 0xFF3F
SHN_ABS = 0xFFF1
SHN_COMMON = 0xFFF2
SHN_XINDEX = 0xFFFF
SHN_HIRESERVE = 0xFFFF

SHT_NUM = 20
SHT_LOOS = 0x60000000
SHT_LOSUNW = 0x6FFFFFFA
SHT_HISUNW = 0x6FFFFFFF
SHT_HIOS = 0x6FFFFFFF
SHT_LOPROC = 0x70000000
SHT_HIPROC = 0x7FFFFFFF
SHT_LOUSER = 0x80000000
SHT_HIUSER = 0x8FFFFFFF

GRP_COMDAT = 0x1

STB_NUM = 3
STT_NUM = 7
STN_UNDEF = 0

SYMINFO_BT_SELF = 0xFFFF
SYMINFO_BT_PARENT = 0xFFFE
SYMINFO_BT_LOWRESERVE = 0xFF00
SYMINFO_FLG_DIRECT = 0x0001
SYMINFO_FLG_PASSTHRU = 0x0002
SYMINFO_FLG_COPY = 0x0004
SYMINFO_FLG_LAZYLOAD = 0x0008
SYMINFO_NONE = 0
SYMINFO_CURRENT = 1
SYMINFO_NUM = 2

PT_NUM = 8
PT_LOOS = 0x60000000
PT_LOSUNW = 0x6FFFFFFA
PT_HISUNW = 0x6FFFFFFF
PT_HIOS = 0x6FFFFFFF
PT_LOPROC = 0x70000000
PT_HIPROC = 0x7FFFFFFF

PN_XNUM = 0xFFFF

VER_DEF_NONE = 0
VER_DEF_CURRENT = 1
VER_DEF_NUM = 2
VER_FLG_BASE = 0x1
VER_FLG_WEAK = 0x2
VER_NDX_LOCAL = 0
VER_NDX_GLOBAL = 1
VER_NDX_LORESERVE = 0xFF00
VER_NDX_ELIMINATE = 0xFF01
VER_NEED_NONE = 0
VER_NEED_CURRENT = 1
VER_NEED_NUM = 2


class ElfClass(IntEnum):
    """File class: 32- or 64-bit objects."""

    NONE = 0
    CLASS32 = 1
    CLASS64 = 2


class ElfData(IntEnum):
    """Data encoding of the processor-specific fields."""

    NONE = 0
    LSB = 1
    MSB = 2


class OsAbi(IntEnum):
    """Operating system and ABI the object targets."""

    NONE = 0
    SYSV = 0
    HPUX = 1
    NETBSD = 2
    LINUX = 3
    GNU = 3
    SOLARIS = 6
    AIX = 7
    IRIX = 8
    FREEBSD = 9
    TRU64 = 10
    MODESTO = 11
    OPENBSD = 12
    ARM = 97
    STANDALONE = 255


class FileType(IntEnum):
    """Object file type."""

    NONE = 0
    REL = 1
    EXEC = 2
    DYN = 3
    CORE = 4


class Machine(IntEnum):
    """Target architecture."""

    NONE = 0
    M32 = 1
    SPARC = 2
    I386 = 3
    M68K = 4
    M88K = 5
    I860 = 7
    MIPS = 8
    S370 = 9
    MIPS_RS3_LE = 10
    PARISC = 15
    VPP500 = 17
    SPARC32PLUS = 18
    I960 = 19
    PPC = 20
    PPC64 = 21
    S390 = 22
    V800 = 36
    FR20 = 37
    RH32 = 38
    RCE = 39
    ARM = 40
    FAKE_ALPHA = 41
    SH = 42
    SPARCV9 = 43
    TRICORE = 44
    ARC = 45
    H8_300 = 46
    H8_300H = 47
    H8S = 48
    H8_500 = 49
    IA_64 = 50
    MIPS_X = 51
    COLDFIRE = 52
    M68HC12 = 53
    MMA = 54
    PCP = 55
    NCPU = 56
    NDR1 = 57
    STARCORE = 58
    ME16 = 59
    ST100 = 60
    TINYJ = 61
    X86_64 = 62
    PDSP = 63
    FX66 = 66
    ST9PLUS = 67
    ST7 = 68
    M68HC16 = 69
    M68HC11 = 70
    M68HC08 = 71
    M68HC05 = 72
    SVX = 73
    ST19 = 74
    VAX = 75
    CRIS = 76
    JAVELIN = 77
    FIREPATH = 78
    ZSP = 79
    MMIX = 80
    HUANY = 81
    PRISM = 82
    AVR = 83
    FR30 = 84
    D10V = 85
    D30V = 86
    V850 = 87
    M32R = 88
    MN10300 = 89
    MN10200 = 90
    PJ = 91
    OR1K = 92
    OPENRISC = 92
    ARC_A5 = 93
    ARC_COMPACT = 93
    XTENSA = 94
    VIDEOCORE = 95
    TMM_GPP = 96
    NS32K = 97
    TPC = 98
    SNP1K = 99
    ST200 = 100
    IP2K = 101
    MAX = 102
    CR = 103
    F2MC16 = 104
    MSP430 = 105
    BLACKFIN = 106
    SE_C33 = 107
    SEP = 108
    ARCA = 109
    UNICORE = 110
    EXCESS = 111
    DXP = 112
    ALTERA_NIOS2 = 113
    CRX = 114
    XGATE = 115
    C166 = 116
    M16C = 117
    DSPIC30F = 118
    CE = 119
    M32C = 120
    TSK3000 = 131
    RS08 = 132
    SHARC = 133
    ECOG2 = 134
    SCORE7 = 135
    DSP24 = 136
    VIDEOCORE3 = 137
    LATTICEMICO32 = 138
    SE_C17 = 139
    TI_C6000 = 140
    TI_C2000 = 141
    TI_C5500 = 142
    TI_ARP32 = 143
    TI_PRU = 144
    MMDSP_PLUS = 160
    CYPRESS_M8C = 161
    R32C = 162
    TRIMEDIA = 163
    QDSP6 = 164
    I8051 = 165
    STXP7X = 166
    NDS32 = 167
    ECOG1X = 168
    MAXQ30 = 169
    XIMO16 = 170
    MANIK = 171
    CRAYNV2 = 172
    RX = 173
    METAG = 174
    MCST_ELBRUS = 175
    ECOG16 = 176
    CR16 = 177
    ETPU = 178
    SLE9X = 179
    L10M = 180
    K10M = 181
    AARCH64 = 183
    AVR32 = 185
    STM8 = 186
    TILE64 = 187
    TILEPRO = 188
    MICROBLAZE = 189
    CUDA = 190
    TILEGX = 191
    CLOUDSHIELD = 192
    COREA_1ST = 193
    COREA_2ND = 194
    ARC_COMPACT2 = 195
    OPEN8 = 196
    RL78 = 197
    VIDEOCORE5 = 198
    R78KOR = 199
    DSP56800EX = 200
    BA1 = 201
    BA2 = 202
    XCORE = 203
    MCHP_PIC = 204
    KM32 = 210
    KMX32 = 211
    EMX16 = 212
    EMX8 = 213
    KVARC = 214
    CDP = 215
    COGE = 216
    COOL = 217
    NORC = 218
    CSR_KALIMBA = 219
    Z80 = 220
    VISIUM = 221
    FT32 = 222
    MOXIE = 223
    AMDGPU = 224
    RISCV = 243
    BPF = 247
    CSKY = 252
    LOONGARCH = 258
    ALPHA = 0x9026


class SectionType(IntEnum):
    """Section header ``sh_type`` values."""

    NULL = 0
    PROGBITS = 1
    SYMTAB = 2
    STRTAB = 3
    RELA = 4
    HASH = 5
    DYNAMIC = 6
    NOTE = 7
    NOBITS = 8
    REL = 9
    SHLIB = 10
    DYNSYM = 11
    INIT_ARRAY = 14
    FINI_ARRAY = 15
    PREINIT_ARRAY = 16
    GROUP = 17
    SYMTAB_SHNDX = 18
    RELR = 19
    GNU_ATTRIBUTES = 0x6FFFFFF5
    GNU_HASH = 0x6FFFFFF6
    GNU_LIBLIST = 0x6FFFFFF7
    CHECKSUM = 0x6FFFFFF8
    SUNW_MOVE = 0x6FFFFFFA
    SUNW_COMDAT = 0x6FFFFFFB
    SUNW_SYMINFO = 0x6FFFFFFC
    GNU_VERDEF = 0x6FFFFFFD
    GNU_VERNEED = 0x6FFFFFFE
    GNU_VERSYM = 0x6FFFFFFF


class SectionFlag(IntFlag):
    """Section header ``sh_flags`` bits."""

    WRITE = 1 << 0
    ALLOC = 1 << 1
    EXECINSTR = 1 << 2
    MERGE = 1 << 4
    STRINGS = 1 << 5
    INFO_LINK = 1 << 6
    LINK_ORDER = 1 << 7
    OS_NONCONFORMING = 1 << 8
    GROUP = 1 << 9
    TLS = 1 << 10
    COMPRESSED = 1 << 11
    ORDERED = 1 << 30
    EXCLUDE = 1 << 31
    MASKOS = 0x0FF00000
    MASKPROC = 0xF0000000


class SymbolBinding(IntEnum):
    """Symbol binding, the high nibble of ``st_info``."""

    LOCAL = 0
    GLOBAL = 1
    WEAK = 2
    GNU_UNIQUE = 10
    LOOS = 10
    HIOS = 12
    LOPROC = 13
    HIPROC = 15


class SymbolType(IntEnum):
    """Symbol type, the low nibble of ``st_info``."""

    NOTYPE = 0
    OBJECT = 1
    FUNC = 2
    SECTION = 3
    FILE = 4
    COMMON = 5
    TLS = 6
    GNU_IFUNC = 10
    LOOS = 10
    HIOS = 12
    LOPROC = 13
    HIPROC = 15


class SymbolVisibility(IntEnum):
    """Symbol visibility, the low two bits of ``st_other``."""

    DEFAULT = 0
    INTERNAL = 1
    HIDDEN = 2
    PROTECTED = 3


class SegmentType(IntEnum):
    """Program header ``p_type`` values."""

    NULL = 0
    LOAD = 1
    DYNAMIC = 2
    INTERP = 3
    NOTE = 4
    SHLIB = 5
    PHDR = 6
    TLS = 7
    GNU_EH_FRAME = 0x6474E550
    GNU_STACK = 0x6474E551
    GNU_RELRO = 0x6474E552
    GNU_PROPERTY = 0x6474E553
    SUNWBSS = 0x6FFFFFFA
    SUNWSTACK = 0x6FFFFFFB


class SegmentFlag(IntFlag):
    """Program header ``p_flags`` bits."""

    X = 1 << 0
    W = 1 << 1
    R = 1 << 2
    MASKOS = 0x0FF00000
    MASKPROC = 0xF0000000


def st_bind(info: int) -> int:
    """Binding part of a symbol's ``st_info`` byte."""
    return (info & 0xFF) >> 4


def st_type(info: int) -> int:
    """Type part of a symbol's ``st_info`` byte."""
    return info & 0xF


def st_info(bind: int, type_: int) -> int:
    """Combine a binding and a type into an ``st_info`` value."""
    return (bind << 4) + (type_ & 0xF)


def st_visibility(other: int) -> int:
    """Visibility part of a symbol's ``st_other`` byte."""
    return other & 0x03


def r32_sym(info: int) -> int:
    """Symbol index of a 32-bit relocation's ``r_info``."""
    return info >> 8


def r32_type(info: int) -> int:
    """Relocation type of a 32-bit relocation's ``r_info``."""
    return info & 0xFF


def r32_info(sym: int, type_: int) -> int:
    """Build a 32-bit relocation ``r_info`` from symbol index and type."""
    return (sym << 8) + (type_ & 0xFF)


def r64_sym(info: int) -> int:
    """Symbol index of a 64-bit relocation's ``r_info``."""
    return info >> 32


def r64_type(info: int) -> int:
    """Relocation type of a 64-bit relocation's ``r_info``."""
    return info & 0xFFFFFFFF


def r64_info(sym: int, type_: int) -> int:
    """Build a 64-bit relocation ``r_info`` from symbol index and type."""
    return wrap_unsigned(wrap_unsigned(sym, 64) << 32, 64) + type_ & ((1 << 64) - 1)


def m_sym(info: int) -> int:
    """Symbol index of a move entry's ``m_info``."""
    return info >> 8


def m_size(info: int) -> int:
    """Size part of a move entry's ``m_info``."""
    return info & 0xFF


def m_info(sym: int, size: int) -> int:
    """Build a move entry ``m_info`` from symbol index and size."""
    return (sym << 8) + (size & 0xFF)