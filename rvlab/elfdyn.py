"""ELF dynamic section, note, auxiliary vector and compression constants."""

from __future__ import annotations

from enum import IntEnum, IntFlag

from rvlab.intlimits import wrap_signed, wrap_unsigned

DT_NUM = 38
DT_LOOS = 0x6000000D
DT_HIOS = 0x6FFFF000
DT_LOPROC = 0x70000000
DT_HIPROC = 0x7FFFFFFF

DT_VALRNGLO = 0x6FFFFD00
DT_VALRNGHI = 0x6FFFFDFF
DT_VALNUM = 12

DT_ADDRRNGLO = 0x6FFFFE00
DT_ADDRRNGHI = 0x6FFFFEFF
DT_ADDRNUM = 11

DT_VERSIONTAGNUM = 16
DT_EXTRANUM = 3

DT_SPARC_REGISTER = 0x70000001
DT_SPARC_NUM = 2

DT_MIPS_RLD_VERSION = 0x70000001
DT_MIPS_TIME_STAMP = 0x70000002
DT_MIPS_ICHECKSUM = 0x70000003
DT_MIPS_IVERSION = 0x70000004
DT_MIPS_FLAGS = 0x70000005
DT_MIPS_BASE_ADDRESS = 0x70000006
DT_MIPS_MSYM = 0x70000007
DT_MIPS_CONFLICT = 0x70000008
DT_MIPS_LIBLIST = 0x70000009
DT_MIPS_LOCAL_GOTNO = 0x7000000A
DT_MIPS_CONFLICTNO = 0x7000000B
DT_MIPS_LIBLISTNO = 0x70000010
DT_MIPS_SYMTABNO = 0x70000011
DT_MIPS_UNREFEXTNO = 0x70000012
DT_MIPS_GOTSYM = 0x70000013
DT_MIPS_HIPAGENO = 0x70000014
DT_MIPS_RLD_MAP = 0x70000016
DT_MIPS_DELTA_CLASS = 0x70000017
DT_MIPS_DELTA_CLASS_NO = 0x70000018
DT_MIPS_DELTA_INSTANCE = 0x70000019
DT_MIPS_DELTA_INSTANCE_NO = 0x7000001A
DT_MIPS_DELTA_RELOC = 0x7000001B
DT_MIPS_DELTA_RELOC_NO = 0x7000001C
DT_MIPS_DELTA_SYM = 0x7000001D
DT_MIPS_DELTA_SYM_NO = 0x7000001E
DT_MIPS_DELTA_CLASSSYM = 0x70000020
DT_MIPS_DELTA_CLASSSYM_NO = 0x70000021
DT_MIPS_CXX_FLAGS = 0x70000022
DT_MIPS_PIXIE_INIT = 0x70000023
DT_MIPS_SYMBOL_LIB = 0x70000024
DT_MIPS_LOCALPAGE_GOTIDX = 0x70000025
DT_MIPS_LOCAL_GOTIDX = 0x70000026
DT_MIPS_HIDDEN_GOTIDX = 0x70000027
DT_MIPS_PROTECTED_GOTIDX = 0x70000028
DT_MIPS_OPTIONS = 0x70000029
DT_MIPS_INTERFACE = 0x7000002A
DT_MIPS_DYNSTR_ALIGN = 0x7000002B
DT_MIPS_INTERFACE_SIZE = 0x7000002C
DT_MIPS_RLD_TEXT_RESOLVE_ADDR = 0x7000002D
DT_MIPS_PERF_SUFFIX = 0x7000002E
DT_MIPS_COMPACT_SIZE = 0x7000002F
DT_MIPS_GP_VALUE = 0x70000030
DT_MIPS_AUX_DYNAMIC = 0x70000031
DT_MIPS_PLTGOT = 0x70000032
DT_MIPS_RWPLT = 0x70000034
DT_MIPS_RLD_MAP_REL = 0x70000035
DT_MIPS_NUM = 0x36
DT_PROCNUM = DT_MIPS_NUM

DT_ALPHA_PLTRO = DT_LOPROC + 0
DT_ALPHA_NUM = 1

DT_PPC_GOT = DT_LOPROC + 0
DT_PPC_OPT = DT_LOPROC + 1
DT_PPC_NUM = 2

DT_PPC64_GLINK = DT_LOPROC + 0
DT_PPC64_OPD = DT_LOPROC + 1
DT_PPC64_OPDSZ = DT_LOPROC + 2
DT_PPC64_OPT = DT_LOPROC + 3
DT_PPC64_NUM = 4

DT_IA_64_PLT_RESERVE = DT_LOPROC + 0
DT_IA_64_NUM = 1

DT_NIOS2_GP = 0x70000002

DTF_1_PARINIT = 0x00000001
DTF_1_CONFEXP = 0x00000002

DF_P1_LAZYLOAD = 0x00000001
DF_P1_GROUPPERM = 0x00000002

ELF_NOTE_SOLARIS = "SUNW Solaris"
ELF_NOTE_GNU = "GNU"
ELF_NOTE_PAGESIZE_HINT = 1

NT_GNU_ABI_TAG = 1
ELF_NOTE_ABI = NT_GNU_ABI_TAG
NT_GNU_BUILD_ID = 3
NT_GNU_GOLD_VERSION = 4
NT_GNU_PROPERTY_TYPE_0 = 5

ELF_NOTE_OS_LINUX = 0
ELF_NOTE_OS_GNU = 1
ELF_NOTE_OS_SOLARIS2 = 2
ELF_NOTE_OS_FREEBSD = 3


class DynamicTag(IntEnum):
    """Dynamic section ``d_tag`` values."""

    NULL = 0
    NEEDED = 1
    PLTRELSZ = 2
    PLTGOT = 3
    HASH = 4
    STRTAB = 5
    SYMTAB = 6
    RELA = 7
    RELASZ = 8
    RELAENT = 9
    STRSZ = 10
    SYMENT = 11
    INIT = 12
    FINI = 13
    SONAME = 14
    RPATH = 15
    SYMBOLIC = 16
    REL = 17
    RELSZ = 18
    RELENT = 19
    PLTREL = 20
    DEBUG = 21
    TEXTREL = 22
    JMPREL = 23
    BIND_NOW = 24
    INIT_ARRAY = 25
    FINI_ARRAY = 26
    INIT_ARRAYSZ = 27
    FINI_ARRAYSZ = 28
    RUNPATH = 29
    FLAGS = 30
    ENCODING = 32
    PREINIT_ARRAY = 32
    PREINIT_ARRAYSZ = 33
    SYMTAB_SHNDX = 34
    RELRSZ = 35
    RELR = 36
    RELRENT = 37

    GNU_PRELINKED = 0x6FFFFDF5
    GNU_CONFLICTSZ = 0x6FFFFDF6
    GNU_LIBLISTSZ = 0x6FFFFDF7
    CHECKSUM = 0x6FFFFDF8
    PLTPADSZ = 0x6FFFFDF9
    MOVEENT = 0x6FFFFDFA
    MOVESZ = 0x6FFFFDFB
    FEATURE_1 = 0x6FFFFDFC
    POSFLAG_1 = 0x6FFFFDFD
    SYMINSZ = 0x6FFFFDFE
    SYMINENT = 0x6FFFFDFF

    GNU_HASH = 0x6FFFFEF5
    TLSDESC_PLT = 0x6FFFFEF6
    TLSDESC_GOT = 0x6FFFFEF7
    GNU_CONFLICT = 0x6FFFFEF8
    GNU_LIBLIST = 0x6FFFFEF9
    CONFIG = 0x6FFFFEFA
    DEPAUDIT = 0x6FFFFEFB
    AUDIT = 0x6FFFFEFC
    PLTPAD = 0x6FFFFEFD
    MOVETAB = 0x6FFFFEFE
    SYMINFO = 0x6FFFFEFF

    VERSYM = 0x6FFFFFF0
    RELACOUNT = 0x6FFFFFF9
    RELCOUNT = 0x6FFFFFFA
    FLAGS_1 = 0x6FFFFFFB
    VERDEF = 0x6FFFFFFC
    VERDEFNUM = 0x6FFFFFFD
    VERNEED = 0x6FFFFFFE
    VERNEEDNUM = 0x6FFFFFFF

    AUXILIARY = 0x7FFFFFFD
    FILTER = 0x7FFFFFFF


class DynamicFlag(IntFlag):
    """Bits of the ``DT_FLAGS`` entry."""

    ORIGIN = 0x00000001
    SYMBOLIC = 0x00000002
    TEXTREL = 0x00000004
    BIND_NOW = 0x00000008
    STATIC_TLS = 0x00000010


class DynamicFlag1(IntFlag):
    """Bits of the ``DT_FLAGS_1`` entry."""

    NOW = 0x00000001
    GLOBAL = 0x00000002
    GROUP = 0x00000004
    NODELETE = 0x00000008
    LOADFLTR = 0x00000010
    INITFIRST = 0x00000020
    NOOPEN = 0x00000040
    ORIGIN = 0x00000080
    DIRECT = 0x00000100
    TRANS = 0x00000200
    INTERPOSE = 0x00000400
    NODEFLIB = 0x00000800
    NODUMP = 0x00001000
    CONFALT = 0x00002000
    ENDFILTEE = 0x00004000
    DISPRELDNE = 0x00008000
    DISPRELPND = 0x00010000
    NODIRECT = 0x00020000
    IGNMULDEF = 0x00040000
    NOKSYMS = 0x00080000
    NOHDR = 0x00100000
    EDITED = 0x00200000
    NORELOC = 0x00400000
    SYMINTPOSE = 0x00800000
    GLOBAUDIT = 0x01000000
    SINGLETON = 0x02000000
    STUB = 0x04000000
    PIE = 0x08000000


class NoteType(IntEnum):
    """Core file and object note ``n_type`` values."""

    PRSTATUS = 1
    VERSION = 1
    PRFPREG = 2
    FPREGSET = 2
    PRPSINFO = 3
    PRXREG = 4
    TASKSTRUCT = 4
    PLATFORM = 5
    AUXV = 6
    GWINDOWS = 7
    ASRS = 8
    PSTATUS = 10
    PSINFO = 13
    PRCRED = 14
    UTSNAME = 15
    LWPSTATUS = 16
    LWPSINFO = 17
    PRFPXREG = 20
    SIGINFO = 0x53494749
    FILE = 0x46494C45
    PRXFPREG = 0x46E62B7F
    PPC_VMX = 0x100
    PPC_SPE = 0x101
    PPC_VSX = 0x102
    PPC_TAR = 0x103
    PPC_PPR = 0x104
    PPC_DSCR = 0x105
    PPC_EBB = 0x106
    PPC_PMU = 0x107
    PPC_TM_CGPR = 0x108
    PPC_TM_CFPR = 0x109
    PPC_TM_CVMX = 0x10A
    PPC_TM_CVSX = 0x10B
    PPC_TM_SPR = 0x10C
    PPC_TM_CTAR = 0x10D
    PPC_TM_CPPR = 0x10E
    PPC_TM_CDSCR = 0x10F
    I386_TLS = 0x200
    I386_IOPERM = 0x201
    X86_XSTATE = 0x202
    S390_HIGH_GPRS = 0x300
    S390_TIMER = 0x301
    S390_TODCMP = 0x302
    S390_TODPREG = 0x303
    S390_CTRS = 0x304
    S390_PREFIX = 0x305
    S390_LAST_BREAK = 0x306
    S390_SYSTEM_CALL = 0x307
    S390_TDB = 0x308
    S390_VXRS_LOW = 0x309
    S390_VXRS_HIGH = 0x30A
    S390_GS_CB = 0x30B
    S390_GS_BC = 0x30C
    S390_RI_CB = 0x30D
    ARM_VFP = 0x400
    ARM_TLS = 0x401
    ARM_HW_BREAK = 0x402
    ARM_HW_WATCH = 0x403
    ARM_SYSTEM_CALL = 0x404
    ARM_SVE = 0x405
    ARM_PAC_MASK = 0x406
    ARM_PACA_KEYS = 0x407
    ARM_PACG_KEYS = 0x408
    ARM_TAGGED_ADDR_CTRL = 0x409
    ARM_PAC_ENABLED_KEYS = 0x40A
    METAG_CBUF = 0x500
    METAG_RPIPE = 0x501
    METAG_TLS = 0x502
    ARC_V2 = 0x600
    VMCOREDD = 0x700
    MIPS_DSP = 0x800
    MIPS_FP_MODE = 0x801
    MIPS_MSA = 0x802
    RISCV_CSR = 0x900
    RISCV_VECTOR = 0x901
    LOONGARCH_CPUCFG = 0xA00
    LOONGARCH_CSR = 0xA01
    LOONGARCH_LSX = 0xA02
    LOONGARCH_LASX = 0xA03
    LOONGARCH_LBT = 0xA04


class AuxType(IntEnum):
    """Auxiliary vector ``a_type`` values."""

    NULL = 0
    IGNORE = 1
    EXECFD = 2
    PHDR = 3
    PHENT = 4
    PHNUM = 5
    PAGESZ = 6
    BASE = 7
    FLAGS = 8
    ENTRY = 9
    NOTELF = 10
    UID = 11
    EUID = 12
    GID = 13
    EGID = 14
    PLATFORM = 15
    HWCAP = 16
    CLKTCK = 17
    FPUCW = 18
    DCACHEBSIZE = 19
    ICACHEBSIZE = 20
    UCACHEBSIZE = 21
    IGNOREPPC = 22
    SECURE = 23
    BASE_PLATFORM = 24
    RANDOM = 25
    HWCAP2 = 26
    EXECFN = 31
    SYSINFO = 32
    SYSINFO_EHDR = 33
    L1I_CACHESHAPE = 34
    L1D_CACHESHAPE = 35
    L2_CACHESHAPE = 36
    L3_CACHESHAPE = 37
    L1I_CACHESIZE = 40
    L1I_CACHEGEOMETRY = 41
    L1D_CACHESIZE = 42
    L1D_CACHEGEOMETRY = 43
    L2_CACHESIZE = 44
    L2_CACHEGEOMETRY = 45
    L3_CACHESIZE = 46
    L3_CACHEGEOMETRY = 47
    MINSIGSTKSZ = 51


class CompressionType(IntEnum):
    """Compressed section ``ch_type`` values."""

    ZLIB = 1
    ZSTD = 2
    LOOS = 0x60000000
    HIOS = 0x6FFFFFFF
    LOPROC = 0x70000000
    HIPROC = 0x7FFFFFFF


def dt_valtagidx(tag: int) -> int:
    """Index of a tag in the value range ``DT_VALRNGLO``..``DT_VALRNGHI``."""
    return DT_VALRNGHI - tag


def dt_addrtagidx(tag: int) -> int:
    """Index of a tag in the address range ``DT_ADDRRNGLO``..``DT_ADDRRNGHI``."""
    return DT_ADDRRNGHI - tag


def dt_versiontagidx(tag: int) -> int:
    """Index of a symbol-versioning tag, counted down from ``DT_VERNEEDNUM``."""
    return DynamicTag.VERNEEDNUM - tag


def dt_extratagidx(tag: int) -> int:
    """Index of an extra tag such as ``DT_AUXILIARY`` or ``DT_FILTER``.

    The tag is taken as a 31-bit signed value and the result as a 32-bit word.
    """
    low31 = wrap_signed(wrap_signed(tag, 32) << 1, 32) >> 1
    return wrap_unsigned(wrap_unsigned(-low31, 32) - 1, 32)