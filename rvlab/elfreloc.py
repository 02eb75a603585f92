"""Relocation type numbers for the common ELF targets, and helpers to name them."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Type

from rvlab.elfconst import Machine

R_X86_64_NUM = 43
R_386_NUM = 44
R_ARM_NUM = 256
R_MIPS_NUM = 128
R_SPARC_NUM = 253

EF_ARM_EABIMASK = 0xFF000000
EF_ARM_EABI_UNKNOWN = 0x00000000
EF_ARM_EABI_VER1 = 0x01000000
EF_ARM_EABI_VER2 = 0x02000000
EF_ARM_EABI_VER3 = 0x03000000
EF_ARM_EABI_VER4 = 0x04000000
EF_ARM_EABI_VER5 = 0x05000000

STO_PPC64_LOCAL_BIT = 5
STO_PPC64_LOCAL_MASK = 0xE0


class RelocX86_64(IntEnum):
    """x86-64 relocation types."""

    NONE = 0
    R64 = 1
    PC32 = 2
    GOT32 = 3
    PLT32 = 4
    COPY = 5
    GLOB_DAT = 6
    JUMP_SLOT = 7
    RELATIVE = 8
    GOTPCREL = 9
    R32 = 10
    R32S = 11
    R16 = 12
    PC16 = 13
    R8 = 14
    PC8 = 15
    DTPMOD64 = 16
    DTPOFF64 = 17
    TPOFF64 = 18
    TLSGD = 19
    TLSLD = 20
    DTPOFF32 = 21
    GOTTPOFF = 22
    TPOFF32 = 23
    PC64 = 24
    GOTOFF64 = 25
    GOTPC32 = 26
    GOT64 = 27
    GOTPCREL64 = 28
    GOTPC64 = 29
    GOTPLT64 = 30
    PLTOFF64 = 31
    SIZE32 = 32
    SIZE64 = 33
    GOTPC32_TLSDESC = 34
    TLSDESC_CALL = 35
    TLSDESC = 36
    IRELATIVE = 37
    RELATIVE64 = 38
    GOTPCRELX = 41
    REX_GOTPCRELX = 42


class Reloc386(IntEnum):
    """i386 relocation types."""

    NONE = 0
    R32 = 1
    PC32 = 2
    GOT32 = 3
    PLT32 = 4
    COPY = 5
    GLOB_DAT = 6
    JMP_SLOT = 7
    RELATIVE = 8
    GOTOFF = 9
    GOTPC = 10
    R32PLT = 11
    TLS_TPOFF = 14
    TLS_IE = 15
    TLS_GOTIE = 16
    TLS_LE = 17
    TLS_GD = 18
    TLS_LDM = 19
    R16 = 20
    PC16 = 21
    R8 = 22
    PC8 = 23
    TLS_GD_32 = 24
    TLS_GD_PUSH = 25
    TLS_GD_CALL = 26
    TLS_GD_POP = 27
    TLS_LDM_32 = 28
    TLS_LDM_PUSH = 29
    TLS_LDM_CALL = 30
    TLS_LDM_POP = 31
    TLS_LDO_32 = 32
    TLS_IE_32 = 33
    TLS_LE_32 = 34
    TLS_DTPMOD32 = 35
    TLS_DTPOFF32 = 36
    TLS_TPOFF32 = 37
    SIZE32 = 38
    TLS_GOTDESC = 39
    TLS_DESC_CALL = 40
    TLS_DESC = 41
    IRELATIVE = 42
    GOT32X = 43


class RelocArm(IntEnum):
    """32-bit ARM relocation types."""

    NONE = 0
    PC24 = 1
    ABS32 = 2
    REL32 = 3
    PC13 = 4
    ABS16 = 5
    ABS12 = 6
    THM_ABS5 = 7
    ABS8 = 8
    SBREL32 = 9
    THM_PC22 = 10
    THM_PC8 = 11
    AMP_VCALL9 = 12
    TLS_DESC = 13
    THM_SWI8 = 14
    XPC25 = 15
    THM_XPC22 = 16
    TLS_DTPMOD32 = 17
    TLS_DTPOFF32 = 18
    TLS_TPOFF32 = 19
    COPY = 20
    GLOB_DAT = 21
    JUMP_SLOT = 22
    RELATIVE = 23
    GOTOFF = 24
    GOTPC = 25
    GOT32 = 26
    PLT32 = 27
    CALL = 28
    JUMP24 = 29
    THM_JUMP24 = 30
    BASE_ABS = 31
    ALU_PCREL_7_0 = 32
    ALU_PCREL_15_8 = 33
    ALU_PCREL_23_15 = 34
    LDR_SBREL_11_0 = 35
    ALU_SBREL_19_12 = 36
    ALU_SBREL_27_20 = 37
    TARGET1 = 38
    SBREL31 = 39
    V4BX = 40
    TARGET2 = 41
    PREL31 = 42
    MOVW_ABS_NC = 43
    MOVT_ABS = 44
    MOVW_PREL_NC = 45
    MOVT_PREL = 46
    THM_MOVW_ABS_NC = 47
    THM_MOVT_ABS = 48
    THM_MOVW_PREL_NC = 49
    THM_MOVT_PREL = 50
    THM_JUMP19 = 51
    THM_JUMP6 = 52
    THM_ALU_PREL_11_0 = 53
    THM_PC12 = 54
    ABS32_NOI = 55
    REL32_NOI = 56
    ALU_PC_G0_NC = 57
    ALU_PC_G0 = 58
    ALU_PC_G1_NC = 59
    ALU_PC_G1 = 60
    ALU_PC_G2 = 61
    LDR_PC_G1 = 62
    LDR_PC_G2 = 63
    LDRS_PC_G0 = 64
    LDRS_PC_G1 = 65
    LDRS_PC_G2 = 66
    LDC_PC_G0 = 67
    LDC_PC_G1 = 68
    LDC_PC_G2 = 69
    ALU_SB_G0_NC = 70
    ALU_SB_G0 = 71
    ALU_SB_G1_NC = 72
    ALU_SB_G1 = 73
    ALU_SB_G2 = 74
    LDR_SB_G0 = 75
    LDR_SB_G1 = 76
    LDR_SB_G2 = 77
    LDRS_SB_G0 = 78
    LDRS_SB_G1 = 79
    LDRS_SB_G2 = 80
    LDC_SB_G0 = 81
    LDC_SB_G1 = 82
    LDC_SB_G2 = 83
    MOVW_BREL_NC = 84
    MOVT_BREL = 85
    MOVW_BREL = 86
    THM_MOVW_BREL_NC = 87
    THM_MOVT_BREL = 88
    THM_MOVW_BREL = 89
    TLS_GOTDESC = 90
    TLS_CALL = 91
    TLS_DESCSEQ = 92
    THM_TLS_CALL = 93
    PLT32_ABS = 94
    GOT_ABS = 95
    GOT_PREL = 96
    GOT_BREL12 = 97
    GOTOFF12 = 98
    GOTRELAX = 99
    GNU_VTENTRY = 100
    GNU_VTINHERIT = 101
    THM_PC11 = 102
    THM_PC9 = 103
    TLS_GD32 = 104
    TLS_LDM32 = 105
    TLS_LDO32 = 106
    TLS_IE32 = 107
    TLS_LE32 = 108
    TLS_LDO12 = 109
    TLS_LE12 = 110
    TLS_IE12GP = 111
    ME_TOO = 128
    THM_TLS_DESCSEQ = 129
    THM_TLS_DESCSEQ16 = 129
    THM_TLS_DESCSEQ32 = 130
    THM_GOT_BREL12 = 131
    IRELATIVE = 160
    RXPC25 = 249
    RSBREL32 = 250
    THM_RPC22 = 251
    RREL32 = 252
    RABS22 = 253
    RPC24 = 254
    RBASE = 255


class RelocAarch64(IntEnum):
    """AArch64 relocation types."""

    NONE = 0
    P32_ABS32 = 1
    P32_COPY = 180
    P32_GLOB_DAT = 181
    P32_JUMP_SLOT = 182
    P32_RELATIVE = 183
    P32_TLS_DTPMOD = 184
    P32_TLS_DTPREL = 185
    P32_TLS_TPREL = 186
    P32_TLSDESC = 187
    P32_IRELATIVE = 188
    ABS64 = 257
    ABS32 = 258
    ABS16 = 259
    PREL64 = 260
    PREL32 = 261
    PREL16 = 262
    MOVW_UABS_G0 = 263
    MOVW_UABS_G0_NC = 264
    MOVW_UABS_G1 = 265
    MOVW_UABS_G1_NC = 266
    MOVW_UABS_G2 = 267
    MOVW_UABS_G2_NC = 268
    MOVW_UABS_G3 = 269
    MOVW_SABS_G0 = 270
    MOVW_SABS_G1 = 271
    MOVW_SABS_G2 = 272
    LD_PREL_LO19 = 273
    ADR_PREL_LO21 = 274
    ADR_PREL_PG_HI21 = 275
    ADR_PREL_PG_HI21_NC = 276
    ADD_ABS_LO12_NC = 277
    LDST8_ABS_LO12_NC = 278
    TSTBR14 = 279
    CONDBR19 = 280
    JUMP26 = 282
    CALL26 = 283
    LDST16_ABS_LO12_NC = 284
    LDST32_ABS_LO12_NC = 285
    LDST64_ABS_LO12_NC = 286
    MOVW_PREL_G0 = 287
    MOVW_PREL_G0_NC = 288
    MOVW_PREL_G1 = 289
    MOVW_PREL_G1_NC = 290
    MOVW_PREL_G2 = 291
    MOVW_PREL_G2_NC = 292
    MOVW_PREL_G3 = 293
    LDST128_ABS_LO12_NC = 299
    MOVW_GOTOFF_G0 = 300
    MOVW_GOTOFF_G0_NC = 301
    MOVW_GOTOFF_G1 = 302
    MOVW_GOTOFF_G1_NC = 303
    MOVW_GOTOFF_G2 = 304
    MOVW_GOTOFF_G2_NC = 305
    MOVW_GOTOFF_G3 = 306
    GOTREL64 = 307
    GOTREL32 = 308
    GOT_LD_PREL19 = 309
    LD64_GOTOFF_LO15 = 310
    ADR_GOT_PAGE = 311
    LD64_GOT_LO12_NC = 312
    LD64_GOTPAGE_LO15 = 313
    TLSGD_ADR_PREL21 = 512
    TLSGD_ADR_PAGE21 = 513
    TLSGD_ADD_LO12_NC = 514
    TLSGD_MOVW_G1 = 515
    TLSGD_MOVW_G0_NC = 516
    TLSLD_ADR_PREL21 = 517
    TLSLD_ADR_PAGE21 = 518
    TLSLD_ADD_LO12_NC = 519
    TLSLD_MOVW_G1 = 520
    TLSLD_MOVW_G0_NC = 521
    TLSLD_LD_PREL19 = 522
    TLSLD_MOVW_DTPREL_G2 = 523
    TLSLD_MOVW_DTPREL_G1 = 524
    TLSLD_MOVW_DTPREL_G1_NC = 525
    TLSLD_MOVW_DTPREL_G0 = 526
    TLSLD_MOVW_DTPREL_G0_NC = 527
    TLSLD_ADD_DTPREL_HI12 = 528
    TLSLD_ADD_DTPREL_LO12 = 529
    TLSLD_ADD_DTPREL_LO12_NC = 530
    TLSLD_LDST8_DTPREL_LO12 = 531
    TLSLD_LDST8_DTPREL_LO12_NC = 532
    TLSLD_LDST16_DTPREL_LO12 = 533
    TLSLD_LDST16_DTPREL_LO12_NC = 534
    TLSLD_LDST32_DTPREL_LO12 = 535
    TLSLD_LDST32_DTPREL_LO12_NC = 536
    TLSLD_LDST64_DTPREL_LO12 = 537
    TLSLD_LDST64_DTPREL_LO12_NC = 538
    TLSIE_MOVW_GOTTPREL_G1 = 539
    TLSIE_MOVW_GOTTPREL_G0_NC = 540
    TLSIE_ADR_GOTTPREL_PAGE21 = 541
    TLSIE_LD64_GOTTPREL_LO12_NC = 542
    TLSIE_LD_GOTTPREL_PREL19 = 543
    TLSLE_MOVW_TPREL_G2 = 544
    TLSLE_MOVW_TPREL_G1 = 545
    TLSLE_MOVW_TPREL_G1_NC = 546
    TLSLE_MOVW_TPREL_G0 = 547
    TLSLE_MOVW_TPREL_G0_NC = 548
    TLSLE_ADD_TPREL_HI12 = 549
    TLSLE_ADD_TPREL_LO12 = 550
    TLSLE_ADD_TPREL_LO12_NC = 551
    TLSLE_LDST8_TPREL_LO12 = 552
    TLSLE_LDST8_TPREL_LO12_NC = 553
    TLSLE_LDST16_TPREL_LO12 = 554
    TLSLE_LDST16_TPREL_LO12_NC = 555
    TLSLE_LDST32_TPREL_LO12 = 556
    TLSLE_LDST32_TPREL_LO12_NC = 557
    TLSLE_LDST64_TPREL_LO12 = 558
    TLSLE_LDST64_TPREL_LO12_NC = 559
    TLSDESC_LD_PREL19 = 560
    TLSDESC_ADR_PREL21 = 561
    TLSDESC_ADR_PAGE21 = 562
    TLSDESC_LD64_LO12 = 563
    TLSDESC_ADD_LO12 = 564
    TLSDESC_OFF_G1 = 565
    TLSDESC_OFF_G0_NC = 566
    TLSDESC_LDR = 567
    TLSDESC_ADD = 568
    TLSDESC_CALL = 569
    TLSLE_LDST128_TPREL_LO12 = 570
    TLSLE_LDST128_TPREL_LO12_NC = 571
    TLSLD_LDST128_DTPREL_LO12 = 572
    TLSLD_LDST128_DTPREL_LO12_NC = 573
    COPY = 1024
    GLOB_DAT = 1025
    JUMP_SLOT = 1026
    RELATIVE = 1027
    TLS_DTPMOD = 1028
    TLS_DTPMOD64 = 1028
    TLS_DTPREL = 1029
    TLS_DTPREL64 = 1029
    TLS_TPREL = 1030
    TLS_TPREL64 = 1030
    TLSDESC = 1031


class RelocRiscv(IntEnum):
    """RISC-V relocation types."""

    NONE = 0
    R32 = 1
    R64 = 2
    RELATIVE = 3
    COPY = 4
    JUMP_SLOT = 5
    TLS_DTPMOD32 = 6
    TLS_DTPMOD64 = 7
    TLS_DTPREL32 = 8
    TLS_DTPREL64 = 9
    TLS_TPREL32 = 10
    TLS_TPREL64 = 11
    TLSDESC = 12
    BRANCH = 16
    JAL = 17
    CALL = 18
    CALL_PLT = 19
    GOT_HI20 = 20
    TLS_GOT_HI20 = 21
    TLS_GD_HI20 = 22
    PCREL_HI20 = 23
    PCREL_LO12_I = 24
    PCREL_LO12_S = 25
    HI20 = 26
    LO12_I = 27
    LO12_S = 28
    TPREL_HI20 = 29
    TPREL_LO12_I = 30
    TPREL_LO12_S = 31
    TPREL_ADD = 32
    ADD8 = 33
    ADD16 = 34
    ADD32 = 35
    ADD64 = 36
    SUB8 = 37
    SUB16 = 38
    SUB32 = 39
    SUB64 = 40
    GOT32_PCREL = 41
    ALIGN = 43
    RVC_BRANCH = 44
    RVC_JUMP = 45
    RVC_LUI = 46
    RELAX = 51
    SUB6 = 52
    SET6 = 53
    SET8 = 54
    SET16 = 55
    SET32 = 56
    R32_PCREL = 57
    IRELATIVE = 58
    PLT32 = 59
    SET_ULEB128 = 60
    SUB_ULEB128 = 61
    TLSDESC_HI20 = 62
    TLSDESC_LOAD_LO12 = 63
    TLSDESC_ADD_LO12 = 64
    TLSDESC_CALL = 65


class RelocLoongArch(IntEnum):
    """LoongArch relocation types."""

    NONE = 0
    R32 = 1
    R64 = 2
    RELATIVE = 3
    COPY = 4
    JUMP_SLOT = 5
    TLS_DTPMOD32 = 6
    TLS_DTPMOD64 = 7
    TLS_DTPREL32 = 8
    TLS_DTPREL64 = 9
    TLS_TPREL32 = 10
    TLS_TPREL64 = 11
    IRELATIVE = 12
    MARK_LA = 20
    MARK_PCREL = 21
    SOP_PUSH_PCREL = 22
    SOP_PUSH_ABSOLUTE = 23
    SOP_PUSH_DUP = 24
    SOP_PUSH_GPREL = 25
    SOP_PUSH_TLS_TPREL = 26
    SOP_PUSH_TLS_GOT = 27
    SOP_PUSH_TLS_GD = 28
    SOP_PUSH_PLT_PCREL = 29
    SOP_ASSERT = 30
    SOP_NOT = 31
    SOP_SUB = 32
    SOP_SL = 33
    SOP_SR = 34
    SOP_ADD = 35
    SOP_AND = 36
    SOP_IF_ELSE = 37
    SOP_POP_32_S_10_5 = 38
    SOP_POP_32_U_10_12 = 39
    SOP_POP_32_S_10_12 = 40
    SOP_POP_32_S_10_16 = 41
    SOP_POP_32_S_10_16_S2 = 42
    SOP_POP_32_S_5_20 = 43
    SOP_POP_32_S_0_5_10_16_S2 = 44
    SOP_POP_32_S_0_10_10_16_S2 = 45
    SOP_POP_32_U = 46
    ADD8 = 47
    ADD16 = 48
    ADD24 = 49
    ADD32 = 50
    ADD64 = 51
    SUB8 = 52
    SUB16 = 53
    SUB24 = 54
    SUB32 = 55
    SUB64 = 56
    GNU_VTINHERIT = 57
    GNU_VTENTRY = 58
    B16 = 64
    B21 = 65
    B26 = 66
    ABS_HI20 = 67
    ABS_LO12 = 68
    ABS64_LO20 = 69
    ABS64_HI12 = 70
    PCALA_HI20 = 71
    PCALA_LO12 = 72
    PCALA64_LO20 = 73
    PCALA64_HI12 = 74
    GOT_PC_HI20 = 75
    GOT_PC_LO12 = 76
    GOT64_PC_LO20 = 77
    GOT64_PC_HI12 = 78
    GOT_HI20 = 79
    GOT_LO12 = 80
    GOT64_LO20 = 81
    GOT64_HI12 = 82
    TLS_LE_HI20 = 83
    TLS_LE_LO12 = 84
    TLS_LE64_LO20 = 85
    TLS_LE64_HI12 = 86
    TLS_IE_PC_HI20 = 87
    TLS_IE_PC_LO12 = 88
    TLS_IE64_PC_LO20 = 89
    TLS_IE64_PC_HI12 = 90
    TLS_IE_HI20 = 91
    TLS_IE_LO12 = 92
    TLS_IE64_LO20 = 93
    TLS_IE64_HI12 = 94
    TLS_LD_PC_HI20 = 95
    TLS_LD_HI20 = 96
    TLS_GD_PC_HI20 = 97
    TLS_GD_HI20 = 98
    R32_PCREL = 99
    RELAX = 100


class RelocMips(IntEnum):
    """MIPS relocation types."""

    NONE = 0
    R16 = 1
    R32 = 2
    REL32 = 3
    R26 = 4
    HI16 = 5
    LO16 = 6
    GPREL16 = 7
    LITERAL = 8
    GOT16 = 9
    PC16 = 10
    CALL16 = 11
    GPREL32 = 12
    SHIFT5 = 16
    SHIFT6 = 17
    R64 = 18
    GOT_DISP = 19
    GOT_PAGE = 20
    GOT_OFST = 21
    GOT_HI16 = 22
    GOT_LO16 = 23
    SUB = 24
    INSERT_A = 25
    INSERT_B = 26
    DELETE = 27
    HIGHER = 28
    HIGHEST = 29
    CALL_HI16 = 30
    CALL_LO16 = 31
    SCN_DISP = 32
    REL16 = 33
    ADD_IMMEDIATE = 34
    PJUMP = 35
    RELGOT = 36
    JALR = 37
    TLS_DTPMOD32 = 38
    TLS_DTPREL32 = 39
    TLS_DTPMOD64 = 40
    TLS_DTPREL64 = 41
    TLS_GD = 42
    TLS_LDM = 43
    TLS_DTPREL_HI16 = 44
    TLS_DTPREL_LO16 = 45
    TLS_GOTTPREL = 46
    TLS_TPREL32 = 47
    TLS_TPREL64 = 48
    TLS_TPREL_HI16 = 49
    TLS_TPREL_LO16 = 50
    GLOB_DAT = 51
    COPY = 126
    JUMP_SLOT = 127


class RelocPpc(IntEnum):
    """32-bit PowerPC relocation types."""

    NONE = 0
    ADDR32 = 1
    ADDR24 = 2
    ADDR16 = 3
    ADDR16_LO = 4
    ADDR16_HI = 5
    ADDR16_HA = 6
    ADDR14 = 7
    ADDR14_BRTAKEN = 8
    ADDR14_BRNTAKEN = 9
    REL24 = 10
    REL14 = 11
    REL14_BRTAKEN = 12
    REL14_BRNTAKEN = 13
    GOT16 = 14
    GOT16_LO = 15
    GOT16_HI = 16
    GOT16_HA = 17
    PLTREL24 = 18
    COPY = 19
    GLOB_DAT = 20
    JMP_SLOT = 21
    RELATIVE = 22
    LOCAL24PC = 23
    UADDR32 = 24
    UADDR16 = 25
    REL32 = 26
    PLT32 = 27
    PLTREL32 = 28
    PLT16_LO = 29
    PLT16_HI = 30
    PLT16_HA = 31
    SDAREL16 = 32
    SECTOFF = 33
    SECTOFF_LO = 34
    SECTOFF_HI = 35
    SECTOFF_HA = 36
    TLS = 67
    DTPMOD32 = 68
    TPREL16 = 69
    TPREL16_LO = 70
    TPREL16_HI = 71
    TPREL16_HA = 72
    TPREL32 = 73
    DTPREL16 = 74
    DTPREL16_LO = 75
    DTPREL16_HI = 76
    DTPREL16_HA = 77
    DTPREL32 = 78
    GOT_TLSGD16 = 79
    GOT_TLSGD16_LO = 80
    GOT_TLSGD16_HI = 81
    GOT_TLSGD16_HA = 82
    GOT_TLSLD16 = 83
    GOT_TLSLD16_LO = 84
    GOT_TLSLD16_HI = 85
    GOT_TLSLD16_HA = 86
    GOT_TPREL16 = 87
    GOT_TPREL16_LO = 88
    GOT_TPREL16_HI = 89
    GOT_TPREL16_HA = 90
    GOT_DTPREL16 = 91
    GOT_DTPREL16_LO = 92
    GOT_DTPREL16_HI = 93
    GOT_DTPREL16_HA = 94
    TLSGD = 95
    TLSLD = 96
    EMB_NADDR32 = 101
    EMB_NADDR16 = 102
    EMB_NADDR16_LO = 103
    EMB_NADDR16_HI = 104
    EMB_NADDR16_HA = 105
    EMB_SDAI16 = 106
    EMB_SDA2I16 = 107
    EMB_SDA2REL = 108
    EMB_SDA21 = 109
    EMB_MRKREF = 110
    EMB_RELSEC16 = 111
    EMB_RELST_LO = 112
    EMB_RELST_HI = 113
    EMB_RELST_HA = 114
    EMB_BIT_FLD = 115
    EMB_RELSDA = 116
    DIAB_SDA21_LO = 180
    DIAB_SDA21_HI = 181
    DIAB_SDA21_HA = 182
    DIAB_RELSDA_LO = 183
    DIAB_RELSDA_HI = 184
    DIAB_RELSDA_HA = 185
    IRELATIVE = 248
    REL16 = 249
    REL16_LO = 250
    REL16_HI = 251
    REL16_HA = 252
    TOC16 = 255


class RelocPpc64(IntEnum):
    """64-bit PowerPC relocation types."""

    NONE = 0
    ADDR32 = 1
    ADDR24 = 2
    ADDR16 = 3
    ADDR16_LO = 4
    ADDR16_HI = 5
    ADDR16_HA = 6
    ADDR14 = 7
    ADDR14_BRTAKEN = 8
    ADDR14_BRNTAKEN = 9
    REL24 = 10
    REL14 = 11
    REL14_BRTAKEN = 12
    REL14_BRNTAKEN = 13
    GOT16 = 14
    GOT16_LO = 15
    GOT16_HI = 16
    GOT16_HA = 17
    COPY = 19
    GLOB_DAT = 20
    JMP_SLOT = 21
    RELATIVE = 22
    UADDR32 = 24
    UADDR16 = 25
    REL32 = 26
    PLT32 = 27
    PLTREL32 = 28
    PLT16_LO = 29
    PLT16_HI = 30
    PLT16_HA = 31
    SECTOFF = 33
    SECTOFF_LO = 34
    SECTOFF_HI = 35
    SECTOFF_HA = 36
    ADDR30 = 37
    ADDR64 = 38
    ADDR16_HIGHER = 39
    ADDR16_HIGHERA = 40
    ADDR16_HIGHEST = 41
    ADDR16_HIGHESTA = 42
    UADDR64 = 43
    REL64 = 44
    PLT64 = 45
    PLTREL64 = 46
    TOC16 = 47
    TOC16_LO = 48
    TOC16_HI = 49
    TOC16_HA = 50
    TOC = 51
    PLTGOT16 = 52
    PLTGOT16_LO = 53
    PLTGOT16_HI = 54
    PLTGOT16_HA = 55
    ADDR16_DS = 56
    ADDR16_LO_DS = 57
    GOT16_DS = 58
    GOT16_LO_DS = 59
    PLT16_LO_DS = 60
    SECTOFF_DS = 61
    SECTOFF_LO_DS = 62
    TOC16_DS = 63
    TOC16_LO_DS = 64
    PLTGOT16_DS = 65
    PLTGOT16_LO_DS = 66
    TLS = 67
    DTPMOD64 = 68
    TPREL16 = 69
    TPREL16_LO = 70
    TPREL16_HI = 71
    TPREL16_HA = 72
    TPREL64 = 73
    DTPREL16 = 74
    DTPREL16_LO = 75
    DTPREL16_HI = 76
    DTPREL16_HA = 77
    DTPREL64 = 78
    GOT_TLSGD16 = 79
    GOT_TLSGD16_LO = 80
    GOT_TLSGD16_HI = 81
    GOT_TLSGD16_HA = 82
    GOT_TLSLD16 = 83
    GOT_TLSLD16_LO = 84
    GOT_TLSLD16_HI = 85
    GOT_TLSLD16_HA = 86
    GOT_TPREL16_DS = 87
    GOT_TPREL16_LO_DS = 88
    GOT_TPREL16_HI = 89
    GOT_TPREL16_HA = 90
    GOT_DTPREL16_DS = 91
    GOT_DTPREL16_LO_DS = 92
    GOT_DTPREL16_HI = 93
    GOT_DTPREL16_HA = 94
    TPREL16_DS = 95
    TPREL16_LO_DS = 96
    TPREL16_HIGHER = 97
    TPREL16_HIGHERA = 98
    TPREL16_HIGHEST = 99
    TPREL16_HIGHESTA = 100
    DTPREL16_DS = 101
    DTPREL16_LO_DS = 102
    DTPREL16_HIGHER = 103
    DTPREL16_HIGHERA = 104
    DTPREL16_HIGHEST = 105
    DTPREL16_HIGHESTA = 106
    TLSGD = 107
    TLSLD = 108
    TOCSAVE = 109
    ADDR16_HIGH = 110
    ADDR16_HIGHA = 111
    TPREL16_HIGH = 112
    TPREL16_HIGHA = 113
    DTPREL16_HIGH = 114
    DTPREL16_HIGHA = 115
    JMP_IREL = 247
    IRELATIVE = 248
    REL16 = 249
    REL16_LO = 250
    REL16_HI = 251
    REL16_HA = 252


class RelocSparc(IntEnum):
    """SPARC relocation types."""

    NONE = 0
    R8 = 1
    R16 = 2
    R32 = 3
    DISP8 = 4
    DISP16 = 5
    DISP32 = 6
    WDISP30 = 7
    WDISP22 = 8
    HI22 = 9
    R22 = 10
    R13 = 11
    LO10 = 12
    GOT10 = 13
    GOT13 = 14
    GOT22 = 15
    PC10 = 16
    PC22 = 17
    WPLT30 = 18
    COPY = 19
    GLOB_DAT = 20
    JMP_SLOT = 21
    RELATIVE = 22
    UA32 = 23
    PLT32 = 24
    HIPLT22 = 25
    LOPLT10 = 26
    PCPLT32 = 27
    PCPLT22 = 28
    PCPLT10 = 29
    R10 = 30
    R11 = 31
    R64 = 32
    OLO10 = 33
    HH22 = 34
    HM10 = 35
    LM22 = 36
    PC_HH22 = 37
    PC_HM10 = 38
    PC_LM22 = 39
    WDISP16 = 40
    WDISP19 = 41
    GLOB_JMP = 42
    R7 = 43
    R5 = 44
    R6 = 45
    DISP64 = 46
    PLT64 = 47
    HIX22 = 48
    LOX10 = 49
    H44 = 50
    M44 = 51
    L44 = 52
    REGISTER = 53
    UA64 = 54
    UA16 = 55
    TLS_GD_HI22 = 56
    TLS_GD_LO10 = 57
    TLS_GD_ADD = 58
    TLS_GD_CALL = 59
    TLS_LDM_HI22 = 60
    TLS_LDM_LO10 = 61
    TLS_LDM_ADD = 62
    TLS_LDM_CALL = 63
    TLS_LDO_HIX22 = 64
    TLS_LDO_LOX10 = 65
    TLS_LDO_ADD = 66
    TLS_IE_HI22 = 67
    TLS_IE_LO10 = 68
    TLS_IE_LD = 69
    TLS_IE_LDX = 70
    TLS_IE_ADD = 71
    TLS_LE_HIX22 = 72
    TLS_LE_LOX10 = 73
    TLS_DTPMOD32 = 74
    TLS_DTPMOD64 = 75
    TLS_DTPOFF32 = 76
    TLS_DTPOFF64 = 77
    TLS_TPOFF32 = 78
    TLS_TPOFF64 = 79
    GOTDATA_HIX22 = 80
    GOTDATA_LOX10 = 81
    GOTDATA_OP_HIX22 = 82
    GOTDATA_OP_LOX10 = 83
    GOTDATA_OP = 84
    H34 = 85
    SIZE32 = 86
    SIZE64 = 87
    GNU_VTINHERIT = 250
    GNU_VTENTRY = 251
    REV32 = 252


_PREFIXES: Dict[Type[IntEnum], str] = {
    RelocX86_64: "R_X86_64_",
    Reloc386: "R_386_",
    RelocArm: "R_ARM_",
    RelocAarch64: "R_AARCH64_",
    RelocRiscv: "R_RISCV_",
    RelocLoongArch: "R_LARCH_",
    RelocMips: "R_MIPS_",
    RelocPpc: "R_PPC_",
    RelocPpc64: "R_PPC64_",
    RelocSparc: "R_SPARC_",
}

_BY_MACHINE: Dict[Machine, Type[IntEnum]] = {
    Machine.X86_64: RelocX86_64,
    Machine.I386: Reloc386,
    Machine.ARM: RelocArm,
    Machine.AARCH64: RelocAarch64,
    Machine.RISCV: RelocRiscv,
    Machine.LOONGARCH: RelocLoongArch,
    Machine.MIPS: RelocMips,
    Machine.PPC: RelocPpc,
    Machine.PPC64: RelocPpc64,
    Machine.SPARC: RelocSparc,
    Machine.SPARC32PLUS: RelocSparc,
    Machine.SPARCV9: RelocSparc,
}


def _symbolic(member: IntEnum) -> str:
    name = member.name
    # Members whose conventional name starts with a digit carry an "R" in front.
    if len(name) > 1 and name[0] == "R" and name[1].isdigit():
        name = name[1:]
    return _PREFIXES[type(member)] + name


def reloc_name(machine: int, type_: int) -> str:
    """Conventional name, such as ``R_RISCV_JUMP_SLOT``, of a relocation type.

    Raises ``ValueError`` for a machine without a relocation table here or for
    a type the machine does not define.
    """
    try:
        table = _BY_MACHINE[Machine(machine)]
    except (ValueError, KeyError):
        raise ValueError(f"no relocation table for machine {machine}") from None
    try:
        member = table(type_)
    except ValueError:
        raise ValueError(
            f"unknown relocation type {type_} for machine {Machine(machine).name}"
        ) from None
    return _symbolic(member)


def ppc64_local_entry_offset(other: int) -> int:
    """Distance from global to local entry point encoded in a symbol's ``st_other``."""
    return (1 << ((other & STO_PPC64_LOCAL_MASK) >> STO_PPC64_LOCAL_BIT)) & 0xFC


def arm_eabi_version(flags: int) -> int:
    """EABI version bits of an ARM ``e_flags`` value."""
    return flags & EF_ARM_EABIMASK