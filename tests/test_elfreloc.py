import pytest
from hypothesis import given, strategies as st

from rvlab.elfconst import Machine
from rvlab.elfreloc import (
    EF_ARM_EABI_VER5,
    EF_ARM_EABIMASK,
    Reloc386,
    RelocAarch64,
    RelocArm,
    RelocLoongArch,
    RelocMips,
    RelocPpc,
    RelocPpc64,
    RelocRiscv,
    RelocSparc,
    RelocX86_64,
    arm_eabi_version,
    ppc64_local_entry_offset,
    reloc_name,
)

TABLES = [
    (Machine.X86_64, RelocX86_64, "R_X86_64_"),
    (Machine.I386, Reloc386, "R_386_"),
    (Machine.ARM, RelocArm, "R_ARM_"),
    (Machine.AARCH64, RelocAarch64, "R_AARCH64_"),
    (Machine.RISCV, RelocRiscv, "R_RISCV_"),
    (Machine.LOONGARCH, RelocLoongArch, "R_LARCH_"),
    (Machine.MIPS, RelocMips, "R_MIPS_"),
    (Machine.PPC, RelocPpc, "R_PPC_"),
    (Machine.PPC64, RelocPpc64, "R_PPC64_"),
    (Machine.SPARC, RelocSparc, "R_SPARC_"),
]


def test_header_values():
    assert RelocRiscv(5) is RelocRiscv.JUMP_SLOT
    assert RelocRiscv(3) is RelocRiscv.RELATIVE
    assert RelocX86_64(41) is RelocX86_64.GOTPCRELX
    assert RelocAarch64(1031) is RelocAarch64.TLSDESC
    assert RelocArm(255) is RelocArm.RBASE


def test_names_with_digits():
    assert reloc_name(Machine.X86_64, 1) == "R_X86_64_64"
    assert reloc_name(Machine.RISCV, RelocRiscv.R64) == "R_RISCV_64"
    assert reloc_name(Machine.I386, Reloc386.R32PLT) == "R_386_32PLT"
    assert reloc_name(Machine.LOONGARCH, 99) == "R_LARCH_32_PCREL"


def test_plain_names():
    assert reloc_name(Machine.RISCV, 5) == "R_RISCV_JUMP_SLOT"
    assert reloc_name(Machine.AARCH64, 1027) == "R_AARCH64_RELATIVE"


@pytest.mark.parametrize("machine,table,prefix", TABLES)
def test_every_member_names_round_trip(machine, table, prefix):
    for member in table:
        name = reloc_name(machine, member.value)
        assert name.startswith(prefix)
        suffix = name[len(prefix):]
        key = suffix if not suffix[0].isdigit() else "R" + suffix
        assert table[key].value == member.value


def test_aliases_share_values():
    assert RelocAarch64.TLS_DTPMOD64 is RelocAarch64.TLS_DTPMOD
    assert RelocArm.THM_TLS_DESCSEQ16 is RelocArm.THM_TLS_DESCSEQ
    assert reloc_name(Machine.AARCH64, RelocAarch64.TLS_TPREL64) == "R_AARCH64_TLS_TPREL"


@pytest.mark.parametrize(
    "name", ["ADDR32", "REL24", "COPY", "GLOB_DAT", "JMP_SLOT", "RELATIVE"]
)
def test_ppc64_shares_low_values_with_ppc(name):
    assert RelocPpc64(RelocPpc[name].value) is RelocPpc64[name]


def test_sparc_variants_use_same_table():
    for machine in (Machine.SPARC32PLUS, Machine.SPARCV9):
        assert reloc_name(machine, RelocSparc.JMP_SLOT) == reloc_name(
            Machine.SPARC, RelocSparc.JMP_SLOT
        )


def test_unknown_machine_raises():
    with pytest.raises(ValueError):
        reloc_name(Machine.VAX, 1)
    with pytest.raises(ValueError):
        reloc_name(12345, 1)


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        reloc_name(Machine.RISCV, 42)
    with pytest.raises(ValueError):
        reloc_name(Machine.X86_64, 39)


def test_ppc64_local_entry_offset_doubles():
    assert ppc64_local_entry_offset(0) == 0
    assert ppc64_local_entry_offset(1 << 5) == 0
    for k in range(2, 7):
        assert ppc64_local_entry_offset((k + 1) << 5) == 2 * ppc64_local_entry_offset(k << 5)


@given(st.integers(min_value=0, max_value=0xFF))
def test_ppc64_local_entry_offset_ignores_low_bits(other):
    assert ppc64_local_entry_offset(other) == ppc64_local_entry_offset(other & 0xE0)


def test_arm_eabi_version_pinned():
    assert arm_eabi_version(EF_ARM_EABI_VER5 | 0x400) == EF_ARM_EABI_VER5


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_arm_eabi_version_masks(flags):
    version = arm_eabi_version(flags)
    assert version & ~EF_ARM_EABIMASK == 0
    assert arm_eabi_version(version) == version
    assert version | (flags & ~EF_ARM_EABIMASK) == flags